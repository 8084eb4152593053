"""Palindrome check on a line read from standard input."""

from __future__ import annotations

import sys

_GREEN = "\033[32m"


def is_palindrome(text: str) -> bool:
    """Return True if the UTF-8 bytes of ``text`` read the same both ways."""
    data = text.encode("utf-8")
    return data == data[::-1]


def main(argv: list[str] | None = None) -> int:
    """Read a line and report whether it is a palindrome."""
    print("Enter the string : ", end="", flush=True)
    text = sys.stdin.readline().strip()
    if is_palindrome(text):
        print(_GREEN + "The string is a palindrome")
    else:
        print(_GREEN + "The string is not a palindrome")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())