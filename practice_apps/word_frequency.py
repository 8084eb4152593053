"""Character frequency count of a line read from standard input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Mapping

_BLUE = "\033[34m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_IGNORED = "!"


def character_frequency(text: str) -> dict[str, int]:
    """Count each character of ``text``, ignoring exclamation marks."""
    return dict(Counter(char for char in text if char != _IGNORED))


def format_table(frequencies: Mapping[str, int]) -> str:
    """Render a two-column table of characters and their counts."""
    lines = [
        f"{_GREEN}{'Character':<10s}{'Frequency':<10s}",
        "----------------------",
    ]
    lines.extend(f"{_BLUE}{char:<10s}{count:<10d}" for char, count in frequencies.items())
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read a line and print the frequency of each character in it."""
    print(f"{_YELLOW}Enter a string: {_RESET}", end="", flush=True)
    text = sys.stdin.readline().strip()
    print(format_table(character_frequency(text)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())