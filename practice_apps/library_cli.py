"""Interactive text menu for the in-memory library."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from .library import Book, Library, LibraryError, Member

_BLUE = "\033[34m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MENU = (
    "1. Add Book\n2. Remove Book\n3. Available Books\n4. Borrowed Books\n"
    "5. Borrow Book\n6. Return Book\n7. Exit"
)


def _tabulate(rows: Iterable[Sequence[str]], padding: int = 1) -> str:
    """Align cells into columns; the last cell of each row is left as is."""
    rows = list(rows)
    widths: dict[int, int] = {}
    for row in rows:
        for column, cell in enumerate(row[:-1]):
            widths[column] = max(widths.get(column, 0), len(cell) + padding)
    return "".join(
        "".join(cell.ljust(widths[column]) for column, cell in enumerate(row[:-1]))
        + row[-1]
        + "\n"
        for row in rows
    )


class LibraryCLI:
    """Menu-driven session over a :class:`Library`, reading and writing text streams."""

    def __init__(
        self,
        library: Library,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._library = library
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def run(self) -> None:
        """Show the landing menu and run the session until the user leaves."""
        try:
            self._landing()
        except EOFError:
            self._say()

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _say(self, text: str = "") -> None:
        self._write(text + "\n")

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _read_token(self) -> str:
        while True:
            fields = self._read_line().split()
            if fields:
                return fields[0]

    def _current(self) -> Member:
        member = self._library.current_member
        if member is None:
            raise LibraryError("member not found")
        return member

    # -- menus -------------------------------------------------------------

    def _landing(self) -> None:
        while True:
            self._say("=== Library Management System ===")
            self._say(_BLUE + "\t1. Sign In")
            self._say("\t2. Exit")
            self._write(_YELLOW + "Enter your choice: " + _RESET)
            choice = self._read_line()
            if choice:
                break
            self._say("Invalid input. Please try again.")

        if choice == "1":
            self._login()
            self._session()
        elif choice == "2":
            self._say("Manager Login")
        else:
            self._say("existed")

    def _login(self) -> None:
        self._say(_GREEN + "\n=== User Login ===")
        self._write(_YELLOW + "Enter name : " + _RESET)
        name = self._read_token()
        self._library.add_member(Member(id=len(self._library.members), name=name))

    def _session(self) -> None:
        actions: dict[str, Callable[[], bool]] = {
            "1": self._add_book,
            "2": self._remove_book,
            "3": self._available_books,
            "4": self._borrowed_books,
            "5": self._borrow_book,
            "6": self._return_book,
        }
        while True:
            self._write(
                f"{_GREEN}\n---- Welcome back, {self._current().name} ----"
                f"{_BLUE}\n{_MENU}{_YELLOW}\n\nEnter your choice: "
            )
            choice = self._read_line()
            if choice == "7":
                self._say("Exiting...")
                return
            action = actions.get(choice)
            if action is None:
                self._say(_RED + "Invalid choice. Please try again.")
                continue
            if not action() or not self._should_continue():
                return

    def _should_continue(self) -> bool:
        while True:
            self._write(_RESET + "Do you want to continue? (y/n): ")
            answer = self._read_token()
            if answer == "y":
                return True
            if answer == "n":
                self._say("Exiting...")
                return False
            self._say(_RED + "Invalid choice. Please try again." + _RESET)

    # -- actions -------------------------------------------------------------

    def _read_book_id(self, heading: str, verb: str) -> int | None:
        self._say(f"{_GREEN}\n=== {heading} ===")
        self._write(f"{_YELLOW}Enter book ID to {verb}: {_RESET}")
        text = self._read_line()
        if not _INTEGER.fullmatch(text):
            self._say(_RED + "Invalid book ID." + _RESET)
            return None
        return int(text)

    def _add_book(self) -> bool:
        self._say(_GREEN + "\n=== Add Book ===")
        self._write(_YELLOW + "Enter title : " + _RESET)
        title = self._read_line()
        self._write(_YELLOW + "Enter author : " + _RESET)
        author = self._read_line()
        if not title or not author:
            self._say(_RED + "Title and author are required." + _RESET)
            return True
        try:
            self._library.add_book(title, author)
        except LibraryError as exc:
            self._say(f"Error: {exc}")
            return False
        self._say(_GREEN + "Book added successfully!" + _RESET)
        return True

    def _remove_book(self) -> bool:
        book_id = self._read_book_id("Remove Book", "remove")
        if book_id is None:
            return True
        try:
            self._library.remove_book(book_id)
        except LibraryError as exc:
            self._say(_RED + str(exc) + _RESET)
            return True
        self._say(_GREEN + "Book removed successfully!" + _RESET)
        return True

    def _return_book(self) -> bool:
        book_id = self._read_book_id("Return Book", "return")
        if book_id is None:
            return True
        try:
            self._library.return_book(book_id, self._current().id)
        except LibraryError as exc:
            self._say(_RED + str(exc) + _RESET)
            return True
        self._say(_GREEN + "Book returned successfully!")
        return True

    def _borrow_book(self) -> bool:
        book_id = self._read_book_id("Borrow Book", "borrow")
        if book_id is None:
            return True
        try:
            self._library.borrow_book(book_id, self._current().id)
        except LibraryError as exc:
            self._say(_RED + "Error:" + str(exc) + _RESET)
            return True
        self._say(_GREEN + "Book borrowed successfully!" + _RESET)
        return True

    def _show_books(self, heading: str, books: Iterable[Book]) -> None:
        self._say(f"{_GREEN}\n=== {heading} ==={_RESET}")
        rows = [
            ("ID", "Title", "Author"),
            (_BLUE + "----", "-----------------------------", "----------------------"),
        ]
        rows.extend((str(book.id), book.title, book.author) for book in books)
        self._write(_tabulate(rows))

    def _available_books(self) -> bool:
        self._show_books("Available Books", self._library.available_books())
        return True

    def _borrowed_books(self) -> bool:
        self._show_books("Borrowed Books", self._library.borrowed_books(self._current().id))
        return True


def main(argv: list[str] | None = None) -> int:
    """Run the library menu on standard input and output."""
    LibraryCLI(Library()).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())