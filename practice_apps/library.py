"""In-memory library of books and members with borrowing and returning."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class BookStatus(str, enum.Enum):
    """Whether a book is on the shelf or lent out."""

    AVAILABLE = "available"
    BORROWED = "borrowed"


@dataclass
class Book:
    """A book held by the library."""

    id: int
    title: str
    author: str
    status: BookStatus = BookStatus.AVAILABLE


@dataclass
class Member:
    """A library member and the books they currently hold."""

    id: int
    name: str
    borrowed_books: list[Book] = field(default_factory=list)


class LibraryError(Exception):
    """Raised when a library operation cannot be carried out."""


class Library:
    """Keeps the books, the members and the member currently signed in."""

    def __init__(self) -> None:
        self._books: list[Book] = []
        self._members: list[Member] = []
        self.current_member: Member | None = None

    @property
    def books(self) -> tuple[Book, ...]:
        """All books, in storage order."""
        return tuple(self._books)

    @property
    def members(self) -> tuple[Member, ...]:
        """All registered members."""
        return tuple(self._members)

    def add_member(self, member: Member) -> None:
        """Register a member and make them the current member."""
        self._members.append(member)
        self.current_member = member

    def add_book(self, title: str, author: str) -> Book:
        """Add an available book whose id is the current number of books."""
        if not title or not author:
            raise LibraryError("title and author are required")
        book = Book(id=len(self._books), title=title, author=author)
        self._books.append(book)
        return book

    def remove_book(self, book_id: int) -> None:
        """Remove a book by id; the last book takes its place in storage order."""
        for index, book in enumerate(self._books):
            if book.id == book_id:
                self._books[index] = self._books[-1]
                self._books.pop()
                return
        raise LibraryError("book not found")

    def _member(self, member_id: int) -> Member:
        for member in self._members:
            if member.id == member_id:
                return member
        raise LibraryError("member not found")

    def borrow_book(self, book_id: int, member_id: int) -> None:
        """Lend a book to a member, who becomes the current member."""
        member = self._member(member_id)
        for book in self._books:
            if book.id == book_id:
                if book.status is BookStatus.BORROWED:
                    raise LibraryError("book is already borrowed")
                book.status = BookStatus.BORROWED
                member.borrowed_books.append(book)
                self.current_member = member
                return
        raise LibraryError("book not found")

    def return_book(self, book_id: int, member_id: int) -> None:
        """Take a book back from a member, who becomes the current member."""
        member = self._member(member_id)
        for index, book in enumerate(member.borrowed_books):
            if book.id == book_id:
                book.status = BookStatus.AVAILABLE
                del member.borrowed_books[index]
                self.current_member = member
                return
        raise LibraryError("book not found in borrowed list")

    def available_books(self) -> list[Book]:
        """Books currently on the shelf."""
        return [book for book in self._books if book.status is BookStatus.AVAILABLE]

    def borrowed_books(self, member_id: int) -> list[Book]:
        """Books currently lent out, whichever member holds them."""
        return [book for book in self._books if book.status is BookStatus.BORROWED]