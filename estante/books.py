"""Book records and the catalog that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Book:
    """A title in stock: its id, title, author and how many copies are on hand."""

    id: int
    title: str
    author: str
    quantity: int


class CatalogError(Exception):
    """Base class for catalog errors."""


class EmptyCatalogError(CatalogError):
    """Raised when an operation needs books and the catalog has none."""

    def __init__(self) -> None:
        super().__init__("catalog is empty")


class BookNotFoundError(CatalogError):
    """Raised when no book matches the requested id or title."""

    def __init__(self, book_id: int | None = None, title: str | None = None) -> None:
        self.book_id = book_id
        self.title = title
        if title is not None:
            message = f"no book titled {title!r}"
        else:
            message = f"no book with id {book_id}"
        super().__init__(message)


class OutOfStockError(CatalogError):
    """Raised when a book with no copies left is lent."""

    def __init__(self, book: Book) -> None:
        self.book = book
        super().__init__(f"book {book.title!r} has no copies left")


class Catalog:
    """Books kept in the order they were added.

    A new book gets the highest id in the catalog plus one, or 0 when
    the catalog is empty.
    """

    def __init__(self) -> None:
        self._books: list[Book] = []

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def add(self, title: str, author: str, quantity: int) -> Book:
        """Add a book and return it with its new id."""
        next_id = max((book.id for book in self._books), default=-1) + 1
        book = Book(next_id, title, author, quantity)
        self._books.append(book)
        return book

    def _require_books(self) -> None:
        if not self._books:
            raise EmptyCatalogError()

    def _lookup(self, book_id: int) -> Book:
        for book in self._books:
            if book.id == book_id:
                return book
        raise BookNotFoundError(book_id=book_id)

    def get(self, book_id: int) -> Book:
        """Return the book with the given id."""
        self._require_books()
        return self._lookup(book_id)

    def find_by_title(self, title: str) -> Book:
        """Return the first book whose title matches exactly."""
        self._require_books()
        for book in self._books:
            if book.title == title:
                return book
        raise BookNotFoundError(title=title)

    def update(self, book_id: int, title: str, author: str, quantity: int) -> Book:
        """Replace the title, author and quantity of a book and return it."""
        book = self.get(book_id)
        book.title = title
        book.author = author
        book.quantity = quantity
        return book

    def remove(self, book_id: int) -> Book:
        """Take a book out of the catalog and return it."""
        book = self.get(book_id)
        self._books.remove(book)
        return book

    def lend(self, book_id: int) -> Book:
        """Lend one copy of a book and return it.

        An empty catalog simply has no such book, so this raises
        BookNotFoundError rather than EmptyCatalogError.
        """
        book = self._lookup(book_id)
        if book.quantity <= 0:
            raise OutOfStockError(book)
        book.quantity -= 1
        return book

    def give_back(self, book_id: int) -> Book:
        """Return one copy of a book to stock and return the book."""
        book = self._lookup(book_id)
        book.quantity += 1
        return book