"""Books in the library catalogue."""

from __future__ import annotations

import string
from typing import Any, ClassVar, Mapping, Optional

from .resource import FOOTER, Resource, contains_ignoring_case

NOT_AVAILABLE = "N/A"
UNKNOWN_PUBLISHER = "Unknown Publisher"
_DIGITS = frozenset(string.digits)


def is_valid_pages(pages: int) -> bool:
    """Return True for a page count between 1 and 10000."""
    return 0 < pages <= 10000


def is_valid_isbn(isbn: str) -> bool:
    """Return True for an ISBN-10 or ISBN-13, ignoring dashes and spaces.

    An empty ISBN or "N/A" counts as valid: it means the book has none.
    """
    if not isbn or isbn == NOT_AVAILABLE:
        return True
    clean = isbn.replace("-", "").replace(" ", "")
    if len(clean) not in (10, 13):
        return False
    body, last = clean[:-1], clean[-1]
    if any(c not in _DIGITS for c in body):
        return False
    return last in _DIGITS or (len(clean) == 10 and last == "X")


def _string(data: Mapping[str, Any], key: str, default: Optional[str] = None) -> str:
    value = data[key] if default is None else data.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number")
    return int(value)


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean")
    return value


class Book(Resource):
    """A printed book; invalid details are replaced by placeholders."""

    TYPE: ClassVar[str] = "Book"

    def __init__(
        self,
        title: str = "",
        author: str = "",
        resource_id: str = "",
        category: str = "",
        publication_year: int = -1,
        publisher: str = "",
        number_of_pages: int = -1,
        isbn: str = "",
        edition: str = "",
    ) -> None:
        super().__init__(title, author, resource_id, category, publication_year)
        self.publisher = publisher
        self.number_of_pages = number_of_pages
        self.isbn = isbn
        self.edition = edition

    @property
    def number_of_pages(self) -> int:
        return self._number_of_pages

    @number_of_pages.setter
    def number_of_pages(self, value: int) -> None:
        self._number_of_pages = value if is_valid_pages(value) else -1

    @property
    def publisher(self) -> str:
        return self._publisher

    @publisher.setter
    def publisher(self, value: str) -> None:
        self._publisher = value or UNKNOWN_PUBLISHER

    @property
    def isbn(self) -> str:
        return self._isbn

    @isbn.setter
    def isbn(self, value: str) -> None:
        self._isbn = value if is_valid_isbn(value) else NOT_AVAILABLE

    @property
    def edition(self) -> str:
        return self._edition

    @edition.setter
    def edition(self, value: str) -> None:
        self._edition = value or NOT_AVAILABLE

    def describe(self) -> str:
        """Return a multi-line description of the book."""
        lines = self._common_lines()
        lines.append(f"Publisher:    {self.publisher}")
        lines.append(f"Pages:        {self.number_of_pages}")
        if self.has_isbn():
            lines.append(f"ISBN:         {self.isbn}")
        if self.edition and self.edition != NOT_AVAILABLE:
            lines.append(f"Edition:      {self.edition}")
        lines.append(FOOTER)
        return "\n".join(lines)

    def has_isbn(self) -> bool:
        """Return True if the book carries an ISBN."""
        return bool(self.isbn) and self.isbn != NOT_AVAILABLE

    def formatted_info(self) -> str:
        """Return "title by author", followed by the ISBN when there is one."""
        info = f"{self.title} by {self.author}"
        if self.has_isbn():
            info += f" (ISBN: {self.isbn})"
        return info

    def matches_keyword(self, keyword: str) -> bool:
        """Return True if the keyword occurs in a common field, the publisher or the ISBN."""
        if not keyword:
            return False
        if super().matches_keyword(keyword):
            return True
        return contains_ignoring_case(self.publisher, keyword) or contains_ignoring_case(
            self.isbn, keyword
        )

    def to_json(self) -> dict[str, Any]:
        """Return the book as a JSON-ready dictionary."""
        data = super().to_json()
        del data["type"]
        data.update(
            {
                "numberOfPages": self.number_of_pages,
                "publisher": self.publisher,
                "isbn": self.isbn,
                "edition": self.edition,
                "type": self.TYPE,
            }
        )
        return data

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Book":
        """Build a book from a dictionary, raising ValueError if it is unusable."""
        try:
            book = cls(
                _string(data, "title"),
                _string(data, "author"),
                _string(data, "resourceId"),
                _string(data, "category"),
                _integer(data, "publicationYear"),
                _string(data, "publisher"),
                _integer(data, "numberOfPages"),
                _string(data, "isbn", NOT_AVAILABLE),
                _string(data, "edition", NOT_AVAILABLE),
            )
            book.is_available = _boolean(data, "isAvailable")
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Error parsing Book JSON: {exc}") from exc
        return book