"""Catalogue resources shared by books, articles and theses."""

from __future__ import annotations

import string
import sys
from typing import Any, ClassVar

_ID_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_LETTERS = frozenset(string.ascii_letters)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_AUTHOR = "Unknown Author"
INVALID_ID = "INVALID_ID"
DEFAULT_CATEGORY = "General"
FOOTER = "----------------------"


def is_valid_resource_id(resource_id: str) -> bool:
    """Return True for at least 3 ASCII letters, digits, '-' or '_'."""
    return len(resource_id) >= 3 and all(c in _ID_CHARS for c in resource_id)


def is_valid_year(year: int) -> bool:
    """Return True for a publication year between 1000 and 2025."""
    return 1000 <= year <= 2025


def _has_letter(text: str) -> bool:
    return any(c in _LETTERS for c in text)


def is_valid_title(title: str) -> bool:
    """Return True for at least 2 characters including an ASCII letter."""
    return len(title) >= 2 and _has_letter(title)


def is_valid_author(author: str) -> bool:
    """Return True for at least 2 characters including an ASCII letter."""
    return len(author) >= 2 and _has_letter(author)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def contains_ignoring_case(text: str, fragment: str) -> bool:
    """Return True if fragment occurs in text, ignoring ASCII case; empty never matches."""
    if not text or not fragment:
        return False
    return _ascii_lower(fragment) in _ascii_lower(text)


class Resource:
    """An item of the catalogue.

    Invalid values are replaced by placeholders: an unknown title or author,
    an invalid ID marker, the general category or a year of -1.
    """

    TYPE: ClassVar[str] = "Resource"

    def __init__(
        self,
        title: str = "",
        author: str = "",
        resource_id: str = "",
        category: str = "",
        publication_year: int = -1,
    ) -> None:
        self.title = title
        self.author = author
        self.resource_id = resource_id
        self.category = category
        self.publication_year = publication_year
        self.is_available = True

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value if is_valid_title(value) else UNKNOWN_TITLE

    @property
    def author(self) -> str:
        return self._author

    @author.setter
    def author(self, value: str) -> None:
        self._author = value if is_valid_author(value) else UNKNOWN_AUTHOR

    @property
    def resource_id(self) -> str:
        return self._resource_id

    @resource_id.setter
    def resource_id(self, value: str) -> None:
        self._resource_id = value if is_valid_resource_id(value) else INVALID_ID

    @property
    def category(self) -> str:
        return self._category

    @category.setter
    def category(self, value: str) -> None:
        self._category = value or DEFAULT_CATEGORY

    @property
    def publication_year(self) -> int:
        return self._publication_year

    @publication_year.setter
    def publication_year(self, value: int) -> None:
        self._publication_year = value if is_valid_year(value) else -1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resource_id={self._resource_id!r}, "
            f"title={self._title!r}, author={self._author!r})"
        )

    def _common_lines(self) -> list[str]:
        return [
            f"----- {self.TYPE} -----",
            f"ID:           {self.resource_id}",
            f"Title:        {self.title}",
            f"Author:       {self.author}",
            f"Year:         {self.publication_year}",
            f"Category:     {self.category}",
            f"Available:    {'Yes' if self.is_available else 'No'}",
        ]

    def describe(self) -> str:
        """Return a multi-line description of the resource."""
        return "\n".join([*self._common_lines(), FOOTER])

    def display_info(self) -> str:
        """Write the description to standard output and return it."""
        text = self.describe()
        sys.stdout.write(text + "\n")
        return text

    def matches_keyword(self, keyword: str) -> bool:
        """Return True if the keyword occurs in the title, author or category."""
        if not keyword:
            return False
        return any(
            contains_ignoring_case(field, keyword)
            for field in (self.title, self.author, self.category)
        )

    def matches_category(self, category: str) -> bool:
        """Return True if the category occurs in this one; an empty one matches all."""
        if not category:
            return True
        return contains_ignoring_case(self.category, category)

    def matches_author(self, author: str) -> bool:
        """Return True if the author occurs in this one; an empty one matches all."""
        if not author:
            return True
        return contains_ignoring_case(self.author, author)

    def to_json(self) -> dict[str, Any]:
        """Return the fields shared by all resources as a JSON-ready dictionary."""
        return {
            "title": self.title,
            "author": self.author,
            "resourceId": self.resource_id,
            "category": self.category,
            "publicationYear": self.publication_year,
            "isAvailable": self.is_available,
            "type": self.TYPE,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.resource_id == other.resource_id

    def __hash__(self) -> int:
        return hash(self.resource_id)