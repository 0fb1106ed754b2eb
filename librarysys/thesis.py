"""Theses and dissertations in the library catalogue."""

from __future__ import annotations

import enum
from typing import Any, ClassVar, Mapping

from .resource import Resource, contains_ignoring_case

ABSTRACT_PREVIEW_LENGTH = 100


class ThesisType(enum.IntEnum):
    """The kind of degree work a thesis represents."""

    BACHELOR = 0
    MASTER = 1
    PHD = 2
    RESEARCH = 3


_TYPE_NAMES = {
    ThesisType.BACHELOR: "Bachelor's Thesis",
    ThesisType.MASTER: "Master's Thesis",
    ThesisType.PHD: "PhD Dissertation",
    ThesisType.RESEARCH: "Research Thesis",
}


def _is_valid_name(value: str) -> bool:
    return 2 <= len(value) <= 100


def is_valid_university(university: str) -> bool:
    """Return True for a university name of 2 to 100 characters."""
    return _is_valid_name(university)


def is_valid_department(department: str) -> bool:
    """Return True for a department name of 2 to 100 characters."""
    return _is_valid_name(department)


def is_valid_supervisor(supervisor: str) -> bool:
    """Return True for a supervisor name of 2 to 100 characters."""
    return _is_valid_name(supervisor)


def is_valid_page_count(pages: int) -> bool:
    """Return True for a page count between 1 and 1000."""
    return 0 < pages <= 1000


def _value(data: Mapping[str, Any], key: str, default: Any, kind: type) -> Any:
    value = data.get(key, default)
    if kind is bool:
        ok = isinstance(value, bool)
    elif kind is int:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise ValueError(f"{key!r} must be of type {kind.__name__}")
    return int(value) if kind is int else value


class Thesis(Resource):
    """A thesis written for a degree.

    The constructor keeps the thesis details as given; assigning an invalid
    university, department, supervisor or page count later raises ValueError.
    """

    TYPE: ClassVar[str] = "Thesis"

    def __init__(
        self,
        title: str = "",
        author: str = "",
        resource_id: str = "",
        category: str = "",
        publication_year: int = -1,
        university: str = "",
        department: str = "",
        supervisor: str = "",
        thesis_type: ThesisType = ThesisType.BACHELOR,
        degree: str = "",
        page_count: int = -1,
        abstract_text: str = "",
    ) -> None:
        super().__init__(title, author, resource_id, category, publication_year)
        self._university = university
        self._department = department
        self._supervisor = supervisor
        self.thesis_type = ThesisType(thesis_type)
        self.degree = degree
        self._page_count = page_count
        self.abstract_text = abstract_text

    @property
    def university(self) -> str:
        return self._university

    @university.setter
    def university(self, value: str) -> None:
        if not is_valid_university(value):
            raise ValueError("Invalid university name")
        self._university = value

    @property
    def department(self) -> str:
        return self._department

    @department.setter
    def department(self, value: str) -> None:
        if not is_valid_department(value):
            raise ValueError("Invalid department name")
        self._department = value

    @property
    def supervisor(self) -> str:
        return self._supervisor

    @supervisor.setter
    def supervisor(self, value: str) -> None:
        if not is_valid_supervisor(value):
            raise ValueError("Invalid supervisor name")
        self._supervisor = value

    @property
    def page_count(self) -> int:
        return self._page_count

    @page_count.setter
    def page_count(self, value: int) -> None:
        if not is_valid_page_count(value):
            raise ValueError("Invalid page count")
        self._page_count = value

    def thesis_type_string(self) -> str:
        """Return the readable name of the thesis type."""
        return _TYPE_NAMES.get(self.thesis_type, "Unknown")

    def formatted_info(self) -> str:
        """Return "title by author (type, university)"."""
        return (
            f"{self.title} by {self.author} "
            f"({self.thesis_type_string()}, {self.university})"
        )

    def has_abstract(self) -> bool:
        """Return True if the thesis has an abstract."""
        return bool(self.abstract_text)

    def describe(self) -> str:
        """Return a multi-line description of the thesis."""
        lines = [
            "=== THESIS ===",
            f"Title: {self.title}",
            f"Author: {self.author}",
            f"Resource ID: {self.resource_id}",
            f"University: {self.university}",
            f"Department: {self.department}",
            f"Supervisor: {self.supervisor}",
            f"Type: {self.thesis_type_string()}",
            f"Degree: {self.degree}",
            f"Publication Year: {self.publication_year}",
            f"Pages: {self.page_count}",
            f"Available: {'Yes' if self.is_available else 'No'}",
        ]
        if self.has_abstract():
            lines.append(f"Abstract: {self.abstract_text[:ABSTRACT_PREVIEW_LENGTH]}...")
        lines.append("==============")
        return "\n".join(lines)

    def matches_keyword(self, keyword: str) -> bool:
        """Return True if the keyword occurs in a common field or a thesis detail."""
        if super().matches_keyword(keyword):
            return True
        return any(
            contains_ignoring_case(field, keyword)
            for field in (
                self.university,
                self.department,
                self.supervisor,
                self.degree,
                self.abstract_text,
            )
        )

    def to_json(self) -> dict[str, Any]:
        """Return the thesis as a JSON-ready dictionary."""
        data = super().to_json()
        data.update(
            {
                "university": self.university,
                "department": self.department,
                "supervisor": self.supervisor,
                "thesisType": int(self.thesis_type),
                "degree": self.degree,
                "pageCount": self.page_count,
                "abstractText": self.abstract_text,
                "resourceType": self.TYPE,
            }
        )
        return data

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Thesis":
        """Build a thesis from a dictionary, raising ValueError if it is unusable."""
        thesis = cls()
        thesis.title = _value(data, "title", "", str)
        thesis.author = _value(data, "author", "", str)
        thesis.resource_id = _value(data, "resourceId", "", str)
        thesis.category = _value(data, "category", "", str)
        thesis.publication_year = _value(data, "publicationYear", 0, int)
        thesis.is_available = _value(data, "isAvailable", True, bool)

        thesis.university = _value(data, "university", "", str)
        thesis.department = _value(data, "department", "", str)
        thesis.supervisor = _value(data, "supervisor", "", str)
        type_number = _value(data, "thesisType", 0, int)
        try:
            thesis.thesis_type = ThesisType(type_number)
        except ValueError as exc:
            raise ValueError(f"Unknown thesis type {type_number}") from exc
        thesis.degree = _value(data, "degree", "", str)
        thesis.page_count = _value(data, "pageCount", 0, int)
        thesis.abstract_text = _value(data, "abstractText", "", str)
        return thesis