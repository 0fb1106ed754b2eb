"""Journal and magazine articles in the library catalogue."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional

from .resource import FOOTER, Resource, contains_ignoring_case

NOT_AVAILABLE = "N/A"
UNKNOWN_MAGAZINE = "Unknown Magazine"


def is_valid_volume(volume: int) -> bool:
    """Return True for a volume between 1 and 1000."""
    return 0 < volume <= 1000


def is_valid_issue(issue: int) -> bool:
    """Return True for an issue between 1 and 100."""
    return 0 < issue <= 100


def is_valid_doi(doi: str) -> bool:
    """Return True for a DOI starting with "10."; empty or "N/A" means none."""
    if not doi or doi == NOT_AVAILABLE:
        return True
    return len(doi) > 3 and doi.startswith("10.")


def is_valid_page_range(start: int, end: int) -> bool:
    """Return True for a positive, ordered range under 1000 pages; -1 means unknown."""
    if start == -1 or end == -1:
        return True
    return start > 0 and end > 0 and start <= end and end - start < 1000


def _string(data: Mapping[str, Any], key: str, default: Optional[str] = None) -> str:
    value = data[key] if default is None else data.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string")
    return value


def _integer(data: Mapping[str, Any], key: str, default: Optional[int] = None) -> int:
    value = data[key] if default is None else data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number")
    return int(value)


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean")
    return value


class Article(Resource):
    """An article from a magazine or journal; invalid details become placeholders."""

    TYPE: ClassVar[str] = "Article"

    def __init__(
        self,
        title: str = "",
        author: str = "",
        resource_id: str = "",
        category: str = "",
        publication_year: int = -1,
        magazine: str = "",
        volume: int = -1,
        issue: int = -1,
        doi: str = "",
        start_page: int = -1,
        end_page: int = -1,
    ) -> None:
        super().__init__(title, author, resource_id, category, publication_year)
        self.magazine = magazine
        self.volume = volume
        self.issue = issue
        self.doi = doi
        self.set_page_range(start_page, end_page)

    @property
    def magazine(self) -> str:
        return self._magazine

    @magazine.setter
    def magazine(self, value: str) -> None:
        self._magazine = value or UNKNOWN_MAGAZINE

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, value: int) -> None:
        self._volume = value if is_valid_volume(value) else -1

    @property
    def issue(self) -> int:
        return self._issue

    @issue.setter
    def issue(self, value: int) -> None:
        self._issue = value if is_valid_issue(value) else -1

    @property
    def doi(self) -> str:
        return self._doi

    @doi.setter
    def doi(self, value: str) -> None:
        self._doi = value if is_valid_doi(value) else NOT_AVAILABLE

    @property
    def start_page(self) -> int:
        return self._start_page

    @property
    def end_page(self) -> int:
        return self._end_page

    def set_page_range(self, start: int = -1, end: int = -1) -> None:
        """Set the pages the article spans; an invalid range becomes unknown (-1, -1)."""
        if is_valid_page_range(start, end):
            self._start_page, self._end_page = start, end
        else:
            self._start_page, self._end_page = -1, -1

    def describe(self) -> str:
        """Return a multi-line description of the article."""
        lines = self._common_lines()
        lines.append(f"Magazine:     {self.magazine}")
        lines.append(f"Volume:       {self.volume}")
        lines.append(f"Issue:        {self.issue}")
        if self.has_page_range():
            lines.append(f"Pages:        {self.start_page}-{self.end_page}")
        if self.has_doi():
            lines.append(f"DOI:          {self.doi}")
        lines.append(FOOTER)
        return "\n".join(lines)

    def has_doi(self) -> bool:
        """Return True if the article carries a DOI."""
        return bool(self.doi) and self.doi != NOT_AVAILABLE

    def has_page_range(self) -> bool:
        """Return True if both ends of the page range are known."""
        return self.start_page > 0 and self.end_page > 0

    def volume_issue_info(self) -> str:
        """Return "Vol. V, Issue I" with whichever parts are known, or "N/A"."""
        parts = []
        if self.volume > 0:
            parts.append(f"Vol. {self.volume}")
        if self.issue > 0:
            parts.append(f"Issue {self.issue}")
        return ", ".join(parts) or NOT_AVAILABLE

    def matches_keyword(self, keyword: str) -> bool:
        """Return True if the keyword occurs in a common field, the magazine or the DOI."""
        if not keyword:
            return False
        if super().matches_keyword(keyword):
            return True
        return contains_ignoring_case(self.magazine, keyword) or contains_ignoring_case(
            self.doi, keyword
        )

    def to_json(self) -> dict[str, Any]:
        """Return the article as a JSON-ready dictionary."""
        data = super().to_json()
        del data["type"]
        data.update(
            {
                "magazine": self.magazine,
                "volume": self.volume,
                "issue": self.issue,
                "doi": self.doi,
                "startPage": self.start_page,
                "endPage": self.end_page,
                "type": self.TYPE,
            }
        )
        return data

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Article":
        """Build an article from a dictionary, raising ValueError if it is unusable."""
        try:
            article = cls(
                _string(data, "title"),
                _string(data, "author"),
                _string(data, "resourceId"),
                _string(data, "category"),
                _integer(data, "publicationYear"),
                _string(data, "magazine"),
                _integer(data, "volume"),
                _integer(data, "issue"),
                _string(data, "doi", NOT_AVAILABLE),
                _integer(data, "startPage", -1),
                _integer(data, "endPage", -1),
            )
            article.is_available = _boolean(data, "isAvailable")
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Error parsing Article JSON: {exc}") from exc
        return article