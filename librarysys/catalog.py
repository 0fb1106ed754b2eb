"""Building catalogue resources of any kind from their JSON form."""

from __future__ import annotations

from typing import Any, Mapping

from .article import Article
from .book import Book
from .resource import Resource

_RESOURCE_TYPES = {
    Book.TYPE: Book,
    Article.TYPE: Article,
}


def resource_from_json(data: Mapping[str, Any]) -> Resource:
    """Build a book or an article from a dictionary, chosen by its "type" field.

    Raises ValueError for a missing or unknown type or unusable fields.
    """
    try:
        resource_type = data["type"]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Error parsing JSON: missing field {exc}") from exc
    if not isinstance(resource_type, str):
        raise ValueError("Error parsing JSON: 'type' must be a string")
    try:
        factory = _RESOURCE_TYPES[resource_type]
    except KeyError:
        raise ValueError(f"Error: Unknown resource type '{resource_type}'") from None
    return factory.from_json(data)