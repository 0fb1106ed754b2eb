"""Saving and loading the whole library to and from a JSON file."""

from __future__ import annotations

import json
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Union

from .catalog import resource_from_json
from .event import LibraryEvent
from .loan import SECONDS_PER_DAY, Loan
from .notification import Notification
from .reservation import Reservation
from .resource import Resource
from .user import User

PathLike = Union[str, "os.PathLike[str]"]

MAX_PATH_LENGTH = 260
_INVALID_PATH_CHARS = '<>:"|?*'
_JSON_EXTENSIONS = (".json", ".JSON")


class PersistenceError(Exception):
    """Raised when library data cannot be saved or loaded."""


@dataclass
class LibraryData:
    """Everything the library keeps."""

    users: list[User] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)
    loans: list[Loan] = field(default_factory=list)
    reservations: list[Reservation] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    events: list[LibraryEvent] = field(default_factory=list)


def validate_filepath(filepath: str) -> None:
    """Raise ValueError for an empty or too long path or one with forbidden characters."""
    if not filepath:
        raise ValueError("File path cannot be empty")
    if len(filepath) > MAX_PATH_LENGTH:
        raise ValueError("File path too long")
    if any(c in filepath for c in _INVALID_PATH_CHARS):
        raise ValueError("File path contains invalid characters")


def validate_file_extension(filepath: str) -> None:
    """Raise ValueError unless the path ends in a .json extension."""
    dot = filepath.rfind(".")
    if dot == -1:
        raise ValueError("File must have an extension")
    if filepath[dot:] not in _JSON_EXTENSIONS:
        raise ValueError("File must have .json extension")


def _create_backup(path: Path) -> None:
    if path.exists():
        try:
            shutil.copyfile(path, f"{path}.backup")
        except OSError:
            # A failed backup must not stop the save itself.
            pass


def _serialize(items: Iterable[Any], label: str) -> list[dict[str, Any]]:
    try:
        entries = []
        for item in items:
            if item is None:
                raise ValueError(f"Null {label[:-1]} found")
            entries.append(item.to_json())
        return entries
    except (TypeError, ValueError, AttributeError) as exc:
        raise PersistenceError(f"Failed to serialize {label}: {exc}") from exc


def _build_document(data: LibraryData) -> dict[str, Any]:
    document: dict[str, Any] = {
        "config": {
            "maxRenewals": Loan.max_renewals,
            "loanPeriodDays": Loan.loan_period // SECONDS_PER_DAY,
        }
    }
    sections = (
        ("users", data.users),
        ("resources", data.resources),
        ("loans", data.loans),
        ("reservations", data.reservations),
        ("notifications", data.notifications),
        ("events", data.events),
    )
    for key, items in sections:
        entries = _serialize(items, key)
        if entries:
            document[key] = entries
    return document


def save_to_file(filepath: PathLike, data: LibraryData) -> None:
    """Write all library data and the loan settings to a JSON file.

    An existing file is first copied to a ".backup" file next to it.
    Raises PersistenceError if anything goes wrong.
    """
    path_text = os.fspath(filepath)
    try:
        validate_filepath(path_text)
        validate_file_extension(path_text)
    except ValueError as exc:
        raise PersistenceError(str(exc)) from exc

    path = Path(path_text)
    _create_backup(path)
    document = _build_document(data)
    text = json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"Cannot write file {path_text}: {exc}") from exc


def _config_int(config: dict[str, Any], key: str, low: int, high: int) -> int:
    value = config[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PersistenceError(f"Invalid {key} value")
    number = int(value)
    if not low <= number <= high:
        raise PersistenceError(f"Invalid {key} value")
    return number


def _apply_config(config: Any) -> None:
    if not isinstance(config, dict):
        return
    if "maxRenewals" in config:
        Loan.set_max_renewals(_config_int(config, "maxRenewals", 0, 10))
    if "loanPeriodDays" in config:
        Loan.set_loan_period(_config_int(config, "loanPeriodDays", 1, 365))


def _load_section(
    document: dict[str, Any], key: str, factory: Callable[[Any], Any]
) -> list[Any]:
    entries = document.get(key)
    if entries is None:
        return []
    try:
        if isinstance(entries, dict):
            entries = list(entries.values())
        elif not isinstance(entries, list):
            raise ValueError(f"{key!r} must be a list")
        return [factory(entry) for entry in entries]
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise PersistenceError(f"Failed to load {key}: {exc}") from exc


def load_from_file(filepath: PathLike) -> LibraryData:
    """Read library data from a JSON file and apply its loan settings.

    Raises PersistenceError if the file is missing, unreadable or malformed.
    """
    path_text = os.fspath(filepath)
    try:
        validate_filepath(path_text)
        validate_file_extension(path_text)
    except ValueError as exc:
        raise PersistenceError(str(exc)) from exc

    path = Path(path_text)
    if not path.exists():
        raise PersistenceError(f"File does not exist: {path_text}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PersistenceError(f"Invalid JSON file: {path_text}") from exc
    except OSError as exc:
        raise PersistenceError(f"Cannot open file for reading: {path_text}") from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PersistenceError(f"Invalid JSON file: {path_text}") from exc

    if not isinstance(document, dict):
        return LibraryData()

    _apply_config(document.get("config"))
    return LibraryData(
        users=_load_section(document, "users", User.from_json),
        resources=_load_section(document, "resources", resource_from_json),
        loans=_load_section(document, "loans", Loan.from_json),
        reservations=_load_section(document, "reservations", Reservation.from_json),
        notifications=_load_section(document, "notifications", Notification.from_json),
        events=_load_section(document, "events", LibraryEvent.from_json),
    )