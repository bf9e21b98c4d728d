"""Access to the ``schema_list`` field of a Rime configuration document.

The list is the only part of the document this package interprets. Entries
are mappings with a ``schema`` key; any other keys they carry are left alone.
"""

from __future__ import annotations

from typing import Any, Optional

from rsm.errors import InvalidEntryError, MissingFieldError

SCHEMA_LIST_KEY = "schema_list"
SCHEMA_KEY = "schema"


def get_schema_list(document: dict[str, Any], *, required: bool = True) -> list:
    """Return the live schema list of a document.

    Args:
        document: Parsed configuration document
        required: Whether an absent field is an error

    Returns:
        The list object stored in the document, or a new empty list when
        the field is absent and not required

    Raises:
        MissingFieldError: If the field is absent and required, or is
            present but not a list
    """
    entries = document.get(SCHEMA_LIST_KEY)

    if entries is None:
        if required:
            raise MissingFieldError(f"'{SCHEMA_LIST_KEY}' not found in configuration")
        return []

    if not isinstance(entries, list):
        raise MissingFieldError(f"'{SCHEMA_LIST_KEY}' is not a list (got {type(entries).__name__})")

    return entries


def set_schema_list(document: dict[str, Any], entries: list) -> None:
    """Replace the schema list of a document."""
    document[SCHEMA_LIST_KEY] = entries


def make_entry(name: str) -> dict[str, str]:
    """Create a new schema list entry."""
    return {SCHEMA_KEY: name}


def entry_schema(entry: Any, index: Optional[int] = None) -> Optional[str]:
    """Get the schema identifier of a list entry.

    Args:
        entry: Element of the schema list
        index: Position of the entry, used in error messages

    Returns:
        The identifier, or None if the ``schema`` key is absent or not a string

    Raises:
        InvalidEntryError: If the entry is not a mapping
    """
    if not isinstance(entry, dict):
        where = f" at index {index}" if index is not None else ""
        raise InvalidEntryError(f"Invalid {SCHEMA_LIST_KEY} entry{where}: expected a mapping, got {entry!r}")

    name = entry.get(SCHEMA_KEY)
    return name if isinstance(name, str) else None


def schema_names(entries: list) -> list[str]:
    """Identifiers of all valid entries, in list order."""
    names = []
    for index, entry in enumerate(entries):
        name = entry_schema(entry, index)
        if name is not None:
            names.append(name)
    return names


def find_schema(entries: list, name: str) -> Optional[int]:
    """Index of the first entry whose identifier equals ``name``, or None."""
    for index, entry in enumerate(entries):
        if entry_schema(entry, index) == name:
            return index
    return None
