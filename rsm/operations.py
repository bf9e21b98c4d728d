# RSM Schema Operations
# add / remove / set-default / list / sync transformations of a document

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional

from rsm.scanner import scan_installed_schemas
from rsm.schema_list import (
    find_schema,
    get_schema_list,
    make_entry,
    schema_names,
    set_schema_list,
)


class Outcome(str, Enum):
    """What happened to one input of an add or remove batch."""

    ADDED = "added"
    SKIPPED = "skipped"
    REMOVED = "removed"
    MISSING = "missing"


@dataclass
class BatchResult:
    """Per-input outcomes of a batch operation, in input order."""

    document: dict[str, Any]
    outcomes: list[tuple[str, Outcome]] = field(default_factory=list)

    def names(self, outcome: Outcome) -> list[str]:
        """Inputs that ended with the given outcome."""
        return [name for name, result in self.outcomes if result == outcome]


@dataclass
class AddResult(BatchResult):
    """Result of adding schemas to the list."""

    @property
    def added(self) -> list[str]:
        return self.names(Outcome.ADDED)

    @property
    def skipped(self) -> list[str]:
        return self.names(Outcome.SKIPPED)


@dataclass
class RemoveResult(BatchResult):
    """Result of removing schemas from the list."""

    @property
    def removed(self) -> list[str]:
        return self.names(Outcome.REMOVED)

    @property
    def missing(self) -> list[str]:
        return self.names(Outcome.MISSING)


@dataclass
class DefaultResult:
    """Result of promoting a schema to the front of the list."""

    document: dict[str, Any]
    schema: str
    previous_index: Optional[int] = None

    @property
    def found(self) -> bool:
        """Check if the schema was in the list."""
        return self.previous_index is not None


@dataclass
class SyncResult:
    """Result of replacing the list with the installed schemas."""

    document: dict[str, Any]
    schemas: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.schemas)


def add_schemas(document: dict[str, Any], inputs: Iterable[str]) -> AddResult:
    """
    Append schemas to the end of the list.

    Identifiers already present are skipped, never duplicated.

    Args:
        document: Loaded configuration document. Mutated in place.
        inputs: Schema identifiers, processed in order.

    Returns:
        AddResult holding the document and what was added or skipped.

    Raises:
        MissingFieldError: If the document has no schema list.
    """
    entries = get_schema_list(document)
    result = AddResult(document=document)
    present = set(schema_names(entries))

    for name in inputs:
        if name in present:
            result.outcomes.append((name, Outcome.SKIPPED))
            continue
        entries.append(make_entry(name))
        present.add(name)
        result.outcomes.append((name, Outcome.ADDED))

    return result


def remove_schemas(document: dict[str, Any], inputs: Iterable[str]) -> RemoveResult:
    """
    Remove schemas from the list.

    Only the first matching entry is removed per input.

    Args:
        document: Loaded configuration document. Mutated in place.
        inputs: Schema identifiers, processed in order.

    Returns:
        RemoveResult holding the document and what was removed or missing.

    Raises:
        MissingFieldError: If the document has no schema list.
    """
    entries = get_schema_list(document)
    result = RemoveResult(document=document)

    for name in inputs:
        index = find_schema(entries, name)
        if index is None:
            result.outcomes.append((name, Outcome.MISSING))
            continue
        del entries[index]
        result.outcomes.append((name, Outcome.REMOVED))

    return result


def set_default_schema(document: dict[str, Any], name: str) -> DefaultResult:
    """
    Move a schema to the front of the list.

    Entries ahead of it shift down by one and keep their relative order.

    Args:
        document: Loaded configuration document. Mutated in place.
        name: Schema identifier to promote.

    Returns:
        DefaultResult; ``found`` is False when the schema is not listed.

    Raises:
        MissingFieldError: If the document has no schema list.
    """
    entries = get_schema_list(document)
    index = find_schema(entries, name)
    result = DefaultResult(document=document, schema=name, previous_index=index)

    if index is not None:
        entries.insert(0, entries.pop(index))

    return result


def list_schemas(document: dict[str, Any]) -> list[str]:
    """Identifiers in the schema list, in order. An absent list is empty."""
    return schema_names(get_schema_list(document, required=False))


def sync_schemas(document: dict[str, Any], data_dir: Path) -> SyncResult:
    """
    Replace the schema list with the schemas installed in ``data_dir``.

    The previous list is discarded whatever its contents.

    Args:
        document: Loaded configuration document. Mutated in place.
        data_dir: Directory holding ``*.schema.yaml`` files.

    Returns:
        SyncResult holding the document and the identifiers found.

    Raises:
        SchemaDirError: If the directory can't be listed.
    """
    schemas = scan_installed_schemas(data_dir)
    set_schema_list(document, [make_entry(name) for name in schemas])
    return SyncResult(document=document, schemas=schemas)
