"""Discovery of schemas installed in the Rime data directory."""

from __future__ import annotations

from pathlib import Path

from rsm.errors import SchemaDirError

SCHEMA_SUFFIX = ".schema.yaml"


def scan_installed_schemas(data_dir: Path) -> list[str]:
    """Scan a directory for schema definition files.

    Every ``<identifier>.schema.yaml`` file contributes its identifier.
    Other entries are ignored.

    Args:
        data_dir: Path to the Rime data directory

    Returns:
        Sorted list of schema identifiers

    Raises:
        SchemaDirError: If the directory can't be listed
    """
    schemas: list[str] = []

    try:
        for item in Path(data_dir).iterdir():
            if item.is_dir() or not item.name.endswith(SCHEMA_SUFFIX):
                continue
            name = item.name[: -len(SCHEMA_SUFFIX)]
            if name:
                schemas.append(name)
    except OSError as e:
        raise SchemaDirError(f"Cannot list schema directory {data_dir}: {e}") from e

    return sorted(schemas)
