# RSM YAML Document
# Round-trip parsing and in-place rewriting of the schema_list block

from io import StringIO
from typing import Any, Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from rsm.errors import ConfigParseError
from rsm.schema_list import SCHEMA_LIST_KEY


def create_yaml() -> YAML:
    """Create a YAML instance matching the layout of Rime's own files."""
    yaml = YAML()
    yaml.preserve_quotes = True
    yaml.default_flow_style = False
    yaml.map_indent = 2
    yaml.sequence_indent = 4
    yaml.sequence_dash_offset = 2
    yaml.width = 4096
    return yaml


def parse_document(source: str, origin: str = "<string>") -> CommentedMap:
    """
    Parse configuration text into a round-trip mapping.

    Args:
        source: YAML text.
        origin: Name used in error messages.

    Returns:
        The top-level mapping. Empty or comment-only text yields an empty mapping.

    Raises:
        ConfigParseError: If the text is not YAML or its root is not a mapping.
    """
    try:
        data = create_yaml().load(source)
    except YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax in {origin}: {e}") from e

    if data is None:
        return CommentedMap()

    if not isinstance(data, dict):
        raise ConfigParseError(f"YAML root is not a mapping in {origin}")

    return data


def dump_document(document: dict[str, Any]) -> str:
    """Serialize a whole document."""
    stream = StringIO()
    create_yaml().dump(document, stream)
    return stream.getvalue()


def render_document(document: dict[str, Any], source: Optional[str] = None) -> str:
    """
    Produce the text to write for a document.

    With ``source`` (the text the document was parsed from) only the lines of
    the schema_list block are regenerated; every other line is copied from
    ``source`` byte for byte. Comments and blank lines that trail the block
    stay where they are. Without ``source``, or when the top level is a flow
    mapping, the whole document is serialized.

    Args:
        document: Document to write.
        source: Original text of the file, if any.

    Returns:
        YAML text.
    """
    if source is None:
        return dump_document(document)

    original = create_yaml().load(source)
    block = _render_schema_list(document)

    if original is None:
        return _append(source, block)

    if not isinstance(original, CommentedMap) or original.fa.flow_style():
        return dump_document(document)

    if SCHEMA_LIST_KEY not in original:
        return _append(source, block)

    lines = source.splitlines(keepends=True)
    keys = list(original)
    position = keys.index(SCHEMA_LIST_KEY)

    start = original.lc.key(SCHEMA_LIST_KEY)[0]
    if position + 1 < len(keys):
        end = original.lc.key(keys[position + 1])[0]
    else:
        end = len(lines)

    # Trailing comments belong to whatever follows
    while end > start + 1 and _is_filler(lines[end - 1]):
        end -= 1

    return "".join(lines[:start]) + block + "".join(lines[end:])


def _render_schema_list(document: dict[str, Any]) -> str:
    """Serialize the schema_list field alone, or nothing if it is absent."""
    if SCHEMA_LIST_KEY not in document:
        return ""
    field = CommentedMap()
    field[SCHEMA_LIST_KEY] = _without_comments(document[SCHEMA_LIST_KEY])
    return dump_document(field)


def _without_comments(value: Any) -> Any:
    """Copy mappings and sequences into fresh containers that carry no comments."""
    if isinstance(value, dict):
        copy = CommentedMap()
        for key, item in value.items():
            copy[key] = _without_comments(item)
        return copy
    if isinstance(value, list):
        return CommentedSeq(_without_comments(item) for item in value)
    return value


def _is_filler(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def _append(source: str, block: str) -> str:
    if source and not source.endswith("\n"):
        source += "\n"
    return source + block
