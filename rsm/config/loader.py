# RSM Configuration Loader
# Load and save the Rime YAML document and resolve settings

import os
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from rsm.config.document import parse_document, render_document
from rsm.config.schema import DEFAULT_DATA_DIR, RsmSettings
from rsm.errors import ConfigNotFoundError, ConfigReadError, ConfigWriteError
from rsm.utils.paths import atomic_write

CONFIG_ENV = "RSM_CONFIG"
DATA_DIR_ENV = "RSM_DATA_DIR"


def get_data_dir() -> Path:
    """Get the Rime schema data directory."""
    # Allow override via environment variable
    env_path = os.environ.get(DATA_DIR_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_DATA_DIR


def get_config_path() -> Path:
    """Get the path to the Rime configuration file."""
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return RsmSettings.for_data_dir(get_data_dir()).config_path


def load_settings() -> RsmSettings:
    """Resolve settings from the environment, falling back to defaults."""
    return RsmSettings(config_path=get_config_path(), data_dir=get_data_dir())


def read_config(config_path: Optional[Path] = None) -> tuple[str, CommentedMap]:
    """
    Read the configuration file and parse it.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Tuple of (source text, parsed top-level mapping). An empty file
        yields an empty mapping.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigReadError: If the file can't be read.
        ConfigParseError: If the file is not YAML or its root is not a mapping.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        # newline="" keeps CRLF files byte-identical when written back
        with open(config_path, encoding="utf-8", newline="") as f:
            source = f.read()
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"Configuration file not found: {config_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Cannot read {config_path}: {e}") from e

    return source, parse_document(source, str(config_path))


def load_document(config_path: Optional[Path] = None) -> CommentedMap:
    """Load the configuration document from YAML file."""
    return read_config(config_path)[1]


def save_document(
    document: dict[str, Any],
    config_path: Optional[Path] = None,
    *,
    source: Optional[str] = None,
) -> Path:
    """
    Save the configuration document to YAML file.

    When ``source`` is the text the document was read from, only the
    schema_list block is rewritten and the rest of the file is kept byte
    for byte. The file is replaced atomically.

    Args:
        document: Document to save.
        config_path: Optional path to config file. Uses default if not provided.
        source: Original file text, as returned by read_config.

    Returns:
        Path: Path where the document was saved.

    Raises:
        ConfigWriteError: If the document can't be serialized or written.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        content = render_document(document, source)
        atomic_write(config_path, content)
    except YAMLError as e:
        raise ConfigWriteError(f"Cannot serialize document for {config_path}: {e}") from e
    except OSError as e:
        raise ConfigWriteError(f"Failed to write {config_path}: {e}") from e

    return config_path
