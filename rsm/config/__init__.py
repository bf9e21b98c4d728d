# RSM Configuration Module
# Handles settings resolution and the YAML document read-modify-write cycle

from rsm.config.document import create_yaml, dump_document, parse_document, render_document
from rsm.config.loader import (
    get_config_path,
    get_data_dir,
    load_document,
    load_settings,
    read_config,
    save_document,
)
from rsm.config.schema import DEFAULT_DATA_DIR, RsmSettings

__all__ = [
    # Schema
    "RsmSettings",
    "DEFAULT_DATA_DIR",
    # Loader
    "load_settings",
    "read_config",
    "load_document",
    "save_document",
    "get_config_path",
    "get_data_dir",
    # Document
    "create_yaml",
    "parse_document",
    "dump_document",
    "render_document",
]
