"""RSM - Rime Schema Manager.

Add, remove, list, reorder and sync the input-method schemas enabled in
a Rime ``default.yaml`` configuration file.
"""

__version__ = "0.1.0"
__author__ = "AOSC-Dev"

__all__ = [
    "__version__",
    "RsmError",
    "RsmSettings",
    "load_settings",
    "load_document",
    "save_document",
    "add_schemas",
    "remove_schemas",
    "set_default_schema",
    "list_schemas",
    "sync_schemas",
    "scan_installed_schemas",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name == "RsmError":
        from rsm.errors import RsmError

        return RsmError
    if name in ("RsmSettings", "load_settings", "load_document", "save_document"):
        from rsm import config

        return getattr(config, name)
    if name in ("add_schemas", "remove_schemas", "set_default_schema", "list_schemas", "sync_schemas"):
        from rsm import operations

        return getattr(operations, name)
    if name == "scan_installed_schemas":
        from rsm.scanner import scan_installed_schemas

        return scan_installed_schemas
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
