# RSM Configuration Schema
# Pydantic model for the paths the CLI operates on

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_DATA_DIR = Path("/usr/share/rime-data")
DEFAULT_CONFIG_NAME = "default.yaml"


class RsmSettings(BaseModel):
    """Locations of the Rime configuration file and schema data directory."""

    config_path: Path = Field(
        default=DEFAULT_DATA_DIR / DEFAULT_CONFIG_NAME,
        description="YAML file holding the schema_list field",
    )
    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory scanned for installed *.schema.yaml files",
    )

    @field_validator("config_path", "data_dir")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        """Expand ~ in path."""
        return Path(v).expanduser()

    @classmethod
    def for_data_dir(cls, data_dir: Path) -> "RsmSettings":
        """Settings with the config file placed inside ``data_dir``."""
        data_dir = Path(data_dir).expanduser()
        return cls(config_path=data_dir / DEFAULT_CONFIG_NAME, data_dir=data_dir)
