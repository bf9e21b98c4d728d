# RSM Test Fixtures
# Pytest fixtures for RSM tests

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_document() -> dict:
    """Document with two schemas and unrelated fields."""
    return {
        "config_version": "0.38",
        "schema_list": [
            {"schema": "pinyin"},
            {"schema": "wubi"},
        ],
        "switcher": {
            "caption": "〔方案選單〕",
            "hotkeys": ["Control+grave", "F4"],
            "save_options": ["full_shape", "ascii_punct"],
        },
        "menu": {"page_size": 5},
    }


@pytest.fixture
def rime_dir(temp_dir: Path) -> Path:
    """Create a mock Rime data directory with installed schemas."""
    data_dir = temp_dir / "rime-data"
    data_dir.mkdir()

    for name in ("luna_pinyin", "cangjie5", "wubi86"):
        (data_dir / f"{name}.schema.yaml").write_text(
            f"schema:\n  schema_id: {name}\n",
            encoding="utf-8",
        )

    # Files that are not schema definitions
    (data_dir / "luna_pinyin.dict.yaml").write_text("---\n", encoding="utf-8")
    (data_dir / "symbols.yaml").write_text("---\n", encoding="utf-8")

    return data_dir


@pytest.fixture
def config_file(rime_dir: Path, sample_document: dict) -> Path:
    """Create a default.yaml inside the mock data directory."""
    config_path = rime_dir / "default.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(sample_document, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return config_path


@pytest.fixture
def rime_env(rime_dir: Path, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at the mock data directory."""
    monkeypatch.setenv("RSM_DATA_DIR", str(rime_dir))
    monkeypatch.delenv("RSM_CONFIG", raising=False)
    return config_file
