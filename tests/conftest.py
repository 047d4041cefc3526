# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p

@pytest.fixture()
def sample_config_yaml() -> str:
    return """dialect:
  delimiter: ";"
  enclosure: '"'
header:
  columns: [Name, Role, Age]
  trim: true
  case_insensitive: true
indexing:
  Name: full_name
"""

@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "reader.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg

@pytest.fixture()
def people_csv() -> str:
    return 'name,role,age\n"Tony Farney","Developer",30\n'
