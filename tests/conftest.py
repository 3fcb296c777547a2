import json
import sys
from pathlib import Path

import pytest
import yaml

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.config.store import ConfigStore


@pytest.fixture(scope="session")
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture()
def json_dir(tmp_path: Path) -> Path:
    d = tmp_path / "config" / "json"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture()
def yml_dir(tmp_path: Path) -> Path:
    d = tmp_path / "config" / "yml"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture()
def tmp_cache_dir(tmp_path: Path) -> Path:
    # Not created up front; the store must create it on first save.
    return tmp_path / "bin" / "cache" / "config"


@pytest.fixture()
def write_json(json_dir: Path):
    def _write(name: str, data) -> Path:
        path = json_dir / f"{name}.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def write_yml(yml_dir: Path):
    def _write(name: str, data) -> Path:
        path = yml_dir / f"{name}.yml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_configs(write_json, write_yml):
    write_json("app", {"name": "svc", "debug": False})
    write_yml("app", {"name": "svc2", "workers": 4})
    write_json("database", {
        "database": {"host": "localhost", "port": 5432, "replicas": ["r1", "r2"]},
        "pool": {"size": 5},
    })
    write_yml("db", {
        "options": {
            "host": {"required": True},
            "port": {"default": 5432},
        }
    })


@pytest.fixture()
def store(sample_configs, json_dir: Path, yml_dir: Path) -> ConfigStore:
    return ConfigStore(json_dir=json_dir, yml_dir=yml_dir)
