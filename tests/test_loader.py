from pathlib import Path

import pytest

from src.config.errors import ConfigParseError
from src.config.loader import discover_config_files, load_config_dir, load_config_file
from src.config.settings import StoreSettings


def test_discover_is_sorted_and_filtered(json_dir: Path):
    for name in ["b.json", "a.json", "c.txt"]:
        (json_dir / name).write_text("{}", encoding="utf-8")
    (json_dir / "d.json").mkdir()

    assert [p.name for p in discover_config_files(json_dir, ".json")] == ["a.json", "b.json"]


def test_empty_yaml_loads_as_empty_mapping(yml_dir: Path):
    path = yml_dir / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(path) == {}


def test_non_mapping_top_level_is_rejected(yml_dir: Path):
    path = yml_dir / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigParseError) as exc_info:
        load_config_file(path)
    assert exc_info.value.path == str(path)


def test_load_config_dir_uses_file_stem(write_yml, yml_dir: Path):
    write_yml("mail", {"smtp": {"port": 587}})
    assert load_config_dir(yml_dir, ".yml") == {"mail": {"smtp": {"port": 587}}}


def test_settings_from_root_layout(tmp_path: Path):
    settings = StoreSettings.from_root(tmp_path, use_cache=False)
    assert settings.json_dir == str(tmp_path / "config" / "json")
    assert settings.yml_dir == str(tmp_path / "config" / "yml")
    assert settings.cache_dir is None
