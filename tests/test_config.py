"""Tests for config loading."""

from pathlib import Path

import pytest

from circular_scan.config import load_config, load_config_data
from circular_scan.errors import ConfigError
from circular_scan.models import AnalysisConfig


def test_defaults(tmp_path):
    config = load_config(tmp_path)
    assert config.project_root == tmp_path
    assert config.workers == 8
    assert config.only_project is True
    assert config.max_depth == 1000
    assert config.deterministic is True


def test_project_config_file_is_picked_up(tmp_path):
    (tmp_path / ".circular-scan.yaml").write_text(
        "workers: 2\nonly_project: false\nexclude_dirs:\n  - migrations\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.workers == 2
    assert config.only_project is False
    assert config.exclude_dirs == ["migrations"]


def test_overrides_win_and_none_is_ignored(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("workers: 2\nmax_depth: 50\n", encoding="utf-8")
    config = load_config(tmp_path, path, {"workers": 16, "max_depth": None})
    assert config.workers == 16
    assert config.max_depth == 50


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("colour: blue\nworkers: 3\n", encoding="utf-8")
    assert load_config(tmp_path, path).workers == 3


def test_project_root_in_file_is_overridden(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("project_root: /somewhere/else\n", encoding="utf-8")
    assert load_config(tmp_path, path).project_root == tmp_path


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_data(path) == {}


def test_non_mapping_is_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config_data(path)


def test_invalid_yaml_is_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("workers: [1, 2\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config_data(path)


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(ConfigError):
        load_config_data(tmp_path / "nope.yaml")


@pytest.mark.parametrize("values", [
    {"max_depth": 0}, {"workers": "many"}, {"max_depth": -5}, {"verbosity": "loud"}, {"verbosity": -1},
])
def test_invalid_values_are_rejected(tmp_path, values):
    with pytest.raises(ConfigError):
        load_config(tmp_path, overrides=values)


def test_from_dict_round_trip():
    config = AnalysisConfig(project_root=Path("/p"), exclude_files=["*_pb2.py"])
    assert AnalysisConfig.from_dict(config.to_dict()) == config
