"""Tests for configuration loading."""

import pytest

from gitfame_core.config import load_config, split_list, validate_config
from gitfame_core.errors import ConfigError


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["repository"] == "."
    assert config["revision"] == "HEAD"
    assert config["order_by"] == "lines"
    assert config["format"] == "tabular"
    assert config["use_committer"] is False
    assert config["exclude"] == []
    assert config["jobs"] == 1


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".gitfame.yml"
    cfg.write_text("order_by: commits\nformat: json\n")
    config = load_config(config_path=str(cfg))
    assert config["order_by"] == "commits"
    assert config["format"] == "json"


def test_config_file_accepts_cli_spelling(tmp_path):
    cfg = tmp_path / ".gitfame.yml"
    cfg.write_text("order-by: files\nrestrict-to:\n  - 'src/*'\n")
    config = load_config(config_path=str(cfg))
    assert config["order_by"] == "files"
    assert config["restrict_to"] == ["src/*"]


def test_exclude_patterns_loaded(tmp_path):
    cfg = tmp_path / ".gitfame.yml"
    cfg.write_text("exclude:\n  - 'vendor/*'\n  - '*.lock'\n")
    config = load_config(config_path=str(cfg))
    assert "vendor/*" in config["exclude"]
    assert "*.lock" in config["exclude"]


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".gitfame.yml"
    cfg.write_text("format: csv\n")
    config = load_config(config_path=str(cfg), cli_overrides={"format": "json-lines"})
    assert config["format"] == "json-lines"


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".gitfame.yml"
    cfg.write_text("format: csv\n")
    config = load_config(config_path=str(cfg), cli_overrides={"format": None})
    assert config["format"] == "csv"


def test_invalid_yaml_raises_config_error(tmp_path):
    cfg = tmp_path / ".gitfame.yml"
    cfg.write_text("exclude: [unterminated\n")
    with pytest.raises(ConfigError):
        load_config(config_path=str(cfg))


def test_non_mapping_yaml_raises_config_error(tmp_path):
    cfg = tmp_path / ".gitfame.yml"
    cfg.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(config_path=str(cfg))


def test_list_defaults_are_not_shared_references(tmp_path):
    """Mutating one config's exclude list must not affect another."""
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["exclude"].append("vendor/*")
    assert config_b["exclude"] == []


class TestValidateConfig:
    def _config(self, tmp_path, **overrides):
        return load_config(config_path=str(tmp_path / "nonexistent.yml"), cli_overrides=overrides)

    def test_defaults_are_valid(self, tmp_path):
        validate_config(self._config(tmp_path))

    def test_bad_order_by(self, tmp_path):
        with pytest.raises(ConfigError, match="sorting option"):
            validate_config(self._config(tmp_path, order_by="name"))

    def test_bad_format(self, tmp_path):
        with pytest.raises(ConfigError, match="formatting option"):
            validate_config(self._config(tmp_path, format="xml"))

    @pytest.mark.parametrize("jobs", [0, -2, "4", True])
    def test_bad_jobs(self, tmp_path, jobs):
        with pytest.raises(ConfigError):
            validate_config(self._config(tmp_path, jobs=jobs))

    def test_comma_string_lists_are_split(self, tmp_path):
        config = validate_config(self._config(tmp_path, extensions=".go, .md,"))
        assert config["extensions"] == [".go", ".md"]

    def test_non_string_list_items_rejected(self, tmp_path):
        with pytest.raises(ConfigError):
            validate_config(self._config(tmp_path, exclude=[1, 2]))


def test_split_list():
    assert split_list("a, b,,c ") == ["a", "b", "c"]
    assert split_list("") == []
