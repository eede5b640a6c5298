"""Tests for the config module."""

import pytest

from cloudfront_logs.config import LOG_LEVELS, Config, _parse_bool, load_config, load_yaml

ENV_VARS = ("CONFIG_PATH", "LOG_LEVEL", "JSON_INDENT", "DECODE_USER_AGENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestParseBool:
    def test_true_values(self):
        for val in ("true", "True", "1", "yes", " YES "):
            assert _parse_bool(val) is True

    def test_false_values(self):
        for val in ("false", "0", "no", "", "random"):
            assert _parse_bool(val) is False


class TestConfigDefaults:
    def test_defaults(self):
        cfg = Config()
        assert cfg.log_level == "INFO"
        assert cfg.json_indent == 2
        assert cfg.decode_user_agent is True

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.json_indent = 4

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            Config(log_level="LOUD")

    def test_log_levels(self):
        assert LOG_LEVELS == ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TestLoadYaml:
    def test_missing_file(self, tmp_path):
        assert load_yaml(str(tmp_path / "nope.yml")) == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_yaml(str(path)) == {}

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_yaml(str(path))


class TestLoadConfig:
    def test_no_file_gives_defaults(self):
        assert load_config() == Config()

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("log_level: debug\njson_indent: 4\ndecode_user_agent: false\n")
        cfg = load_config(str(path))
        assert cfg.log_level == "DEBUG"
        assert cfg.json_indent == 4
        assert cfg.decode_user_agent is False

    def test_config_path_env_wins(self, tmp_path, monkeypatch):
        path = tmp_path / "other.yml"
        path.write_text("json_indent: 8\n")
        monkeypatch.setenv("CONFIG_PATH", str(path))
        assert load_config("ignored.yml").json_indent == 8

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yml"
        path.write_text("log_level: INFO\njson_indent: 4\n")
        monkeypatch.setenv("LOG_LEVEL", "error")
        monkeypatch.setenv("JSON_INDENT", "0")
        monkeypatch.setenv("DECODE_USER_AGENT", "no")
        cfg = load_config(str(path))
        assert cfg.log_level == "ERROR"
        assert cfg.json_indent == 0
        assert cfg.decode_user_agent is False
