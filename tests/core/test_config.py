"""Tests for configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from weblet.config.properties import SessionProperties, WebProperties
from weblet.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "demo", "port": 8080}})
        assert config.get("app.name") == "demo"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "weblet.yaml"
        config_file.write_text("weblet:\n  session:\n    store: file\n")
        config = Config.from_file(config_file)
        assert config.get("weblet.session.store") == "file"
        assert config.get("weblet.session.shards") == 8

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "weblet.toml"
        config_file.write_text('[weblet.web]\nport = 9090\n')
        config = Config.from_file(config_file)
        assert config.get("weblet.web.port") == 9090
        assert config.get("weblet.web.host") == "127.0.0.1"

    def test_missing_file_keeps_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("weblet.session.cookie_name") == "SAMPLE_SESSION_ID"

    def test_without_defaults(self):
        assert Config.from_file(load_defaults=False).get_section("weblet") == {}

    def test_env_key_drops_weblet_prefix(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBLET_WEB_STATIC_PATH", "/assets")
        monkeypatch.setenv("WEBLET_APP_NAME", "demo")
        config = Config({})
        assert config.get("weblet.web.static_path") == "/assets"
        assert config.get("app.name") == "demo"

    def test_false_and_zero_are_values(self):
        config = Config({"flags": {"on": False, "count": 0}})
        assert config.get("flags.on", True) is False
        assert config.get("flags.count", 5) == 0

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBLET_SESSION_STORE", "sharded")
        config = Config({"weblet": {"session": {"store": "memory"}}})
        assert config.get("weblet.session.store") == "sharded"

    def test_get_section(self):
        config = Config({"weblet": {"web": {"host": "0.0.0.0"}}})
        assert config.get_section("weblet.web") == {"host": "0.0.0.0"}
        assert config.get_section("weblet.absent") == {}


class TestPlaceholders:
    def test_resolves_config_reference(self):
        config = Config({"base": {"dir": "/var/lib"}, "weblet": {"session": {"file": "${base.dir}/s.json"}}})
        assert config.get("weblet.session.file") == "/var/lib/s.json"

    def test_resolves_env_var(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DATA_DIR", "/data")
        config = Config({"path": "${DATA_DIR}/sessions.json"})
        assert config.get("path") == "/data/sessions.json"

    def test_default_value(self):
        assert Config({"path": "${NOT_SET_ANYWHERE:/tmp}/x"}).get("path") == "/tmp/x"

    def test_unresolvable_raises(self):
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            Config({"path": "${NOT_SET_ANYWHERE}"}).get("path")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="circular"):
            config.get("a")


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="store")
        @dataclass
        class StoreConfig:
            path: str = "sessions.json"
            shards: int = 8

        config = Config({"store": {"path": "/tmp/s.json", "shards": 4}})
        bound = config.bind(StoreConfig)
        assert bound.path == "/tmp/s.json"
        assert bound.shards == 4

    def test_bind_uses_defaults(self):
        bound = Config({}).bind(SessionProperties)
        assert bound == SessionProperties()

    def test_bind_coerces_env_strings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WEBLET_SESSION_SHARDS", "16")
        monkeypatch.setenv("WEBLET_SESSION_SECURE_IDS", "true")
        bound = Config({}).bind(SessionProperties)
        assert bound.shards == 16
        assert bound.secure_ids is True

    def test_bind_pydantic_model(self):
        bound = Config({"weblet": {"web": {"port": 9000, "templates": "t/*.html"}}}).bind(WebProperties)
        assert bound.port == 9000
        assert bound.templates == "t/*.html"
        assert bound.static_path == "/static"

    def test_bind_pydantic_validation_error(self):
        with pytest.raises(ValueError, match="Configuration validation failed"):
            Config({"weblet": {"web": {"port": 70000}}}).bind(WebProperties)

    def test_bind_undecorated_class_raises(self):
        @dataclass
        class Plain:
            x: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
