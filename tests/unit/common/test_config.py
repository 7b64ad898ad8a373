"""Tests for common.config module."""

import pytest

from common.config import LazySingleton, find_config_path, get_env, load_yaml


class TestFindConfigPath:
    def test_returns_named_config(self, tmp_path) -> None:
        (tmp_path / "local.yaml").write_text("a: 1\n")
        assert find_config_path("local", tmp_path) == tmp_path / "local.yaml"

    def test_uses_env_var_when_name_missing(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "staging.yaml").write_text("a: 1\n")
        monkeypatch.setenv("MY_CONFIG", "staging")
        assert find_config_path(None, tmp_path, env_var="MY_CONFIG") == tmp_path / "staging.yaml"

    def test_falls_back_to_default_name(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "prod.yaml").write_text("a: 1\n")
        monkeypatch.delenv("MY_CONFIG", raising=False)
        assert find_config_path(None, tmp_path, env_var="MY_CONFIG") == tmp_path / "prod.yaml"

    def test_blank_env_var_falls_back_to_default(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "prod.yaml").write_text("a: 1\n")
        monkeypatch.setenv("MY_CONFIG", " ")
        assert find_config_path(None, tmp_path, env_var="MY_CONFIG") == tmp_path / "prod.yaml"

    def test_raises_when_missing(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            find_config_path("nope", tmp_path)


class TestLoadYaml:
    def test_loads_mapping(self, tmp_path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("server:\n  port: 9000\n")
        assert load_yaml(path) == {"server": {"port": 9000}}

    def test_empty_file_returns_empty_dict(self, tmp_path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("")
        assert load_yaml(path) == {}


class TestGetEnv:
    def test_returns_value(self, monkeypatch) -> None:
        monkeypatch.setenv("SOME_KEY", "value")
        assert get_env("SOME_KEY") == "value"

    def test_blank_value_is_unset(self, monkeypatch) -> None:
        monkeypatch.setenv("SOME_KEY", "   ")
        assert get_env("SOME_KEY", "default") == "default"

    def test_missing_returns_default(self, monkeypatch) -> None:
        monkeypatch.delenv("SOME_KEY", raising=False)
        assert get_env("SOME_KEY") is None


class TestLazySingleton:
    def test_loads_once(self) -> None:
        calls = []

        def loader():
            calls.append(1)
            return object()

        manager = LazySingleton(loader)
        first = manager.get()
        assert manager.get() is first
        assert len(calls) == 1

    def test_set_overrides_loader(self) -> None:
        manager = LazySingleton(lambda: "loaded")
        manager.set("explicit")
        assert manager.get() == "explicit"

    def test_reset_forces_reload(self) -> None:
        values = iter(["first", "second"])
        manager = LazySingleton(lambda: next(values))
        assert manager.get() == "first"
        manager.reset()
        assert manager.get() == "second"

    def test_raises_without_loader(self) -> None:
        with pytest.raises(RuntimeError):
            LazySingleton().get()
