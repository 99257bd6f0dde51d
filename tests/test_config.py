"""Tests for file locations."""

from pathlib import Path

from git_switch_user.config import config_dir, default_store_path


class TestConfigDir:
    def test_uses_xdg_config_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config_dir() == tmp_path / "git-switch-user"

    def test_falls_back_to_home(self, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert config_dir() == Path.home() / ".config" / "git-switch-user"

    def test_store_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_store_path() == tmp_path / "git-switch-user" / "profiles.json"
