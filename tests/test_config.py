from __future__ import annotations

import os

import pytest

from swisslotto import config


@pytest.fixture
def clean_env(monkeypatch):
    """Leave the listed variables unset; monkeypatch restores them afterwards."""

    def _clean(*names: str) -> None:
        for name in names:
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

    return _clean


def test_env_local_overrides_env_file(tmp_path, clean_env):
    clean_env("SWISSLOTTO_TEST_BASE", "SWISSLOTTO_TEST_SHARED")
    (tmp_path / ".env").write_text("SWISSLOTTO_TEST_BASE=base\nSWISSLOTTO_TEST_SHARED=base\n")
    (tmp_path / ".env.local").write_text("SWISSLOTTO_TEST_SHARED=local\n")

    config.load_env_files(tmp_path / ".env", tmp_path / ".env.local")

    assert os.environ["SWISSLOTTO_TEST_BASE"] == "base"
    assert os.environ["SWISSLOTTO_TEST_SHARED"] == "local"


def test_env_local_overrides_process_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("SWISSLOTTO_TEST_KEPT", "shell")
    monkeypatch.setenv("SWISSLOTTO_TEST_REPLACED", "shell")
    (tmp_path / ".env").write_text("SWISSLOTTO_TEST_KEPT=base\n")
    (tmp_path / ".env.local").write_text("SWISSLOTTO_TEST_REPLACED=local\n")

    config.load_env_files(tmp_path / ".env", tmp_path / ".env.local")

    assert os.environ["SWISSLOTTO_TEST_KEPT"] == "shell"
    assert os.environ["SWISSLOTTO_TEST_REPLACED"] == "local"


def test_missing_env_local_is_ignored(tmp_path, clean_env):
    clean_env("SWISSLOTTO_TEST_BASE")
    (tmp_path / ".env").write_text("SWISSLOTTO_TEST_BASE=base\n")

    config.load_env_files(tmp_path / ".env", tmp_path / ".env.local")

    assert os.environ["SWISSLOTTO_TEST_BASE"] == "base"


@pytest.mark.parametrize(
    "env, expected",
    [
        ({}, "DevelopmentConfig"),
        ({"APP_ENV": "production"}, "ProductionConfig"),
        ({"APP_ENV": " Testing "}, "TestingConfig"),
    ],
)
def test_get_config_follows_app_env(monkeypatch, env, expected):
    monkeypatch.delenv("APP_ENV", raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    assert config.get_config() is getattr(config, expected)
