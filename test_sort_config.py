"""Tests for settings resolution."""

import pytest

from sort_config import DEFAULT_LOG_LEVEL, LOG_LEVEL_VAR, get_log_level


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "missing.env")


class TestGetLogLevel:
    """Resolution order: .env file, then os.environ, then default."""

    def test_default_when_unset(self, clean_env, missing_env_file):
        assert get_log_level(missing_env_file) == DEFAULT_LOG_LEVEL

    def test_from_environment(self, clean_env, monkeypatch, missing_env_file):
        monkeypatch.setenv(LOG_LEVEL_VAR, "info")
        assert get_log_level(missing_env_file) == "INFO"

    def test_from_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(f"{LOG_LEVEL_VAR}=debug\n")
        assert get_log_level(str(env_file)) == "DEBUG"

    def test_env_file_wins_over_environment(
        self, clean_env, monkeypatch, tmp_path,
    ):
        env_file = tmp_path / ".env"
        env_file.write_text(f"{LOG_LEVEL_VAR}=ERROR\n")
        monkeypatch.setenv(LOG_LEVEL_VAR, "DEBUG")
        assert get_log_level(str(env_file)) == "ERROR"

    def test_default_env_file_found_from_cwd(
        self, clean_env, monkeypatch, tmp_path,
    ):
        (tmp_path / ".env").write_text(f"{LOG_LEVEL_VAR}=critical\n")
        monkeypatch.chdir(tmp_path)
        assert get_log_level() == "CRITICAL"

    def test_unknown_level_raises(
        self, clean_env, monkeypatch, missing_env_file,
    ):
        monkeypatch.setenv(LOG_LEVEL_VAR, "LOUD")
        with pytest.raises(ValueError, match=LOG_LEVEL_VAR):
            get_log_level(missing_env_file)
