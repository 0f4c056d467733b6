"""
Tests for configuration module.

CRITICAL: TEST INTEGRITY DIRECTIVE
NEVER remove, disable, or work around a failing test without explicit user review and approval.
When a test fails:
1. STOP - Do not proceed with implementation
2. ANALYZE - Understand why the test is failing
3. DISCUSS - Present the failure to the user
4. WAIT - Get explicit user approval before modifying tests
"""

import pytest
from pydantic import ValidationError
from spelling_practice.config import Settings, get_settings

SETTINGS_ENV = [
    "SPELLING_DATA_DIR",
    "SPELLING_STORE_SLOT",
    "SPELLING_TEST_SIZE",
    "SPELLING_LOG_FILE",
    "SPELLING_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each test without ambient SPELLING_* variables or .env file, with a fresh cache."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings class."""

    def test_settings_uses_default_values(self):
        """Test that every field has a usable default."""
        settings = Settings()

        assert settings.data_dir == ".spelling_practice/"
        assert settings.store_slot == "spellingWords"
        assert settings.test_size == 10
        assert settings.log_file is None
        assert settings.log_level == "INFO"

    def test_settings_loads_from_env_correctly(self, monkeypatch, tmp_path):
        """Test that Settings loads configuration from environment variables."""
        monkeypatch.setenv("SPELLING_DATA_DIR", str(tmp_path / "words"))
        monkeypatch.setenv("SPELLING_STORE_SLOT", "classroom")
        monkeypatch.setenv("SPELLING_TEST_SIZE", "15")
        monkeypatch.setenv("SPELLING_LOG_FILE", str(tmp_path / "practice.log"))
        monkeypatch.setenv("SPELLING_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.data_dir == str(tmp_path / "words")
        assert settings.store_slot == "classroom"
        assert settings.test_size == 15
        assert settings.log_file == str(tmp_path / "practice.log")
        assert settings.log_level == "DEBUG"

    def test_settings_strips_whitespace(self, monkeypatch):
        """Test that Settings strips whitespace from string values."""
        monkeypatch.setenv("SPELLING_STORE_SLOT", "  classroom  ")

        settings = Settings()

        assert settings.store_slot == "classroom"

    def test_settings_rejects_empty_slot(self, monkeypatch):
        """Test that an empty slot name is rejected after stripping."""
        monkeypatch.setenv("SPELLING_STORE_SLOT", "   ")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "store_slot" in str(exc_info.value).lower()

    @pytest.mark.parametrize("size", ["0", "-1", "ten"])
    def test_settings_rejects_invalid_test_size(self, monkeypatch, size):
        """Test that the test size must be a positive integer."""
        monkeypatch.setenv("SPELLING_TEST_SIZE", size)

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "test_size" in str(exc_info.value).lower()

    def test_settings_rejects_unknown_log_level(self, monkeypatch):
        """Test that an unknown log level is rejected."""
        monkeypatch.setenv("SPELLING_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "log_level" in str(exc_info.value).lower()

    def test_blank_log_file_is_unset(self, monkeypatch):
        """Test that a blank log file setting means no log file."""
        monkeypatch.setenv("SPELLING_LOG_FILE", "  ")

        settings = Settings()

        assert settings.log_file is None


class TestGetSettings:
    """Tests for get_settings() singleton function."""

    def test_get_settings_returns_settings_instance(self):
        """Test that get_settings() returns a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_get_settings_caches_across_calls(self, monkeypatch):
        """Test that get_settings() caches the settings and doesn't reload from env."""
        monkeypatch.setenv("SPELLING_TEST_SIZE", "12")

        settings1 = get_settings()
        assert settings1.test_size == 12

        monkeypatch.setenv("SPELLING_TEST_SIZE", "20")

        settings2 = get_settings()
        assert settings2.test_size == 12
        assert settings1 is settings2


class TestSettingsDotEnvLoading:
    """Tests for .env file loading functionality."""

    def test_settings_loads_from_dotenv_file(self, tmp_path):
        """Test that Settings can load from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("SPELLING_DATA_DIR=/tmp/spelling\nSPELLING_TEST_SIZE=5\n")

        settings = Settings()

        assert settings.data_dir == "/tmp/spelling"
        assert settings.test_size == 5

    def test_env_variables_override_dotenv_file(self, tmp_path, monkeypatch):
        """Test that environment variables take precedence over .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("SPELLING_STORE_SLOT=from-file\n")
        monkeypatch.setenv("SPELLING_STORE_SLOT", "from-env")

        settings = Settings()

        assert settings.store_slot == "from-env"

    def test_dotenv_ignores_unrelated_variables(self, tmp_path):
        """Test that unrelated entries in .env do not cause errors."""
        env_file = tmp_path / ".env"
        env_file.write_text("OTHER_TOOL_TOKEN=abc\nSPELLING_TEST_SIZE=8\n")

        settings = Settings()

        assert settings.test_size == 8
