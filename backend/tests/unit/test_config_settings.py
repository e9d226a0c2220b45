"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_database_options_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./from-env.db")
    monkeypatch.setenv("DATABASE_SHUTDOWN_TIMEOUT", "2.5")
    monkeypatch.setenv("DATABASE_CREATE_TABLES", "false")

    settings = Settings()

    assert settings.database_url == "sqlite:///./from-env.db"
    assert settings.database_shutdown_timeout == 2.5
    assert settings.database_create_tables is False
