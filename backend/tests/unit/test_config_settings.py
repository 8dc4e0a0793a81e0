"""Unit tests for application settings configuration."""

from pathlib import Path

from blog_api.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_cors_defaults_allow_every_origin():
    settings = Settings(_env_file=None)
    assert settings.cors_origins == ["*"]
    assert set(settings.cors_allow_methods) == {"GET", "POST", "PUT", "DELETE", "OPTIONS"}
    assert settings.seed_sample_data is True


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("LOG_LEVEL_REQUESTS", "WARNING")
    settings = Settings(_env_file=None)
    assert settings.seed_sample_data is False
    assert settings.log_level_requests == "WARNING"
