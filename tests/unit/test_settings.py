"""
Unit tests for settings validation and environment file loading.
"""
import pytest
from pydantic import ValidationError

from lexibridge.config.loader import ConfigLoader
from lexibridge.config.settings import EngineSettings, Environment, FallbackSettings, Settings
from lexibridge.core.exceptions import ErrorCode, InvalidConfigurationError


def test_engine_defaults():
    engine = EngineSettings()
    assert engine.fallback_confidence_threshold == 0.4
    assert engine.cache_ttl_seconds == 300
    assert engine.max_cache_size == 10000
    assert engine.enable_idioms_lookup and engine.enable_post_processing


@pytest.mark.parametrize("field, value", [
    ("fallback_confidence_threshold", 1.5),
    ("fallback_confidence_threshold", -0.1),
    ("cache_ttl_seconds", 0),
    ("max_cache_size", 0),
])
def test_engine_rejects_out_of_range_values(field, value):
    with pytest.raises(ValidationError):
        EngineSettings(**{field: value})


def test_engine_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("ENGINE_ENABLE_REORDERING", "false")
    monkeypatch.setenv("ENGINE_FALLBACK_CONFIDENCE_THRESHOLD", "0.6")
    engine = EngineSettings()
    assert engine.enable_reordering is False
    assert engine.fallback_confidence_threshold == 0.6


def test_fallback_is_disabled_without_service_url():
    settings = Settings(fallback=FallbackSettings(base_url=None))
    assert settings.engine.enable_fallback is False

    settings = Settings(fallback=FallbackSettings(base_url="http://fallback.test/"))
    assert settings.engine.enable_fallback is True
    assert settings.fallback.base_url == "http://fallback.test"


def test_unknown_environment_raises():
    with pytest.raises(InvalidConfigurationError) as exc_info:
        ConfigLoader.load_environment_config("moon")
    assert exc_info.value.error_code == ErrorCode.INVALID_CONFIGURATION


def test_environment_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env.staging").write_text(
        "APP_NAME=Staging Bridge\n"
        "ENGINE_MAX_CACHE_SIZE=42\n"
        "DATABASE_URL=sqlite:///staging.db\n",
        encoding="utf-8",
    )

    settings = ConfigLoader.load_environment_config("staging")
    assert settings.environment == Environment.STAGING
    assert settings.app_name == "Staging Bridge"
    assert settings.engine.max_cache_size == 42
    assert settings.database.url == "sqlite:///staging.db"
    assert ConfigLoader.get_available_environments() == ["staging"]
    assert ConfigLoader.validate_environment_config("staging")
    assert not ConfigLoader.validate_environment_config("production")


def test_invalid_environment_file_is_reported(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env.testing").write_text("ENGINE_MAX_CACHE_SIZE=0\n", encoding="utf-8")

    with pytest.raises(InvalidConfigurationError):
        ConfigLoader.load_environment_config("testing")
    assert not ConfigLoader.validate_environment_config("testing")


def test_sample_file_round_trips(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sample = ConfigLoader.create_sample_env_file("production")
    (tmp_path / ".env.production").write_text((tmp_path / sample).read_text(encoding="utf-8"), encoding="utf-8")

    settings = ConfigLoader.load_environment_config("production")
    assert settings.is_production()
    assert settings.workers == 4
    assert settings.fallback.base_url == "http://localhost:5000"
    assert settings.engine.enable_fallback is True


def test_served_app_uses_the_launcher_environment(tmp_path, monkeypatch):
    from lexibridge.main import load_app_settings
    from run import export_runtime_environment

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DEBUG", "false")
    (tmp_path / ".env.staging").write_text(
        "FALLBACK_BASE_URL=http://remote.test\nENGINE_MAX_CACHE_SIZE=7\n",
        encoding="utf-8",
    )

    launcher_settings = ConfigLoader.load_environment_config("staging")
    launcher_settings.debug = True
    export_runtime_environment(launcher_settings)

    served = load_app_settings()
    assert served.environment == Environment.STAGING
    assert served.debug is True
    assert served.fallback.base_url == "http://remote.test"
    assert served.engine.max_cache_size == 7
