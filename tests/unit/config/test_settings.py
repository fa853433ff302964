"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from switchboard.config import get_settings, reload_settings
from switchboard.config.settings import Settings


@pytest.fixture
def config_env(
    test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point the loader at an empty temporary config directory."""
    monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("SWITCHBOARD_ENV", "nonexistent")
    return test_config_dir


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert set(Settings.model_fields) == {
            "recognition",
            "routing",
            "providers",
            "observability",
        }
        assert settings.recognition.engine_timeout_seconds == 10.0

    def test_recognition_defaults(self) -> None:
        """Recognition configuration has defaults."""
        settings = Settings()
        weights = settings.recognition.weights
        assert (weights.pattern_based, weights.llm, weights.statistical) == (0.3, 0.4, 0.3)
        assert settings.recognition.cache.ttl_seconds == 300.0
        assert settings.recognition.cache.max_entries == 100
        assert settings.recognition.similarity_threshold == 0.3
        assert settings.recognition.acceptance_threshold == 0.1

    def test_routing_defaults(self) -> None:
        """Routing configuration has defaults."""
        settings = Settings()
        assert settings.routing.business_hours_start == 8
        assert settings.routing.business_hours_end == 18
        assert settings.routing.high_load_threshold == 0.8

    def test_provider_defaults(self) -> None:
        """Provider configuration has defaults."""
        settings = Settings()
        assert settings.providers.llm.enabled is True
        assert settings.providers.llm.model == "openai/gpt-4o-mini"

    def test_observability_defaults(self) -> None:
        """Observability configuration has defaults."""
        settings = Settings()
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.logging.redact_pii is True
        assert settings.observability.metrics.enabled is True


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self, config_env: Path) -> None:
        """get_settings returns a Settings instance."""
        (config_env / "default.toml").write_text("[routing]\nbusiness_hours_start = 9")

        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.routing.business_hours_start == 9

    def test_settings_cached(self, config_env: Path) -> None:
        """get_settings returns cached instance."""
        (config_env / "default.toml").write_text("[routing]\nbusiness_hours_start = 9")

        assert get_settings() is get_settings()

    def test_reload_settings_clears_cache(self, config_env: Path) -> None:
        """reload_settings returns fresh instance."""
        default_toml = config_env / "default.toml"
        default_toml.write_text("[routing]\nbusiness_hours_start = 9")
        assert get_settings().routing.business_hours_start == 9

        default_toml.write_text("[routing]\nbusiness_hours_start = 7")

        assert reload_settings().routing.business_hours_start == 7

    def test_nested_toml_values(self, config_env: Path) -> None:
        """Nested TOML tables populate nested models."""
        (config_env / "default.toml").write_text(
            "[recognition.cache]\nttl_seconds = 45\n\n[providers.llm]\nenabled = false"
        )

        settings = get_settings()
        assert settings.recognition.cache.ttl_seconds == 45
        assert settings.recognition.cache.max_entries == 100
        assert settings.providers.llm.enabled is False


class TestEnvironmentVariableOverrides:
    """Tests for environment variable configuration overrides."""

    def test_env_beats_environment_file(
        self, config_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Env vars win over both TOML layers."""
        (config_env / "default.toml").write_text("[providers.llm]\nmodel = 'openai/gpt-4o-mini'")
        (config_env / "staging.toml").write_text("[providers.llm]\nmodel = 'groq/llama-3.1-8b-instant'")
        monkeypatch.setenv("SWITCHBOARD_ENV", "staging")
        monkeypatch.setenv("SWITCHBOARD_PROVIDERS__LLM__MODEL", "mock/test")

        assert get_settings().providers.llm.model == "mock/test"

    def test_nested_override(
        self, config_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Nested values can be overridden with double underscore."""
        (config_env / "default.toml").write_text("[routing]\nbusiness_hours_end = 18")
        monkeypatch.setenv("SWITCHBOARD_ROUTING__BUSINESS_HOURS_END", "20")

        assert get_settings().routing.business_hours_end == 20

    def test_deeply_nested_override(
        self, config_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Deeply nested values can be overridden."""
        (config_env / "default.toml").write_text("[recognition.cache]\nenabled = true")
        monkeypatch.setenv("SWITCHBOARD_RECOGNITION__CACHE__ENABLED", "false")

        assert get_settings().recognition.cache.enabled is False
