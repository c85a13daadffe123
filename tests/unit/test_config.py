"""Unit tests for settings, the component factory and logging setup."""

import logging

import pytest
from pydantic import ValidationError

import proteus
from proteus.core.config import ConfigurationError, Settings, validate_settings
from proteus.core.factory import ComponentFactory
from proteus.core.logging_config import get_logger, setup_logging
from proteus.strategies.jsx import JsxSyntaxAnalyzer, TextPatcher
from proteus.strategies.naming import FunctionalSynthesizer, SafeHashSynthesizer


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.strategy == "functional"
        assert settings.attribute_name == "data-testid"
        assert settings.detect_reusable_components is True
        assert settings.auto_exclude_patterns == []
        assert settings.descriptor_max_length == 40

    def test_strategy_normalized(self):
        """Test that strategy names are trimmed and lowercased."""
        assert Settings(strategy="  Safe-Hash ").strategy == "safe-hash"

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_attribute_name(self):
        with pytest.raises(ValidationError):
            Settings(attribute_name="data test id")

    def test_descriptor_length_lower_bound(self):
        with pytest.raises(ValidationError):
            Settings(descriptor_max_length=2)

    def test_environment_override(self, monkeypatch):
        """Test that PROTEUS_* environment variables are honoured."""
        monkeypatch.setenv("PROTEUS_STRATEGY", "safe-hash")
        monkeypatch.setenv("PROTEUS_ATTRIBUTE_NAME", "data-qa")
        settings = Settings()
        assert settings.strategy == "safe-hash"
        assert settings.attribute_name == "data-qa"

    def test_validate_settings_accepts_known_strategies(self):
        for strategy in ("functional", "safe-hash"):
            settings = Settings(strategy=strategy)
            assert validate_settings(settings) is settings

    def test_validate_settings_rejects_unknown_strategy(self):
        with pytest.raises(ConfigurationError, match="Invalid strategy"):
            validate_settings(Settings(strategy="random"))


# =============================================================================
# Component Factory Tests
# =============================================================================


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def factory(self):
        return ComponentFactory(Settings(attribute_name="data-qa"))

    def test_get_analyzer(self, factory):
        analyzer = factory.get_analyzer()
        assert isinstance(analyzer, JsxSyntaxAnalyzer)
        assert factory.get_analyzer() is analyzer

    def test_get_synthesizer_from_settings(self, factory):
        synthesizer = factory.get_synthesizer()
        assert isinstance(synthesizer, FunctionalSynthesizer)
        assert synthesizer.attribute_name == "data-qa"

    def test_get_synthesizer_override(self, factory):
        synthesizer = factory.get_synthesizer("safe-hash")
        assert isinstance(synthesizer, SafeHashSynthesizer)
        assert synthesizer.name == "safe-hash"

    def test_get_synthesizer_unknown(self, factory):
        with pytest.raises(ConfigurationError, match="Unknown strategy"):
            factory.get_synthesizer("ordinal")

    def test_get_patcher(self, factory):
        assert isinstance(factory.get_patcher(), TextPatcher)

    def test_clear_cache(self, factory):
        analyzer = factory.get_analyzer()
        factory.clear_cache()
        assert factory.get_analyzer() is not analyzer


# =============================================================================
# Logging Tests
# =============================================================================


class TestLogging:
    """Test suite for logging setup."""

    @pytest.fixture(autouse=True)
    def reset_handlers(self):
        yield
        package_logger = logging.getLogger("proteus")
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()

    def test_console_only(self):
        package_logger = setup_logging(Settings())
        assert package_logger.name == "proteus"
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO

    def test_log_files_created(self, tmp_path):
        """Test that info.log and error.log are written under log_dir."""
        log_dir = tmp_path / "logs"
        package_logger = setup_logging(Settings(log_dir=log_dir, log_level="DEBUG"))
        package_logger.info("hello")
        for handler in package_logger.handlers:
            handler.flush()

        assert package_logger.level == logging.DEBUG
        assert (log_dir / "info.log").exists()
        assert (log_dir / "error.log").exists()
        assert "hello" in (log_dir / "info.log").read_text(encoding="utf-8")

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path):
        setup_logging(Settings(log_dir=tmp_path))
        package_logger = setup_logging(Settings(log_dir=tmp_path))
        assert len(package_logger.handlers) == 3

    def test_get_logger(self):
        assert get_logger("proteus.engine").name == "proteus.engine"

    def test_setup_logging_is_public(self):
        """Test that callers can configure logging from the package root."""
        assert proteus.setup_logging is setup_logging
        assert "setup_logging" in proteus.__all__

    def test_engine_logs_reach_console_handler(self, capsys):
        proteus.setup_logging(Settings())
        proteus.inject_source("src/A.tsx", "export const A = () => <div />;\n", Settings())
        assert "Injected 1 test IDs in src/A.tsx" in capsys.readouterr().err
