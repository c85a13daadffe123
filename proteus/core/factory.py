"""Component Factory for strategy instantiation.

The Factory Pattern allows the engine to instantiate different
strategy implementations at runtime based on configuration.
"""

import logging

from proteus.core.config import ConfigurationError, Settings, get_settings
from proteus.interfaces.analyzer import BaseSyntaxAnalyzer
from proteus.interfaces.synthesizer import BaseIdentifierSynthesizer
from proteus.strategies.jsx import JsxSyntaxAnalyzer, TextPatcher
from proteus.strategies.naming import FunctionalSynthesizer, SafeHashSynthesizer

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating engine components based on configuration.

    Every component it hands out is stateless, so cached instances are
    safe to share between files.

    Example:
        ```python
        factory = ComponentFactory(Settings(strategy="safe-hash"))

        analyzer = factory.get_analyzer()
        synthesizer = factory.get_synthesizer()
        patcher = factory.get_patcher()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Injection settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._analyzer_cache: BaseSyntaxAnalyzer | None = None
        self._synthesizer_cache: BaseIdentifierSynthesizer | None = None
        self._patcher_cache: TextPatcher | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_analyzer(self) -> BaseSyntaxAnalyzer:
        """Get the syntax analyzer.

        Returns:
            A BaseSyntaxAnalyzer implementation instance.
        """
        if self._analyzer_cache is None:
            logger.debug("Instantiating JSX analyzer")

            self._analyzer_cache = JsxSyntaxAnalyzer(
                attribute_name=self._settings.attribute_name,
                detect_reusable_components=self._settings.detect_reusable_components,
                auto_exclude_patterns=self._settings.auto_exclude_patterns,
                descriptor_max_length=self._settings.descriptor_max_length,
            )

        return self._analyzer_cache

    def get_synthesizer(self, strategy: str | None = None) -> BaseIdentifierSynthesizer:
        """Get an identifier synthesizer for the specified strategy.

        Args:
            strategy: The naming strategy to instantiate. If None, uses settings.

        Returns:
            A BaseIdentifierSynthesizer implementation instance.

        Raises:
            ConfigurationError: If the strategy is unknown.
        """
        if self._synthesizer_cache is None or strategy is not None:
            strategy = (strategy or self._settings.strategy).strip().lower()

            logger.debug(f"Instantiating synthesizer: {strategy}")

            match strategy:
                case "functional":
                    synthesizer: BaseIdentifierSynthesizer = FunctionalSynthesizer(
                        attribute_name=self._settings.attribute_name,
                    )
                case "safe-hash":
                    synthesizer = SafeHashSynthesizer(
                        attribute_name=self._settings.attribute_name,
                    )
                case _:
                    raise ConfigurationError(
                        f"Unknown strategy: {strategy}. "
                        f"Valid options: 'functional', 'safe-hash'"
                    )
            self._synthesizer_cache = synthesizer

        return self._synthesizer_cache

    def get_patcher(self) -> TextPatcher:
        """Get the text patcher."""
        if self._patcher_cache is None:
            self._patcher_cache = TextPatcher()
        return self._patcher_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        Useful for testing or when settings change.
        """
        self._analyzer_cache = None
        self._synthesizer_cache = None
        self._patcher_cache = None
        logger.debug("Component factory cache cleared")
