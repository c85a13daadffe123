"""Injection engine.

Composes the analyzer, the naming strategy and the text patcher into a
single per-file transformation: parse, gather context for every element,
name each one, then splice all attributes into the original text.
"""

import logging
from collections.abc import Iterable

from proteus.core.config import ConfigurationError, Settings, validate_settings
from proteus.core.factory import ComponentFactory
from proteus.interfaces.analyzer import ElementNode, SourceParseError
from proteus.models import ElementContext, ErrorRecord, TransformResult

logger = logging.getLogger(__name__)


class InjectionEngine:
    """Adds test-identifier attributes to one source file at a time.

    The engine keeps no state between files, so one instance can serve
    many files, and independent instances can run in parallel as long as
    each file is read and written by a single worker.
    """

    def __init__(self, settings: Settings | None = None, factory: ComponentFactory | None = None) -> None:
        """Initialize the engine.

        Args:
            settings: Injection settings. If None, loaded from the environment.
            factory: Optional component factory, mainly for tests.

        Raises:
            ConfigurationError: If the settings name an unknown strategy, or
                differ from the settings the factory was built with.
        """
        if factory is not None and settings is not None and settings != factory.settings:
            raise ConfigurationError("Settings differ from the settings of the given factory")
        if factory is None:
            factory = ComponentFactory(settings or Settings())
        self._settings = validate_settings(factory.settings)
        self._analyzer = factory.get_analyzer()
        self._synthesizer = factory.get_synthesizer()
        self._patcher = factory.get_patcher()

    @property
    def settings(self) -> Settings:
        return self._settings

    def inject(self, file_path: str, source: str) -> TransformResult:
        """Inject identifiers into one file's source.

        Never raises: failures are reported on the result and leave the
        source untouched.

        Args:
            file_path: Path of the file (used for naming and exclusion).
            source: The file's text.

        Returns:
            The (possibly) modified code, the number of insertions and an
            optional error record.
        """
        try:
            analysis = self._analyzer.analyze(source, file_path)
        except SourceParseError as e:
            logger.warning(f"Could not parse {file_path}: {e}")
            return TransformResult(
                code=source,
                error=ErrorRecord(kind="parse_failure", message=str(e), file_path=file_path),
            )
        except Exception as e:
            logger.error(f"Analysis of {file_path} failed: {e}", exc_info=True)
            return TransformResult(
                code=source,
                error=ErrorRecord(kind="processing_failure", message=str(e), file_path=file_path),
            )

        try:
            # Every name is computed before the first edit touches the text.
            edits = self._plan(analysis.elements, analysis.existing_identifiers)
            code, injected = self._patcher.apply(source, edits)
        except Exception as e:
            logger.error(f"Injection into {file_path} failed: {e}", exc_info=True)
            return TransformResult(
                code=source,
                error=ErrorRecord(kind="processing_failure", message=str(e), file_path=file_path),
            )

        if injected:
            logger.info(f"Injected {injected} test IDs in {file_path}")
        return TransformResult(code=code, injected_count=injected)

    def _plan(
        self,
        elements: list[tuple[ElementNode, ElementContext]],
        existing_identifiers: Iterable[str] = (),
    ) -> list[tuple[ElementNode, str]]:
        # Identifiers from earlier runs stay reserved for this file.
        issued: set[str] = set(existing_identifiers)
        edits: list[tuple[ElementNode, str]] = []
        for element, context in elements:
            attribute = self._synthesizer.synthesize(context)
            if attribute.identifier in issued:
                logger.debug(f"Identifier collision for {attribute.identifier}, disambiguating")
                attribute = self._synthesizer.synthesize(context, disambiguate=True)
            issued.add(attribute.identifier)
            edits.append((element, attribute.attribute_text))
        return edits


def inject_source(file_path: str, source: str, settings: Settings | None = None) -> TransformResult:
    """Inject identifiers into one file's source with a throwaway engine.

    Args:
        file_path: Path of the file.
        source: The file's text.
        settings: Injection settings. If None, loaded from the environment.

    Returns:
        The per-file result record.

    Raises:
        ConfigurationError: If the settings name an unknown strategy.
    """
    return InjectionEngine(settings).inject(file_path, source)
