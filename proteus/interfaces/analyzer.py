"""Syntax analysis interfaces.

Defines the abstract base class for locating markup-opening elements in a
source document and the element handle shared with the text patcher.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from proteus.models import ElementContext


@dataclass(frozen=True)
class ElementNode:
    """A markup-opening tag located in the source.

    Attributes:
        node: Opaque handle into the parser's tree.
        name: Local tag name, possibly dotted (``Namespace.Member``).
        start_line: 0-based line of the ``<`` token.
        start_column: 0-based character column of the ``<`` token.
        end_line: 0-based line holding the tag's closing token.
        end_column: 0-based character column just past the closing token.
        self_closing: Whether the tag ends with ``/>``.
    """

    node: Any
    name: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    self_closing: bool


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one source document.

    Attributes:
        elements: Element/context pairs still lacking the target attribute,
            in document order.
        existing_identifiers: Identifier values the document already
            carries in the target attribute.
    """

    elements: list[tuple[ElementNode, ElementContext]] = field(default_factory=list)
    existing_identifiers: frozenset[str] = frozenset()


class SourceParseError(Exception):
    """Exception raised when a source document cannot be parsed."""

    pass


class BaseSyntaxAnalyzer(ABC):
    """Abstract base class for markup analysis strategies.

    Produces one ``(ElementNode, ElementContext)`` pair per element that
    should receive a test identifier.
    """

    @abstractmethod
    def analyze(self, source: str, file_path: str) -> AnalysisResult:
        """Locate qualifying elements and gather their context.

        Args:
            source: The full source text.
            file_path: Path of the source, used for naming and exclusion.

        Returns:
            Element/context pairs in document order plus the identifiers
            already present. No elements when the file is excluded or
            classified as a reusable component definition.

        Raises:
            SourceParseError: If the source cannot be parsed.
        """

    @abstractmethod
    def is_excluded_path(self, file_path: str) -> bool:
        """Return True if an operator exclusion pattern matches the path."""

    @property
    @abstractmethod
    def supported_extensions(self) -> set[str]:
        """Return supported file extensions."""

    def supports_file(self, file_path: str) -> bool:
        """Check if this analyzer supports the given file.

        Args:
            file_path: The path to the file to check.

        Returns:
            True if the file extension is supported, False otherwise.
        """
        import os

        _, ext = os.path.splitext(file_path)
        return ext.lower() in self.supported_extensions
