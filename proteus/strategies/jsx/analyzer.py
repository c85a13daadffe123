"""JSX syntax analyzer strategy.

Parses JSX/TSX sources with tree-sitter, locates markup-opening elements
that still lack the target attribute, and pairs each with the context the
naming strategies need.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from proteus.interfaces.analyzer import AnalysisResult, BaseSyntaxAnalyzer, ElementNode
from proteus.models import ElementContext
from proteus.strategies.jsx.context import (
    ContextExtractor,
    attributes,
    element_name,
    expression_of,
    string_value,
)
from proteus.strategies.jsx.navigator import TreeSitterNavigator, parse_source
from proteus.utils.paths import directory_segments, normalize_path, wildcard_to_regex

logger = logging.getLogger(__name__)

OPENING_KINDS = {"jsx_opening_element", "jsx_self_closing_element"}

# Structural, non-interactive tags that never get an identifier.
EXCLUDED_ELEMENTS = frozenset({"br", "hr", "meta", "link", "script", "style"})

SHARED_COMPONENT_FOLDERS = frozenset({"ui", "common", "shared"})

_GENERIC_PROPS = re.compile(r"^(props|rest|\w*Props)$")
_TEMPLATE_SUBSTITUTION = re.compile(r"\$\{([^}]*)\}")


class JsxSyntaxAnalyzer(BaseSyntaxAnalyzer):
    """Finds JSX opening tags that should receive a test identifier.

    Whole files are skipped when an operator exclusion pattern matches the
    path, or when the file looks like a reusable low-level component
    definition (shared UI folder, ref forwarding, props spreading, a single
    kind of child component). Usage sites elsewhere are still instrumented.
    """

    def __init__(
        self,
        attribute_name: str = "data-testid",
        detect_reusable_components: bool = True,
        auto_exclude_patterns: Iterable[str] = (),
        descriptor_max_length: int = 40,
    ) -> None:
        """Initialize the analyzer.

        Args:
            attribute_name: Elements already carrying this attribute are skipped.
            detect_reusable_components: Whether to apply the reusable
                definition heuristic.
            auto_exclude_patterns: ``*`` wildcard patterns matched against
                file paths.
            descriptor_max_length: Maximum descriptor length.
        """
        self._attribute_name = attribute_name
        self._detect_reusable_components = detect_reusable_components
        self._exclude_patterns = [wildcard_to_regex(p) for p in auto_exclude_patterns if p]
        self._descriptor_max_length = descriptor_max_length

    def analyze(self, source: str, file_path: str) -> AnalysisResult:
        path = normalize_path(file_path)
        if self.is_excluded_path(path):
            logger.info(f"Skipping excluded file: {path}")
            return AnalysisResult()

        navigator = parse_source(source, path)

        if self._detect_reusable_components and self.is_reusable_definition(navigator, path):
            logger.info(f"Skipping reusable component definition: {path}")
            return AnalysisResult()

        extractor = ContextExtractor(navigator, path, self._descriptor_max_length)
        found: list[tuple[ElementNode, ElementContext]] = []
        existing: set[str] = set()
        for node in navigator.walk():
            if navigator.kind(node) not in OPENING_KINDS:
                continue
            name = element_name(navigator, node)
            if not name:
                continue
            attrs = attributes(navigator, node)
            if self._attribute_name in attrs:
                identifier = self._identifier_value(navigator, attrs[self._attribute_name])
                if identifier:
                    existing.add(identifier)
                continue
            if name.lower() in EXCLUDED_ELEMENTS:
                continue

            element = self._element_node(navigator, node, name)
            found.append((element, extractor.extract(element)))

        logger.debug(f"Found {len(found)} candidate elements in {path}")
        return AnalysisResult(elements=found, existing_identifiers=frozenset(existing))

    def is_excluded_path(self, file_path: str) -> bool:
        path = normalize_path(file_path)
        return any(pattern.search(path) for pattern in self._exclude_patterns)

    def is_reusable_definition(self, navigator: TreeSitterNavigator, file_path: str) -> bool:
        """Classify a file as a thin reusable wrapper component.

        Args:
            navigator: Navigator over the parsed file.
            file_path: Forward-slash path of the file.

        Returns:
            True only if every heuristic signal is present.
        """
        segments = {segment.lower() for segment in directory_segments(file_path)}
        if not segments & SHARED_COMPONENT_FOLDERS:
            return False

        forwards_ref = False
        spreads_props = False
        component_names: set[str] = set()

        for node in navigator.walk():
            kind = navigator.kind(node)
            if kind == "call_expression" and not forwards_ref:
                forwards_ref = self._is_forward_ref_call(navigator, node)
            elif kind in OPENING_KINDS:
                name = element_name(navigator, node)
                if name and name[0].isupper():
                    component_names.add(name)
                if not spreads_props:
                    spreads_props = self._spreads_generic_props(navigator, node)

        return forwards_ref and spreads_props and len(component_names) <= 1

    @property
    def supported_extensions(self) -> set[str]:
        return {".tsx", ".jsx", ".ts", ".js", ".mjs", ".cjs"}

    @staticmethod
    def _element_node(navigator: TreeSitterNavigator, node: Any, name: str) -> ElementNode:
        start_row, start_byte_col = node.start_point[0], node.start_point[1]
        end_row, end_byte_col = node.end_point[0], node.end_point[1]
        return ElementNode(
            node=node,
            name=name,
            start_line=start_row,
            start_column=navigator.char_column(start_row, start_byte_col),
            end_line=end_row,
            end_column=navigator.char_column(end_row, end_byte_col),
            self_closing=navigator.kind(node) == "jsx_self_closing_element",
        )

    @staticmethod
    def _identifier_value(navigator: TreeSitterNavigator, value: Any | None) -> str | None:
        """Read an identifier already in the file.

        Template literals are flattened the way generated ones are named,
        so ``qa_row_${item.id}`` reads as ``qa_row_item.id``.
        """
        literal = string_value(navigator, value)
        if literal is not None:
            return literal
        if value is None or navigator.kind(value) != "jsx_expression":
            return None
        expression = expression_of(navigator, value)
        if expression is None or navigator.kind(expression) != "template_string":
            return None
        return _TEMPLATE_SUBSTITUTION.sub(r"\1", navigator.text(expression)[1:-1])

    @staticmethod
    def _is_forward_ref_call(navigator: TreeSitterNavigator, node: Any) -> bool:
        callee = navigator.field(node, "function")
        if callee is None:
            return False
        if navigator.kind(callee) == "member_expression":
            callee = navigator.field(callee, "property")
        return callee is not None and navigator.text(callee) == "forwardRef"

    @staticmethod
    def _spreads_generic_props(navigator: TreeSitterNavigator, opening: Any) -> bool:
        for child in navigator.children_of(opening):
            if navigator.kind(child) != "jsx_expression":
                continue
            spread = expression_of(navigator, child)
            if spread is None or navigator.kind(spread) != "spread_element":
                continue
            argument = expression_of(navigator, spread)
            if argument is not None and _GENERIC_PROPS.match(navigator.text(argument)):
                return True
        return False
