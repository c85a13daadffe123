"""JSX/TSX analysis and patching.

Locates markup-opening elements with tree-sitter and splices generated
attributes into the original text.
"""

from proteus.strategies.jsx.analyzer import JsxSyntaxAnalyzer
from proteus.strategies.jsx.context import ContextExtractor
from proteus.strategies.jsx.navigator import TreeSitterNavigator, language_for, parse_source
from proteus.strategies.jsx.patcher import TextPatcher

__all__ = [
    "JsxSyntaxAnalyzer",
    "ContextExtractor",
    "TreeSitterNavigator",
    "TextPatcher",
    "language_for",
    "parse_source",
]
