"""Abstract base classes for injection strategies."""

from proteus.interfaces.analyzer import AnalysisResult, BaseSyntaxAnalyzer, ElementNode, SourceParseError
from proteus.interfaces.navigator import BaseTreeNavigator
from proteus.interfaces.synthesizer import BaseIdentifierSynthesizer

__all__ = [
    "AnalysisResult",
    "BaseSyntaxAnalyzer",
    "BaseTreeNavigator",
    "BaseIdentifierSynthesizer",
    "ElementNode",
    "SourceParseError",
]
