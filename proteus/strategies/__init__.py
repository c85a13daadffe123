"""Concrete strategy implementations."""

from proteus.strategies.jsx import (
    JsxSyntaxAnalyzer,
    TextPatcher,
)
from proteus.strategies.naming import (
    FunctionalSynthesizer,
    SafeHashSynthesizer,
)

__all__ = [
    "JsxSyntaxAnalyzer",
    "TextPatcher",
    "FunctionalSynthesizer",
    "SafeHashSynthesizer",
]
