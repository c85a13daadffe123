"""Concrete naming strategies."""

from proteus.strategies.naming.functional import FunctionalSynthesizer
from proteus.strategies.naming.safe_hash import SafeHashSynthesizer

__all__ = [
    "FunctionalSynthesizer",
    "SafeHashSynthesizer",
]
