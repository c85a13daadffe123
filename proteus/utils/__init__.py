"""Shared helpers."""

from proteus.utils.hashing import short_stable_hash, to_base36
from proteus.utils.paths import (
    directory_segments,
    normalize_path,
    strip_source_extension,
    wildcard_to_regex,
)

__all__ = [
    "short_stable_hash",
    "to_base36",
    "normalize_path",
    "strip_source_extension",
    "directory_segments",
    "wildcard_to_regex",
]
