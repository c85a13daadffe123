"""Path helpers shared by the analyzer and the naming strategies."""

import re
from pathlib import PurePosixPath

_SOURCE_EXTENSION = re.compile(r"\.(tsx|jsx|ts|js|mjs|cjs)$", re.IGNORECASE)


def normalize_path(path: str) -> str:
    """Return the forward-slash form of a path."""
    return path.replace("\\", "/")


def strip_source_extension(path: str) -> str:
    """Drop a trailing JS/TS source extension, if any."""
    return _SOURCE_EXTENSION.sub("", path)


def directory_segments(path: str) -> list[str]:
    """Return the directory components of a path (file name excluded)."""
    return list(PurePosixPath(normalize_path(path)).parts[:-1])


def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a ``*`` wildcard pattern into an unanchored regex.

    Every character other than ``*`` matches literally; ``*`` matches any
    run of characters, including path separators.
    """
    parts = [re.escape(piece) for piece in normalize_path(pattern).split("*")]
    return re.compile(".*".join(parts))
