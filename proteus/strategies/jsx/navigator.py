"""Tree-sitter backed navigation over JSX/TSX sources."""

import logging
import os
from typing import Any

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

from proteus.interfaces.analyzer import SourceParseError
from proteus.interfaces.navigator import BaseTreeNavigator

logger = logging.getLogger(__name__)

_LANGUAGE_BY_EXTENSION = {
    ".tsx": "tsx",
    ".ts": "tsx",
    ".jsx": "javascript",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}


def language_for(file_path: str) -> str:
    """Pick the grammar for a file; unknown extensions use the TSX grammar."""
    _, ext = os.path.splitext(file_path)
    return _LANGUAGE_BY_EXTENSION.get(ext.lower(), "tsx")


class TreeSitterNavigator(BaseTreeNavigator):
    """Read-only navigation over a tree-sitter tree.

    tree-sitter reports columns as UTF-8 byte offsets; `char_column`
    converts them for edits on the decoded text.
    """

    def __init__(self, tree: Tree, source_bytes: bytes) -> None:
        self._tree = tree
        self._source_bytes = source_bytes
        self._byte_lines = source_bytes.split(b"\n")

    @property
    def root(self) -> Node:
        return self._tree.root_node

    def parent(self, node: Node) -> Node | None:
        return node.parent

    def children_of(self, node: Node, named_only: bool = True) -> list[Node]:
        return list(node.named_children if named_only else node.children)

    def kind(self, node: Node) -> str:
        return node.type

    def text(self, node: Any) -> str:
        return self._source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def field(self, node: Node, name: str) -> Node | None:
        return node.child_by_field_name(name)

    def char_column(self, row: int, byte_column: int) -> int:
        """Convert a byte column on ``row`` to a character column."""
        if row >= len(self._byte_lines):
            return byte_column
        return len(self._byte_lines[row][:byte_column].decode("utf-8", errors="ignore"))


def parse_source(source: str, file_path: str) -> TreeSitterNavigator:
    """Parse JSX/TSX source into a navigator.

    Args:
        source: The full source text.
        file_path: Path of the source; its extension selects the grammar.

    Returns:
        A navigator over the parsed tree.

    Raises:
        SourceParseError: If the tree contains syntax errors.
    """
    language = language_for(file_path)
    source_bytes = source.encode("utf-8")
    tree = get_parser(language).parse(source_bytes)

    if tree.root_node.has_error:
        error_node = _first_error(tree.root_node)
        if error_node is not None:
            line, column = error_node.start_point[0] + 1, error_node.start_point[1]
            raise SourceParseError(f"Syntax error in {file_path} at line {line}, column {column}")
        raise SourceParseError(f"Syntax error in {file_path}")

    logger.debug(f"Parsed {file_path} with the {language} grammar")
    return TreeSitterNavigator(tree, source_bytes)


def _first_error(root: Node) -> Node | None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None
