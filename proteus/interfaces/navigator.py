"""Abstract read-only navigation over a parsed syntax tree.

Context extraction only ever asks structural questions (parent, ancestors,
children, node kind, node text), so analyzers depend on this interface
instead of any specific parser's object model.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class BaseTreeNavigator(ABC):
    """Read-only navigation capability over one syntax tree.

    Nodes are opaque handles owned by the underlying parser.
    """

    @property
    @abstractmethod
    def root(self) -> Any:
        """Return the root node of the tree."""

    @abstractmethod
    def parent(self, node: Any) -> Any | None:
        """Return the parent of a node, or None for the root."""

    @abstractmethod
    def children_of(self, node: Any, named_only: bool = True) -> list[Any]:
        """Return the children of a node in document order.

        Args:
            node: The node to inspect.
            named_only: If True, anonymous tokens (punctuation) are omitted.
        """

    @abstractmethod
    def kind(self, node: Any) -> str:
        """Return the grammar type of a node."""

    @abstractmethod
    def text(self, node: Any) -> str:
        """Return the exact source text covered by a node."""

    @abstractmethod
    def field(self, node: Any, name: str) -> Any | None:
        """Return the child stored under a grammar field name."""

    def ancestors(self, node: Any) -> Iterator[Any]:
        """Yield the ancestors of a node, innermost first."""
        current = self.parent(node)
        while current is not None:
            yield current
            current = self.parent(current)

    def walk(self, node: Any | None = None) -> Iterator[Any]:
        """Yield every named node below ``node`` in document (pre-)order."""
        stack = [node if node is not None else self.root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self.children_of(current)))
