"""Text patcher for opening tags.

Inserts generated attributes just before a tag's closing token while
leaving every other character of the source untouched.
"""

import logging
from collections.abc import Iterable

from proteus.interfaces.analyzer import ElementNode

logger = logging.getLogger(__name__)


class TextPatcher:
    """Splices attribute text into a line-split view of the source.

    Only the line holding the tag's closing token is edited, so multi-line
    opening tags keep their layout.
    """

    def insert_attribute(self, lines: list[str], element: ElementNode, attribute_text: str) -> bool:
        """Insert one attribute before the closing ``>`` or ``/>`` of a tag.

        Args:
            lines: Source lines, edited in place.
            element: The tag to patch; its end position must refer to the
                unpatched text of ``lines[element.end_line]``.
            attribute_text: The attribute to insert.

        Returns:
            True if the line was patched, False if the position was out of
            range and the element was skipped.
        """
        if not 0 <= element.end_line < len(lines):
            logger.debug(
                f"Skipping <{element.name}>: end line {element.end_line + 1} "
                f"outside {len(lines)} lines"
            )
            return False

        line = lines[element.end_line]
        closing_width = 2 if element.self_closing else 1
        column = max(0, element.end_column - closing_width)
        if column > len(line):
            logger.debug(f"Skipping <{element.name}>: column {column} past end of line")
            return False

        if column == 0 or line[column - 1] in " \t":
            insertion = f"{attribute_text} "
        else:
            insertion = f" {attribute_text}"
        lines[element.end_line] = line[:column] + insertion + line[column:]
        return True

    def apply(self, source: str, edits: Iterable[tuple[ElementNode, str]]) -> tuple[str, int]:
        """Apply all insertions for one file.

        Edits are applied right-to-left by end position so an insertion
        never shifts a column another edit still has to use.

        Args:
            source: The original text.
            edits: Pairs of element and attribute text, computed against the
                original text.

        Returns:
            The patched text and the number of insertions. With no
            insertion the original text is returned unchanged.
        """
        lines = source.split("\n")
        ordered = sorted(edits, key=lambda edit: (edit[0].end_line, edit[0].end_column), reverse=True)

        inserted = 0
        for element, attribute_text in ordered:
            if self.insert_attribute(lines, element, attribute_text):
                inserted += 1

        if inserted == 0:
            return source, 0
        return "\n".join(lines), inserted
