"""Per-element context extraction for JSX trees.

Every fact is read from the unmodified tree: iteration context, key
recovery, descriptor inference, enclosing component and sibling rank.
"""

import re
from typing import Any

from proteus.interfaces.analyzer import ElementNode
from proteus.interfaces.navigator import BaseTreeNavigator
from proteus.models import ElementContext, SiblingPosition

ELEMENT_KINDS = {"jsx_element", "jsx_self_closing_element"}

FUNCTION_KINDS = {
    "function_declaration",
    "function_expression",
    "function",
    "generator_function_declaration",
    "generator_function",
    "arrow_function",
}

_TRANSPARENT_WRAPPERS = {
    "parenthesized_expression",
    "as_expression",
    "satisfies_expression",
    "non_null_expression",
}

# Only single-level dotted keys (item.id) are safe to re-embed in a template.
_DOTTED_KEY = re.compile(r"^[A-Za-z_$][\w$]*\.[A-Za-z_$][\w$]*$")


def element_name(navigator: BaseTreeNavigator, opening: Any) -> str:
    """Return the tag name of an opening element ("" for fragments)."""
    name_node = navigator.field(opening, "name")
    if name_node is None:
        return ""
    return re.sub(r"\s+", "", navigator.text(name_node))


def opening_of(navigator: BaseTreeNavigator, element: Any) -> Any:
    """Return the opening tag of a ``jsx_element`` (self-closing elements are their own)."""
    if navigator.kind(element) != "jsx_element":
        return element
    open_tag = navigator.field(element, "open_tag")
    if open_tag is not None:
        return open_tag
    return navigator.children_of(element)[0]


def attributes(navigator: BaseTreeNavigator, opening: Any) -> dict[str, Any | None]:
    """Map attribute names to their value nodes (None for bare attributes)."""
    found: dict[str, Any | None] = {}
    for child in navigator.children_of(opening):
        if navigator.kind(child) != "jsx_attribute":
            continue
        parts = navigator.children_of(child)
        if not parts:
            continue
        name = navigator.text(parts[0])
        found.setdefault(name, parts[1] if len(parts) > 1 else None)
    return found


def expression_of(navigator: BaseTreeNavigator, container: Any) -> Any | None:
    """Return the expression inside a ``{...}`` container, skipping comments."""
    for child in navigator.children_of(container):
        if navigator.kind(child) != "comment":
            return child
    return None


def string_value(navigator: BaseTreeNavigator, value: Any | None) -> str | None:
    """Return the literal text of ``"x"`` or ``{"x"}`` attribute values."""
    if value is None:
        return None
    if navigator.kind(value) == "jsx_expression":
        value = expression_of(navigator, value)
        if value is None:
            return None
    if navigator.kind(value) == "string":
        return navigator.text(value)[1:-1]
    return None


def is_map_call(navigator: BaseTreeNavigator, node: Any) -> bool:
    """True for ``<receiver>.map(...)`` calls."""
    if navigator.kind(node) != "call_expression":
        return False
    callee = navigator.field(node, "function")
    if callee is None or navigator.kind(callee) != "member_expression":
        return False
    prop = navigator.field(callee, "property")
    return prop is not None and navigator.text(prop) == "map"


class ContextExtractor:
    """Gathers `ElementContext` facts for elements of one file.

    Attributes:
        navigator: Read-only view of the file's tree.
        file_path: Forward-slash path of the file.
        descriptor_max_length: Descriptors are cut to this many characters.
    """

    def __init__(
        self,
        navigator: BaseTreeNavigator,
        file_path: str,
        descriptor_max_length: int = 40,
    ) -> None:
        self._nav = navigator
        self._file_path = file_path
        self._descriptor_max_length = descriptor_max_length

    def extract(self, element: ElementNode) -> ElementContext:
        """Build the context of one opening element.

        Args:
            element: The located opening tag.

        Returns:
            A fresh context; nothing is cached between elements.
        """
        opening = element.node
        scope = self._element_scope(opening)
        attrs = attributes(self._nav, opening)

        map_call = self._enclosing_map_call(scope)
        key = index = key_expression = None
        if map_call is not None:
            key, key_expression, index = self._iteration_key(scope, attrs, map_call)

        return ElementContext(
            element_name=element.name,
            file_path=self._file_path,
            line_number=element.start_line + 1,
            column=element.start_column,
            is_inside_iteration=map_call is not None,
            iteration_key=key,
            iteration_key_expression=key_expression,
            iteration_index=index,
            descriptor=self._descriptor(element.name, scope, attrs),
            component_path=self._component_path(scope),
            static_class_name_hint=string_value(self._nav, attrs.get("className")),
            sibling_position=self._sibling_position(scope, element.name),
        )

    def _element_scope(self, opening: Any) -> Any:
        if self._nav.kind(opening) == "jsx_opening_element":
            return self._nav.parent(opening)
        return opening

    def _enclosing_map_call(self, scope: Any) -> Any | None:
        for ancestor in self._nav.ancestors(scope):
            if is_map_call(self._nav, ancestor):
                return ancestor
        return None

    def _iteration_key(
        self, scope: Any, attrs: dict[str, Any | None], map_call: Any
    ) -> tuple[str | None, str | None, int | None]:
        if "key" in attrs:
            return self._parse_key(attrs["key"])

        # Wrapper-with-key: the nearest enclosing element inside the same map call.
        for ancestor in self._nav.ancestors(scope):
            if ancestor == map_call:
                break
            if self._nav.kind(ancestor) != "jsx_element":
                continue
            wrapper_attrs = attributes(self._nav, opening_of(self._nav, ancestor))
            if "key" in wrapper_attrs:
                return self._parse_key(wrapper_attrs["key"])
        return None, None, None

    def _parse_key(self, value: Any | None) -> tuple[str | None, str | None, int | None]:
        literal = string_value(self._nav, value)
        if literal is not None:
            return literal, None, None
        if value is None or self._nav.kind(value) != "jsx_expression":
            return None, None, None

        expression = expression_of(self._nav, value)
        if expression is None:
            return None, None, None
        text = self._nav.text(expression).strip()
        if self._nav.kind(expression) == "number" and text.isdigit():
            return None, None, int(text)
        if self._nav.kind(expression) == "member_expression" and _DOTTED_KEY.match(text):
            return None, text, None
        return None, None, None

    def _descriptor(self, name: str, scope: Any, attrs: dict[str, Any | None]) -> str | None:
        tag = name.lower()
        if tag == "input":
            for attr_name in ("placeholder", "type"):
                value = self._normalize(string_value(self._nav, attrs.get(attr_name)))
                if value:
                    return f"input-{value}"
        if tag == "img":
            alt = self._normalize(string_value(self._nav, attrs.get("alt")))
            if alt:
                return f"img-{alt}"

        if self._nav.kind(scope) != "jsx_element":
            return None
        for child in self._nav.children_of(scope):
            kind = self._nav.kind(child)
            if kind == "jsx_text":
                text = self._normalize(self._nav.text(child))
                if text:
                    return text
            elif kind == "jsx_expression":
                expression = expression_of(self._nav, child)
                inferred = self._normalize(self._infer_from_expression(expression))
                if inferred:
                    return inferred
        return None

    def _infer_from_expression(self, expression: Any | None) -> str | None:
        if expression is None:
            return None
        kind = self._nav.kind(expression)
        if kind == "member_expression":
            prop = self._nav.field(expression, "property")
            return self._nav.text(prop) if prop is not None else None
        if kind == "call_expression":
            arguments = self._nav.field(expression, "arguments")
            if arguments is None:
                return None
            for argument in self._nav.children_of(arguments):
                inferred = self._infer_from_expression(argument)
                if inferred:
                    return inferred
        return None

    def _normalize(self, value: str | None) -> str | None:
        if not value:
            return None
        token = re.sub(r"\s+", "-", value.strip().lower())
        token = re.sub(r"[^\w-]", "", token).strip("-")
        token = token[: self._descriptor_max_length].rstrip("-")
        return token or None

    def _component_path(self, scope: Any) -> tuple[str, ...] | None:
        crossed_functions: list[Any] = []
        for ancestor in self._nav.ancestors(scope):
            kind = self._nav.kind(ancestor)
            if kind in FUNCTION_KINDS:
                name_node = self._nav.field(ancestor, "name")
                if name_node is not None:
                    return (self._nav.text(name_node),)
                crossed_functions.append(ancestor)
            elif kind == "variable_declarator":
                name_node = self._nav.field(ancestor, "name")
                assigned = self._assigned_function(self._nav.field(ancestor, "value"))
                if (
                    name_node is not None
                    and self._nav.kind(name_node) == "identifier"
                    and assigned is not None
                    and assigned in crossed_functions
                ):
                    return (self._nav.text(name_node),)
        return None

    def _assigned_function(self, value: Any | None) -> Any | None:
        """Unwrap ``forwardRef(...)``/``memo(...)``/parentheses down to a function node."""
        while value is not None:
            kind = self._nav.kind(value)
            if kind in FUNCTION_KINDS:
                return value
            if kind in _TRANSPARENT_WRAPPERS:
                value = expression_of(self._nav, value)
            elif kind == "call_expression" and not is_map_call(self._nav, value):
                arguments = self._nav.field(value, "arguments")
                value = expression_of(self._nav, arguments) if arguments is not None else None
            else:
                return None
        return None

    def _sibling_position(self, scope: Any, name: str) -> SiblingPosition | None:
        parent = self._nav.parent(scope)
        if parent is None or self._nav.kind(parent) != "jsx_element":
            return None
        same_named = [
            child
            for child in self._nav.children_of(parent)
            if self._nav.kind(child) in ELEMENT_KINDS
            and element_name(self._nav, opening_of(self._nav, child)) == name
        ]
        if len(same_named) <= 1:
            return None
        for index, child in enumerate(same_named):
            if child == scope:
                return SiblingPosition(index=index, total=len(same_named))
        return None
