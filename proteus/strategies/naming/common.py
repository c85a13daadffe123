"""Helpers shared by the naming strategies."""

import re

from proteus.models import ElementContext, GeneratedAttribute

_GENERIC_CONTAINERS = {"div", "section", "article", "span"}

# First match wins.
_CLASS_ROLE_HINTS = (
    (re.compile(r"\bitem\b"), "item"),
    (re.compile(r"\bproduct-list\b"), "list"),
    (re.compile(r"\bheader\b"), "header"),
    (re.compile(r"\badd-to-cart\b"), "button"),
)


def map_role(element_name: str, class_name_hint: str | None = None) -> str:
    """Map a tag name to a coarse role, refined by a static class hint."""
    name = element_name.lower()
    role = "container" if name in _GENERIC_CONTAINERS else name
    if class_name_hint:
        for pattern, hinted_role in _CLASS_ROLE_HINTS:
            if pattern.search(class_name_hint):
                return hinted_role
    return role


def has_iteration_identity(context: ElementContext) -> bool:
    """True when an iterated element carries a key or index to tell instances apart."""
    return (
        context.iteration_key is not None
        or context.iteration_key_expression is not None
        or context.iteration_index is not None
    )


def literal_attribute(attribute_name: str, value: str) -> str:
    """Render ``name="value"``, switching quotes if the value holds a double quote."""
    if '"' not in value:
        return f'{attribute_name}="{value}"'
    if "'" not in value:
        return f"{attribute_name}='{value}'"
    return f'{attribute_name}="{value.replace(chr(34), "")}"'


def template_attribute(attribute_name: str, prefix: str, expression: str) -> str:
    """Render ``name={`prefix_${expression}`}`` for a per-render identifier."""
    static = prefix.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
    return f"{attribute_name}={{`{static}_${{{expression}}}`}}"


def with_iteration_suffix(
    attribute_name: str, base: str, context: ElementContext
) -> GeneratedAttribute:
    """Append the iteration key, key expression or index to a base identifier.

    Elements outside an iteration, or without any recovered key, keep the
    base identifier as is.
    """
    if context.is_inside_iteration:
        if context.iteration_key is not None:
            identifier = f"{base}_{context.iteration_key}"
            return GeneratedAttribute(
                attribute_text=literal_attribute(attribute_name, identifier),
                identifier=identifier,
            )
        if context.iteration_key_expression is not None:
            expression = context.iteration_key_expression
            return GeneratedAttribute(
                attribute_text=template_attribute(attribute_name, base, expression),
                identifier=f"{base}_{expression}",
            )
        if context.iteration_index is not None:
            identifier = f"{base}_{context.iteration_index}"
            return GeneratedAttribute(
                attribute_text=literal_attribute(attribute_name, identifier),
                identifier=identifier,
            )

    return GeneratedAttribute(
        attribute_text=literal_attribute(attribute_name, base),
        identifier=base,
    )
