"""Abstract base class for identifier naming strategies.

The Strategy Pattern allows different naming schemes to be selected
at runtime from configuration.
"""

from abc import ABC, abstractmethod

from proteus.models import ElementContext, GeneratedAttribute


class BaseIdentifierSynthesizer(ABC):
    """Abstract base class for test-identifier naming strategies.

    All concrete strategies must inherit from this class and implement
    the `synthesize` method.

    Example:
        ```python
        class SafeHashSynthesizer(BaseIdentifierSynthesizer):
            def synthesize(self, context, disambiguate=False):
                # Hash the element position
                pass
        ```
    """

    def __init__(self, attribute_name: str = "data-testid") -> None:
        """Initialize the synthesizer.

        Args:
            attribute_name: Name of the attribute to emit.
        """
        self._attribute_name = attribute_name

    @abstractmethod
    def synthesize(self, context: ElementContext, disambiguate: bool = False) -> GeneratedAttribute:
        """Turn an element's context into an attribute.

        Args:
            context: Facts gathered for the element.
            disambiguate: If True, the previous identifier for this context
                collided with one already issued in the file; fold in extra
                positional entropy.

        Returns:
            The attribute text and its plain identifier value.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the strategy name used in configuration."""
        ...

    @property
    def attribute_name(self) -> str:
        """Return the attribute this strategy emits."""
        return self._attribute_name
