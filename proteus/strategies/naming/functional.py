"""Functional naming strategy.

Builds human-readable identifiers from the enclosing component, a coarse
role for the tag, the sibling ordinal and a semantic descriptor:
``qa_<component>_<role>[_<ordinal>][_<descriptor>]``.
"""

import logging
import re

from proteus.interfaces.synthesizer import BaseIdentifierSynthesizer
from proteus.models import ElementContext, GeneratedAttribute
from proteus.strategies.naming.common import has_iteration_identity, map_role, with_iteration_suffix
from proteus.utils.hashing import short_stable_hash
from proteus.utils.paths import normalize_path, strip_source_extension

logger = logging.getLogger(__name__)


class FunctionalSynthesizer(BaseIdentifierSynthesizer):
    """Readable identifiers anchored to the enclosing component name.

    A short stable hash is appended only when nothing else tells the
    element apart: no key or index inside an iteration, or neither a
    descriptor nor a sibling ordinal outside one.
    """

    @property
    def name(self) -> str:
        return "functional"

    def synthesize(self, context: ElementContext, disambiguate: bool = False) -> GeneratedAttribute:
        component = self._component_slug(context)
        role = map_role(context.element_name, context.static_class_name_hint)
        descriptor = re.sub(r"\s+", "-", context.descriptor) if context.descriptor else None

        sibling_ordinal = None
        position = context.sibling_position
        if position is not None and position.total > 1 and not context.is_inside_iteration:
            sibling_ordinal = str(position.index + 1)

        base = "_".join(part for part in (f"qa_{component}", role, sibling_ordinal, descriptor) if part)

        if context.is_inside_iteration:
            needs_hash = not has_iteration_identity(context)
        else:
            needs_hash = sibling_ordinal is None and descriptor is None

        if needs_hash or disambiguate:
            hash_input = f"{normalize_path(context.file_path)}:{context.line_number}:{role}:{descriptor or ''}"
            if disambiguate:
                hash_input += f":{context.column}"
            base = f"{base}_{short_stable_hash(hash_input)}"
            logger.debug(f"Hash suffix for {context.element_name} at line {context.line_number}: {base}")

        return with_iteration_suffix(self.attribute_name, base, context)

    @staticmethod
    def _component_slug(context: ElementContext) -> str:
        if context.component_path:
            return context.component_path[0].lower()
        return strip_source_extension(normalize_path(context.file_path)).lower()
