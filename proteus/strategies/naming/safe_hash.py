"""Safe-hash naming strategy.

Opaque identifiers (``qa_<hash>``) derived from the file path, tag name
and line. Insensitive to component renames and to text edits.
"""

from proteus.interfaces.synthesizer import BaseIdentifierSynthesizer
from proteus.models import ElementContext, GeneratedAttribute
from proteus.strategies.naming.common import with_iteration_suffix
from proteus.utils.hashing import short_stable_hash
from proteus.utils.paths import normalize_path


class SafeHashSynthesizer(BaseIdentifierSynthesizer):
    """Hash-only identifiers with the shared iteration suffix rules."""

    @property
    def name(self) -> str:
        return "safe-hash"

    def synthesize(self, context: ElementContext, disambiguate: bool = False) -> GeneratedAttribute:
        hash_input = f"{normalize_path(context.file_path)}::{context.element_name}::{context.line_number}"
        base = f"qa_{short_stable_hash(hash_input)}"
        if disambiguate:
            base = f"{base}_{short_stable_hash(f'{hash_input}::{context.column}')}"
        return with_iteration_suffix(self.attribute_name, base, context)
