"""Unit tests for the functional and safe-hash naming strategies."""

import pytest
from pydantic import ValidationError

from proteus.models import ElementContext, SiblingPosition
from proteus.strategies.naming import FunctionalSynthesizer, SafeHashSynthesizer
from proteus.strategies.naming.common import literal_attribute, map_role, template_attribute
from proteus.utils.hashing import short_stable_hash


def _context(**overrides) -> ElementContext:
    base = {
        "element_name": "li",
        "file_path": "src/List.tsx",
        "line_number": 7,
        "column": 6,
        "component_path": ("List",),
    }
    base.update(overrides)
    return ElementContext(**base)


# =============================================================================
# Shared helper Tests
# =============================================================================


class TestMapRole:
    """Test suite for role classification."""

    @pytest.mark.parametrize("tag", ["div", "section", "article", "span", "DIV"])
    def test_generic_containers_collapse(self, tag):
        assert map_role(tag) == "container"

    def test_other_tags_are_lowercased(self):
        assert map_role("Button") == "button"
        assert map_role("img") == "img"
        assert map_role("Menu.Item") == "menu.item"

    @pytest.mark.parametrize(
        "hint,role",
        [
            ("product-item card", "item"),
            ("product-list", "list"),
            ("page-header sticky", "header"),
            ("btn add-to-cart", "button"),
        ],
    )
    def test_class_hints_override(self, hint, role):
        assert map_role("div", hint) == role

    def test_unrelated_class_keeps_role(self):
        assert map_role("ul", "items-grid") == "ul"


class TestAttributeRendering:
    """Test suite for attribute text helpers."""

    def test_literal_uses_double_quotes(self):
        assert literal_attribute("data-testid", "qa_x") == 'data-testid="qa_x"'

    def test_literal_switches_quotes(self):
        assert literal_attribute("data-testid", 'qa_say_"hi"') == "data-testid='qa_say_\"hi\"'"

    def test_template_embeds_expression(self):
        assert template_attribute("data-testid", "qa_list_li", "item.id") == "data-testid={`qa_list_li_${item.id}`}"


# =============================================================================
# Functional Strategy Tests
# =============================================================================


class TestFunctionalSynthesizer:
    """Test suite for FunctionalSynthesizer."""

    @pytest.fixture
    def synthesizer(self):
        """Create a functional synthesizer."""
        return FunctionalSynthesizer()

    def test_name(self, synthesizer):
        assert synthesizer.name == "functional"

    def test_descriptor_makes_identifier_unique(self, synthesizer):
        """Test component, role and descriptor without a hash."""
        context = _context(element_name="input", descriptor="input-email", component_path=("LoginForm",))
        attribute = synthesizer.synthesize(context)
        assert attribute.identifier == "qa_loginform_input_input-email"
        assert attribute.attribute_text == 'data-testid="qa_loginform_input_input-email"'

    def test_descriptor_whitespace_collapsed(self, synthesizer):
        context = _context(element_name="button", descriptor="sign  in")
        assert synthesizer.synthesize(context).identifier == "qa_list_button_sign-in"

    def test_file_slug_when_no_component(self, synthesizer):
        """Test fallback to the extension-less, lower-cased file path plus a hash."""
        context = _context(element_name="div", file_path="src/components/Card.tsx", line_number=5, component_path=None)
        expected_hash = short_stable_hash("src/components/Card.tsx:5:container:")
        assert synthesizer.synthesize(context).identifier == f"qa_src/components/card_container_{expected_hash}"

    def test_sibling_ordinal_is_one_based(self, synthesizer):
        context = _context(sibling_position=SiblingPosition(index=1, total=3))
        assert synthesizer.synthesize(context).identifier == "qa_list_li_2"

    def test_sibling_ordinal_then_descriptor(self, synthesizer):
        context = _context(sibling_position=SiblingPosition(index=0, total=2), descriptor="home")
        assert synthesizer.synthesize(context).identifier == "qa_list_li_1_home"

    def test_identical_siblings_get_distinct_ids(self, synthesizer):
        first = synthesizer.synthesize(_context(sibling_position=SiblingPosition(index=0, total=2)))
        second = synthesizer.synthesize(_context(sibling_position=SiblingPosition(index=1, total=2)))
        assert first.identifier != second.identifier

    def test_literal_key_appended(self, synthesizer):
        """Test that iteration ignores sibling rank and appends the key."""
        context = _context(
            is_inside_iteration=True,
            iteration_key="a",
            sibling_position=SiblingPosition(index=0, total=2),
        )
        attribute = synthesizer.synthesize(context)
        assert attribute.identifier == "qa_list_li_a"
        assert attribute.attribute_text == 'data-testid="qa_list_li_a"'

    @pytest.mark.parametrize("key", ["a", "b", "c"])
    def test_each_literal_key_ends_identifier(self, synthesizer, key):
        context = _context(is_inside_iteration=True, iteration_key=key, descriptor="go")
        assert synthesizer.synthesize(context).identifier.endswith(f"_{key}")

    def test_key_expression_emits_template(self, synthesizer):
        context = _context(
            is_inside_iteration=True,
            iteration_key_expression="item.id",
            static_class_name_hint="item",
            descriptor="name",
        )
        attribute = synthesizer.synthesize(context)
        assert attribute.attribute_text == "data-testid={`qa_list_item_name_${item.id}`}"
        assert attribute.identifier == "qa_list_item_name_item.id"

    def test_index_appended(self, synthesizer):
        context = _context(is_inside_iteration=True, iteration_index=2)
        assert synthesizer.synthesize(context).identifier == "qa_list_li_2"

    def test_iteration_without_key_uses_hash(self, synthesizer):
        context = _context(is_inside_iteration=True)
        expected_hash = short_stable_hash("src/List.tsx:7:li:")
        assert synthesizer.synthesize(context).identifier == f"qa_list_li_{expected_hash}"

    def test_disambiguate_changes_identifier(self, synthesizer):
        context = _context(descriptor="save")
        plain = synthesizer.synthesize(context)
        extra = synthesizer.synthesize(context, disambiguate=True)
        assert plain.identifier == "qa_list_li_save"
        assert extra.identifier == f"qa_list_li_save_{short_stable_hash('src/List.tsx:7:li:save:6')}"

    def test_windows_path_normalized(self, synthesizer):
        posix = _context(element_name="p", component_path=None, file_path="src/App.tsx")
        windows = _context(element_name="p", component_path=None, file_path="src\\App.tsx")
        assert synthesizer.synthesize(posix) == synthesizer.synthesize(windows)

    def test_custom_attribute_name(self):
        synthesizer = FunctionalSynthesizer(attribute_name="data-qa")
        attribute = synthesizer.synthesize(_context(descriptor="x"))
        assert attribute.attribute_text == 'data-qa="qa_list_li_x"'

    def test_deterministic(self, synthesizer):
        context = _context(descriptor="x", is_inside_iteration=True)
        assert synthesizer.synthesize(context) == synthesizer.synthesize(context)


# =============================================================================
# Safe-Hash Strategy Tests
# =============================================================================


class TestSafeHashSynthesizer:
    """Test suite for SafeHashSynthesizer."""

    @pytest.fixture
    def synthesizer(self):
        """Create a safe-hash synthesizer."""
        return SafeHashSynthesizer()

    def test_name(self, synthesizer):
        assert synthesizer.name == "safe-hash"

    def test_base_identifier(self, synthesizer):
        context = _context(element_name="div", file_path="src/App.tsx", line_number=4)
        expected = f"qa_{short_stable_hash('src/App.tsx::div::4')}"
        attribute = synthesizer.synthesize(context)
        assert attribute.identifier == expected
        assert attribute.attribute_text == f'data-testid="{expected}"'

    def test_ignores_component_and_descriptor(self, synthesizer):
        plain = synthesizer.synthesize(_context(component_path=None))
        rich = synthesizer.synthesize(_context(descriptor="save", component_path=("Other",)))
        assert plain.identifier == rich.identifier

    def test_literal_key_suffix(self, synthesizer):
        context = _context(is_inside_iteration=True, iteration_key="b")
        base = f"qa_{short_stable_hash('src/List.tsx::li::7')}"
        assert synthesizer.synthesize(context).identifier == f"{base}_b"

    def test_key_expression_template(self, synthesizer):
        context = _context(is_inside_iteration=True, iteration_key_expression="row.key")
        base = f"qa_{short_stable_hash('src/List.tsx::li::7')}"
        assert synthesizer.synthesize(context).attribute_text == f"data-testid={{`{base}_${{row.key}}`}}"

    def test_index_suffix(self, synthesizer):
        context = _context(is_inside_iteration=True, iteration_index=0)
        assert synthesizer.synthesize(context).identifier.endswith("_0")

    def test_disambiguate_uses_column(self, synthesizer):
        context = _context()
        assert synthesizer.synthesize(context).identifier != synthesizer.synthesize(context, disambiguate=True).identifier


# =============================================================================
# ElementContext Tests
# =============================================================================


class TestElementContext:
    """Test suite for the ElementContext model."""

    def test_key_requires_iteration(self):
        with pytest.raises(ValidationError):
            _context(iteration_key="a")

    def test_index_requires_iteration(self):
        with pytest.raises(ValidationError):
            _context(iteration_index=1)

    def test_frozen(self):
        context = _context()
        with pytest.raises(ValidationError):
            context.line_number = 3
