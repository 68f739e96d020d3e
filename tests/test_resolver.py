"""
Mapping resolver tests

Tests each rule kind, lookup precedence, modifier validation, ambiguity and
strict spacing.
"""

import copy

import pytest

from bootwind.lib.parser import ClassParser
from bootwind.lib.resolver import MappingResolver
from bootwind.lib.tables import MappingTables, tables_default
from bootwind.lib.defaults import DEFAULT_TABLES
from bootwind.models import RawToken, RuleKind, SpacingStrictness, WarningKind


def resolve(text, tables=None, strictness=SpacingStrictness.APPROXIMATE):
    tables = tables or tables_default()
    parsed = ClassParser(tables).token_parse(RawToken(text=text, position=0))
    return MappingResolver(tables, strictness=strictness).class_resolve(parsed)


class TestRuleKinds:
    """Test one representative class per rule kind"""

    def test_rename(self):
        """d-flex → flex"""
        resolution = resolve("d-flex")

        assert resolution.kind == RuleKind.RENAME
        assert resolution.outputs == ("flex",)
        assert resolution.warnings == ()

    def test_rename_carries_suffix(self):
        """justify-content-between → justify-between"""
        assert resolve("justify-content-between").outputs == ("justify-between",)

    def test_scale_remap(self):
        """Spacing 3 → 4, 4 → 6, 5 → 12; 0-2 unchanged"""
        assert resolve("m-3").outputs == ("m-4",)
        assert resolve("p-4").outputs == ("p-6",)
        assert resolve("mt-5").outputs == ("mt-12",)
        assert resolve("px-2").outputs == ("px-2",)
        assert resolve("mx-auto").outputs == ("mx-auto",)

    def test_scale_remap_full_token_scale(self):
        """Radius scale entries are whole classes"""
        assert resolve("rounded-0").outputs == ("rounded-none",)
        assert resolve("rounded-3").outputs == ("rounded-lg",)

    def test_composite(self):
        """text-bg-primary → background before foreground"""
        resolution = resolve("text-bg-primary")

        assert resolution.kind == RuleKind.COMPOSITE
        assert resolution.outputs == ("bg-blue-600", "text-white")

    def test_composite_dark_contrast(self):
        """Light backgrounds get dark text"""
        assert resolve("text-bg-warning").outputs == ("bg-yellow-400", "text-black")

    def test_exact_composite(self):
        """vstack expands in fixed order"""
        assert resolve("vstack").outputs == ("flex", "flex-1", "flex-col", "self-stretch")

    def test_color_semantic(self):
        """border-success → border-green-600"""
        resolution = resolve("border-success")

        assert resolution.kind == RuleKind.COLOR_SEMANTIC
        assert resolution.outputs == ("border-green-600",)

    def test_shadeless_color(self):
        """bg-white has no shade"""
        assert resolve("bg-white").outputs == ("bg-white",)

    def test_derived_color_variants(self):
        """Bootstrap 5.3 subtle and emphasis variants"""
        assert resolve("bg-primary-subtle").outputs == ("bg-blue-100",)
        assert resolve("text-danger-emphasis").outputs == ("text-red-800",)

    def test_explicit_passthrough(self):
        """container is kept without a warning"""
        resolution = resolve("container")

        assert resolution.kind == RuleKind.PASSTHROUGH
        assert resolution.outputs == ("container",)
        assert resolution.warnings == ()


class TestPrecedence:
    """Test exact-before-stem lookup"""

    def test_exact_beats_stem(self):
        """rounded-circle is an exact rule, not a radius index"""
        assert resolve("rounded-circle").outputs == ("rounded-full",)

    def test_exact_beats_spacing(self):
        """pe-none is pointer-events, not padding-end"""
        assert resolve("pe-none").outputs == ("pointer-events-none",)
        assert resolve("pe-3").outputs == ("pe-4",)

    def test_exact_beats_color(self):
        """text-center is alignment, text-primary is color"""
        assert resolve("text-center").outputs == ("text-center",)
        assert resolve("text-primary").outputs == ("text-blue-600",)

    def test_stem_with_two_disjoint_rules(self):
        """border has width and color rules that never overlap"""
        assert resolve("border-2").outputs == ("border-2",)
        assert resolve("border-danger").outputs == ("border-red-600",)
        assert resolve("border-2").warnings == ()


class TestWarnings:
    """Test passthrough classification"""

    def test_unrecognized(self):
        """Unknown class passes through with UnrecognizedToken"""
        resolution = resolve("btn-glow-xyz")

        assert resolution.verbatim
        assert resolution.kind == RuleKind.PASSTHROUGH
        assert [w.kind for w in resolution.warnings] == [WarningKind.UNRECOGNIZED_TOKEN]
        assert resolution.warnings[0].source_token.text == "btn-glow-xyz"

    def test_unknown_scale_index(self):
        """m-6 does not exist in Bootstrap"""
        resolution = resolve("m-6")

        assert resolution.verbatim
        assert [w.kind for w in resolution.warnings] == [WarningKind.INVALID_MODIFIER_COMBINATION]

    def test_unknown_color_is_unrecognized(self):
        """Tailwind color classes are not Bootstrap classes"""
        resolution = resolve("bg-blue-600")

        assert [w.kind for w in resolution.warnings] == [WarningKind.UNRECOGNIZED_TOKEN]

    def test_breakpoint_on_non_responsive(self):
        """Text color has no responsive variant"""
        resolution = resolve("text-md-primary")

        assert resolution.verbatim
        assert [w.kind for w in resolution.warnings] == [WarningKind.INVALID_MODIFIER_COMBINATION]

    def test_unsupported_state(self):
        """Spacing has no hover variant"""
        resolution = resolve("mt-3-hover")

        assert resolution.verbatim
        assert [w.kind for w in resolution.warnings] == [WarningKind.INVALID_MODIFIER_COMBINATION]

    def test_supported_state(self):
        """link-opacity has a hover variant"""
        resolution = resolve("link-opacity-50-hover")

        assert resolution.outputs == ("text-opacity-50",)
        assert resolution.warnings == ()

    def test_grid_classes_pass_through(self):
        """Grid columns need sibling context and are left alone"""
        resolution = resolve("col-lg-4")

        assert resolution.verbatim
        assert [w.kind for w in resolution.warnings] == [WarningKind.UNRECOGNIZED_TOKEN]


class TestStrictness:
    """Test approximate vs strict scale entries"""

    @staticmethod
    def tables_approximate():
        document = copy.deepcopy(DEFAULT_TABLES)
        document["scales"]["spacing"]["6"] = {"target": "16", "exact": False}
        return MappingTables.from_dict(document)

    def test_approximate_by_default(self):
        """Approximate spacing entries map to the nearest value"""
        resolution = resolve("p-6", tables=self.tables_approximate())

        assert resolution.outputs == ("p-16",)
        assert resolution.warnings == ()

    def test_strict_rejects_approximation(self):
        """Approximate spacing entries are reported under strict"""
        resolution = resolve("p-6", tables=self.tables_approximate(), strictness=SpacingStrictness.STRICT)

        assert resolution.verbatim
        assert [w.kind for w in resolution.warnings] == [WarningKind.INVALID_MODIFIER_COMBINATION]

    def test_strict_keeps_exact_entries(self):
        """Built-in spacing entries are exact"""
        resolution = resolve("m-3", strictness="strict")

        assert resolution.outputs == ("m-4",)
        assert resolution.warnings == ()

    def test_strict_ignores_other_scales(self):
        """Font size approximations are not spacing"""
        resolution = resolve("fs-1", strictness=SpacingStrictness.STRICT)

        assert resolution.outputs == ("text-4xl",)
        assert resolution.warnings == ()


class TestAmbiguity:
    """Test tie-breaking between equal-priority rules"""

    @staticmethod
    def tables_with(*rules):
        document = dict(DEFAULT_TABLES)
        document["rules"] = list(DEFAULT_TABLES["rules"]) + list(rules)
        return MappingTables.from_dict(document)

    def test_first_registered_wins(self):
        """Equal priority: first rule wins and a warning is recorded"""
        tables = self.tables_with(
            {"match": "ring", "kind": "rename", "outputs": ["ring-{value}"]},
            {"match": "ring", "kind": "scale", "outputs": ["ring-{scale}"], "scale": "spacing"},
        )
        resolution = resolve("ring-3", tables=tables)

        assert resolution.outputs == ("ring-3",)
        assert [w.kind for w in resolution.warnings] == [WarningKind.AMBIGUOUS_MAPPING]

    def test_priority_wins(self):
        """Higher priority wins without a warning"""
        tables = self.tables_with(
            {"match": "ring", "kind": "rename", "outputs": ["ring-{value}"]},
            {"match": "ring", "kind": "scale", "outputs": ["ring-{scale}"], "scale": "spacing",
             "priority": 5},
        )
        resolution = resolve("ring-3", tables=tables)

        assert resolution.outputs == ("ring-4",)
        assert resolution.warnings == ()
