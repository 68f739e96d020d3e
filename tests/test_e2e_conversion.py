"""
End-to-end conversion tests

Tests the full pipeline: class attribute → Lexer → Parser → Resolver →
Remapper → Composer → ConversionResult

Validates the documented conversions, the per-token degradation to
passthrough and the configuration surface.
"""

import pytest

from bootwind import Converter, ConfigError, convert, tables_load
from bootwind.config import AppSettings
from bootwind.models import WarningKind


TABLES_YAML = """
breakpoints:
  bootstrap: {sm: 576, md: 768}
  tailwind: {sm: 640, md: 768}
colors:
  primary: {color: indigo, shade: 500}
scales:
  spacing: {0: "0", 3: {target: "4", exact: false}}
rules:
  - {match: m, kind: scale, outputs: ["m-{scale}"], scale: spacing, responsive: true}
  - {match: d-none, kind: rename, outputs: [hidden], exact: true, responsive: true}
  - {match: text, kind: color, outputs: ["text-{color}"]}
"""


@pytest.fixture(scope="module")
def converter():
    return Converter(verbosity=0)


class TestDocumentedScenarios:
    """Test the reference conversions"""

    @pytest.mark.parametrize("source,expected", [
        ("d-flex", "flex"),
        ("d-none d-md-block", "hidden md:block"),
        ("text-bg-primary", "bg-blue-600 text-white"),
        ("m-3 p-4", "m-4 p-6"),
        ("rounded-circle border-success", "rounded-full border-green-600"),
    ])
    def test_clean_conversion(self, converter, source, expected):
        """Known classes convert without warnings"""
        result = converter.convert(source)

        assert result.classes == expected
        assert result.warnings == ()
        assert result.status_code == 0

    def test_unknown_class(self, converter):
        """Unknown class passes through with one warning at position 0"""
        result = converter.convert("btn-glow-xyz")

        assert result.classes == "btn-glow-xyz"
        assert len(result.warnings) == 1
        assert result.warnings[0].kind == WarningKind.UNRECOGNIZED_TOKEN
        assert result.warnings[0].source_token.position == 0
        assert result.status_code == 1

    def test_module_level_convert(self):
        """Convenience function uses the built-in tables"""
        assert convert("m-3 p-4", verbosity=0).classes == "m-4 p-6"


class TestPipelineProperties:
    """Test properties that hold for every input"""

    def test_empty_input(self, converter):
        """Empty attribute converts to nothing"""
        result = converter.convert("   ")

        assert result.output_classes == ()
        assert result.warnings == ()

    def test_composites_only_add(self, converter):
        """Output is never shorter than the input token list"""
        source = "vstack text-bg-warning m-2 fixed-top btn"
        result = converter.convert(source)

        assert len(result.output_classes) >= len(source.split())

    def test_composite_outputs_contiguous(self, converter):
        """Composite expansion sits at its source position"""
        result = converter.convert("m-1 text-bg-warning p-2")

        assert result.output_classes == ("m-1", "bg-yellow-400", "text-black", "p-2")

    def test_unmatched_keeps_position(self, converter):
        """Unmatched token stays in place and is reported with its index"""
        result = converter.convert("d-flex card-body mt-3")

        assert result.output_classes == ("flex", "card-body", "mt-4")
        assert [(w.source_token.text, w.source_token.position) for w in result.warnings] == [
            ("card-body", 1),
        ]

    def test_duplicates_preserved(self, converter):
        """Duplicate tokens are not deduplicated"""
        assert converter.convert("m-3 m-3").classes == "m-4 m-4"

    def test_deterministic(self, converter):
        """Same input and configuration give identical output"""
        source = "d-none d-lg-flex justify-content-between text-bg-info bogus"

        assert converter.convert(source) == converter.convert(source)

    def test_tailwind_input_passes_through(self, converter):
        """Tailwind classes are left alone, one warning each"""
        source = "hidden md:flex bg-blue-600 space-x-4"
        result = converter.convert(source)

        assert result.classes == source
        assert len(result.warnings) == 4
        assert all(w.kind == WarningKind.UNRECOGNIZED_TOKEN for w in result.warnings)

    def test_warnings_in_source_order(self, converter):
        """Warnings follow token order"""
        result = converter.convert("foo m-6 bar")

        assert [w.source_token.position for w in result.warnings] == [0, 1, 2]
        assert result.warnings[1].kind == WarningKind.INVALID_MODIFIER_COMBINATION


class TestVariants:
    """Test responsive, print, state and important variants"""

    def test_responsive_chain(self, converter):
        """Each tier keeps its own prefix"""
        result = converter.convert("d-none d-sm-block d-xl-flex d-xxl-grid")

        assert result.classes == "hidden sm:block xl:flex 2xl:grid"

    def test_print(self, converter):
        """Print infix becomes the print variant"""
        assert converter.convert("d-print-none").classes == "print:hidden"

    def test_important_after_variants(self, converter):
        """Important marker goes on the utility, after the variants"""
        assert converter.convert("!d-md-none").classes == "md:!hidden"

    def test_hover_state(self, converter):
        """Trailing hover state becomes the hover variant"""
        assert converter.convert("link-opacity-50-hover").classes == "hover:text-opacity-50"

    def test_important_composite(self, converter):
        """Every composite output is marked important"""
        assert converter.convert("!text-bg-primary").classes == "!bg-blue-600 !text-white"

    def test_composite_with_own_variant(self, converter):
        """Variants in a composite output stay inside the prefix"""
        result = converter.convert("visually-hidden-focusable")

        assert result.classes == "sr-only focus:not-sr-only"

    def test_responsive_composite(self, converter):
        """Responsive composite prefixes each output"""
        assert converter.convert("sticky-md-top").classes == "md:sticky md:top-0 md:z-20"

    def test_grid_classes_unmapped(self, converter):
        """Grid columns need sibling context and pass through"""
        result = converter.convert("col-md-6 col-lg")

        assert result.classes == "col-md-6 col-lg"
        assert [w.kind for w in result.warnings] == [WarningKind.UNRECOGNIZED_TOKEN] * 2


class TestConfiguration:
    """Test converter options"""

    def test_exact_breakpoints(self):
        """Exact strategy attaches the custom screens"""
        result = Converter(breakpoint_strategy="exact", verbosity=0).convert("d-none d-lg-block")

        assert result.classes == "hidden lg:block"
        assert result.custom_screens["lg"] == "992px"

    def test_exact_without_breakpoints(self):
        """No custom screens when nothing is responsive"""
        result = Converter(breakpoint_strategy="exact", verbosity=0).convert("d-none")

        assert result.custom_screens is None

    def test_nearest_has_no_screens(self, converter):
        """Default strategy never asks for custom screens"""
        assert converter.convert("d-md-flex").custom_screens is None

    def test_strict_spacing(self, tmp_path):
        """Strict mode reports approximated spacing values only"""
        path = tmp_path / "tables.yaml"
        path.write_text(TABLES_YAML)
        strict = Converter(tables=tables_load(path), spacing_strictness="strict", verbosity=0)

        result = strict.convert("m-3 m-0")

        assert result.classes == "m-3 m-0"
        assert [w.kind for w in result.warnings] == [WarningKind.INVALID_MODIFIER_COMBINATION]

    def test_strict_builtin_tables(self):
        """Built-in spacing is exact, other scales keep their nearest value"""
        result = Converter(spacing_strictness="strict", verbosity=0).convert("fs-1 m-3")

        assert result.classes == "text-4xl m-4"
        assert result.warnings == ()

    def test_string_override_keeps_variants(self):
        """A bare color name keeps the shade, so variants still resolve"""
        overridden = Converter(color_overrides={"primary": "indigo"}, verbosity=0)
        result = overridden.convert("bg-primary bg-primary-subtle text-primary-emphasis")

        assert result.classes == "bg-indigo-600 bg-indigo-100 text-indigo-800"
        assert result.warnings == ()

    def test_color_overrides(self):
        """Overrides reach color rules and derived variants"""
        overridden = Converter(
            color_overrides={"primary": {"color": "indigo", "shade": 500}}, verbosity=0
        )
        result = overridden.convert("text-bg-primary bg-primary-subtle text-primary")

        assert result.classes == "bg-indigo-500 text-white bg-indigo-100 text-indigo-500"

    def test_bad_override(self):
        """Malformed overrides fail before any conversion"""
        with pytest.raises(ConfigError):
            Converter(color_overrides={"primary": {"shade": 500}})

    def test_unknown_strategy(self):
        """Strategy names form a closed set"""
        with pytest.raises(ValueError):
            Converter(breakpoint_strategy="closest")


class TestSettings:
    """Test building converters from AppSettings"""

    def test_settings_apply(self):
        """Settings carry strategy and overrides"""
        settings = AppSettings(
            breakpoint_strategy="exact",
            color_overrides={"success": {"color": "emerald", "shade": 500}},
            verbosity=0,
        )
        result = Converter.settings_apply(settings).convert("border-success d-md-none")

        assert result.classes == "border-emerald-500 md:hidden"
        assert result.custom_screens is not None

    def test_settings_tables_file(self, tmp_path):
        """Tables file replaces the built-in tables"""
        path = tmp_path / "tables.yaml"
        path.write_text(TABLES_YAML)
        settings = AppSettings(tables_file=str(path), verbosity=0)

        result = Converter.settings_apply(settings).convert("m-3 text-primary d-none d-flex")

        assert result.classes == "m-4 text-indigo-500 hidden d-flex"
        assert len(result.warnings) == 1

    def test_settings_bad_tables_file(self, tmp_path):
        """Missing tables file is a configuration error"""
        settings = AppSettings(tables_file=str(tmp_path / "missing.yaml"), verbosity=0)

        with pytest.raises(ConfigError):
            Converter.settings_apply(settings)

    def test_env_settings(self, monkeypatch):
        """Settings read BOOTWIND_ environment variables"""
        monkeypatch.setenv("BOOTWIND_SPACING_STRICTNESS", "strict")
        monkeypatch.setenv("BOOTWIND_COLOR_OVERRIDES", '{"primary": {"color": "indigo", "shade": 500}}')

        settings = AppSettings()

        assert settings.spacing_strictness == "strict"
        assert settings.colorOverrides_get() == {"primary": {"color": "indigo", "shade": 500}}


class TestBatchAndOutput:
    """Test batch conversion and result serialization"""

    def test_batch_order(self, converter):
        """Batch results line up with inputs"""
        sources = [f"m-{i % 6} d-none" for i in range(40)]

        results = converter.batch_convert(sources, max_workers=4)

        assert [r.classes for r in results] == [converter.convert(s).classes for s in sources]

    def test_batch_empty(self, converter):
        """Empty batch returns an empty list"""
        assert converter.batch_convert([]) == []

    def test_as_dict(self, converter):
        """Result serializes to the documented shape"""
        data = converter.convert("d-flex bogus").as_dict()

        assert data == {
            "outputClasses": "flex bogus",
            "warnings": [{
                "sourceToken": {"text": "bogus", "position": 1},
                "kind": "UnrecognizedToken",
                "message": "No rule for 'bogus'",
            }],
            "customScreens": None,
        }
