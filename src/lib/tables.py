"""
Mapping tables for Bootstrap to Tailwind conversion.

The tables hold every piece of static data the engine consults: breakpoint
tiers for both frameworks, semantic colors, scale-remap tables, the stem
vocabulary used by the parser and the mapping rules used by the resolver.

Tables are built once, validated on construction and never modified. They
are passed explicitly to the pipeline stages, so alternate tables can be
injected anywhere. A table document can also be loaded from YAML:

    breakpoints:
      bootstrap: {sm: 576, md: 768, lg: 992, xl: 1200, xxl: 1400}
      tailwind: {sm: 640, md: 768, lg: 1024, xl: 1280, 2xl: 1536}
    colors:
      primary: {color: blue, shade: 600, contrast: white}
    scales:
      spacing: {0: "0", 3: "4", 5: {target: "12", exact: true}}
    stems: [col]
    bare_responsive: [col]
    spacing_scales: [spacing]
    rules:
      - {match: d-none, kind: rename, outputs: [hidden], exact: true, responsive: true}
"""

from types import MappingProxyType
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import yaml

from ..models.rules import ColorSpec, MappingRule, RuleKind, ScaleEntry
from ..models.breakpoints import BreakpointOrigin, BreakpointSpec


class BootwindError(Exception):
    """Base class for bootwind errors"""
    pass


class ConfigError(BootwindError):
    """Raised when mapping tables or settings are malformed"""
    pass


# Placeholders a template may use, per rule kind
TEMPLATE_PLACEHOLDERS: Dict[RuleKind, frozenset] = {
    RuleKind.RENAME: frozenset({"value"}),
    RuleKind.SCALE_REMAP: frozenset({"scale", "value"}),
    RuleKind.COMPOSITE: frozenset({"color", "contrast"}),
    RuleKind.COLOR_SEMANTIC: frozenset({"color", "contrast"}),
    RuleKind.PASSTHROUGH: frozenset(),
}

# Shades used for Bootstrap 5.3 "-subtle" and "-emphasis" color variants
COLOR_VARIANT_SHADES: Dict[str, int] = {
    "subtle": 100,
    "emphasis": 800,
}

STATE_SUFFIXES: Tuple[str, ...] = ("hover", "focus")
MEDIA_MODIFIERS: Tuple[str, ...] = ("print",)

# Scales strict spacing applies to when a document names none
DEFAULT_SPACING_SCALES: Tuple[str, ...] = ("spacing", "margin")


def colors_deriveVariants(base_colors: Mapping[str, ColorSpec]) -> Dict[str, ColorSpec]:
    """
    Add "-subtle" and "-emphasis" variants for every shaded base color.

    Variants already present in base_colors are kept as given and are not
    themselves expanded.

    Example:
        {"primary": ColorSpec("blue", 600)} gains
        "primary-subtle" -> blue-100 and "primary-emphasis" -> blue-800
    """
    colors: Dict[str, ColorSpec] = dict(base_colors)
    suffixes = tuple(f"-{variant}" for variant in COLOR_VARIANT_SHADES)
    for name, spec in base_colors.items():
        if spec.shade is None or name.endswith(suffixes):
            continue
        for variant, shade in COLOR_VARIANT_SHADES.items():
            key = f"{name}-{variant}"
            if key not in colors:
                contrast = "black" if shade < 500 else "white"
                colors[key] = ColorSpec(color=spec.color, shade=shade, contrast=contrast)
    return colors


class MappingTables:
    """
    Immutable, validated set of conversion tables

    Attributes:
        bootstrap_breakpoints: Bootstrap tiers, ascending by width
        tailwind_breakpoints: Tailwind tiers, ascending by width
        colors: Semantic color table including derived variants
        scales: Scale-remap tables by name
        rules: All rules in registration order
        exact_rules: Exact rules keyed by full class name
        stem_rules: Stem rules keyed by stem, in registration order
        vocabulary: Registered stems, longest first
        bare_responsive: Stems that take a breakpoint without a suffix
        spacing_scales: Scales checked under strict spacing
    """

    def __init__(
        self,
        bootstrap_breakpoints: Sequence[BreakpointSpec],
        tailwind_breakpoints: Sequence[BreakpointSpec],
        colors: Mapping[str, ColorSpec],
        scales: Mapping[str, Mapping[str, ScaleEntry]],
        rules: Sequence[MappingRule],
        stems: Iterable[str] = (),
        bare_responsive: Iterable[str] = (),
        spacing_scales: Optional[Iterable[str]] = None,
    ) -> None:
        self.bootstrap_breakpoints: Tuple[BreakpointSpec, ...] = self.breakpoints_validate(
            bootstrap_breakpoints, BreakpointOrigin.BOOTSTRAP
        )
        self.tailwind_breakpoints: Tuple[BreakpointSpec, ...] = self.breakpoints_validate(
            tailwind_breakpoints, BreakpointOrigin.TAILWIND
        )
        if len(self.bootstrap_breakpoints) != len(self.tailwind_breakpoints):
            raise ConfigError(
                f"Breakpoint tier count mismatch: {len(self.bootstrap_breakpoints)} bootstrap "
                f"vs {len(self.tailwind_breakpoints)} tailwind"
            )

        self.base_colors: Mapping[str, ColorSpec] = MappingProxyType(dict(colors))
        self.colors: Mapping[str, ColorSpec] = MappingProxyType(colors_deriveVariants(colors))
        self.scales: Mapping[str, Mapping[str, ScaleEntry]] = MappingProxyType(
            {name: MappingProxyType(dict(table)) for name, table in scales.items()}
        )
        if spacing_scales is None:
            spacing_scales = [name for name in DEFAULT_SPACING_SCALES if name in self.scales]
        unknown_scales = set(spacing_scales) - set(self.scales)
        if unknown_scales:
            raise ConfigError(f"Unknown spacing scales: {sorted(unknown_scales)}")
        self.spacing_scales: frozenset = frozenset(spacing_scales)

        self.rules: Tuple[MappingRule, ...] = tuple(rules)
        exact: Dict[str, MappingRule] = {}
        by_stem: Dict[str, List[MappingRule]] = {}
        seen: set = set()
        for rule in self.rules:
            self.rule_validate(rule)
            if rule.exact:
                if rule.match_base_utility in exact:
                    raise ConfigError(f"Duplicate exact rule '{rule.match_base_utility}'")
                exact[rule.match_base_utility] = rule
                continue
            key = (rule.kind, rule.match_base_utility)
            if key in seen:
                raise ConfigError(
                    f"Duplicate {rule.kind.value} rule for stem '{rule.match_base_utility}'"
                )
            seen.add(key)
            by_stem.setdefault(rule.match_base_utility, []).append(rule)

        self.exact_rules: Mapping[str, MappingRule] = MappingProxyType(exact)
        self.stem_rules: Mapping[str, Tuple[MappingRule, ...]] = MappingProxyType(
            {stem: tuple(group) for stem, group in by_stem.items()}
        )

        self.bare_responsive: frozenset = frozenset(bare_responsive)
        vocabulary = set(stems) | set(by_stem) | self.bare_responsive
        if "" in vocabulary:
            raise ConfigError("Empty stem in vocabulary")
        # Longest first so "ps" is tried before "p"; ties broken alphabetically
        self.vocabulary: Tuple[str, ...] = tuple(sorted(vocabulary, key=lambda s: (-len(s), s)))

        self._bootstrap_names = {bp.name: i for i, bp in enumerate(self.bootstrap_breakpoints)}

    @staticmethod
    def breakpoints_validate(
        specs: Sequence[BreakpointSpec], origin: BreakpointOrigin
    ) -> Tuple[BreakpointSpec, ...]:
        """Check origin, name uniqueness and strictly increasing widths"""
        names: set = set()
        previous = -1
        for spec in specs:
            if spec.origin != origin:
                raise ConfigError(f"Breakpoint '{spec.name}' is not a {origin.value} breakpoint")
            if spec.name in names:
                raise ConfigError(f"Duplicate {origin.value} breakpoint '{spec.name}'")
            if spec.min_width_px <= previous:
                raise ConfigError(
                    f"{origin.value} breakpoints must strictly increase: "
                    f"'{spec.name}' ({spec.min_width_px}px) after {previous}px"
                )
            names.add(spec.name)
            previous = spec.min_width_px
        return tuple(specs)

    def rule_validate(self, rule: MappingRule) -> None:
        """Check a rule's templates and references against the tables"""
        if not rule.match_base_utility:
            raise ConfigError("Rule with empty match")
        if not rule.outputs and rule.kind != RuleKind.PASSTHROUGH:
            raise ConfigError(f"Rule '{rule.match_base_utility}' has no outputs")

        unknown = rule.placeholders() - TEMPLATE_PLACEHOLDERS[rule.kind]
        if unknown:
            raise ConfigError(
                f"Rule '{rule.match_base_utility}' uses placeholders "
                f"{sorted(unknown)} not valid for {rule.kind.value} rules"
            )
        if rule.exact and rule.placeholders():
            raise ConfigError(f"Exact rule '{rule.match_base_utility}' cannot use placeholders")

        if rule.kind == RuleKind.SCALE_REMAP:
            if rule.scale is None:
                raise ConfigError(f"Scale rule '{rule.match_base_utility}' names no scale")
            if rule.scale not in self.scales:
                raise ConfigError(
                    f"Rule '{rule.match_base_utility}' references unknown scale '{rule.scale}'"
                )

    def breakpoint_isKnown(self, name: str) -> bool:
        """Check if name is a Bootstrap breakpoint"""
        return name in self._bootstrap_names

    def breakpoint_index(self, name: str) -> int:
        """Ordinal of a Bootstrap breakpoint (sm=0, md=1, ...)"""
        return self._bootstrap_names[name]

    def exactRule_get(self, name: str) -> Optional[MappingRule]:
        return self.exact_rules.get(name)

    def stemRules_get(self, stem: str) -> Tuple[MappingRule, ...]:
        return self.stem_rules.get(stem, ())

    def colors_override(self, overrides: Mapping[str, Any]) -> "MappingTables":
        """
        Return new tables with semantic colors replaced or added.

        Overriding a base color also moves its derived "-subtle" and
        "-emphasis" variants, unless those are overridden explicitly.

        Args:
            overrides: Semantic name -> ColorSpec or {color, shade, contrast}

        Raises:
            ConfigError: If an override value is malformed
        """
        if not overrides:
            return self

        base: Dict[str, ColorSpec] = {
            name: spec for name, spec in self.base_colors.items()
        }
        for name, value in overrides.items():
            fallback = self.colors.get(name)
            base[name] = color_parse(name, value, fallback)

        return MappingTables(
            bootstrap_breakpoints=self.bootstrap_breakpoints,
            tailwind_breakpoints=self.tailwind_breakpoints,
            colors=base,
            scales=self.scales,
            rules=self.rules,
            stems=self.vocabulary,
            bare_responsive=self.bare_responsive,
            spacing_scales=self.spacing_scales,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MappingTables":
        """
        Build tables from a plain document (parsed YAML or a Python literal).

        Raises:
            ConfigError: If the document is malformed
        """
        if not isinstance(data, Mapping):
            raise ConfigError("Table document must be a mapping")

        missing = [key for key in ("breakpoints", "colors", "scales", "rules") if key not in data]
        if missing:
            raise ConfigError(f"Table document missing sections: {', '.join(missing)}")

        breakpoints = data["breakpoints"]
        if not isinstance(breakpoints, Mapping):
            raise ConfigError("'breakpoints' must be a mapping")

        return cls(
            bootstrap_breakpoints=breakpoints_parse(
                breakpoints.get("bootstrap"), BreakpointOrigin.BOOTSTRAP
            ),
            tailwind_breakpoints=breakpoints_parse(
                breakpoints.get("tailwind"), BreakpointOrigin.TAILWIND
            ),
            colors={
                str(name): color_parse(str(name), value)
                for name, value in section_get(data, "colors").items()
            },
            scales={
                str(name): scale_parse(str(name), table)
                for name, table in section_get(data, "scales").items()
            },
            rules=[rule_parse(entry) for entry in list_get(data, "rules")],
            stems=[str(stem) for stem in list_get(data, "stems")],
            bare_responsive=[str(stem) for stem in list_get(data, "bare_responsive")],
            spacing_scales=(
                [str(name) for name in list_get(data, "spacing_scales")]
                if "spacing_scales" in data else None
            ),
        )

    def __repr__(self) -> str:
        return (
            f"MappingTables(rules={len(self.rules)}, stems={len(self.vocabulary)}, "
            f"colors={len(self.colors)}, scales={len(self.scales)})"
        )


def section_get(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


def list_get(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list")
    return value


def breakpoints_parse(value: Any, origin: BreakpointOrigin) -> List[BreakpointSpec]:
    """Parse {name: min_width_px} preserving document order"""
    if not isinstance(value, Mapping) or not value:
        raise ConfigError(f"'breakpoints.{origin.value}' must be a non-empty mapping")
    specs = []
    for name, width in value.items():
        if isinstance(width, bool) or not isinstance(width, int):
            raise ConfigError(f"Breakpoint '{name}' width must be an integer, got {width!r}")
        specs.append(BreakpointSpec(name=str(name), min_width_px=width, origin=origin))
    return specs


def color_parse(name: str, value: Any, fallback: Optional[ColorSpec] = None) -> ColorSpec:
    """
    Parse a color entry.

    Accepts a ColorSpec, a {color, shade, contrast} mapping, or a bare color
    name string (e.g., "white"). contrast defaults to the fallback's; a bare
    string also keeps the fallback's shade ("indigo" over blue-600 is
    indigo-600).
    """
    if isinstance(value, ColorSpec):
        return value
    if isinstance(value, str):
        if fallback is None:
            return ColorSpec(color=value)
        return ColorSpec(color=value, shade=fallback.shade, contrast=fallback.contrast)
    if not isinstance(value, Mapping) or "color" not in value:
        raise ConfigError(f"Color '{name}' must be a mapping with a 'color' key")

    unknown = set(value) - {"color", "shade", "contrast"}
    if unknown:
        raise ConfigError(f"Color '{name}' has unknown keys: {sorted(map(str, unknown))}")

    shade = value.get("shade")
    if shade is not None and (isinstance(shade, bool) or not isinstance(shade, int)):
        raise ConfigError(f"Color '{name}' shade must be an integer, got {shade!r}")

    default_contrast = fallback.contrast if fallback else "white"
    return ColorSpec(
        color=str(value["color"]),
        shade=shade,
        contrast=str(value.get("contrast", default_contrast)),
    )


def scale_parse(name: str, table: Any) -> Dict[str, ScaleEntry]:
    """Parse {index: target} or {index: {target, exact}}; keys become strings"""
    if not isinstance(table, Mapping):
        raise ConfigError(f"Scale '{name}' must be a mapping")
    entries: Dict[str, ScaleEntry] = {}
    for index, value in table.items():
        if isinstance(value, ScaleEntry):
            entries[str(index)] = value
        elif isinstance(value, Mapping):
            if "target" not in value:
                raise ConfigError(f"Scale '{name}' entry '{index}' has no target")
            entries[str(index)] = ScaleEntry(
                target=str(value["target"]), exact=bool(value.get("exact", True))
            )
        elif isinstance(value, (str, int)) and not isinstance(value, bool):
            entries[str(index)] = ScaleEntry(target=str(value))
        else:
            raise ConfigError(f"Scale '{name}' entry '{index}' is malformed: {value!r}")
    return entries


RULE_KEYS = {"match", "kind", "outputs", "priority", "exact", "scale", "values", "responsive", "states"}


def rule_parse(entry: Any) -> MappingRule:
    """Parse one rule mapping (see module docstring for the shape)"""
    if isinstance(entry, MappingRule):
        return entry
    if not isinstance(entry, Mapping):
        raise ConfigError(f"Rule must be a mapping, got {entry!r}")

    unknown = set(entry) - RULE_KEYS
    if unknown:
        raise ConfigError(f"Rule {entry.get('match')!r} has unknown keys: {sorted(unknown)}")
    if "match" not in entry or "kind" not in entry:
        raise ConfigError(f"Rule {dict(entry)!r} needs 'match' and 'kind'")

    try:
        kind = RuleKind(entry["kind"])
    except ValueError:
        raise ConfigError(f"Rule '{entry['match']}' has unknown kind '{entry['kind']}'")

    outputs = entry.get("outputs", [])
    if isinstance(outputs, str):
        outputs = [outputs]
    values = entry.get("values")

    return MappingRule(
        match_base_utility=str(entry["match"]),
        kind=kind,
        outputs=tuple(str(o) for o in outputs),
        priority=int(entry.get("priority", 0)),
        exact=bool(entry.get("exact", False)),
        scale=entry.get("scale"),
        values=frozenset(str(v) for v in values) if values is not None else None,
        responsive=bool(entry.get("responsive", False)),
        states=frozenset(str(s) for s in entry.get("states", ())),
    )


class StrictLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate mapping keys"""
    pass


def mapping_constructStrict(loader: StrictLoader, node: yaml.MappingNode, deep: bool = False) -> Dict[Any, Any]:
    loader.flatten_mapping(node)
    keys: set = set()
    for key_node, _ in node.value:
        key = loader.construct_object(key_node, deep=True)
        if key in keys:
            raise ConfigError(
                f"Duplicate key '{key}' at line {key_node.start_mark.line + 1}"
            )
        keys.add(key)
    return loader.construct_mapping(node, deep=deep)


StrictLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, mapping_constructStrict
)


def tables_load(path: Union[str, Path]) -> MappingTables:
    """
    Load mapping tables from a YAML document.

    Args:
        path: YAML file in the shape shown in the module docstring

    Raises:
        ConfigError: If the file cannot be read or parsed, has duplicate
                     keys, or describes invalid tables
    """
    table_path = Path(path)
    try:
        with open(table_path, 'r', encoding='utf-8') as f:
            data: Any = yaml.load(f, Loader=StrictLoader)
    except ConfigError as e:
        raise ConfigError(f"{table_path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {table_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to load {table_path}: {e}")

    if data is None:
        raise ConfigError(f"{table_path} is empty")
    return MappingTables.from_dict(data)


_default_tables: Optional[MappingTables] = None


def tables_default() -> MappingTables:
    """
    Built-in Bootstrap 5.3 to Tailwind 3 tables.

    Built on first use and shared afterwards; the tables are immutable.
    """
    global _default_tables
    if _default_tables is None:
        from .defaults import DEFAULT_TABLES
        _default_tables = MappingTables.from_dict(DEFAULT_TABLES)
    return _default_tables
