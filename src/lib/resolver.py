"""
Mapping resolver

Looks up each ParsedClass in the mapping tables and produces the Tailwind
utilities it maps to, without any variant prefix.

Lookup precedence:
1. Exact rule on the full class name (rounded-circle, d-none, pe-none)
2. Stem rules on the base utility that accept the value suffix
3. Passthrough with an UnrecognizedToken warning

Every per-token problem degrades to passthrough plus a warning.
"""

from typing import Callable, Dict, Optional, Tuple

from ..models.tokens import ParsedClass
from ..models.rules import MappingRule, RuleKind, SpacingStrictness
from ..models.result import ConversionWarning, Resolution, WarningKind
from .tables import MappingTables
from .log import LOG


class InvalidValue(Exception):
    """Raised by a rule handler when the value suffix cannot be mapped"""
    pass


class MappingResolver:
    """
    Resolves parsed Bootstrap classes against the mapping tables

    Handlers are registered per RuleKind; the table is checked for
    exhaustiveness at construction so a new kind cannot go unhandled.
    """

    def __init__(
        self,
        tables: MappingTables,
        strictness: SpacingStrictness = SpacingStrictness.APPROXIMATE,
    ) -> None:
        self.tables = tables
        self.strictness = SpacingStrictness(strictness)
        self.handlers: Dict[RuleKind, Callable[[MappingRule, ParsedClass], Tuple[str, ...]]] = {
            RuleKind.RENAME: self.rename_apply,
            RuleKind.SCALE_REMAP: self.scale_apply,
            RuleKind.COMPOSITE: self.composite_apply,
            RuleKind.COLOR_SEMANTIC: self.color_apply,
            RuleKind.PASSTHROUGH: self.passthrough_apply,
        }
        missing = set(RuleKind) - set(self.handlers)
        if missing:
            raise TypeError(f"No resolver handler for {sorted(k.value for k in missing)}")

    def classes_resolve(self, parsed: Tuple[ParsedClass, ...]) -> Tuple[Resolution, ...]:
        """Resolve every parsed class, preserving order"""
        return tuple(self.class_resolve(p) for p in parsed)

    def class_resolve(self, parsed: ParsedClass) -> Resolution:
        """
        Resolve one parsed class

        Args:
            parsed: Output of ClassParser.token_parse()

        Returns:
            Resolution with unprefixed outputs, or an empty outputs tuple and
            a warning when the token passes through verbatim
        """
        warnings: Tuple[ConversionWarning, ...] = ()

        rule = self.tables.exactRule_get(parsed.utility_name)
        if rule is None:
            stem_rules = self.tables.stemRules_get(parsed.base_utility)
            candidates = [r for r in stem_rules if self.rule_accepts(r, parsed.value_suffix)]
            if not candidates:
                # Unknown index on a scale stem (m-6) is a bad value; anything
                # else (bg-blue-600) is simply not a Bootstrap class
                if any(r.kind == RuleKind.SCALE_REMAP for r in stem_rules):
                    return self.invalid(
                        parsed, f"'{parsed.value_suffix}' is not a valid value for '{parsed.base_utility}'"
                    )
                return self.unrecognized(parsed)
            rule, warnings = self.candidate_choose(parsed, candidates)

        if parsed.breakpoint is not None and not rule.responsive:
            return self.invalid(
                parsed, f"'{parsed.utility_name}' has no responsive variant"
            )
        unsupported = [m for m in parsed.pseudo_modifiers if m not in rule.states]
        if unsupported:
            return self.invalid(
                parsed, f"'{parsed.utility_name}' has no {', '.join(unsupported)} variant"
            )

        try:
            outputs = self.handlers[rule.kind](rule, parsed)
        except InvalidValue as e:
            return self.invalid(parsed, str(e))

        LOG(f"{parsed.raw.text} → {' '.join(outputs) or parsed.raw.text} ({rule.kind.value})", level=3)
        return Resolution(
            parsed=parsed, kind=rule.kind, outputs=outputs, warnings=warnings, rule=rule
        )

    def rule_accepts(self, rule: MappingRule, suffix: Optional[str]) -> bool:
        """
        Check if a stem rule can map the given value suffix

        RENAME accepts its listed values (any suffix when unrestricted);
        SCALE_REMAP accepts indices present in its scale; COLOR_SEMANTIC and
        COMPOSITE stem rules accept semantic color names.
        """
        if rule.kind == RuleKind.PASSTHROUGH:
            return True
        if suffix is None:
            return False
        if rule.kind == RuleKind.RENAME:
            return rule.values is None or suffix in rule.values
        if rule.kind == RuleKind.SCALE_REMAP:
            return suffix in self.tables.scales[rule.scale]
        return suffix in self.tables.colors

    def candidate_choose(
        self, parsed: ParsedClass, candidates: list
    ) -> Tuple[MappingRule, Tuple[ConversionWarning, ...]]:
        """
        Pick the highest-priority rule; ties go to the first registered

        Returns:
            Chosen rule and an AmbiguousMapping warning when tied
        """
        best = max(rule.priority for rule in candidates)
        tied = [rule for rule in candidates if rule.priority == best]
        chosen = tied[0]
        if len(tied) == 1:
            return chosen, ()

        kinds = ', '.join(rule.kind.value for rule in tied)
        message = f"'{parsed.raw.text}' matches {len(tied)} rules ({kinds}); using {chosen.kind.value}"
        LOG(f"Ambiguous mapping: {message}", level=1)
        return chosen, (
            ConversionWarning(
                source_token=parsed.raw, kind=WarningKind.AMBIGUOUS_MAPPING, message=message
            ),
        )

    def rename_apply(self, rule: MappingRule, parsed: ParsedClass) -> Tuple[str, ...]:
        """Handle RENAME - substitute the stem, carrying the suffix as {value}"""
        return tuple(t.format(value=parsed.value_suffix) for t in rule.outputs)

    def scale_apply(self, rule: MappingRule, parsed: ParsedClass) -> Tuple[str, ...]:
        """Handle SCALE_REMAP - translate the suffix through the rule's scale"""
        entry = self.tables.scales[rule.scale].get(parsed.value_suffix)
        if entry is None:
            raise InvalidValue(f"'{parsed.value_suffix}' is not in the {rule.scale} scale")
        if (
            not entry.exact
            and self.strictness == SpacingStrictness.STRICT
            and rule.scale in self.tables.spacing_scales
        ):
            raise InvalidValue(
                f"'{parsed.utility_name}' has no exact Tailwind equivalent "
                f"(nearest is {entry.target})"
            )
        return tuple(t.format(scale=entry.target, value=parsed.value_suffix) for t in rule.outputs)

    def composite_apply(self, rule: MappingRule, parsed: ParsedClass) -> Tuple[str, ...]:
        """Handle COMPOSITE - expand to several utilities in fixed order"""
        if rule.exact:
            return rule.outputs
        return self.color_apply(rule, parsed)

    def color_apply(self, rule: MappingRule, parsed: ParsedClass) -> Tuple[str, ...]:
        """Handle COLOR_SEMANTIC - substitute the semantic color's Tailwind pair"""
        if rule.exact:
            return rule.outputs
        color = self.tables.colors.get(parsed.value_suffix)
        if color is None:
            raise InvalidValue(f"'{parsed.value_suffix}' is not a known color")
        return tuple(t.format(color=color.token, contrast=color.contrast) for t in rule.outputs)

    def passthrough_apply(self, rule: MappingRule, parsed: ParsedClass) -> Tuple[str, ...]:
        """Handle PASSTHROUGH - known class kept as-is, without a warning"""
        return (parsed.utility_name,)

    def unrecognized(self, parsed: ParsedClass) -> Resolution:
        LOG(f"Unrecognized class '{parsed.raw.text}' passed through", level=2)
        return Resolution(
            parsed=parsed,
            kind=RuleKind.PASSTHROUGH,
            warnings=(
                ConversionWarning(
                    source_token=parsed.raw,
                    kind=WarningKind.UNRECOGNIZED_TOKEN,
                    message=f"No rule for '{parsed.raw.text}'",
                ),
            ),
        )

    def invalid(self, parsed: ParsedClass, message: str) -> Resolution:
        LOG(f"Invalid class '{parsed.raw.text}': {message}", level=2)
        return Resolution(
            parsed=parsed,
            kind=RuleKind.PASSTHROUGH,
            warnings=(
                ConversionWarning(
                    source_token=parsed.raw,
                    kind=WarningKind.INVALID_MODIFIER_COMBINATION,
                    message=message,
                ),
            ),
        )
