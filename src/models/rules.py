"""
Mapping rule models

Defines the closed set of rule kinds and the immutable rule, scale and color
records that make up the mapping tables.
"""

import re
from enum import Enum
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple


class RuleKind(Enum):
    """
    Kinds of Bootstrap to Tailwind mapping rules

    Every kind has exactly one handler in MappingResolver.
    """
    RENAME = "rename"                  # d-flex -> flex
    SCALE_REMAP = "scale"              # m-3 -> m-4
    COMPOSITE = "composite"            # text-bg-primary -> bg-blue-600 text-white
    COLOR_SEMANTIC = "color"           # border-success -> border-green-600
    PASSTHROUGH = "passthrough"        # container -> container


class SpacingStrictness(str, Enum):
    """How approximate scale-remap entries are treated"""
    APPROXIMATE = "approximate"
    STRICT = "strict"


_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class MappingRule:
    """
    A single Bootstrap to Tailwind mapping rule

    Attributes:
        match_base_utility: Stem this rule is keyed on (e.g., "mt"), or the
                            full class name when exact is True (e.g., "d-none")
        kind: Rule kind, selects the resolver handler
        outputs: Output templates in emission order. Placeholders:
                 {value} raw suffix, {scale} scale lookup,
                 {color} color-shade pair, {contrast} foreground color
        priority: Higher wins when several rules accept the same class
        exact: Keyed on the full class name instead of the stem
        scale: Scale table name for SCALE_REMAP rules
        values: Accepted suffixes for RENAME stem rules (None accepts any)
        responsive: Bootstrap defines {breakpoint} variants of this class
        states: State/media modifiers Bootstrap defines for this class
    """
    match_base_utility: str
    kind: RuleKind
    outputs: Tuple[str, ...]
    priority: int = 0
    exact: bool = False
    scale: Optional[str] = None
    values: Optional[FrozenSet[str]] = None
    responsive: bool = False
    states: FrozenSet[str] = field(default_factory=frozenset)

    def placeholders(self) -> FrozenSet[str]:
        """Names of all placeholders used across the output templates"""
        return frozenset(
            name for template in self.outputs for name in _PLACEHOLDER.findall(template)
        )


@dataclass(frozen=True)
class ScaleEntry:
    """
    One row of a scale-remap table

    Attributes:
        target: Tailwind value substituted for {scale} (e.g., "6" for "4")
        exact: False when the Tailwind value only approximates Bootstrap's
    """
    target: str
    exact: bool = True


@dataclass(frozen=True)
class ColorSpec:
    """
    Tailwind color assigned to a Bootstrap semantic color

    Attributes:
        color: Tailwind palette name (e.g., "blue", "white")
        shade: Palette shade (e.g., 600), None for shadeless colors
        contrast: Foreground color used on top of this color
    """
    color: str
    shade: Optional[int] = None
    contrast: str = "white"

    @property
    def token(self) -> str:
        """Color as it appears in a Tailwind class (e.g., "blue-600")"""
        if self.shade is None:
            return self.color
        return f"{self.color}-{self.shade}"
