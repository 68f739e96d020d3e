"""
Conversion result models

Warnings, per-token resolutions and the final result of a conversion call.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .tokens import ParsedClass, RawToken
from .rules import MappingRule, RuleKind


class WarningKind(str, Enum):
    """Non-fatal per-token problems"""
    UNRECOGNIZED_TOKEN = "UnrecognizedToken"
    AMBIGUOUS_MAPPING = "AmbiguousMapping"
    INVALID_MODIFIER_COMBINATION = "InvalidModifierCombination"


@dataclass(frozen=True)
class ConversionWarning:
    """
    A problem found while converting one token

    Attributes:
        source_token: Token the warning refers to
        kind: Warning category
        message: Human-readable detail
    """
    source_token: RawToken
    kind: WarningKind
    message: str = ""


@dataclass(frozen=True)
class Resolution:
    """
    Resolver output for one parsed class

    Attributes:
        parsed: The parsed class
        kind: Kind of the rule applied (PASSTHROUGH when none was)
        outputs: Tailwind utilities without variant prefixes. Empty when the
                 token passes through verbatim.
        warnings: Warnings raised for this token
        rule: Rule applied, if any
    """
    parsed: ParsedClass
    kind: RuleKind
    outputs: Tuple[str, ...] = ()
    warnings: Tuple[ConversionWarning, ...] = ()
    rule: Optional[MappingRule] = None

    @property
    def verbatim(self) -> bool:
        """Token is emitted unchanged"""
        return not self.outputs


@dataclass(frozen=True)
class ConversionResult:
    """
    Result of converting one class attribute

    Attributes:
        output_classes: Tailwind classes in source order
        warnings: Warnings in source order
        custom_screens: Tailwind screens the caller must configure
                        (only with the "exact" breakpoint strategy)
    """
    output_classes: Tuple[str, ...]
    warnings: Tuple[ConversionWarning, ...] = ()
    custom_screens: Optional[Dict[str, str]] = field(default=None, hash=False)

    @property
    def classes(self) -> str:
        """Space-joined class attribute value"""
        return " ".join(self.output_classes)

    @property
    def status_code(self) -> int:
        """0 when clean, 1 when the conversion completed with warnings"""
        return 1 if self.warnings else 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "outputClasses": self.classes,
            "warnings": [
                {
                    "sourceToken": {
                        "text": w.source_token.text,
                        "position": w.source_token.position,
                    },
                    "kind": w.kind.value,
                    "message": w.message,
                }
                for w in self.warnings
            ],
            "customScreens": self.custom_screens,
        }
