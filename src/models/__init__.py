"""
Models package for bootwind

Contains value objects and type definitions for the conversion pipeline.
"""

from .state import ConversionState, pipeline
from .tokens import RawToken, ParsedClass
from .rules import RuleKind, MappingRule, ScaleEntry, ColorSpec, SpacingStrictness
from .breakpoints import BreakpointOrigin, BreakpointSpec, BreakpointStrategy, RemappedBreakpoint
from .result import WarningKind, ConversionWarning, Resolution, ConversionResult

__all__ = [
    "ConversionState",
    "pipeline",
    "RawToken",
    "ParsedClass",
    "RuleKind",
    "MappingRule",
    "ScaleEntry",
    "ColorSpec",
    "SpacingStrictness",
    "BreakpointOrigin",
    "BreakpointSpec",
    "BreakpointStrategy",
    "RemappedBreakpoint",
    "WarningKind",
    "ConversionWarning",
    "Resolution",
    "ConversionResult",
]
