"""
Breakpoint models

Responsive tier definitions for both frameworks and the result of remapping
a Bootstrap tier onto Tailwind.
"""

from enum import Enum
from dataclasses import dataclass


class BreakpointOrigin(str, Enum):
    BOOTSTRAP = "bootstrap"
    TAILWIND = "tailwind"


class BreakpointStrategy(str, Enum):
    """
    How Bootstrap breakpoints are carried over

    NEAREST: map by tier ordinal onto Tailwind's default screens
    EXACT:   same names, but the caller must configure custom screens
             with Bootstrap's pixel widths
    """
    NEAREST = "nearest"
    EXACT = "exact"


@dataclass(frozen=True)
class BreakpointSpec:
    """
    A named minimum viewport width

    Attributes:
        name: Tier name (e.g., "md", "2xl")
        min_width_px: Minimum viewport width in pixels
        origin: Framework the tier belongs to
    """
    name: str
    min_width_px: int
    origin: BreakpointOrigin


@dataclass(frozen=True)
class RemappedBreakpoint:
    """
    Tailwind breakpoint produced for a Bootstrap breakpoint

    Attributes:
        name: Tailwind screen name used as the class variant (e.g., "2xl")
        min_width_px: Width the screen must have in the output
        custom_screen: Caller must emit a custom screens entry for this name
    """
    name: str
    min_width_px: int
    custom_screen: bool = False
