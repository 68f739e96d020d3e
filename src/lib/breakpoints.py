"""
Breakpoint remapper

Carries Bootstrap responsive tiers over to Tailwind screens.

Strategies:
- nearest: map by tier ordinal (sm→sm, md→md, lg→lg, xl→xl, xxl→2xl).
           Order is preserved, pixel thresholds are Tailwind's.
- exact:   same names, but flagged so the caller configures custom screens
           with Bootstrap's widths (see screens_get()).

Both strategies are monotonic: A < B in Bootstrap order implies
remap(A) < remap(B) in Tailwind order.
"""

from typing import Dict, Optional

from ..models.breakpoints import BreakpointStrategy, RemappedBreakpoint
from .tables import MappingTables


class BreakpointRemapper:
    """Maps Bootstrap breakpoint names onto Tailwind screens"""

    def __init__(
        self,
        tables: MappingTables,
        strategy: BreakpointStrategy = BreakpointStrategy.NEAREST,
    ) -> None:
        self.tables = tables
        self.strategy = BreakpointStrategy(strategy)

    def breakpoint_remap(self, name: Optional[str]) -> Optional[RemappedBreakpoint]:
        """
        Remap one Bootstrap breakpoint

        Args:
            name: Bootstrap breakpoint name, or None for the unprefixed tier

        Returns:
            RemappedBreakpoint, or None for the unprefixed tier

        Raises:
            KeyError: If name is not a Bootstrap breakpoint in the tables
        """
        if name is None:
            return None

        index = self.tables.breakpoint_index(name)
        target = self.tables.tailwind_breakpoints[index]

        if self.strategy == BreakpointStrategy.EXACT:
            source = self.tables.bootstrap_breakpoints[index]
            return RemappedBreakpoint(
                name=target.name, min_width_px=source.min_width_px, custom_screen=True
            )
        return RemappedBreakpoint(name=target.name, min_width_px=target.min_width_px)

    def screens_get(self) -> Dict[str, str]:
        """
        Tailwind screens configuration reproducing Bootstrap's widths

        Example:
            {"sm": "576px", "md": "768px", "lg": "992px", "xl": "1200px", "2xl": "1400px"}
        """
        return {
            target.name: f"{source.min_width_px}px"
            for source, target in zip(self.tables.bootstrap_breakpoints, self.tables.tailwind_breakpoints)
        }
