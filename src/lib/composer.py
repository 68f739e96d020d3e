"""
Composer for converted classes

Reassembles per-token resolutions into the final ordered Tailwind class list.
Outputs of one source token stay contiguous at that token's position; tokens
are never reordered, merged or dropped.
"""

from typing import List, Optional, Sequence

from ..models.breakpoints import RemappedBreakpoint
from ..models.result import ConversionResult, ConversionWarning, Resolution


class Composer:
    """Builds a ConversionResult from resolved tokens"""

    @staticmethod
    def variant_prefix(resolution: Resolution, breakpoint: Optional[RemappedBreakpoint]) -> str:
        """
        Tailwind variant prefix for a token

        Example:
            breakpoint md, modifiers ("print",) → "md:print:"
        """
        variants = []
        if breakpoint is not None:
            variants.append(breakpoint.name)
        variants.extend(resolution.parsed.pseudo_modifiers)

        return "".join(f"{variant}:" for variant in variants)

    @staticmethod
    def utility_format(prefix: str, utility: str, important: bool) -> str:
        """Prefix a utility, placing "!" after any variants the utility carries"""
        head, sep, tail = utility.rpartition(":")
        if important:
            tail = "!" + tail
        return prefix + head + sep + tail

    def result_compose(
        self,
        resolutions: Sequence[Resolution],
        breakpoints: Sequence[Optional[RemappedBreakpoint]],
        custom_screens: Optional[dict] = None,
    ) -> ConversionResult:
        """
        Concatenate token outputs in source order

        Args:
            resolutions: Resolver output in source order
            breakpoints: Remapped breakpoint per resolution
            custom_screens: Screens table to attach (exact strategy only)

        Returns:
            ConversionResult with classes and warnings in source order
        """
        classes: List[str] = []
        warnings: List[ConversionWarning] = []

        for resolution, breakpoint in zip(resolutions, breakpoints):
            if resolution.verbatim:
                classes.append(resolution.parsed.raw.text)
            else:
                prefix = self.variant_prefix(resolution, breakpoint)
                important = resolution.parsed.important
                classes.extend(
                    self.utility_format(prefix, utility, important) for utility in resolution.outputs
                )
            warnings.extend(resolution.warnings)

        return ConversionResult(
            output_classes=tuple(classes),
            warnings=tuple(warnings),
            custom_screens=custom_screens,
        )
