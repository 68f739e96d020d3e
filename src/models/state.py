"""
Conversion state model and pipeline helper

Defines the ConversionState dataclass for the functional pipeline pattern and
the pipeline() helper for composing conversion stages.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Tuple, TypeVar

from .tokens import ParsedClass, RawToken
from .result import ConversionResult, Resolution
from .breakpoints import RemappedBreakpoint


CS = TypeVar("CS", bound="ConversionState")


@dataclass(frozen=True)
class ConversionState:
    """
    State container for one conversion call (state bus pattern).

    Each stage returns a new state with its own field filled in; no stage
    modifies the state it was given.

    Pipeline stages and their state additions:
        - Initial: source, verbosity
        - tokens_split: tokens
        - classes_parse: parsed
        - classes_resolve: resolutions
        - breakpoints_remap: breakpoints
        - result_compose: result

    Attributes:
        source: Class attribute value being converted
        verbosity: Logging verbosity level (0-3)
        tokens: Raw tokens in source order
        parsed: Parsed classes, index-aligned with tokens
        resolutions: Resolver output, index-aligned with tokens
        breakpoints: Remapped breakpoint per token (None if unprefixed)
        result: Final conversion result
    """

    source: str = ""
    verbosity: int = field(default=1)

    tokens: Tuple[RawToken, ...] = ()
    parsed: Tuple[ParsedClass, ...] = ()
    resolutions: Tuple[Resolution, ...] = ()
    breakpoints: Tuple[Optional[RemappedBreakpoint], ...] = ()
    result: Optional[ConversionResult] = None

    def copy(self: CS, **changes) -> CS:
        """
        Create a copy of the state with the given fields replaced.

        Returns:
            A new ConversionState instance.
        """
        return replace(self, **changes)


def pipeline(
    initial_state: ConversionState, *stages: Callable[[ConversionState], ConversionState]
) -> ConversionState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ConversionState) -> ConversionState that
    receives the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ConversionState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ConversionState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            tokens_split,
            classes_parse,
            classes_resolve,
            breakpoints_remap,
            result_compose,
        )

    This is equivalent to:
        result_compose(breakpoints_remap(classes_resolve(classes_parse(tokens_split(s)))))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
