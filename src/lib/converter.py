"""
Converter for Bootstrap class attributes

Runs the conversion pipeline over one class attribute value:

    tokens_split → classes_parse → classes_resolve → breakpoints_remap → result_compose

Each stage takes the ConversionState built so far and returns a new one.
The converter holds only read-only collaborators, so one instance can serve
any number of concurrent calls.

Example:
    >>> converter = Converter()
    >>> converter.convert("d-none d-md-block").classes
    'hidden md:block'
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Mapping, Optional

from ..models.state import ConversionState, pipeline
from ..models.result import ConversionResult
from ..models.breakpoints import BreakpointStrategy
from ..models.rules import SpacingStrictness
from .tables import MappingTables, tables_default, tables_load
from .lexer import tokens_split
from .parser import ClassParser
from .resolver import MappingResolver
from .breakpoints import BreakpointRemapper
from .composer import Composer
from .log import LOG, state_connectToLogger


class Converter:
    """
    Converts Bootstrap utility classes to Tailwind classes

    Responsibilities:
    - Apply color overrides to the tables once, up front
    - Wire the parser, resolver, remapper and composer to the same tables
    - Run the pipeline per call, single or batched
    """

    def __init__(
        self,
        tables: Optional[MappingTables] = None,
        breakpoint_strategy: BreakpointStrategy = BreakpointStrategy.NEAREST,
        spacing_strictness: SpacingStrictness = SpacingStrictness.APPROXIMATE,
        color_overrides: Optional[Mapping[str, Any]] = None,
        verbosity: int = 1,
    ) -> None:
        """
        Initialize converter

        Args:
            tables: Mapping tables (default: built-in Bootstrap 5.3 tables)
            breakpoint_strategy: "nearest" or "exact"
            spacing_strictness: "approximate" or "strict"
            color_overrides: Semantic color name -> {color, shade[, contrast]}
            verbosity: Logging verbosity level (0-3)

        Raises:
            ConfigError: If color overrides are malformed
            ValueError: If a strategy or strictness name is unknown
        """
        if tables is None:
            tables = tables_default()
        self.tables = tables.colors_override(color_overrides or {})
        self.verbosity = verbosity

        self.parser = ClassParser(self.tables)
        self.resolver = MappingResolver(self.tables, strictness=spacing_strictness)
        self.remapper = BreakpointRemapper(self.tables, strategy=breakpoint_strategy)
        self.composer = Composer()

    @classmethod
    def settings_apply(cls, settings: Any = None) -> "Converter":
        """
        Build a converter from AppSettings

        Loads settings.tables_file when set, otherwise uses the built-in
        tables.

        Args:
            settings: AppSettings instance (default: the process-wide appsettings)

        Raises:
            ConfigError: If the tables file or color overrides are invalid
        """
        if settings is None:
            from ..config import appsettings
            settings = appsettings

        tables = tables_load(settings.tables_file) if settings.tables_file else tables_default()
        LOG(f"Loaded tables: {tables!r}", level=2)
        return cls(
            tables=tables,
            breakpoint_strategy=settings.breakpoint_strategy,
            spacing_strictness=settings.spacing_strictness,
            color_overrides=settings.colorOverrides_get(),
            verbosity=settings.verbosity,
        )

    def convert(self, text: str) -> ConversionResult:
        """
        Convert one class attribute value

        Args:
            text: Class attribute value (e.g., "d-flex mt-3 text-bg-primary")

        Returns:
            ConversionResult with Tailwind classes and warnings in source order
        """
        state = ConversionState(source=text, verbosity=self.verbosity)
        state_connectToLogger(state)

        final_state = pipeline(
            state,
            self.tokens_split,
            self.classes_parse,
            self.classes_resolve,
            self.breakpoints_remap,
            self.result_compose,
        )
        return final_state.result

    def batch_convert(
        self, texts: Iterable[str], max_workers: Optional[int] = None
    ) -> List[ConversionResult]:
        """
        Convert many independent class attribute values in parallel

        Args:
            texts: Class attribute values
            max_workers: Thread pool size (default: ThreadPoolExecutor's)

        Returns:
            Results in the same order as texts
        """
        items = list(texts)
        if not items:
            return []
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(self.convert, items))
        LOG(f"Converted {len(results)} class attributes", level=2)
        return results

    def tokens_split(self, inputstate: ConversionState) -> ConversionState:
        tokens = tokens_split(inputstate.source)
        LOG(f"Split {len(tokens)} tokens", level=3)
        return inputstate.copy(tokens=tokens)

    def classes_parse(self, inputstate: ConversionState) -> ConversionState:
        return inputstate.copy(parsed=self.parser.tokens_parse(inputstate.tokens))

    def classes_resolve(self, inputstate: ConversionState) -> ConversionState:
        return inputstate.copy(resolutions=self.resolver.classes_resolve(inputstate.parsed))

    def breakpoints_remap(self, inputstate: ConversionState) -> ConversionState:
        """Remap breakpoints of tokens that will be rewritten"""
        breakpoints = tuple(
            None if resolution.verbatim
            else self.remapper.breakpoint_remap(resolution.parsed.breakpoint)
            for resolution in inputstate.resolutions
        )
        return inputstate.copy(breakpoints=breakpoints)

    def result_compose(self, inputstate: ConversionState) -> ConversionState:
        """Compose the result, attaching custom screens when any are required"""
        custom_screens = None
        if any(bp is not None and bp.custom_screen for bp in inputstate.breakpoints):
            custom_screens = self.remapper.screens_get()

        result = self.composer.result_compose(
            inputstate.resolutions, inputstate.breakpoints, custom_screens
        )
        return inputstate.copy(result=result)


def convert(text: str, **options: Any) -> ConversionResult:
    """
    Convert a class attribute value with the built-in tables

    Args:
        text: Class attribute value
        **options: Converter keyword arguments (breakpoint_strategy, ...)

    Example:
        >>> convert("m-3 p-4").classes
        'm-4 p-6'
    """
    return Converter(**options).convert(text)
