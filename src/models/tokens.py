"""
Token-level data models

Value objects produced by the tokenizer and the class parser.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class RawToken:
    """
    One whitespace-delimited class name from a class attribute

    Attributes:
        text: The class name exactly as written (e.g., "d-md-none")
        position: Index of the token in the attribute's token sequence.
                  This is the ordering key for every later stage.
        offset: Character offset of the token in the original string

    Example:
        For the attribute "d-none  d-md-block":
        RawToken(text="d-md-block", position=1, offset=8)
    """
    text: str
    position: int
    offset: int = 0


@dataclass(frozen=True)
class ParsedClass:
    """
    Structured decomposition of a Bootstrap class name

    Returned by ClassParser.token_parse(). The parser strips recognized
    breakpoint and state infixes and splits the rest at the longest
    registered stem.

    Attributes:
        raw: The token this was parsed from
        breakpoint: Bootstrap breakpoint name (e.g., "md"), or None
        pseudo_modifiers: State/media modifiers in source order
                          (e.g., ("hover",) or ("print",))
        important: Leading "!" was present
        base_utility: Registered stem (e.g., "d", "mt", "text-bg"), or the
                      whole token when no stem matched
        value_suffix: Remainder after the stem (e.g., "none", "3"), or None

    Example:
        "d-md-none" parses to
        ParsedClass(breakpoint="md", base_utility="d", value_suffix="none", ...)
    """
    raw: RawToken
    base_utility: str
    value_suffix: Optional[str] = None
    breakpoint: Optional[str] = None
    pseudo_modifiers: Tuple[str, ...] = field(default_factory=tuple)
    important: bool = False

    @property
    def utility_name(self) -> str:
        """Class name without any breakpoint or state infix (e.g., "d-none")"""
        if self.value_suffix is None:
            return self.base_utility
        return f"{self.base_utility}-{self.value_suffix}"
