"""
Parser for Bootstrap utility class names

Decomposes each RawToken into a ParsedClass following Bootstrap's class
grammar:

    [!]{stem}[-{breakpoint}|-print][-{suffix}][-hover|-focus]

Key features:
- Longest-stem-first matching against the registered vocabulary, so "ps-3"
  is never read as "p" + "s-3"
- Breakpoint infixes only taken when a suffix follows (or the stem is bare
  responsive), so "shadow-lg" and "lh-sm" keep their size suffix
- Unknown class names fall back to the whole token as the base utility

Example:
    >>> parser = ClassParser(tables_default())
    >>> parsed = parser.token_parse(RawToken("d-md-none", 0))
    >>> parsed.breakpoint, parsed.base_utility, parsed.value_suffix
    ('md', 'd', 'none')
"""

from typing import List, Optional, Tuple

from ..models.tokens import ParsedClass, RawToken
from .tables import MappingTables, MEDIA_MODIFIERS, STATE_SUFFIXES
from .log import LOG


class ClassParser:
    """
    Parser for Bootstrap class names

    Handles:
    - Responsive infixes (d-md-none, col-lg-4, col-md)
    - Print infix (d-print-none)
    - Trailing state suffixes (link-opacity-50-hover)
    - Leading "!" important marker
    """

    def __init__(self, tables: MappingTables):
        """
        Initialize parser with mapping tables

        Args:
            tables: Tables providing the stem vocabulary and breakpoint names
        """
        self.tables = tables

    def tokens_parse(self, tokens: Tuple[RawToken, ...]) -> Tuple[ParsedClass, ...]:
        """Parse every token, preserving order"""
        return tuple(self.token_parse(token) for token in tokens)

    def token_parse(self, token: RawToken) -> ParsedClass:
        """
        Parse a single class name

        Args:
            token: Raw token to decompose

        Returns:
            ParsedClass. When no registered stem matches, base_utility is the
            whole class name and value_suffix is None; classification is left
            to the resolver.

        Example:
            "col-lg-4" → breakpoint "lg", base "col", suffix "4"
            "btn-glow-xyz" → base "btn-glow-xyz", no suffix
        """
        text = token.text
        important = text.startswith('!') and len(text) > 1
        if important:
            text = text[1:]

        for stem in self.tables.vocabulary:
            if text == stem:
                return ParsedClass(raw=token, base_utility=stem, important=important)
            if not text.startswith(stem + '-'):
                continue
            rest = text[len(stem) + 1:]
            if not rest:
                continue

            parsed = self.remainder_split(token, stem, rest, important)
            LOG(f"Parsed '{token.text}' as {parsed.base_utility!r} / "
                f"{parsed.value_suffix!r} @ {parsed.breakpoint}", level=3)
            return parsed

        return ParsedClass(raw=token, base_utility=text, important=important)

    def remainder_split(
        self, token: RawToken, stem: str, rest: str, important: bool
    ) -> ParsedClass:
        """
        Split what follows a stem into infixes and value suffix

        Args:
            token: Token being parsed
            stem: Matched stem
            rest: Text after "{stem}-"
            important: Leading "!" was present

        Returns:
            ParsedClass with breakpoint, modifiers and suffix separated
        """
        breakpoint: Optional[str] = None
        modifiers: List[str] = []

        head, _, tail = rest.partition('-')
        if self.tables.breakpoint_isKnown(head) and (tail or stem in self.tables.bare_responsive):
            breakpoint = head
            rest = tail
        elif head in MEDIA_MODIFIERS and tail:
            modifiers.append(head)
            rest = tail

        rest, state = self.state_strip(rest)
        if state is not None:
            modifiers.append(state)

        return ParsedClass(
            raw=token,
            base_utility=stem,
            value_suffix=rest or None,
            breakpoint=breakpoint,
            pseudo_modifiers=tuple(modifiers),
            important=important,
        )

    @staticmethod
    def state_strip(rest: str) -> Tuple[str, Optional[str]]:
        """
        Remove a trailing "-hover"/"-focus" state from a value suffix

        Only strips when a value remains ("50-hover" → "50", "hover").
        """
        for state in STATE_SUFFIXES:
            marker = '-' + state
            if rest.endswith(marker) and len(rest) > len(marker):
                return rest[:-len(marker)], state
        return rest, None
