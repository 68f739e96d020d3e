"""
Tokenizer for class attribute values

Splits a class attribute into RawTokens using a Pygments RegexLexer. The same
lexer also highlights class lists when displaying before/after conversions.

Token types:
- Name.Class: Plain class names (e.g., mt-3)
- Name.Decorator: Responsive class names (e.g., d-md-none)
- Keyword: Important-marked class names (e.g., !d-none)
- Whitespace: Separators
"""

from typing import Tuple

from pygments.lexer import RegexLexer
from pygments.token import Keyword, Name, Whitespace

from ..models.tokens import RawToken


class ClassListLexer(RegexLexer):
    """
    Lexer for HTML class attribute values

    Example:
        "d-none d-md-block"

    Tokens:
        d-none → Name.Class
        ' ' → Whitespace
        d-md-block → Name.Decorator
    """

    name = 'ClassList'
    aliases = ['classlist', 'bootstrap-classes']
    filenames = []

    tokens = {
        'root': [
            (r'\s+', Whitespace),

            # Important marker
            (r'![^\s]+', Keyword),

            # Responsive infix (d-md-none, col-lg-4)
            (r'[^\s]+?-(?:sm|md|lg|xl|xxl)(?=-)[^\s]*', Name.Decorator),

            (r'[^\s]+', Name.Class),
        ],
    }


# Token types that carry a class name
CLASS_TOKENS = (Name.Class, Name.Decorator, Keyword)


def tokens_split(text: str) -> Tuple[RawToken, ...]:
    """
    Split a class attribute value into ordered RawTokens.

    Splits on runs of whitespace; leading and trailing whitespace is
    ignored and duplicates are kept in place.

    Args:
        text: Class attribute value

    Returns:
        Tuple of RawToken, position-numbered from 0

    Example:
        >>> [t.text for t in tokens_split("  m-3  m-3 p-4 ")]
        ['m-3', 'm-3', 'p-4']
    """
    if not text:
        return ()

    # get_tokens_unprocessed keeps offsets relative to the unmodified input
    lexer = ClassListLexer()
    tokens = []
    for offset, tokentype, value in lexer.get_tokens_unprocessed(text):
        if tokentype in CLASS_TOKENS:
            tokens.append(RawToken(text=value, position=len(tokens), offset=offset))
    return tuple(tokens)
