"""Recognition of single- and multi-character operators."""

from __future__ import annotations

from crusty.source import SourceFile
from crusty.tokens import TokenKind

# For each leading character: the continuations to try, longest first, and
# the kind produced when none of them follows.
_OPERATORS: dict[str, tuple[tuple[tuple[str, TokenKind], ...], TokenKind]] = {
    "+": ((("+", TokenKind.PLUS_PLUS), ("=", TokenKind.PLUS_EQUAL)), TokenKind.PLUS),
    "-": (
        (
            ("-", TokenKind.MINUS_MINUS),
            ("=", TokenKind.MINUS_EQUAL),
            (">", TokenKind.ARROW),
        ),
        TokenKind.MINUS,
    ),
    "*": ((("=", TokenKind.STAR_EQUAL),), TokenKind.STAR),
    # '//' and '/*' never get here: comments are skipped beforehand.
    "/": ((("=", TokenKind.SLASH_EQUAL),), TokenKind.SLASH),
    "=": ((("=", TokenKind.EQUAL_EQUAL),), TokenKind.EQUAL),
    "!": ((("=", TokenKind.BANG_EQUAL),), TokenKind.BANG),
    "<": (
        (
            ("<=", TokenKind.LESS_LESS_EQUAL),
            ("<", TokenKind.LESS_LESS),
            ("=", TokenKind.LESS_EQUAL),
        ),
        TokenKind.LESS,
    ),
    ">": (
        (
            (">=", TokenKind.GREATER_GREATER_EQUAL),
            (">", TokenKind.GREATER_GREATER),
            ("=", TokenKind.GREATER_EQUAL),
        ),
        TokenKind.GREATER,
    ),
    "&": ((("&", TokenKind.AND_AND),), TokenKind.AMPERSAND),
    "|": ((("|", TokenKind.OR_OR),), TokenKind.PIPE),
}


def lex_operator(first: str, source: SourceFile) -> TokenKind:
    """Finish an operator whose first character ``first`` was already consumed.

    Consumes the rest of a compound operator from ``source`` and returns its
    kind. A character that starts no operator yields ``TokenKind.UNKNOWN``
    and nothing more is consumed.
    """
    entry = _OPERATORS.get(first)
    if entry is None:
        return TokenKind.UNKNOWN
    continuations, default = entry
    for suffix, kind in continuations:
        if source.text.startswith(suffix, source.pos):
            for _ in suffix:
                source.advance()
            return kind
    return default