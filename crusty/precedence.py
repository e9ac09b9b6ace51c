"""Binding powers for the expression parser, following C's precedence table."""

from __future__ import annotations

from crusty.tokens import TokenKind

_INFIX: dict[TokenKind, tuple[int, int, bool]] = {
    TokenKind.EQUAL: (1, 1, False),
    TokenKind.OR_OR: (2, 3, False),
    TokenKind.AND_AND: (4, 5, False),
    TokenKind.PIPE: (6, 7, False),
    TokenKind.CARET: (8, 9, False),
    TokenKind.AMPERSAND: (10, 11, False),
    TokenKind.EQUAL_EQUAL: (12, 13, False),
    TokenKind.BANG_EQUAL: (12, 13, False),
    TokenKind.LESS: (14, 15, False),
    TokenKind.GREATER: (14, 15, False),
    TokenKind.LESS_EQUAL: (14, 15, False),
    TokenKind.GREATER_EQUAL: (14, 15, False),
    TokenKind.LESS_LESS: (16, 17, False),
    TokenKind.GREATER_GREATER: (16, 17, False),
    TokenKind.PLUS: (18, 19, False),
    TokenKind.MINUS: (18, 19, False),
    TokenKind.STAR: (20, 21, False),
    TokenKind.SLASH: (20, 21, False),
    TokenKind.PERCENT: (20, 21, False),
}

_PREFIX_POWER = 30
_PREFIX_KINDS = frozenset(
    {
        TokenKind.BANG,
        TokenKind.TILDE,
        TokenKind.MINUS,
        TokenKind.PLUS_PLUS,
        TokenKind.MINUS_MINUS,
        TokenKind.STAR,
        TokenKind.AMPERSAND,
        TokenKind.SIZEOF,
    }
)


def infix_binding_power(kind: TokenKind) -> tuple[int, int, bool] | None:
    """Return ``(lbp, rbp, is_ternary)`` for an infix operator, or None."""
    return _INFIX.get(kind)


def prefix_binding_power(kind: TokenKind) -> int | None:
    """Return the right binding power of a prefix operator, or None."""
    return _PREFIX_POWER if kind in _PREFIX_KINDS else None