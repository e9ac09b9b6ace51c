import pytest

from crusty.precedence import infix_binding_power, prefix_binding_power
from crusty.tokens import TokenKind

INFIX_KINDS = [
    TokenKind.EQUAL,
    TokenKind.OR_OR,
    TokenKind.AND_AND,
    TokenKind.PIPE,
    TokenKind.CARET,
    TokenKind.AMPERSAND,
    TokenKind.EQUAL_EQUAL,
    TokenKind.BANG_EQUAL,
    TokenKind.LESS,
    TokenKind.GREATER,
    TokenKind.LESS_EQUAL,
    TokenKind.GREATER_EQUAL,
    TokenKind.LESS_LESS,
    TokenKind.GREATER_GREATER,
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.STAR,
    TokenKind.SLASH,
    TokenKind.PERCENT,
]

PREFIX_KINDS = [
    TokenKind.BANG,
    TokenKind.TILDE,
    TokenKind.MINUS,
    TokenKind.PLUS_PLUS,
    TokenKind.MINUS_MINUS,
    TokenKind.STAR,
    TokenKind.AMPERSAND,
    TokenKind.SIZEOF,
]


def lbp(kind):
    return infix_binding_power(kind)[0]


def test_assignment_binds_weakest_and_is_right_associative():
    assert infix_binding_power(TokenKind.EQUAL) == (1, 1, False)
    assert all(lbp(TokenKind.EQUAL) <= lbp(k) for k in INFIX_KINDS)


@pytest.mark.parametrize("kind", [k for k in INFIX_KINDS if k is not TokenKind.EQUAL])
def test_binary_operators_are_left_associative(kind):
    left, right, ternary = infix_binding_power(kind)
    assert left < right
    assert ternary is False


def test_c_precedence_ordering():
    chain = [
        TokenKind.OR_OR,
        TokenKind.AND_AND,
        TokenKind.PIPE,
        TokenKind.CARET,
        TokenKind.AMPERSAND,
        TokenKind.EQUAL_EQUAL,
        TokenKind.LESS,
        TokenKind.LESS_LESS,
        TokenKind.PLUS,
        TokenKind.STAR,
    ]
    powers = [lbp(k) for k in chain]
    assert powers == sorted(powers)
    assert len(set(powers)) == len(powers)


@pytest.mark.parametrize(
    "group",
    [
        [TokenKind.EQUAL_EQUAL, TokenKind.BANG_EQUAL],
        [TokenKind.LESS, TokenKind.GREATER, TokenKind.LESS_EQUAL, TokenKind.GREATER_EQUAL],
        [TokenKind.LESS_LESS, TokenKind.GREATER_GREATER],
        [TokenKind.PLUS, TokenKind.MINUS],
        [TokenKind.STAR, TokenKind.SLASH, TokenKind.PERCENT],
    ],
)
def test_operators_in_same_group_share_power(group):
    assert len({infix_binding_power(k) for k in group}) == 1


@pytest.mark.parametrize(
    "kind",
    [TokenKind.SEMICOLON, TokenKind.QUESTION, TokenKind.BANG, TokenKind.PLUS_EQUAL],
)
def test_non_infix_tokens(kind):
    assert infix_binding_power(kind) is None


@pytest.mark.parametrize("kind", PREFIX_KINDS)
def test_prefix_operators(kind):
    assert prefix_binding_power(kind) == 30


def test_prefix_binds_tighter_than_any_infix():
    strongest_infix = max(max(infix_binding_power(k)[:2]) for k in INFIX_KINDS)
    assert all(prefix_binding_power(k) > strongest_infix for k in PREFIX_KINDS)


@pytest.mark.parametrize("kind", [TokenKind.PLUS, TokenKind.SLASH, TokenKind.LEFT_PAREN])
def test_non_prefix_tokens(kind):
    assert prefix_binding_power(kind) is None