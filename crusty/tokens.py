"""Token kinds and the tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

TokenValue = Union[int, float, str, None]


class TokenKind(Enum):
    """Every kind of token the scanner can produce.

    Literal, identifier and unknown tokens carry their payload in
    ``Token.value``.
    """

    # Control-flow keywords
    IF = auto()
    WHILE = auto()
    FOR = auto()
    ELSE = auto()
    DO = auto()
    SWITCH = auto()
    CASE = auto()
    DEFAULT = auto()
    BREAK = auto()
    CONTINUE = auto()

    # Type keywords
    INT = auto()
    CHAR = auto()
    FLOAT = auto()
    DOUBLE = auto()
    VOID = auto()
    STRUCT = auto()
    ENUM = auto()
    UNION = auto()

    # Other keywords
    TYPEDEF = auto()
    CONST = auto()
    STATIC = auto()
    EXTERN = auto()
    AUTO = auto()
    REGISTER = auto()
    SIGNED = auto()
    UNSIGNED = auto()
    SHORT = auto()
    LONG = auto()
    VOLATILE = auto()
    INLINE = auto()
    SIZEOF = auto()
    RETURN = auto()
    TILDE = auto()  # ~
    ARROW = auto()  # ->
    DOT = auto()  # .

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    CARET = auto()
    PLUS_PLUS = auto()
    MINUS_MINUS = auto()
    PLUS_EQUAL = auto()
    MINUS_EQUAL = auto()
    STAR_EQUAL = auto()
    SLASH_EQUAL = auto()

    # Relational / equality
    EQUAL_EQUAL = auto()
    BANG_EQUAL = auto()
    LESS_EQUAL = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    GREATER = auto()

    # Assignment
    EQUAL = auto()

    # Logical / bitwise
    BANG = auto()
    AND_AND = auto()
    OR_OR = auto()
    AMPERSAND = auto()
    PIPE = auto()

    # Shifts
    LESS_LESS = auto()
    GREATER_GREATER = auto()
    LESS_LESS_EQUAL = auto()
    GREATER_GREATER_EQUAL = auto()

    # Delimiters
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    SEMICOLON = auto()
    COMMA = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    COLON = auto()
    QUESTION = auto()

    # Literals (payload in Token.value)
    INT_LITERAL = auto()
    FLOAT_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()

    IDENTIFIER = auto()

    EOF = auto()

    # Unrecognised character (payload in Token.value)
    UNKNOWN = auto()


@dataclass(frozen=True)
class ByteSpan:
    """Half-open range of offsets into the source text."""

    start: int
    end: int


@dataclass(frozen=True)
class Token:
    """A token with its kind, source range, position and optional payload."""

    kind: TokenKind
    span: ByteSpan
    line: int
    col: int
    value: TokenValue = None

    def __str__(self) -> str:
        return f"[{self.span.start}..{self.span.end}]"