"""Character classification helpers for the lexer."""

from __future__ import annotations

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}


def is_ident_start(c: str) -> bool:
    """True if ``c`` may start an identifier (ASCII letter or underscore)."""
    return c == "_" or (c.isascii() and c.isalpha())


def is_ident_continue(c: str) -> bool:
    """True if ``c`` may continue an identifier (ASCII letter, digit or underscore)."""
    return c == "_" or (c.isascii() and c.isalnum())


def is_decimal_digit(c: str) -> bool:
    """True if ``c`` is a decimal digit 0-9."""
    return len(c) == 1 and "0" <= c <= "9"


def is_hex_digit(c: str) -> bool:
    """True if ``c`` is a hexadecimal digit."""
    return len(c) == 1 and c in "0123456789abcdefABCDEF"


def is_octal_digit(c: str) -> bool:
    """True if ``c`` is an octal digit 0-7."""
    return len(c) == 1 and "0" <= c <= "7"


def is_whitespace(c: str) -> bool:
    """True for space, tab, carriage return and newline."""
    return c in (" ", "\t", "\r", "\n")


def resolve_escape(c: str) -> str | None:
    """Return the character an escape sequence ``\\c`` stands for, or None."""
    return _ESCAPES.get(c)