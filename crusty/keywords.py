"""Reserved words of the language."""

from __future__ import annotations

from crusty.tokens import TokenKind

KEYWORDS: dict[str, TokenKind] = {
    # Control flow
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "for": TokenKind.FOR,
    "do": TokenKind.DO,
    "switch": TokenKind.SWITCH,
    "case": TokenKind.CASE,
    "default": TokenKind.DEFAULT,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "return": TokenKind.RETURN,
    # Primitive types
    "int": TokenKind.INT,
    "char": TokenKind.CHAR,
    "float": TokenKind.FLOAT,
    "double": TokenKind.DOUBLE,
    "void": TokenKind.VOID,
    "struct": TokenKind.STRUCT,
    "enum": TokenKind.ENUM,
    "union": TokenKind.UNION,
    # Other keywords
    "typedef": TokenKind.TYPEDEF,
    "const": TokenKind.CONST,
    "static": TokenKind.STATIC,
    "extern": TokenKind.EXTERN,
    "auto": TokenKind.AUTO,
    "register": TokenKind.REGISTER,
    "signed": TokenKind.SIGNED,
    "unsigned": TokenKind.UNSIGNED,
    "short": TokenKind.SHORT,
    "long": TokenKind.LONG,
    "volatile": TokenKind.VOLATILE,
    "inline": TokenKind.INLINE,
    "sizeof": TokenKind.SIZEOF,
}


def lookup_keyword(ident: str) -> TokenKind | None:
    """Return the keyword kind for ``ident``, or None for a user identifier."""
    return KEYWORDS.get(ident)