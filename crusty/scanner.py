"""Lexical scanner turning source text into tokens and diagnostics."""

from __future__ import annotations

from typing import Callable

from crusty.char_utils import (
    is_decimal_digit,
    is_hex_digit,
    is_ident_continue,
    is_ident_start,
    is_octal_digit,
    resolve_escape,
)
from crusty.diagnostics import CompilerError, LexicalError, LexicalErrorKind
from crusty.keywords import lookup_keyword
from crusty.operators import lex_operator
from crusty.report import Span
from crusty.source import SourceFile
from crusty.tokens import ByteSpan, Token, TokenKind, TokenValue

_I64_MAX = 2**63 - 1

_OPENERS = {
    "(": TokenKind.LEFT_PAREN,
    "[": TokenKind.LEFT_BRACKET,
    "{": TokenKind.LEFT_BRACE,
}

_CLOSERS = {
    ")": ("(", TokenKind.RIGHT_PAREN),
    "]": ("[", TokenKind.RIGHT_BRACKET),
    "}": ("{", TokenKind.RIGHT_BRACE),
}

_PUNCTUATION = {
    "%": TokenKind.PERCENT,
    "^": TokenKind.CARET,
    "~": TokenKind.TILDE,
    ".": TokenKind.DOT,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
}

_OPERATOR_CHARS = frozenset("+-*/=!<>&|")
_WHITESPACE = frozenset(" \t\r\n")
_INT_SUFFIXES = frozenset("uUlL")
_FLOAT_SUFFIXES = frozenset("fFlL")


def _to_i64(digits: str, base: int) -> int:
    """Parse ``digits`` in ``base``; empty input or overflow yields 0."""
    if not digits:
        return 0
    value = int(digits, base)
    return value if value <= _I64_MAX else 0


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class Scanner:
    """Scans a SourceFile into ``tokens``, collecting ``diagnostics`` on the way."""

    def __init__(self, source: SourceFile) -> None:
        self.source = source
        self.tokens: list[Token] = []
        self.diagnostics: list[CompilerError] = []
        # Opening delimiters not yet closed: (char, line, col)
        self._delimiters: list[tuple[str, int, int]] = []
        # Offset where the token being recognised starts
        self._token_start = 0

    # ------------------------------------------------------------------ driver

    def scan(self) -> list[Token]:
        """Scan to the end of input and return the tokens, always ending in EOF."""
        src = self.source
        while not src.is_at_end():
            self._skip_whitespace_and_comments()
            if src.is_at_end():
                break
            self._next_token()

        unclosed, self._delimiters = self._delimiters, []
        for c, line, col in unclosed:
            self._report(LexicalErrorKind.UNCLOSED_DELIMITER, line, col, col + 1, c)

        self._token_start = src.pos
        self.emit_at(TokenKind.EOF, src.line, src.col)
        return self.tokens

    def _next_token(self) -> None:
        src = self.source
        line, col = src.line, src.col
        self._token_start = src.pos

        c = src.advance()
        if c is None:
            return

        if "0" <= c <= "9":
            self._lex_number(c, line, col)
        elif c == '"':
            self._lex_string(line, col)
        elif c == "'":
            self._lex_char(line, col)
        elif is_ident_start(c):
            self._lex_identifier(c, line, col)
        elif c in _OPENERS:
            self._delimiters.append((c, line, col))
            self.emit_at(_OPENERS[c], line, col)
        elif c in _CLOSERS:
            opener, kind = _CLOSERS[c]
            if self._delimiters and self._delimiters[-1][0] == opener:
                self._delimiters.pop()
            else:
                self._report(
                    LexicalErrorKind.UNEXPECTED_CLOSING_DELIMITER, line, col, col + 1, c
                )
            self.emit_at(kind, line, col)
        elif c in _PUNCTUATION:
            self.emit_at(_PUNCTUATION[c], line, col)
        elif c in _OPERATOR_CHARS:
            kind = lex_operator(c, src)
            if kind is TokenKind.UNKNOWN:
                self.emit_unknown(c, line, col)
            else:
                self.emit_at(kind, line, col)
        else:
            self.emit_unknown(c, line, col)

    # ---------------------------------------------------------------- emitting

    def _emit(self, kind: TokenKind, line: int, col: int, value: TokenValue = None) -> None:
        self.tokens.append(
            Token(
                kind=kind,
                span=ByteSpan(self._token_start, self.source.pos),
                line=line,
                col=col,
                value=value,
            )
        )

    def emit_at(self, kind: TokenKind, line: int, col: int) -> None:
        """Append a payload-less token spanning from the token start to the cursor."""
        self._emit(kind, line, col)

    def _report(
        self,
        kind: LexicalErrorKind,
        line: int,
        col_start: int,
        col_end: int,
        detail: str | None = None,
    ) -> None:
        span = Span(line=line, end_line=line, column_start=col_start, column_end=col_end)
        self.diagnostics.append(LexicalError(span, kind, detail))

    def emit_unknown(self, c: str, line: int, col: int) -> None:
        """Record an invalid-character diagnostic and emit an UNKNOWN token for ``c``."""
        self._report(LexicalErrorKind.INVALID_CHAR, line, col, col + 1, c)
        self._emit(TokenKind.UNKNOWN, line, col, c)

    def emit_unterminated_literal(
        self, lit: str, line: int, col_start: int, col_end: int
    ) -> None:
        """Record that a string or char literal was never closed."""
        self._report(LexicalErrorKind.UNTERMINATED_LITERAL, line, col_start, col_end, lit)

    # ------------------------------------------------------ whitespace/comments

    def _skip_to_line_end(self) -> None:
        src = self.source
        while src.peek() not in ("\n", None):
            src.advance()

    def _skip_whitespace_and_comments(self) -> None:
        src = self.source
        while True:
            while src.peek() in _WHITESPACE:
                src.advance()

            if src.peek() == "/" and src.peek_ahead() == "/":
                self._skip_to_line_end()
                continue

            if src.peek() == "/" and src.peek_ahead() == "*":
                comment_line, comment_col = src.line, src.col
                src.advance()
                src.advance()
                closed = False
                while True:
                    ch = src.advance()
                    if ch is None:
                        self._report(
                            LexicalErrorKind.UNCLOSED_BLOCK_COMMENT,
                            comment_line,
                            comment_col,
                            comment_col + 2,
                        )
                        break
                    if ch == "*" and src.peek() == "/":
                        src.advance()
                        closed = True
                        break
                if closed:
                    continue
                break

            # Preprocessor directives are skipped whole.
            if src.peek() == "#":
                self._skip_to_line_end()
                continue

            break

    # ------------------------------------------------------------------ rules

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        src = self.source
        chars = []
        while (c := src.peek()) is not None and predicate(c):
            chars.append(c)
            src.advance()
        return "".join(chars)

    def _skip_suffix(self, allowed: frozenset[str]) -> None:
        src = self.source
        while src.peek() in allowed:
            src.advance()

    def _lex_identifier(self, first: str, line: int, col: int) -> None:
        name = first + self._take_while(is_ident_continue)
        keyword = lookup_keyword(name)
        if keyword is not None:
            self.emit_at(keyword, line, col)
        else:
            self._emit(TokenKind.IDENTIFIER, line, col, name)

    def _lex_number(self, first: str, line: int, col: int) -> None:
        src = self.source

        if first == "0" and src.peek() in ("x", "X"):
            src.advance()
            value = _to_i64(self._take_while(is_hex_digit), 16)
            self._skip_suffix(_INT_SUFFIXES)
            self._emit(TokenKind.INT_LITERAL, line, col, value)
            return

        if first == "0" and src.peek() is not None and is_decimal_digit(src.peek()):
            digits = []
            while (c := src.peek()) is not None:
                if is_octal_digit(c):
                    digits.append(c)
                    src.advance()
                elif is_decimal_digit(c):
                    src.advance()
                    col_invalid = col + 1 + len(digits)
                    self._report(
                        LexicalErrorKind.INVALID_OCTAL_DIGIT,
                        line,
                        col_invalid,
                        col_invalid + 1,
                        c,
                    )
                    # The UNKNOWN token covers only the offending digit.
                    self._token_start = src.pos - 1
                    self._emit(TokenKind.UNKNOWN, line, col_invalid, c)
                    return
                else:
                    break
            value = _to_i64("".join(digits), 8)
            self._skip_suffix(_INT_SUFFIXES)
            self._emit(TokenKind.INT_LITERAL, line, col, value)
            return

        text = first + self._take_while(is_decimal_digit)

        if src.peek() in (".", "e", "E"):
            if src.peek() == ".":
                src.advance()
                text += "." + self._take_while(is_decimal_digit)
            if src.peek() in ("e", "E"):
                text += src.advance()
                if src.peek() in ("+", "-"):
                    text += src.advance()
                text += self._take_while(is_decimal_digit)
            value = _to_float(text)
            self._skip_suffix(_FLOAT_SUFFIXES)
            self._emit(TokenKind.FLOAT_LITERAL, line, col, value)
        else:
            value_int = _to_i64(text, 10)
            self._skip_suffix(_INT_SUFFIXES)
            self._emit(TokenKind.INT_LITERAL, line, col, value_int)

    def _lex_string(self, line: int, col: int) -> None:
        src = self.source
        chars = []
        col_end = col + 1
        while True:
            c = src.advance()
            if c == '"':
                break
            if c == "\\":
                col_end += 1
                escaped = src.advance()
                if escaped is not None:
                    resolved = resolve_escape(escaped)
                    chars.append(resolved if resolved is not None else escaped)
                    col_end += 1
            elif c is None or c == "\n":
                self.emit_unterminated_literal("string", line, col, col_end)
                break
            else:
                chars.append(c)
                col_end += 1
        self._emit(TokenKind.STRING_LITERAL, line, col, "".join(chars))

    def _lex_char(self, line: int, col: int) -> None:
        src = self.source
        col_end = col + 1

        c = src.advance()
        if c == "\\":
            col_end += 1
            escaped = src.advance()
            if escaped is not None:
                col_end += 1
                resolved = resolve_escape(escaped)
                value = resolved if resolved is not None else escaped
            else:
                self.emit_unterminated_literal("char", line, col, col_end)
                value = "\0"
        elif c is not None:
            col_end += 1
            value = c
        else:
            self.emit_unterminated_literal("char", line, col, col_end)
            value = "\0"

        closing = src.advance()
        if closing == "'":
            self._emit(TokenKind.CHAR_LITERAL, line, col, value)
        elif closing is not None:
            self.emit_unknown(closing, line, src.col - 1)
        else:
            self.emit_unterminated_literal("char", line, col, col_end)