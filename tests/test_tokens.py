from crusty.tokens import ByteSpan, Token, TokenKind


def test_token_display_shows_span():
    token = Token(TokenKind.IDENTIFIER, ByteSpan(0, 3), 1, 1, "foo")
    assert str(token) == "[0..3]"


def test_token_kind_eq_works():
    t1 = Token(TokenKind.IF, ByteSpan(0, 2), 1, 1)
    t2 = Token(TokenKind.IF, ByteSpan(0, 2), 1, 1)
    t3 = Token(TokenKind.WHILE, ByteSpan(0, 2), 1, 1)
    assert t1.kind == t2.kind
    assert t1.kind != t3.kind
    assert t1 == t2
    assert t1 != t3


def test_token_equality_includes_payload():
    a = Token(TokenKind.INT_LITERAL, ByteSpan(0, 2), 1, 1, 42)
    b = Token(TokenKind.INT_LITERAL, ByteSpan(0, 2), 1, 1, 42)
    c = Token(TokenKind.INT_LITERAL, ByteSpan(0, 2), 1, 1, 43)
    assert a == b
    assert a != c


def test_byte_span_fields():
    span = ByteSpan(4, 9)
    assert (span.start, span.end) == (4, 9)
    assert span == ByteSpan(4, 9)


def test_token_default_value_is_none():
    token = Token(TokenKind.SEMICOLON, ByteSpan(0, 1), 1, 1)
    assert token.value is None
    assert token.kind is TokenKind.SEMICOLON