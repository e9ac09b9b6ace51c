# crusty

`crusty` is the front end of a small compiler for a subset of C. It reads C
source text and turns it into tokens. When it finds a lexical problem, it
records a diagnostic and keeps scanning. The problems it detects are:

- an invalid character
- an unclosed or unexpected delimiter
- an unterminated string or char literal
- an unclosed block comment
- an invalid octal digit

It skips whitespace, `//` and `/* */` comments, and `#` preprocessor lines.
The package also provides the data types of a later compiler stage. These
are an operator precedence table, an AST for expressions, statements and
declarations, and error types with printable reports.

## Installation

```
pip install .
```

## Command line

```
crusty path/to/program.c
```

This prints every token, including the final `Eof`, on standard output. Each
line shows the token's line, column, kind and lexeme. If there are
diagnostics, they go to standard error. Each one shows its message, its
location, its label and a help hint.

If you run `crusty` with no argument, it reads lines from standard input at a
`> ` prompt. It scans each line on its own and stops at end of input.

Exit status:

- `0`: nothing went wrong.
- `74`: the scan reported diagnostics, or the file could not be read or was not valid UTF-8.
- `64`: more than one argument was given. The usage is `crusty [script]`.

## Library use

```python
from crusty.source import SourceFile
from crusty.scanner import Scanner

scanner = Scanner(SourceFile.from_string("int x = 0xFFUL;"))
for token in scanner.scan():
    print(token.line, token.col, token.kind, token.value)

for error in scanner.diagnostics:
    print(error.to_report().message)
```

Modules:

- `crusty.source`: `SourceFile` is a character cursor over the input that tracks line and column. Use `SourceFile.from_path` to read a file or `SourceFile.from_string` to wrap a string.
- `crusty.scanner`: `Scanner` turns a `SourceFile` into a token list. It collects `diagnostics` as it goes.
- `crusty.tokens`: `TokenKind`, `Token` and `ByteSpan`. The payload of a literal, identifier or unknown token is stored in `Token.value`.
- `crusty.keywords`: `lookup_keyword` maps reserved words to their kinds.
- `crusty.operators`: `lex_operator` finishes one- to three-character operators.
- `crusty.char_utils`: character classification and `resolve_escape`.
- `crusty.diagnostics`: the error types for every compiler stage. These are `LexicalError`, `SyntacticError`, `SemanticError`, `IntermediateError`, `OptimizationError` and `CodegenError`. Each one converts to a `Report` with `to_report()`.
- `crusty.report`: `Report`, `Span`, `Label`, `Source` and `SystemFailure`. `render(report, source)` prints a report with a source excerpt and caret markers, in ANSI colour.
- `crusty.syntax`: the AST node types.
- `crusty.precedence`: `infix_binding_power` and `prefix_binding_power` for expression parsing.

## What it does not do

The package stops at tokens. It has no parser that builds `crusty.syntax`
trees from tokens. It does no semantic analysis and generates no code. The
AST, precedence table and later-stage error types are data definitions only.

## Running the tests

```
pip install .[test]
pytest
```