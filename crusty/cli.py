"""Command-line driver: scan a file or interactive input and print the tokens."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from crusty.report import Report, ReportableError
from crusty.scanner import Scanner
from crusty.source import SourceFile
from crusty.tokens import Token, TokenKind

_USAGE_EXIT = 64
_ERROR_EXIT = 74

_STR_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}


class _DiagnosticError(ReportableError):
    """Raised by ``run`` when scanning produced diagnostics."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"compilation failed with {count} error(s)")

    def to_report(self) -> Report:
        return Report(f"compilation failed with {self.count} error(s)")


def _quote(text: str, quote: str) -> str:
    escaped = "".join(
        "\\" + ch if ch == quote else _STR_ESCAPES.get(ch, ch) for ch in text
    )
    return f"{quote}{escaped}{quote}"


def _kind_name(kind: TokenKind) -> str:
    return "".join(part.capitalize() for part in kind.name.split("_"))


def _describe_kind(token: Token) -> str:
    name = _kind_name(token.kind)
    value = token.value
    if value is None:
        return name
    if token.kind in (TokenKind.STRING_LITERAL, TokenKind.IDENTIFIER):
        return f"{name}({_quote(str(value), chr(34))})"
    if token.kind in (TokenKind.CHAR_LITERAL, TokenKind.UNKNOWN):
        return f"{name}({_quote(str(value), chr(39))})"
    return f"{name}({value!r})"


def run(source: SourceFile) -> None:
    """Scan ``source``, print its tokens and diagnostics.

    Raises a ReportableError when any diagnostic was produced.
    """
    scanner = Scanner(source)
    tokens = scanner.scan()

    print(f"=== Tokens ({len(tokens)}) ===")
    for token in tokens:
        lexeme = source.text[token.span.start : token.span.end]
        kind_str = _describe_kind(token)
        print(
            f"  [{token.line:3}:{token.col:<3}]  {kind_str:<35} {_quote(lexeme, chr(34))}"
        )

    diagnostics = scanner.diagnostics
    if diagnostics:
        print(f"\n=== Diagnostics ({len(diagnostics)}) ===", file=sys.stderr)
        for diagnostic in diagnostics:
            report = diagnostic.to_report()
            print(f"  error: {report.message}", file=sys.stderr)
            if report.span is not None:
                print(
                    f"    --> {report.span.line}:{report.span.column_start}",
                    file=sys.stderr,
                )
            for label in report.labels:
                print(f"    | {label.message}", file=sys.stderr)
            if report.help is not None:
                print(f"    = help: {report.help}", file=sys.stderr)
        raise _DiagnosticError(len(diagnostics))

    print("\n=== Diagnostics (0) ===")


def run_file(path: str | Path) -> None:
    """Read the file at ``path`` and run it."""
    run(SourceFile.from_path(path))


def _run_prompt() -> None:
    """Scan each line typed on standard input until end of input."""
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return
        try:
            run(SourceFile.from_string(line))
        except ReportableError:
            # Diagnostics were already printed; keep reading.
            continue


def _report_error(error: ReportableError) -> int:
    report = error.to_report()
    print("--- ERROR ---", file=sys.stderr)
    print(f"Message: {report.message}", file=sys.stderr)
    if report.system is not None:
        print(f"System Info: {report.system}", file=sys.stderr)
    if report.help is not None:
        print(f"Help: {report.help}", file=sys.stderr)
    return _ERROR_EXIT


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: interactive mode without arguments, or scan one file."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            _run_prompt()
        elif len(args) == 1:
            run_file(args[0])
        else:
            print("Usage: crusty [script]", file=sys.stderr)
            return _USAGE_EXIT
    except ReportableError as error:
        return _report_error(error)
    return 0


if __name__ == "__main__":
    sys.exit(main())