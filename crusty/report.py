"""Diagnostic reports, source locations and terminal rendering."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Span:
    """A region of source code in line/column coordinates."""

    line: int
    end_line: int
    column_start: int
    column_end: int


class Source:
    """A named source text split into lines for error display."""

    def __init__(self, filename: str, content: str) -> None:
        self.filename = filename
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self.lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    def get_line(self, line: int) -> str | None:
        """Return the 1-indexed line ``line``, or None if out of range."""
        if 1 <= line <= len(self.lines):
            return self.lines[line - 1]
        return None


@dataclass(frozen=True)
class Label:
    """An annotation attached to a span of a report."""

    span: Span
    message: str


@dataclass(frozen=True)
class Report:
    """A structured diagnostic, built up with the ``with_*`` methods."""

    message: str
    span: Span | None = None
    labels: tuple[Label, ...] = field(default_factory=tuple)
    help: str | None = None
    system: str | None = None

    def with_span(self, span: Span) -> Report:
        """Return a copy pointing at ``span``."""
        return dataclasses.replace(self, span=span)

    def with_label(self, span: Span, message: str) -> Report:
        """Return a copy with an extra label."""
        return dataclasses.replace(self, labels=(*self.labels, Label(span, message)))

    def with_help(self, message: str) -> Report:
        """Return a copy with a help hint."""
        return dataclasses.replace(self, help=message)

    def with_system_error(self, message: str) -> Report:
        """Return a copy carrying a system-level failure message."""
        return dataclasses.replace(self, system=f"[SYSTEM ERROR] {message}")


class ReportableError(Exception):
    """An error that can describe itself as a Report."""

    def to_report(self) -> Report:
        return Report(str(self))


class SystemFailure(ReportableError):
    """An I/O or environment failure."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def to_report(self) -> Report:
        return Report("System Error").with_system_error(self.msg)


def _red(s: str) -> str:
    return f"\x1b[31m{s}\x1b[0m"


def _green(s: str) -> str:
    return f"\x1b[32m{s}\x1b[0m"


def _bold(s: str) -> str:
    return f"\x1b[1m{s}\x1b[0m"


def render(report: Report, source: Source) -> None:
    """Print ``report`` to stdout with its location, underline and hints."""
    out = sys.stdout
    print(f"{_red(_bold('error'))}: {report.message}", file=out)

    span = report.span
    if span is not None:
        if span.end_line == span.line:
            print(f" --> {source.filename}:{span.line}", file=out)
        else:
            print(f" --> {source.filename}:{span.line}-{span.end_line}", file=out)
        print("  |", file=out)

        text = source.get_line(span.line)
        if text is not None:
            print(f"{span.line:2} | {text}", file=out)
            width = max(span.column_end - span.column_start, 0)
            indicator = " " * span.column_start + "^" * width
            print(f"  | {_red(indicator)}", file=out)

    for label in report.labels:
        print(f"  = {label.message}", file=out)
    if report.help is not None:
        print(f"  = help: {_green(report.help)}", file=out)