import re

import pytest

from crusty.report import (
    Label,
    Report,
    ReportableError,
    Source,
    Span,
    SystemFailure,
    render,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


SPAN = Span(line=1, end_line=1, column_start=2, column_end=5)


def test_new_report_has_empty_optional_fields():
    report = Report("boom")
    assert report.message == "boom"
    assert report.span is None
    assert report.labels == ()
    assert report.help is None
    assert report.system is None


def test_builder_methods_chain():
    report = (
        Report("invalid character")
        .with_span(SPAN)
        .with_label(SPAN, "first")
        .with_label(SPAN, "second")
        .with_help("Remova ou substitua o caractere.")
    )
    assert report.span == SPAN
    assert report.labels == (Label(SPAN, "first"), Label(SPAN, "second"))
    assert report.help == "Remova ou substitua o caractere."


def test_builder_leaves_original_unchanged():
    base = Report("m")
    derived = base.with_help("h")
    assert base.help is None
    assert derived.help == "h"


def test_with_system_error_prefix():
    report = Report("System Error").with_system_error("disk")
    assert report.system == "[SYSTEM ERROR] disk"


def test_system_failure_report():
    err = SystemFailure("cannot open")
    report = err.to_report()
    assert report.message == "System Error"
    assert report.system == "[SYSTEM ERROR] cannot open"
    with pytest.raises(ReportableError):
        raise err


def test_reportable_error_default_report_uses_message():
    assert ReportableError("something broke").to_report().message == "something broke"


def test_source_get_line():
    source = Source("f.c", "first\nsecond\n")
    assert source.get_line(1) == "first"
    assert source.get_line(2) == "second"
    assert source.get_line(0) is None
    assert source.get_line(3) is None


def test_source_strips_carriage_returns():
    source = Source("f.c", "x\r\ny")
    assert source.lines == ["x", "y"]


def test_render_single_line(capsys):
    source = Source("f.c", "int x = @;\n")
    report = (
        Report("invalid character")
        .with_span(SPAN)
        .with_label(SPAN, "label text")
        .with_help("hint text")
    )
    render(report, source)
    lines = [plain(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[0] == "error: invalid character"
    assert lines[1] == " --> f.c:1"
    assert lines[2] == "  |"
    assert lines[3].endswith(" | int x = @;")
    marker = lines[4][len("  | "):]
    assert marker.count("^") == SPAN.column_end - SPAN.column_start
    assert marker.index("^") == SPAN.column_start
    assert lines[5] == "  = label text"
    assert lines[6] == "  = help: hint text"


def test_render_multi_line_location(capsys):
    source = Source("f.c", "a\nb\nc\n")
    span = Span(line=1, end_line=3, column_start=0, column_end=1)
    render(Report("oops").with_span(span), source)
    out = plain(capsys.readouterr().out)
    assert " --> f.c:1-3" in out.splitlines()


def test_render_without_span(capsys):
    render(Report("plain"), Source("f.c", ""))
    out = plain(capsys.readouterr().out)
    assert out.splitlines() == ["error: plain"]