import io

import pytest

from crusty.cli import main, run, run_file
from crusty.report import ReportableError, SystemFailure
from crusty.source import SourceFile


def _token_lines(out: str) -> list[str]:
    return [line for line in out.splitlines() if line.startswith("  [")]


def test_run_prints_token_header_matching_lines(capsys):
    run(SourceFile.from_string("int x;"))
    out = capsys.readouterr().out
    lines = _token_lines(out)
    assert f"=== Tokens ({len(lines)}) ===" in out
    assert "=== Diagnostics (0) ===" in out


def test_run_formats_first_token_line(capsys):
    run(SourceFile.from_string("int x;"))
    first = _token_lines(capsys.readouterr().out)[0]
    assert first.startswith("  [  1:1  ]  Int")
    assert first.endswith('"int"')


def test_run_shows_payloads_and_lexemes(capsys):
    run(SourceFile.from_string('x = "hi";'))
    out = capsys.readouterr().out
    assert 'Identifier("x")' in out
    assert 'StringLiteral("hi")' in out
    assert '"\\"hi\\""' in out


def test_run_last_token_is_eof(capsys):
    run(SourceFile.from_string("42"))
    lines = _token_lines(capsys.readouterr().out)
    assert "Eof" in lines[-1]
    assert "IntLiteral(42)" in lines[0]


def test_run_raises_on_diagnostics(capsys):
    with pytest.raises(ReportableError, match=r"compilation failed with 1 error\(s\)"):
        run(SourceFile.from_string("@"))
    err = capsys.readouterr().err
    assert "error: invalid character" in err
    assert "= help: Remova ou substitua o caractere." in err


def test_run_reports_location_of_unclosed_delimiter(capsys):
    with pytest.raises(ReportableError):
        run(SourceFile.from_string("("))
    err = capsys.readouterr().err
    assert "error: unclosed delimiter" in err
    assert "--> 1:1" in err


def test_run_file_missing_raises_system_failure():
    with pytest.raises(SystemFailure):
        run_file("/nonexistent/path/file.c")


def test_run_file_reads_file(tmp_path, capsys):
    path = tmp_path / "main.c"
    path.write_text("int main() {}", encoding="utf-8")
    run_file(path)
    out = capsys.readouterr().out
    assert 'Identifier("main")' in out
    assert "LeftBrace" in out


def test_main_too_many_arguments(capsys):
    assert main(["a.c", "b.c"]) == 64
    assert "Usage: crusty [script]" in capsys.readouterr().err


def test_main_missing_file(capsys):
    assert main(["/nonexistent/path/file.c"]) == 74
    err = capsys.readouterr().err
    assert "--- ERROR ---" in err
    assert "Message: System Error" in err
    assert "System Info: [SYSTEM ERROR] Could not read file" in err


def test_main_valid_file(tmp_path, capsys):
    path = tmp_path / "ok.c"
    path.write_text("return 0;", encoding="utf-8")
    assert main([str(path)]) == 0
    assert "Return" in capsys.readouterr().out


def test_main_file_with_errors(tmp_path, capsys):
    path = tmp_path / "bad.c"
    path.write_text("int $;", encoding="utf-8")
    assert main([str(path)]) == 74
    err = capsys.readouterr().err
    assert "Message: compilation failed with 1 error(s)" in err


def test_main_interactive_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("int\n@\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Int" in captured.out
    assert "error: invalid character" in captured.err