"""Errors produced by the compiler stages and their conversion to reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from crusty.report import Report, ReportableError, Span


class CompilerError(ReportableError):
    """Base class of every error produced while compiling a program."""

    def __str__(self) -> str:
        return self.to_report().message


class LexicalErrorKind(Enum):
    """What went wrong while scanning."""

    INVALID_CHAR = "InvalidChar"
    UNCLOSED_BLOCK_COMMENT = "UnclosedBlockComment"
    UNCLOSED_DELIMITER = "UnclosedDelimiter"
    UNEXPECTED_CLOSING_DELIMITER = "UnexpectedClosingDelimiter"
    UNTERMINATED_LITERAL = "UnterminatedLiteral"
    INVALID_OCTAL_DIGIT = "InvalidOctalDigit"


# message, label template (formatted with ``detail``), help
_LEXICAL_TEXT: dict[LexicalErrorKind, tuple[str, str, str]] = {
    LexicalErrorKind.INVALID_CHAR: (
        "invalid character",
        "'{detail}' nao e valido",
        "Remova ou substitua o caractere.",
    ),
    LexicalErrorKind.UNCLOSED_BLOCK_COMMENT: (
        "unclosed block comment",
        "comentario de bloco nao fechado",
        "Adicione '*/' para fechar o comentario.",
    ),
    LexicalErrorKind.UNCLOSED_DELIMITER: (
        "unclosed delimiter",
        "'{detail}' nao foi fechado",
        "Adicione o delimitador de fechamento correspondente.",
    ),
    LexicalErrorKind.UNEXPECTED_CLOSING_DELIMITER: (
        "unexpected closing delimiter",
        "'{detail}' nao tem par de abertura",
        "Remova o delimitador ou adicione o par de abertura correspondente.",
    ),
    LexicalErrorKind.UNTERMINATED_LITERAL: (
        "unterminated literal",
        "literal '{detail}' nao foi terminada",
        "Feche a string ou char corretamente.",
    ),
    LexicalErrorKind.INVALID_OCTAL_DIGIT: (
        "invalid octal digit",
        "'{detail}' nao e um digito octal valido",
        "Numeros que comecam com '0' sao tratados como octais. "
        "Use apenas digitos de 0 a 7.",
    ),
}


@dataclass
class LexicalError(CompilerError):
    """A scanning error; ``detail`` holds the offending character or literal kind."""

    span: Span
    kind: LexicalErrorKind
    detail: str | None = None

    def to_report(self) -> Report:
        message, label, help_text = _LEXICAL_TEXT[self.kind]
        return (
            Report(message)
            .with_span(self.span)
            .with_label(self.span, label.format(detail=self.detail))
            .with_help(help_text)
        )


@dataclass
class SyntacticError(CompilerError):
    """The parser expected one thing and found another."""

    span: Span
    expected: str
    found: str

    def to_report(self) -> Report:
        return (
            Report("syntax error")
            .with_span(self.span)
            .with_label(
                self.span,
                f"esperado '{self.expected}', encontrado '{self.found}'",
            )
            .with_help(f"talvez você quis usar: '{self.expected}'")
        )


class SemanticErrorKind(Enum):
    """What went wrong during semantic analysis."""

    UNDEFINED_VARIABLE = "UndefinedVariable"
    TYPE_MISMATCH = "TypeMismatch"


@dataclass
class SemanticError(CompilerError):
    """An undefined name (``name``) or a type mismatch (``expected``/``found``)."""

    span: Span
    kind: SemanticErrorKind
    name: str | None = None
    expected: str | None = None
    found: str | None = None

    def to_report(self) -> Report:
        if self.kind is SemanticErrorKind.UNDEFINED_VARIABLE:
            return (
                Report("variable not defined")
                .with_span(self.span)
                .with_label(self.span, f"'{self.name}' nao existe")
                .with_help("declare a variavel antes de usar")
            )
        return (
            Report("type error")
            .with_span(self.span)
            .with_label(
                self.span,
                f"esperado: '{self.expected}', encontrado: '{self.found}'",
            )
        )


_NO_SPAN = Span(line=0, end_line=0, column_start=0, column_end=0)


@dataclass
class IntermediateError(CompilerError):
    """A failure while building the intermediate representation."""

    message: str
    instruction: str | None = None

    def to_report(self) -> Report:
        report = Report("IR error")
        if self.instruction is not None:
            report = report.with_label(_NO_SPAN, f"na instrucao '{self.instruction}'")
        return report.with_help(self.message)


@dataclass
class OptimizationError(CompilerError):
    """A failure inside an optimisation pass."""

    message: str
    pass_name: str

    def to_report(self) -> Report:
        return Report(f"Error na otimizacao ({self.pass_name})").with_help(self.message)


@dataclass
class CodegenError(CompilerError):
    """A failure while generating target code."""

    message: str
    instruction: str | None = None

    def to_report(self) -> Report:
        report = Report("code generation")
        if self.instruction is not None:
            report = report.with_help(
                f"invalid register in instruction '{self.instruction}'"
            )
        return report.with_help(f"detalhe: '{self.message}'")