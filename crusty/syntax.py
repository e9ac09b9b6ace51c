"""Abstract syntax tree: types, expressions, statements and declarations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple, Union

from crusty.report import Span


class PrimitiveType(Enum):
    """Built-in scalar types."""

    INT = auto()
    CHAR = auto()
    FLOAT = auto()
    DOUBLE = auto()
    VOID = auto()


@dataclass(frozen=True)
class PointerType:
    """Pointer to ``target``."""

    target: Type


@dataclass(frozen=True)
class ArrayType:
    """Array whose elements are ``element``."""

    element: Type


@dataclass(frozen=True)
class StructType:
    """A named struct type."""

    name: str


Type = Union[PrimitiveType, PointerType, ArrayType, StructType]


@dataclass(frozen=True)
class QualifierType:
    """A type together with its ``const`` and ``unsigned`` qualifiers."""

    ty: Type
    is_const: bool = False
    is_unsigned: bool = False


class BinOp(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    EQ = auto()
    NEQ = auto()
    LESS = auto()
    GREATER = auto()
    LEQ = auto()
    GEQ = auto()
    AND = auto()
    OR = auto()
    BIT_AND = auto()
    BIT_OR = auto()
    BIT_XOR = auto()
    SHL = auto()
    SHR = auto()


class UnOp(Enum):
    NEG = auto()
    NOT = auto()
    BIT_NOT = auto()
    DEREF = auto()
    ADDR_OF = auto()


class PrefixOp(Enum):
    INC = auto()
    DEC = auto()


class PostfixOp(Enum):
    INC = auto()
    DEC = auto()


class MemberAccess(Enum):
    DIRECT = auto()  # .
    POINTER = auto()  # ->


class LiteralKind(Enum):
    INT = auto()
    DOUBLE = auto()
    CHAR = auto()
    STRING = auto()


# --- Expressions -----------------------------------------------------------


@dataclass(frozen=True)
class LiteralExpr:
    """A literal value; ``value`` is an int, float or str depending on ``kind``."""

    kind: LiteralKind
    value: Union[int, float, str]
    span: Span


@dataclass(frozen=True)
class Ident:
    name: str
    span: Span


@dataclass(frozen=True)
class Binary:
    left: Expr
    op: BinOp
    right: Expr
    span: Span


@dataclass(frozen=True)
class Unary:
    op: UnOp
    operand: Expr
    span: Span


@dataclass(frozen=True)
class Prefix:
    op: PrefixOp
    operand: Expr
    span: Span


@dataclass(frozen=True)
class Postfix:
    op: PostfixOp
    operand: Expr
    span: Span


@dataclass(frozen=True)
class Call:
    callee: Expr
    args: Tuple[Expr, ...]
    span: Span


@dataclass(frozen=True)
class Cast:
    ty: QualifierType
    expr: Expr
    span: Span


@dataclass(frozen=True)
class Index:
    target: Expr
    index: Expr
    span: Span


@dataclass(frozen=True)
class Assign:
    target: Expr
    value: Expr
    span: Span


@dataclass(frozen=True)
class Sizeof:
    operand: Expr
    span: Span


@dataclass(frozen=True)
class Ternary:
    cond: Expr
    then_expr: Expr
    else_expr: Expr
    span: Span


@dataclass(frozen=True)
class Member:
    target: Expr
    access: MemberAccess
    field: str
    span: Span


Expr = Union[
    LiteralExpr,
    Ident,
    Binary,
    Unary,
    Prefix,
    Postfix,
    Call,
    Cast,
    Index,
    Assign,
    Sizeof,
    Ternary,
    Member,
]


# --- Statements ------------------------------------------------------------


@dataclass(frozen=True)
class Block:
    stmts: Tuple[Stmt, ...]
    span: Span


@dataclass(frozen=True)
class If:
    cond: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]
    span: Span


@dataclass(frozen=True)
class While:
    cond: Expr
    body: Stmt
    span: Span


@dataclass(frozen=True)
class For:
    init: Optional[Stmt]
    cond: Optional[Expr]
    step: Optional[Expr]
    body: Stmt
    span: Span


@dataclass(frozen=True)
class Break:
    span: Span


@dataclass(frozen=True)
class Continue:
    span: Span


@dataclass(frozen=True)
class ExprStmt:
    expr: Expr
    span: Span


@dataclass(frozen=True)
class Return:
    value: Optional[Expr]
    span: Span


@dataclass(frozen=True)
class VarDecl:
    ty: QualifierType
    name: str
    init: Optional[Expr]
    span: Span


Stmt = Union[Block, If, While, For, Break, Continue, ExprStmt, Return, VarDecl]


# --- Declarations ----------------------------------------------------------


@dataclass(frozen=True)
class Function:
    return_type: QualifierType
    name: str
    params: Tuple[Tuple[QualifierType, str], ...]
    body: Tuple[Stmt, ...]
    span: Span


@dataclass(frozen=True)
class GlobalVar:
    ty: QualifierType
    name: str
    init: Optional[Expr]
    span: Span


@dataclass(frozen=True)
class StructDecl:
    name: str
    fields: Tuple[Tuple[QualifierType, str], ...]
    span: Span


Decl = Union[Function, GlobalVar, StructDecl]


@dataclass(frozen=True)
class Program:
    """A whole translation unit."""

    decls: Tuple[Decl, ...]