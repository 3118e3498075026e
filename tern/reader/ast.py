"""Syntax tree produced by the Tern parser.

Nodes are plain dataclasses. Each keeps the token it was built from (for
diagnostics) and renders a canonical source-like string via ``__str__``; the
string of a parsed program parses back to a program with the same string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tern.reader.lexer import Token


class Node:
    token: Token

    def token_literal(self) -> str:
        return self.token.literal


class Statement(Node):
    pass


class Expression(Node):
    pass


@dataclass
class Program(Node):
    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "; ".join(str(s) for s in self.statements)


# --- Expressions ---

@dataclass
class Identifier(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral(Expression):
    token: Token
    value: int

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class StringLiteral(Expression):
    token: Token
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass
class BooleanLiteral(Expression):
    token: Token
    value: bool

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class ArrayLiteral(Expression):
    token: Token
    elements: list[Expression]

    def __str__(self) -> str:
        return f"[{', '.join(str(e) for e in self.elements)}]"


@dataclass
class HashLiteral(Expression):
    token: Token
    # source order is kept; keys are expressions, evaluated at runtime
    pairs: list[tuple[Expression, Expression]]

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.pairs) + "}"


@dataclass
class PrefixExpression(Expression):
    token: Token
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression(Expression):
    token: Token
    left: Expression
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class IfExpression(Expression):
    token: Token
    condition: Expression
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None

    def __str__(self) -> str:
        out = f"if ({self.condition}) {{{self.consequence}}}"
        if self.alternative is not None:
            out += f" else {{{self.alternative}}}"
        return out


@dataclass
class FunctionLiteral(Expression):
    token: Token
    parameters: list[Identifier]
    body: BlockStatement

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {{{self.body}}}"


@dataclass
class CallExpression(Expression):
    token: Token
    function: Expression  # Identifier or FunctionLiteral, or any callee expression
    arguments: list[Expression]

    def __str__(self) -> str:
        return f"{self.function}({', '.join(str(a) for a in self.arguments)})"


@dataclass
class IndexExpression(Expression):
    token: Token
    left: Expression
    index: Expression

    def __str__(self) -> str:
        return f"({self.left}[{self.index}])"


@dataclass
class LoopExpression(Expression):
    token: Token
    body: BlockStatement

    def __str__(self) -> str:
        return f"loop {{{self.body}}}"


# --- Statements ---

@dataclass
class LetStatement(Statement):
    token: Token
    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value}"


@dataclass
class ReturnStatement(Statement):
    token: Token
    return_value: Expression

    def __str__(self) -> str:
        return f"return {self.return_value}"


@dataclass
class ExpressionStatement(Statement):
    token: Token
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


@dataclass
class BlockStatement(Statement):
    token: Token
    statements: list[Statement]

    def __str__(self) -> str:
        return "; ".join(str(s) for s in self.statements)


@dataclass
class ImportStatement(Statement):
    token: Token
    path: StringLiteral

    def __str__(self) -> str:
        return f"import {self.path}"


@dataclass
class ExitStatement(Statement):
    token: Token
    code: IntegerLiteral

    def __str__(self) -> str:
        return f"exit {self.code}"


@dataclass
class BreakStatement(Statement):
    token: Token

    def __str__(self) -> str:
        return "break"
