"""
  Tern Parser

Recursive descent for statements, operator precedence ("Pratt") parsing for
expressions. Each token type may carry a prefix parse function (token starts
an expression) and an infix parse function (token continues one); binding
power comes from `PRECEDENCES`.

The parser never raises on malformed input. Problems are appended to
`Parser.errors` and the failing statement is skipped; callers must check
`errors` before evaluating the returned Program.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Optional

from tern.reader import ast
from tern.reader.lexer import Lexer, Token, TokenType
from tern.types.objects import INT_MAX

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], Optional[ast.Expression]]
InfixParseFn = Callable[[ast.Expression], Optional[ast.Expression]]


class Precedence(IntEnum):
    LOWEST = 0
    LOGICAL_OR = 1  # ||
    LOGICAL_AND = 2  # &&
    EQUALS = 3  # == !=
    LESSGREATER = 4  # < <= > >=
    SUM = 5  # + -
    PRODUCT = 6  # * / %
    PREFIX = 7  # -x !x
    CALL = 8  # f(x)
    INDEX = 9  # a[i]


PRECEDENCES: dict[str, Precedence] = {
    TokenType.OR: Precedence.LOGICAL_OR,
    TokenType.AND: Precedence.LOGICAL_AND,
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.LT_EQ: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.GT_EQ: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.PERCENT: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.LBRACKET: Precedence.INDEX,
}


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: list[str] = []

        # braces opened up to and including cur_token, and the depth each
        # enclosing block started at
        self.brace_depth = 0
        self.block_depths: list[int] = []

        self.cur_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()
        self._track_braces()

        self.prefix_parse_fns: dict[str, PrefixParseFn] = {
            TokenType.IDENT: self.parse_identifier,
            TokenType.INT: self.parse_integer_literal,
            TokenType.STRING: self.parse_string_literal,
            TokenType.TRUE: self.parse_boolean,
            TokenType.FALSE: self.parse_boolean,
            TokenType.BANG: self.parse_prefix_expression,
            TokenType.MINUS: self.parse_prefix_expression,
            TokenType.LPAREN: self.parse_grouped_expression,
            TokenType.IF: self.parse_if_expression,
            TokenType.FUNCTION: self.parse_function_literal,
            TokenType.LBRACKET: self.parse_array_literal,
            TokenType.LBRACE: self.parse_hash_literal,
            TokenType.LOOP: self.parse_loop_expression,
        }

        self.infix_parse_fns: dict[str, InfixParseFn] = {
            tok_type: self.parse_infix_expression
            for tok_type in PRECEDENCES
            if tok_type not in (TokenType.LPAREN, TokenType.LBRACKET)
        }
        self.infix_parse_fns[TokenType.LPAREN] = self.parse_call_expression
        self.infix_parse_fns[TokenType.LBRACKET] = self.parse_index_expression

    # ------------------------
    # Token cursor
    # ------------------------
    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        self._track_braces()

    def _track_braces(self) -> None:
        if self.cur_token_is(TokenType.LBRACE):
            self.brace_depth += 1
        elif self.cur_token_is(TokenType.RBRACE):
            self.brace_depth -= 1

    def at_block_end(self) -> bool:
        """True when the current token is the `}` closing the innermost open block."""
        return (
            self.cur_token_is(TokenType.RBRACE)
            and bool(self.block_depths)
            and self.brace_depth < self.block_depths[-1]
        )

    def cur_token_is(self, tok_type: str) -> bool:
        return self.cur_token.type == tok_type

    def peek_token_is(self, tok_type: str) -> bool:
        return self.peek_token.type == tok_type

    def expect_peek(self, tok_type: str) -> bool:
        """Advance if the next token has type `tok_type`, else record an error."""
        if self.peek_token_is(tok_type):
            self.next_token()
            return True
        self.peek_error(tok_type)
        return False

    def peek_error(self, tok_type: str) -> None:
        self.errors.append(
            f"expected next token to be {tok_type}, got {self.peek_token.type} instead"
        )

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.type, Precedence.LOWEST)

    def skip_optional_semicolon(self) -> None:
        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

    def synchronize(self) -> None:
        """Skip to the end of a broken statement: a `;`, a block's `}` or EOF."""
        while not (
            self.at_block_end()
            or self.cur_token_is(TokenType.SEMICOLON)
            or self.cur_token_is(TokenType.EOF)
            or self.peek_token_is(TokenType.RBRACE)
            or self.peek_token_is(TokenType.EOF)
        ):
            self.next_token()

    # ------------------------
    # Statements
    # ------------------------
    def parse_program(self) -> ast.Program:
        program = ast.Program()
        while not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        if self.errors:
            logger.debug("parse finished with %d error(s)", len(self.errors))
        return program

    def parse_statement(self) -> Optional[ast.Statement]:
        match self.cur_token.type:
            case TokenType.LET:
                stmt = self.parse_let_statement()
            case TokenType.RETURN:
                stmt = self.parse_return_statement()
            case TokenType.IMPORT:
                stmt = self.parse_import_statement()
            case TokenType.EXIT:
                stmt = self.parse_exit_statement()
            case TokenType.BREAK:
                stmt = self.parse_break_statement()
            case _:
                stmt = self.parse_expression_statement()
        if stmt is None:
            self.synchronize()
        return stmt

    def parse_let_statement(self) -> Optional[ast.LetStatement]:
        token = self.cur_token
        if not self.expect_peek(TokenType.IDENT):
            return None
        name = ast.Identifier(self.cur_token, self.cur_token.literal)
        if not self.expect_peek(TokenType.ASSIGN):
            return None
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None
        self.skip_optional_semicolon()
        return ast.LetStatement(token, name, value)

    def parse_return_statement(self) -> Optional[ast.ReturnStatement]:
        token = self.cur_token
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            return None
        self.skip_optional_semicolon()
        return ast.ReturnStatement(token, value)

    def parse_import_statement(self) -> Optional[ast.ImportStatement]:
        token = self.cur_token
        if not self.expect_peek(TokenType.STRING):
            return None
        path = self.parse_string_literal()
        self.skip_optional_semicolon()
        return ast.ImportStatement(token, path)

    def parse_exit_statement(self) -> Optional[ast.ExitStatement]:
        token = self.cur_token
        if not self.expect_peek(TokenType.INT):
            return None
        code = self.parse_integer_literal()
        if code is None:
            return None
        self.skip_optional_semicolon()
        return ast.ExitStatement(token, code)

    def parse_break_statement(self) -> ast.BreakStatement:
        token = self.cur_token
        self.skip_optional_semicolon()
        return ast.BreakStatement(token)

    def parse_expression_statement(self) -> Optional[ast.ExpressionStatement]:
        token = self.cur_token
        expr = self.parse_expression(Precedence.LOWEST)
        if expr is None:
            return None
        self.skip_optional_semicolon()
        return ast.ExpressionStatement(token, expr)

    def parse_block_statement(self) -> Optional[ast.BlockStatement]:
        """Parse `{ ... }`; expects the current token to be `{` and leaves it on `}`."""
        token = self.cur_token
        statements: list[ast.Statement] = []
        self.block_depths.append(self.brace_depth)
        try:
            self.next_token()
            while not self.cur_token_is(TokenType.RBRACE):
                if self.cur_token_is(TokenType.EOF):
                    self.errors.append("expected next token to be }, got EOF instead")
                    return None
                stmt = self.parse_statement()
                if stmt is not None:
                    statements.append(stmt)
                elif self.at_block_end():
                    # the broken statement ran into this block's `}`
                    break
                self.next_token()
        finally:
            self.block_depths.pop()
        return ast.BlockStatement(token, statements)

    # ------------------------
    # Expressions
    # ------------------------
    def parse_expression(self, precedence: Precedence) -> Optional[ast.Expression]:
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.errors.append(f"no prefix parse function for {self.cur_token.type} found")
            return None
        left = prefix()

        while (
            left is not None
            and not self.peek_token_is(TokenType.SEMICOLON)
            and precedence < self.peek_precedence()
        ):
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)

        return left

    def parse_identifier(self) -> ast.Identifier:
        return ast.Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self) -> Optional[ast.IntegerLiteral]:
        try:
            value = int(self.cur_token.literal)
        except ValueError:
            value = None
        if value is None or value > INT_MAX:
            self.errors.append(f"could not parse {self.cur_token.literal!r} as integer")
            return None
        return ast.IntegerLiteral(self.cur_token, value)

    def parse_string_literal(self) -> ast.StringLiteral:
        return ast.StringLiteral(self.cur_token, self.cur_token.literal)

    def parse_boolean(self) -> ast.BooleanLiteral:
        return ast.BooleanLiteral(self.cur_token, self.cur_token_is(TokenType.TRUE))

    def parse_prefix_expression(self) -> Optional[ast.PrefixExpression]:
        token = self.cur_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return ast.PrefixExpression(token, token.literal, right)

    def parse_infix_expression(self, left: ast.Expression) -> Optional[ast.InfixExpression]:
        token = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        # same precedence on the right keeps every operator left-associative
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return ast.InfixExpression(token, left, token.literal, right)

    def parse_grouped_expression(self) -> Optional[ast.Expression]:
        self.next_token()
        expr = self.parse_expression(Precedence.LOWEST)
        if expr is None or not self.expect_peek(TokenType.RPAREN):
            return None
        return expr

    def parse_if_expression(self) -> Optional[ast.IfExpression]:
        token = self.cur_token
        if not self.expect_peek(TokenType.LPAREN):
            return None
        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        if condition is None:
            return None
        if not self.expect_peek(TokenType.RPAREN) or not self.expect_peek(TokenType.LBRACE):
            return None
        consequence = self.parse_block_statement()
        if consequence is None:
            return None

        alternative = None
        if self.peek_token_is(TokenType.ELSE):
            self.next_token()
            if not self.expect_peek(TokenType.LBRACE):
                return None
            alternative = self.parse_block_statement()
            if alternative is None:
                return None

        return ast.IfExpression(token, condition, consequence, alternative)

    def parse_function_literal(self) -> Optional[ast.FunctionLiteral]:
        token = self.cur_token
        if not self.expect_peek(TokenType.LPAREN):
            return None
        parameters = self.parse_function_parameters()
        if parameters is None or not self.expect_peek(TokenType.LBRACE):
            return None
        body = self.parse_block_statement()
        if body is None:
            return None
        return ast.FunctionLiteral(token, parameters, body)

    def parse_function_parameters(self) -> Optional[list[ast.Identifier]]:
        """Parse `(a, b, c)`; expects the current token to be `(` and leaves it on `)`."""
        parameters: list[ast.Identifier] = []
        if self.peek_token_is(TokenType.RPAREN):
            self.next_token()
            return parameters

        if not self.expect_peek(TokenType.IDENT):
            return None
        parameters.append(self.parse_identifier())
        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            if not self.expect_peek(TokenType.IDENT):
                return None
            parameters.append(self.parse_identifier())

        if not self.expect_peek(TokenType.RPAREN):
            return None
        return parameters

    def parse_expression_list(self, end: str) -> Optional[list[ast.Expression]]:
        """Comma-separated expressions up to `end`; leaves the current token on `end`."""
        items: list[ast.Expression] = []
        if self.peek_token_is(end):
            self.next_token()
            return items

        self.next_token()
        item = self.parse_expression(Precedence.LOWEST)
        if item is None:
            return None
        items.append(item)
        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            item = self.parse_expression(Precedence.LOWEST)
            if item is None:
                return None
            items.append(item)

        if not self.expect_peek(end):
            return None
        return items

    def parse_call_expression(self, function: ast.Expression) -> Optional[ast.CallExpression]:
        token = self.cur_token
        arguments = self.parse_expression_list(TokenType.RPAREN)
        if arguments is None:
            return None
        return ast.CallExpression(token, function, arguments)

    def parse_array_literal(self) -> Optional[ast.ArrayLiteral]:
        token = self.cur_token
        elements = self.parse_expression_list(TokenType.RBRACKET)
        if elements is None:
            return None
        return ast.ArrayLiteral(token, elements)

    def parse_index_expression(self, left: ast.Expression) -> Optional[ast.IndexExpression]:
        token = self.cur_token
        self.next_token()
        index = self.parse_expression(Precedence.LOWEST)
        if index is None or not self.expect_peek(TokenType.RBRACKET):
            return None
        return ast.IndexExpression(token, left, index)

    def parse_hash_literal(self) -> Optional[ast.HashLiteral]:
        token = self.cur_token
        pairs: list[tuple[ast.Expression, ast.Expression]] = []

        while not self.peek_token_is(TokenType.RBRACE):
            self.next_token()
            key = self.parse_expression(Precedence.LOWEST)
            if key is None or not self.expect_peek(TokenType.COLON):
                return None
            self.next_token()
            value = self.parse_expression(Precedence.LOWEST)
            if value is None:
                return None
            pairs.append((key, value))

            if not self.peek_token_is(TokenType.RBRACE) and not self.expect_peek(TokenType.COMMA):
                return None

        if not self.expect_peek(TokenType.RBRACE):
            return None
        return ast.HashLiteral(token, pairs)

    def parse_loop_expression(self) -> Optional[ast.LoopExpression]:
        token = self.cur_token
        if not self.expect_peek(TokenType.LBRACE):
            return None
        body = self.parse_block_statement()
        if body is None:
            return None
        return ast.LoopExpression(token, body)
