"""
  Tern Lexer

- Lazy: tokens are produced one at a time by `Lexer.next_token()`
- Never raises on bad input; unknown characters and unterminated strings
  come back as ILLEGAL tokens and the parser reports them
- Once the input is exhausted every further call yields EOF
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple


class TokenType:
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers + literals
    IDENT = "IDENT"
    INT = "INT"
    STRING = "STRING"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    PERCENT = "%"
    LT = "<"
    GT = ">"
    LT_EQ = "<="
    GT_EQ = ">="
    EQ = "=="
    NOT_EQ = "!="
    AND = "&&"
    OR = "||"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    COLON = ":"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"
    IMPORT = "IMPORT"
    LOOP = "LOOP"
    BREAK = "BREAK"
    EXIT = "EXIT"


class Token(NamedTuple):
    type: str
    literal: str

    def __str__(self) -> str:
        return f"{self.type}({self.literal!r})"


KEYWORDS: dict[str, str] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "import": TokenType.IMPORT,
    "loop": TokenType.LOOP,
    "break": TokenType.BREAK,
    "exit": TokenType.EXIT,
}

TOKEN_RE = re.compile(
    r"[ \t\r\n]*(?:"
    r'(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted string, raw content
    r'|(?P<unterminated>".*)'  # opening quote with no closing quote
    r"|(?P<ident>[A-Za-z_][A-Za-z0-9_]*)"  # identifiers and keywords
    r"|(?P<int>[0-9]+)"  # integers, converted by the parser
    r"|(?P<operator>==|!=|&&|\|\||>=|<=|[=+\-*/%<>!(){}\[\],;:])"
    r"|(?P<illegal>.)"  # anything else, one character at a time
    r")?",
    re.DOTALL,
)


def lookup_ident(literal: str) -> str:
    """Keyword token type for `literal`, or IDENT."""
    return KEYWORDS.get(literal, TokenType.IDENT)


class Lexer:
    """Turns source text into tokens, one `next_token()` call at a time."""

    __slots__ = ("source", "pos")

    def __init__(self, source: str):
        self.source: str = source
        self.pos: int = 0

    def next_token(self) -> Token:
        m = TOKEN_RE.match(self.source, self.pos)
        self.pos = m.end()
        kind = m.lastgroup
        if kind is None:
            # only whitespace (or nothing) was left
            return Token(TokenType.EOF, "")

        text = m.group(kind)
        if kind == "string":
            return Token(TokenType.STRING, text[1:-1])
        if kind == "unterminated":
            return Token(TokenType.ILLEGAL, text)
        if kind == "ident":
            return Token(lookup_ident(text), text)
        if kind == "int":
            return Token(TokenType.INT, text)
        if kind == "operator":
            # operators and delimiters spell their own token type
            return Token(text, text)
        return Token(TokenType.ILLEGAL, text)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every token of `source`, ending with EOF."""
    return iter(Lexer(source))
