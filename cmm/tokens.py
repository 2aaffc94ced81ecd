"""Token definitions for the cmm language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class TokenType(Enum):
    """Every lexical category produced by the lexer.

    Punctuation and operators use their own spelling as value so that
    ``TokenType('==')`` resolves to ``TokenType.EQ``.
    """
    # Punctuation and operators
    LPAREN = '('
    RPAREN = ')'
    LBRACE = '{'
    RBRACE = '}'
    COMMA = ','
    PLUS = '+'
    MINUS = '-'
    ASTERISK = '*'
    SLASH = '/'
    PERCENT = '%'
    ASSIGN = '='
    EQ = '=='
    NOT_EQ = '!='
    AND = '&&'
    OR = '||'
    LT = '<'
    GT = '>'
    LT_EQ = '<='
    GT_EQ = '>='
    NEWLINE = '\n'

    # Identifiers and literals
    IDENT = 'IDENT'
    NUM = 'NUM'

    # Keywords
    PRINT = 'PRINT'
    IF = 'IF'
    ELSE = 'ELSE'
    WHILE = 'WHILE'

    ILLEGAL = 'ILLEGAL'
    EOF = 'EOF'


KEYWORDS: Dict[str, TokenType] = {
    'print': TokenType.PRINT,
    'if': TokenType.IF,
    'else': TokenType.ELSE,
    'while': TokenType.WHILE,
}


def lookup_ident(ident: str) -> TokenType:
    """Classify an identifier as a keyword or a plain ``IDENT``."""
    return KEYWORDS.get(ident, TokenType.IDENT)


@dataclass(frozen=True)
class Token:
    type: TokenType
    literal: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"
