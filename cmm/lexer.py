"""Lexer for the cmm language.

The lexer produces tokens on demand. Spaces and tabs are skipped, while
newlines are returned as ``NEWLINE`` tokens because they terminate
statements. Characters the language does not know are returned in-band as
``ILLEGAL`` tokens; the lexer itself never raises.
"""

from __future__ import annotations

from typing import List

from .tokens import Token, TokenType, lookup_ident

NUL = '\0'

SINGLE_CHAR_TOKENS = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    ',': TokenType.COMMA,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.ASTERISK,
    '/': TokenType.SLASH,
    '%': TokenType.PERCENT,
    '\n': TokenType.NEWLINE,
}

# first char -> (second char, two-char type, fallback type)
# A fallback of ILLEGAL means the first char cannot stand alone.
TWO_CHAR_TOKENS = {
    '=': ('=', TokenType.EQ, TokenType.ASSIGN),
    '>': ('=', TokenType.GT_EQ, TokenType.GT),
    '<': ('=', TokenType.LT_EQ, TokenType.LT),
    '!': ('=', TokenType.NOT_EQ, TokenType.ILLEGAL),
    '&': ('&', TokenType.AND, TokenType.ILLEGAL),
    '|': ('|', TokenType.OR, TokenType.ILLEGAL),
}


def is_letter(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z'


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.position = 0       # index of self.char
        self.read_position = 0  # index of the next char to read
        self.char = NUL
        self.advance()

    def advance(self):
        if self.read_position >= len(self.source):
            self.char = NUL
        else:
            self.char = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str:
        if self.read_position >= len(self.source):
            return NUL
        return self.source[self.read_position]

    def skip_whitespace(self):
        # newlines are significant and must not be skipped here
        while self.char in (' ', '\t'):
            self.advance()

    def next_token(self) -> Token:
        self.skip_whitespace()
        c = self.char

        if c == NUL:
            return Token(TokenType.EOF, '')
        if is_letter(c):
            ident = self.read_while(is_letter)
            return Token(lookup_ident(ident), ident)
        if is_digit(c):
            return Token(TokenType.NUM, self.read_while(is_digit))

        if c in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[c], c)
        elif c in TWO_CHAR_TOKENS:
            second, pair_type, single_type = TWO_CHAR_TOKENS[c]
            if self.peek_char() == second:
                self.advance()
                token = Token(pair_type, c + second)
            else:
                token = Token(single_type, c)
        else:
            token = Token(TokenType.ILLEGAL, c)
        self.advance()
        return token

    def read_while(self, predicate) -> str:
        start = self.position
        while predicate(self.char):
            self.advance()
        return self.source[start:self.position]


def tokenize(source: str) -> List[Token]:
    """Return all tokens of ``source`` up to and including the first EOF."""
    lexer = Lexer(source)
    tokens: List[Token] = []
    while True:
        token = lexer.next_token()
        tokens.append(token)
        if token.type == TokenType.EOF:
            return tokens
