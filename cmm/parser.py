"""Pratt parser for the cmm language.

The parser pulls tokens from a :class:`~cmm.lexer.Lexer` and keeps two of
them in view: ``cur`` and ``peek``. Expressions are parsed by precedence
climbing over two dispatch tables, one for tokens that can start an
expression (prefix) and one for binary operators (infix).

The parser is deliberately silent. It records no diagnostics and never
raises: whenever an expected token is missing the affected subtree is
``None`` and parsing carries on with the next token. Use
:mod:`cmm.grammar` for a checker that reports syntax errors.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .ast import (
    Root, Node, AssignStatement, PrintStatement, ExpressionStatement,
    BlockStatement, IfExpression, WhileExpression, Identifier,
    IntegerLiteral, InfixExpression,
)
from .lexer import Lexer
from .tokens import Token, TokenType

# Precedence ladder. Note that || binds tighter than &&.
LOWEST = 1
LOGICAL_AND = 2   # &&
LOGICAL_OR = 3    # ||
EQUALS = 4        # == !=
LESS_GREATER = 5  # < > <= >=
SUM = 6           # + -
PRODUCT = 7       # * / %
PREFIX = 8

PRECEDENCES: Dict[TokenType, int] = {
    TokenType.AND: LOGICAL_AND,
    TokenType.OR: LOGICAL_OR,
    TokenType.EQ: EQUALS,
    TokenType.NOT_EQ: EQUALS,
    TokenType.LT: LESS_GREATER,
    TokenType.GT: LESS_GREATER,
    TokenType.LT_EQ: LESS_GREATER,
    TokenType.GT_EQ: LESS_GREATER,
    TokenType.PLUS: SUM,
    TokenType.MINUS: SUM,
    TokenType.ASTERISK: PRODUCT,
    TokenType.SLASH: PRODUCT,
    TokenType.PERCENT: PRODUCT,
}

INT64_MAX = 2 ** 63 - 1

PrefixParseFn = Callable[[], Optional[Node]]
InfixParseFn = Callable[[Optional[Node]], Optional[Node]]


def integer_value(literal: str) -> int:
    """Decimal value of a NUM literal; out-of-range literals silently become 0."""
    try:
        value = int(literal, 10)
    except ValueError:
        return 0
    if value > INT64_MAX:
        return 0
    return value


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.cur = Token(TokenType.EOF, '')
        self.peek = Token(TokenType.EOF, '')

        self.prefix_parse_fns: Dict[TokenType, PrefixParseFn] = {
            TokenType.IDENT: self.parse_identifier,
            TokenType.NUM: self.parse_integer_literal,
            TokenType.LPAREN: self.parse_grouped_expression,
            TokenType.IF: self.parse_if_expression,
            TokenType.WHILE: self.parse_while_expression,
        }
        self.infix_parse_fns: Dict[TokenType, InfixParseFn] = {
            token_type: self.parse_infix_expression for token_type in PRECEDENCES
        }

        # fill cur and peek
        self.next_token()
        self.next_token()

    def next_token(self):
        self.cur = self.peek
        self.peek = self.lexer.next_token()

    def cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the next token has the expected type."""
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        return False

    def peek_precedence(self) -> int:
        return PRECEDENCES.get(self.peek.type, LOWEST)

    def cur_precedence(self) -> int:
        return PRECEDENCES.get(self.cur.type, LOWEST)

    # Statements

    def parse_program(self) -> Root:
        program = Root()
        while not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        return program

    def parse_statement(self) -> Optional[Node]:
        if self.cur_token_is(TokenType.IDENT) and self.peek_token_is(TokenType.ASSIGN):
            return self.parse_assign_statement()
        if self.cur_token_is(TokenType.PRINT):
            return self.parse_print_statement()
        return self.parse_expression_statement()

    def parse_assign_statement(self) -> Optional[AssignStatement]:
        token = self.cur
        name = Identifier(self.cur, self.cur.literal)
        if not self.expect_peek(TokenType.ASSIGN):
            return None
        self.next_token()
        value = self.parse_expression(LOWEST)
        if self.peek_token_is(TokenType.NEWLINE):
            self.next_token()
        return AssignStatement(token, name, value)

    def parse_print_statement(self) -> PrintStatement:
        token = self.cur
        self.next_token()
        value = self.parse_expression(LOWEST)
        # the rest of the line belongs to the print statement
        while not self.cur_token_is(TokenType.NEWLINE) and not self.cur_token_is(TokenType.EOF):
            self.next_token()
        return PrintStatement(token, value)

    def parse_expression_statement(self) -> ExpressionStatement:
        token = self.cur
        expression = self.parse_expression(LOWEST)
        if self.peek_token_is(TokenType.NEWLINE):
            self.next_token()
        return ExpressionStatement(token, expression)

    def parse_block_statement(self) -> BlockStatement:
        block = BlockStatement(self.cur)
        self.next_token()
        while not self.cur_token_is(TokenType.RBRACE) and not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self.next_token()
        return block

    # Expressions

    def parse_expression(self, precedence: int) -> Optional[Node]:
        prefix = self.prefix_parse_fns.get(self.cur.type)
        if prefix is None:
            return None
        left = prefix()

        while not self.peek_token_is(TokenType.NEWLINE) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)
        return left

    def parse_identifier(self) -> Identifier:
        return Identifier(self.cur, self.cur.literal)

    def parse_integer_literal(self) -> IntegerLiteral:
        return IntegerLiteral(self.cur, integer_value(self.cur.literal))

    def parse_infix_expression(self, left: Optional[Node]) -> InfixExpression:
        token = self.cur
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        return InfixExpression(token, left, token.literal, right)

    def parse_grouped_expression(self) -> Optional[Node]:
        self.next_token()
        expression = self.parse_expression(LOWEST)
        if not self.expect_peek(TokenType.RPAREN):
            return None
        return expression

    def parse_if_expression(self) -> Optional[IfExpression]:
        token = self.cur
        if not self.expect_peek(TokenType.LPAREN):
            return None
        self.next_token()
        condition = self.parse_expression(LOWEST)
        if not self.expect_peek(TokenType.RPAREN):
            return None
        if not self.expect_peek(TokenType.LBRACE):
            return None
        true_branch = self.parse_block_statement()

        false_branch = None
        if self.peek_token_is(TokenType.ELSE):
            self.next_token()
            # no `else if`: the false branch must be a braced block
            if not self.expect_peek(TokenType.LBRACE):
                return None
            false_branch = self.parse_block_statement()
        return IfExpression(token, condition, true_branch, false_branch)

    def parse_while_expression(self) -> Optional[WhileExpression]:
        token = self.cur
        if not self.expect_peek(TokenType.LPAREN):
            return None
        self.next_token()
        condition = self.parse_expression(LOWEST)
        if not self.expect_peek(TokenType.RPAREN):
            return None
        if not self.expect_peek(TokenType.LBRACE):
            return None
        body = self.parse_block_statement()
        return WhileExpression(token, condition, body)
