"""Strict grammar for the cmm language.

The Pratt parser in :mod:`cmm.parser` never reports errors: malformed input
just leaves holes in the tree. This module describes the same language with
a Lark LALR grammar so that programs can be checked up front, with the
position of the first syntax error.

The grammar mirrors the Pratt parser's precedence ladder, including ``||``
binding tighter than ``&&``. A statement must be the last thing on its line
(or the last thing before the closing brace of a block), ``if``/``while``
bodies must be braced and ``else`` must follow the closing brace of the
true branch on the same line.

:func:`parse_strict` builds the same AST node types as the Pratt parser.
The two differ only for ``print`` inside a block: here a ``print``
statement ends at its expression, while the Pratt parser lets ``print``
swallow the rest of the line.
"""

from __future__ import annotations

from lark import Lark, Token as LarkToken, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .ast import (
    Root, Node, AssignStatement, PrintStatement, ExpressionStatement,
    BlockStatement, IfExpression, WhileExpression, Identifier,
    IntegerLiteral, InfixExpression,
)
from .errors import CmmSyntaxError
from .parser import integer_value
from .tokens import Token, TokenType

CMM_GRAMMAR = r"""
    ?start: program
    program: _NL? (statement _NL)* statement?

    ?statement: assign_stmt
              | print_stmt
              | expr_stmt

    assign_stmt: IDENT "=" expression
    print_stmt: PRINT expression
    expr_stmt: expression

    block: LBRACE _NL? (statement _NL)* statement? "}"

    // Expressions, loosest first
    ?expression: logic_and
    ?logic_and: logic_or (AND_OP logic_or)*
    ?logic_or: equality (OR_OP equality)*
    ?equality: comparison (EQ_OP comparison)*
    ?comparison: sum (REL_OP sum)*
    ?sum: product (ADD_OP product)*
    ?product: atom (MUL_OP atom)*
    ?atom: IDENT -> identifier
         | NUM -> integer
         | "(" expression ")"
         | if_expr
         | while_expr

    if_expr: IF "(" expression ")" block [ELSE block]
    while_expr: WHILE "(" expression ")" block

    // Tokens
    PRINT: "print"
    IF: "if"
    ELSE: "else"
    WHILE: "while"
    IDENT: /[a-zA-Z]+/
    NUM: /[0-9]+/
    LBRACE: "{"
    AND_OP: "&&"
    OR_OP: "||"
    EQ_OP: "==" | "!="
    REL_OP: "<=" | ">=" | "<" | ">"
    ADD_OP: "+" | "-"
    MUL_OP: "*" | "/" | "%"
    _NL: /(\n[ \t]*)+/

    %ignore /[ \t]+/
"""


CMM_PARSER = Lark(
    CMM_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
    lexer='basic',
)


def convert_token(token: LarkToken) -> Token:
    """Turn a Lark token into a cmm token."""
    if token.type in ('IDENT', 'NUM', 'PRINT', 'IF', 'ELSE', 'WHILE'):
        return Token(TokenType[token.type], token.value)
    # operators and braces are spelled like their TokenType value
    return Token(TokenType(token.value), token.value)


def first_token(node: Node) -> Token:
    if isinstance(node, InfixExpression) and node.left is not None:
        return first_token(node.left)
    return node.token


class ASTTransformer(Transformer):
    """Transforms the Lark parse tree into cmm AST nodes."""

    def program(self, items):
        return Root(statements=list(items))

    def assign_stmt(self, items):
        name = self.identifier(items[:1])
        return AssignStatement(name.token, name, items[1])

    def print_stmt(self, items):
        return PrintStatement(convert_token(items[0]), items[1])

    def expr_stmt(self, items):
        expression = items[0]
        return ExpressionStatement(first_token(expression), expression)

    def block(self, items):
        return BlockStatement(convert_token(items[0]), statements=list(items[1:]))

    def if_expr(self, items):
        token = convert_token(items[0])
        condition = items[1]
        true_branch = items[2]
        # items[3] is the ELSE token when a false branch is present
        false_branch = items[4] if len(items) > 4 else None
        return IfExpression(token, condition, true_branch, false_branch)

    def while_expr(self, items):
        return WhileExpression(convert_token(items[0]), items[1], items[2])

    def identifier(self, items):
        token = convert_token(items[0])
        return Identifier(token, token.literal)

    def integer(self, items):
        token = convert_token(items[0])
        return IntegerLiteral(token, integer_value(token.literal))

    def binary_expr(self, items):
        # items pattern: expr (op expr)*, folded to the left
        left = items[0]
        i = 1
        while i < len(items):
            op = convert_token(items[i])
            right = items[i + 1]
            left = InfixExpression(op, left, op.literal, right)
            i += 2
        return left

    def logic_and(self, items):
        return self.binary_expr(items)

    def logic_or(self, items):
        return self.binary_expr(items)

    def equality(self, items):
        return self.binary_expr(items)

    def comparison(self, items):
        return self.binary_expr(items)

    def sum(self, items):
        return self.binary_expr(items)

    def product(self, items):
        return self.binary_expr(items)


def describe_error(e: UnexpectedInput) -> str:
    if isinstance(e, UnexpectedCharacters):
        return f"unexpected character {e.char!r}"
    if isinstance(e, UnexpectedEOF):
        return "unexpected end of input"
    if isinstance(e, UnexpectedToken):
        if e.token.type == '$END':
            return "unexpected end of input"
        return f"unexpected {e.token.value!r}"
    return "syntax error"


def parse_strict(source: str) -> Root:
    """Parse cmm source, raising :class:`CmmSyntaxError` on the first error."""
    try:
        tree = CMM_PARSER.parse(source)
    except UnexpectedInput as e:
        raise CmmSyntaxError(describe_error(e), e.line, e.column) from e
    return ASTTransformer().transform(tree)


def check(source: str) -> None:
    """Validate cmm source without building an AST."""
    parse_strict(source)

