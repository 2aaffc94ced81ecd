"""Abstract Syntax Tree (AST) definitions for the cmm language.

Each node keeps the token that began it. ``str(node)`` renders the node
back to cmm source: statements are newline terminated, blocks are braced
and infix expressions are fully parenthesised, so a rendered program parses
back to a tree with the same rendering. Missing subtrees render as empty
text; a tree with holes does not survive that round trip.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import Token


def render(node: Optional[Node]) -> str:
    """Render a possibly missing subtree."""
    return '' if node is None else str(node)


def render_statements(statements: List[Node]) -> str:
    # statements that render empty (blank lines) are dropped
    lines = [str(s) for s in statements]
    return ''.join(line + '\n' for line in lines if line)


@dataclass
class Node:
    """Base class for all AST nodes."""
    token: Token

    def token_literal(self) -> str:
        return self.token.literal


@dataclass
class Root:
    statements: List[Node] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ''

    def __str__(self) -> str:
        return render_statements(self.statements)


@dataclass
class Identifier(Node):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class IntegerLiteral(Node):
    value: int

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class AssignStatement(Node):
    name: Identifier
    value: Optional[Node]

    def __str__(self) -> str:
        return f"{self.name} = {render(self.value)}"


@dataclass
class PrintStatement(Node):
    value: Optional[Node]

    def __str__(self) -> str:
        return f"print {render(self.value)}"


@dataclass
class ExpressionStatement(Node):
    expression: Optional[Node]

    def __str__(self) -> str:
        return render(self.expression)


@dataclass
class BlockStatement(Node):
    statements: List[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return '{\n' + render_statements(self.statements) + '}'


@dataclass
class IfExpression(Node):
    condition: Optional[Node]
    true_branch: BlockStatement
    false_branch: Optional[BlockStatement] = None

    def __str__(self) -> str:
        out = f"if ({render(self.condition)}) {self.true_branch}"
        if self.false_branch is not None:
            out += f" else {self.false_branch}"
        return out


@dataclass
class WhileExpression(Node):
    condition: Optional[Node]
    body: BlockStatement

    def __str__(self) -> str:
        return f"while ({render(self.condition)}) {self.body}"


@dataclass
class InfixExpression(Node):
    left: Optional[Node]
    operator: str
    right: Optional[Node]

    def __str__(self) -> str:
        return f"({render(self.left)} {self.operator} {render(self.right)})"


@dataclass
class PrefixExpression(Node):
    # Not produced by the parser; kept for trees built by other tools.
    operator: str
    right: Optional[Node]

    def __str__(self) -> str:
        return f"({self.operator}{render(self.right)})"
