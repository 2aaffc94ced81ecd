"""JSON serialization/deserialization for the cmm AST.

This module converts between cmm AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Tokens are stored next to
the nodes they begin, so a round trip gives back an equal tree.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Root,
    AssignStatement,
    PrintStatement,
    ExpressionStatement,
    BlockStatement,
    IfExpression,
    WhileExpression,
    Identifier,
    IntegerLiteral,
    InfixExpression,
    PrefixExpression,
)
from .tokens import Token, TokenType

NODE_TYPES = (
    "Root", "AssignStatement", "PrintStatement", "ExpressionStatement",
    "BlockStatement", "IfExpression", "WhileExpression", "Identifier",
    "IntegerLiteral", "InfixExpression", "PrefixExpression",
)


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"type": t.type.name, "literal": t.literal}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["type"]], o["literal"])


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Root):
        return {"type": "Root", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, AssignStatement):
        return {
            "type": "AssignStatement",
            "token": token_to_obj(node.token),
            "name": ast_to_obj(node.name),
            "value": ast_to_obj(node.value),
        }
    if isinstance(node, PrintStatement):
        return {"type": "PrintStatement", "token": token_to_obj(node.token), "value": ast_to_obj(node.value)}
    if isinstance(node, ExpressionStatement):
        return {
            "type": "ExpressionStatement",
            "token": token_to_obj(node.token),
            "expression": ast_to_obj(node.expression),
        }
    if isinstance(node, BlockStatement):
        return {
            "type": "BlockStatement",
            "token": token_to_obj(node.token),
            "statements": [ast_to_obj(s) for s in node.statements],
        }
    if isinstance(node, IfExpression):
        return {
            "type": "IfExpression",
            "token": token_to_obj(node.token),
            "condition": ast_to_obj(node.condition),
            "true_branch": ast_to_obj(node.true_branch),
            "false_branch": ast_to_obj(node.false_branch),
        }
    if isinstance(node, WhileExpression):
        return {
            "type": "WhileExpression",
            "token": token_to_obj(node.token),
            "condition": ast_to_obj(node.condition),
            "body": ast_to_obj(node.body),
        }
    if isinstance(node, Identifier):
        return {"type": "Identifier", "token": token_to_obj(node.token), "name": node.name}
    if isinstance(node, IntegerLiteral):
        return {"type": "IntegerLiteral", "token": token_to_obj(node.token), "value": node.value}
    if isinstance(node, InfixExpression):
        return {
            "type": "InfixExpression",
            "token": token_to_obj(node.token),
            "left": ast_to_obj(node.left),
            "operator": node.operator,
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, PrefixExpression):
        return {
            "type": "PrefixExpression",
            "token": token_to_obj(node.token),
            "operator": node.operator,
            "right": ast_to_obj(node.right),
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t not in NODE_TYPES:
        raise ValueError(f"Unknown AST node type: {t}")
    if t == "Root":
        return Root(statements=[ast_from_obj(s) for s in obj["statements"]])

    token = token_from_obj(obj["token"])
    if t == "AssignStatement":
        return AssignStatement(token, name=ast_from_obj(obj["name"]), value=ast_from_obj(obj.get("value")))
    if t == "PrintStatement":
        return PrintStatement(token, value=ast_from_obj(obj.get("value")))
    if t == "ExpressionStatement":
        return ExpressionStatement(token, expression=ast_from_obj(obj.get("expression")))
    if t == "BlockStatement":
        return BlockStatement(token, statements=[ast_from_obj(s) for s in obj["statements"]])
    if t == "IfExpression":
        return IfExpression(
            token,
            condition=ast_from_obj(obj.get("condition")),
            true_branch=ast_from_obj(obj["true_branch"]),
            false_branch=ast_from_obj(obj.get("false_branch")),
        )
    if t == "WhileExpression":
        return WhileExpression(token, condition=ast_from_obj(obj.get("condition")), body=ast_from_obj(obj["body"]))
    if t == "Identifier":
        return Identifier(token, name=obj["name"])
    if t == "IntegerLiteral":
        return IntegerLiteral(token, value=int(obj["value"]))
    if t == "InfixExpression":
        return InfixExpression(
            token,
            left=ast_from_obj(obj.get("left")),
            operator=obj["operator"],
            right=ast_from_obj(obj.get("right")),
        )
    if t == "PrefixExpression":
        return PrefixExpression(token, operator=obj["operator"], right=ast_from_obj(obj.get("right")))
    raise ValueError(f"Unknown AST node type: {t}")
