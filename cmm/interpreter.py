"""Tree-walking interpreter for the cmm language.

The interpreter evaluates a parsed :class:`~cmm.ast.Root` against a flat
:class:`~cmm.environment.Environment`. Runtime problems (unknown
identifiers, operands of the wrong kind, division by zero) are not raised;
they evaluate to ``None``, which propagates up through the tree. A
``print`` of such a value still yields a :class:`~cmm.values.PrintValue`,
empty inside, so it still ends the enclosing block.

Two rules shape the control flow of the language:

* a block stops at the first statement that produces a value and returns
  that value, which is how ``print`` escapes from ``if`` and ``while``;
* the value of a program is the last value produced by its top-level
  statements.
"""

from __future__ import annotations

from typing import Optional

from .ast import (
    Root, Node, AssignStatement, PrintStatement, ExpressionStatement,
    BlockStatement, IfExpression, WhileExpression, Identifier,
    IntegerLiteral, InfixExpression, PrefixExpression,
)
from .environment import Environment
from .lexer import Lexer
from .parser import Parser
from .values import (
    Value, Integer, PrintValue, is_truthy, native_bool_to_integer,
    trunc_div, trunc_mod,
)


def parse_program(source: str) -> Root:
    """Parse the given source code into a Root AST."""
    lexer = Lexer(source)
    parser = Parser(lexer)
    return parser.parse_program()


class Interpreter:
    """Core interpreter that evaluates cmm ASTs."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt', debug_mode: str = 'w'):
        self.global_env = Environment()
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = open(debug_file, debug_mode, encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    # Public API
    def run(self, program: Root, env: Optional[Environment] = None) -> Optional[Value]:
        if env is None:
            env = self.global_env
        if self.debug_level > 0 and self.debug_fp is None:
            # a previous run closed the trace; continue it
            self.debug_fp = open(self.debug_file, 'a', encoding='utf-8')
        try:
            self.debug(f"parsed program:\n{program}")
            result = self.evaluate(program, env)
            self.debug(f"result: {'nil' if result is None else result.inspect()}")
            return result
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def evaluate(self, node: Optional[Node], env: Environment) -> Optional[Value]:
        if node is None:
            return None
        if isinstance(node, Root):
            return self.evaluate_program(node, env)
        if isinstance(node, ExpressionStatement):
            return self.evaluate(node.expression, env)
        if isinstance(node, IntegerLiteral):
            return Integer(node.value)
        if isinstance(node, InfixExpression):
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_infix_op(node.operator, left, right)
        if isinstance(node, BlockStatement):
            return self.evaluate_block(node, env)
        if isinstance(node, WhileExpression):
            return self.evaluate_while(node, env)
        if isinstance(node, IfExpression):
            return self.evaluate_if(node, env)
        if isinstance(node, PrintStatement):
            return PrintValue(self.evaluate(node.value, env))
        if isinstance(node, AssignStatement):
            value = self.evaluate(node.value, env)
            env.set(node.name.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name.name} = {'nil' if value is None else value.inspect()}")
            return None
        if isinstance(node, Identifier):
            value, _ = env.get(node.name)
            return value
        if isinstance(node, PrefixExpression):
            return None
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def evaluate_program(self, program: Root, env: Environment) -> Optional[Value]:
        result = None
        for stmt in program.statements:
            value = self.evaluate(stmt, env)
            if value is not None:
                result = value
        return result

    def evaluate_block(self, block: BlockStatement, env: Environment) -> Optional[Value]:
        # the first statement with a value ends the block
        for stmt in block.statements:
            result = self.evaluate(stmt, env)
            if result is not None:
                return result
        return None

    def evaluate_if(self, node: IfExpression, env: Environment) -> Optional[Value]:
        cond = self.evaluate(node.condition, env)
        truthy = is_truthy(cond)
        if self.debug_level >= 3:
            branch = 'true branch' if truthy else 'false branch'
            self.debug(f"if condition {'nil' if cond is None else cond.inspect()} -> {branch}")
        if truthy:
            return self.evaluate(node.true_branch, env)
        if node.false_branch is not None:
            return self.evaluate(node.false_branch, env)
        return None

    def evaluate_while(self, node: WhileExpression, env: Environment) -> Optional[Value]:
        while True:
            cond = self.evaluate(node.condition, env)
            if self.debug_level >= 3:
                self.debug(f"while condition {'nil' if cond is None else cond.inspect()}")
            if not is_truthy(cond):
                return None
            result = self.evaluate(node.body, env)
            if result is not None:
                return result

    def apply_infix_op(self, op: str, left: Optional[Value], right: Optional[Value]) -> Optional[Value]:
        if not isinstance(left, Integer) or not isinstance(right, Integer):
            return None
        a = left.value
        b = right.value
        if op == '+':
            return Integer(a + b)
        if op == '-':
            return Integer(a - b)
        if op == '*':
            return Integer(a * b)
        if op == '/':
            if b == 0:
                return None
            return Integer(trunc_div(a, b))
        if op == '%':
            if b == 0:
                return None
            return Integer(trunc_mod(a, b))
        if op == '>':
            return native_bool_to_integer(a > b)
        if op == '>=':
            return native_bool_to_integer(a >= b)
        if op == '<':
            return native_bool_to_integer(a < b)
        if op == '<=':
            return native_bool_to_integer(a <= b)
        if op == '==':
            return native_bool_to_integer(a == b)
        if op == '!=':
            return native_bool_to_integer(a != b)
        # logical operators look only for the exact value 1
        if op == '||':
            return native_bool_to_integer(a == 1 or b == 1)
        if op == '&&':
            return native_bool_to_integer(a == 1 and b == 1)
        return None


def run_program(source: str, debug_level: int = 0) -> Optional[Value]:
    """Convenience function to parse and run a cmm program from a source string."""
    program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level)
    return interpreter.run(program)
