# cmm language package
# This package provides a lexer, a Pratt parser and a tree-walking
# interpreter for the cmm language.
from .interpreter import run_program, parse_program, Interpreter
from .driver import interpret, run_examples
from .errors import CmmError

__all__ = [
    'run_program',
    'parse_program',
    'Interpreter',
    'interpret',
    'run_examples',
    'CmmError',
]
