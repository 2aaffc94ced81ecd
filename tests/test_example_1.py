from pathlib import Path

from cmm.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_example_1_precedence():
    """Example 1: variables and operator precedence."""
    with open(EXAMPLES / 'example1.cmm', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    result = interp.run(ast)
    assert result.inspect() == '14'
