from pathlib import Path

from cmm.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_example_6_logical_precedence():
    """Example 6: || binds tighter than &&."""
    with open(EXAMPLES / 'example6.cmm', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    assert str(ast) == 'print (1 && (1 || 0))\n'
    interp = Interpreter()
    result = interp.run(ast)
    assert result.inspect() == '1'
