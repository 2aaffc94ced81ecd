from pathlib import Path

from cmm.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_example_4_if_else():
    """Example 4: if/else picks the true branch.

    The `print 1` inside the braces consumes the rest of the line, so the
    else branch is never parsed; the true branch still yields 1.
    """
    with open(EXAMPLES / 'example4.cmm', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    result = interp.run(ast)
    assert result.inspect() == '1'
