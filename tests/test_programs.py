from pathlib import Path

import pytest

from cmm.interpreter import run_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


@pytest.mark.parametrize('name, expected', [
    ('factorial.cmm', '3628800'),
    ('fizz.cmm', '14'),
    ('search.cmm', '23'),
])
def test_example_programs(name, expected):
    source = (EXAMPLES / name).read_text(encoding='utf-8')
    assert run_program(source).inspect() == expected
