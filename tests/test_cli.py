import json

import pytest

from cmm.__main__ import main


def write(path, text):
    path.write_text(text, encoding='utf-8')
    return path


def test_run_default_output(tmp_path, capsys):
    src = write(tmp_path / 'prog.cmm', 'print (2 + 3) * 4\n')
    main([str(src)])
    assert (tmp_path / 'prog.txt').read_text(encoding='utf-8') == '20'
    assert capsys.readouterr().out.strip() == str(tmp_path / 'prog.txt')


def test_run_explicit_output(tmp_path):
    src = write(tmp_path / 'prog.cmm', 'print 7 % 3\n')
    out = tmp_path / 'result.txt'
    main([str(src), '-o', str(out)])
    assert out.read_text(encoding='utf-8') == '1'


def test_emit_and_run_ast(tmp_path, capsys):
    src = write(tmp_path / 'prog.cmm', 'x = 0\nwhile (x < 5) { x = x + 1 }\nprint x\n')
    main(['--emit-ast', str(src)])
    ast_path = tmp_path / 'prog.cmm.ast.json'
    assert capsys.readouterr().out.strip() == str(ast_path)
    with open(ast_path, encoding='utf-8') as f:
        assert json.load(f)['type'] == 'Root'

    out = tmp_path / 'out.txt'
    main(['--ast', str(ast_path), '-o', str(out)])
    assert out.read_text(encoding='utf-8') == '5'


def test_invalid_ast_file(tmp_path, capsys):
    bad = write(tmp_path / 'bad.json', '{"type": "Nope"}')
    with pytest.raises(SystemExit) as excinfo:
        main(['--ast', str(bad)])
    assert excinfo.value.code == 1
    assert 'invalid AST file' in capsys.readouterr().err


def test_check(tmp_path, capsys):
    good = write(tmp_path / 'good.cmm', 'x = 1\nprint x\n')
    main(['--check', str(good)])
    assert capsys.readouterr().out.strip() == f'{good}: ok'

    bad = write(tmp_path / 'bad.cmm', 'x = 1\nprint x +\n')
    with pytest.raises(SystemExit) as excinfo:
        main(['--check', str(bad)])
    assert excinfo.value.code == 1
    assert 'Error: unexpected' in capsys.readouterr().err


def test_examples_directory(tmp_path, capsys):
    for n in range(1, 7):
        write(tmp_path / f'example{n}.cmm', f'print {n} * 10\n')
    main(['--examples', str(tmp_path)])
    assert (tmp_path / 'output6.txt').read_text(encoding='utf-8') == '60'
    assert 'example1.cmm: 2 bytes' in capsys.readouterr().out


def test_missing_source(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'nope.cmm')])
    assert excinfo.value.code == 1
    assert 'is not a regular file' in capsys.readouterr().err


def test_program_without_value(tmp_path, capsys):
    src = write(tmp_path / 'prog.cmm', 'x = 1\n')
    with pytest.raises(SystemExit):
        main([str(src)])
    assert 'produced no value' in capsys.readouterr().err


def test_verbose_writes_debug_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = write(tmp_path / 'prog.cmm', 'x = 2\nprint x\n')
    main(['-vv', str(src)])
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'assign x = 2' in trace
    assert 'result: 2' in trace


def test_ast_with_print_of_missing_value(tmp_path, capsys):
    src = write(tmp_path / 'prog.cmm', 'print y\n')
    main(['--emit-ast', str(src)])
    ast_path = tmp_path / 'prog.cmm.ast.json'
    capsys.readouterr()
    with pytest.raises(SystemExit) as excinfo:
        main(['--ast', str(ast_path)])
    assert excinfo.value.code == 1
    assert 'produced no value' in capsys.readouterr().err
    assert not (tmp_path / 'prog.cmm.ast.json.txt').exists()
