"""CLI entry point for the cmm interpreter.

Usage:
    python -m cmm [-v|-vv|-vvv] <program_file> [-o OUTPUT]
    python -m cmm [-v...] --emit-ast <program_file>
    python -m cmm [-v...] --ast <ast_json_file> [-o OUTPUT]
    python -m cmm --check <program_file>
    python -m cmm [-v...] --examples <directory>

Options:
  -v            Increase debug verbosity (can be repeated)
  -o OUTPUT     File receiving the program's value (default: program file
                with a .txt suffix)
  --emit-ast    Parse the given .cmm file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file
  --check       Check the syntax of the given .cmm file and report the
                first error with its position
  --examples    Interpret example1.cmm .. example6.cmm of a directory into
                output1.txt .. output6.txt

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_to_obj, ast_from_obj
from .driver import interpret, read_source, run_examples
from .errors import CmmError, EmptyResultError
from .grammar import check
from .interpreter import parse_program, Interpreter
from .values import has_output


def default_output(path: Path) -> Path:
    return path.with_suffix('.txt')


def fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='cmm', description="cmm language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('-o', '--output', metavar='OUTPUT', help='file receiving the program value')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='CMM_FILE', help='emit AST JSON for the given .cmm file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    group.add_argument('--check', metavar='CMM_FILE', help='check the syntax of the given .cmm file')
    group.add_argument('--examples', metavar='DIR', help='interpret exampleN.cmm files of DIR')
    parser.add_argument('program', nargs='?', help='cmm program file (.cmm) to execute')
    args = parser.parse_args(argv)

    try:
        # Emit AST mode
        if args.emit_ast:
            program_file = Path(args.emit_ast)
            program = parse_program(read_source(program_file))
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(ast_to_obj(program), out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.is_file():
                fail(f"file {ast_path} not found")
            try:
                with open(ast_path, 'r', encoding='utf-8') as f:
                    program = ast_from_obj(json.load(f))
            except (TypeError, ValueError, KeyError) as e:
                fail(f"invalid AST file {ast_path}: {e}")
            interpreter = Interpreter(debug_level=args.v)
            value = interpreter.run(program)
            if not has_output(value):
                raise EmptyResultError(ast_path)
            out_path = Path(args.output) if args.output else ast_path.with_name(ast_path.name + '.txt')
            with open(out_path, 'w', encoding='utf-8') as out:
                out.write(value.inspect())
            print(str(out_path))
            return

        if args.check:
            program_file = Path(args.check)
            check(read_source(program_file))
            print(f"{program_file}: ok")
            return

        if args.examples:
            for name, written in run_examples(args.examples, debug_level=args.v).items():
                print(f"{name}: {written} bytes")
            return

        # Default: execute source file
        if not args.program:
            parser.error('missing program file; or use --emit-ast/--ast/--check/--examples')
        program_file = Path(args.program)
        out_path = Path(args.output) if args.output else default_output(program_file)
        interpret(program_file, out_path, debug_level=args.v)
        print(str(out_path))
    except (CmmError, OSError) as e:
        fail(str(e))


if __name__ == '__main__':
    main()
