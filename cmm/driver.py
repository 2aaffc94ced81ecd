"""File-driven entry points.

:func:`interpret` runs one source file and writes the rendering of the
program's final value to an output file. :func:`run_examples` does this for
the numbered example programs ``example1.cmm`` .. ``exampleN.cmm`` of a
directory, writing ``output1.txt`` .. ``outputN.txt`` next to them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Union

from .environment import Environment
from .errors import EmptyResultError, SourceFileError
from .interpreter import Interpreter, parse_program
from .values import has_output

PathLike = Union[str, os.PathLike]


def read_source(src: PathLike) -> str:
    path = Path(src)
    if not path.is_file():
        raise SourceFileError(path)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def interpret(src: PathLike, dst: PathLike, debug_level: int = 0, debug_mode: str = 'w') -> int:
    """Interpret the program in ``src`` and write its value to ``dst``.

    Returns the number of characters written. Raises
    :class:`SourceFileError` when ``src`` is not a regular file and
    :class:`EmptyResultError` when the program has no value to write
    (including a ``print`` of a missing value); the output
    file is not created in either case. Other I/O failures propagate as
    :class:`OSError`.
    """
    source = read_source(src)
    env = Environment()
    program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level, debug_mode=debug_mode)
    value = interpreter.run(program, env)
    if not has_output(value):
        raise EmptyResultError(src)
    with open(dst, 'w', encoding='utf-8') as out:
        return out.write(value.inspect())


def run_examples(directory: PathLike, count: int = 6, debug_level: int = 0) -> Dict[str, int]:
    """Interpret ``example<n>.cmm`` into ``output<n>.txt`` for n in 1..count.

    With tracing on, all examples share one debug file.
    """
    base = Path(directory)
    written: Dict[str, int] = {}
    for n in range(1, count + 1):
        src = base / f"example{n}.cmm"
        dst = base / f"output{n}.txt"
        mode = 'w' if n == 1 else 'a'
        written[src.name] = interpret(src, dst, debug_level=debug_level, debug_mode=mode)
    return written
