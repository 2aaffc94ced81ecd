"""Runtime values for cmm.

The language has a single data type, the signed 64-bit integer. Booleans
are the integers 0 and 1. A ``print`` statement wraps its integer in a
:class:`PrintValue` so the value can travel up through enclosing blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

INTEGER = 'INTEGER'
PRINT_VALUE = 'PRINT_VALUE'

INT64_MIN = -(2 ** 63)
UINT64_MOD = 2 ** 64


def wrap_int64(value: int) -> int:
    """Reduce ``value`` to a signed 64-bit integer (two's complement)."""
    return (value - INT64_MIN) % UINT64_MOD + INT64_MIN


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * trunc_div(a, b)


@dataclass(frozen=True)
class Integer:
    value: int

    def __post_init__(self):
        object.__setattr__(self, 'value', wrap_int64(self.value))

    @property
    def type(self) -> str:
        return INTEGER

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PrintValue:
    """Value of a ``print`` statement; renders as the wrapped value.

    The wrapped value may be missing (``print y`` with ``y`` unbound). The
    print value still ends the enclosing block, but there is nothing to
    write out for it.
    """
    value: Optional[Value]

    @property
    def type(self) -> str:
        return PRINT_VALUE

    def inspect(self) -> str:
        if self.value is None:
            return 'nil'
        return self.value.inspect()


Value = Union[Integer, PrintValue]

TRUE = Integer(1)
FALSE = Integer(0)


def native_bool_to_integer(flag: bool) -> Integer:
    return TRUE if flag else FALSE


def is_truthy(value: Optional[Value]) -> bool:
    # only a value rendering exactly as "1" is true
    if value is None:
        return False
    return value.inspect() == '1'


def has_output(value: Optional[Value]) -> bool:
    """Whether ``value`` holds an integer that can be written out."""
    while isinstance(value, PrintValue):
        value = value.value
    return value is not None
