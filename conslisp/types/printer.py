"""Printed representation and classification of conslisp values."""

from __future__ import annotations

from decimal import Decimal
from io import StringIO

from conslisp import LispValue
from conslisp.types.cons import Cons
from conslisp.types.symbol import Symbol, NIL


def is_number(value: LispValue) -> bool:
    return isinstance(value, Decimal)


def is_atom(value: LispValue) -> bool:
    """Symbols and numbers are atoms; cons cells and callables are not."""
    return isinstance(value, (Symbol, Decimal))


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case Symbol():
            buffer.write(value.name)
        case Decimal():
            buffer.write(str(value))
        case Cons():
            buffer.write("(")
            curr = value
            while True:
                _write(curr.car, buffer)
                curr = curr.cdr
                if isinstance(curr, Cons):
                    buffer.write(" ")
                    continue
                if curr != NIL:
                    # improper tail: dotted-pair notation
                    buffer.write(" . ")
                    _write(curr, buffer)
                break
            buffer.write(")")
        case _:
            buffer.write(str(value))


def to_string(value: LispValue) -> str:
    """Render `value` as source text; proper lists read back to an equal tree."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
