"""Cons cells and helpers for walking nil-terminated chains."""

from __future__ import annotations

from typing import Iterable, Iterator

from conslisp import LispValue
from conslisp.errors import LispNotSupported
from conslisp.types.symbol import NIL


class Cons:
    """An ordered pair. Equality is identity: two chains with equal contents are distinct."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car: LispValue = car
        self.cdr: LispValue = cdr

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __str__(self) -> str:
        from conslisp.types.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return f"Cons({self.car!r}, {self.cdr!r})"


def from_iterable(items: Iterable[LispValue], tail: LispValue = NIL) -> LispValue:
    """Build a right-nested chain of Cons cells ending in `tail` (nil by default)."""
    result = tail
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the successive cars of a proper list.

    Raises LispNotSupported when the chain ends in anything but nil.
    """
    curr = value
    while isinstance(curr, Cons):
        yield curr.car
        curr = curr.cdr
    if curr != NIL:
        raise LispNotSupported(f"Expected a proper list, found improper tail {curr}")
