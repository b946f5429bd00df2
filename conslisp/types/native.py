"""Host-native callables: builtin functions and special forms.

Both wrap a plain Python callable together with the symbol name it is
registered under, so that error messages and the printer can refer to it.
"""

from __future__ import annotations

from typing import Callable

from conslisp import LispValue, SExpression, EvaluatorFn
from conslisp.types.environment import Environment

BuiltinFn = Callable[[Environment, list[LispValue]], LispValue]
SpecialFormFn = Callable[[list[SExpression], Environment, EvaluatorFn], LispValue]


class Builtin:
    """A function whose body is a Python callable `fn(env, args)` over evaluated args."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __str__(self) -> str:
        return f"<builtin {self.name}>"

    __repr__ = __str__


class SpecialForm:
    """A form whose handler receives its operands unevaluated.

    The handler decides what to evaluate, and in which environment, through the
    evaluator function it is given.
    """

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: SpecialFormFn):
        self.name = name
        self.handler = handler

    def __call__(
        self, operands: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
    ) -> LispValue:
        return self.handler(operands, env, evaluate_fn)

    def __str__(self) -> str:
        return f"<special form {self.name}>"

    __repr__ = __str__
