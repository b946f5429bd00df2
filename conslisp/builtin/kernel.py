"""Built-in functions for the conslisp root environment.

This module defines the kernel: the special forms, cons-cell primitives,
predicates, decimal arithmetic and console I/O that cannot (easily) be written
in the language itself. Everything else (and, or, map, ...) lives in the
prelude and is built from these.

Builtins share the calling convention `fn(env, args)` where `args` is the list
of already-evaluated arguments.
"""
from __future__ import annotations

import decimal
import functools
import sys
from decimal import Decimal
from typing import Callable, Optional, TextIO

from conslisp import LispValue
from conslisp.config import get_division_precision
from conslisp.errors import (
    LispDivideByZero,
    LispNotSupported,
    LispParseError,
    LispNumericError,
    LispRuntimeError,
)
from conslisp.evaluation.arity import check_arity
from conslisp.evaluation.special_forms import SPECIAL_FORMS
from conslisp.reader.parser import parse_one
from conslisp.types.cons import Cons
from conslisp.types.environment import Environment
from conslisp.types.native import Builtin, SpecialForm
from conslisp.types.printer import to_string, is_atom, is_number
from conslisp.types.symbol import Symbol, NIL, T

# Addition, subtraction, multiplication and remainder never round.
EXACT = decimal.Context(
    prec=decimal.MAX_PREC, Emax=decimal.MAX_EMAX, Emin=decimal.MIN_EMIN
)


def _bool(flag: bool) -> Symbol:
    return T if flag else NIL


def _unsigned_zero(value: Decimal) -> Decimal:
    # conslisp has a single zero; decimal keeps its sign
    return value.copy_abs() if value.is_zero() else value


def _number(value: LispValue) -> Decimal:
    if not is_number(value):
        raise LispNotSupported(f"Object {value} is not a number")
    return value


def numeric(fn: Callable[[Environment, list[LispValue]], LispValue]):
    """Translate faults raised by the decimal layer into conslisp errors."""

    @functools.wraps(fn)
    def wrapper(env: Environment, args: list[LispValue]) -> LispValue:
        try:
            return fn(env, args)
        except ZeroDivisionError:
            raise LispDivideByZero("Division by zero") from None
        except decimal.DecimalException as e:
            raise LispNumericError(f"Numeric fault: {type(e).__name__}") from None

    return wrapper


# -------------------------------
# Cons cells
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Cons:
    """(cons a b) -> a new pair with car a and cdr b."""
    check_arity(args, 2, "cons")
    return Cons(args[0], args[1])


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the car of a cons; any other value (nil included) is an error."""
    check_arity(args, 1, "car")
    xs = args[0]
    if not isinstance(xs, Cons):
        raise LispNotSupported(f"Object {to_string(xs)} does not support car")
    return xs.car


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the cdr of a cons; any other value (nil included) is an error."""
    check_arity(args, 1, "cdr")
    xs = args[0]
    if not isinstance(xs, Cons):
        raise LispNotSupported(f"Object {to_string(xs)} does not support cdr")
    return xs.cdr


# -------------------------------
# Predicates
# -------------------------------
def is_eql(a: LispValue, b: LispValue) -> bool:
    """Symbols and numbers compare by value; cons cells and callables by identity."""
    if isinstance(a, (Symbol, Decimal)) and type(a) is type(b):
        return a == b
    return a is b


def logical_not(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity(args, 1, "not")
    return _bool(args[0] == NIL)


def eql(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity(args, 2, "eql")
    return _bool(is_eql(args[0], args[1]))


def nullp(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity(args, 1, "nullp")
    return _bool(args[0] == NIL)


def consp(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity(args, 1, "consp")
    return _bool(isinstance(args[0], Cons))


def atomp(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity(args, 1, "atomp")
    return _bool(is_atom(args[0]))


def numberp(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity(args, 1, "numberp")
    return _bool(is_number(args[0]))


# -------------------------------
# Arithmetic
# -------------------------------
@numeric
def add(env: Environment, args: list[LispValue]) -> Decimal:
    """Return the sum of all arguments; (+) is 0."""
    total = Decimal(0)
    for x in args:
        total = EXACT.add(total, _number(x))
    return _unsigned_zero(total)


@numeric
def sub(env: Environment, args: list[LispValue]) -> Decimal:
    """Subtract all subsequent numbers from the first; unary negation for one arg; (-) is 0."""
    if not args:
        return Decimal(0)
    first = _number(args[0])
    if len(args) == 1:
        return _unsigned_zero(EXACT.subtract(Decimal(0), first))
    result = first
    for x in args[1:]:
        result = EXACT.subtract(result, _number(x))
    return _unsigned_zero(result)


@numeric
def mul(env: Environment, args: list[LispValue]) -> Decimal:
    """Return the product of all arguments; (*) is 1."""
    result = Decimal(1)
    for x in args:
        result = EXACT.multiply(result, _number(x))
    return _unsigned_zero(result)


def make_div(context: decimal.Context) -> Callable[[Environment, list[LispValue]], Decimal]:
    """Division rounds to `context`'s precision, since quotients may not terminate."""

    @numeric
    def div(env: Environment, args: list[LispValue]) -> Decimal:
        """Divide left-to-right; with one arg returns the reciprocal; (/) is 1."""
        if not args:
            return Decimal(1)
        if len(args) == 1:
            divisors = [_number(args[0])]
            result = Decimal(1)
        else:
            result = _number(args[0])
            divisors = [_number(x) for x in args[1:]]
        for d in divisors:
            if d == 0:
                raise LispDivideByZero("Division by zero")
            result = context.divide(result, d)
        return _unsigned_zero(result)

    return div


@numeric
def gt(env: Environment, args: list[LispValue]) -> Symbol:
    """(> a b) -> t if a is strictly greater than b."""
    check_arity(args, 2, ">")
    return _bool(_number(args[0]) > _number(args[1]))


@numeric
def mod(env: Environment, args: list[LispValue]) -> Decimal:
    """(mod n d) -> remainder of n / d, carrying the sign of n."""
    check_arity(args, 2, "mod")
    n, d = _number(args[0]), _number(args[1])
    if d == 0:
        raise LispDivideByZero("Modulo by zero")
    return _unsigned_zero(EXACT.remainder(n, d))


# -------------------------------
# Console I/O
# -------------------------------
def make_printer(name: str, newline: bool, stdout: Optional[TextIO]):
    def printer(env: Environment, args: list[LispValue]) -> Symbol:
        check_arity(args, 1, name)
        out = stdout if stdout is not None else sys.stdout
        out.write(to_string(args[0]))
        if newline:
            out.write("\n")
        out.flush()
        return NIL

    return printer


def make_reader(stdin: Optional[TextIO]):
    def read(env: Environment, args: list[LispValue]) -> LispValue:
        """Read one line of input and return its first expression."""
        check_arity(args, 0, "read")
        src = stdin if stdin is not None else sys.stdin
        line = src.readline()
        if not line:
            raise LispRuntimeError("read: end of input")
        try:
            return parse_one(line)
        except LispParseError as e:
            raise LispRuntimeError(f"read: {e}") from e

    return read


def exit_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity(args, 0, "exit")
    raise SystemExit(0)


def register(
    env: Environment,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    context: Optional[decimal.Context] = None,
) -> None:
    """Register the special forms, builtin functions and constants into the given (root) environment."""
    if context is None:
        context = decimal.Context(prec=get_division_precision())

    env.update(
        {sym: SpecialForm(sym.name, handler) for sym, handler in SPECIAL_FORMS.items()}
    )

    functions = {
        "cons": cons,
        "car": car,
        "cdr": cdr,
        "not": logical_not,
        "eql": eql,
        "nullp": nullp,
        "consp": consp,
        "atomp": atomp,
        "numberp": numberp,
        "+": add,
        "-": sub,
        "*": mul,
        "/": make_div(context),
        ">": gt,
        "mod": mod,
        "print": make_printer("print", False, stdout),
        "println": make_printer("println", True, stdout),
        "read": make_reader(stdin),
        "exit": exit_builtin,
    }
    env.update({Symbol(name): Builtin(name, fn) for name, fn in functions.items()})

    env.define(NIL, NIL)
    env.define(T, T)
