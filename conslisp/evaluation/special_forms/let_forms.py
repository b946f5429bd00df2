"""let and letrec.

Both bind `((sym expr) ...)` in a fresh frame whose outer link is the current
environment, then evaluate the body there. They differ only in where each
right-hand side is evaluated:

- let:    in the enclosing env, so bindings cannot see each other
- letrec: in the new frame, so bindings (typically lambdas) can refer to
          each other and to themselves
"""

from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.errors import LispInvalidSymbol, LispNotSupported
from conslisp.evaluation.apply import evaluate_body
from conslisp.evaluation.arity import check_arity
from conslisp.types.cons import Cons, iter_list
from conslisp.types.environment import Environment
from conslisp.types.symbol import Symbol, NIL


def _binding_pairs(bindings: SExpression, name: str) -> list[tuple[Symbol, SExpression]]:
    if bindings != NIL and not isinstance(bindings, Cons):
        raise LispNotSupported(f"{name} expects a list of bindings, got {bindings}")
    pairs = []
    for binding in iter_list(bindings):
        if not isinstance(binding, Cons):
            raise LispNotSupported(f"{binding} is not a (symbol value) binding")
        parts = list(iter_list(binding))
        if len(parts) != 2:
            raise LispNotSupported(f"{binding} is not a (symbol value) binding")
        sym, val_expr = parts
        if not isinstance(sym, Symbol):
            raise LispInvalidSymbol(
                f"{sym} is not a symbol, but appears as first element in a binding"
            )
        pairs.append((sym, val_expr))
    return pairs


def _let(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    name: str,
    recursive: bool,
) -> LispValue:
    check_arity(tail, 1, name, at_least=True)
    sub_env = Environment(outer=env)
    evaluate_in = sub_env if recursive else env
    for sym, val_expr in _binding_pairs(tail[0], name):
        sub_env.define(sym, evaluate_fn(val_expr, evaluate_in))
    return evaluate_body(tail[1:], sub_env, evaluate_fn)


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(let ((sym expr) ...) body...)"""
    return _let(tail, env, evaluate_fn, "let", recursive=False)


def letrec_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(letrec ((sym expr) ...) body...)"""
    return _let(tail, env, evaluate_fn, "letrec", recursive=True)
