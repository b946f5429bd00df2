"""Core evaluator for the conslisp interpreter.

`evaluate` is the entry point used by collaborators; `evaluate0` is the
recursive core that special forms call back into. Dispatch is a single match
on the value kind:

- Symbol       -> lookup along the environment chain
- Cons         -> application; the operator decides whether operands are
                  evaluated (functions) or passed verbatim (special forms)
- anything else (numbers, functions, special forms) evaluates to itself
"""

from __future__ import annotations

import logging

from conslisp import SExpression, LispValue
from conslisp.errors import LispNotCallable, LispStackExhausted
from conslisp.evaluation.apply import apply
from conslisp.types.cons import Cons, iter_list
from conslisp.types.environment import Environment
from conslisp.types.lambda_fn import Lambda
from conslisp.types.native import Builtin, SpecialForm
from conslisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env`, surfacing host stack exhaustion as LispStackExhausted.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError:
        logger.debug("Evaluation exhausted the host stack")
        raise LispStackExhausted(
            "Stack exhausted: recursion too deep (non-terminating recursion?)"
        ) from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """
    Core evaluator: one recursive step per sub-expression.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Cons(car=head, cdr=operands):
            operator = evaluate0(head, env)
            match operator:
                case SpecialForm():
                    # Operands are handed over unevaluated.
                    return operator(list(iter_list(operands)), env, evaluate0)
                case Lambda() | Builtin():
                    # Evaluate arguments left to right in the caller's env.
                    args = [evaluate0(arg, env) for arg in iter_list(operands)]
                    return apply(operator, args, env, evaluate0)
                case _:
                    raise LispNotCallable(f"Object {operator} is not callable")

    # --- Numbers and callables are self-evaluating ---
    return expr
