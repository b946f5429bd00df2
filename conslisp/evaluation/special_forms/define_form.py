from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.errors import LispInvalidSymbol
from conslisp.evaluation.arity import check_arity
from conslisp.types.environment import Environment
from conslisp.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated in the current env but always bound in the root env,
    even when define appears inside a lambda or let body. Returns the symbol.
    """
    check_arity(tail, 2, "define")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispInvalidSymbol(f"{name} is not a symbol")
    value = evaluate_fn(val_expr, env)
    env.root().define(name, value)
    return name
