from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.errors import LispInvalidSymbol
from conslisp.evaluation.arity import check_arity
from conslisp.types.symbol import Symbol
from conslisp.types.environment import Environment


def assign_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    check_arity(tail, 2, "assign")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispInvalidSymbol(f"assign first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return var_sym
