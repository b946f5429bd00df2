from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.evaluation.arity import check_arity
from conslisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) -> expr, unevaluated."""
    check_arity(tail, 1, "quote")
    return tail[0]
