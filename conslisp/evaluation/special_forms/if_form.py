from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.evaluation.arity import check_arity
from conslisp.types.environment import Environment
from conslisp.types.symbol import NIL


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    check_arity(tail, 3, "if")

    test, then_expr, else_expr = tail
    # Lisp truthiness: anything but nil is true, including 0
    if evaluate_fn(test, env) != NIL:
        return evaluate_fn(then_expr, env)  # else_expr stays unevaluated
    return evaluate_fn(else_expr, env)  # then_expr stays unevaluated
