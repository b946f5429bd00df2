from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.errors import LispInvalidSymbol, LispNotSupported
from conslisp.evaluation.arity import check_arity
from conslisp.types.cons import Cons, iter_list
from conslisp.types.environment import Environment
from conslisp.types.lambda_fn import Lambda
from conslisp.types.symbol import Symbol, NIL


def parameter_list(params: SExpression) -> list[Symbol]:
    """Convert a nil-terminated chain of symbols into a list of formals."""
    if params != NIL and not isinstance(params, Cons):
        raise LispNotSupported(f"{params} is not a parameter list")
    formals: list[Symbol] = []
    for param in iter_list(params):
        if not isinstance(param, Symbol):
            raise LispInvalidSymbol(f"{param} is not a symbol, but appears in parameter list")
        formals.append(param)
    return formals


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms.
    # When there are no body forms, invoking the function yields nil.
    check_arity(tail, 1, "lambda", at_least=True)

    formals = parameter_list(tail[0])
    return Lambda(formals, list(tail[1:]), env)
