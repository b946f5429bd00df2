"""Application engine for conslisp.

This module centralizes function application semantics for the interpreter:
- Lambda application in a fresh frame parented at the closure's captured
  environment (never the caller's).
- Application of Builtin values, which receive the evaluated argument list.
- Sequential evaluation of a body, shared with let/letrec.
"""

from conslisp import LispValue, SExpression, EvaluatorFn
from conslisp.errors import LispNotCallable
from conslisp.types.environment import Environment
from conslisp.types.lambda_fn import Lambda
from conslisp.types.native import Builtin
from conslisp.types.symbol import NIL


def evaluate_body(
    body: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate body forms in order and return the value of the last one.

    All but the last form are evaluated for side effects only. An empty body
    yields nil.
    """
    result: LispValue = NIL
    for form in body:
        result = evaluate_fn(form, env)
    return result


def apply_lambda(
    fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    Raises LispArityError when the argument count differs from the formals.
    """
    new_env = fn.extend_env(args)
    return evaluate_body(fn.body, new_env, evaluate_fn)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin.

    - For Lambda, defer to apply_lambda; `env` (the caller's) plays no part.
    - For Builtin, invoke with the runtime env and list of args.
    - Otherwise, raise LispNotCallable.
    """
    match head:
        case Lambda():
            return apply_lambda(head, args, evaluate_fn)
        case Builtin():
            return head(env, args)
        case _:
            raise LispNotCallable(f"Object {head} is not callable")
