"""Value model for conslisp: symbols, decimal numbers, cons cells and callables."""

from conslisp.types.symbol import Symbol, NIL, T
from conslisp.types.cons import Cons, from_iterable, iter_list
from conslisp.types.environment import Environment
from conslisp.types.lambda_fn import Lambda
from conslisp.types.native import Builtin, SpecialForm
from conslisp.types.printer import to_string, is_atom, is_number

__all__ = [
    "Symbol",
    "NIL",
    "T",
    "Cons",
    "from_iterable",
    "iter_list",
    "Environment",
    "Lambda",
    "Builtin",
    "SpecialForm",
    "to_string",
    "is_atom",
    "is_number",
]
