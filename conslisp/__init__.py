# Core type aliases for the conslisp data model.
# Code and data share one representation: Symbol, decimal.Decimal, Cons and the
# three callable kinds (Lambda, Builtin, SpecialForm) defined under conslisp.types.
#
# Naming guidance:
# - SExpression: use in reader/special-form code for unevaluated forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both aliases resolve to `Any`; the value set is closed by convention, not by
# the type checker.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Unevaluated form alias (same representation as runtime values)
SExpression = LispValue

# Evaluator function type handed to special forms and apply
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
