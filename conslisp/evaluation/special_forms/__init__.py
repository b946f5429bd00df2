"""Registry of special forms for the conslisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The kernel binds each handler, wrapped in a SpecialForm value, in the root
environment; the evaluator recognises them by value, not by name, so a special
form can be rebound or passed around like any other value.
"""

from conslisp.types.symbol import Symbol
from conslisp.evaluation.special_forms.quote_form import quote_form
from conslisp.evaluation.special_forms.if_form import if_form
from conslisp.evaluation.special_forms.define_form import define_form
from conslisp.evaluation.special_forms.assign_form import assign_form
from conslisp.evaluation.special_forms.lambda_form import lambda_form
from conslisp.evaluation.special_forms.let_forms import let_form, letrec_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("assign"): assign_form,
    Symbol("lambda"): lambda_form,
    Symbol("let"): let_form,
    Symbol("letrec"): letrec_form,
}
