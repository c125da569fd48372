"""Registry of special forms for the Felisp evaluator.

Maps reserved head symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before evaluating the
head of a list, so these names cannot be shadowed by bindings.
"""

from felisp.types.symbol import Symbol
from felisp.evaluation.special_forms.if_form import if_form
from felisp.evaluation.special_forms.define_form import define_form
from felisp.evaluation.special_forms.lambda_form import lambda_form
from felisp.evaluation.special_forms.table_forms import select_form, insert_form
from felisp.evaluation.special_forms.exit_form import exit_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("defn"): define_form,
    Symbol("fn"): lambda_form,
    Symbol("select"): select_form,
    Symbol("insert"): insert_form,
    Symbol("exit"): exit_form,
}
