"""Registry of special forms for the RScheme evaluator.

Maps Keyword members to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary closure
application.
"""

from rscheme.types.tokens import Keyword
from rscheme.evaluation.special_forms.quote_form import quote_form
from rscheme.evaluation.special_forms.define_form import define_form, set_form
from rscheme.evaluation.special_forms.lambda_form import lambda_form
from rscheme.evaluation.special_forms.if_form import if_form
from rscheme.evaluation.special_forms.let_forms import let_form, let_seq_form, letrec_form
from rscheme.evaluation.special_forms.list_forms import car_form, cdr_form, cons_form

SPECIAL_FORMS = {
    Keyword.QUOTE: quote_form,
    Keyword.DEFINE: define_form,
    Keyword.ASSIGN: set_form,
    Keyword.LAMBDA: lambda_form,
    Keyword.IF: if_form,
    Keyword.LET: let_form,
    Keyword.LETSEQ: let_seq_form,
    Keyword.LETREC: letrec_form,
    Keyword.CAR: car_form,
    Keyword.CDR: cdr_form,
    Keyword.CONS: cons_form,
}
