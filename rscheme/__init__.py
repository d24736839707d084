# Core type aliases for RScheme's data model.
# Plain Python values represent both code (forms) and runtime values:
# int, float, bool and str for literals, Symbol for identifiers, the Keyword
# and Operator enums for reserved words, and Python lists for lists.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed into special forms and operators
EvaluatorFn = Callable[..., LispValue]
