# Core type aliases for Felisp's data model.
# Plain Python types (bool, float, list) represent both code (forms) and runtime
# values. Symbols, lambdas and tables have their own small classes under
# felisp.types. Native functions are ordinary Python callables taking the list
# of evaluated arguments.
#
# Naming guidance:
# - Expression: a parsed form or an evaluated value (they are the same union).
# - EvaluatorFn: the evaluator as seen from special forms.

from typing import Any, Callable

Expression = Any

# Native function: (evaluated arguments) -> Expression, raises Reason on failure
NativeFunction = Callable[[list], Expression]

# Evaluator function type: Python evaluator used inside special forms
EvaluatorFn = Callable[..., Expression]
