"""User-defined function values created by the `fn` special form."""

from __future__ import annotations

from felisp import Expression


class Lambda:
    """A first-class function: an unevaluated parameter form and body.

    No defining environment is captured. The body runs in a child of the
    environment the lambda is called from.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: Expression, body: Expression):
        # Both forms are shared, never copied: the same Lambda may be bound
        # under several names or in several scopes.
        self.params: Expression = params
        self.body: Expression = body

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        return "Lambda {}"

    def __repr__(self) -> str:
        return f"Lambda(params={self.params!r}, body={self.body!r})"
