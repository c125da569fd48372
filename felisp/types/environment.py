"""Runtime environment for Felisp.

The Environment stores bindings of symbol names to expressions and supports
nested scopes via an `outer` link. The global scope holds the built-ins and the
seeded table handle; every lambda call gets a fresh child scope whose `outer`
is the caller's environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, Union

from felisp import Expression
from felisp.errors import Reason
from felisp.types.symbol import Symbol


Name = Union[str, Symbol]


def _key(name: Name) -> str:
    if isinstance(name, Symbol):
        return name.name
    if isinstance(name, str):
        return name
    raise Reason(f"cannot bind {name!r} as a symbol")


class Environment:
    """Chain of scopes mapping symbol names to expressions."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Expression] = {}
        # Read-only from the child's point of view: bind() never writes here
        self.outer: Environment | None = outer

    def bind(self, name: Name, value: Expression) -> None:
        """Bind `name` to `value` in this scope only; last write wins."""
        self.vars[_key(name)] = value

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Name) -> Optional[Expression]:
        """Return the value bound to `name`, walking outward, or None."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def lookup(self, name: Name) -> Expression:
        """Like get(), but an unbound name is a Reason error."""
        env = self.find(name)
        if env is None:
            raise Reason(f"unexpected symbol k='{_key(name)}'")
        return env.vars[_key(name)]

    def update(self, mapping: dict[Name, Expression]) -> None:
        """Bulk-bind a mapping of names to values in the current frame."""
        for k, v in mapping.items():
            self.bind(k, v)

    def depth(self) -> int:
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
