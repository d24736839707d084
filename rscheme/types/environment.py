"""Runtime environment for RScheme.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. The global environment has no parent;
let-family forms and closure calls each add one frame on top of an existing
chain.

Environments are not safe for concurrent mutation. An embedding that shares
one across threads must serialise access itself.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from rscheme import LispValue
from rscheme.errors import RSchemeNameError, RSchemeRuntimeError, RSchemeTypeError
from rscheme.types.nil import Unassigned
from rscheme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a new, empty frame whose parent is this one."""
        return Environment(outer=self)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, searching parents in turn.

        Raises RSchemeNameError if no frame binds `name`, and
        RSchemeRuntimeError if the nearest binding is still the placeholder
        left by `extend`.
        """
        env = self.find(name)
        if env is None:
            raise RSchemeNameError(f"unbound identifier {name}")
        value = env.vars[name]
        if value is Unassigned:
            raise RSchemeRuntimeError(f"identifier {name} used before its value was defined")
        return value

    def extend(self, name: Symbol) -> None:
        """Introduce `name` in this frame ahead of its value.

        An existing local binding is left untouched, so `(define x (+ x 1))`
        still sees the old `x`.
        """
        self._check_name(name)
        self.vars.setdefault(name, Unassigned)

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, never in a parent."""
        self._check_name(name)
        self.vars[name] = value

    @staticmethod
    def _check_name(name: Symbol) -> None:
        if not isinstance(name, Symbol):
            raise RSchemeTypeError(f"cannot bind {name} as an identifier")

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"


def make_global_env() -> Environment:
    """Create the top-level environment for a new interpreter instance."""
    return Environment()
