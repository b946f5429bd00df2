"""Runtime environment for conslisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. A chain of frames ending at one root frame
implements lexical scope: lambda applications and let/letrec blocks push a new
frame whose outer link is the defining scope, never the caller's.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from conslisp import LispValue
from conslisp.errors import LispAlreadyBound, LispInvalidSymbol, LispUnboundSymbol
from conslisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises LispInvalidSymbol if `name` is not a Symbol and LispAlreadyBound
        if this frame already holds a binding for it.
        """
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"Cannot define {name} as a symbol")
        if name in self.vars:
            raise LispAlreadyBound(f"Binding for {name} already exists")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises LispUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise LispUnboundSymbol(f"Cannot assign to {name} as it is unbound")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outward to the root.

        Raises LispUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise LispUnboundSymbol(f"Symbol {name} is unbound")
        return env.vars[name]

    def root(self) -> Environment:
        """Return the outermost frame of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Frame sizes along the chain; printing full frames would recurse through closures."""
        sizes = []
        env: Optional[Environment] = self
        while env is not None:
            sizes.append(str(len(env.vars)))
            env = env.outer
        return f"<Environment chain: {' -> '.join(sizes)} bindings>"
