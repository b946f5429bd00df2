"""Lambda function representation and argument binding for conslisp."""

from __future__ import annotations

from io import StringIO

from conslisp import SExpression, LispValue
from conslisp.errors import LispArityError
from conslisp.types.environment import Environment
from conslisp.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: list[Symbol], body: list[SExpression], env: Environment
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        # Shared, not copied: later definitions in `env` stay visible to the body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment for evaluating the body.

        The new frame hangs off the captured environment, which is what makes
        resolution lexical rather than dynamic.
        """
        if len(args) != len(self.formals):
            raise LispArityError(
                f"lambda form requires {len(self.formals)} parameter(s), {len(args)} given"
            )
        new_env = Environment(outer=self.env)
        for formal, arg in zip(self.formals, args):
            new_env.define(formal, arg)
        return new_env
