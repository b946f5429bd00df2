from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, Optional, TextIO

from conslisp import SExpression, LispValue
from conslisp.builtin.kernel import register
from conslisp.config import get_recursion_limit
from conslisp.evaluation.evaluator import evaluate
from conslisp.reader.parser import parse
from conslisp.types.environment import Environment
from conslisp.types.symbol import NIL

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating conslisp code.
    Owns one root Environment, populated by the kernel, across calls; it is the
    only environment collaborators ever see.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        limit = get_recursion_limit()
        if limit > sys.getrecursionlimit():
            logger.debug("Raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env, stdin=stdin, stdout=stdout)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from conslisp.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)
        logger.debug("Interpreter ready with %d root bindings", len(self.env.vars))

    def parse(self, code: str) -> list[SExpression]:
        return parse(code)

    def eval_prelude(self, code: str) -> None:
        for expr in parse(code):
            evaluate(expr, self.env)

    def eval_expr(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every expression in `code` and return all results, in order."""
        return [evaluate(expr, self.env) for expr in parse(code)]

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value (nil if none)."""
        result: LispValue = NIL
        for expr in parse(code):
            result = evaluate(expr, self.env)
        return result

    def run_file(self, path: str | Path) -> LispValue:
        """Evaluate a source file; the first error aborts the whole run."""
        code = Path(path).read_text(encoding='utf-8')
        logger.debug("Running %s", path)
        return self.eval(code)
