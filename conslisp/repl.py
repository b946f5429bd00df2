"""Handles interactive mode for the conslisp interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd
import sys
from typing import Optional, TextIO

from conslisp.errors import LispParseError, LispRuntimeError
from conslisp.interpreter import Interpreter
from conslisp.reader.lexer import lex, LPAREN, RPAREN
from conslisp.types.printer import to_string


def paren_balance(text: str) -> int:
    balance = 0
    for tok in lex(text):
        if tok.kind == LPAREN:
            balance += 1
        elif tok.kind == RPAREN:
            balance -= 1
    return balance


class Repl(cmd.Cmd):
    """Read-eval-print loop over one Interpreter; errors abort only the failing expression."""
    intro = "This is conslisp (a small lisp evaluator)\nType (exit) or press Ctrl-D to leave."
    prompt_template = "[{}]> "
    secondary_prompt = ". "  # used for line continuations

    def __init__(
        self,
        interpreter: Interpreter,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.interpreter = interpreter
        self.stderr = stderr
        self.expr_count = 0
        self._pending = ""
        self._next_prompt()

    def _next_prompt(self) -> None:
        self.expr_count += 1
        self.prompt = self.prompt_template.format(self.expr_count)

    def _error(self, message: str) -> None:
        err = self.stderr if self.stderr is not None else sys.stderr
        err.write(message + "\n")
        err.flush()

    def onecmd(self, line):
        """Route every line to the evaluator; cmd's do_* dispatch would shadow lisp symbols."""
        if line == "EOF":
            return self.do_EOF(line)
        return self.default(line)

    def default(self, line):
        """Evaluates the buffered source once its parentheses balance."""
        source = f"{self._pending}\n{line}" if self._pending else line
        if not source.strip():
            return False
        if paren_balance(source) > 0:
            self._pending = source
            self.prompt = self.secondary_prompt
            return False
        self._pending = ""
        self._next_prompt()

        try:
            exprs = self.interpreter.parse(source)
        except LispParseError as e:
            self._error(f"Parse error: {e}")
            return False
        for expr in exprs:
            try:
                result = self.interpreter.eval_expr(expr)
            except LispRuntimeError as e:
                self._error(f"Runtime error: {e}")
                continue
            self.stdout.write(to_string(result) + "\n")
        return False

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return True
