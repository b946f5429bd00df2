import sys
from pathlib import Path

import pytest

from conslisp import config
from conslisp.interpreter import Interpreter


def test_defaults(monkeypatch):
    for var in ("CONSLISP_PRELUDE_PATH", "CONSLISP_DIVISION_PRECISION", "CONSLISP_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prelude_root() == Path(config.__file__).resolve().parent / "prelude"
    assert config.get_division_precision() == 28
    assert config.get_recursion_limit() == 10000


def test_prelude_path_may_name_a_file(tmp_path, monkeypatch):
    target = tmp_path / "std.lisp"
    target.write_text("", encoding="utf-8")
    monkeypatch.setenv("CONSLISP_PRELUDE_PATH", str(target))
    assert config.get_prelude_root() == tmp_path


def test_division_precision_from_env(monkeypatch):
    monkeypatch.setenv("CONSLISP_DIVISION_PRECISION", "6")
    assert config.get_division_precision() == 6
    itp = Interpreter(prelude=None)
    assert itp.eval("(/ 2 3)") == itp.eval("0.666667")


def test_blank_value_means_default(monkeypatch):
    monkeypatch.setenv("CONSLISP_DIVISION_PRECISION", "  ")
    assert config.get_division_precision() == 28


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5"])
def test_invalid_integer_settings(monkeypatch, raw):
    monkeypatch.setenv("CONSLISP_DIVISION_PRECISION", raw)
    with pytest.raises(ValueError):
        config.get_division_precision()


def test_recursion_limit_is_only_ever_raised(monkeypatch):
    current = sys.getrecursionlimit()
    monkeypatch.setattr(sys, "setrecursionlimit", lambda n: pytest.fail("lowered the limit"))
    monkeypatch.setenv("CONSLISP_RECURSION_LIMIT", "10")
    assert config.get_recursion_limit() == 10
    Interpreter(prelude=None)
    assert sys.getrecursionlimit() == current


def test_recursion_limit_raises_host_limit(monkeypatch):
    current = sys.getrecursionlimit()
    calls = []
    monkeypatch.setattr(sys, "setrecursionlimit", calls.append)
    monkeypatch.setenv("CONSLISP_RECURSION_LIMIT", str(current + 500))
    Interpreter(prelude=None)
    assert calls == [current + 500]
