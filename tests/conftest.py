import pytest

from conslisp.builtin.kernel import register
from conslisp.interpreter import Interpreter
from conslisp.types.environment import Environment


# Most tests need one of two starting points: a bare root environment with
# only the kernel registered, or a full interpreter with the prelude loaded.
# Both are rebuilt per test so definitions never leak between tests.


@pytest.fixture
def env():
    """Fresh root environment with the kernel loaded (no prelude)."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter with the standard prelude."""
    return Interpreter()


@pytest.fixture
def bare_interp():
    """Fresh interpreter with the kernel only."""
    return Interpreter(prelude=None)
