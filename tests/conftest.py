import pytest

from rscheme.interpreter import Interpreter
from rscheme.types.environment import make_global_env


@pytest.fixture
def env():
    """Fresh global environment for each test."""
    return make_global_env()


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist only within one test."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate complete source text and return the last value."""
    return interp.eval
