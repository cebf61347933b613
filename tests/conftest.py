import pytest

from hoagie.interpreter import Interpreter

# Every test gets a fresh Interpreter. `run` renders the result of a whole
# input line exactly as the REPL prints it.


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    return interp.rep
