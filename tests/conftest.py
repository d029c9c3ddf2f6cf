import pytest
from numkernel.names import *
from numkernel.fraction import Fraction

# Element types the containers are tested with
dtypes = [int, float, Fraction]


@pytest.fixture(params=dtypes, scope="session")
def dtype(request: pytest.FixtureRequest) -> type:
    """Provide session-level fixture for parametrized element types."""
    return request.param


@pytest.fixture(params=[float, Fraction], scope="session")
def field_dtype(request: pytest.FixtureRequest) -> type:
    """Provide session-level fixture for element types that form a field (division is defined)."""
    return request.param


@pytest.fixture(params=[None, FLOAT_ZERO_PRECISION], scope="session")
def zero_precision(request: pytest.FixtureRequest):
    """Provide session-level fixture for the rounding threshold of row reductions."""
    return request.param


@pytest.fixture
def solvable_system():
    """Augmented matrix of a system with the unique solution (6400/1331, -6500/1331, 100/11)."""
    return [[11, 22, 17, 100], [0, 0, 22, 200], [19, 82, 67, 300]]


@pytest.fixture
def unsolvable_system():
    """Augmented matrix of an inconsistent system with free columns."""
    return [[11, 22, 17, 100, 100], [11, 22, 99, 123, 145], [1, 2, 36, 45, 123], [2, 4, 63, 98, 1413]]


@pytest.fixture
def infinite_system():
    """Augmented matrix of a consistent system with a repeated equation."""
    return [[11, 22, 17, 100, 100], [13, 22, 99, 123, 145], [11, 22, 17, 100, 100], [2, 4, 63, 98, 1413]]


@pytest.fixture
def underdetermined_system():
    """Augmented matrix with 3 equations for 4 variables."""
    return [[11, 22, 17, 100, 100], [11, 22, 99, 123, 145], [1, 2, 36, 45, 123]]
