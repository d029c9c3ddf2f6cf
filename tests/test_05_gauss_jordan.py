"""Gauss-Jordan elimination: classification of linear systems and solving."""
import logging
import sys

import pytest

from numkernel.names import *
from numkernel.errors import ErrorKind
from numkernel.fraction import Fraction
from numkernel.matrix import Matrix
from numkernel.result import Result, Unit
from numkernel.vector import Vector
from numkernel.gauss_jordan import gauss_jordan, solve, false_identity_row, identity_row


def truncate(value, digits=2):
    scale = 10**digits
    return int(value * scale) / scale


# =============================================================================
# Classification
# =============================================================================


def test_unique_solution_float(solvable_system):
    """The solution ends up in the last column of the reduced matrix."""
    m = Matrix.from_rows(solvable_system, float)
    res = gauss_jordan(m)
    assert res
    assert res.unwrap() == Unit.UNIT
    assert res.error is None and res.message is None
    assert truncate(m[0, 3]) == 4.80
    assert truncate(m[1, 3]) == -4.88
    assert truncate(m[2, 3]) == 9.09


def test_unique_solution_exact(solvable_system):
    """With Fractions the solution is exact."""
    m = Matrix.from_rows(solvable_system, Fraction)
    assert gauss_jordan(m).is_ok()
    assert m.column(3).to_list() == [Fraction(6400, 1331), Fraction(-6500, 1331), Fraction(100, 11)]
    for i in range(3):
        for j in range(3):
            assert m[i, j] == (1 if i == j else 0)


def test_unique_solution_from_integer_rows(solvable_system):
    """Integer rows without an element type are reduced exactly like float rows."""
    m = Matrix.from_rows(solvable_system)
    assert m.dtype is int
    assert gauss_jordan(m).is_ok()
    assert m.dtype is float
    assert truncate(m[0, 3]) == 4.80
    assert truncate(m[1, 3]) == -4.88
    assert truncate(m[2, 3]) == 9.09
    floats = Matrix.from_rows(solvable_system, float)
    gauss_jordan(floats)
    assert m == floats


@pytest.mark.parametrize("system,error", [
    ("unsolvable_system", ErrorKind.NO_SOLUTIONS),
    ("infinite_system", ErrorKind.INFINITE_SOLUTIONS),
    ("underdetermined_system", ErrorKind.UNDERDETERMINED_SYSTEM),
])
def test_classification_of_integer_rows(request, system, error):
    res = gauss_jordan(Matrix.from_rows(request.getfixturevalue(system)))
    assert res.error == error


def test_no_solutions(unsolvable_system, field_dtype):
    m = Matrix.from_rows(unsolvable_system, field_dtype)
    res = gauss_jordan(m)
    assert not res
    assert res.error == ErrorKind.NO_SOLUTIONS
    assert res.message == MSG_NO_SOLUTIONS
    assert res.value is None
    assert any(false_identity_row(row) for row in m)


def test_infinite_solutions(infinite_system, field_dtype):
    m = Matrix.from_rows(infinite_system, field_dtype)
    res = gauss_jordan(m)
    assert not res
    assert res.error == ErrorKind.INFINITE_SOLUTIONS
    assert res.message == MSG_INFINITE_SOLUTIONS


def test_infinite_solutions_with_zero_precision():
    """Rounding off residues keeps the classification of a float system stable."""
    m = Matrix.from_rows([[9, 22, 17, 100, 11], [13, 22, 99, 123, 145], [9, 22, 17, 100, 11], [2, 4, 63, 98, 1413]],
                         float)
    res = gauss_jordan(m, 1e-10)
    assert not res
    assert res.error == ErrorKind.INFINITE_SOLUTIONS


def test_underdetermined_system_is_untouched(underdetermined_system, zero_precision):
    """Fewer equations than variables is reported before any reduction."""
    m = Matrix.from_rows(underdetermined_system, float)
    res = gauss_jordan(m, zero_precision)
    assert not res
    assert res.error == ErrorKind.UNDERDETERMINED_SYSTEM
    assert res.message == MSG_UNDERDETERMINED
    assert m.to_list() == underdetermined_system


def test_unexpected_rref_error_is_unknown(monkeypatch, solvable_system):
    """Any row reduction error other than free columns is reported as UNKNOWN."""
    monkeypatch.setattr(sys.modules["numkernel.gauss_jordan"], "rref",
                        lambda matrix, zero_precision: Result.err(ErrorKind.ROW_OUT_OF_RANGE))
    res = gauss_jordan(Matrix.from_rows(solvable_system, float))
    assert res.error == ErrorKind.UNKNOWN


def test_classification_is_logged(caplog, infinite_system):
    with caplog.at_level(logging.INFO, logger="numkernel.gauss_jordan"):
        gauss_jordan(Matrix.from_rows(infinite_system, Fraction))
    assert any("infinite" in rec.getMessage() for rec in caplog.records)


# =============================================================================
# Row predicates
# =============================================================================


@pytest.mark.parametrize("row,expected", [
    ([0, 0, 0, 5], True),
    ([0, 0, 0, 0], False),
    ([0, 1, 0, 5], False),
    ([0.0, 0.0, -1e-3], True),
    ([Fraction(0), Fraction(1, 2)], True),
])
def test_false_identity_row(row, expected):
    """A row reading 0 = c with c != 0."""
    assert false_identity_row(row) == expected


def test_false_identity_row_on_matrix_rows():
    m = Matrix.from_rows([[1, 0, 2], [0, 0, 3]])
    assert not false_identity_row(m[0])
    assert false_identity_row(m[1])


@pytest.mark.parametrize("row,expected", [
    ([0, 0, 0], True),
    ([2, 2, 2], True),
    ([0, 0, 1], False),
])
def test_identity_row(row, expected):
    """All elements equal."""
    assert identity_row(row) == expected


# =============================================================================
# solve
# =============================================================================


def test_solve_returns_solution_vector(solvable_system):
    m = Matrix.from_rows(solvable_system, Fraction)
    res = solve(m)
    assert res
    solution = res.unwrap()
    assert isinstance(solution, Vector)
    assert solution == Vector.from_sequence([Fraction(6400, 1331), Fraction(-6500, 1331), Fraction(100, 11)])
    # the input matrix is not modified
    assert m.to_list() == solvable_system


def test_solve_satisfies_equations(solvable_system):
    """Multiplying the coefficient matrix with the solution gives the right hand sides."""
    coefficients = Matrix.from_rows([row[:-1] for row in solvable_system], Fraction)
    rhs = Vector.from_sequence([row[-1] for row in solvable_system], Fraction)
    solution = solve(Matrix.from_rows(solvable_system, Fraction)).unwrap()
    assert coefficients * solution == rhs


def test_solve_integer_rows(solvable_system):
    solution = solve(Matrix.from_rows(solvable_system)).unwrap()
    assert solution.dtype is float
    assert solution.to_list() == pytest.approx([6400 / 1331, -6500 / 1331, 100 / 11])


def test_solve_propagates_errors(unsolvable_system, underdetermined_system):
    res = solve(Matrix.from_rows(unsolvable_system, Fraction))
    assert res.error == ErrorKind.NO_SOLUTIONS
    assert res.value is None
    res = solve(Matrix.from_rows(underdetermined_system, Fraction))
    assert res.error == ErrorKind.UNDERDETERMINED_SYSTEM
    assert res.message == MSG_UNDERDETERMINED
