#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Solve systems of linear equations with Gauss-Jordan elimination

The system is passed as an augmented matrix: each row is one equation, the
last column holds the right hand sides. The elimination reduces the matrix to
RREF and classifies the outcome:

- unique solution: Result.ok, the solution can be read from the last column
- no solution: some row reads 0 = c with c != 0
- infinitely many solutions: free columns but no contradicting row
- underdetermined: fewer equations than variables, checked before reducing
"""

import logging
from typing import Iterable, Optional

from numkernel.names import (DEFAULT_ZERO_PRECISION, MSG_UNDERDETERMINED, MSG_NO_SOLUTIONS,
                             MSG_INFINITE_SOLUTIONS, MSG_UNKNOWN_RREF)
from numkernel.errors import ErrorKind
from numkernel.matrix import Matrix
from numkernel.result import Result, Unit
from numkernel.rref import rref
from numkernel.vector import Vector

LOG = logging.getLogger(__name__)


def false_identity_row(row: Iterable) -> bool:
    """True if the row reads 0 = c with c != 0, i.e. all but the last element are 0 and the last one is not"""
    values = list(row)
    if values[-1] == 0:
        return False
    return all(elem == 0 for elem in values[:-1])


def identity_row(row: Iterable) -> bool:
    """True if all elements of the row are equal (0 = 0 for a zero row)"""
    values = list(row)
    return all(elem == values[0] for elem in values)


def gauss_jordan(matrix: Matrix, zero_precision: Optional[float] = DEFAULT_ZERO_PRECISION) -> Result[Unit]:
    """Reduce an augmented matrix in place and classify the system it represents

    Example:
        >>> m = Matrix.from_rows([[2.0, 0.0, 4.0], [0.0, 1.0, 3.0]])
        >>> gauss_jordan(m)
        Result.ok(<Unit.UNIT: 'unit'>)
        >>> m.column(2).to_list()
        [2.0, 3.0]

    Args:
        matrix (numkernel.Matrix):
            Augmented matrix with one row per equation and the right hand
            sides in the last column. It is reduced in place (integer matrices
            are converted to float first, see numkernel.rref), unless the
            system is underdetermined; then it is left untouched.

        zero_precision (float):
            (Default: None) Threshold below which elements are rounded off to
            zero during the reduction (see numkernel.rref).

    Returns:
        (Result):
        Result.ok(Unit.UNIT) if the system has a unique solution. Otherwise an
        ERR result with one of the error kinds UNDERDETERMINED_SYSTEM,
        NO_SOLUTIONS, INFINITE_SOLUTIONS or UNKNOWN.
    """
    if matrix.nrows < matrix.ncols - 1:
        LOG.info(f"Underdetermined system: {matrix.nrows} equations for {matrix.ncols - 1} variables")
        return Result.err(ErrorKind.UNDERDETERMINED_SYSTEM, MSG_UNDERDETERMINED)

    reduced = rref(matrix, zero_precision)
    if reduced.is_ok():
        return reduced

    if reduced.error != ErrorKind.FREE_COLUMNS_IN_RREF:
        LOG.info(f"Row reduction failed: {reduced.error}")
        return Result.err(ErrorKind.UNKNOWN, MSG_UNKNOWN_RREF)

    # free columns: a single contradicting row means there is no solution at all
    for row_num in reversed(range(matrix.nrows)):
        if false_identity_row(matrix[row_num]):
            LOG.info(f"Row {row_num} reads 0 = {matrix[row_num, matrix.ncols - 1]}, system has no solutions")
            return Result.err(ErrorKind.NO_SOLUTIONS, MSG_NO_SOLUTIONS)
    LOG.info("Free columns without contradiction, system has infinite solutions")
    return Result.err(ErrorKind.INFINITE_SOLUTIONS, MSG_INFINITE_SOLUTIONS)


def solve(matrix: Matrix, zero_precision: Optional[float] = DEFAULT_ZERO_PRECISION) -> Result[Vector]:
    """Solve the system given by an augmented matrix without modifying it

    Runs gauss_jordan on a clone of the matrix.

    Returns:
        (Result):
        Result.ok with a Vector holding the value of each variable, or the
        ERR result of gauss_jordan.
    """
    work = matrix.clone()
    outcome = gauss_jordan(work, zero_precision)
    if outcome.is_err():
        return Result.err(outcome.error, outcome.message)
    num_vars = work.ncols - 1
    return Result.ok(Vector.from_sequence([work[i, num_vars] for i in range(num_vars)], work.dtype))
