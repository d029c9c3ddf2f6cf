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
"""Reduced row echelon form"""

import logging
import numbers
from typing import Optional

from numkernel.names import DEFAULT_DTYPE, DEFAULT_ZERO_PRECISION, MSG_FREE_COLUMNS
from numkernel.errors import ErrorKind
from numkernel.matrix import Matrix, Slice
from numkernel.result import Result, Unit

LOG = logging.getLogger(__name__)


def round_off_row(row: Slice, zero_precision: float):
    """Set all elements with an absolute value below zero_precision to zero"""
    zero = row.dtype()
    for k in range(len(row)):
        if -zero_precision < float(row[k]) < zero_precision:
            row[k] = zero


def rref(matrix: Matrix, zero_precision: Optional[float] = DEFAULT_ZERO_PRECISION) -> Result[Unit]:
    """Bring a matrix into reduced row echelon form, in place

    For every pivot position (i, i) with i < min(nrows, ncols) a nonzero
    pivot is searched for in column i, starting at row i and moving down
    only. If there is none, column i is free and stays as it is. Otherwise
    the pivot row is moved to row i, column i is eliminated from all other
    rows and the pivot row is normalized so that the pivot becomes 1.

    Integer matrices cannot hold the quotients of the reduction. They are
    converted to float in place before reducing; pass Fraction as the
    element type for exact results.

    The shape of the matrix is not restricted. The reduction never raises
    for a rank deficient matrix; free columns are reported in the result.

    Example:
        >>> m = Matrix.from_rows([[2, 4], [1, 3]], Fraction)
        >>> rref(m).is_ok()
        True

    Args:
        matrix (numkernel.Matrix):
            The matrix to reduce. It is modified in place, integer matrices
            also change their element type to float.

        zero_precision (float):
            (Default: None) If set, every element whose absolute value
            (converted to float) is below this threshold is set to zero after
            each row operation. Use this to absorb floating point residues,
            e.g. 1e-10 for float matrices.

    Returns:
        (Result):
        Result.ok(Unit.UNIT) if every column up to min(nrows, ncols) received a
        pivot, an ERR result with ErrorKind.FREE_COLUMNS_IN_RREF otherwise.
    """
    if issubclass(matrix.dtype, numbers.Integral):
        LOG.debug(f"Converting {matrix.dtype.__name__} matrix to {DEFAULT_DTYPE.__name__} for the reduction")
        matrix.convert(DEFAULT_DTYPE)
    free_columns = []
    for i in range(min(matrix.nrows, matrix.ncols)):
        if matrix[i, i] == 0:
            pivot_row = matrix.find_next_pivot(i, i)
            if pivot_row is None:
                LOG.debug(f"Column {i} has no pivot, marking it free")
                free_columns.append(i)
                continue
            LOG.debug(f"Pivot for column {i} found in row {pivot_row}, exchanging rows")
            matrix.exchange_rows(i, pivot_row)

        for other_row in range(matrix.nrows):
            if other_row == i or matrix[other_row, i] == 0:
                continue
            factor = -(matrix[other_row, i] / matrix[i, i])
            matrix.linear_comb_rows(other_row, 1, i, factor)
            matrix[other_row, i] = matrix.dtype()
            if zero_precision is not None:
                round_off_row(matrix[other_row], zero_precision)

        matrix.scale_row(i, 1 / matrix[i, i])
        if zero_precision is not None:
            round_off_row(matrix[i], zero_precision)

    if free_columns:
        LOG.debug(f"RREF finished with free columns {free_columns}")
        return Result.err(ErrorKind.FREE_COLUMNS_IN_RREF, MSG_FREE_COLUMNS)
    return Result.ok(Unit.UNIT)
