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
"""Error kinds and exceptions of the numeric kernel

Two channels report failures. Contract violations by the caller (indexing
out of range, ragged input, mismatching dimensions, zero denominators) raise
one of the exceptions below. Expected outcomes of solving a linear system
(underdetermined, free columns, no or infinite solutions) are never raised;
they are returned as a :class:`numkernel.result.Result` carrying an
:class:`ErrorKind`.
"""

from enum import Enum


class ErrorKind(Enum):
    """Error codes used as the error type of Result and attached to exceptions"""
    ZERO_DENOMINATOR = 'zero_denominator'
    DIMENSION_MISMATCH = 'dimension_mismatch'
    INCOMPATIBLE_VECTORS = 'incompatible_vectors'
    ROW_OUT_OF_RANGE = 'row_out_of_range'
    INDEX_OUT_OF_RANGE = 'index_out_of_range'
    MATRIX_SHAPE_ERROR = 'matrix_shape_error'
    UNDERDETERMINED_SYSTEM = 'underdetermined_system'
    FREE_COLUMNS_IN_RREF = 'free_columns_in_rref'
    NO_SOLUTIONS = 'no_solutions'
    INFINITE_SOLUTIONS = 'infinite_solutions'
    UNKNOWN = 'unknown'


class NumericError(Exception):
    """Base class of all exceptions raised by numkernel"""
    kind = ErrorKind.UNKNOWN


class ZeroDenominatorError(NumericError, ZeroDivisionError):
    kind = ErrorKind.ZERO_DENOMINATOR


class DimensionMismatchError(NumericError, ValueError):
    kind = ErrorKind.DIMENSION_MISMATCH


class RowOutOfRangeError(NumericError, IndexError):
    kind = ErrorKind.ROW_OUT_OF_RANGE


class IndexOutOfRangeError(NumericError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE


class MatrixShapeError(NumericError, ValueError):
    kind = ErrorKind.MATRIX_SHAPE_ERROR


class ResultError(NumericError):
    """Raised when the value of an ERR result (or the error of an OK result) is requested."""

    def __init__(self, message, kind=ErrorKind.UNKNOWN):
        super().__init__(message)
        self.kind = kind
