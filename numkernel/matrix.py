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
"""Dense matrix with row views into a single flat storage list

A Matrix keeps all of its nrows*ncols elements in one list. Rows are exposed
as Slice objects, i.e. an offset and a size into that list. Exchanging two
rows swaps the offsets of their Slices and leaves the elements where they
are, so the physical position of a logical row is not fixed once rows have
been exchanged.

Example:
    >>> m = Matrix.from_rows([[1, 2], [3, 4]])
    >>> m.exchange_rows(0, 1)[0].to_list()
    [3, 4]
"""

import numbers
from typing import Any, List, Optional, Sequence

import numpy as np

from numkernel.names import DEFAULT_DTYPE
from numkernel.errors import (DimensionMismatchError, IndexOutOfRangeError, MatrixShapeError,
                              RowOutOfRangeError)
from numkernel.vector import Vector, coerce_element, infer_dtype, is_scalar


class Slice:
    """A row view: ``size`` elements of a Matrix's storage, starting at ``offset``

    Slices are handed out by the Matrix and never own the elements. Writes
    through a Slice go straight into the Matrix. A Slice obtained before
    ``exchange_rows`` keeps pointing at the same logical row object, whose
    offset now refers to the other row's elements; code holding a Slice
    across an exchange sees the swapped data.

    Slices cannot be copied (``copy.copy`` and ``copy.deepcopy`` raise
    TypeError); use :meth:`to_list` to take the values out.
    """

    __slots__ = ('_storage', 'offset', 'size', 'dtype')

    def __init__(self, storage: list, offset: int, size: int, dtype: type = DEFAULT_DTYPE):
        self._storage = storage
        self.offset = offset
        self.size = size
        self.dtype = dtype

    def _position(self, index) -> int:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"Row indices must be integers, got {type(index).__name__}.")
        if index < 0 or index >= self.size:
            raise IndexOutOfRangeError("Array index out of range.")
        return self.offset + int(index)

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index):
        return self._storage[self._position(index)]

    def __setitem__(self, index, value):
        self._storage[self._position(index)] = coerce_element(self.dtype, value)

    def __iter__(self):
        for k in range(self.offset, self.offset + self.size):
            yield self._storage[k]

    def __copy__(self):
        raise TypeError("Row slices cannot be copied, use to_list().")

    def __deepcopy__(self, memo):
        raise TypeError("Row slices cannot be copied, use to_list().")

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Slice, Vector, list, tuple)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def to_list(self) -> List:
        return self._storage[self.offset:self.offset + self.size]

    def __str__(self) -> str:
        return ' '.join(str(e) for e in self)

    def __repr__(self) -> str:
        return f"Slice(offset={self.offset}, size={self.size}, values={self.to_list()!r})"


class Matrix:
    """A dense nrows x ncols matrix

    All elements are initialized to the default value of the element type
    (``dtype()``). Row operations work in place and return the matrix itself,
    so they can be chained:

    ``m.exchange_rows(0, 2).scale_row(0, 2).linear_comb_rows(1, 1, 0, -3)``

    Multiplication is asymmetric in the way vectors are treated:
    ``matrix * vector`` reads the vector as a column (len(v) == ncols, the
    result has nrows elements), ``vector * matrix`` reads it as a row
    (len(v) == nrows, the result has ncols elements).

    Matrices are not copied implicitly: ``copy.copy`` and ``copy.deepcopy``
    raise TypeError. Use :meth:`clone` for a deep copy and :meth:`take` to
    move the contents into a new Matrix, leaving this one with shape 0x0.

    Args:
        nrows (int):
            Number of rows. Must be positive.

        ncols (int):
            Number of columns. Must be positive.

        dtype (type):
            Element type (default: float).

    Raises:
        MatrixShapeError: if one of the dimensions is 0.
    """

    def __init__(self, nrows: int, ncols: int, dtype: type = DEFAULT_DTYPE):
        if nrows <= 0:
            raise MatrixShapeError("Matrix cannot have 0 rows.")
        if ncols <= 0:
            raise MatrixShapeError("Matrix cannot have rows with 0 elements.")
        self._init_storage(int(nrows), int(ncols), dtype, [dtype() for _ in range(nrows * ncols)])

    def _init_storage(self, nrows: int, ncols: int, dtype: type, storage: list):
        self.dtype = dtype
        self._nrows = nrows
        self._ncols = ncols
        self._storage = storage
        self._rows = [Slice(storage, i * ncols, ncols, dtype) for i in range(nrows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence], dtype: Optional[type] = None) -> 'Matrix':
        """Create a matrix from a nested sequence of rows

        If no dtype is given, it is inferred from all elements (see infer_dtype).

        Raises:
            MatrixShapeError: if there are no rows, a row is empty or rows differ in length.
        """
        rows = [list(r) for r in rows]
        if len(rows) == 0:
            raise MatrixShapeError("Matrix cannot have 0 rows.")
        ncols = len(rows[0])
        for r in rows:
            if len(r) == 0:
                raise MatrixShapeError("Matrix cannot have rows with 0 elements.")
            if len(r) != ncols:
                raise MatrixShapeError("Matrix cannot have unequal row sizes.")
        if dtype is None:
            dtype = infer_dtype(e for r in rows for e in r)
        storage = [coerce_element(dtype, e) for r in rows for e in r]
        mat = cls.__new__(cls)
        mat._init_storage(len(rows), ncols, dtype, storage)
        return mat

    @classmethod
    def from_numpy(cls, array: np.ndarray, dtype: Optional[type] = None) -> 'Matrix':
        array = np.asarray(array)
        if array.ndim != 2:
            raise MatrixShapeError(f"Expected a 2-dimensional array, got shape {array.shape}.")
        return cls.from_rows(array.tolist(), dtype)

    @classmethod
    def identity(cls, n: int, dtype: type = DEFAULT_DTYPE) -> 'Matrix':
        mat = cls(n, n, dtype)
        for i in range(n):
            mat[i, i] = dtype(1)
        return mat

    @classmethod
    def zero(cls, nrows: int, ncols: int, dtype: type = DEFAULT_DTYPE) -> 'Matrix':
        return cls(nrows, ncols, dtype)

    # Shape

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self):
        return self._nrows, self._ncols

    def get_row_count(self) -> int:
        return self._nrows

    def get_column_count(self) -> int:
        return self._ncols

    def __len__(self) -> int:
        return self._nrows

    # Element and row access

    def _check_row(self, row) -> int:
        if isinstance(row, bool) or not isinstance(row, numbers.Integral):
            raise TypeError(f"Row indices must be integers, got {type(row).__name__}.")
        if row < 0 or row >= self._nrows:
            raise RowOutOfRangeError(f"Row index {row} out of range for matrix with {self._nrows} rows.")
        return int(row)

    def row(self, i: int) -> Slice:
        return self._rows[self._check_row(i)]

    def column(self, j: int) -> Vector:
        """Copy column ``j`` into a new Vector"""
        if isinstance(j, bool) or not isinstance(j, numbers.Integral) or j < 0 or j >= self._ncols:
            raise IndexOutOfRangeError(f"Column index {j} out of range for matrix with {self._ncols} columns.")
        return Vector.from_sequence([r[j] for r in self._rows], self.dtype)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self.row(i)[j]
        return self.row(key)

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            i, j = key
            self.row(i)[j] = value
            return
        row = self.row(key)
        if len(value) != self._ncols:
            raise DimensionMismatchError(f"Row of length {len(value)} does not fit into a matrix with "
                                         f"{self._ncols} columns.")
        for j, elem in enumerate(value):
            row[j] = elem

    def __iter__(self):
        return iter(self._rows)

    # Row operations

    def linear_comb_rows(self, row1: int, a, row2: int, b) -> 'Matrix':
        """Replace ``row1`` by ``a * row1 + b * row2``"""
        dest = self.row(row1)
        src = self.row(row2)
        for k in range(self._ncols):
            dest[k] = a * dest[k] + b * src[k]
        return self

    def exchange_rows(self, row1: int, row2: int) -> 'Matrix':
        """Swap two rows by swapping the offsets of their views"""
        s1 = self.row(row1)
        s2 = self.row(row2)
        s1.offset, s2.offset = s2.offset, s1.offset
        return self

    def scale_row(self, row: int, factor) -> 'Matrix':
        target = self.row(row)
        for k in range(self._ncols):
            target[k] = factor * target[k]
        return self

    def scale(self, factor) -> 'Matrix':
        for i in range(self._nrows):
            self.scale_row(i, factor)
        return self

    def find_next_pivot(self, row: int, col: int) -> Optional[int]:
        """Index of the first row below ``row`` with a nonzero entry in column ``col``, None if there is none"""
        self._check_row(row)
        for i in range(row + 1, self._nrows):
            if self._rows[i][col] != 0:
                return i
        return None

    # Arithmetic

    def _check_same_shape(self, other: 'Matrix', action: str):
        if self.shape != other.shape:
            raise DimensionMismatchError(f"Matrices of different dimensions cannot be {action} "
                                         f"({self._nrows}x{self._ncols} and {other.nrows}x{other.ncols}).")

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'added')
        return Matrix.from_rows([[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other)], self.dtype)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'subtracted')
        return Matrix.from_rows([[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other)], self.dtype)

    def _accumulate(self, pairs) -> Any:
        acc = self.dtype()
        for a, b in pairs:
            acc = coerce_element(self.dtype, acc + a * b)
        return acc

    def matmul(self, other: 'Matrix') -> 'Matrix':
        if self._ncols != other.nrows:
            raise DimensionMismatchError(f"Incompatible matrices for multiplication "
                                         f"({self._nrows}x{self._ncols} and {other.nrows}x{other.ncols}).")
        result = Matrix(self._nrows, other.ncols, self.dtype)
        for i in range(self._nrows):
            for j in range(other.ncols):
                result[i, j] = self._accumulate((self._rows[i][k], other[k, j]) for k in range(self._ncols))
        return result

    def mul_column(self, vec: Vector) -> Vector:
        """Matrix times column vector, ``len(vec)`` must equal ncols"""
        if len(vec) != self._ncols:
            raise DimensionMismatchError(f"Vector of length {len(vec)} cannot be multiplied as a column with a "
                                         f"{self._nrows}x{self._ncols} matrix.")
        result = Vector(self._nrows, self.dtype)
        for i, r in enumerate(self._rows):
            result[i] = self._accumulate(zip(r, vec))
        return result

    def rmul_row(self, vec: Vector) -> Vector:
        """Row vector times matrix, ``len(vec)`` must equal nrows"""
        if len(vec) != self._nrows:
            raise DimensionMismatchError(f"Vector of length {len(vec)} cannot be multiplied as a row with a "
                                         f"{self._nrows}x{self._ncols} matrix.")
        result = Vector(self._ncols, self.dtype)
        for j in range(self._ncols):
            result[j] = self._accumulate((vec[i], self._rows[i][j]) for i in range(self._nrows))
        return result

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, Vector):
            return self.mul_column(other)
        if is_scalar(other):
            return self.clone().scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Vector):
            return self.rmul_row(other)
        if is_scalar(other):
            return self.clone().scale(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(r1 == r2 for r1, r2 in zip(self._rows, other))

    __hash__ = None

    # Ownership

    def __copy__(self):
        raise TypeError("Matrices are not copied implicitly, use clone().")

    def __deepcopy__(self, memo):
        raise TypeError("Matrices are not copied implicitly, use clone().")

    def clone(self) -> 'Matrix':
        """Return a new matrix with the same elements, rows laid out in logical order"""
        return Matrix.from_rows(self.to_list(), self.dtype)

    def take(self) -> 'Matrix':
        """Move the contents into a new matrix; this matrix is left with shape 0x0"""
        moved = Matrix.__new__(Matrix)
        moved.dtype = self.dtype
        moved._nrows = self._nrows
        moved._ncols = self._ncols
        moved._storage = self._storage
        moved._rows = self._rows
        self._init_storage(0, 0, self.dtype, [])
        return moved

    def transpose(self) -> 'Matrix':
        return Matrix.from_rows([[r[j] for r in self._rows] for j in range(self._ncols)], self.dtype)

    # Conversion

    def convert(self, dtype: type) -> 'Matrix':
        """Convert all elements to another element type, in place

        Row views keep pointing at the same storage and take on the new type.
        """
        self._storage[:] = [coerce_element(dtype, e) for e in self._storage]
        self.dtype = dtype
        for r in self._rows:
            r.dtype = dtype
        return self

    def to_list(self) -> List[List]:
        return [r.to_list() for r in self._rows]

    def to_numpy(self, as_float: bool = False) -> np.ndarray:
        """
        Convert to numpy array.

        Args:
            as_float: If True, convert to float array; if False, return object array with the elements

        Returns:
            Numpy array representation
        """
        if as_float:
            return np.array([[float(e) for e in r] for r in self._rows], dtype=float).reshape(self.shape)
        result = np.empty(self.shape, dtype=object)
        for i, r in enumerate(self._rows):
            for j, elem in enumerate(r):
                result[i, j] = elem
        return result

    def to_multiline_string(self) -> str:
        return '\n'.join(str(r) for r in self._rows)

    def __str__(self) -> str:
        return self.to_multiline_string()

    def __repr__(self) -> str:
        return f"Matrix({self._nrows}x{self._ncols}, dtype={self.dtype.__name__})"
