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
"""Fixed length mathematical vector"""

import math
import numbers
from typing import Any, Iterable, List, Optional

import numpy as np

from numkernel.names import DEFAULT_DTYPE
from numkernel.errors import DimensionMismatchError, IndexOutOfRangeError
from numkernel.fraction import Fraction


def is_scalar(value: Any) -> bool:
    """True for built-in and numpy numbers and for Fractions"""
    return isinstance(value, (Fraction, numbers.Number)) and not isinstance(value, bool)


def coerce_element(dtype: type, value: Any) -> Any:
    """Convert a value to the element type of a container

    Values already of the element type are returned as they are. Otherwise
    the element type is called on the value, which truncates floats stored in
    int containers and rejects floats stored in Fraction containers.
    """
    if isinstance(value, dtype):
        return value
    return dtype(value)


def infer_dtype(elems: Iterable) -> type:
    """Element type that holds all given values without loss

    Values of one type give that type. Integers mixed with Fractions give
    Fraction, any other mix (e.g. ints and floats) gives float.
    """
    types = {type(e) for e in elems}
    if not types:
        return DEFAULT_DTYPE
    if len(types) == 1:
        return types.pop()
    if all(issubclass(t, numbers.Integral) for t in types):
        return int
    if all(issubclass(t, (numbers.Integral, Fraction)) for t in types):
        return Fraction
    return float


class Vector:
    """A vector (as in linear algebra) of fixed length

    The length is fixed at construction time and all elements are
    initialized to the default value of the element type (``dtype()``, i.e.
    zero for int, float and Fraction). Values written into the vector are
    converted to the element type.

    Vectors are not copied implicitly: ``copy.copy`` and ``copy.deepcopy``
    raise TypeError. Use :meth:`clone` for an explicit deep copy and
    :meth:`take` to move the buffer into a new Vector, leaving this one empty.

    Operators:
        ``v1 * v2`` is the dot product, ``v * k`` and ``k * v`` scale into a
        new vector, ``+`` and ``-`` work element-wise. Multiplying with a
        Matrix is defined in numkernel.matrix.

    Args:
        length (int):
            Number of elements.

        dtype (type):
            Element type (default: float).
    """

    __slots__ = ('dtype', '_storage')

    def __init__(self, length: int, dtype: type = DEFAULT_DTYPE):
        if isinstance(length, bool) or not isinstance(length, numbers.Integral):
            raise TypeError(f"Vector length must be an integer, got {type(length).__name__}.")
        if length < 0:
            raise ValueError(f"Vector length cannot be negative, got {length}.")
        self.dtype = dtype
        self._storage = [dtype() for _ in range(int(length))]

    @classmethod
    def from_sequence(cls, elems: Iterable, dtype: Optional[type] = None) -> 'Vector':
        """Create a vector from the elements of a sequence, copying them one by one

        If no dtype is given, it is inferred from all elements (see infer_dtype).
        """
        elems = list(elems)
        if dtype is None:
            dtype = infer_dtype(elems)
        vec = cls(0, dtype)
        vec._storage = [coerce_element(dtype, e) for e in elems]
        return vec

    @classmethod
    def from_numpy(cls, array: np.ndarray, dtype: Optional[type] = None) -> 'Vector':
        array = np.asarray(array)
        if array.ndim != 1:
            raise DimensionMismatchError(f"Expected a 1-dimensional array, got shape {array.shape}.")
        return cls.from_sequence(array.tolist(), dtype)

    def __len__(self) -> int:
        return len(self._storage)

    @property
    def size(self) -> int:
        return len(self._storage)

    def _check_index(self, index) -> int:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"Vector indices must be integers, got {type(index).__name__}.")
        if index < 0 or index >= len(self._storage):
            raise IndexOutOfRangeError("Vector index out of range.")
        return int(index)

    def __getitem__(self, index):
        return self._storage[self._check_index(index)]

    def __setitem__(self, index, value):
        self._storage[self._check_index(index)] = coerce_element(self.dtype, value)

    def __iter__(self):
        return iter(self._storage)

    # Ownership

    def __copy__(self):
        raise TypeError("Vectors are not copied implicitly, use clone().")

    def __deepcopy__(self, memo):
        raise TypeError("Vectors are not copied implicitly, use clone().")

    def clone(self) -> 'Vector':
        """Return a new vector holding the same elements"""
        return Vector.from_sequence(self._storage, self.dtype)

    def take(self) -> 'Vector':
        """Move the elements into a new vector; this vector is left with length 0"""
        moved = Vector(0, self.dtype)
        moved._storage = self._storage
        self._storage = []
        return moved

    # Vector algebra

    def _check_same_length(self, other, action: str):
        if len(self) != len(other):
            raise DimensionMismatchError(f"Cannot compute {action} of vectors with different dimensions "
                                         f"({len(self)} and {len(other)}).")

    def dot(self, other) -> Any:
        """Dot product, computed in the element type of this vector

        Elements of ``other`` are converted to this vector's element type
        before they are multiplied. There is no widening: the dot product of
        two int vectors is computed in integer arithmetic.
        """
        self._check_same_length(other, 'dot product')
        acc = self.dtype()
        for a, b in zip(self._storage, other):
            acc = coerce_element(self.dtype, acc + a * coerce_element(self.dtype, b))
        return acc

    def scale(self, scalar) -> 'Vector':
        """Multiply all elements by ``scalar`` in place and return self"""
        for i, elem in enumerate(self._storage):
            self._storage[i] = coerce_element(self.dtype, scalar * elem)
        return self

    def magnitude_squared(self) -> float:
        """Sum of the squared elements"""
        acc = self.dtype()
        for elem in self._storage:
            acc = acc + elem * elem
        return float(acc)

    def magnitude(self) -> float:
        """Euclidean length, the square root of magnitude_squared"""
        return math.sqrt(self.magnitude_squared())

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self.dot(other)
        if is_scalar(other):
            return self.clone().scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return self.clone().scale(other)
        return NotImplemented

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other, 'sum')
        return Vector.from_sequence([a + b for a, b in zip(self._storage, other)], self.dtype)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other, 'difference')
        return Vector.from_sequence([a - b for a, b in zip(self._storage, other)], self.dtype)

    def __neg__(self) -> 'Vector':
        return Vector.from_sequence([-a for a in self._storage], self.dtype)

    def __eq__(self, other) -> bool:
        # element types may differ, elements are compared pairwise
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self) != len(other):
            return False
        for a, b in zip(self._storage, other):
            if a != b:
                return False
        return True

    __hash__ = None

    # Conversion

    def to_list(self) -> List:
        return list(self._storage)

    def to_numpy(self, as_float: bool = False) -> np.ndarray:
        """
        Convert to numpy array.

        Args:
            as_float: If True, convert to float array; if False, return object array with the elements

        Returns:
            Numpy array representation
        """
        if as_float:
            return np.array([float(e) for e in self._storage], dtype=float)
        result = np.empty(len(self._storage), dtype=object)
        for i, elem in enumerate(self._storage):
            result[i] = elem
        return result

    def __str__(self) -> str:
        return '[' + ', '.join(str(e) for e in self._storage) + ']'

    def __repr__(self) -> str:
        return f"Vector({self._storage!r}, dtype={self.dtype.__name__})"
