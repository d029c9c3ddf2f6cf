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
"""Planes in three dimensional space"""

from typing import Tuple

from numkernel.names import DEFAULT_DTYPE, MSG_PLANE_COEFFICIENTS, MSG_PLANE_DIMENSIONS
from numkernel.errors import DimensionMismatchError
from numkernel.vector import Vector, coerce_element


class Plane:
    """The plane ax + by + cz = k

    A plane is described by its normal vector (a, b, c), one point on the
    plane and the four coefficients. The point is placed on the axis of the
    first nonzero coefficient: (k/a, 0, 0), (0, k/b, 0) or (0, 0, k/c).

    Example:
        >>> p = Plane(3.0, 5.0, 9.0, -26.0)
        >>> p.normal.to_list()
        [3.0, 5.0, 9.0]

    Args:
        a, b, c (numeric):
            Coefficients of x, y and z. At least one of them must be nonzero.

        k (numeric):
            The constant on the right hand side.

        dtype (type):
            Element type of normal, point and coefficients (default: float).

    Raises:
        ValueError: if a, b and c are all 0.
    """

    def __init__(self, a, b, c, k, dtype: type = DEFAULT_DTYPE):
        if a == 0 and b == 0 and c == 0:
            raise ValueError(MSG_PLANE_COEFFICIENTS)
        a, b, c, k = (coerce_element(dtype, x) for x in (a, b, c, k))
        self.dtype = dtype
        self.normal = Vector.from_sequence([a, b, c], dtype)
        self.point = Vector(3, dtype)
        if a != 0:
            self.point[0] = k / a
        elif b != 0:
            self.point[1] = k / b
        else:
            self.point[2] = k / c
        self.coefficients = (a, b, c, k)

    @classmethod
    def from_normal_and_point(cls, normal: Vector, point: Vector) -> 'Plane':
        """Plane through ``point`` perpendicular to ``normal``, i.e. normal . (x - point) = 0

        The element type is taken from ``normal``.

        Raises:
            DimensionMismatchError: if one of the vectors is not 3 dimensional.
            ValueError: if normal is the zero vector.
        """
        if len(normal) != 3 or len(point) != 3:
            raise DimensionMismatchError(MSG_PLANE_DIMENSIONS)
        if all(x == 0 for x in normal):
            raise ValueError(MSG_PLANE_COEFFICIENTS)
        dtype = normal.dtype
        plane = cls.__new__(cls)
        plane.dtype = dtype
        plane.normal = normal.clone()
        plane.point = Vector.from_sequence(point, dtype)
        plane.coefficients = (normal[0], normal[1], normal[2], normal.dot(point))
        return plane

    def get_coefficients(self) -> Tuple:
        """(a, b, c, k)"""
        return self.coefficients

    def contains(self, point: Vector) -> bool:
        """True if ``point`` satisfies ax + by + cz = k exactly"""
        if len(point) != 3:
            raise DimensionMismatchError(MSG_PLANE_DIMENSIONS)
        return self.normal.dot(point) == self.coefficients[3]

    def __repr__(self) -> str:
        a, b, c, k = self.coefficients
        return f"Plane({a}x + {b}y + {c}z = {k})"
