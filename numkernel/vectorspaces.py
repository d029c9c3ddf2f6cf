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
"""Relations between vectors: dependence, angles, cross products, independence of systems

All functions return a Result. Vectors of unfitting dimensions give an ERR
result with ErrorKind.INCOMPATIBLE_VECTORS instead of raising.
"""

import logging
import math
import numbers
from typing import Sequence

from numkernel.names import (MSG_DEPENDENCE_DIMENSIONS, MSG_ANGLE_DIMENSIONS, MSG_ANGLE_ZERO_VECTOR,
                             MSG_CROSS_DIMENSIONS, MSG_NORMAL_DIMENSIONS, MSG_SINGLE_VECTOR, MSG_EMPTY_SYSTEM,
                             MSG_SYSTEM_DIMENSIONS, MSG_UNKNOWN_INDEPENDENCE)
from numkernel.errors import ErrorKind
from numkernel.fraction import Fraction
from numkernel.matrix import Matrix
from numkernel.plane import Plane
from numkernel.result import Result
from numkernel.rref import rref
from numkernel.vector import Vector, coerce_element, infer_dtype

LOG = logging.getLogger(__name__)


def are_linearly_dependent(v1: Vector, v2: Vector, tolerance: float = 0.0) -> Result[bool]:
    """Check whether two vectors are parallel or anti-parallel

    Uses the equality case of the Cauchy-Schwarz inequality:
    (v1 . v2)^2 == |v1|^2 |v2|^2.

    Args:
        v1, v2 (numkernel.Vector):
            Vectors of equal length.

        tolerance (float):
            (Default: 0.0) Relative tolerance of the comparison. 0 compares exactly.
    """
    if len(v1) != len(v2):
        return Result.err(ErrorKind.INCOMPATIBLE_VECTORS, MSG_DEPENDENCE_DIMENSIONS)
    dot = float(v1.dot(v2))
    return Result.ok(math.isclose(dot * dot, v1.magnitude_squared() * v2.magnitude_squared(), rel_tol=tolerance))


def cosine_angle(v1: Vector, v2: Vector) -> Result[float]:
    """Cosine of the angle between two vectors of equal length"""
    if len(v1) != len(v2):
        return Result.err(ErrorKind.INCOMPATIBLE_VECTORS, MSG_ANGLE_DIMENSIONS)
    norms = v1.magnitude_squared() * v2.magnitude_squared()
    if norms == 0:
        return Result.err(ErrorKind.INCOMPATIBLE_VECTORS, MSG_ANGLE_ZERO_VECTOR)
    return Result.ok(float(v1.dot(v2)) / math.sqrt(norms))


def cross(v1: Vector, v2: Vector) -> Result[Vector]:
    """Cross product of two 3 dimensional vectors, in the element type of v1"""
    if len(v1) != 3 or len(v2) != 3:
        return Result.err(ErrorKind.INCOMPATIBLE_VECTORS, MSG_CROSS_DIMENSIONS)
    a1, a2, a3 = v1
    b1, b2, b3 = (coerce_element(v1.dtype, b) for b in v2)
    return Result.ok(Vector.from_sequence([a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1], v1.dtype))


def linear_independence_of_system(vectors: Sequence[Vector]) -> Result[bool]:
    """Check whether a set of vectors is linearly independent

    The vectors become the rows of the homogeneous augmented matrix
    [v_1 ... v_n | 0], which is brought into RREF. A homogeneous system
    always has the trivial solution; free columns mean there are others
    as well, i.e. the vectors are dependent.

    The row reduction only searches for pivots on the diagonal (see
    numkernel.rref). A pivot column that is zero in all remaining rows is
    reported as free even if a later column would supply a pivot, so e.g.
    [1, 0, 0] and [0, 0, 1] are reported as dependent.

    Args:
        vectors (list of numkernel.Vector):
            At least two vectors of equal length. The matrix is built in the
            element type that holds the elements of all of them, integer
            vectors are reduced exactly as Fractions.

    Returns:
        (Result):
        Result.ok(True) for independent and Result.ok(False) for dependent
        vectors. An ERR result with UNDERDETERMINED_SYSTEM for a single
        vector and INCOMPATIBLE_VECTORS for no vectors or vectors of unequal
        length.
    """
    if len(vectors) == 0:
        return Result.err(ErrorKind.INCOMPATIBLE_VECTORS, MSG_EMPTY_SYSTEM)
    if len(vectors) == 1:
        return Result.err(ErrorKind.UNDERDETERMINED_SYSTEM, MSG_SINGLE_VECTOR)
    dim = len(vectors[0])
    if any(len(v) != dim for v in vectors):
        return Result.err(ErrorKind.INCOMPATIBLE_VECTORS, MSG_SYSTEM_DIMENSIONS)
    # more vectors than dimensions can never be independent
    if len(vectors) > dim:
        return Result.ok(False)

    dtype = infer_dtype(e for v in vectors for e in v)
    if issubclass(dtype, numbers.Integral):
        dtype = Fraction
    zero = dtype()
    mat = Matrix.from_rows([list(v) + [zero] for v in vectors], dtype)
    reduced = rref(mat)
    if reduced.is_ok():
        return Result.ok(True)
    if reduced.error == ErrorKind.FREE_COLUMNS_IN_RREF:
        return Result.ok(False)
    LOG.warning(f"Unexpected row reduction outcome {reduced.error} for a system of {len(vectors)} vectors")
    return Result.err(ErrorKind.UNKNOWN, MSG_UNKNOWN_INDEPENDENCE)


def is_normal_to_plane(plane: Plane, vec: Vector, tolerance: float = 0.0) -> Result[bool]:
    """Check whether a 3 dimensional vector is perpendicular to a plane

    The vector is normal to the plane if it is parallel to the plane's normal,
    i.e. the cosine of the angle between the two is 1 or -1. Unlike a check
    for a cosine of exactly 1, a vector pointing in the opposite direction
    of the plane normal counts as normal, since -n is a normal of the same
    plane.

    Args:
        plane (numkernel.Plane):
            The plane.

        vec (numkernel.Vector):
            A vector of length 3.

        tolerance (float):
            (Default: 0.0) Relative tolerance of the comparison of the cosine with 1.
    """
    if len(vec) != 3:
        return Result.err(ErrorKind.INCOMPATIBLE_VECTORS, MSG_NORMAL_DIMENSIONS)
    angle = cosine_angle(plane.normal, vec)
    if angle.is_err():
        return Result.ok(False)
    return Result.ok(math.isclose(abs(angle.value), 1.0, rel_tol=tolerance))
