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
"""Static strings and default values used in the numkernel package

    Result outcomes

        OK = 'ok'

        ERR = 'err'

    Defaults

        DEFAULT_DTYPE = float

        DEFAULT_ZERO_PRECISION = None # exact comparisons against zero

        FLOAT_ZERO_PRECISION = 1e-10 # suggested threshold for float matrices

        INT64_MIN, INT64_MAX # range of Fraction numerators and denominators

    Diagnostic messages

        MSG_UNDERDETERMINED, MSG_NO_SOLUTIONS, MSG_INFINITE_SOLUTIONS,
        MSG_FREE_COLUMNS, MSG_UNKNOWN_INDEPENDENCE, ...
"""

OK = 'ok'
ERR = 'err'

DEFAULT_DTYPE = float
DEFAULT_ZERO_PRECISION = None
FLOAT_ZERO_PRECISION = 1e-10

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

MSG_UNDERDETERMINED = 'The number of equations in the augmented matrix is less than the number of variables.'
MSG_NO_SOLUTIONS = 'This system of equations has no solutions.'
MSG_INFINITE_SOLUTIONS = 'This system of equations has infinite solutions.'
MSG_FREE_COLUMNS = 'Free columns detected in RREF form. this system does not have a unique solution.'
MSG_UNKNOWN_RREF = 'Row reduction failed with an unexpected error.'
MSG_ZERO_DENOMINATOR = 'Denominator cannot be 0.'
MSG_DIVIDE_BY_ZERO = 'Attempt to divide by 0.'

MSG_DEPENDENCE_DIMENSIONS = 'Cannot check linear independence of 2 vectors of unequal dimensions.'
MSG_ANGLE_DIMENSIONS = 'Cannot compute angle between 2 vectors of unequal dimensions.'
MSG_ANGLE_ZERO_VECTOR = 'Cannot compute angle involving a zero vector.'
MSG_CROSS_DIMENSIONS = 'Can compute cross product of only 3 dimensional vectors.'
MSG_NORMAL_DIMENSIONS = 'Only 3 dimensional vectors can be checked for normalcy with a plane.'
MSG_SINGLE_VECTOR = 'Linear independence of a single vector is not defined.'
MSG_EMPTY_SYSTEM = 'At least one vector is required to check linear independence.'
MSG_SYSTEM_DIMENSIONS = 'Cannot compare linear independence of vectors of unequal dimensions.'
MSG_UNKNOWN_INDEPENDENCE = 'Unknown error occured while trying to compute linear independence of the set of vectors.'

MSG_PLANE_COEFFICIENTS = 'A plane of the form ax + by + cz = k cannot have a = b = c = 0.'
MSG_PLANE_DIMENSIONS = 'Vectors representing plane normals and points have to be of dimension 3.'
