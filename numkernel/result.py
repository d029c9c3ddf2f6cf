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
"""Result container returned by all fallible solver operations"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from numkernel.names import OK, ERR
from numkernel.errors import ErrorKind, ResultError

T = TypeVar('T')


class Unit(Enum):
    """The value of an OK result of an operation that computes nothing (it works in place)"""
    UNIT = 'unit'


class Result(Generic[T]):
    """Outcome of an operation that may fail for expected reasons

    A Result is either OK and carries a value, or ERR and carries an
    ErrorKind with an optional human readable message. ERR results never
    carry a value. Check the outcome before reading the value: ``bool(result)``
    is True for OK results, ``unwrap()`` raises ResultError on ERR results.

    Instances are created through :meth:`Result.ok` and :meth:`Result.err`.

    Args:
        outcome (str):
            Either 'ok' or 'err' (see numkernel.names).

        value:
            The computed value. Required for OK results (Unit.UNIT if there is
            none), never set for ERR results.

        error (ErrorKind):
            The error code. Only set for ERR results.

        message (str):
            Optional diagnostic message of ERR results.
    """

    __slots__ = ('outcome', 'value', 'error', 'message')

    def __init__(self, outcome: str, value: Optional[T] = None, error: Optional[ErrorKind] = None,
                 message: Optional[str] = None):
        if outcome == OK:
            if error is not None or message is not None:
                raise ValueError('An OK result cannot carry an error or a message.')
            if value is None:
                raise ValueError('An OK result must carry a value, use Unit.UNIT for operations without one.')
        elif outcome == ERR:
            if error is None:
                raise ValueError('An ERR result must carry an error.')
            if value is not None:
                raise ValueError('An ERR result cannot carry a value.')
        else:
            raise ValueError(f"Unknown outcome '{outcome}'.")
        self.outcome = outcome
        self.value = value
        self.error = error
        self.message = message

    @classmethod
    def ok(cls, value: T = Unit.UNIT) -> 'Result[T]':
        return cls(OK, value=value)

    @classmethod
    def err(cls, error: ErrorKind, message: Optional[str] = None) -> 'Result[T]':
        return cls(ERR, error=error, message=message)

    def is_ok(self) -> bool:
        return self.outcome == OK

    def is_err(self) -> bool:
        return self.outcome == ERR

    def __bool__(self) -> bool:
        return self.is_ok()

    def unwrap(self) -> T:
        """Return the value of an OK result, raise ResultError otherwise"""
        if self.is_err():
            msg = f"Called unwrap on an ERR result ({self.error.name})"
            if self.message:
                msg += f": {self.message}"
            raise ResultError(msg, self.error)
        return self.value

    def unwrap_err(self) -> ErrorKind:
        """Return the error of an ERR result, raise ResultError otherwise"""
        if self.is_ok():
            raise ResultError('Called unwrap_err on an OK result.')
        return self.error

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_ok() else default

    def __eq__(self, other) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self.outcome, self.value, self.error, self.message) == \
            (other.outcome, other.value, other.error, other.message)

    __hash__ = None

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Result.ok({self.value!r})"
        if self.message is None:
            return f"Result.err({self.error})"
        return f"Result.err({self.error}, {self.message!r})"
