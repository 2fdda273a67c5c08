#!/usr/bin/env python3
##############################################################################
##                                                                          ##
##                                EXACTQ                                    ##
##                                                                          ##
##              Copyright (C) 2019-2026, Florian Schanda                    ##
##                                                                          ##
##  This file is part of ExactQ.                                            ##
##                                                                          ##
##  ExactQ is free software: you can redistribute it and/or modify          ##
##  it under the terms of the GNU General Public License as published by    ##
##  the Free Software Foundation, either version 3 of the License, or       ##
##  (at your option) any later version.                                     ##
##                                                                          ##
##  ExactQ is distributed in the hope that it will be useful,               ##
##  but WITHOUT ANY WARRANTY; without even the implied warranty of          ##
##  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           ##
##  GNU General Public License for more details.                            ##
##                                                                          ##
##  You should have received a copy of the GNU General Public License       ##
##  along with ExactQ. If not, see <http://www.gnu.org/licenses/>.          ##
##                                                                          ##
##############################################################################

"""
Results carrying the cause of a failure.

:class:`Success` holds the value of a computation, :class:`Failure`
the :class:`.Exact_Error` that stopped it. Computations can be chained
with :func:`Result.map` and :func:`Result.and_then`; the first failure
is carried to the end instead of being raised:

>>> from exactq.rationals import Rational
>>> r = attempt(Rational(1).__truediv__, 0).map(lambda q: q + 1)
>>> r.isFailure()
True
"""

from .errors import Exact_Error
from .optional import Present, ABSENT

class Result:
    """Base class of :class:`Success` and :class:`Failure`"""
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def isSuccess(self):
        raise NotImplementedError

    def isFailure(self):
        return not self.isSuccess()

class Success(Result):
    __slots__ = ("value",)

    def __init__(self, value):
        object.__setattr__(self, "value", value)

    def __reduce__(self):
        return (Success, (self.value,))

    def __repr__(self):
        return "Success(%r)" % (self.value,)

    def __eq__(self, other):
        return isinstance(other, Success) and self.value == other.value

    def __hash__(self):
        return hash(("Success", self.value))

    def isSuccess(self):
        return True

    def map(self, function):
        """Apply *function* to the value

        Failures of the rational core raised by *function* are
        captured in a :class:`Failure`.
        """
        return attempt(function, self.value)

    def and_then(self, function):
        """Apply *function*, which must itself return a Result"""
        rv = function(self.value)
        assert isinstance(rv, Result)
        return rv

    def or_else(self, function):
        return self

    def unwrap_or(self, default):
        return self.value

    def unwrap(self):
        return self.value

    def to_optional(self):
        return Present(self.value)

class Failure(Result):
    __slots__ = ("error",)

    def __init__(self, error):
        assert isinstance(error, Exact_Error)
        object.__setattr__(self, "error", error)

    def __reduce__(self):
        return (Failure, (self.error,))

    def __repr__(self):
        return "Failure(%r)" % (self.error,)

    def __eq__(self, other):
        return (isinstance(other, Failure) and
                type(self.error) is type(other.error) and
                self.error.args == other.error.args)

    def __hash__(self):
        return hash(("Failure", type(self.error), self.error.args))

    def isSuccess(self):
        return False

    def map(self, function):
        return self

    def and_then(self, function):
        return self

    def or_else(self, function):
        """Fallback, *function* is called with the error and must
        return a Result"""
        rv = function(self.error)
        assert isinstance(rv, Result)
        return rv

    def unwrap_or(self, default):
        return default

    def unwrap(self):
        """Raises the error that caused the failure"""
        raise self.error

    def to_optional(self):
        return ABSENT

def attempt(function, *args, **kwargs):
    """Call *function* and wrap its result

    Returns :class:`Success` with the result, or :class:`Failure` if
    *function* raised an :class:`.Exact_Error`. Other exceptions
    propagate.
    """
    try:
        return Success(function(*args, **kwargs))
    except Exact_Error as error:
        return Failure(error)
