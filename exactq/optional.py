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
Optional values.

A small container with exactly two variants: :class:`Present` holds a
value, :data:`ABSENT` holds nothing (and says nothing about why). It is
an alternative way of calling the partial operations of the rational
core:

>>> from exactq.rationals import q_from_string
>>> attempt(q_from_string, "7/0").unwrap_or(None) is None
True
"""

from .errors import Exact_Error, Unwrap_Error

class Optional:
    """Base class of :class:`Present` and :class:`Absent`

    Optionals are immutable, like the values they usually carry.
    """
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def isPresent(self):
        raise NotImplementedError

    def isAbsent(self):
        return not self.isPresent()

class Present(Optional):
    """An optional holding *value*"""
    __slots__ = ("value",)

    def __init__(self, value):
        object.__setattr__(self, "value", value)

    def __reduce__(self):
        return (Present, (self.value,))

    def __repr__(self):
        return "Present(%r)" % (self.value,)

    def __eq__(self, other):
        return isinstance(other, Present) and self.value == other.value

    def __hash__(self):
        return hash(("Present", self.value))

    def isPresent(self):
        return True

    def map(self, function):
        """Apply *function* to the value

        Failures of the rational core raised by *function* give
        :data:`ABSENT`.
        """
        return attempt(function, self.value)

    def and_then(self, function):
        """Apply *function*, which must itself return an Optional"""
        rv = function(self.value)
        assert isinstance(rv, Optional)
        return rv

    def or_else(self, function):
        return self

    def unwrap_or(self, default):
        return self.value

    def unwrap(self):
        return self.value

class Absent(Optional):
    """The empty optional, use the singleton :data:`ABSENT`"""
    __slots__ = ()

    def __reduce__(self):
        return "ABSENT"

    def __repr__(self):
        return "ABSENT"

    def __eq__(self, other):
        return isinstance(other, Absent)

    def __hash__(self):
        return hash("Absent")

    def isPresent(self):
        return False

    def map(self, function):
        return self

    def and_then(self, function):
        return self

    def or_else(self, function):
        """Fallback, *function* is called without arguments and must
        return an Optional"""
        rv = function()
        assert isinstance(rv, Optional)
        return rv

    def unwrap_or(self, default):
        return default

    def unwrap(self):
        raise Unwrap_Error("unwrap of an absent value")

ABSENT = Absent()

def attempt(function, *args, **kwargs):
    """Call *function* and wrap its result

    Returns :class:`Present` with the result, or :data:`ABSENT` if
    *function* raised an :class:`.Exact_Error`. Other exceptions
    propagate.
    """
    try:
        return Present(function(*args, **kwargs))
    except Exact_Error:
        return ABSENT
