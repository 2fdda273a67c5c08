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
Exceptions raised by ExactQ.

Every failure of the rational core is an ordinary, expected outcome
that the caller has to deal with; nothing is approximated or replaced
by a sentinel value. All of them share the base class
:class:`Exact_Error`, so that the :mod:`exactq.optional` and
:mod:`exactq.result` wrappers can capture them.
"""

class Exact_Error(Exception):
    """Base class for all failures of the rational core"""
    pass

class Division_By_Zero(Exact_Error, ZeroDivisionError):
    """A zero denominator would have been created"""
    pass

class Unrepresentable_Value(Exact_Error, ValueError):
    """The value has no exact counterpart in the target representation

    Raised for infinities and NaN when converting into a rational, and
    for rationals that have no exact decimal or integer form.
    """
    pass

class Malformed_Input(Exact_Error, ValueError):
    """Text that does not follow the grammar of rational literals"""

    def __init__(self, text, reason):
        super(Malformed_Input, self).__init__("%r: %s" % (text, reason))
        self.text   = text
        self.reason = reason

class Unwrap_Error(Exception):
    """A value was requested from an empty optional"""
    pass
