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
ExactQ, exact rational arithmetic.

The :class:`Rational` type plus conversions from and to Python ints,
IEEE-754 binary floats, and decimals.
"""

from .errors import (Exact_Error, Division_By_Zero, Unrepresentable_Value,
                     Malformed_Input, Unwrap_Error)
from .rationals import (Rational, q_compare, LESS, EQUAL, GREATER,
                        RM_RNE, RM_RNA, RM_RTP, RM_RTN, RM_RTZ,
                        ROUNDING_MODES,
                        q_round, q_pow2,
                        q_from_int, q_from_scaled, q_from_string,
                        q_from_decimal_string)
from .floats import (Binary_Float, FLOAT16, FLOAT32, FLOAT64, FLOAT128,
                     q_from_float, q_to_float, q_from_binary, q_to_binary)
from .decimals import q_from_decimal, q_to_decimal
