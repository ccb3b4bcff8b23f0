# Copyright (C) 2022-25 Ralf Schlatterbeck. All rights reserved
# Reichergasse 131, A-3411 Weidling
# ****************************************************************************
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
#   The above copyright notice and this permission notice shall be included in
#   all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# ****************************************************************************

import re
import numpy as np

_number = re.compile (r'(-?)([0-9]+)(?:\.([0-9]+))?')

class Parse_Error (ValueError):
    """ Raised for a value that is not a decimal number of the form
        ['-'] digit+ ['.' digit+].
        The batch functions fill in the index of the offending entry.
    >>> print (Parse_Error ('1.2.3'))
    Invalid number: "1.2.3"
    >>> print (Parse_Error ('', index = 4))
    Invalid number at index 4: ""
    """

    def __init__ (self, value, index = None):
        self.value = value
        self.index = index
        super ().__init__ (value)
    # end def __init__

    def __str__ (self):
        if self.index is None:
            return 'Invalid number: "%s"' % (self.value,)
        return 'Invalid number at index %d: "%s"' % (self.index, self.value)
    # end def __str__

# end class Parse_Error

class Decomposition:
    """ Canonical form of a decimal number: sign, integer digits and
        fractional digits. Leading zeros of the integer part and (if
        trim is set) trailing zeros of the fractional part are removed.
        A value consisting only of zeros is never negative.
    >>> d = Decomposition.from_string ('-0010.25000')
    >>> d.is_negative, d.integer_digits, d.fractional_digits
    (True, '10', '25')
    >>> print (Decomposition.from_string ('7.000000'))
    7
    >>> print (Decomposition.from_string ('-0.000'))
    0
    >>> print (Decomposition.from_string ('.5'))
    Traceback (most recent call last):
    ...
    fracalign.decompose.Parse_Error: Invalid number: ".5"
    >>> print (Decomposition.from_string ('2.500', trim = False))
    2.500
    """

    def __init__ (self, is_negative, integer_digits, fractional_digits = ''):
        self.integer_digits    = integer_digits.lstrip ('0') or '0'
        self.fractional_digits = fractional_digits
        self.is_negative       = bool (is_negative)
        if self.integer_digits == '0' and not fractional_digits.strip ('0'):
            self.is_negative = False
    # end def __init__

    @classmethod
    def from_string (cls, s, trim = True):
        if not isinstance (s, str):
            raise Parse_Error (s)
        m = _number.fullmatch (s)
        if not m:
            raise Parse_Error (s)
        sign, integer, fraction = m.groups ()
        fraction = fraction or ''
        if trim:
            fraction = fraction.rstrip ('0')
        return cls (sign == '-', integer, fraction)
    # end def from_string

    @classmethod
    def from_float (cls, value, digits, trim = True):
        """ Render a float with the given number of fractional digits
            and decompose the result. The value keeps its numpy type,
            a np.float32 is rendered from its single precision value.
        >>> print (Decomposition.from_float (np.float64 (-1000.2), 4))
        -1000.2
        >>> print (Decomposition.from_float (np.float32 (0.3214), 4))
        0.3214
        >>> print (Decomposition.from_float (1.0, 3, trim = False))
        1.000
        >>> print (Decomposition.from_float (2.75, 0))
        3
        >>> Decomposition.from_float (np.nan, 4)
        Traceback (most recent call last):
        ...
        fracalign.decompose.Parse_Error: Invalid number: "nan"
        """
        if not np.isfinite (value):
            raise Parse_Error (str (value))
        s = np.format_float_positional \
            ( value
            , precision  = digits
            , unique     = False
            , fractional = True
            , trim       = 'k' if digits else '-'
            )
        return cls.from_string (s, trim = trim)
    # end def from_float

    @property
    def integer_part (self):
        """ Integer digits including the sign
        >>> Decomposition (True, '042').integer_part
        '-42'
        """
        if self.is_negative:
            return '-' + self.integer_digits
        return self.integer_digits
    # end def integer_part

    def __str__ (self):
        if self.fractional_digits:
            return self.integer_part + '.' + self.fractional_digits
        return self.integer_part
    # end def __str__

    def __repr__ (self):
        return '%s (%r, %r, %r)' % \
            ( self.__class__.__name__
            , self.is_negative
            , self.integer_digits
            , self.fractional_digits
            )
    # end def __repr__

    def __eq__ (self, other):
        if not isinstance (other, Decomposition):
            return NotImplemented
        return \
            (  self.is_negative       == other.is_negative
            and self.integer_digits    == other.integer_digits
            and self.fractional_digits == other.fractional_digits
            )
    # end def __eq__

    def __hash__ (self):
        return hash \
            ((self.is_negative, self.integer_digits, self.fractional_digits))
    # end def __hash__

# end class Decomposition
