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

import sys
import numbers
import numpy as np
from fracalign.decompose import Decomposition, Parse_Error

class Format_Precision:
    """ Number of fractional digits used for rendering floats.
        With 'Max' the rendered digits are trimmed of trailing zeros,
        with 'Exact' all digits are kept.
    >>> Format_Precision.Max (4)
    Format_Precision.Max (4)
    >>> Format_Precision.coerce (2).exact
    False
    >>> Format_Precision.Exact (-1)
    Traceback (most recent call last):
    ...
    ValueError: Precision must be >= 0, got -1
    """

    def __init__ (self, digits, exact = False):
        digits = int (digits)
        if digits < 0:
            raise ValueError ("Precision must be >= 0, got %d" % digits)
        self.digits = digits
        self.exact  = bool (exact)
    # end def __init__

    @classmethod
    def Exact (cls, digits):
        return cls (digits, exact = True)
    # end def Exact

    @classmethod
    def Max (cls, digits):
        return cls (digits, exact = False)
    # end def Max

    @classmethod
    def coerce (cls, precision):
        if isinstance (precision, cls):
            return precision
        return cls.Max (precision)
    # end def coerce

    def __repr__ (self):
        name = 'Exact' if self.exact else 'Max'
        return '%s.%s (%d)' % (self.__class__.__name__, name, self.digits)
    # end def __repr__

# end class Format_Precision

class Fraction_Number:
    """ A number to be formatted: either a decimal string or a single
        or double precision float. The kind is fixed when the object
        is created, plain values are tagged by their type.
    >>> Fraction_Number (np.float32 (1.5))
    Fraction_Number.f32 (1.5)
    >>> Fraction_Number (-42)
    Fraction_Number.f64 (-42.0)
    >>> Fraction_Number ('0.3214').decompose (Format_Precision.Max (2))
    Decomposition (False, '0', '3214')
    >>> Fraction_Number.f32 (0.1).decompose (Format_Precision.Exact (3))
    Decomposition (False, '0', '100')
    >>> Fraction_Number (True)
    Traceback (most recent call last):
    ...
    TypeError: Cannot format value True of type bool
    """

    def __init__ (self, value, kind = None):
        if isinstance (value, Fraction_Number):
            value, kind = value.value, kind or value.kind
        if kind is None:
            kind = self.kind_of (value)
        if kind == 'str':
            self.value = value
        elif kind == 'f32':
            self.value = np.float32 (value)
        elif kind == 'f64':
            self.value = np.float64 (value)
        else:
            raise ValueError ("Invalid kind: %r" % (kind,))
        self.kind = kind
    # end def __init__

    @classmethod
    def f32 (cls, value):
        return cls (value, 'f32')
    # end def f32

    @classmethod
    def f64 (cls, value):
        return cls (value, 'f64')
    # end def f64

    @classmethod
    def string (cls, value):
        return cls (value, 'str')
    # end def string

    @staticmethod
    def kind_of (value):
        if isinstance (value, str):
            return 'str'
        if isinstance (value, np.float32):
            return 'f32'
        real = (numbers.Real, np.floating, np.integer)
        if isinstance (value, real) and not isinstance (value, bool):
            return 'f64'
        raise TypeError \
            ( "Cannot format value %r of type %s"
            % (value, type (value).__name__)
            )
    # end def kind_of

    def decompose (self, precision):
        """ Decompose, precision is used only for floats.
        """
        if self.kind == 'str':
            return Decomposition.from_string (self.value)
        elif self.kind in ('f32', 'f64'):
            return Decomposition.from_float \
                (self.value, precision.digits, trim = not precision.exact)
        raise ValueError ("Invalid kind: %r" % (self.kind,))
    # end def decompose

    def __repr__ (self):
        if self.kind == 'str':
            v = repr (self.value)
        else:
            v = repr (float (self.value))
        return '%s.%s (%s)' % (self.__class__.__name__, self.kind, v)
    # end def __repr__

# end class Fraction_Number

class Alignment_Spec:
    """ Column widths shared by all entries of a batch.
    >>> d = [Decomposition.from_string (s) for s in ('-42', '0.3214')]
    >>> a = Alignment_Spec (d)
    >>> a.integer_width, a.fractional_width, a.width
    (3, 4, 8)
    >>> [a.render (x) for x in d]
    ['-42     ', '  0.3214']
    >>> Alignment_Spec ([Decomposition (False, '7')]).any_fractional
    False
    """

    def __init__ (self, decompositions):
        self.integer_width = max \
            ((len (d.integer_part) for d in decompositions), default = 0)
        self.fractional_width = max \
            ((len (d.fractional_digits) for d in decompositions), default = 0)
    # end def __init__

    @property
    def any_fractional (self):
        return self.fractional_width > 0
    # end def any_fractional

    @property
    def width (self):
        if self.any_fractional:
            return self.integer_width + 1 + self.fractional_width
        return self.integer_width
    # end def width

    def render (self, decomposition):
        """ Integer part is right-justified, the fractional part is
            left-justified behind the decimal point. An entry without
            fractional digits gets blanks in place of point and digits.
        """
        r = decomposition.integer_part.rjust (self.integer_width)
        if not self.any_fractional:
            return r
        if decomposition.fractional_digits:
            fraction = decomposition.fractional_digits
            return r + '.' + fraction.ljust (self.fractional_width)
        return r + ' ' * (1 + self.fractional_width)
    # end def render

    def __repr__ (self):
        return '%s (integer_width=%d, fractional_width=%d)' % \
            ( self.__class__.__name__
            , self.integer_width
            , self.fractional_width
            )
    # end def __repr__

# end class Alignment_Spec

def align (decompositions):
    """ Render decompositions padded to the common width of the batch.
    """
    spec = Alignment_Spec (decompositions)
    return [spec.render (d) for d in decompositions]
# end def align

def _decompose_batch (entries, decompose):
    r = []
    for idx, e in enumerate (entries):
        try:
            r.append (decompose (e))
        except Parse_Error as err:
            err.index = idx
            raise
    return r
# end def _decompose_batch

def format_fraction_strings (entries):
    """ Align a list of decimal strings like "1", "3.14" or "-42" so
        that they can be printed line by line: the ones, tens, etc.
        digits are in the same column as are the decimal points. All
        results have the same length. Unnecessary zeros are removed.
    >>> r = format_fraction_strings \\
    ...     (['-42', '0.3214', '1000', '-1000.2', '2.00000'])
    >>> for s in r:
    ...     print ('"%s"' % s)
    "  -42     "
    "    0.3214"
    " 1000     "
    "-1000.2   "
    "    2     "
    >>> format_fraction_strings (['7.000000'])
    ['7']
    >>> format_fraction_strings (['1', '22', '-3'])
    [' 1', '22', '-3']
    >>> format_fraction_strings ([])
    []
    >>> format_fraction_strings (['1', '1.2.3'])
    Traceback (most recent call last):
    ...
    fracalign.decompose.Parse_Error: Invalid number at index 1: "1.2.3"
    """
    return align (_decompose_batch (entries, Decomposition.from_string))
# end def format_fraction_strings

def format_fractions (entries, max_precision):
    """ Align a list of numbers, floats are rendered with the given
        precision first. The precision is either a Format_Precision or
        a maximum number of fractional digits. Entries may be
        Fraction_Number objects or plain values.
    >>> format_fractions ([-42.0, 0.3214, 1000.0, -1000.2], 4)
    ['  -42     ', '    0.3214', ' 1000     ', '-1000.2   ']
    >>> format_fractions \\
    ...     ([Fraction_Number.f32 (1.0), Fraction_Number.f64 (1.0)], 4)
    ['1', '1']
    >>> format_fractions ([0.5, 12.0], Format_Precision.Exact (2))
    [' 0.50', '12.00']
    >>> format_fractions ([1.0, float ('inf')], 3)
    Traceback (most recent call last):
    ...
    fracalign.decompose.Parse_Error: Invalid number at index 1: "inf"
    """
    precision = Format_Precision.coerce (max_precision)
    def decompose (e):
        return Fraction_Number (e).decompose (precision)
    return align (_decompose_batch (entries, decompose))
# end def format_fractions

def main (argv = sys.argv [1:], f_err = sys.stderr):
    """ Print numbers given on the command line (or standard input)
        aligned line by line.
    >>> main (['--quote', '-42', '0.3214', '1000', '-1000.2', '2.00000'])
    "  -42     "
    "    0.3214"
    " 1000     "
    "-1000.2   "
    "    2     "
    >>> main (['-p', '2', '--exact', '3.14159', '-1'])
     3.14
    -1.00
    >>> main (['1', '1.2.3'], f_err = sys.stdout)
    Invalid input: Invalid number at index 1: "1.2.3"
    23
    """
    from argparse import ArgumentParser
    cmd = ArgumentParser ()
    cmd.add_argument \
        ( 'number'
        , help    = 'Number to align, if none are given numbers are'
                    ' read from standard input, one per line'
        , nargs   = '*'
        )
    cmd.add_argument \
        ( '--exact'
        , help    = 'Render floats with exactly the given precision,'
                    ' do not remove trailing zeros'
        , action  = 'store_true'
        )
    cmd.add_argument \
        ( '-p', '--precision'
        , help    = 'Parse numbers as floats and render them with at'
                    ' most this number of fractional digits'
        , type    = int
        )
    cmd.add_argument \
        ( '--quote'
        , help    = 'Print each line in double quotes to show padding'
        , action  = 'store_true'
        )
    cmd.add_argument \
        ( '--rstrip'
        , help    = 'Remove trailing padding from each line'
        , action  = 'store_true'
        )
    cmd.add_argument \
        ( '--single-precision'
        , help    = 'Use single precision floats, only with --precision'
        , action  = 'store_true'
        )
    args = cmd.parse_args (argv)
    values = args.number
    if not values:
        values = [l.strip () for l in sys.stdin if l.strip ()]

    try:
        if args.precision is None:
            if args.exact or args.single_precision:
                cmd.error ('--exact and --single-precision need --precision')
            lines = format_fraction_strings (values)
        else:
            if args.precision < 0:
                cmd.error ('Precision must be >= 0')
            kind = 'f32' if args.single_precision else 'f64'
            entries = []
            for idx, n in enumerate (values):
                try:
                    entries.append (Fraction_Number (float (n), kind))
                except ValueError:
                    raise Parse_Error (n, idx)
            precision = Format_Precision (args.precision, args.exact)
            lines = format_fractions (entries, precision)
    except Parse_Error as err:
        print ("Invalid input: %s" % str (err), file = f_err)
        return 23
    for line in lines:
        if args.rstrip:
            line = line.rstrip ()
        if args.quote:
            line = '"%s"' % line
        print (line)
# end def main

if __name__ == '__main__':
    sys.exit (main ()) # pragma: no cover

__all__ = \
    [ 'Alignment_Spec'
    , 'Decomposition'
    , 'Format_Precision'
    , 'Fraction_Number'
    , 'Parse_Error'
    , 'align'
    , 'format_fraction_strings'
    , 'format_fractions'
    ]
