# vim: set expandtab ts=4 sw=4:

# === UCSF ChimeraX Copyright ===
# Copyright 2022 Regents of the University of California. All rights reserved.
# This software is provided pursuant to the ChimeraX license agreement, which
# covers academic and commercial uses. For more information, see
# <http://www.rbvi.ucsf.edu/chimerax/docs/licensing.html>
#
# This file is part of the ChimeraX library. You can also redistribute and/or
# modify it under the GNU Lesser General Public License version 2.1 as
# published by the Free Software Foundation. For more details, see
# <https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html>
#
# This file is distributed WITHOUT ANY WARRANTY; without even the implied
# warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. This notice
# must be embedded in or attached to all copies, including partial copies, of
# the software or any revisions or derivations thereof.
# === UCSF ChimeraX Copyright ===


"""
errors: define density map errors
=================================

Every problem found while decoding a map file derives from
:class:`FileFormatError`.  A :class:`DensityMap` whose decode raised one of
these is in an unspecified state and should be discarded.
"""

class NotABug(Exception):
    """Base class for errors that shouldn't produce tracebacks/bug reports"""
    pass

class UserError(NotABug):
    """User provided wrong input, or took a wrong action"""
    pass

class FileFormatError(UserError):
    """Map file contents could not be decoded"""
    pass

class UnsupportedMode(FileFormatError):
    """CCP4 map mode other than 2 (32-bit float)"""

    def __init__(self, mode):
        self.mode = mode
        FileFormatError.__init__(self,
            'Only Mode 2 (32-bit float) of CCP4 map is supported, got mode %d.' % mode)

class SizeMismatch(FileFormatError):
    """Buffer length differs from the length the header declares"""

    def __init__(self, expected, actual, what = 'map file'):
        self.expected = expected
        self.actual = actual
        FileFormatError.__init__(self,
            '%s too short or too long: header implies %d bytes, got %d'
            % (what, expected, actual))

class AlignmentError(FileFormatError):
    """CCP4 extended header size not a multiple of 4 bytes"""

    def __init__(self, nsymbt):
        self.nsymbt = nsymbt
        FileFormatError.__init__(self,
            'CCP4 map with NSYMBT not divisible by 4 is not supported (NSYMBT = %d).'
            % nsymbt)

class EndianDetectionFailure(FileFormatError):
    """DSN6 header sentinel is not 100 in either byte order"""

    def __init__(self, value):
        self.value = value
        FileFormatError.__init__(self,
            'DSN6 endian swap failed, header word 18 is %d, expected 100' % value)

class MalformedOperator(FileFormatError):
    """Symmetry operator text is not an affine x,y,z expression"""

    def __init__(self, operator, term = None):
        self.operator = operator
        self.term = term
        if term is None:
            msg = 'Unexpected symop: %s' % operator
        else:
            msg = 'What is %s in %s' % (term, operator)
        FileFormatError.__init__(self, msg)

class UnknownFileType(UserError):
    """Map file format could not be determined"""

    def __init__(self, path):
        self.path = path
        UserError.__init__(self, 'Unknown map file type for %s' % path)

class MapNotLoaded(UserError):
    """Operation needs a decoded grid and unit cell"""
    pass

class IndexOverflow(IndexError):
    """Computed grid offset lies outside the allocated buffer"""
    pass
