# === UCSF ChimeraX Copyright ===
# Copyright 2016 Regents of the University of California.
# All rights reserved.  This software provided pursuant to a
# license agreement containing restrictions on its disclosure,
# duplication and use.  For details see:
# http://www.rbvi.ucsf.edu/chimerax/docs/licensing.html
# This notice must be embedded in or attached to all copies,
# including partial copies, of the software or any revisions
# or derivations thereof.
# === UCSF ChimeraX Copyright ===

# -----------------------------------------------------------------------------
# Unit cell of a crystal given by edge lengths a, b, c and angles alpha,
# beta, gamma in degrees.  Converts between fractional coordinates and
# orthogonal xyz coordinates with the a axis along x and the b axis in the
# xy plane.
#
class UnitCell:

    def __init__(self, a, b, c, alpha, beta, gamma):

        self.parameters = tuple(float(p) for p in (a, b, c, alpha, beta, gamma))
        from math import radians
        axes = unit_cell_axes(a, b, c, radians(alpha), radians(beta), radians(gamma))
        from numpy import array, float64
        from numpy.linalg import inv
        self._frac_to_xyz = array(axes, float64)     # Rows are cell axes
        self._xyz_to_frac = inv(self._frac_to_xyz)

    def __repr__(self):
        return 'UnitCell(%s)' % ', '.join('%.6g' % p for p in self.parameters)

    def orthogonalize(self, frac):
        '''
        Fractional coordinates to xyz.  Accepts a single point or an N by 3
        array of points.
        '''
        from numpy import asarray, float64
        return asarray(frac, float64) @ self._frac_to_xyz

    def fractionalize(self, xyz):
        from numpy import asarray, float64
        return asarray(xyz, float64) @ self._xyz_to_frac

    def volume(self):
        from numpy.linalg import det
        return abs(det(self._frac_to_xyz))

# -----------------------------------------------------------------------------
# Angle arguments must be in radians.
#
def unit_cell_axes(a, b, c, alpha, beta, gamma):

    from math import sin, cos, sqrt
    if min(a, b, c) <= 0:
        raise ValueError('Unit cell edge lengths must be positive, got %g, %g, %g' % (a, b, c))
    cg = cos(gamma)
    sg = sin(gamma)
    cb = cos(beta)
    ca = cos(alpha)
    if abs(sg) < 1e-8:
        raise ValueError('Unit cell angle gamma cannot be 0 or 180 degrees')
    c1 = (ca - cb*cg)/sg
    cz2 = 1 - cb*cb - c1*c1
    if cz2 <= 0:
        raise ValueError('Unit cell angles do not form a valid cell')

    axes = ((a, 0, 0),
            (b*cg, b*sg, 0),
            (c*cb, c*c1, c*sqrt(cz2)))

    return axes

# -----------------------------------------------------------------------------
# Unit cell from map file header values, bad values reported as a file error.
#
def header_unit_cell(params, format_name):

    try:
        return UnitCell(*params)
    except ValueError as e:
        from .errors import FileFormatError
        raise FileFormatError('%s map has bad unit cell %s: %s'
                              % (format_name, ', '.join('%.5g' % p for p in params), e))
