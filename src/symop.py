# vim: set expandtab shiftwidth=4 softtabstop=4:

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


# -----------------------------------------------------------------------------
# Parse crystallographic symmetry operators written as text, for example
# "X,Y,Z" or "-Y,X-Y,Z+1/3", into 3 by 4 matrices.  Row r of the matrix
# gives new coordinate r = m[r,0]*x + m[r,1]*y + m[r,2]*z + m[r,3].
#
import re
_axis_term = re.compile(r'^[+-]?([xyz])$')
_fraction_term = re.compile(r'^[+-]?(\d+)/(\d+)$')
_sign_boundary = re.compile(r'(?=[+-])')
_whitespace = re.compile(r'[\s\x00]+')

# -----------------------------------------------------------------------------
#
def parse_symop(symop):

  ops = _whitespace.sub('', symop.lower()).split(',')
  from .errors import MalformedOperator
  if len(ops) != 3:
    raise MalformedOperator(symop)

  from numpy import zeros, float64
  mat = zeros((3,4), float64)
  for r, op in enumerate(ops):
    terms = _sign_boundary.split(op)
    if len(terms) > 1 and terms[0] == '':
      terms = terms[1:]
    for term in terms:
      sign = -1 if term.startswith('-') else 1
      m = _axis_term.match(term)
      if m:
        mat[r, 'xyz'.index(m.group(1))] += sign
        continue
      m = _fraction_term.match(term)
      if m is None or int(m.group(2)) == 0:
        raise MalformedOperator(symop, term)
      mat[r,3] += sign * int(m.group(1)) / int(m.group(2))

  return mat

# -----------------------------------------------------------------------------
#
def is_identity_operator(symop):
  return _whitespace.sub('', symop.lower()) == 'x,y,z'

# -----------------------------------------------------------------------------
# Symmetry is applied to grid indices rather than coordinates.  Translations
# are converted to grid units and rounded, which is exact only when they land
# on grid points, as for the usual crystallographic operators.
#
def grid_operator(mat, n_grid):

  from numpy import array, floor, int64
  gmat = array(mat, dtype = float)
  for r in range(3):
    gmat[r,3] = floor(gmat[r,3] * n_grid[r] + 0.5)
  return gmat.astype(int64)

# -----------------------------------------------------------------------------
# Apply integer operator to grid indices i,j,k (scalars or numpy arrays).
#
def transform_indices(gmat, i, j, k):

  return tuple(gmat[r,0]*i + gmat[r,1]*j + gmat[r,2]*k + gmat[r,3]
               for r in range(3))
