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
# The PeriodicGrid class holds the density values of a crystallographic map.
# A crystal map is periodic, the unit cell repeats along each axis, so any
# integer grid index i,j,k is valid and wraps around to a stored value.
#
# Two sizes are kept.  The n_real size is the box of values actually stored
# and is what indices wrap against.  The n_grid size is the number of grid
# subdivisions of the whole unit cell and defines fractional coordinates.
# They differ when a file stores only part of the unit cell.
#
# Values are kept in a flat array with the third index varying fastest,
# linear index = (i*n_real[1] + j)*n_real[2] + k.
#
import logging
_log = logging.getLogger(__name__)

from numpy import float32
class PeriodicGrid:
  '''
  Periodic 3-dimensional array of density values.

  Attributes
  ----------
  n_real : 3 integers
    Size of the stored box of values along the three grid axes.
  n_grid : 3 integers
    Number of grid subdivisions of the full unit cell along each axis.
  origin : 3 integers
    Unit cell grid index of the first stored value.  Default (0,0,0).
  values : 1-dimensional numpy array
    Flat buffer of n_real[0]*n_real[1]*n_real[2] values, float32 by default.
  '''
  def __init__(self, n_real, n_grid = None, origin = (0,0,0), value_type = float32):

    self.n_real = tuple(int(n) for n in n_real)
    self.origin = tuple(int(o) for o in origin)
    self.n_grid = self.n_real if n_grid is None else tuple(int(n) for n in n_grid)
    if len(self.n_real) != 3 or len(self.n_grid) != 3:
      raise ValueError('Grid sizes must have 3 components, got %s and %s'
                       % (self.n_real, self.n_grid))
    if min(self.n_real) <= 0 or min(self.n_grid) <= 0:
      raise ValueError('Grid sizes must be positive, got %s and %s'
                       % (self.n_real, self.n_grid))
    if [r for r,g in zip(self.n_real, self.n_grid) if r > g]:
      _log.debug('Stored box %s is larger than unit cell grid %s',
                 self.n_real, self.n_grid)

    from numpy import zeros
    nx, ny, nz = self.n_real
    self.values = zeros((nx*ny*nz,), value_type)

  # ---------------------------------------------------------------------------
  #
  def __repr__(self):
    return 'PeriodicGrid(n_real = %s, n_grid = %s)' % (self.n_real, self.n_grid)

  # ---------------------------------------------------------------------------
  #
  def voxel_count(self):
    '''Number of stored values.'''
    return len(self.values)

  # ---------------------------------------------------------------------------
  #
  def index(self, i, j, k):
    '''
    Linear offset into values for grid index i,j,k.  Each index is wrapped
    into the stored box with a true modulo so negative indices are allowed.
    '''
    nx, ny, nz = self.n_real
    idx = ((int(i) % nx) * ny + int(j) % ny) * nz + int(k) % nz
    if idx >= len(self.values):
      from .errors import IndexOverflow
      raise IndexOverflow('Grid index (%d,%d,%d) gives offset %d beyond %d values'
                          % (i, j, k, idx, len(self.values)))
    return idx

  # ---------------------------------------------------------------------------
  #
  def indices(self, i, j, k):
    '''
    Same as index() for arrays of grid indices.  Arrays must have matching
    shapes or be broadcastable.
    '''
    from numpy import asarray, int64, mod
    nx, ny, nz = self.n_real
    ii = mod(asarray(i, int64), nx)
    jj = mod(asarray(j, int64), ny)
    kk = mod(asarray(k, int64), nz)
    idx = (ii * ny + jj) * nz + kk
    if idx.size > 0 and idx.max() >= len(self.values):
      from .errors import IndexOverflow
      raise IndexOverflow('Grid offset %d beyond %d values'
                          % (idx.max(), len(self.values)))
    return idx

  # ---------------------------------------------------------------------------
  #
  def set(self, i, j, k, value):
    self.values[self.index(i, j, k)] = value

  # ---------------------------------------------------------------------------
  #
  def get(self, i, j, k):
    return self.values[self.index(i, j, k)]

  # ---------------------------------------------------------------------------
  # If the same grid point appears more than once the last value wins,
  # matching what a sequence of set() calls would leave.
  #
  def set_values(self, i, j, k, values):

    from numpy import asarray, unique, broadcast_to
    idx = self.indices(i, j, k).ravel()
    v = broadcast_to(asarray(values, self.values.dtype).ravel(), idx.shape)
    ridx = idx[::-1]
    uidx, last = unique(ridx, return_index = True)
    self.values[uidx] = v[::-1][last]

  # ---------------------------------------------------------------------------
  #
  def get_values(self, i, j, k):
    return self.values[self.indices(i, j, k)]

  # ---------------------------------------------------------------------------
  # Fractional coordinates are relative to the full unit cell grid, not the
  # stored box.  Works for scalar or numpy array indices.
  #
  def grid_to_frac(self, i, j, k):
    nx, ny, nz = self.n_grid
    return (i / nx, j / ny, k / nz)

  # ---------------------------------------------------------------------------
  # Grid index containing the fractional position, rounded toward minus
  # infinity so that negative fractions map to negative indices.
  #
  def frac_to_grid(self, frac):
    from math import floor
    return tuple(int(floor(f * n)) for f, n in zip(frac, self.n_grid))

  # ---------------------------------------------------------------------------
  #
  def matrix(self):
    '''
    Read-only 3-dimensional view of the stored values with shape n_real,
    element i,j,k accessed as m[i,j,k].
    '''
    m = self.values.reshape(self.n_real)
    m.flags.writeable = False
    return m
