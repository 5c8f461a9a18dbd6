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
# A crystallographic electron density map read from a CCP4 or DSN6 file.
# Holds the periodic grid of values, the unit cell, and the mean and rms
# deviation used to express contour levels in sigma units.
#
import logging
_log = logging.getLogger(__name__)

from collections import namedtuple
ExtractedBlock = namedtuple('ExtractedBlock', ('points', 'values', 'size'))
ExtractedBlock.__doc__ = '''
Box of map values for isosurface calculation.

points : N by 3 numpy array of orthogonal xyz positions
values : N density values, third grid index varying fastest
size : 3 integers (nx, ny, nz) with nx*ny*nz = N
'''

class DensityMap:
  '''
  Electron density map.

  Attributes
  ----------
  grid : :class:`.PeriodicGrid` or None
  unit_cell : :class:`.UnitCell` or None
  mean, rms : float
    Map mean and root-mean-square deviation.
  is_diff_map : bool
    Difference maps are contoured at higher default levels.
  block : :class:`ExtractedBlock` or None
    Most recent result of extract_block().
  '''
  def __init__(self, name = '', is_diff_map = False):

    self.name = name
    self.is_diff_map = is_diff_map
    self.unit_cell = None
    self.grid = None
    self.mean = 0.0
    self.rms = 1.0
    self.file_type = ''
    self.block = None

    # Header values recorded for reference only.
    self.mode = None
    self.min = None
    self.max = None
    self.sg_number = None
    self.lskflg = None

  # ---------------------------------------------------------------------------
  #
  def __repr__(self):
    return '<DensityMap %s %s>' % (self.name or '(unnamed)',
                                  self.grid.n_real if self.grid else 'empty')

  # ---------------------------------------------------------------------------
  #
  def from_ccp4(self, data, progress = None):
    from .ccp4 import decode
    self._set_contents(decode(data, self.name, progress), 'ccp4')

  # ---------------------------------------------------------------------------
  #
  def from_dsn6(self, data, progress = None):
    from .dsn6 import decode
    self._set_contents(decode(data, self.name, progress), 'dsn6')

  # ---------------------------------------------------------------------------
  # File type is a format name, suffix or prefix.  If not given the format
  # is guessed from the buffer contents.
  #
  def from_buffer(self, data, file_type = None, progress = None):

    from .fileformats import file_format_by_name, sniff_file_type
    from .errors import UnknownFileType
    if file_type is None:
      file_type = sniff_file_type(data)
      if file_type is None:
        raise UnknownFileType(self.name or 'map buffer')
    fmt = file_format_by_name(file_type)
    self._set_contents(fmt.decode_func(data, self.name, progress), fmt.name)

  # ---------------------------------------------------------------------------
  #
  def _set_contents(self, d, file_type):

    self.unit_cell = d.unit_cell
    self.grid = d.grid
    self.mean = d.mean
    self.rms = d.rms
    self.file_type = file_type
    self.block = None
    for attr in ('mode', 'min', 'max', 'sg_number', 'lskflg'):
      setattr(self, attr, getattr(d, attr, None))
    _log.debug('Loaded %s', self.summary())

  # ---------------------------------------------------------------------------
  #
  def abs_level(self, sigma):
    '''Density value corresponding to sigma times rms above the mean.'''
    return sigma * self.rms + self.mean

  # ---------------------------------------------------------------------------
  #
  @property
  def default_isolevel(self):
    from .defaultsettings import settings
    return settings.diff_map_isolevel if self.is_diff_map else settings.isolevel

  # ---------------------------------------------------------------------------
  #
  def extract_block(self, radius = None, center = None):
    '''
    Return an ExtractedBlock of grid points and values covering the cube of
    half edge radius centered at the xyz center point.  Grid points outside
    the stored box wrap around periodically.  With no center the stored box
    is returned, grid indices origin to origin + n_real - 1 on each axis,
    rather than indices 0 to n_real - 1.  The two agree for CCP4 maps and
    differ by the header origin for DSN6 maps.  With a center and no radius the default map radius
    setting is used.  The result is also saved as the block attribute.
    '''
    grid, unit_cell = self.grid, self.unit_cell
    if grid is None or unit_cell is None:
      from .errors import MapNotLoaded
      raise MapNotLoaded('Map %s has no grid or unit cell, decode a map file first'
                         % (self.name or ''))

    if center is None:
      grid_min = grid.origin
      grid_max = tuple(o + n - 1 for o, n in zip(grid.origin, grid.n_real))
    else:
      if radius is None:
        from .defaultsettings import settings
        radius = settings.map_radius
      if radius < 0:
        raise ValueError('Map block radius must not be negative, got %g' % radius)
      xyz_min = [c - radius for c in center]
      xyz_max = [c + radius for c in center]
      grid_min = grid.frac_to_grid(unit_cell.fractionalize(xyz_min))
      grid_max = grid.frac_to_grid(unit_cell.fractionalize(xyz_max))

    size = tuple(int(b - a + 1) for a, b in zip(grid_min, grid_max))

    from numpy import arange, meshgrid, stack
    ranges = [arange(a, b + 1) for a, b in zip(grid_min, grid_max)]
    i, j, k = (a.ravel() for a in meshgrid(*ranges, indexing = 'ij'))
    frac = stack(grid.grid_to_frac(i, j, k), axis = 1)
    points = unit_cell.orthogonalize(frac)
    values = grid.get_values(i, j, k)

    self.block = ExtractedBlock(points, values, size)
    return self.block

  # ---------------------------------------------------------------------------
  #
  def summary(self):

    lines = ['map %s (%s)' % (self.name or '(unnamed)', self.file_type or 'no file')]
    if self.unit_cell is not None:
      lines.append('unit cell: ' + ', '.join('%.5g' % p for p in self.unit_cell.parameters)
                   + ' (volume %.5g)' % self.unit_cell.volume())
    if self.grid is not None:
      g = self.grid
      lines.append('grid: %d x %d x %d stored, %d x %d x %d in cell'
                   % (g.n_real + g.n_grid))
    lines.append('mean %.4g, rms %.4g' % (self.mean, self.rms))
    return '\n'.join(lines)
