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
# Read DSN6 (BRIX, O program) crystallographic density maps.
#
# http://www.uoxray.uoregon.edu/tnt/manual/node104.html
#
# A 512 byte header of 16-bit integers is followed by density values stored
# as single bytes in 8 by 8 by 8 bricks.  Word 18 of the header is always
# 100 and tells the byte order.  Files written on big-endian machines have
# every pair of bytes swapped, including the density bytes.
#
import logging
_log = logging.getLogger(__name__)

HEADER_BYTES = 512
BRICK_EDGE = 8
BRICK_BYTES = BRICK_EDGE ** 3

# -----------------------------------------------------------------------------
#
class DSN6_Data:

  def __init__(self, data, name = '', progress = None):

    self.name = name
    from numpy import frombuffer, uint8
    u8 = frombuffer(memoryview(data).cast('B'), uint8)
    if len(u8) < HEADER_BYTES:
      from ..errors import SizeMismatch
      raise SizeMismatch(HEADER_BYTES, len(u8), 'DSN6 file')

    self.swapped = False
    if header_words(u8)[18] != 100:
      u8 = swap_byte_pairs(u8)
      self.swapped = True
    hw = header_words(u8)
    if hw[18] != 100:
      from ..errors import EndianDetectionFailure
      raise EndianDetectionFailure(int(hw[18]))

    self.read_header(hw)

    nb = self.brick_counts()
    expected = HEADER_BYTES + BRICK_BYTES * nb[0] * nb[1] * nb[2]
    if len(u8) < expected:
      from ..errors import SizeMismatch
      raise SizeMismatch(expected, len(u8), 'DSN6 file')
    self.bricks = u8[HEADER_BYTES:expected].reshape((nb[2], nb[1], nb[0],
                                                     BRICK_EDGE, BRICK_EDGE, BRICK_EDGE))

    from ..periodicgrid import PeriodicGrid
    self.grid = PeriodicGrid(self.n_real, self.n_grid, self.origin)
    if progress is None:
      from ..progress import ProgressReporter
      progress = ProgressReporter('Reading %s' % (name or 'DSN6 map'),
                                  self.n_real, 1, log = _log)
    self.fill_grid(progress)

    # Header has no usable statistics.
    from ..statistics import value_statistics
    s = value_statistics(self.grid.values)
    self.mean, self.rms = s.mean, s.stddev

  # ---------------------------------------------------------------------------
  #
  def read_header(self, hw):

    from ..errors import FileFormatError
    self.origin = tuple(int(o) for o in hw[0:3])
    self.n_real = tuple(int(n) for n in hw[3:6])
    self.n_grid = tuple(int(n) for n in hw[6:9])
    if min(self.n_real) <= 0 or min(self.n_grid) <= 0:
      raise FileFormatError('DSN6 map has invalid size %s, cell grid %s'
                            % (self.n_real, self.n_grid))
    cell_scale = int(hw[17])
    if cell_scale == 0:
      raise FileFormatError('DSN6 map has zero unit cell scale factor')
    cell_mult = 1.0 / cell_scale
    self.cell = tuple(cell_mult * int(p) for p in hw[9:15])
    from ..unit_cell import header_unit_cell
    self.unit_cell = header_unit_cell(self.cell, 'DSN6')

    # Byte value b is density (b - plus) / prod.
    self.prod = int(hw[15]) / 100
    self.plus = int(hw[16])
    if self.prod == 0:
      raise FileFormatError('DSN6 map has zero density scale factor')

    _log.debug('DSN6 header: origin %s, size %s, grid %s, cell %s,'
               ' prod %g, plus %d, byte swapped %s', self.origin, self.n_real,
               self.n_grid, self.cell, self.prod, self.plus, self.swapped)

  # ---------------------------------------------------------------------------
  #
  def brick_counts(self):
    return tuple((n + BRICK_EDGE - 1) // BRICK_EDGE for n in self.n_real)

  # ---------------------------------------------------------------------------
  # Bricks go x fastest, then y, then z, and the values inside a brick are
  # ordered the same way.  Bricks on the far edges are partly outside the
  # map and the values outside are ignored.
  #
  def fill_grid(self, progress):

    from numpy import arange, meshgrid, float64
    nx, ny, nz = self.n_real
    ox, oy, oz = self.origin
    nbx, nby, nbz = self.brick_counts()
    e = BRICK_EDGE
    ys, xs = meshgrid(arange(ny), arange(nx), indexing = 'ij')
    grid = self.grid
    for zz in range(nbz):
      z0 = e * zz
      z1 = min(z0 + e, nz)
      layer = self.bricks[zz].transpose((2,0,3,1,4)).reshape((e, nby*e, nbx*e))
      b = layer[:z1-z0, :ny, :nx]
      density = (b.astype(float64) - self.plus) / self.prod
      for z in range(z0, z1):
        grid.set_values(ox + xs, oy + ys, oz + z, density[z-z0])
      progress.fraction((zz + 1) / nbz)
    progress.done()

# -----------------------------------------------------------------------------
#
def header_words(u8):
  from numpy import frombuffer, int16, dtype
  return frombuffer(u8[:HEADER_BYTES].tobytes(), dtype(int16).newbyteorder('<'))

# -----------------------------------------------------------------------------
# New array with the two bytes of every 16-bit word exchanged.  The input is
# not modified.  An odd trailing byte is kept as is.
#
def swap_byte_pairs(u8):

  s = u8.copy()
  n = len(u8) - len(u8) % 2
  s[0:n:2] = u8[1:n:2]
  s[1:n:2] = u8[0:n:2]
  return s
