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
# Read CCP4 (MRC style) crystallographic density maps, mode 2 only.
#
# http://www.ccp4.ac.uk/html/maplib.html#description
#
# The 1024 byte header is 256 32-bit words read both as integers and floats.
# It may be followed by NSYMBT bytes of symmetry operators as 80 character
# text records, then the 32-bit float density values.  The map has 3 axes
# referred to as columns (fastest changing), rows and sections (c-r-s), and
# the MAPC, MAPR, MAPS header words tell which of x, y, z each one is.
#
import logging
_log = logging.getLogger(__name__)

HEADER_BYTES = 1024
SYMOP_RECORD_BYTES = 80

# -----------------------------------------------------------------------------
#
class CCP4_Data:

  def __init__(self, data, name = '', progress = None):

    self.name = name
    buf = memoryview(data).cast('B')
    if len(buf) < HEADER_BYTES:
      from ..errors import SizeMismatch
      raise SizeMismatch(HEADER_BYTES, len(buf), 'CCP4 file')

    from numpy import frombuffer, int32, float32, dtype
    iview = frombuffer(buf, dtype(int32).newbyteorder('<'), count = 256)
    fview = frombuffer(buf, dtype(float32).newbyteorder('<'), count = 256)

    self.read_header(iview, fview)
    from ..unit_cell import header_unit_cell
    self.unit_cell = header_unit_cell(self.cell, 'CCP4')
    self.check_size(len(buf))

    nc, nr, ns = self.n_crs
    self.density = frombuffer(buf, dtype(float32).newbyteorder('<'),
                              count = nc*nr*ns, offset = HEADER_BYTES + self.nsymbt)
    self.symops = self.symmetry_operators(buf)

    from ..periodicgrid import PeriodicGrid
    self.grid = PeriodicGrid(self.n_grid, self.n_grid)
    if progress is None:
      from ..progress import ProgressReporter
      progress = ProgressReporter('Reading %s' % (name or 'CCP4 map'),
                                  self.n_crs, 4, log = _log)
    self.fill_grid(progress)
    self.set_statistics()

  # ---------------------------------------------------------------------------
  #
  def read_header(self, iview, fview):

    from ..errors import UnsupportedMode, FileFormatError
    self.n_crs = tuple(int(n) for n in iview[0:3])
    self.mode = int(iview[3])
    if self.mode != 2:
      raise UnsupportedMode(self.mode)
    self.start = tuple(int(s) for s in iview[4:7])
    self.n_grid = tuple(int(n) for n in iview[7:10])
    if min(self.n_crs) <= 0 or min(self.n_grid) <= 0:
      raise FileFormatError('CCP4 map has invalid grid size %s, cell grid %s'
                            % (self.n_crs, self.n_grid))
    self.cell = tuple(float(p) for p in fview[10:16])

    # MAPC, MAPR, MAPS - axis corresp to cols, rows, sections (1,2,3 for X,Y,Z)
    map_crs = [int(m) for m in iview[16:19]]
    if sorted(map_crs) != [1,2,3]:
      raise FileFormatError('CCP4 map axis order MAPC, MAPR, MAPS = %d,%d,%d'
                            ' is not a permutation of 1,2,3' % tuple(map_crs))
    self.map_crs = tuple(map_crs)
    self.axis_map = tuple(map_crs.index(a) for a in (1,2,3))

    self.min = float(fview[19])
    self.max = float(fview[20])
    self.mean = float(fview[21])
    self.sg_number = int(iview[22])
    self.nsymbt = int(iview[23])         # size of extended header in bytes
    self.lskflg = int(iview[24])
    self.rms = float(fview[54])

    _log.debug('CCP4 header: crs %s, start %s, grid %s, cell %s, axes %s,'
               ' space group %d, nsymbt %d', self.n_crs, self.start, self.n_grid,
               self.cell, self.map_crs, self.sg_number, self.nsymbt)

  # ---------------------------------------------------------------------------
  #
  def check_size(self, file_size):

    nc, nr, ns = self.n_crs
    expected = HEADER_BYTES + self.nsymbt + 4 * nc * nr * ns
    if expected != file_size:
      from ..errors import SizeMismatch
      raise SizeMismatch(expected, file_size, 'CCP4 file')
    if self.nsymbt % 4 != 0:
      from ..errors import AlignmentError
      raise AlignmentError(self.nsymbt)

  # ---------------------------------------------------------------------------
  # Symmetry operator text records of the extended header, identity skipped.
  #
  def symmetry_operators(self, buf):

    from ..symop import parse_symop, is_identity_operator, grid_operator
    ops = []
    for i in range(0, self.nsymbt - SYMOP_RECORD_BYTES + 1, SYMOP_RECORD_BYTES):
      b = HEADER_BYTES + i
      symop = bytes(buf[b:b+SYMOP_RECORD_BYTES]).decode('latin-1')
      if is_identity_operator(symop):
        continue
      _log.debug('CCP4 symmetry operator %s', symop.strip())
      ops.append(grid_operator(parse_symop(symop), self.n_grid))
    return ops

  # ---------------------------------------------------------------------------
  # Place values in the grid section by section.  Each symmetry operator
  # re-reads the same density values and places them at symmetry related
  # grid points.
  #
  def fill_grid(self, progress):

    from numpy import arange, meshgrid, full_like
    nc, nr, ns = self.n_crs
    c0, r0, s0 = self.start
    rows, cols = meshgrid(arange(r0, r0+nr), arange(c0, c0+nc), indexing = 'ij')
    ax, ay, az = self.axis_map
    plane_size = nc * nr
    grid = self.grid
    from ..symop import transform_indices
    passes = [None] + self.symops
    total = len(passes) * ns
    for p, gmat in enumerate(passes):
      for si in range(ns):
        it = (cols, rows, full_like(cols, s0 + si))
        values = self.density[si*plane_size:(si+1)*plane_size]
        i, j, k = it[ax], it[ay], it[az]
        if gmat is not None:
          i, j, k = transform_indices(gmat, i, j, k)
        grid.set_values(i, j, k, values)
        progress.fraction((p*ns + si + 1) / total)
    progress.done()

  # ---------------------------------------------------------------------------
  # Header mean and rms are used unless the rms is unusable.
  #
  def set_statistics(self):

    from math import isfinite
    if isfinite(self.rms) and self.rms > 0 and isfinite(self.mean):
      return
    from ..statistics import value_statistics
    s = value_statistics(self.grid.values)
    _log.warning('CCP4 map %s header rms %g is not usable, computed mean %.4g rms %.4g',
                 self.name, self.rms, s.mean, s.stddev)
    self.mean, self.rms = s.mean, s.stddev
