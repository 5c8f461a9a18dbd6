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
# Density map file formats.  The set of formats is closed, CCP4 and DSN6,
# and each has a reader subpackage with a decode(data, name, progress)
# function.
#
class MapFileFormat:
  def __init__(self, description, name, prefixes, suffixes):
    self.description = description
    self.name = name
    self.prefixes = prefixes
    self.suffixes = suffixes

  @property
  def decode_func(self):
    module_name = self.name
    module = __import__(module_name, globals(), level = 1)
    return module.decode

# -----------------------------------------------------------------------------
# File description, file reader module name, file prefixes, and file suffixes.
#
file_formats = [
  MapFileFormat('CCP4 density map', 'ccp4', ['ccp4'], ['ccp4', 'map', 'mrc']),
  MapFileFormat('DSN6 density map', 'dsn6', ['dsn6', 'brix'], ['omap', 'dsn6', 'brix']),
  ]

from .errors import FileFormatError, UnknownFileType

# -----------------------------------------------------------------------------
#
def file_format_by_name(name):
  for ff in file_formats:
    if ff.name == name or name in ff.suffixes or name in ff.prefixes:
      return ff
  raise UnknownFileType(name)

# -----------------------------------------------------------------------------
#
def file_type_from_suffix(path):

  for ff in file_formats:
    for suffix in ff.suffixes:
      if has_suffix(path, suffix):
        return ff.name
  return None

# -----------------------------------------------------------------------------
# Path given as "mydata:dsn6" names the format explicitly.
#
def file_type_from_colon_specifier(path):

  try:
    colon_position = path.rindex(':')
  except ValueError:
    return None, path

  first_part = path[:colon_position]
  last_part = path[colon_position+1:]

  module_names = [ff.name for ff in file_formats]
  if last_part in module_names:
    return last_part, first_part

  return None, path

# -----------------------------------------------------------------------------
#
def has_suffix(path, suffix):

  parts = path.split('.')
  if len(parts) >= 2:
    return parts[-1].lower() == suffix
  return False

# -----------------------------------------------------------------------------
# Guess the format from the first bytes.  CCP4 files normally have "MAP "
# at byte 208.  Older CCP4 files without the stamp are recognized by mode 2
# with positive sizes and an axis order that is a permutation of 1,2,3.
# DSN6 header word 18 is 100 in one of the two byte orders and the sizes and
# scale factors must be nonzero.  The CCP4 test comes first since bytes
# 36-37 of a CCP4 header are part of the cell grid size and can equal 100.
#
def sniff_file_type(data):

  b = bytes(memoryview(data).cast('B')[:1024])
  if len(b) >= 1024 and b[208:212] == b'MAP ':
    return 'ccp4'
  if _ccp4_header_valid(b):
    return 'ccp4'
  if _dsn6_header_valid(b):
    return 'dsn6'
  return None

# -----------------------------------------------------------------------------
#
def _ccp4_header_valid(b):

  if len(b) < 1024:
    return False
  from numpy import frombuffer
  w = frombuffer(b, '<i4', count = 25)
  return (w[3] == 2 and w[0:3].min() > 0 and w[7:10].min() > 0
          and sorted(w[16:19]) == [1, 2, 3])

# -----------------------------------------------------------------------------
#
def _dsn6_header_valid(b):

  if len(b) < 512:
    return False
  from numpy import frombuffer
  for order in ('<i2', '>i2'):
    h = frombuffer(b, order, count = 256)
    if h[18] == 100 and h[3:9].min() > 0 and h[15] != 0 and h[17] != 0:
      return True
  return False

# -----------------------------------------------------------------------------
#
def decode_buffer(data, file_type = None, name = '', is_diff_map = False):

  from .densitymap import DensityMap
  dmap = DensityMap(name, is_diff_map = is_diff_map)
  dmap.from_buffer(data, file_type)
  return dmap

# -----------------------------------------------------------------------------
# Read a whole map file and decode it.  The format comes from the file_type
# argument, a ":format" ending of the path, the file suffix, or the file
# contents, in that order.
#
def open_file(path, file_type = None, is_diff_map = False):

  if file_type is None:
    file_type, path = file_type_from_colon_specifier(path)
    if file_type is None:
      file_type = file_type_from_suffix(path)

  with open(path, 'rb') as f:
    data = f.read()

  from os.path import basename
  return decode_buffer(data, file_type, basename(path), is_diff_map)
