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
# Default settings for density map extraction and display levels.
#
class MapSettings:

  DEFAULTS = {
    'map_radius': 10.0,             # Angstroms, half edge of extracted cube
    'isolevel': 1.5,                # sigma, ordinary maps
    'diff_map_isolevel': 3.0,       # sigma, difference maps
    'progress_interval': 0.2,       # seconds between decode progress messages
  }

  def __init__(self, **overrides):
    self.__dict__['_values'] = dict(self.DEFAULTS)
    self.update(**overrides)

  def __getattr__(self, name):
    try:
      return self.__dict__['_values'][name]
    except KeyError:
      raise AttributeError('No map setting "%s"' % name) from None

  def __setattr__(self, name, value):
    self.update(**{name: value})

  def update(self, **values):
    for k in values.keys():
      if k not in self.DEFAULTS:
        raise ValueError('Unknown map setting "%s"' % k)
    self._values.update(values)

  def reset(self):
    self._values.clear()
    self._values.update(self.DEFAULTS)

settings = MapSettings()
