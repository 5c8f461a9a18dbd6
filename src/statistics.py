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
# Mean and standard deviation of map values.
#
from collections import namedtuple
MapStatistics = namedtuple('MapStatistics', ('mean', 'stddev'))

# -----------------------------------------------------------------------------
# Single pass sum and sum of squares in 64-bit precision.  The population
# variance sum_sq/n - mean*mean can come out slightly negative from round-off
# for constant data, so it is clamped at zero.
#
def value_statistics(values):

  from numpy import asarray, float64, dot
  a = asarray(values).ravel()
  n = len(a)
  if n == 0:
    raise ValueError('Cannot compute statistics of an empty array')
  a64 = a.astype(float64, copy = False)
  total = a64.sum()
  sq_total = dot(a64, a64)
  mean = total / n
  variance = sq_total / n - mean * mean
  from math import sqrt
  stddev = sqrt(max(variance, 0.0))
  return MapStatistics(float(mean), stddev)
