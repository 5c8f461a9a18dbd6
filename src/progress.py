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
# Report progress decoding a map file through a logging.Logger.
#
class ProgressReporter:

  def __init__(self, operation,
               ijk_size = None,
               element_size = None,
               report_interval = None,           # seconds
               log = None):

    if log is None:
      import logging
      log = logging.getLogger(__name__)
    self._log = log

    if report_interval is None:
      from .defaultsettings import settings
      report_interval = settings.progress_interval

    self.operation = operation
    self.report_interval = report_interval
    from time import time
    self.next_time = time() + report_interval
    self.status_shown = False

    self.format = None
    self.array_size(ijk_size, element_size)

  # ---------------------------------------------------------------------------
  #
  def message(self, text):
    self._log.info(text)

  # ---------------------------------------------------------------------------
  #
  def show_status(self, text):

    self.status_shown = True
    self.message(text)

  # ---------------------------------------------------------------------------
  #
  def fraction(self, f):

    if self.time_for_status():
      self.show_status(self.format % (100*f))

  # ---------------------------------------------------------------------------
  #
  def time_for_status(self):

    import time
    t = time.time()
    if t < self.next_time:
      return False

    self.next_time = t + self.report_interval
    return True

  # ---------------------------------------------------------------------------
  #
  def array_size(self, ijk_size, element_size):

    if ijk_size is None:
      self.format = self.message_format(None)
    else:
      isz, jsz, ksz = ijk_size
      bytes = None if element_size is None else float(isz) * jsz * ksz * element_size
      self.format = self.message_format(bytes)

  # ---------------------------------------------------------------------------
  #
  def message_format(self, bytes):

    if bytes is None:
      asize = ''
    elif bytes >= 2**30:
      asize = '%.1f Gb' % (float(bytes)/2**30)
    elif bytes >= 10 * 2**20:
      asize = '%.0f Mb' % (float(bytes)/2**20)
    elif bytes >= 2**20:
      asize = '%.1f Mb' % (float(bytes)/2**20)
    else:
      asize = '%.0f Kb' % (float(bytes)/2**10)
    format = '%s %s ' % (self.operation, asize) + '%.0f%%'
    return format

  # ---------------------------------------------------------------------------
  #
  def done(self):

    if self.status_shown:
      self.show_status('Done %s' % self.operation)
