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
# Python readers for crystallographic density map file formats.
#

from .periodicgrid import PeriodicGrid
from .densitymap import DensityMap, ExtractedBlock
from .unit_cell import UnitCell
from .statistics import value_statistics, MapStatistics
from .symop import parse_symop, is_identity_operator, grid_operator
from .fileformats import file_formats, MapFileFormat, FileFormatError, UnknownFileType
from .fileformats import open_file, decode_buffer, sniff_file_type
from .errors import UnsupportedMode, SizeMismatch, AlignmentError
from .errors import EndianDetectionFailure, MalformedOperator, IndexOverflow
from .errors import MapNotLoaded, UserError
from .progress import ProgressReporter
from .defaultsettings import settings, MapSettings
