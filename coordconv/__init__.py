"""
coordconv
~~~~~~~~~

Formatting options for converting between geographic coordinate notations
(latitude/longitude, GARS, GEOREF, MGRS, USNG and UTM).

The actual conversion is done elsewhere; here we model the options a user
selects, the names of the notation types, and the list of options a
controller holds.
"""

__version__ = "0.1.0"

from .common import NotationType, MgrsConversionMode, LatLonFormat, UtmConversionMode, GarsConversionMode
from .registry import parse_type, format_type, all_type_names
from .options import CoordinateFormatOption
from .collection import OptionList, ListModel, OwnedList
from .controller import Controller
