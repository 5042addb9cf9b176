"""
defaults
~~~~~~~~

The standard set of formats offered to the user when nothing else has been
configured: three latitude / longitude styles, then one of each grid based
notation.
"""

from .common import NotationType, LatLonFormat
from .options import CoordinateFormatOption

_DEFAULTS = [
    ("DD", NotationType.LatLon, {"lat_lon_format" : LatLonFormat.DecimalDegrees}),
    ("DDM", NotationType.LatLon, {"lat_lon_format" : LatLonFormat.DegreesDecimalMinutes}),
    ("DMS", NotationType.LatLon, {"lat_lon_format" : LatLonFormat.DegreesMinutesSeconds}),
    ("MGRS", NotationType.Mgrs, {"add_spaces" : True}),
    ("USNG", NotationType.Usng, {"add_spaces" : True}),
    ("UTM", NotationType.Utm, {"add_spaces" : True}),
    ("GARS", NotationType.Gars, {}),
    ("GEOREF", NotationType.GeoRef, {}),
    ]

DEFAULT_NAMES = [name for name, _, _ in _DEFAULTS]


def default_options(owner=None):
    """Return a new list of the default options.

    :param owner: Passed to each :class:`CoordinateFormatOption`.
    """
    out = []
    for name, notation, settings in _DEFAULTS:
        option = CoordinateFormatOption(owner)
        option.name = name
        option.output_type = notation
        for field, value in settings.items():
            setattr(option, field, value)
        out.append(option)
    return out
