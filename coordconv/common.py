"""
common
~~~~~~

The enumerations shared by the whole package: the notation types we know
about, and the "conversion modes" which refine some of them.

Each member has a human readable description, available from
:func:`describe`.
"""

from .enum import IntEnum


class NotationType(IntEnum):
    """The coordinate notations which can be converted between."""
    Gars = 0
    GeoRef = 1
    LatLon = 2
    Mgrs = 3
    Usng = 4
    Utm = 5


class MgrsConversionMode(IntEnum):
    """Lettering scheme, and the zone used for points at exactly 180 degrees
    longitude, when converting MGRS."""
    Automatic = 0
    New180InZone01 = 1
    New180InZone60 = 2
    Old180InZone01 = 3
    Old180InZone60 = 4


class LatLonFormat(IntEnum):
    """How latitude / longitude is written as a string."""
    DecimalDegrees = 0
    DegreesDecimalMinutes = 1
    DegreesMinutesSeconds = 2


class UtmConversionMode(IntEnum):
    """What the letter after the UTM zone number means."""
    LatitudeBandIndicators = 0
    NorthSouthIndicators = 1


class GarsConversionMode(IntEnum):
    """Which point of a GARS cell represents the cell."""
    LowerLeft = 0
    Center = 1


_translation = {
    NotationType : {
        NotationType.Gars : "Global Area Reference System (GARS)",
        NotationType.GeoRef : "World Geographic Reference System (GEOREF)",
        NotationType.LatLon : "Latitude-longitude in degrees",
        NotationType.Mgrs : "Military Grid Reference System (MGRS)",
        NotationType.Usng : "United States National Grid (USNG)",
        NotationType.Utm : "Universal Transverse Mercator (UTM)",
        },
    MgrsConversionMode : {
        MgrsConversionMode.Automatic : "Lettering scheme chosen from the datum of the spatial reference; 180 degrees in zone 60",
        MgrsConversionMode.New180InZone01 : "New (AA) lettering scheme; 180 degrees in zone 01",
        MgrsConversionMode.New180InZone60 : "New (AA) lettering scheme; 180 degrees in zone 60",
        MgrsConversionMode.Old180InZone01 : "Old (AL) lettering scheme; 180 degrees in zone 01",
        MgrsConversionMode.Old180InZone60 : "Old (AL) lettering scheme; 180 degrees in zone 60",
        },
    LatLonFormat : {
        LatLonFormat.DecimalDegrees : "Decimal degrees",
        LatLonFormat.DegreesDecimalMinutes : "Degrees and decimal minutes",
        LatLonFormat.DegreesMinutesSeconds : "Degrees, minutes and decimal seconds",
        },
    UtmConversionMode : {
        UtmConversionMode.LatitudeBandIndicators : "Latitude band letter (C to X, omitting I and O)",
        UtmConversionMode.NorthSouthIndicators : "Hemisphere letter (N or S)",
        },
    GarsConversionMode : {
        GarsConversionMode.LowerLeft : "South-west corner of the cell",
        GarsConversionMode.Center : "Centre of the cell",
        },
}

def describe(member):
    """Human readable description of an enum member from this module.

    :raises KeyError: if `member` is not one of our enum members.
    """
    return _translation[type(member)][member]
