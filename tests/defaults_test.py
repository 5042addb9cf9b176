import pytest

import coordconv.defaults as defaults
from coordconv.common import NotationType, LatLonFormat

def test_default_names():
    assert defaults.DEFAULT_NAMES == ["DD", "DDM", "DMS", "MGRS", "USNG",
        "UTM", "GARS", "GEOREF"]

def test_default_options():
    opts = defaults.default_options()
    assert [o.name for o in opts] == defaults.DEFAULT_NAMES
    assert [o.output_type for o in opts] == [NotationType.LatLon,
        NotationType.LatLon, NotationType.LatLon, NotationType.Mgrs,
        NotationType.Usng, NotationType.Utm, NotationType.Gars, NotationType.GeoRef]
    assert [o.lat_lon_format for o in opts[:3]] == [LatLonFormat.DecimalDegrees,
        LatLonFormat.DegreesDecimalMinutes, LatLonFormat.DegreesMinutesSeconds]
    assert [o.add_spaces for o in opts] == [False]*3 + [True]*3 + [False]*2
    assert all(o.precision == 8 for o in opts)
    assert all(o.decimal_places == 6 for o in opts)

def test_default_options_are_new():
    first = defaults.default_options()
    second = defaults.default_options()
    assert all(x is not y for x, y in zip(first, second))

def test_owner():
    owner = object()
    assert all(o.owner is owner for o in defaults.default_options(owner))
