import pytest

import coordconv.common as common

def test_notation_types():
    assert [t.name for t in common.NotationType] == ["Gars", "GeoRef",
        "LatLon", "Mgrs", "Usng", "Utm"]
    assert common.NotationType.Gars == 0
    assert common.NotationType.Utm == 5

def test_mgrs_modes():
    assert [m.name for m in common.MgrsConversionMode] == ["Automatic",
        "New180InZone01", "New180InZone60", "Old180InZone01", "Old180InZone60"]

def test_other_modes():
    assert len(common.LatLonFormat) == 3
    assert len(common.UtmConversionMode) == 2
    assert len(common.GarsConversionMode) == 2

def test_fromvalue():
    assert common.LatLonFormat.fromvalue(2) is common.LatLonFormat.DegreesMinutesSeconds
    with pytest.raises(ValueError):
        common.LatLonFormat.fromvalue(3)

def test_fromname():
    assert common.UtmConversionMode.fromname("NorthSouthIndicators") is common.UtmConversionMode.NorthSouthIndicators
    with pytest.raises(ValueError):
        common.UtmConversionMode.fromname("northSouthIndicators")
    with pytest.raises(ValueError):
        common.UtmConversionMode.fromname(None)

def test_describe():
    assert common.describe(common.NotationType.Mgrs) == "Military Grid Reference System (MGRS)"
    assert common.describe(common.UtmConversionMode.NorthSouthIndicators) == "Hemisphere letter (N or S)"

def test_describe_does_not_confuse_equal_values():
    assert common.NotationType.Gars == common.LatLonFormat.DecimalDegrees
    assert common.describe(common.NotationType.Gars) != common.describe(common.LatLonFormat.DecimalDegrees)

def test_describe_everything():
    for enum_class in [common.NotationType, common.MgrsConversionMode,
            common.LatLonFormat, common.UtmConversionMode, common.GarsConversionMode]:
        for member in enum_class:
            assert len(common.describe(member)) > 0

def test_describe_unknown():
    with pytest.raises(KeyError):
        common.describe(5)
