import pytest

import coordconv.registry as registry
import logging
import io
from coordconv.common import NotationType

NAMES = ["Gars", "GeoRef", "LatLon", "Mgrs", "Usng", "Utm"]

def test_all_type_names():
    assert registry.all_type_names() == NAMES
    assert len(registry.all_type_names()) == 6

def test_all_type_names_is_a_copy():
    names = registry.all_type_names()
    names.append("Spam")
    del names[0]
    assert registry.all_type_names() == NAMES

def test_format_type():
    assert registry.format_type(NotationType.Gars) == "Gars"
    assert registry.format_type(NotationType.GeoRef) == "GeoRef"
    assert registry.format_type(NotationType.LatLon) == "LatLon"
    assert registry.format_type(NotationType.Mgrs) == "Mgrs"
    assert registry.format_type(NotationType.Usng) == "Usng"
    assert registry.format_type(NotationType.Utm) == "Utm"

@pytest.mark.parametrize("name", NAMES)
def test_round_trip(name):
    assert registry.format_type(registry.parse_type(name)) == name

def test_parse_type():
    assert registry.parse_type("Mgrs") is NotationType.Mgrs
    assert registry.parse_type("GeoRef") is NotationType.GeoRef

@pytest.mark.parametrize("text", ["", "mgrs", "MGRS", "Foo", " Utm", "Utm ", None, 3])
def test_parse_unknown_is_latlon(text):
    assert registry.parse_type(text) is NotationType.LatLon

@pytest.mark.parametrize("value", [None, 17, -1, "Gars", [1], 3])
def test_format_unknown_is_empty(value):
    assert registry.format_type(value) == ""

def test_names_follow_declaration_order():
    assert [registry.format_type(t) for t in NotationType] == NAMES

@pytest.fixture
def log_stream():
    logger = logging.getLogger("coordconv")
    stream = io.StringIO()
    ch = logging.StreamHandler(stream)
    old_level = logger.level
    logger.addHandler(ch)
    logger.setLevel(logging.DEBUG)
    yield stream
    logger.removeHandler(ch)
    logger.setLevel(old_level)

def test_parse_fallback_is_logged(log_stream):
    registry.parse_type("Spam")
    assert "Unknown notation type name 'Spam'; using 'LatLon'" in log_stream.getvalue()

def test_format_fallback_is_logged(log_stream):
    registry.format_type(17)
    assert "Cannot name notation type 17" in log_stream.getvalue()
