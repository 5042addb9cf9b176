"""
registry
~~~~~~~~

Conversion between :class:`NotationType` values and their canonical string
names.  The names are relied upon outside this package (e.g. for lists shown
to the user, or stored settings) and so must never change.

Both directions are total: an unknown name becomes
:attr:`NotationType.LatLon`, and an unknown type becomes the empty string.
"""

import logging as _logging
from .common import NotationType

_logger = _logging.getLogger(__name__)

_NAMES = (
    (NotationType.Gars, "Gars"),
    (NotationType.GeoRef, "GeoRef"),
    (NotationType.LatLon, "LatLon"),
    (NotationType.Mgrs, "Mgrs"),
    (NotationType.Usng, "Usng"),
    (NotationType.Utm, "Utm"),
    )

_BY_NAME = { name : notation for notation, name in _NAMES }

DEFAULT_TYPE = NotationType.LatLon


def parse_type(text):
    """Convert a canonical name to a :class:`NotationType`.  Matching is
    exact (case sensitive).  Anything which is not one of the names from
    :func:`all_type_names` gives :attr:`NotationType.LatLon`.
    """
    if isinstance(text, str) and text in _BY_NAME:
        return _BY_NAME[text]
    _logger.debug("Unknown notation type name %r; using '%s'", text, DEFAULT_TYPE.name)
    return DEFAULT_TYPE

def format_type(notation):
    """Convert a :class:`NotationType` to its canonical name, or return the
    empty string if `notation` is not a member of the enumeration.
    """
    if isinstance(notation, NotationType):
        for known, name in _NAMES:
            if known is notation:
                return name
    _logger.debug("Cannot name notation type %r", notation)
    return ""

def all_type_names():
    """List of the canonical names, in declaration order.  This order is
    used when presenting the types to the user."""
    return [name for _, name in _NAMES]
