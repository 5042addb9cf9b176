"""
options
~~~~~~~

A "model-like" object which stores the settings needed to format a
coordinate in one notation.

One flat record is used for every notation type.  The :attr:`output_type`
decides which of the other settings actually matter (see
:func:`relevant_fields`); the others are kept, but ignored, so that switching
back to a previous notation type restores the user's earlier choices.

No setter checks its input.  The documented ranges (see
:func:`documented_ranges`) are for whoever performs the conversion to clamp
or reject.
"""

import logging as _logging
from .common import NotationType, MgrsConversionMode, LatLonFormat, UtmConversionMode
from . import registry

_logger = _logging.getLogger(__name__)

FIELDS = ("name", "output_type", "add_spaces", "precision", "decimal_places",
    "mgrs_mode", "lat_lon_format", "utm_mode")

_RELEVANT = {
    NotationType.LatLon : ("name", "lat_lon_format", "decimal_places"),
    NotationType.Gars : ("name",),
    NotationType.GeoRef : ("name", "precision"),
    NotationType.Mgrs : ("name", "mgrs_mode", "precision", "add_spaces"),
    NotationType.Usng : ("name", "precision", "add_spaces"),
    NotationType.Utm : ("name", "utm_mode", "add_spaces"),
    }

_RANGES = {
    NotationType.LatLon : {"decimal_places" : (0, 16)},
    NotationType.GeoRef : {"precision" : (0, 9)},
    NotationType.Mgrs : {"precision" : (0, 8)},
    NotationType.Usng : {"precision" : (0, 8)},
    }


def relevant_fields(notation_type):
    """The names of the fields which affect formatting for this notation
    type.  The :attr:`CoordinateFormatOption.output_type` itself is always
    relevant, and so not listed.

    :return: Tuple, empty if `notation_type` is unknown.
    """
    return _RELEVANT.get(notation_type, ())

def documented_ranges(notation_type):
    """The documented (inclusive) ranges of the numeric fields relevant to
    this notation type.

    :return: Dictionary from field name to pair `(low, high)`.
    """
    return dict(_RANGES.get(notation_type, {}))


def _enum_name(value):
    try:
        return value.name
    except AttributeError:
        return value

def _enum_from(enum_class, value):
    if _is_int(value):
        return enum_class.fromvalue(value)
    return enum_class.fromname(value)

def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)

def _type_name(value):
    name = registry.format_type(value)
    if name == "" and _is_int(value):
        try:
            return registry.format_type(NotationType.fromvalue(value))
        except ValueError:
            return value
    return name


class CoordinateFormatOption():
    """Settings for one coordinate notation format.  Every field is a
    property; setting a field always stores the value and then notifies the
    callbacks registered for that field, even if the value did not change.

    :param owner: Optional object (typically a controller) which owns this
      option.  Only recorded, never used.
    """
    def __init__(self, owner=None):
        self._owner = owner
        self._callbacks = { field : [] for field in FIELDS }
        self._name = ""
        self._output_type = NotationType.Usng
        self._add_spaces = False
        self._precision = 8
        self._decimal_places = 6
        self._mgrs_mode = MgrsConversionMode.Automatic
        self._lat_lon_format = LatLonFormat.DecimalDegrees
        self._utm_mode = UtmConversionMode.LatitudeBandIndicators

    @property
    def owner(self):
        """The owner passed at construction, or `None`."""
        return self._owner

    def add_callback(self, field, callback):
        """Register a callable with signature `callback(option)` to be called
        each time `field` is set.

        :param field: One of :data:`FIELDS`.
        """
        self._callbacks_for(field).append(callback)

    def remove_callback(self, field, callback):
        """Remove a callback added with :meth:`add_callback`.  Raises
        :class:`ValueError` if it was not registered."""
        callbacks = self._callbacks_for(field)
        try:
            callbacks.remove(callback)
        except ValueError:
            raise ValueError("Callback not registered for '{}'".format(field))

    def _callbacks_for(self, field):
        try:
            return self._callbacks[field]
        except KeyError:
            raise ValueError("Unknown field '{}'".format(field))

    def _notify(self, field):
        _logger.debug("Set %s to %r", field, getattr(self, field))
        for callback in list(self._callbacks[field]):
            callback(self)

    @property
    def name(self):
        """The name used to identify this option, usually in the UI."""
        return self._name

    @name.setter
    def name(self, value):
        self._name = value
        self._notify("name")

    @property
    def output_type(self):
        """The output notation.

        :return: :class:`NotationType` enum
        """
        return self._output_type

    @output_type.setter
    def output_type(self, value):
        self._output_type = value
        self._notify("output_type")

    @property
    def add_spaces(self):
        """Should the output use spaces?  Only for MGRS, USNG and UTM."""
        return self._add_spaces

    @add_spaces.setter
    def add_spaces(self, value):
        self._add_spaces = value
        self._notify("add_spaces")

    @property
    def precision(self):
        """Precision of the notation: 0 to 9 for GEOREF, 0 to 8 for MGRS and
        USNG."""
        return self._precision

    @precision.setter
    def precision(self, value):
        self._precision = value
        self._notify("precision")

    @property
    def decimal_places(self):
        """Decimal places for latitude / longitude, 0 to 16."""
        return self._decimal_places

    @decimal_places.setter
    def decimal_places(self, value):
        self._decimal_places = value
        self._notify("decimal_places")

    @property
    def mgrs_mode(self):
        """:class:`MgrsConversionMode` enum.  Only for MGRS."""
        return self._mgrs_mode

    @mgrs_mode.setter
    def mgrs_mode(self, value):
        self._mgrs_mode = value
        self._notify("mgrs_mode")

    @property
    def lat_lon_format(self):
        """:class:`LatLonFormat` enum.  Only for latitude / longitude."""
        return self._lat_lon_format

    @lat_lon_format.setter
    def lat_lon_format(self, value):
        self._lat_lon_format = value
        self._notify("lat_lon_format")

    @property
    def utm_mode(self):
        """:class:`UtmConversionMode` enum.  Only for UTM."""
        return self._utm_mode

    @utm_mode.setter
    def utm_mode(self, value):
        self._utm_mode = value
        self._notify("utm_mode")

    @property
    def relevant_fields(self):
        """The fields which matter for the current :attr:`output_type`."""
        return relevant_fields(self.output_type)

    @property
    def settings_string(self):
        """Human readable description of the relevant settings.  May be
        `None` if there are none beyond the name."""
        parts = ["{}={}".format(field, _enum_name(getattr(self, field)))
            for field in self.relevant_fields if field != "name"]
        if len(parts) == 0:
            return None
        return ", ".join(parts)

    def pprint(self):
        title = "{} [{}]".format(self.name, registry.format_type(self.output_type))
        settings = self.settings_string
        if settings is not None:
            return title + " : " + settings
        return title

    def to_dict(self):
        """Return a dictionary storing the settings.  The output type is
        stored by its canonical name, other enums by member name.  Integers
        which are not enum members are stored as they are."""
        return { "name" : self.name,
            "output_type" : _type_name(self.output_type),
            "add_spaces" : self.add_spaces,
            "precision" : self.precision,
            "decimal_places" : self.decimal_places,
            "mgrs_mode" : _enum_name(self.mgrs_mode),
            "lat_lon_format" : _enum_name(self.lat_lon_format),
            "utm_mode" : _enum_name(self.utm_mode)
            }

    def from_dict(self, data):
        """Restore settings from a dictionary, as made by :meth:`to_dict`.
        Fields are set via the properties, so callbacks are notified.  Missing
        or unrecognised names are logged and leave the field unchanged.  Integers
        which are not enum members are restored as they are, as the setters
        would accept them."""
        for field in ("name", "add_spaces", "precision", "decimal_places"):
            if field in data:
                setattr(self, field, data[field])
            else:
                _logger.warning("No value for '%s'; leaving as %r", field, getattr(self, field))

        if "output_type" in data:
            value = data["output_type"]
            if _is_int(value):
                self._from_dict_enum("output_type", NotationType, value)
            else:
                self.output_type = registry.parse_type(value)
        else:
            _logger.warning("No value for 'output_type'; leaving as %r", self.output_type)

        enums = (("mgrs_mode", MgrsConversionMode), ("lat_lon_format", LatLonFormat),
            ("utm_mode", UtmConversionMode))
        for field, enum_class in enums:
            if field in data:
                self._from_dict_enum(field, enum_class, data[field])
            else:
                _logger.warning("No value for '%s'; leaving as %r", field, getattr(self, field))

    def _from_dict_enum(self, field, enum_class, value):
        try:
            setattr(self, field, _enum_from(enum_class, value))
        except ValueError as ex:
            if _is_int(value):
                _logger.warning("%r is not a valid %s; storing '%s' as is", value, enum_class.__name__, field)
                setattr(self, field, value)
            else:
                _logger.warning("Cannot restore '%s' from %r: %s", field, value, ex)

    @staticmethod
    def from_settings(data, owner=None):
        """Construct a new option from a dictionary made by :meth:`to_dict`."""
        out = CoordinateFormatOption(owner)
        out.from_dict(data)
        return out
