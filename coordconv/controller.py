"""
controller
~~~~~~~~~~

A minimal owner of a list of :class:`CoordinateFormatOption` instances.  The
list is exposed as an :class:`collection.OwnedList`, so anything editing it
goes back through :meth:`Controller.add_option` and
:meth:`Controller.clear_options`.

Also supports the usual "edit, then okay or cancel" workflow: take a
:meth:`Controller.snapshot` before editing, and :meth:`Controller.reset` to
cancel.
"""

import logging as _logging
from .options import CoordinateFormatOption
from .collection import OwnedList
from . import defaults


class Controller():
    """Owns an ordered list of :class:`CoordinateFormatOption` instances.
    Provides the owner side of :class:`collection.OwnedList`: the methods
    :meth:`add_option` and :meth:`clear_options`, and the backing list.

    Register a callback on any change to the list by setting the
    :attr:`callback` attribute; it has signature `callback()`.
    """
    def __init__(self):
        self._logger = _logging.getLogger(__name__)
        self._options = []
        self._callback = None
        self._snapshot = None

    @property
    def callback(self):
        """A callable with signature `callback()` which is called after an
        option is added, or the options cleared."""
        return self._callback

    @callback.setter
    def callback(self, v):
        self._callback = v

    def _changed(self):
        if self.callback is not None:
            self.callback()

    @property
    def options(self):
        """The options, as an :class:`collection.OptionList`."""
        return OwnedList(self, self._options)

    def add_option(self, option):
        self._options.append(option)
        self._logger.debug("Added option '%s'", option.name)
        self._changed()

    def clear_options(self):
        self._logger.debug("Clearing %s options", len(self._options))
        self._options.clear()
        self._changed()

    @property
    def option_names(self):
        return [option.name for option in self._options]

    def find(self, name):
        """The first option with this name, or `None`."""
        for option in self._options:
            if option.name == name:
                return option
        return None

    def load_defaults(self):
        """Replace the current options with the standard set."""
        self.clear_options()
        for option in defaults.default_options(self):
            self.add_option(option)
        self._logger.info("Loaded %s default options", len(self._options))

    def to_dict(self):
        """Convert all options to a dictionary."""
        return {"options" : [option.to_dict() for option in self._options]}

    def from_dict(self, data):
        """Replace the current options with those stored in `data`."""
        self.clear_options()
        try:
            stored = data["options"]
        except KeyError:
            self._logger.warning("No options found in settings")
            return
        for entry in stored:
            self.add_option(CoordinateFormatOption.from_settings(entry, self))

    def snapshot(self):
        """Remember the current options for a later :meth:`reset`."""
        self._snapshot = self.to_dict()

    def reset(self):
        """Restore the options as they were at the last :meth:`snapshot`.
        Options are rebuilt, not restored in place."""
        if self._snapshot is None:
            raise ValueError("No snapshot to reset to")
        self.from_dict(self._snapshot)
