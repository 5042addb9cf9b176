"""
collection
~~~~~~~~~~

An ordered list of :class:`CoordinateFormatOption` instances, as seen by
whatever displays or edits it.

The list supports just four operations: :meth:`OptionList.append`,
:meth:`OptionList.at`, :meth:`OptionList.count` and
:meth:`OptionList.clear`.  Order is insertion order, and is the order the
options are shown to the user.

There are two implementations:
  - :class:`ListModel` which stores the options itself, and calls an
    optional callback on each change.
  - :class:`OwnedList` which is a view onto a list held by some "owner"
    (typically a controller).  Changes are passed to the owner, which is
    then responsible for telling anyone interested.
"""

import logging as _logging

_logger = _logging.getLogger(__name__)


class OptionList():
    """(Abstract) base class defining the operations on a list of options."""
    def append(self, option):
        """Add the option to the end of the list."""
        raise NotImplementedError()

    def at(self, index):
        """The option at position `index` (counting from 0) or `None` if
        there is no such option.  Negative indices are out of range; they do
        not count from the end."""
        raise NotImplementedError()

    def count(self):
        """The number of options in the list."""
        raise NotImplementedError()

    def clear(self):
        """Remove all options.  The options themselves are not changed."""
        raise NotImplementedError()

    def __len__(self):
        return self.count()

    def __iter__(self):
        for index in range(self.count()):
            yield self.at(index)


def _lookup(data, index):
    if index < 0 or index >= len(data):
        return None
    return data[index]


class ListModel(OptionList):
    """Stores the options in a list it owns.  Register a callback on any
    change by setting the :attr:`callback` attribute.

    :param options: Optional iterable of options to start with.  Does not
      call the callback.
    """
    def __init__(self, options=None):
        self._options = [] if options is None else list(options)
        self._callback = None

    @property
    def callback(self):
        """A callable with signature `callback()` which is called after the
        list changes.  Interrogate the list to see the change."""
        return self._callback

    @callback.setter
    def callback(self, v):
        self._callback = v

    def _changed(self):
        if self.callback is not None:
            self.callback()

    def append(self, option):
        self._options.append(option)
        _logger.debug("Appended option %r; now have %s", option, len(self._options))
        self._changed()

    def at(self, index):
        return _lookup(self._options, index)

    def count(self):
        return len(self._options)

    def clear(self):
        self._options.clear()
        _logger.debug("Cleared options")
        self._changed()


class OwnedList(OptionList):
    """A view onto the options held by an owner.  Structural changes are
    handed to the owner, which must provide:
      - `add_option(option)` to append an option
      - `clear_options()` to remove all options

    Lookup and counting read the backing list directly.

    :param owner: The owning object.
    :param data: The owner's list of options.  Not copied, so it should be
      the same list the owner mutates.
    """
    def __init__(self, owner, data):
        self._owner = owner
        self._data = data

    @property
    def owner(self):
        return self._owner

    def append(self, option):
        self._owner.add_option(option)

    def at(self, index):
        return _lookup(self._data, index)

    def count(self):
        return len(self._data)

    def clear(self):
        self._owner.clear_options()
