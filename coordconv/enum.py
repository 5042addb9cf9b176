"""
enum
~~~~

Some simple utilities on top of the standard library `enum` package.
"""

import enum as _enum

class IntEnum(_enum.IntEnum):
    """As :class:`enum.IntEnum` but with extra functionality."""
    @classmethod
    def fromvalue(cls, value):
        """Find the (first) enum type with this value."""
        for x in cls:
            if x.value == value:
                return x
        raise ValueError("{} is not a valid {}".format(value, cls.__name__))

    @classmethod
    def fromname(cls, name):
        """Find the enum type with this member name.  Exact match only."""
        try:
            return cls[name]
        except (KeyError, TypeError):
            raise ValueError("'{}' is not a member of {}".format(name, cls.__name__))
