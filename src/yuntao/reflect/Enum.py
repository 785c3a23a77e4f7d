#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Enum:
    """
    Base class for the closed enumerations of the type model.
    """

    def __init__(self, ordinal=0, name=""):
        self._ordinal = ordinal
        self._name = name

    def ordinal(self):
        """Return ordinal value"""
        return self._ordinal

    def name(self):
        """Return enum name"""
        return self._name

    def to_str(self):
        return self._name

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"{type(self).__name__}.{self._name}"

    def __lt__(self, other):
        return self._ordinal < other._ordinal

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash((type(self).__name__, self._ordinal))

    @classmethod
    def _from_str(cls, s, checked):
        for v in cls.vals():
            if v._name == s:
                return v
        if checked:
            from .Err import ParseErr
            raise ParseErr.make_str(cls.__name__, s)
        return None
