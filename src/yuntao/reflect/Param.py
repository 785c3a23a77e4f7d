#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Param:
    """Method or constructor parameter metadata.

    The parameter type may be given as a signature string; it is parsed
    on first access in the scope of the owning slot, so a parameter can
    name the type variables of its declaring type or method.
    """

    def __init__(self, name, param_type):
        self._name = name
        self._type = param_type
        self._owner = None

    @staticmethod
    def coerce(p, i):
        """Normalize a Param, a (name, type) pair or a bare type into a Param"""
        if isinstance(p, Param):
            return p
        if isinstance(p, tuple):
            return Param(p[0], p[1])
        return Param(f"p{i}", p)

    def name(self):
        return self._name

    def type(self):
        """Get parameter type - lazily resolves from string signature if needed."""
        if isinstance(self._type, str):
            from .Type import Type
            scope = self._owner.scope() if self._owner is not None else {}
            self._type = Type._parse(self._type, scope)
        return self._type

    def type_(self):
        """Alias for type()"""
        return self.type()

    def to_str(self):
        return f"{self.type().signature()} {self._name}"

    def __repr__(self):
        return f"Param({self._name}, {self._type})"
