#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Slot import Slot


class Field(Slot):
    """Field reflection - a named, typed state slot of a registered type.

    Instance field values live as attributes on the target object; static
    field values live on the declaring type.
    """

    def __init__(self, parent=None, name="", flags=0, type_=None):
        super().__init__(parent, name, flags)
        self._type = type_

    def kind(self):
        from .SlotKind import SlotKind
        return SlotKind.field()

    def type(self):
        """Get field type - lazily resolves from string signature if needed."""
        if isinstance(self._type, str):
            from .Type import Type
            self._type = Type._parse(self._type, self.scope())
        return self._type

    def type_(self):
        """Alias for type()"""
        return self.type()

    def get(self, obj=None):
        """Get field value from obj (ignored for static fields)."""
        if self.is_static():
            return self._parent._statics.get(self._name)
        if obj is None:
            from .Err import ArgErr
            raise ArgErr.make(f"Instance field {self.qname()} requires target object")
        return getattr(obj, self._name, None)

    def set_(self, obj, val):
        """Set field value on obj (ignored for static fields)."""
        if self.is_static():
            self._parent._statics[self._name] = val
            return
        if obj is None:
            from .Err import ArgErr
            raise ArgErr.make(f"Instance field {self.qname()} requires target object")
        setattr(obj, self._name, val)
