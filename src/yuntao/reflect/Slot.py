#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


# Flag constants
class FConst:
    """Type and slot flag constants."""
    Public = 0x00000001
    Private = 0x00000002
    Protected = 0x00000004
    Internal = 0x00000008
    Mixin = 0x00000040
    Final = 0x00000080
    Ctor = 0x00000100
    Abstract = 0x00000400
    Static = 0x00000800
    Const = 0x00002000
    Synthetic = 0x00100000


class Slot:
    """Base class for Field, Method and Ctor reflection.

    A slot is immutable once its declaring type is registered; its identity
    is the declaring type plus its signature.
    """

    def __init__(self, parent=None, name="", flags=0):
        self._parent = parent
        self._name = name
        self._flags = flags

    def kind(self):
        """Return the SlotKind tag for this slot."""
        raise NotImplementedError(type(self).__name__)

    def parent(self):
        """Get declaring type."""
        return self._parent

    def name(self):
        """Get slot name."""
        return self._name

    def flags_(self):
        """Get raw flags value."""
        return self._flags

    def qname(self):
        """Get qualified name (Type.slotName)."""
        if self._parent:
            return f"{self._parent.qname()}.{self._name}"
        return self._name

    def signature(self):
        """Get the signature that, with the parent, identifies this slot."""
        return self._name

    def scope(self):
        """Type variables visible to this slot's type signatures."""
        if self._parent is None:
            return {}
        return self._parent._scope()

    def is_field(self):
        from .SlotKind import SlotKind
        return self.kind() == SlotKind.field()

    def is_method(self):
        from .SlotKind import SlotKind
        return self.kind() == SlotKind.method()

    def is_ctor(self):
        from .SlotKind import SlotKind
        return self.kind() == SlotKind.ctor()

    def is_public(self):
        """Return true if public access."""
        # Default to public when no access flag was given
        access = FConst.Public | FConst.Private | FConst.Protected | FConst.Internal
        return (self._flags & FConst.Public) != 0 or (self._flags & access) == 0

    def is_protected(self):
        return (self._flags & FConst.Protected) != 0

    def is_private(self):
        return (self._flags & FConst.Private) != 0

    def is_internal(self):
        return (self._flags & FConst.Internal) != 0

    def is_static(self):
        return (self._flags & FConst.Static) != 0

    def is_abstract(self):
        return (self._flags & FConst.Abstract) != 0

    def is_const(self):
        return (self._flags & FConst.Const) != 0

    def is_synthetic(self):
        return (self._flags & FConst.Synthetic) != 0

    def to_str(self):
        if self._parent:
            return f"{self._parent.qname()}.{self.signature()}"
        return self.signature()

    def __repr__(self):
        return self.to_str()

    def __eq__(self, other):
        if not isinstance(other, Slot):
            return False
        return self.kind() == other.kind() and self.to_str() == other.to_str()

    def __hash__(self):
        return hash(self.to_str())

    @staticmethod
    def find(qname, checked=True):
        """Find slot by qualified name like 'acme::User.speak'.

        Fields take precedence over methods of the same name; overloads
        resolve to the first method in ancestor order.
        """
        dot_idx = qname.rfind('.')
        if dot_idx < 0:
            if checked:
                from .Err import UnknownSlotErr
                raise UnknownSlotErr.make(f"Invalid slot qname: {qname}")
            return None

        from .Type import Type
        from .Reflector import Reflector
        t = Type.find(qname[:dot_idx], checked)
        if t is None:
            return None
        name = qname[dot_idx + 1:]
        r = Reflector.cur()
        slot = r.field(t, name) or r.method_by_name(t, name)
        if slot is None and checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(qname)
        return slot
