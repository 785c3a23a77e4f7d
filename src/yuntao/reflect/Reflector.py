#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Log import Log
from .SlotCache import SlotCache
from .SlotKind import SlotKind
from .Type import Type
from .TypeUtil import TypeUtil


class Reflector:
    """Member directory over registered types.

    Fields and methods are collected from the type and every ancestor in
    inheritance() order, most-derived first, keeping all same-named slots;
    overloads and shadowing are settled at lookup time by taking the first
    match. Constructors are collected from the type itself only.

    Lookups return None on a miss. Pass checked=True to raise
    UnknownSlotErr instead.
    """

    _cur = None
    _log = Log.get("reflect")

    def __init__(self, cache=None):
        self._cache = cache if cache is not None else SlotCache()

    @staticmethod
    def cur():
        """Process-wide default directory with its own cache"""
        if Reflector._cur is None:
            Reflector._cur = Reflector()
        return Reflector._cur

    def cache(self):
        return self._cache

    #########################################################################
    # Enumeration
    #########################################################################

    def slots(self, t, kind):
        """All slots of kind visible on t, cached per type and kind"""
        t = Reflector._to_type(t)
        if t is None:
            return ()
        return self._cache.get_or_compute(kind, t, lambda key: self._collect(key, kind))

    def _collect(self, t, kind):
        collector = {
            SlotKind.field(): Reflector._inherited,
            SlotKind.method(): Reflector._inherited,
            SlotKind.ctor(): Reflector._declared,
        }[kind]
        slots = collector(t, kind)
        Reflector._log.debug(f"Cached {len(slots)} {kind} slots for {t.signature()}")
        return slots

    @staticmethod
    def _inherited(t, kind):
        return [s for a in t.inheritance() for s in a.declared_slots(kind)]

    @staticmethod
    def _declared(t, kind):
        return list(t.declared_slots(kind))

    def fields(self, t):
        return self.slots(t, SlotKind.field())

    def methods(self, t):
        return self.slots(t, SlotKind.method())

    def ctors(self, t):
        return self.slots(t, SlotKind.ctor())

    def public_fields(self, t):
        return tuple(f for f in self.fields(t) if f.is_public())

    def public_methods(self, t, filter=None, exclude=None):
        """Public methods of t.

        Args:
            filter: Optional predicate a method must satisfy
            exclude: Optional method names or Methods to leave out
        """
        excluded = set(exclude or ())
        result = []
        for m in self.methods(t):
            if not m.is_public():
                continue
            if m in excluded or m.name() in excluded:
                continue
            if filter is not None and not filter(m):
                continue
            result.append(m)
        return tuple(result)

    def public_ctors(self, t):
        return tuple(c for c in self.ctors(t) if c.is_public())

    def method_names(self, t):
        return {m.name() for m in self.methods(t)}

    def public_method_names(self, t):
        return {m.name() for m in self.public_methods(t)}

    def field_map(self, t):
        """Field by name; a field shadows any same-named field of an ancestor"""
        result = {}
        for f in self.fields(t):
            result.setdefault(f.name(), f)
        return result

    #########################################################################
    # Lookup
    #########################################################################

    def field(self, t, name, checked=False):
        """First field named name, most-derived first"""
        for f in self.fields(t):
            if f.name() == name:
                return f
        return Reflector._miss(checked, t, name)

    def has_field(self, t, name):
        return self.field(t, name) is not None

    def method(self, t, name, param_types=None, checked=False):
        """First method named name whose declared params accept param_types"""
        param_types = Reflector._to_types(param_types)
        for m in self.methods(t):
            if m.name() == name and TypeUtil.is_all_assignable_from(m.param_types(), param_types):
                return m
        return Reflector._miss(checked, t, name)

    def method_by_name(self, t, name, checked=False):
        """First method named name, ignoring parameters"""
        for m in self.methods(t):
            if m.name() == name:
                return m
        return Reflector._miss(checked, t, name)

    def public_method(self, t, name, param_types=None, checked=False):
        param_types = Reflector._to_types(param_types)
        for m in self.public_methods(t):
            if m.name() == name and TypeUtil.is_all_assignable_from(m.param_types(), param_types):
                return m
        return Reflector._miss(checked, t, name)

    def ctor(self, t, param_types=None, checked=False):
        """First constructor whose declared params accept param_types"""
        param_types = Reflector._to_types(param_types)
        for c in self.ctors(t):
            if TypeUtil.is_all_assignable_from(c.param_types(), param_types):
                return c
        return Reflector._miss(checked, t, "make")

    def method_of_obj(self, obj, name, args=None, checked=False):
        """Method of obj's runtime type matching the runtime types of args.

        A Type passed as obj looks the method up on that type itself.
        """
        t = obj if isinstance(obj, Type) else Type.of(obj)
        if t is None or not name:
            return Reflector._miss(checked, t, name)
        return self.method(t, name, TypeUtil.types_of(args), checked)

    #########################################################################
    # Field values
    #########################################################################

    def field_val(self, obj, name):
        """Read a field by name; a Type passed as obj reads a static field"""
        if obj is None or not name:
            return None
        f = self.field(obj if isinstance(obj, Type) else Type.of(obj), name)
        if f is None:
            return None
        return f.get(None if isinstance(obj, Type) else obj)

    def fields_vals(self, obj):
        if obj is None:
            return None
        target = None if isinstance(obj, Type) else obj
        t = obj if isinstance(obj, Type) else Type.of(obj)
        return [f.get(target) for f in self.fields(t) if target is not None or f.is_static()]

    def set_field_val(self, obj, name, val):
        """Write a field by name, replacing None with the field type's default.

        Returns:
            The Field written, or None when obj has no such field
        """
        from .BasicType import BasicType
        target = None if isinstance(obj, Type) else obj
        f = self.field(obj if isinstance(obj, Type) else Type.of(obj), name)
        if f is None:
            return None
        if val is None:
            val = BasicType.default_val(f.type())
        f.set_(target, val)
        return f

    #########################################################################
    # Utils
    #########################################################################

    @staticmethod
    def _to_type(t):
        if isinstance(t, str):
            t = Type.find(t, False)
        return None if t is None else t.raw()

    @staticmethod
    def _to_types(types):
        if types is None:
            return []
        return [Type.find(t, False) if isinstance(t, str) else t for t in types]

    @staticmethod
    def _miss(checked, t, name):
        if checked:
            from .Err import UnknownSlotErr
            raise UnknownSlotErr.make(f"{t}.{name}")
        return None
