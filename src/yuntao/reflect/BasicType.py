#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class BasicType:
    """Primitive and boxed types and the fixed table bridging them.

    The table has exactly eight entries; void is a primitive with no
    boxed counterpart, so wrap/unwrap leave it unchanged.
    """

    # (primitive, boxed) name pairs
    PAIRS = (
        ("boolean", "Boolean"),
        ("byte", "Byte"),
        ("char", "Character"),
        ("double", "Double"),
        ("float", "Float"),
        ("int", "Integer"),
        ("long", "Long"),
        ("short", "Short"),
    )

    PRIMITIVES = tuple(p for p, _ in PAIRS) + ("void",)

    NUMERIC = ("byte", "double", "float", "int", "long", "short")

    # Default value of each primitive; reference types default to None
    _DEFAULTS = {
        "sys::boolean": False,
        "sys::byte": 0,
        "sys::char": "\0",
        "sys::double": 0.0,
        "sys::float": 0.0,
        "sys::int": 0,
        "sys::long": 0,
        "sys::short": 0,
    }

    _wrapper_primitive = None
    _primitive_wrapper = None

    @staticmethod
    def _tables():
        if BasicType._primitive_wrapper is None:
            from .Type import Type
            w2p = {}
            p2w = {}
            for p, b in BasicType.PAIRS:
                prim = Type.find(f"sys::{p}")
                box = Type.find(f"sys::{b}")
                w2p[box] = prim
                p2w[prim] = box
            BasicType._wrapper_primitive = w2p
            BasicType._primitive_wrapper = p2w
        return BasicType._primitive_wrapper, BasicType._wrapper_primitive

    @staticmethod
    def primitive_wrapper_map():
        """Primitive to boxed, e.g. int -> Integer"""
        return dict(BasicType._tables()[0])

    @staticmethod
    def wrapper_primitive_map():
        """Boxed to primitive, e.g. Integer -> int"""
        return dict(BasicType._tables()[1])

    @staticmethod
    def wrap(t):
        """Primitive to boxed; any other type is returned unchanged"""
        if t is None or not t.is_primitive():
            return t
        return BasicType._tables()[0].get(t, t)

    @staticmethod
    def unwrap(t):
        """Boxed to primitive; any other type is returned unchanged"""
        if t is None or t.is_primitive():
            return t
        return BasicType._tables()[1].get(t, t)

    @staticmethod
    def default_val(t):
        """Default value for a declared type.

        Numeric primitives give 0 or 0.0, boolean gives False, char gives
        the zero character; every other type gives None.
        """
        if t is None:
            return None
        return BasicType._DEFAULTS.get(t.signature())

    @staticmethod
    def default_vals(types):
        return [BasicType.default_val(t) for t in types]
