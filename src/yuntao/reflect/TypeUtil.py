#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .BasicType import BasicType


class TypeUtil:
    """Assignability checks between type descriptors.

    Every method is pure and never raises; anything that cannot be
    decided answers False.
    """

    @staticmethod
    def is_primitive_wrapper(t):
        return t is not None and t in BasicType._tables()[1]

    @staticmethod
    def is_basic_type(t):
        """Primitive or boxed"""
        return t is not None and (t.is_primitive() or TypeUtil.is_primitive_wrapper(t))

    @staticmethod
    def is_assignable(target, source):
        """Check if a value of type source may be supplied where target is expected.

        1. Same raw type, or source extends/implements target
        2. Primitive target: source is exactly its boxed counterpart.
           Boxed target: source is exactly its primitive counterpart.
        3. Otherwise False
        """
        if target is None or source is None:
            return False
        target = target.raw()
        source = source.raw()
        if target is None or source is None:
            return False

        if source.is_(target):
            return True

        p2w, w2p = BasicType._tables()
        if target.is_primitive():
            return target == w2p.get(source)
        if target.is_boxed():
            return target == p2w.get(source)
        return False

    @staticmethod
    def is_all_assignable_from(targets, sources):
        """Positional is_assignable over two type lists of equal length.

        Two empty (or two None) lists are assignable; a None list on one
        side only, a None element or a length mismatch is not.
        """
        if not targets and not sources:
            return True
        if targets is None or sources is None:
            return False
        if len(targets) != len(sources):
            return False
        for target, source in zip(targets, sources):
            if not TypeUtil.is_assignable(target, source):
                return False
        return True

    @staticmethod
    def types_of(values):
        """Runtime type of each value; None maps to sys::Object"""
        from .Type import Type
        obj = Type.find("sys::Object")
        return [obj if v is None else Type.of(v) for v in (values or [])]
