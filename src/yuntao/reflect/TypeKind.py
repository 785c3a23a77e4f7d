#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Enum import Enum


class TypeKind(Enum):
    """
    TypeKind classifies a concrete type: primitive, boxed, reference or array.
    """

    _vals = None

    @staticmethod
    def primitive():
        return TypeKind.vals()[0]

    @staticmethod
    def boxed():
        return TypeKind.vals()[1]

    @staticmethod
    def reference():
        return TypeKind.vals()[2]

    @staticmethod
    def array():
        return TypeKind.vals()[3]

    @staticmethod
    def vals():
        """Get all kinds in ordinal order"""
        if TypeKind._vals is None:
            TypeKind._vals = (
                TypeKind(0, "primitive"),
                TypeKind(1, "boxed"),
                TypeKind(2, "reference"),
                TypeKind(3, "array"),
            )
        return TypeKind._vals

    @staticmethod
    def from_str(s, checked=True):
        return TypeKind._from_str(s, checked)
