#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Enum import Enum


class SlotKind(Enum):
    """
    SlotKind tags the three member variants: field, method and ctor.

    Code that branches over members keys a table by SlotKind and covers
    every value in vals(), rather than testing the slot's class.
    """

    _vals = None

    @staticmethod
    def field():
        return SlotKind.vals()[0]

    @staticmethod
    def method():
        return SlotKind.vals()[1]

    @staticmethod
    def ctor():
        return SlotKind.vals()[2]

    @staticmethod
    def vals():
        if SlotKind._vals is None:
            SlotKind._vals = (
                SlotKind(0, "field"),
                SlotKind(1, "method"),
                SlotKind(2, "ctor"),
            )
        return SlotKind._vals

    @staticmethod
    def from_str(s, checked=True):
        return SlotKind._from_str(s, checked)
