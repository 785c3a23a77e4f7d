#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .SlotKind import SlotKind


class SlotCache:
    """Memoization tables of ancestor-ordered slots, one table per SlotKind.

    Entries are immutable tuples keyed by concrete type. They are published
    once and never evicted or mutated; there is no capacity bound since the
    set of registered types is finite. Reads take no lock. Callers racing
    on the same miss may each compute the entry; the last one published
    wins and all of them are equal.
    """

    def __init__(self):
        self._tables = {k: {} for k in SlotKind.vals()}

    def get(self, kind, t):
        """Get the cached slots of kind for t, or None on a miss"""
        return self._tables[kind].get(t)

    def put(self, kind, t, slots):
        """Publish slots for t and return the published tuple"""
        slots = tuple(slots)
        self._tables[kind][t] = slots
        return slots

    def get_or_compute(self, kind, t, compute):
        """Get cached slots, computing and publishing them on a miss.

        Args:
            kind: SlotKind table to use
            t: Concrete type key
            compute: Function of t returning the slots to publish
        """
        slots = self._tables[kind].get(t)
        if slots is None:
            slots = self.put(kind, t, compute(t))
        return slots

    def contains(self, kind, t):
        return t in self._tables[kind]

    def size(self, kind=None):
        """Number of cached types for kind, or across all kinds"""
        if kind is not None:
            return len(self._tables[kind])
        return sum(len(table) for table in self._tables.values())

    def clear(self):
        """Drop every entry; swaps in fresh tables so readers never see a partial clear"""
        self._tables = {k: {} for k in SlotKind.vals()}
