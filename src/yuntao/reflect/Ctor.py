#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Slot import Slot, FConst


class Ctor(Slot):
    """Constructor reflection.

    The implementation is a Python callable taking the declared arguments
    and returning the new instance. Constructors belong to their declaring
    type only and are never inherited.
    """

    def __init__(self, parent=None, name="make", flags=0, params=None, func=None):
        super().__init__(parent, name, flags | FConst.Ctor)
        self._params = tuple(params) if params is not None else ()
        self._func = func
        for p in self._params:
            p._owner = self

    def kind(self):
        from .SlotKind import SlotKind
        return SlotKind.ctor()

    def params(self):
        return self._params

    def param_types(self):
        return [p.type() for p in self._params]

    def returns(self):
        """Constructors return their declaring type."""
        return self._parent

    def func(self):
        return self._func

    def arity(self):
        return len(self._params)

    def signature(self):
        sigs = ",".join(t.signature() for t in self.param_types())
        return f"{self._name}({sigs})"

    def call(self, *args):
        """Create a new instance from the given args."""
        from .Invoker import Invoker
        return Invoker.cur().invoke(None, self, list(args))
