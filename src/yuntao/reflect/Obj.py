#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for Python objects that participate in reflection.

    Subclasses are bound to a registered type with Type.make(..., cls=...),
    which lets Type.of() report their descriptor and lets the Invoker
    check them against a method's declaring type.
    """

    def to_str(self):
        t = self.typeof()
        return f"{t.qname()}@{id(self):x}"

    def typeof(self):
        """Return the registered Type for this object's class"""
        # Import here to avoid circular dependency
        from .Type import Type
        return Type.of_class(type(self))

    def trap(self, name, args=None):
        """Dynamic invocation by member name.

        Resolves the method against the runtime types of args, then
        dispatches through the Invoker so argument padding applies.
        """
        from .Invoker import Invoker
        return Invoker.cur().invoke_by_name(self, name, args)

    def __repr__(self):
        return self.to_str()
