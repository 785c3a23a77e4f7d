#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Slot import Slot


class Method(Slot):
    """Method reflection - a named behavior slot with a typed signature.

    Methods are registered through Type.am_(). The implementation is a
    plain Python callable: instance methods receive the target as their
    first argument, static methods receive only the declared arguments.
    """

    def __init__(self, parent=None, name="", flags=0, returns=None, params=None, func=None, type_params=None):
        """Create a Method reflection object.

        Args:
            parent: Declaring Type
            name: Method name
            flags: Slot flags (FConst values)
            returns: Return Type or signature string
            params: List of Param objects
            func: Python callable implementing the method
            type_params: Names of the method's own type variables
        """
        super().__init__(parent, name, flags)
        self._returns = returns
        self._params = tuple(params) if params is not None else ()
        self._func = func
        self._type_param_names = list(type_params or [])
        self._type_params = None
        for p in self._params:
            p._owner = self

    def kind(self):
        from .SlotKind import SlotKind
        return SlotKind.method()

    def returns(self):
        """Get return type - lazily resolves from string signature if needed."""
        if self._returns is None:
            from .Type import Type
            self._returns = Type.find("sys::void")
        elif isinstance(self._returns, str):
            from .Type import Type
            self._returns = Type._parse(self._returns, self.scope())
        return self._returns

    def params(self):
        """Get the declared parameters (read-only)."""
        return self._params

    def param_types(self):
        """Get the declared parameter types in order."""
        return [p.type() for p in self._params]

    def type_params(self):
        """Get the method's own type variables."""
        if self._type_params is None:
            from .Type import TypeVar
            self._type_params = tuple(TypeVar(n, self) for n in self._type_param_names)
        return self._type_params

    def scope(self):
        scope = dict(super().scope())
        for v in self.type_params():
            scope[v.name()] = v
        return scope

    def func(self):
        return self._func

    def arity(self):
        return len(self._params)

    def signature(self):
        sigs = ",".join(t.signature() for t in self.param_types())
        return f"{self._name}({sigs})"

    def call(self, *args):
        """Call method with variable args.

        For static methods: call(arg1, arg2, ...)
        For instance methods: call(target, arg1, arg2, ...)
        """
        if self.is_static():
            return self.call_on(None, list(args))
        if not args:
            from .Err import ArgErr
            raise ArgErr.make(f"Instance method {self.qname()} requires target object")
        return self.call_on(args[0], list(args[1:]))

    def call_on(self, target, args=None):
        """Call method on target through the Invoker (None for static methods)."""
        from .Invoker import Invoker
        return Invoker.cur().invoke(target, self, args)
