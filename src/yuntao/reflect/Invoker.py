#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .BasicType import BasicType
from .Err import ArgErr, InvocationErr, NoSuchMemberErr
from .Log import Log
from .SlotKind import SlotKind
from .Type import Type
from .TypeUtil import TypeUtil


class Invoker:
    """Adapts loose argument lists to a slot's signature and dispatches.

    Arguments are fitted to exactly the declared parameter count: extras
    are dropped, and missing or None values take the default of the
    declared parameter type. Failures during dispatch are raised as
    InvocationErr with the original exception as cause.
    """

    _cur = None
    _log = Log.get("reflect")

    def __init__(self, reflector=None):
        if reflector is None:
            from .Reflector import Reflector
            reflector = Reflector.cur()
        self._reflector = reflector

    @staticmethod
    def cur():
        """Invoker over the process-wide default Reflector"""
        if Invoker._cur is None:
            Invoker._cur = Invoker()
        return Invoker._cur

    def reflector(self):
        return self._reflector

    #########################################################################
    # Invoke
    #########################################################################

    def adapt_args(self, slot, args):
        """Fit args to slot's declared parameters; fields raise ArgErr"""
        self._dispatcher(slot)
        args = list(args or [])
        adapted = []
        for i, t in enumerate(slot.param_types()):
            val = args[i] if i < len(args) else None
            adapted.append(BasicType.default_val(t) if val is None else val)
        return adapted

    def invoke(self, target, slot, args=None):
        """Invoke a method or constructor with adapted args.

        Args:
            target: Instance for instance methods; ignored for static
                methods and constructors
            slot: Method or Ctor, typically from a Reflector lookup
            args: Argument values; may be shorter or longer than declared

        Raises:
            NoSuchMemberErr if slot is None
            InvocationErr if dispatch fails
        """
        if slot is None:
            raise NoSuchMemberErr.make("Cannot invoke an unresolved member")
        dispatch = self._dispatcher(slot)
        return dispatch(target, slot, self.adapt_args(slot, args))

    def invoke_static(self, method, args=None):
        return self.invoke(None, method, args)

    def invoke_with_check(self, target, method, args=None):
        """Invoke with the exact declared argument count.

        Only None values in primitive parameters are replaced by defaults;
        a count mismatch fails like any other dispatch error.
        """
        if method is None:
            raise NoSuchMemberErr.make("Cannot invoke an unresolved member")
        dispatch = self._dispatcher(method)
        args = list(args or [])
        types = method.param_types()
        if len(args) != len(types):
            cause = ArgErr.make(f"Expected {len(types)} arguments, got {len(args)}")
            raise InvocationErr.make(f"{method.to_str()}: {cause.msg()}", cause)
        for i, t in enumerate(types):
            if args[i] is None and t.is_primitive():
                args[i] = BasicType.default_val(t)
        return dispatch(target, method, args)

    def invoke_by_name(self, obj, name, args=None):
        """Resolve name against obj and the runtime types of args, then invoke.

        A Type passed as obj resolves and invokes a static method of it.
        """
        m = self._reflector.method_of_obj(obj, name, args)
        if m is None:
            types = ",".join(t.signature() for t in TypeUtil.types_of(args))
            raise NoSuchMemberErr.make(f"No such method: {name}({types})")
        return self.invoke(None if isinstance(obj, Type) else obj, m, args)

    #########################################################################
    # Instances
    #########################################################################

    def new_instance(self, t, args=None):
        """Construct t with the first constructor accepting the runtime types of args"""
        if isinstance(t, str):
            t = Type.find(t)
        types = TypeUtil.types_of(args)
        c = self._reflector.ctor(t, types)
        if c is None:
            sig = ",".join(x.signature() for x in types)
            raise NoSuchMemberErr.make(f"No ctor of {t} matched for parameter types: ({sig})")
        return self.invoke(None, c, args)

    def new_instance_if_possible(self, t):
        """Construct t from the no-arg constructor, else any constructor with default args.

        Returns:
            New instance, or None when no constructor succeeds
        """
        if isinstance(t, str):
            t = Type.find(t, False)
        if t is None or t.is_abstract():
            return None
        ctors = sorted(self._reflector.ctors(t), key=lambda c: c.arity() != 0)
        for c in ctors:
            try:
                return self.invoke(None, c, BasicType.default_vals(c.param_types()))
            except InvocationErr as e:
                self._log.debug(f"{c.to_str()} failed, trying next ctor", e)
        return None

    #########################################################################
    # Dispatch
    #########################################################################

    def _dispatcher(self, slot):
        """Call function for slot's kind; raises ArgErr for fields"""
        dispatch = {
            SlotKind.field(): None,
            SlotKind.method(): self._call_method,
            SlotKind.ctor(): self._call_ctor,
        }[slot.kind()]
        if dispatch is None:
            raise ArgErr.make(f"{slot.qname()} is a field, not an invocable member")
        return dispatch

    def _call_method(self, target, method, args):
        if method.is_static():
            return self._call(method, args)
        if target is None:
            cause = ArgErr.make(f"Instance method {method.qname()} requires target object")
            raise InvocationErr.make(cause.msg(), cause)
        if not Type.of(target).is_(method.parent()):
            cause = ArgErr.make(f"{Type.of(target)} is not an instance of {method.parent()}")
            raise InvocationErr.make(cause.msg(), cause)
        return self._call(method, [target] + args)

    def _call_ctor(self, target, ctor, args):
        return self._call(ctor, args)

    def _call(self, slot, args):
        func = slot.func()
        if func is None:
            cause = ArgErr.make(f"{slot.to_str()} has no implementation")
            raise InvocationErr.make(cause.msg(), cause)
        try:
            return func(*args)
        except Exception as e:
            self._log.debug(f"Invocation of {slot.to_str()} failed", e)
            raise InvocationErr.make(f"{slot.to_str()}: {e}", e) from e
