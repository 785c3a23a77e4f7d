#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Log import Log
from .Type import ParameterizedType, TypeVar, BoundedType, ArrayType


class GenericUtil:
    """Generic type argument resolution.

    Resolution walks a single lineage from a usage site toward a declaring
    type: the base usage, or the first mixin usage when the base is absent
    or the root sys::Object. A parameter bound only through a second or
    later mixin is therefore reported as unresolved (None).
    """

    _log = Log.get("reflect")

    @staticmethod
    def raw(t):
        """Concrete type of any descriptor; None for None"""
        return None if t is None else t.raw()

    @staticmethod
    def is_unknown(t):
        return t is None or isinstance(t, TypeVar)

    @staticmethod
    def has_type_var(*types):
        for t in types:
            if isinstance(t, TypeVar):
                return True
        return False

    #########################################################################
    # Lineage
    #########################################################################

    @staticmethod
    def _next_usage(t):
        """Next node on the single lineage path above raw type t"""
        base = t.base_usage()
        if base is None or base.raw().qname() == "sys::Object":
            mixins = t.mixin_usages()
            if mixins:
                return mixins[0]
        return base

    @staticmethod
    def to_parameterized(t):
        """First ParameterizedType on the lineage of t, starting with t itself"""
        seen = set()
        while t is not None:
            if isinstance(t, ParameterizedType):
                return t
            if t.signature() in seen:
                return None
            seen.add(t.signature())
            t = GenericUtil._next_usage(t.raw())
        return None

    @staticmethod
    def type_arguments(t):
        """Actual type arguments of the first parameterized node of t's lineage"""
        p = GenericUtil.to_parameterized(t)
        return None if p is None else list(p.args())

    @staticmethod
    def type_argument(t, index=0):
        args = GenericUtil.type_arguments(t)
        if args is not None and len(args) > index:
            return args[index]
        return None

    @staticmethod
    def raw_type_argument(t, index=0):
        """type_argument() when it is concrete; None for variables and wildcards"""
        arg = GenericUtil.type_argument(t, index)
        if arg is None or isinstance(arg, (TypeVar, BoundedType)):
            return None
        return arg.raw()

    #########################################################################
    # Resolution
    #########################################################################

    @staticmethod
    def resolve_type_arguments(usage, declaring, variables):
        """Resolve type variables of declaring as seen from usage.

        Args:
            usage: Concrete usage site (Type or ParameterizedType)
            declaring: Ancestor type whose parameters are being resolved
            variables: Requested variables; non-TypeVar entries pass through

        Returns:
            List parallel to variables; None where no binding exists

        Raises:
            InvalidHierarchyErr if declaring is not an ancestor of usage
        """
        declaring = GenericUtil.raw(declaring)
        raw_usage = GenericUtil.raw(usage)
        if declaring is None or raw_usage is None or not raw_usage.is_(declaring):
            from .Err import InvalidHierarchyErr
            raise InvalidHierarchyErr.make(f"{declaring} must be assignable from {usage}")

        bindings = GenericUtil._bindings(usage, declaring)
        result = []
        for v in variables:
            if isinstance(v, TypeVar):
                resolved = GenericUtil._chase(bindings, v)
                if resolved is None:
                    GenericUtil._log.debug(f"Unresolved {v!r} from {usage}")
                result.append(resolved)
            else:
                result.append(v)
        return result

    @staticmethod
    def resolve_type_argument(usage, declaring, variable):
        return GenericUtil.resolve_type_arguments(usage, declaring, [variable])[0]

    @staticmethod
    def resolve_declared_params(usage, declaring):
        """Resolve all of declaring's own type parameters, in declaration order"""
        declaring = GenericUtil.raw(declaring)
        if declaring is None:
            return []
        return GenericUtil.resolve_type_arguments(usage, declaring, list(declaring.params()))

    @staticmethod
    def _bindings(usage, declaring):
        bindings = {}
        node = usage
        seen = set()
        while node is not None:
            raw = node.raw()
            if isinstance(node, ParameterizedType):
                for var, arg in zip(raw.params(), node.args()):
                    bindings[var] = GenericUtil._substitute(bindings, arg)
            if raw == declaring or raw.signature() in seen:
                break
            seen.add(raw.signature())
            node = GenericUtil._next_usage(raw)
        return bindings

    @staticmethod
    def _chase(bindings, t):
        seen = set()
        while isinstance(t, TypeVar) and t not in seen:
            seen.add(t)
            bound = bindings.get(t)
            if bound is None:
                return None
            t = bound
        return None if isinstance(t, TypeVar) else t

    @staticmethod
    def _substitute(bindings, t):
        """Replace bound variables inside t, leaving unbound ones in place"""
        if isinstance(t, TypeVar):
            bound = GenericUtil._chase(bindings, t)
            return t if bound is None else bound
        if isinstance(t, ParameterizedType):
            args = [GenericUtil._substitute(bindings, a) for a in t.args()]
            if all(a is b for a, b in zip(args, t.args())):
                return t
            return ParameterizedType(t.raw(), args)
        if isinstance(t, ArrayType):
            of = GenericUtil._substitute(bindings, t.of())
            return t if of is t.of() else of.to_list_of()
        if isinstance(t, BoundedType) and t._upper:
            bounds = [GenericUtil._substitute(bindings, b) for b in t._upper]
            return BoundedType(bounds)
        return t

    #########################################################################
    # Slot types
    #########################################################################

    @staticmethod
    def field_type(field):
        return None if field is None else field.type()

    @staticmethod
    def param_types(slot):
        """Declared parameter types of a method or ctor; None for fields"""
        if slot is None or slot.is_field():
            return None
        return slot.param_types()

    @staticmethod
    def param_type(slot, index=0):
        types = GenericUtil.param_types(slot)
        if types is not None and len(types) > index:
            return types[index]
        return None

    @staticmethod
    def return_type(method):
        return None if method is None else method.returns()

    @staticmethod
    def resolve_slot_type(usage, slot, index=None):
        """Declared type of a slot with its declaring type's variables substituted.

        Args:
            usage: Concrete usage site of the slot's declaring type
            slot: Field, Method or Ctor
            index: Parameter index; None means the field type or return type

        Returns:
            The substituted type; variables with no binding are left in place
        """
        if slot is None:
            return None
        if index is None:
            t = slot.type() if slot.is_field() else slot.returns()
        else:
            t = GenericUtil.param_type(slot, index)
        if t is None:
            return None
        declaring = slot.parent()
        params = list(declaring.params())
        if not params:
            return t
        resolved = GenericUtil.resolve_type_arguments(usage, declaring, params)
        bindings = {v: r for v, r in zip(params, resolved) if r is not None}
        return GenericUtil._substitute(bindings, t)
