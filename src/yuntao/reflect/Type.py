#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import re

from .Slot import FConst
from .TypeKind import TypeKind


class Type:
    """Type reflection - a runtime type descriptor.

    A plain Type is a concrete, fully resolved type identified by its qname
    ("pod::Name"). Registered types also carry their definition, added via
    tf_/af_/am_/ac_: formal type parameters, base and mixin usages, and the
    declared slots. ArrayType, ParameterizedType, TypeVar and BoundedType
    are the other descriptor variants.
    """

    # Interned descriptors by signature
    _cache = {}
    # Python class -> registered Type
    _by_cls = {}

    def __init__(self, qname, kind=None, flags=FConst.Public):
        self._qname = qname
        self._name = qname.split("::")[-1] if "::" in qname else qname
        self._kind = kind if kind is not None else TypeKind.reference()
        self._flags = flags
        self._cls = None
        self._array_of = None  # Lazily created ArrayType
        self._statics = {}  # Static field values by name
        # Definition metadata (set via tf_)
        self._param_specs = []  # "T" or "T extends sys::Number"
        self._params = None  # Lazily built TypeVars
        self._base_sig = None
        self._mixin_sigs = []
        self._base_usage = None
        self._mixin_usages = None  # None until ancestry is resolved
        self._slots_info = []  # Declared slots in declaration order

    #########################################################################
    # Registry
    #########################################################################

    @staticmethod
    def make(qname, kind=None, flags=FConst.Public, cls=None):
        """Register a new type definition.

        Args:
            qname: Qualified name in format 'pod::Name'
            kind: TypeKind (defaults to reference)
            flags: Type flags (FConst.Mixin marks an interface)
            cls: Optional Python class whose instances are of this type
        """
        from .Err import ArgErr
        if "::" not in qname:
            raise ArgErr.make(f"Type qname must be 'pod::Name': {qname}")
        if qname in Type._cache:
            raise ArgErr.make(f"Type already registered: {qname}")
        t = Type(qname, kind, flags)
        t._cls = cls
        Type._cache[qname] = t
        if cls is not None:
            Type._by_cls[cls] = t
        return t

    @staticmethod
    def find(sig, checked=True):
        """Find type by signature - returns interned descriptors.

        Accepts qnames ('acme::User'), bare sys names ('int'), arrays
        ('sys::int[]'), parameterized usages ('acme::Box<sys::String>')
        and wildcards ('? extends sys::Number').
        """
        t = Type._cache.get(sig)
        if t is not None:
            return t
        from .Err import Err
        try:
            return Type._parse(sig, {})
        except Err:
            if checked:
                raise
            return None

    @staticmethod
    def of(obj):
        """Get the runtime type of a value"""
        if obj is None:
            return None
        if hasattr(obj, 'typeof') and callable(obj.typeof):
            return obj.typeof()
        # bool before int since bool is a subclass of int
        if isinstance(obj, bool):
            return Type.find("sys::Boolean")
        if isinstance(obj, int):
            return Type.find("sys::Integer")
        if isinstance(obj, float):
            return Type.find("sys::Double")
        if isinstance(obj, str):
            return Type.find("sys::String")
        if isinstance(obj, (list, tuple)):
            return Type.find("sys::Object[]")
        return Type.of_class(type(obj))

    @staticmethod
    def of_class(cls):
        """Get the type registered for a Python class or its nearest superclass"""
        for c in cls.__mro__:
            t = Type._by_cls.get(c)
            if t is not None:
                return t
        return Type.find("sys::Object")

    @staticmethod
    def _parse(sig, scope):
        """Parse a signature in a scope of type variable names"""
        if not isinstance(sig, str):
            return sig
        if not scope:
            t = Type._cache.get(sig)
            if t is not None:
                return t
        t = _SigParser(sig, scope).parse()
        if not scope:
            Type._cache[sig] = t
        return t

    #########################################################################
    # Identity
    #########################################################################

    def name(self):
        return self._name

    def qname(self):
        return self._qname

    def signature(self):
        """Return signature string"""
        return self._qname

    def kind(self):
        return self._kind

    def flags_(self):
        return self._flags

    def cls(self):
        """Python class bound to this type, if any"""
        return self._cls

    def raw(self):
        """Return the concrete type used for assignability"""
        return self

    def is_primitive(self):
        return self._kind == TypeKind.primitive()

    def is_boxed(self):
        return self._kind == TypeKind.boxed()

    def is_array(self):
        return self._kind == TypeKind.array()

    def is_mixin(self):
        return (self._flags & FConst.Mixin) != 0

    def is_abstract(self):
        return (self._flags & (FConst.Abstract | FConst.Mixin)) != 0

    def is_public(self):
        return (self._flags & FConst.Public) != 0

    def to_str(self):
        return self.signature()

    def __eq__(self, other):
        if other is None:
            return False
        if isinstance(other, Type):
            return self.signature() == other.signature()
        return False

    def __hash__(self):
        return hash(self.signature())

    def __repr__(self):
        return f"Type({self.signature()})"

    #########################################################################
    # Definition metadata
    #########################################################################

    def tf_(self, params=None, base=None, mixins=None, flags=None):
        """Declare type parameters, base usage and mixin usages.

        Args:
            params: Type parameter names, optionally bounded ('T extends sys::Number')
            base: Base type signature or Type, e.g. 'acme::Mid<X>'
            mixins: List of mixin signatures or Types
            flags: Replacement type flags

        Returns:
            self for method chaining
        """
        if params is not None:
            self._param_specs = list(params)
            self._params = None
        if base is not None:
            self._base_sig = base
        if mixins is not None:
            self._mixin_sigs = list(mixins)
        if flags is not None:
            self._flags = flags
        self._mixin_usages = None
        return self

    def af_(self, name, flags, type_sig):
        """Add field metadata.

        Returns:
            self for method chaining
        """
        from .Field import Field
        self._slots_info.append(Field(self, name, flags or 0, type_sig))
        return self

    def am_(self, name, flags, returns_sig, params=None, func=None, type_params=None):
        """Add method metadata.

        Args:
            name: Method name
            flags: Slot flags (FConst values)
            returns_sig: Return type signature
            params: Param objects, (name, sig) pairs or bare signatures
            func: Python callable implementing the method
            type_params: Names of the method's own type variables

        Returns:
            self for method chaining
        """
        from .Method import Method
        from .Param import Param
        ps = [Param.coerce(p, i) for i, p in enumerate(params or [])]
        self._slots_info.append(Method(self, name, flags or 0, returns_sig, ps, func, type_params))
        return self

    def ac_(self, flags, params=None, func=None, name="make"):
        """Add constructor metadata.

        Returns:
            self for method chaining
        """
        from .Ctor import Ctor
        from .Param import Param
        ps = [Param.coerce(p, i) for i, p in enumerate(params or [])]
        self._slots_info.append(Ctor(self, name, flags or 0, ps, func))
        return self

    def params(self):
        """Return the formal type parameters in declaration order"""
        if self._params is None:
            vs = []
            for spec in self._param_specs:
                name, _, bound = spec.partition(" extends ")
                vs.append(TypeVar(name.strip(), self, bound.strip() or None))
            self._params = tuple(vs)
        return self._params

    def _scope(self):
        return {v.name(): v for v in self.params()}

    def declared_slots(self, kind=None):
        """Return this type's own slots, including non-public ones"""
        slots = tuple(self._slots_info)
        if kind is None:
            return slots
        return tuple(s for s in slots if s.kind() == kind)

    def declared_fields(self):
        from .SlotKind import SlotKind
        return self.declared_slots(SlotKind.field())

    def declared_methods(self):
        from .SlotKind import SlotKind
        return self.declared_slots(SlotKind.method())

    def declared_ctors(self):
        from .SlotKind import SlotKind
        return self.declared_slots(SlotKind.ctor())

    #########################################################################
    # Ancestry
    #########################################################################

    def _default_base(self):
        if self.is_primitive() or self.is_mixin() or self._qname == "sys::Object":
            return None
        return "sys::Object"

    def _resolve_ancestry(self):
        if self._mixin_usages is not None:
            return
        scope = self._scope()
        base_sig = self._base_sig if self._base_sig is not None else self._default_base()
        base = Type._parse(base_sig, scope) if base_sig is not None else None
        mixins = tuple(Type._parse(m, scope) for m in self._mixin_sigs)
        self._base_usage = base
        # Publish last; readers test _mixin_usages
        self._mixin_usages = mixins

    def base_usage(self):
        """Return the generic base usage (may be a ParameterizedType) or None"""
        self._resolve_ancestry()
        return self._base_usage

    def mixin_usages(self):
        """Return the generic mixin usages in declaration order"""
        self._resolve_ancestry()
        return self._mixin_usages

    def base(self):
        """Return raw base type or None"""
        u = self.base_usage()
        return u.raw() if u is not None else None

    def mixins(self):
        """Return raw mixin types"""
        return tuple(m.raw() for m in self.mixin_usages())

    def inheritance(self):
        """Return inheritance chain from this type, including mixins.

        1. Add self
        2. Add base class's inheritance chain
        3. Add each mixin's inheritance chain
        """
        seen = {self.signature()}
        result = [self]

        base = self.base()
        if base is not None:
            for t in base.inheritance():
                if t.signature() not in seen:
                    seen.add(t.signature())
                    result.append(t)

        for mixin in self.mixins():
            for t in mixin.inheritance():
                if t.signature() not in seen:
                    seen.add(t.signature())
                    result.append(t)

        return tuple(result)

    def is_(self, that):
        """Check if this type is the same as or extends/implements that type"""
        if that is None:
            return False
        that = that.raw()
        if that is None:
            return False
        if self.signature() == that.signature():
            return True
        # Primitives only fit themselves
        if self.is_primitive() or that.is_primitive():
            return False
        # Everything else fits Object
        if that._qname == "sys::Object":
            return True
        for t in self.inheritance():
            if t.signature() == that.signature():
                return True
        return False

    def to_list_of(self):
        """Return array type with this as element type (e.g., int -> int[])"""
        if self._array_of is None:
            self._array_of = ArrayType(self)
        return self._array_of


class ArrayType(Type):
    """Array of an element type - adds [] suffix"""

    def __init__(self, of):
        super().__init__(of.signature() + "[]", TypeKind.array())
        self._of = of

    def of(self):
        return self._of

    def raw(self):
        r = self._of.raw()
        return self if r is self._of else r.to_list_of()

    # Element identity, so arrays of same-named variables from different sites differ
    def __eq__(self, other):
        if not isinstance(other, ArrayType):
            return False
        return self._of == other._of

    def __hash__(self):
        return hash((self._of, "[]"))

    def _resolve_ancestry(self):
        self._base_usage = Type.find("sys::Object")
        self._mixin_usages = ()

    def is_(self, that):
        if that is None:
            return False
        that = that.raw()
        if that is None:
            return False
        if self.raw().signature() == that.signature():
            return True
        if that._qname == "sys::Object":
            return True
        if isinstance(that, ArrayType):
            mine = self._of.raw()
            theirs = that._of.raw()
            # Primitive arrays are invariant, reference arrays covariant
            if mine.is_primitive() or theirs.is_primitive():
                return mine == theirs
            return mine.is_(theirs)
        return False


class ParameterizedType(Type):
    """Generic type applied to arguments, e.g. acme::Box<sys::String>"""

    def __init__(self, base, args):
        raw = base.raw()
        super().__init__(raw.qname(), raw.kind(), raw.flags_())
        self._raw = raw
        self._args = tuple(args)
        self._sig = f"{raw.qname()}<{','.join(a.signature() for a in self._args)}>"

    def raw(self):
        return self._raw

    def args(self):
        """Actual type arguments in positional order"""
        return self._args

    def signature(self):
        return self._sig

    def params(self):
        return self._raw.params()

    def base_usage(self):
        return self._raw.base_usage()

    def mixin_usages(self):
        return self._raw.mixin_usages()

    def declared_slots(self, kind=None):
        return self._raw.declared_slots(kind)

    def inheritance(self):
        return self._raw.inheritance()

    def is_(self, that):
        return self._raw.is_(that)

    def __repr__(self):
        return f"ParameterizedType({self._sig})"


class TypeVar(Type):
    """Generic type parameter like T, K, V.

    A TypeVar is identified by its name plus its declaring site (the type
    or method that introduced it); it only means something relative to a
    concrete usage of that site.
    """

    def __init__(self, name, declaring, bound=None):
        super().__init__(name)
        self._declaring = declaring
        self._site = declaring.qname() if declaring is not None else ""
        self._bound = bound
        self._bounds = None

    def declaring(self):
        return self._declaring

    def bounds(self):
        """Upper bounds; sys::Object when none was declared"""
        if self._bounds is None:
            if self._bound is None:
                self._bounds = (Type.find("sys::Object"),)
            else:
                d = self._declaring
                scope = d._scope() if isinstance(d, Type) else d.scope()
                self._bounds = tuple(Type._parse(b.strip(), scope) for b in str(self._bound).split("&"))
        return self._bounds

    def raw(self):
        return self.bounds()[0].raw()

    def params(self):
        return ()

    def _resolve_ancestry(self):
        self._base_usage = None
        self._mixin_usages = ()

    def is_(self, that):
        return self.raw().is_(that)

    def __eq__(self, other):
        if not isinstance(other, TypeVar):
            return False
        return self._name == other._name and self._site == other._site

    def __hash__(self):
        return hash((self._name, self._site))

    def __repr__(self):
        return f"TypeVar({self._site}^{self._name})"


class BoundedType(Type):
    """Wildcard usage like '?' or '? extends sys::Number'"""

    def __init__(self, upper_bounds=None):
        self._upper = tuple(upper_bounds or ())
        sig = "?"
        if self._upper:
            sig = "? extends " + " & ".join(b.signature() for b in self._upper)
        super().__init__(sig)
        self._name = sig

    def upper_bounds(self):
        if not self._upper:
            return (Type.find("sys::Object"),)
        return self._upper

    def raw(self):
        return self.upper_bounds()[0].raw()

    def params(self):
        return ()

    def _resolve_ancestry(self):
        self._base_usage = None
        self._mixin_usages = ()

    def is_(self, that):
        return self.raw().is_(that)

    def __repr__(self):
        return f"BoundedType({self._qname})"


class _SigParser:
    """Recursive descent parser for type signatures.

    sig  := '?' ['extends' sig ('&' sig)*]
          | name ['<' sig (',' sig)* '>'] ('[]')*
    name := pod::Name | Name (sys pod or in-scope type variable)
    """

    _TOKEN = re.compile(r"\[\]|[<>,?&]|[A-Za-z_$][\w$.]*(?:::[A-Za-z_$][\w$.]*)?")

    def __init__(self, sig, scope):
        self._sig = sig
        self._scope = scope
        self._toks = self._tokenize(sig)
        self._pos = 0

    def _tokenize(self, sig):
        toks = []
        pos = 0
        while pos < len(sig):
            if sig[pos].isspace():
                pos += 1
                continue
            m = _SigParser._TOKEN.match(sig, pos)
            if m is None:
                self._err()
            toks.append(m.group(0))
            pos = m.end()
        return toks

    def _err(self):
        from .Err import ParseErr
        raise ParseErr.make_str("type signature", self._sig)

    def _peek(self):
        return self._toks[self._pos] if self._pos < len(self._toks) else None

    def _next(self):
        tok = self._peek()
        if tok is None:
            self._err()
        self._pos += 1
        return tok

    def parse(self):
        t = self._type()
        if self._pos != len(self._toks):
            self._err()
        return t

    def _type(self):
        if self._peek() == "?":
            self._next()
            bounds = []
            if self._peek() == "extends":
                self._next()
                bounds.append(self._type())
                while self._peek() == "&":
                    self._next()
                    bounds.append(self._type())
            return BoundedType(bounds)

        t = self._name(self._next())
        if self._peek() == "<":
            self._next()
            args = [self._type()]
            while self._peek() == ",":
                self._next()
                args.append(self._type())
            if self._next() != ">":
                self._err()
            if len(args) != len(t.params()):
                from .Err import ArgErr
                raise ArgErr.make(f"{t.qname()} takes {len(t.params())} type arguments: {self._sig}")
            t = ParameterizedType(t, args)
        while self._peek() == "[]":
            self._next()
            t = t.to_list_of()
        return t

    def _name(self, tok):
        if tok in ("<", ">", ",", "&", "[]", "?"):
            self._err()
        if tok in self._scope:
            return self._scope[tok]
        qname = tok if "::" in tok else "sys::" + tok
        t = Type._cache.get(qname)
        if t is None:
            from .Err import UnknownTypeErr
            raise UnknownTypeErr.make(tok)
        return t


def _init_sys_types():
    """Register the built-in sys types"""
    from .BasicType import BasicType
    prim = TypeKind.primitive()
    boxed = TypeKind.boxed()

    Type.make("sys::Object")
    Type.make("sys::Comparable", flags=FConst.Public | FConst.Mixin).tf_(params=["T"])
    Type.make("sys::Number", flags=FConst.Public | FConst.Abstract)
    Type.make("sys::String", flags=FConst.Public | FConst.Final).tf_(mixins=["sys::Comparable<sys::String>"])

    for p in BasicType.PRIMITIVES:
        Type.make(f"sys::{p}", prim, FConst.Public | FConst.Final)
    for p, b in BasicType.PAIRS:
        base = "sys::Number" if p in BasicType.NUMERIC else "sys::Object"
        Type.make(f"sys::{b}", boxed, FConst.Public | FConst.Final) \
            .tf_(base=base, mixins=[f"sys::Comparable<sys::{b}>"])


_init_sys_types()
