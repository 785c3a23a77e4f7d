#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import pytest

from yuntao.reflect import FConst, Invoker, Log, LogLevel, Obj, Reflector, SlotCache, Type


class User(Obj):

    def __init__(self, name=None, age=0):
        self.name = name
        self.age = age
        self.score = 0.0
        self.active = False


class Admin(User):

    def __init__(self):
        super().__init__("root", 99)
        self.level = 1


class Fragile(Obj):

    def __init__(self, size):
        self.size = size


class Empty(Obj):
    pass


def _fail(self):
    raise ValueError("boom")


def _broken_ctor():
    raise RuntimeError("no default")


def _register():
    """Register the acme hierarchy shared by every test"""
    Static = FConst.Public | FConst.Static

    # Base<A,B> <- Mid<X> extends Base<X,String> <- Leaf extends Mid<Integer>
    Type.make("acme::Base").tf_(params=["A", "B"]) \
        .af_("first", FConst.Public, "A") \
        .af_("second", FConst.Public, "B") \
        .af_("items", FConst.Public, "A[]") \
        .am_("pair", FConst.Public, "B", [("a", "A"), ("b", "B")])
    Type.make("acme::Mid").tf_(params=["X"], base="acme::Base<X,sys::String>") \
        .am_("mid", FConst.Public, "X")
    Type.make("acme::Leaf").tf_(base="acme::Mid<sys::Integer>")

    # Bounded parameter and wildcard usages
    Type.make("acme::Holder").tf_(params=["N extends sys::Number"]) \
        .af_("value", FConst.Public, "N") \
        .af_("extra", FConst.Public, "acme::Holder<? extends sys::Number>")

    # Pipe binds Source through its first mixin and Sink only through its second
    mixin = FConst.Public | FConst.Mixin
    Type.make("acme::Source", flags=mixin).tf_(params=["S"]).am_("read", FConst.Public | FConst.Abstract, "S")
    Type.make("acme::Sink", flags=mixin).tf_(params=["K"]).am_("write", FConst.Public | FConst.Abstract, "sys::void", ["K"])
    Type.make("acme::Pipe").tf_(mixins=["acme::Source<sys::String>", "acme::Sink<sys::Long>"])

    Type.make("acme::User", cls=User) \
        .af_("name", FConst.Public, "sys::String") \
        .af_("age", FConst.Public, "sys::int") \
        .af_("score", FConst.Public, "sys::double") \
        .af_("active", FConst.Public, "sys::boolean") \
        .af_("population", Static, "sys::int") \
        .ac_(FConst.Public, func=lambda: User()) \
        .ac_(FConst.Public, [("name", "sys::String"), ("age", "sys::int")], lambda name, age: User(name, age)) \
        .am_("greet", FConst.Public, "sys::String", [("who", "sys::String")],
             lambda self, who: f"Hello {who}, I am {self.name}") \
        .am_("add", FConst.Public, "sys::int", [("a", "sys::int"), ("b", "sys::int")],
             lambda self, a, b: a + b) \
        .am_("describe", FConst.Public, "sys::String", ["sys::int"], lambda self, v: f"int:{v}") \
        .am_("describe", FConst.Public, "sys::String", ["sys::String"], lambda self, v: f"str:{v}") \
        .am_("flag", FConst.Public, "sys::boolean", ["sys::boolean", "sys::char", "sys::double"],
             lambda self, b, c, d: (b, c, d)) \
        .am_("create", Static, "acme::User", [("name", "sys::String")], lambda name: User(name)) \
        .am_("identity", Static, "T", [("v", "T")], lambda v: v, type_params=["T"]) \
        .am_("secret", FConst.Private, "sys::void", func=lambda self: "hidden") \
        .am_("fail", FConst.Public, "sys::void", func=_fail)

    Type.make("acme::Admin", cls=Admin).tf_(base="acme::User") \
        .af_("name", FConst.Public, "sys::String") \
        .af_("level", FConst.Public, "sys::int") \
        .ac_(FConst.Public, func=lambda: Admin()) \
        .am_("greet", FConst.Public, "sys::String", [("who", "sys::String")],
             lambda self, who: f"Hi {who}, admin here")

    Type.make("acme::Shape", flags=FConst.Public | FConst.Abstract) \
        .ac_(FConst.Public, func=lambda: Shape())

    Type.make("acme::Fragile", cls=Fragile) \
        .ac_(FConst.Public, func=_broken_ctor) \
        .ac_(FConst.Public, ["sys::int"], lambda size: Fragile(size))

    Type.make("acme::Empty", cls=Empty)


class Shape(Obj):
    pass


if Type.find("acme::Base", False) is None:
    _register()


@pytest.fixture
def reflector():
    return Reflector(SlotCache())


@pytest.fixture
def invoker(reflector):
    return Invoker(reflector)


@pytest.fixture
def user():
    return User("amy", 30)


@pytest.fixture
def log_recs():
    """Capture reflect log records at debug level"""
    log = Log.get("reflect")
    old = log.level()
    recs = []
    handler = recs.append
    log.level(LogLevel.debug())
    Log.add_handler(handler)
    try:
        yield recs
    finally:
        Log.remove_handler(handler)
        log.level(old)
