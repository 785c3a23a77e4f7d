#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from concurrent.futures import ThreadPoolExecutor

import pytest

from yuntao.reflect import Reflector, SlotCache, SlotKind, Type, UnknownSlotErr


def names(slots):
    return [s.name() for s in slots]


def test_fields_ancestor_order(reflector):
    assert names(reflector.fields("acme::User")) == ["name", "age", "score", "active", "population"]
    assert names(reflector.fields("acme::Admin")) == \
        ["name", "level", "name", "age", "score", "active", "population"]
    assert names(reflector.fields("acme::Leaf")) == ["first", "second", "items"]


def test_own_methods_before_inherited(reflector):
    admin = Type.find("acme::Admin")
    methods = reflector.methods(admin)
    assert methods[0].parent() is admin
    assert names(methods).count("greet") == 2
    assert reflector.method_by_name(admin, "greet").parent() is admin
    assert reflector.method(admin, "greet", ["sys::String"]).parent() is admin
    assert reflector.method_by_name(admin, "add").parent() is Type.find("acme::User")


def test_methods_include_mixins(reflector):
    assert names(reflector.methods("acme::Pipe")) == ["read", "write"]


def test_ctors_not_inherited(reflector):
    assert len(reflector.ctors("acme::User")) == 2
    assert len(reflector.ctors("acme::Admin")) == 1
    assert reflector.ctors("acme::Leaf") == ()


def test_empty_type(reflector):
    assert reflector.fields("acme::Empty") == ()
    assert reflector.methods("acme::Empty") == ()
    assert reflector.ctors("acme::Empty") == ()
    assert reflector.method_names("acme::Empty") == set()


def test_unknown_type_has_no_slots(reflector):
    assert reflector.fields("bogus::Nope") == ()


def test_slots_are_cached_per_kind(reflector):
    cache = reflector.cache()
    user = Type.find("acme::User")
    methods = reflector.methods(user)
    assert cache.contains(SlotKind.method(), user)
    assert not cache.contains(SlotKind.field(), user)
    assert not cache.contains(SlotKind.ctor(), user)
    assert reflector.methods(user) is methods
    assert cache.size(SlotKind.method()) == 1
    assert cache.size() == 1


def test_parameterized_usage_shares_raw_entry(reflector):
    assert reflector.methods("acme::Mid<sys::Long>") is reflector.methods("acme::Mid")
    assert reflector.cache().size() == 1


def test_cache_concurrent_first_access():
    cache = SlotCache()
    r = Reflector(cache)
    leaf = Type.find("acme::Leaf")
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: r.methods(leaf), range(64)))
    assert all(res == results[0] for res in results)
    assert names(results[0]) == ["mid", "pair"]
    assert cache.size(SlotKind.method()) == 1
    assert cache.size(SlotKind.field()) == 0


def test_cache_clear(reflector):
    reflector.fields("acme::User")
    reflector.cache().clear()
    assert reflector.cache().size() == 0
    assert names(reflector.fields("acme::User"))[0] == "name"


def test_field_lookup(reflector):
    admin = Type.find("acme::Admin")
    assert reflector.field(admin, "name").parent() is admin
    assert reflector.field(admin, "age").parent() is Type.find("acme::User")
    assert reflector.has_field(admin, "level")
    assert not reflector.has_field("acme::User", "level")
    assert reflector.field("acme::User", "nope") is None
    with pytest.raises(UnknownSlotErr):
        reflector.field("acme::User", "nope", checked=True)


def test_field_map(reflector):
    m = reflector.field_map("acme::Admin")
    assert sorted(m) == ["active", "age", "level", "name", "population", "score"]
    assert m["name"].parent() is Type.find("acme::Admin")


def test_method_overloads(reflector):
    user = Type.find("acme::User")
    assert reflector.method(user, "describe", ["sys::String"]).signature() == "describe(sys::String)"
    assert reflector.method(user, "describe", ["sys::int"]).signature() == "describe(sys::int)"
    assert reflector.method(user, "describe", [Type.find("sys::Integer")]).signature() == "describe(sys::int)"
    assert reflector.method(user, "describe", ["sys::Long"]) is None
    assert reflector.method(user, "describe", []) is None
    assert reflector.method(user, "fail").signature() == "fail()"


def test_method_miss(reflector):
    assert reflector.method("acme::User", "nope") is None
    assert reflector.method_by_name("acme::User", "nope") is None
    with pytest.raises(UnknownSlotErr):
        reflector.method("acme::User", "nope", checked=True)
    with pytest.raises(UnknownSlotErr):
        reflector.method_by_name("acme::User", "nope", checked=True)


def test_method_with_type_param(reflector):
    m = reflector.method("acme::User", "identity", ["sys::String"])
    assert m is not None
    assert m.is_static()


def test_public_slots(reflector):
    public = names(reflector.public_methods("acme::User"))
    assert "secret" not in public
    assert "greet" in public
    assert "secret" in reflector.method_names("acme::User")
    assert "secret" not in reflector.public_method_names("acme::User")
    assert reflector.public_method("acme::User", "secret") is None
    assert reflector.public_method("acme::User", "greet", ["sys::String"]) is not None
    assert len(reflector.public_fields("acme::User")) == 5
    assert len(reflector.public_ctors("acme::User")) == 2


def test_public_methods_filter_and_exclude(reflector):
    statics = reflector.public_methods("acme::User", filter=lambda m: m.is_static())
    assert names(statics) == ["create", "identity"]

    rest = reflector.public_methods("acme::User", exclude=["describe", "fail"])
    assert "describe" not in names(rest)
    assert "fail" not in names(rest)
    assert "add" in names(rest)

    add = reflector.method_by_name("acme::User", "add")
    assert add not in reflector.public_methods("acme::User", exclude=[add])


def test_ctor_lookup(reflector):
    user = Type.find("acme::User")
    assert reflector.ctor(user).arity() == 0
    c = reflector.ctor(user, ["sys::String", "sys::Integer"])
    assert c.signature() == "make(sys::String,sys::int)"
    assert reflector.ctor(user, ["sys::int"]) is None
    with pytest.raises(UnknownSlotErr):
        reflector.ctor(user, ["sys::int"], checked=True)


def test_method_of_obj(reflector, user):
    assert reflector.method_of_obj(user, "describe", ["x"]).signature() == "describe(sys::String)"
    assert reflector.method_of_obj(user, "describe", [5]).signature() == "describe(sys::int)"
    assert reflector.method_of_obj(user, "add", [1, None]) is None
    assert reflector.method_of_obj(user, "", []) is None
    assert reflector.method_of_obj(None, "add", [1, 2]) is None
    static = reflector.method_of_obj(Type.find("acme::User"), "create", ["bob"])
    assert static.is_static()


def test_field_vals(reflector, user):
    assert reflector.field_val(user, "name") == "amy"
    assert reflector.field_val(user, "nope") is None
    assert reflector.field_val(None, "name") is None

    f = reflector.set_field_val(user, "age", 41)
    assert f.name() == "age"
    assert user.age == 41
    assert reflector.set_field_val(user, "nope", 1) is None


def test_set_field_val_uses_type_default(reflector, user):
    reflector.set_field_val(user, "age", None)
    reflector.set_field_val(user, "active", None)
    reflector.set_field_val(user, "name", None)
    assert user.age == 0
    assert user.active is False
    assert user.name is None


def test_static_field_vals(reflector):
    user = Type.find("acme::User")
    reflector.set_field_val(user, "population", 7)
    assert reflector.field_val(user, "population") == 7
    assert reflector.fields_vals(user) == [7]


def test_fields_vals(reflector, user):
    vals = reflector.fields_vals(user)
    assert vals[:4] == ["amy", 30, 0.0, False]
    assert len(vals) == 5
    assert reflector.fields_vals(None) is None
