#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import pytest

from yuntao.reflect import BasicType, Type, TypeUtil


def t(sig):
    return Type.find(sig)


@pytest.mark.parametrize("sig", [
    "acme::User", "sys::int", "sys::Integer", "sys::int[]", "sys::String[]", "sys::Object",
    "acme::Mid<sys::Long>", "acme::Base<sys::Integer,sys::String>", "?", "? extends sys::Number",
])
def test_assignable_reflexive(sig):
    assert TypeUtil.is_assignable(t(sig), t(sig))


def test_assignable_reflexive_type_vars(reflector):
    a = t("acme::Base").params()[0]
    n = t("acme::Holder").params()[0]
    v = reflector.method_by_name("acme::User", "identity").returns()
    for var in [a, n, v, a.to_list_of()]:
        assert TypeUtil.is_assignable(var, var)


def test_assignable_subtypes():
    assert TypeUtil.is_assignable(t("acme::User"), t("acme::Admin"))
    assert not TypeUtil.is_assignable(t("acme::Admin"), t("acme::User"))
    assert TypeUtil.is_assignable(t("sys::Object"), t("acme::User"))
    assert TypeUtil.is_assignable(t("acme::Sink"), t("acme::Pipe"))
    assert TypeUtil.is_assignable(t("sys::Comparable"), t("sys::String"))
    assert TypeUtil.is_assignable(t("sys::Number"), t("sys::Integer"))


def test_assignable_uses_raw_types():
    assert TypeUtil.is_assignable(t("acme::Base<sys::Long,sys::String>"), t("acme::Leaf"))
    assert TypeUtil.is_assignable(t("acme::Mid"), t("acme::Mid<sys::Long>"))
    assert TypeUtil.is_assignable(t("sys::Number"), t("? extends sys::Number"))


def test_assignable_primitive_bridging():
    assert TypeUtil.is_assignable(t("sys::int"), t("sys::Integer"))
    assert TypeUtil.is_assignable(t("sys::Integer"), t("sys::int"))
    assert TypeUtil.is_assignable(t("sys::char"), t("sys::Character"))
    assert TypeUtil.is_assignable(t("sys::Boolean"), t("sys::boolean"))

    # Bridging is exact, never widening
    assert not TypeUtil.is_assignable(t("sys::long"), t("sys::Integer"))
    assert not TypeUtil.is_assignable(t("sys::long"), t("sys::int"))
    assert not TypeUtil.is_assignable(t("sys::Long"), t("sys::int"))
    assert not TypeUtil.is_assignable(t("sys::Number"), t("sys::int"))
    assert not TypeUtil.is_assignable(t("sys::Object"), t("sys::int"))
    assert not TypeUtil.is_assignable(t("sys::int"), t("sys::Object"))


def test_assignable_arrays():
    assert TypeUtil.is_assignable(t("sys::Object[]"), t("sys::String[]"))
    assert TypeUtil.is_assignable(t("sys::Object"), t("sys::int[]"))
    assert not TypeUtil.is_assignable(t("sys::String[]"), t("sys::Object[]"))
    assert not TypeUtil.is_assignable(t("sys::int[]"), t("sys::Integer[]"))
    assert not TypeUtil.is_assignable(t("sys::long[]"), t("sys::int[]"))


def test_assignable_none():
    assert not TypeUtil.is_assignable(None, t("sys::int"))
    assert not TypeUtil.is_assignable(t("sys::int"), None)
    assert not TypeUtil.is_assignable(None, None)


def test_all_assignable():
    ints = [t("sys::int"), t("sys::String")]
    assert TypeUtil.is_all_assignable_from([], [])
    assert TypeUtil.is_all_assignable_from(None, None)
    assert TypeUtil.is_all_assignable_from(ints, [t("sys::Integer"), t("sys::String")])
    assert not TypeUtil.is_all_assignable_from(ints, [t("sys::Integer"), t("sys::int")])
    assert not TypeUtil.is_all_assignable_from(ints, None)
    assert not TypeUtil.is_all_assignable_from(None, ints)


def test_all_assignable_length_guard():
    assert not TypeUtil.is_all_assignable_from([t("sys::Object")], [])
    assert not TypeUtil.is_all_assignable_from([t("sys::Object")], [t("sys::String"), t("sys::String")])
    assert not TypeUtil.is_all_assignable_from([t("sys::Object")], [None])


def test_basic_type_checks():
    assert TypeUtil.is_primitive_wrapper(t("sys::Integer"))
    assert not TypeUtil.is_primitive_wrapper(t("sys::int"))
    assert not TypeUtil.is_primitive_wrapper(t("sys::Number"))
    assert TypeUtil.is_basic_type(t("sys::int"))
    assert TypeUtil.is_basic_type(t("sys::Double"))
    assert not TypeUtil.is_basic_type(t("sys::String"))
    assert not TypeUtil.is_basic_type(None)


def test_types_of(user):
    assert TypeUtil.types_of([1, "a", None, user]) == \
        [t("sys::Integer"), t("sys::String"), t("sys::Object"), t("acme::User")]
    assert TypeUtil.types_of(None) == []


def test_wrap_unwrap_round_trip():
    table = BasicType.primitive_wrapper_map()
    assert len(table) == 8
    for prim, box in table.items():
        assert BasicType.wrap(prim) is box
        assert BasicType.unwrap(box) is prim
        assert BasicType.unwrap(BasicType.wrap(prim)) is prim
        assert BasicType.wrap(BasicType.unwrap(box)) is box
    assert BasicType.wrapper_primitive_map() == {b: p for p, b in table.items()}


def test_wrap_unwrap_identity_elsewhere():
    for sig in ["sys::void", "sys::String", "acme::User", "sys::int[]"]:
        assert BasicType.wrap(t(sig)) is t(sig)
        assert BasicType.unwrap(t(sig)) is t(sig)
    assert BasicType.wrap(None) is None


def test_default_vals():
    assert BasicType.default_val(t("sys::int")) == 0
    assert BasicType.default_val(t("sys::long")) == 0
    assert BasicType.default_val(t("sys::double")) == 0.0
    assert isinstance(BasicType.default_val(t("sys::float")), float)
    assert BasicType.default_val(t("sys::boolean")) is False
    assert BasicType.default_val(t("sys::char")) == "\0"
    assert BasicType.default_val(t("sys::Integer")) is None
    assert BasicType.default_val(t("sys::String")) is None
    assert BasicType.default_val(None) is None
    assert BasicType.default_vals([t("sys::int"), t("acme::User")]) == [0, None]
