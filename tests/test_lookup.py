from __future__ import annotations

from reflectdump.introspection.lookup import (
    find_field,
    find_field_by_name,
    find_field_by_type,
    find_field_exact_type,
    find_method,
    find_method_by_name,
    find_method_by_params,
    find_method_by_return_type,
)
from reflectdump.introspection.reflector import get_reflector


class Record:
    count: int
    name: str
    x: float
    tags: list[str]


class Dup:
    a: int
    b: str
    c: int


class Shapes:
    def one(self, a: int) -> int:
        return a

    def two(self, a: int, b: str) -> int:
        return a + len(b)

    def three(self, a: int, b: str, c: float) -> int:
        return a

    def pair(self, x: int, y: str) -> str:
        return f"{x}{y}"

    @staticmethod
    def static_two(a: int, b: str) -> str:
        return b * a


def test_find_field_by_exact_name():
    f = find_field(Record, "x", None)
    assert f is not None
    assert f.name == "x"
    assert f.declared_type is float


def test_find_field_type_criterion_is_inverted():
    # `count` is the int field and comes first; the lookup skips it.
    f = find_field(Record, None, "int")
    assert f is not None
    assert f.name == "name"


def test_find_field_name_and_inverted_type_together():
    assert find_field(Record, "count", "int") is None
    assert find_field(Record, "count", "str").name == "count"


def test_find_field_missing_returns_none():
    assert find_field(Record, "missing") is None


def test_find_field_overloads_reduce_to_canonical_call():
    assert find_field_by_name(Record, "tags").declared_type == list[str]
    assert find_field_by_type(Record, int) == find_field(Record, None, "int")


def test_find_field_exact_type_returns_last_match():
    fields = get_reflector().declared_fields(Dup)
    assert find_field_exact_type(fields, int).name == "c"
    assert find_field_exact_type(fields, int, "a").name == "a"
    assert find_field_exact_type(fields, float) is None


def test_find_method_by_param_names_requires_same_length():
    m = find_method(Shapes, None, None, ["int", "str"])
    assert m is not None
    assert m.name == "two"
    assert find_method(Shapes, "one", None, ["int", "str"]) is None
    assert find_method(Shapes, "three", None, ["int", "str"]) is None


def test_find_method_combines_criteria():
    assert find_method(Shapes, None, "str", ["int", "str"]).name == "pair"
    assert find_method(Shapes, "pair", "int") is None


def test_find_method_overloads():
    assert find_method_by_name(Shapes, "pair").parameter_type_names == ("int", "str")
    assert find_method_by_return_type(Shapes, str).name == "pair"
    assert find_method_by_params(Shapes, [int]).name == "one"
    assert find_method_by_params(Shapes, [int, str, float]).name == "three"
    assert find_method_by_name(Shapes, "nope") is None


def test_found_methods_can_be_invoked():
    assert find_method_by_name(Shapes, "two").invoke(Shapes(), 2, "ab") == 4
    assert find_method_by_name(Shapes, "static_two").invoke(Shapes, 2, "x") == "xx"
