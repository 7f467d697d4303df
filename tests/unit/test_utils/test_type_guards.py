"""Unit tests for type guard helpers."""

from types import SimpleNamespace

from sqltrace.parameters import ParameterType, TypedBinding
from sqltrace.utils.type_guards import (
    is_iterable_parameters,
    is_keyed_bindings,
    is_numeric_key,
    is_slot_key,
    is_statement_event,
    is_typed_pair,
)


def test_is_keyed_bindings() -> None:
    assert is_keyed_bindings({})
    assert is_keyed_bindings([1])
    assert is_keyed_bindings((1, 2))
    assert not is_keyed_bindings("abc")
    assert not is_keyed_bindings(b"abc")
    assert not is_keyed_bindings(42)
    assert not is_keyed_bindings(None)
    assert not is_keyed_bindings({1, 2})


def test_is_iterable_parameters_excludes_dicts() -> None:
    assert is_iterable_parameters([1])
    assert not is_iterable_parameters({"a": 1})


def test_is_typed_pair() -> None:
    assert is_typed_pair(("1", ParameterType.INTEGER))
    assert is_typed_pair(TypedBinding(1))
    assert not is_typed_pair((1, 2, 3))
    assert not is_typed_pair("ab")


def test_is_numeric_key() -> None:
    assert is_numeric_key(0)
    assert is_numeric_key("12")
    assert not is_numeric_key(True)
    assert not is_numeric_key("1.5")
    assert not is_numeric_key(":slot0")


def test_is_slot_key() -> None:
    assert is_slot_key(":slot0")
    assert is_slot_key(":name")
    assert not is_slot_key("slot0")
    assert not is_slot_key(0)


def test_is_statement_event() -> None:
    assert is_statement_event(SimpleNamespace(sql="SELECT 1", parameters=None))
    assert not is_statement_event(SimpleNamespace(sql="SELECT 1"))
