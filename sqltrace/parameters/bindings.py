"""Canonicalization of positional binding keys."""

from collections.abc import Mapping
from typing import Any

from sqltrace.parameters.types import Bindings, slot_name
from sqltrace.utils.type_guards import is_iterable_parameters, is_numeric_key

__all__ = ("iter_bindings", "normalize_bindings")


def iter_bindings(bindings: Bindings) -> "list[tuple[Any, Any]]":
    """Return ``(key, value)`` pairs in their given order.

    Sequences are keyed by index.
    """
    if isinstance(bindings, Mapping):
        return list(bindings.items())
    if is_iterable_parameters(bindings):
        return list(enumerate(bindings))
    return []


def normalize_bindings(bindings: Bindings) -> "dict[Any, Any]":
    """Give numerically keyed bindings their canonical slot names.

    Numeric keys are renamed ``:slot0``, ``:slot1`` ... in the order they are
    encountered, which matches the order positional markers are numbered in
    the statement. Named keys keep their name and value.

    Args:
        bindings: Mapping or sequence of bound values. It is not modified.

    Returns:
        A new dictionary keyed by slot name.
    """
    normalized: dict[Any, Any] = {}
    ordinal = 0
    for key, value in iter_bindings(bindings):
        if is_numeric_key(key):
            normalized[slot_name(ordinal)] = value
            ordinal += 1
        else:
            normalized[key] = value
    return normalized
