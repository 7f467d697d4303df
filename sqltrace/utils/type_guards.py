"""Type guard functions for runtime type checking in sqltrace.

These let the logging entry points accept loosely typed input without
``hasattr()`` probing scattered through the rendering code.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqltrace.parameters.types import SLOT_SIGIL, TypedBinding

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

__all__ = (
    "is_iterable_parameters",
    "is_keyed_bindings",
    "is_numeric_key",
    "is_slot_key",
    "is_statement_event",
    "is_typed_pair",
)


def is_iterable_parameters(params: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if parameters are iterable (but not string or dict).

    Args:
        params: The parameters to check

    Returns:
        True if the parameters are iterable, False otherwise
    """
    return isinstance(params, Sequence) and not isinstance(params, (str, bytes, bytearray, dict))


def is_keyed_bindings(bindings: Any) -> bool:
    """Check if a bindings argument is a keyed collection.

    Mappings are keyed by name, sequences by their index.

    Args:
        bindings: The bindings argument passed to a logger.

    Returns:
        True when the bindings can be normalized.
    """
    return isinstance(bindings, Mapping) or is_iterable_parameters(bindings)


def is_typed_pair(value: Any) -> bool:
    """Check if a bound value carries an explicit type slot.

    Args:
        value: A single bound value.

    Returns:
        True for :class:`TypedBinding` and any two item tuple or list.
    """
    if isinstance(value, TypedBinding):
        return True
    return isinstance(value, (tuple, list)) and len(value) == 2


def is_numeric_key(key: Any) -> bool:
    """Check if a binding key is positional rather than named.

    Args:
        key: A bindings key.

    Returns:
        True for integers and strings made only of ASCII digits.
    """
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and key.isascii() and key.isdigit()


def is_slot_key(key: Any) -> "TypeGuard[str]":
    """Check if a binding key is shaped like a named slot marker."""
    return isinstance(key, str) and key.startswith(SLOT_SIGIL)


def is_statement_event(obj: Any) -> bool:
    """Check if an object looks like a statement execution event.

    Args:
        obj: Object handed to a statement observer.

    Returns:
        True when it exposes ``sql`` and ``parameters`` attributes.
    """
    return hasattr(obj, "sql") and hasattr(obj, "parameters")
