"""Parameter handling for trace rendering.

Positional markers and bindings are brought to a shared set of canonical slot
names, and each bound value is rendered as a printable SQL literal.
"""

from sqltrace.parameters.bindings import iter_bindings, normalize_bindings
from sqltrace.parameters.renderer import ELLIPSIS, NULL_LITERAL, ValueRenderer, can_be_treated_as_int, value_to_text
from sqltrace.parameters.slots import SlotNormalizer
from sqltrace.parameters.types import SLOT_PREFIX, SLOT_SIGIL, Bindings, ParameterType, TypedBinding, slot_name

__all__ = (
    "ELLIPSIS",
    "NULL_LITERAL",
    "SLOT_PREFIX",
    "SLOT_SIGIL",
    "Bindings",
    "ParameterType",
    "SlotNormalizer",
    "TypedBinding",
    "ValueRenderer",
    "can_be_treated_as_int",
    "iter_bindings",
    "normalize_bindings",
    "slot_name",
    "value_to_text",
)
