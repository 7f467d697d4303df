"""Core parameter types used by the trace formatter."""

from enum import Enum
from typing import Any, Final, Optional

from typing_extensions import TypeAlias

__all__ = (
    "SLOT_PREFIX",
    "SLOT_SIGIL",
    "Bindings",
    "ParameterType",
    "TypedBinding",
    "slot_name",
)

SLOT_SIGIL: Final[str] = ":"
SLOT_PREFIX: Final[str] = f"{SLOT_SIGIL}slot"

Bindings: TypeAlias = Any
"""Any ``Mapping`` or non-string ``Sequence`` of bound values."""


class ParameterType(str, Enum):
    """Explicit binding type that overrides value inference."""

    INTEGER = "integer"
    STRING = "string"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


class TypedBinding:
    """A bound value paired with an explicit :class:`ParameterType`."""

    __slots__ = ("parameter_type", "value")

    def __init__(self, value: Any, parameter_type: Optional[ParameterType] = None) -> None:
        self.value = value
        self.parameter_type = parameter_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.value == other.value and self.parameter_type == other.parameter_type

    def __hash__(self) -> int:
        try:
            value_hash = hash(self.value)
        except TypeError:
            value_hash = hash(repr(self.value))
        return hash((value_hash, self.parameter_type))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, parameter_type={self.parameter_type!r})"


def slot_name(ordinal: int) -> str:
    """Return the canonical slot marker for a zero-based ordinal."""
    return f"{SLOT_PREFIX}{ordinal}"
