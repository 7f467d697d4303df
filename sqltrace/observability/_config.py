"""Configuration objects for the trace loggers."""

from dataclasses import dataclass
from typing import Any

from sqltrace.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_MAX_VALUE_LENGTH", "TraceConfig", "coerce_length")

DEFAULT_MAX_VALUE_LENGTH = 40


def coerce_length(length: Any) -> int:
    """Convert a requested value length to a non-negative integer.

    Raises:
        ImproperConfigurationError: If the value cannot be read as an integer.
    """
    try:
        value = int(length)
    except (TypeError, ValueError) as e:
        msg = f"max_value_length must be an integer, got {length!r}"
        raise ImproperConfigurationError(msg) from e
    return max(0, value)


@dataclass(slots=True)
class TraceConfig:
    """Rendering settings held by a single trace logger.

    Attributes:
        max_value_length: Bound values longer than this are truncated.
        force_string_binding: Render every non-NULL value as a quoted string.
        override_interactive_output: Use markup output even on an interactive console.
        highlight_slots: Wrap canonical slot markers in surface markup.
    """

    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH
    force_string_binding: bool = False
    override_interactive_output: bool = False
    highlight_slots: bool = True

    def __post_init__(self) -> None:
        self.max_value_length = coerce_length(self.max_value_length)
        self.force_string_binding = bool(self.force_string_binding)
        self.override_interactive_output = bool(self.override_interactive_output)
        self.highlight_slots = bool(self.highlight_slots)

    def copy(self) -> "TraceConfig":
        """Return a copy to avoid sharing mutable state."""

        return TraceConfig(
            max_value_length=self.max_value_length,
            force_string_binding=self.force_string_binding,
            override_interactive_output=self.override_interactive_output,
            highlight_slots=self.highlight_slots,
        )
