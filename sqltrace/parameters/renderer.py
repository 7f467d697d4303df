"""Rendering of bound values as printable SQL literals."""

from typing import TYPE_CHECKING, Any, Callable, Final, Optional

from mypy_extensions import mypyc_attr

from sqltrace.parameters.types import ParameterType, TypedBinding
from sqltrace.utils.type_guards import is_typed_pair

if TYPE_CHECKING:
    from sqltrace.observability._config import TraceConfig

__all__ = ("ELLIPSIS", "NULL_LITERAL", "ValueRenderer", "can_be_treated_as_int", "value_to_text")

NULL_LITERAL: Final[str] = "NULL"
ELLIPSIS: Final[str] = "... "


def can_be_treated_as_int(value: Any) -> bool:
    """Check if a value reads back unchanged as an integer literal.

    ``"42"`` and ``"-7"`` qualify; ``"042"``, ``"+5"``, ``" 5"`` and ``"4.0"`` do not.
    """
    text = value if isinstance(value, str) else value_to_text(value)
    try:
        return str(int(text)) == text
    except (TypeError, ValueError):
        return False


def value_to_text(value: Any) -> str:
    """Return the textual form of a bound value without ever raising."""
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        try:
            return repr(value)
        except Exception:  # noqa: BLE001
            return f"<unrenderable {type(value).__name__}>"


@mypyc_attr(allow_interpreted_subclasses=False)
class ValueRenderer:
    """Turns one bound value into the literal shown in a trace line.

    Settings are read from the shared :class:`TraceConfig` on every call so a
    logger's setters take effect immediately.
    """

    __slots__ = ("_config", "_is_integer")

    def __init__(self, config: "TraceConfig", is_integer: Optional[Callable[[str], bool]] = None) -> None:
        self._config = config
        self._is_integer = is_integer or can_be_treated_as_int

    @property
    def config(self) -> "TraceConfig":
        return self._config

    def render_binding(self, binding: Any) -> str:
        """Render a bound value, unpacking an explicit type when one is attached.

        Args:
            binding: A bare value, a :class:`TypedBinding` or a ``(value, type)`` pair.

        Returns:
            The printable literal.
        """
        if isinstance(binding, TypedBinding):
            return self.render(binding.value, binding.parameter_type)
        if is_typed_pair(binding):
            value, tag = binding
            return self.render(value, tag if isinstance(tag, ParameterType) else None)
        return self.render(binding)

    def render(self, value: Any, parameter_type: Optional[ParameterType] = None) -> str:
        """Render a single value as a SQL literal.

        Args:
            value: The bound value. ``None`` is the NULL sentinel.
            parameter_type: Explicit type overriding inference.

        Returns:
            ``NULL`` for the sentinel, otherwise the possibly truncated value,
            single quoted when it resolves to a string.
        """
        if value is None:
            return NULL_LITERAL

        text = value_to_text(value)
        effective_type = self._resolve_type(text, parameter_type)

        max_length = max(0, self._config.max_value_length)
        if len(text) > max_length:
            text = text[:max_length] + ELLIPSIS

        if effective_type is ParameterType.STRING:
            return f"'{text}'"
        return text

    def _resolve_type(self, text: str, parameter_type: Optional[ParameterType]) -> ParameterType:
        if self._config.force_string_binding:
            return ParameterType.STRING
        if parameter_type in (ParameterType.INTEGER, ParameterType.STRING):
            return ParameterType(parameter_type)
        if text == NULL_LITERAL or self._safe_is_integer(text):
            return ParameterType.INTEGER
        return ParameterType.STRING

    def _safe_is_integer(self, text: str) -> bool:
        try:
            return bool(self._is_integer(text))
        except Exception:  # noqa: BLE001
            return False
