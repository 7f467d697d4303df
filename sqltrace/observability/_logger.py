"""Trace loggers: the public entry points for recording SQL statements."""

from collections.abc import Callable
from enum import IntEnum
from typing import Any, Optional, TextIO

from sqltrace.core.assembler import assemble_query
from sqltrace.exceptions import ImproperConfigurationError
from sqltrace.observability._config import TraceConfig, coerce_length
from sqltrace.observability._sink import OutputSink
from sqltrace.parameters.bindings import normalize_bindings
from sqltrace.parameters.renderer import ValueRenderer, value_to_text
from sqltrace.parameters.slots import SlotNormalizer
from sqltrace.parameters.types import Bindings, slot_name
from sqltrace.surface import InteractiveDetector, Surface
from sqltrace.utils.logging import get_logger
from sqltrace.utils.type_guards import is_keyed_bindings, is_statement_event

__all__ = ("DebugMode", "DebugTraceLogger", "TraceLogger", "TraceMode", "create_trace_logger")

logger = get_logger("sqltrace.observability")


class TraceMode(IntEnum):
    """Whether logged lines are written out or only buffered."""

    ECHO = 0
    BUFFER = 1


class DebugMode(IntEnum):
    """Debug switch values understood by :func:`create_trace_logger`.

    Modes 0 and 1 record statements and bindings as given, modes 2 and 3 fill
    the bindings into the statement. Odd modes only buffer.
    """

    ECHO = 0
    BUFFER = 1
    DEBUG_ECHO = 2
    DEBUG_BUFFER = 3


def _coerce_mode(mode: Any) -> TraceMode:
    try:
        return TraceMode(mode)
    except ValueError as e:
        msg = f"Unknown trace mode {mode!r}, expected one of {[m.value for m in TraceMode]}"
        raise ImproperConfigurationError(msg) from e


class TraceLogger:
    """Records statements and their bindings as separate trace lines.

    Args:
        config: Rendering settings. The logger keeps its own copy.
        mode: ``TraceMode.ECHO`` writes each line out, ``TraceMode.BUFFER`` only keeps it.
        detect_interactive: Reports whether output goes to a console. Defaults to a TTY check on stdout.
        stream: Output stream. Defaults to ``sys.stdout`` at write time.
    """

    __slots__ = ("_sink", "config")

    def __init__(
        self,
        config: Optional[TraceConfig] = None,
        *,
        mode: "TraceMode | int" = TraceMode.ECHO,
        detect_interactive: Optional[InteractiveDetector] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.config = config.copy() if config is not None else TraceConfig()
        self._sink = OutputSink(
            self.config,
            detect_interactive=detect_interactive,
            stream=stream,
            muted=_coerce_mode(mode) is TraceMode.BUFFER,
        )

    @property
    def mode(self) -> TraceMode:
        return TraceMode.BUFFER if self._sink.muted else TraceMode.ECHO

    def log(self, sql: Any = None, bindings: Optional[Bindings] = None) -> None:
        """Record a statement, then its bindings when given."""
        if sql is None:
            return
        self.log_line(sql)
        if bindings is not None:
            self.log_line(repr(bindings) if is_keyed_bindings(bindings) else bindings)

    def log_line(self, line: Any) -> None:
        """Record a free text line exactly as given."""
        self._sink.emit(line if isinstance(line, str) else value_to_text(line))

    def set_mode(self, mode: "TraceMode | int") -> "TraceLogger":
        """Switch between writing lines out and only buffering them.

        Raises:
            ImproperConfigurationError: If ``mode`` is not a :class:`TraceMode` value.
        """
        self._sink.muted = _coerce_mode(mode) is TraceMode.BUFFER
        return self

    def set_max_value_length(self, length: int = 20) -> "TraceLogger":
        """Set the maximum number of characters shown per bound value.

        Negative lengths are treated as 0.
        """
        self.config.max_value_length = coerce_length(length)
        return self

    def set_force_string_binding(self, flag: bool = False) -> "TraceLogger":
        """Render every bound value as a string. NULL values are not affected."""
        self.config.force_string_binding = bool(flag)
        return self

    def set_override_interactive_output(self, flag: bool) -> "TraceLogger":
        """Use markup output even when running on an interactive console."""
        self.config.override_interactive_output = bool(flag)
        return self

    def get_logs(self) -> list[str]:
        return self._sink.get_logs()

    def clear(self) -> None:
        self._sink.clear()

    def grep(self, needle: str) -> list[str]:
        """Return the recorded lines that contain ``needle``."""
        return self._sink.grep(needle)

    def as_statement_observer(self) -> "Callable[[Any], None]":
        """Return a callable that logs statement execution events.

        The event only needs ``sql`` and ``parameters`` attributes.
        """

        def observer(event: Any) -> None:
            if is_statement_event(event):
                self.log(event.sql, event.parameters)
            else:
                self.log_line(event)

        return observer


class DebugTraceLogger(TraceLogger):
    """Records statements with every bound value filled in.

    Positional ``?`` markers and numerically keyed bindings are matched up by
    position, named ``:name`` markers by name.
    """

    __slots__ = ("_is_integer",)

    def __init__(
        self,
        config: Optional[TraceConfig] = None,
        *,
        mode: "TraceMode | int" = TraceMode.ECHO,
        detect_interactive: Optional[InteractiveDetector] = None,
        stream: Optional[TextIO] = None,
        is_integer: Optional[Callable[[str], bool]] = None,
    ) -> None:
        super().__init__(config, mode=mode, detect_interactive=detect_interactive, stream=stream)
        self._is_integer = is_integer

    def log(self, sql: Any = None, bindings: Optional[Bindings] = None) -> None:
        """Record ``sql`` with ``bindings`` filled in.

        Without a keyed collection of bindings the statement is recorded as a
        plain line. Rendering problems never reach the caller: the raw
        statement is recorded instead and the failure is logged.
        """
        if sql is None:
            return
        if bindings is None or not is_keyed_bindings(bindings):
            self.log_line(sql)
            return

        surface = self._sink.resolve_surface()
        try:
            line = self.render(sql, bindings, surface=surface)
        except Exception:
            logger.warning("Failed to render bindings into traced statement", exc_info=True)
            line = value_to_text(sql)
        self._sink.emit(line, surface=surface)

    def render(self, sql: Any, bindings: Bindings, surface: Optional[Surface] = None) -> str:
        """Return ``sql`` with ``bindings`` filled in, without recording it.

        Positional slots are highlighted for ``surface``, which defaults to
        the surface the next line would be written to.
        """
        text = sql if isinstance(sql, str) else value_to_text(sql)
        if surface is None:
            surface = self._sink.resolve_surface()
        canonical_sql, count = SlotNormalizer(surface, highlight=False).normalize(text)
        renderer = ValueRenderer(self.config, is_integer=self._is_integer)
        if not self.config.highlight_slots:
            return assemble_query(canonical_sql, normalize_bindings(bindings), renderer)
        return assemble_query(
            canonical_sql,
            normalize_bindings(bindings),
            renderer,
            decorate=surface.wrap_slot,
            decorated_slots=[slot_name(ordinal) for ordinal in range(count)],
        )


def create_trace_logger(mode: "DebugMode | int" = DebugMode.DEBUG_ECHO, **kwargs: Any) -> TraceLogger:
    """Build the logger matching a debug switch value.

    Args:
        mode: One of the :class:`DebugMode` values.
        **kwargs: Passed to the logger constructor.

    Raises:
        ImproperConfigurationError: If ``mode`` is not a :class:`DebugMode` value.

    Returns:
        A :class:`TraceLogger` for modes 0 and 1, a :class:`DebugTraceLogger` for 2 and 3.
    """
    try:
        debug_mode = DebugMode(mode)
    except ValueError as e:
        msg = f"Unknown debug mode {mode!r}, expected one of {[m.value for m in DebugMode]}"
        raise ImproperConfigurationError(msg) from e

    trace_mode = TraceMode.BUFFER if debug_mode % 2 else TraceMode.ECHO
    if debug_mode >= DebugMode.DEBUG_ECHO:
        return DebugTraceLogger(mode=trace_mode, **kwargs)
    kwargs.pop("is_integer", None)
    return TraceLogger(mode=trace_mode, **kwargs)
