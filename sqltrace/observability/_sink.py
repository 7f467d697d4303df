"""Trace buffer and console/markup emission."""

import logging
import sys
from threading import Lock
from typing import TYPE_CHECKING, Final, Optional, TextIO

from sqltrace.surface import InteractiveDetector, Surface, is_interactive_session, resolve_surface
from sqltrace.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from sqltrace.observability._config import TraceConfig

__all__ = ("SCHEMA_CHANGE_KEYWORDS", "TRACE_LOGGER_NAME", "OutputSink", "is_schema_change")

TRACE_LOGGER_NAME: Final[str] = "sqltrace.trace"
SCHEMA_CHANGE_KEYWORDS: Final[tuple[str, ...]] = ("CREATE", "ALTER", "DROP")

logger = get_logger("sqltrace.observability")
trace_logger = get_logger(TRACE_LOGGER_NAME)


def is_schema_change(line: str) -> bool:
    """Check whether a rendered statement creates, alters or drops schema objects."""
    return line.startswith(SCHEMA_CHANGE_KEYWORDS)


class OutputSink:
    """Owns the trace buffer of one logger and writes lines to its stream.

    Lines are always buffered. Writing is skipped while the sink is muted.
    """

    __slots__ = ("_config", "_detect_interactive", "_lock", "_logs", "_stream", "muted")

    def __init__(
        self,
        config: "TraceConfig",
        detect_interactive: Optional[InteractiveDetector] = None,
        stream: Optional[TextIO] = None,
        muted: bool = False,
    ) -> None:
        self._config = config
        self._detect_interactive = detect_interactive or is_interactive_session
        self._stream = stream
        self._lock = Lock()
        self._logs: list[str] = []
        self.muted = muted

    def resolve_surface(self) -> Surface:
        """Return the surface the next line is rendered for."""
        return resolve_surface(self._detect_interactive, self._config.override_interactive_output)

    def emit(self, line: str, surface: Optional[Surface] = None) -> None:
        """Buffer ``line`` and, unless muted, write it to the output stream.

        Args:
            line: The rendered statement.
            surface: Surface the line was rendered for. Resolved here when omitted.
        """
        with self._lock:
            self._logs.append(line)

        highlight = is_schema_change(line)
        if surface is None:
            surface = self.resolve_surface()
        log_with_context(trace_logger, logging.DEBUG, line, sql=line, schema_change=highlight, surface=str(surface))

        if self.muted:
            return
        self._write(surface.format_line(line, highlight))

    def get_logs(self) -> list[str]:
        """Return a copy of the buffered lines in the order they were logged."""
        with self._lock:
            return list(self._logs)

    def clear(self) -> None:
        with self._lock:
            self._logs.clear()

    def grep(self, needle: str) -> list[str]:
        """Return buffered lines containing ``needle``."""
        return [line for line in self.get_logs() if needle in line]

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        if stream is None:
            return
        try:
            stream.write(text)
            stream.flush()
        except (OSError, ValueError) as e:
            logger.warning("Failed to write trace line: %s", e)
