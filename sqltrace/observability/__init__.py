"""Public observability exports."""

from sqltrace.observability._config import DEFAULT_MAX_VALUE_LENGTH, TraceConfig
from sqltrace.observability._logger import DebugMode, DebugTraceLogger, TraceLogger, TraceMode, create_trace_logger
from sqltrace.observability._sink import SCHEMA_CHANGE_KEYWORDS, TRACE_LOGGER_NAME, OutputSink, is_schema_change

__all__ = (
    "DEFAULT_MAX_VALUE_LENGTH",
    "SCHEMA_CHANGE_KEYWORDS",
    "TRACE_LOGGER_NAME",
    "DebugMode",
    "DebugTraceLogger",
    "OutputSink",
    "TraceConfig",
    "TraceLogger",
    "TraceMode",
    "create_trace_logger",
    "is_schema_change",
)
