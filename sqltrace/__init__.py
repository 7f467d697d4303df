"""sqltrace: readable, fully substituted SQL statements for debugging and auditing."""

from sqltrace import core, exceptions, observability, parameters, utils
from sqltrace.__metadata__ import __version__
from sqltrace.exceptions import ImproperConfigurationError, SQLTraceError
from sqltrace.observability import (
    DebugMode,
    DebugTraceLogger,
    TraceConfig,
    TraceLogger,
    TraceMode,
    create_trace_logger,
    is_schema_change,
)
from sqltrace.parameters import ParameterType, TypedBinding, can_be_treated_as_int
from sqltrace.surface import Surface, is_interactive_session

__all__ = (
    "DebugMode",
    "DebugTraceLogger",
    "ImproperConfigurationError",
    "ParameterType",
    "SQLTraceError",
    "Surface",
    "TraceConfig",
    "TraceLogger",
    "TraceMode",
    "TypedBinding",
    "__version__",
    "can_be_treated_as_int",
    "core",
    "create_trace_logger",
    "exceptions",
    "is_interactive_session",
    "is_schema_change",
    "observability",
    "parameters",
    "utils",
)
