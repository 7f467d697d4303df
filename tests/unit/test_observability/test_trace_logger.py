"""Unit tests for the trace logger entry points."""

import logging
from collections.abc import Iterator, Mapping
from io import StringIO
from types import SimpleNamespace
from typing import Any

import pytest

from sqltrace import ImproperConfigurationError, ParameterType, TypedBinding
from sqltrace.observability import (
    DebugMode,
    DebugTraceLogger,
    TraceConfig,
    TraceLogger,
    TraceMode,
    create_trace_logger,
)


@pytest.fixture
def buffered(plain_config: TraceConfig) -> DebugTraceLogger:
    return DebugTraceLogger(plain_config, mode=TraceMode.BUFFER)


def test_positional_bindings_are_filled_in(buffered: DebugTraceLogger) -> None:
    buffered.log("SELECT * FROM book WHERE id = ? AND title = ?", [42, "abc"])
    assert buffered.get_logs() == ["SELECT * FROM book WHERE id = 42 AND title = 'abc'"]


def test_named_and_positional_bindings_mix(buffered: DebugTraceLogger) -> None:
    buffered.log("UPDATE book SET title = :title WHERE id = ?", {":title": "Dune", 0: 7})
    assert buffered.get_logs() == ["UPDATE book SET title = 'Dune' WHERE id = 7"]


def test_null_and_typed_bindings(buffered: DebugTraceLogger) -> None:
    buffered.log(
        "INSERT INTO book (a, b, c) VALUES (?, ?, ?)",
        [None, ("7", ParameterType.STRING), TypedBinding("8", ParameterType.INTEGER)],
    )
    assert buffered.get_logs() == ["INSERT INTO book (a, b, c) VALUES (NULL, '7', 8)"]


def test_ten_plus_slots_render_in_place(buffered: DebugTraceLogger) -> None:
    buffered.log(" ".join(["?"] * 11), list(range(11)))
    assert buffered.get_logs() == ["0 1 2 3 4 5 6 7 8 9 10"]


def test_missing_bindings_keep_placeholder(buffered: DebugTraceLogger) -> None:
    buffered.log("SELECT ? , ?", [1])
    assert buffered.get_logs() == ["SELECT 1 , :slot1"]


def test_plain_text_is_logged_verbatim(buffered: DebugTraceLogger) -> None:
    buffered.log("plain text")
    buffered.log("? stays", None)
    buffered.log("? also stays", "not a collection")
    buffered.log_line("free text ?")
    assert buffered.get_logs() == ["plain text", "? stays", "? also stays", "free text ?"]


def test_call_without_statement_is_a_no_op(buffered: DebugTraceLogger) -> None:
    buffered.log()
    buffered.log(None, [1])
    assert buffered.get_logs() == []


def test_echo_on_console(stream: StringIO) -> None:
    trace = DebugTraceLogger(detect_interactive=lambda: True, stream=stream)
    trace.log("SELECT * FROM book WHERE id = ?", [5])
    assert stream.getvalue() == "SELECT * FROM book WHERE id = \x1b[32m5\x1b[39m\n"
    assert trace.get_logs() == ["SELECT * FROM book WHERE id = \x1b[32m5\x1b[39m"]


def test_echo_as_markup(stream: StringIO) -> None:
    trace = DebugTraceLogger(detect_interactive=lambda: False, stream=stream)
    trace.log("CREATE TABLE t (id INT DEFAULT ?)", [0])
    assert stream.getvalue() == '<b style="color:red">CREATE TABLE t (id INT DEFAULT <b style="color:green">0</b>)</b><br />'


def test_override_interactive_output(stream: StringIO, plain_config: TraceConfig) -> None:
    trace = DebugTraceLogger(plain_config, detect_interactive=lambda: True, stream=stream)
    assert trace.set_override_interactive_output(True) is trace
    trace.log("SELECT ?", [1])
    assert stream.getvalue() == "SELECT 1<br />"


def test_buffer_mode_writes_nothing(stream: StringIO, plain_config: TraceConfig) -> None:
    trace = DebugTraceLogger(plain_config, stream=stream, detect_interactive=lambda: True)
    trace.set_mode(TraceMode.BUFFER)
    assert trace.mode is TraceMode.BUFFER
    trace.log("SELECT ?", [1])
    assert stream.getvalue() == ""
    assert trace.get_logs() == ["SELECT 1"]
    trace.set_mode(TraceMode.ECHO)
    trace.log("SELECT 2")
    assert stream.getvalue() == "SELECT 2\n"


def test_invalid_mode_raises() -> None:
    with pytest.raises(ImproperConfigurationError):
        DebugTraceLogger(mode=7)
    with pytest.raises(ImproperConfigurationError):
        DebugTraceLogger().set_mode("loud")


def test_setters_apply_to_next_call(buffered: DebugTraceLogger) -> None:
    assert buffered.set_force_string_binding(True) is buffered
    buffered.log("id = ?", [42])
    buffered.set_force_string_binding(False)
    buffered.set_max_value_length(3)
    buffered.log("name = ?", ["abcdef"])
    assert buffered.get_logs() == ["id = '42'", "name = 'abc... '"]


def test_max_value_length_is_clamped(buffered: DebugTraceLogger) -> None:
    buffered.set_max_value_length(-5)
    assert buffered.config.max_value_length == 0
    with pytest.raises(ImproperConfigurationError):
        buffered.set_max_value_length("long")  # type: ignore[arg-type]


def test_logger_keeps_its_own_config() -> None:
    config = TraceConfig(max_value_length=3)
    trace = DebugTraceLogger(config, mode=TraceMode.BUFFER)
    config.max_value_length = 100
    trace.set_force_string_binding(True)
    assert trace.config.max_value_length == 3
    assert config.force_string_binding is False


def test_instances_do_not_share_buffers() -> None:
    first = DebugTraceLogger(mode=TraceMode.BUFFER)
    second = DebugTraceLogger(mode=TraceMode.BUFFER)
    first.log("SELECT 1")
    assert second.get_logs() == []


def test_clear_and_grep(buffered: DebugTraceLogger) -> None:
    buffered.log("SELECT * FROM book WHERE id = ?", [1])
    buffered.log("SELECT * FROM page WHERE id = ?", [2])
    assert buffered.grep("page") == ["SELECT * FROM page WHERE id = 2"]
    buffered.clear()
    assert buffered.get_logs() == []


def test_rendering_failure_logs_raw_statement(buffered: DebugTraceLogger, caplog: pytest.LogCaptureFixture) -> None:
    class ExplodingBindings(Mapping[Any, Any]):
        def __getitem__(self, key: Any) -> Any:
            raise KeyError(key)

        def __iter__(self) -> Iterator[Any]:
            raise RuntimeError("cannot iterate")

        def __len__(self) -> int:
            return 1

    with caplog.at_level(logging.WARNING, logger="sqltrace.observability"):
        buffered.log("SELECT ?", ExplodingBindings())
    assert buffered.get_logs() == ["SELECT ?"]
    assert "Failed to render bindings" in caplog.text


def test_plain_logger_records_bindings_separately(plain_config: TraceConfig) -> None:
    trace = TraceLogger(plain_config, mode=TraceMode.BUFFER)
    trace.log("SELECT * FROM book WHERE id = ?", [1])
    trace.log("plain text")
    assert trace.get_logs() == ["SELECT * FROM book WHERE id = ?", "[1]", "plain text"]


def test_statement_observer_adapter(buffered: DebugTraceLogger) -> None:
    observer = buffered.as_statement_observer()
    observer(SimpleNamespace(sql="DELETE FROM book WHERE id = ?", parameters=(9,)))
    observer("connection closed")
    assert buffered.get_logs() == ["DELETE FROM book WHERE id = 9", "connection closed"]


@pytest.mark.parametrize(
    ("mode", "logger_type", "trace_mode"),
    [
        (DebugMode.ECHO, TraceLogger, TraceMode.ECHO),
        (DebugMode.BUFFER, TraceLogger, TraceMode.BUFFER),
        (DebugMode.DEBUG_ECHO, DebugTraceLogger, TraceMode.ECHO),
        (3, DebugTraceLogger, TraceMode.BUFFER),
    ],
)
def test_create_trace_logger(mode: int, logger_type: type, trace_mode: TraceMode) -> None:
    trace = create_trace_logger(mode, is_integer=str.isdigit)
    assert type(trace) is logger_type
    assert trace.mode is trace_mode


def test_create_trace_logger_rejects_unknown_mode() -> None:
    with pytest.raises(ImproperConfigurationError):
        create_trace_logger(9)


def test_backslash_literal_does_not_hide_following_markers(buffered: DebugTraceLogger) -> None:
    buffered.log("SELECT * FROM f WHERE path = 'C:\\' AND id = ? AND tag = 'x'", [5])
    assert buffered.get_logs() == ["SELECT * FROM f WHERE path = 'C:\\' AND id = 5 AND tag = 'x'"]


def test_short_named_keys_leave_highlight_markup_intact(stream: StringIO) -> None:
    trace = DebugTraceLogger(detect_interactive=lambda: False, stream=stream)
    trace.log("SELECT ? , :g", {0: 1, ":g": "x"})
    assert trace.get_logs() == ["SELECT <b style=\"color:green\">1</b> , 'x'"]


def test_unbound_positional_slot_is_still_highlighted(stream: StringIO) -> None:
    trace = DebugTraceLogger(detect_interactive=lambda: True, stream=stream)
    trace.log("SELECT ? , ?", [1])
    assert trace.get_logs() == ["SELECT \x1b[32m1\x1b[39m , \x1b[32m:slot1\x1b[39m"]


def test_surface_is_resolved_once_per_statement(stream: StringIO) -> None:
    answers: list[bool] = []

    def flip() -> bool:
        answers.append(not answers[-1] if answers else True)
        return answers[-1]

    trace = DebugTraceLogger(detect_interactive=flip, stream=stream)
    trace.log("SELECT ?", [1])
    assert answers == [True]
    assert stream.getvalue() == "SELECT \x1b[32m1\x1b[39m\n"
