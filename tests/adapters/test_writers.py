from __future__ import annotations

from io import StringIO
from types import SimpleNamespace

import pytest
from rich.console import Console

from lib_log_scribe.adapters.transforms import ColorTransform, LevelColoringStrategy, RGBColor
from lib_log_scribe.adapters.writers import CompositeWriter, ConsoleWriter, NullWriter, RecordingWriter
from lib_log_scribe.domain import LOG_METHODS, LogLevel, LogRecord


def _record(method: LogLevel = LogLevel.INFO, message: object = "hello", *args: object) -> LogRecord:
    return LogRecord(SimpleNamespace(namespace="tests"), method, message, args)  # type: ignore[arg-type]


def _console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.mark.parametrize(
    "method, channel",
    [
        (LogLevel.TRACE, "stdout"),
        (LogLevel.DEBUG, "stdout"),
        (LogLevel.INFO, "stdout"),
        (LogLevel.WARN, "stderr"),
        (LogLevel.ERROR, "stderr"),
    ],
)
def test_console_writer_routes_methods_to_channels(method: LogLevel, channel: str) -> None:
    consoles = {"stdout": _console(), "stderr": _console()}
    writer = ConsoleWriter(stdout=consoles["stdout"], stderr=consoles["stderr"])

    writer(_record(method, "routed"))

    assert "routed" in consoles[channel].export_text()
    other = "stderr" if channel == "stdout" else "stdout"
    assert consoles[other].export_text() == ""


def test_console_writer_prints_message_then_args(record_console: Console) -> None:
    writer = ConsoleWriter(stdout=record_console, stderr=record_console)
    writer(_record(LogLevel.INFO, "base message", "additional", 13, True, None))
    assert record_console.export_text() == "base message additional 13 True None\n"


def test_console_writer_prints_brackets_verbatim(record_console: Console) -> None:
    writer = ConsoleWriter(stdout=record_console, stderr=record_console)
    writer(_record(LogLevel.WARN, "[WARN] module:feature - a message"))
    assert record_console.export_text() == "[WARN] module:feature - a message\n"


def test_console_writer_applies_level_styles() -> None:
    stream = StringIO()
    console = Console(file=stream, force_terminal=True, color_system="standard", width=120)
    writer = ConsoleWriter(stdout=console, stderr=console, styles={"error": "bold red"})

    writer(_record(LogLevel.ERROR, "styled"))

    assert "\x1b[" in stream.getvalue()
    assert "styled" in stream.getvalue()


def test_console_writer_no_color_suppresses_styles() -> None:
    stream = StringIO()
    console = Console(file=stream, force_terminal=True, color_system="standard", width=120)
    writer = ConsoleWriter(stdout=console, stderr=console, no_color=True)

    writer(_record(LogLevel.ERROR, "plain"))

    assert stream.getvalue() == "plain\n"


def test_composite_writer_broadcasts_in_order() -> None:
    seen: list[str] = []
    first = RecordingWriter()
    second = RecordingWriter()

    def tracker(record: LogRecord) -> None:
        seen.append(str(record.message))

    writer = CompositeWriter(first, tracker, second)
    writer(_record(LogLevel.INFO, "fan-out"))

    assert first.messages == ["fan-out"]
    assert second.messages == ["fan-out"]
    assert seen == ["fan-out"]
    assert len(writer.writers) == 3


def test_composite_writer_propagates_failures() -> None:
    later = RecordingWriter()

    def broken(record: LogRecord) -> None:
        raise OSError("disk full")

    writer = CompositeWriter(broken, later)
    with pytest.raises(OSError, match="disk full"):
        writer(_record())
    assert later.records == []


def test_null_writer_discards_everything() -> None:
    writer = NullWriter()
    for method in LOG_METHODS:
        assert writer(_record(method)) is None


def test_recording_writer_keeps_and_clears_records() -> None:
    writer = RecordingWriter()
    writer(_record(LogLevel.INFO, "one"))
    writer(_record(LogLevel.ERROR, "two"))
    assert len(writer) == 2
    assert writer.messages == ["one", "two"]
    writer.clear()
    assert writer.records == []


def test_console_writer_keeps_long_messages_on_one_line() -> None:
    stream = StringIO()
    console = Console(file=stream, width=80, color_system=None)
    message = " ".join(["word"] * 30)

    ConsoleWriter(stdout=console, stderr=console)(_record(LogLevel.INFO, message))

    assert stream.getvalue() == f"{message}\n"


def test_console_writer_does_not_measure_ansi_escapes() -> None:
    stream = StringIO()
    console = Console(file=stream, width=20, force_terminal=True, color_system="truecolor")
    colored = ColorTransform(LevelColoringStrategy({"info": RGBColor(255, 0, 0)}))(_record(LogLevel.INFO, "x" * 15))

    ConsoleWriter(stdout=console, stderr=console)(colored)

    output = stream.getvalue()
    assert output.count("\n") == 1
    assert "x" * 15 in output
    assert "38;2;255;0;0" in output


def test_console_writer_no_color_drops_ansi_from_messages() -> None:
    stream = StringIO()
    console = Console(file=stream, width=20, force_terminal=True, color_system="truecolor")
    colored = ColorTransform(LevelColoringStrategy({"info": RGBColor(255, 0, 0)}))(_record(LogLevel.INFO, "x" * 15))

    ConsoleWriter(stdout=console, stderr=console, no_color=True)(colored)

    assert stream.getvalue() == "x" * 15 + "\n"
