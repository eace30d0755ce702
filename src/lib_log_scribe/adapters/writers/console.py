"""Rich-powered default writer.

Purpose
-------
Render records on the terminal, routing each method to the channel a console
user expects: warnings and errors on stderr, everything else on stdout.

Contents
--------
* :data:`_STYLE_MAP` - default method-to-style mapping.
* :class:`ConsoleWriter` - writer installed by :meth:`Scribe.reset`.

System Role
-----------
Outer adapter; the rest of the system only sees :class:`WriterPort`.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console
from rich.text import Text

from lib_log_scribe.application.ports import WriterPort
from lib_log_scribe.domain import LogLevel, LogRecord


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "red",
}

_STDERR_METHODS = frozenset({LogLevel.WARN, LogLevel.ERROR})


class ConsoleWriter(WriterPort):
    """Print ``message`` followed by ``args`` on the channel matching the method.

    Markup and highlighting are disabled so messages such as ``"[WARN] ..."``
    print verbatim. Lines are soft-wrapped: Rich never inserts line breaks at
    the console width, and ANSI escapes in messages do not count as text.

    Examples
    --------
    >>> from io import StringIO
    >>> from types import SimpleNamespace
    >>> out = Console(file=StringIO(), width=80)
    >>> writer = ConsoleWriter(stdout=out, stderr=out)
    >>> handle = SimpleNamespace(namespace="app")
    >>> writer(LogRecord(handle, LogLevel.INFO, "[ready]", ("port", 8080)))
    >>> out.file.getvalue()
    '[ready] port 8080\\n'
    """

    def __init__(
        self,
        *,
        stdout: Console | None = None,
        stderr: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure consoles and colour overrides."""
        terminal = True if force_color else None
        self._stdout = stdout if stdout is not None else Console(force_terminal=terminal, no_color=no_color)
        self._stderr = (
            stderr if stderr is not None else Console(stderr=True, force_terminal=terminal, no_color=no_color)
        )
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def __call__(self, record: LogRecord) -> None:
        console = self._stderr if record.method in _STDERR_METHODS else self._stdout
        style = "" if self._no_color else self._style_map.get(record.method, "")
        line = Text(" ").join(_to_text(part) for part in (record.message, *record.args))
        if self._no_color:
            line = Text(line.plain)
        console.print(
            line,
            style=style or None,
            soft_wrap=True,
            markup=False,
            highlight=False,
            emoji=False,
        )


def _to_text(value: object) -> Text:
    # ANSI sequences (e.g. from ColorTransform) become styles instead of counted characters.
    if isinstance(value, str):
        return Text.from_ansi(value)
    return Text(str(value))


__all__ = ["ConsoleWriter"]
