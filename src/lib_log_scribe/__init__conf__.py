"""Static package metadata surfaced by the CLI banner and ``--version``."""

from __future__ import annotations

from typing import Callable

name = "lib_log_scribe"
title = "Namespaced logging facade with glob level rules and pluggable writers"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_scribe"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Emit the metadata banner, one ``key = value`` line per field.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_scribe:\\n\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")


__all__ = ["print_info", "version", "shell_command", "name"]
