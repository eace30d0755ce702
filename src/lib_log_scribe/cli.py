"""Command line interface built with rich-click.

Purpose
-------
Offer a small operator surface: print package metadata, show which level a
namespace resolves to under a given set of rules, and run a demo that emits one
message per level through the console writer.

Contents
--------
* :func:`cli` - root group with ``--version``, ``--traceback`` and
  ``--use-dotenv`` toggles.
* ``info`` / ``resolve`` / ``demo`` subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as config_module
from .adapters.transforms import PrefixTransform
from .adapters.writers import ConsoleWriter, NullWriter
from .domain import LOG_METHODS, ArgumentError, LogLevel
from .runtime import Scribe

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
DEMO_NAMESPACES = ("app", "app:db", "app:db/query")
DEFAULT_DEMO_PREFIX = "[%M] %n - "


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _parse_rule_options(values: Sequence[str]) -> list[tuple[str, LogLevel]]:
    try:
        return config_module.parse_levels(",".join(values))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--level'") from exc


def _build_scribe(
    rules: Sequence[tuple[str, LogLevel]],
    *,
    base: Sequence[tuple[str, LogLevel]] = (),
) -> Scribe:
    scribe = Scribe(writer_factory=NullWriter)
    scribe.configure(levels=base)
    config_module.configure_from_env(scribe)
    scribe.configure(levels=rules)
    return scribe


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks for unexpected errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also enabled by {config_module.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Inspect and demonstrate namespaced log levels."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    env_toggle = os.getenv(config_module.DOTENV_ENV_VAR)
    if config_module.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("namespace")
@click.option(
    "--level",
    "-l",
    "levels",
    multiple=True,
    metavar="PATTERN=LEVEL",
    help="Level rule to register; repeatable, later rules win on overlap.",
)
def cli_resolve(namespace: str, levels: tuple[str, ...]) -> None:
    """Print the level NAMESPACE resolves to after applying LOG_LEVELS and --level rules."""

    scribe = _build_scribe(_parse_rule_options(levels))
    try:
        handle = scribe.get_log(namespace)
    except ArgumentError as exc:
        raise click.BadParameter(exc.reason, param_hint="'NAMESPACE'") from exc
    click.echo(f"{namespace} -> {handle.level.severity}")


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--level", "-l", "levels", multiple=True, metavar="PATTERN=LEVEL", help="Level rule to register; repeatable.")
@click.option("--prefix", default=DEFAULT_DEMO_PREFIX, show_default=True, help="PrefixTransform format string.")
@click.option("--no-color", is_flag=True, default=False, help="Disable console styling.")
def cli_demo(levels: tuple[str, ...], prefix: str, no_color: bool) -> None:
    """Emit one message per level from a few sample namespaces.

    Every level is enabled first; LOG_LEVELS and --level rules then narrow it.
    """

    scribe = _build_scribe(_parse_rule_options(levels), base=[("*", LogLevel.TRACE)])
    if no_color or isinstance(scribe.writer, NullWriter):
        scribe.writer = ConsoleWriter(no_color=no_color)
    scribe.transform = PrefixTransform(prefix)
    for namespace in DEMO_NAMESPACES:
        handle = scribe.get_log(namespace)
        for method in LOG_METHODS:
            getattr(handle, method.severity)(f"{method.severity} message")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through ``lib_cli_exit_tools`` and return its exit code.

    ``--traceback`` changes process-wide ``lib_cli_exit_tools.config`` flags;
    they are restored afterwards unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
