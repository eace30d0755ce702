"""CLI behaviour coverage for the rich-click adapter."""

from __future__ import annotations

import re
import sys
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_scribe import __init__conf__
from lib_log_scribe import cli as cli_mod
from lib_log_scribe import config as log_config

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def _clean_log_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        log_config.LEVELS_ENV_VAR,
        log_config.NO_COLOR_ENV_VAR,
        log_config.FORCE_COLOR_ENV_VAR,
        log_config.PREFIX_ENV_VAR,
        log_config.DOTENV_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [], prog_name=__init__conf__.shell_command)

    assert result.exit_code == 0
    assert result.output == cli_mod.summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])

    assert result.exit_code == 0
    assert result.output == cli_mod.summary_info()
    assert result.output.startswith("Info for lib_log_scribe:")


def test_cli_version_prints_bare_version() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    result = CliRunner().invoke(cli_mod.cli, ["--no-traceback", "info"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_resolve_defaults_to_error() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["resolve", "app:db"])

    assert result.exit_code == 0
    assert result.output.strip() == "app:db -> error"


def test_cli_resolve_later_rules_win() -> None:
    result = CliRunner().invoke(
        cli_mod.cli,
        ["resolve", "app:db/query", "-l", "app:*=info", "-l", "app:db/*=trace"],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "app:db/query -> trace"


def test_cli_resolve_reads_level_environment() -> None:
    result = CliRunner().invoke(
        cli_mod.cli,
        ["resolve", "app", "-l", "app=debug"],
        env={log_config.LEVELS_ENV_VAR: "*=warn,app=info"},
    )

    assert result.exit_code == 0
    assert result.output.strip() == "app -> debug"


def test_cli_resolve_rejects_bad_namespace() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["resolve", "app.db"])

    assert result.exit_code == 2
    assert "NAMESPACE" in strip_ansi(result.output)


def test_cli_resolve_rejects_bad_rule() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["resolve", "app", "-l", "app=shout"])

    assert result.exit_code == 2
    assert "--level" in strip_ansi(result.output)


def test_cli_demo_prints_every_level() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--no-color"])

    assert result.exit_code == 0
    lines = strip_ansi(result.output).splitlines()
    assert "[TRACE] app - trace message" in lines
    assert "[ERROR] app:db - error message" in lines
    assert "[WARN] app:db/query - warn message" in lines
    assert len(lines) == 15


def test_cli_demo_honours_rules_and_prefix() -> None:
    result = CliRunner().invoke(
        cli_mod.cli,
        ["demo", "--no-color", "-l", "app:*=warn", "--prefix", "%n|%m: "],
    )

    assert result.exit_code == 0
    lines = strip_ansi(result.output).splitlines()
    assert "app|trace: trace message" in lines
    assert "app:db|warn: warn message" in lines
    assert "app:db|info: info message" not in lines
    assert len(lines) == 5 + 2 + 2


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()
    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)

    result = runner.invoke(cli_mod.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_mod.cli, ["info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_mod.cli, ["--no-use-dotenv", "info"], env={log_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert calls == []


def test_main_returns_zero_for_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __init__conf__.version


def test_main_reports_usage_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["resolve", "bad.namespace"]) == 2
    assert "NAMESPACE" in strip_ansi(capsys.readouterr().err)


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main()

    assert exit_code == 0
    assert "Info for lib_log_scribe" in capsys.readouterr().out


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, [] if argv is None else argv, prog_name=prog_name)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "traceback_force_color": True}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_restores_traceback_preferences_after_real_run(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    assert cli_mod.main(["--traceback", "info"]) == 0

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_can_keep_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    assert cli_mod.main(["--traceback", "info"], restore_traceback=False) == 0

    assert lib_cli_exit_tools.config.traceback is True
