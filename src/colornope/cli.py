"""Click CLI entry point for colornope.

Provides `check` and `explain` subcommands. When invoked without a
subcommand (e.g. `python -m colornope`), defaults to `check`.
"""

from __future__ import annotations

import os
from collections.abc import Callable

import click

from colornope.core.config import ColornopeSettings
from colornope.core.logging import configure_logging, get_logger
from colornope.decision import (
    ColorDecision,
    OverrideState,
    Stream,
    term_allows_color,
)
from colornope.terminal import SystemTerminal

_LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def _decision_options(func: Callable[..., None]) -> Callable[..., None]:
    """Attach the stream and override options shared by every subcommand."""
    func = click.option(
        "--no-color", "no_color", is_flag=True, default=False, help="Force color off"
    )(func)
    func = click.option(
        "--force-color", is_flag=True, default=False, help="Force color on, even when piped"
    )(func)
    func = click.option(
        "--stream",
        type=click.Choice([s.value for s in Stream]),
        default=Stream.STDOUT.value,
        show_default=True,
        help="Stream the color decision is for",
    )(func)
    return func


def _build_decision(force_color: bool, no_color: bool) -> ColorDecision:
    """Snapshot TERM and NO_COLOR, with the override taken from our own flags."""
    if force_color and no_color:
        raise click.UsageError("--force-color and --no-color are mutually exclusive")
    override = None
    if force_color:
        override = OverrideState.FORCE_ON
    elif no_color:
        override = OverrideState.FORCE_OFF
    return ColorDecision(
        terminal_kind=os.environ.get("TERM"),
        no_color_signal=os.environ.get("NO_COLOR"),
        override=override,
    )


def _setup(ctx: click.Context, decision: ColorDecision) -> None:
    settings: ColornopeSettings = ctx.obj
    configure_logging(settings.log_level, decision)


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override COLORNOPE_LOG_LEVEL",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """colornope: should this program print color?"""
    settings = ColornopeSettings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level.lower()})
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        ctx.invoke(check)


@cli.command()
@_decision_options
@click.option(
    "--exit-code", is_flag=True, default=False, help="Exit 1 when color is disabled"
)
@click.pass_context
def check(
    ctx: click.Context, stream: str, force_color: bool, no_color: bool, exit_code: bool
) -> None:
    """Print whether color is enabled for a stream."""
    decision = _build_decision(force_color, no_color)
    _setup(ctx, decision)
    log = get_logger(component="cli")

    terminal = SystemTerminal()
    target = Stream(stream)
    enabled = decision.enable_color_for(target, terminal)
    log.debug(
        "color_decision",
        stream=target.value,
        enabled=enabled,
        term=decision.terminal_kind,
        no_color_set=decision.no_color_signal is not None,
        override=decision.override.value if decision.override else None,
    )

    stdout_color = decision.enable_color_for(Stream.STDOUT, terminal)
    label = "enabled" if enabled else "disabled"
    if stdout_color:
        label = click.style(label, fg="green") if enabled else click.style(label, dim=True)
    click.echo(label, color=stdout_color)

    if exit_code and not enabled:
        ctx.exit(1)


@cli.command()
@_decision_options
@click.pass_context
def explain(ctx: click.Context, stream: str, force_color: bool, no_color: bool) -> None:
    """Show every input to the color decision and the result."""
    decision = _build_decision(force_color, no_color)
    _setup(ctx, decision)

    terminal = SystemTerminal()
    target = Stream(stream)

    # The TTY check is skipped entirely when an override applies
    if decision.override is None:
        tty = "yes" if terminal.is_interactive(target) else "no"
    else:
        tty = "not checked"
    policy = term_allows_color(decision.platform, decision.terminal_kind)
    enabled = decision.enable_color_for(target, terminal)

    rows = [
        ("TERM", decision.terminal_kind if decision.terminal_kind is not None else "(unset)"),
        ("NO_COLOR", "set" if decision.no_color_signal is not None else "unset"),
        ("override", decision.override.value if decision.override else "none"),
        ("platform", decision.platform.value),
        ("stream", target.value),
        ("tty", tty),
        ("term policy", "allows color" if policy else "disallows color"),
        ("result", "enabled" if enabled else "disabled"),
    ]
    width = max(len(name) for name, _ in rows)
    for name, value in rows:
        click.echo(f"{name:<{width}}  {value}")
