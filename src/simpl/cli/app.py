"""Typer CLI entrypoints."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from simpl.config.settings import Settings, load_settings
from simpl.core.ast import Expr
from simpl.core.checker import typecheck
from simpl.core.errors import SimplError
from simpl.eval.small_step import trace_small_step
from simpl.interp import EVALUATORS, interpret, parse
from simpl.logging_utils import configure_logging

app = typer.Typer(name="simpl", help="Small-step and big-step SimPL interpreter", add_completion=False)
SOURCE_REQUIRED_ERROR = "provide exactly one of SOURCE or --file"
NESTING_ERROR = "expression nested too deeply"

SourceArg = Annotated[str | None, typer.Argument(help="Program text.")]
FileOpt = Annotated[
    Path | None,
    typer.Option("--file", "-f", exists=True, dir_okay=False, help="Read the program from a file."),
]


class StrategyName(str, Enum):
    small = "small"
    big = "big"


def _read_source(source: str | None, file: Path | None) -> str:
    if (source is None) == (file is None):
        raise typer.BadParameter(SOURCE_REQUIRED_ERROR)
    if file is not None:
        return file.read_text(encoding="utf-8")
    return source  # type: ignore[return-value]


def _fail(exc: Exception) -> typer.Exit:
    message = NESTING_ERROR if isinstance(exc, RecursionError) else str(exc)
    typer.echo(f"error: {message}", err=True)
    return typer.Exit(1)


def _truncate(text: str, width: int) -> str:
    if not width or len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return load_settings()


@app.callback()
def _main(
    ctx: typer.Context,
    log_filter: Annotated[
        str | None,
        typer.Option("--log-filter", help='Log filter, e.g. "info,simpl.eval=trace".'),
    ] = None,
) -> None:
    settings = load_settings(log_filter=log_filter)
    configure_logging(profile="cli", log_filter=settings.log_filter)
    ctx.obj = settings


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    source: SourceArg = None,
    file: FileOpt = None,
    strategy: Annotated[StrategyName | None, typer.Option("--strategy", "-s")] = None,
    run_check: Annotated[bool | None, typer.Option("--typecheck/--no-typecheck")] = None,
) -> None:
    """Evaluate a program and print its value."""
    settings = _settings(ctx)
    text = _read_source(source, file)
    resolved_strategy = strategy.value if strategy is not None else settings.strategy
    resolved_check = run_check if run_check is not None else settings.typecheck
    logger.info("eval.start strategy={} typecheck={}", resolved_strategy, resolved_check)
    try:
        value = interpret(text, resolved_strategy, typecheck=resolved_check)
    except (SimplError, RecursionError) as exc:
        raise _fail(exc) from exc
    Console(highlight=False).print(str(value), soft_wrap=True)


@app.command()
def trace(ctx: typer.Context, source: SourceArg = None, file: FileOpt = None) -> None:
    """Print every small-step reduct on the way to a value."""
    settings = _settings(ctx)
    console = Console(highlight=False)
    try:
        expr = parse(_read_source(source, file))
        for index, reduct in enumerate(trace_small_step(expr)):
            console.print(f"{index:>4}  {_truncate(str(reduct), settings.trace_width)}", soft_wrap=True)
    except (SimplError, RecursionError) as exc:
        raise _fail(exc) from exc


@app.command()
def compare(source: SourceArg = None, file: FileOpt = None) -> None:
    """Run both strategies and report whether they agree."""
    console = Console(highlight=False)
    try:
        expr = parse(_read_source(source, file))
    except (SimplError, RecursionError) as exc:
        raise _fail(exc) from exc

    outcomes: dict[str, Expr | SimplError] = {}
    for name, evaluate in EVALUATORS.items():
        try:
            outcomes[name] = evaluate(expr)
        except SimplError as exc:
            outcomes[name] = exc
        except RecursionError as exc:
            raise _fail(exc) from exc
        console.print(f"{name:<6} {_describe(outcomes[name])}", soft_wrap=True)

    small, big = outcomes["small"], outcomes["big"]
    if _same_outcome(small, big):
        console.print("[green]agree[/green]")
        return
    console.print("[red]disagree[/red]")
    raise typer.Exit(1)


@app.command()
def check(source: SourceArg = None, file: FileOpt = None) -> None:
    """Type check a program and print its type."""
    try:
        ty = typecheck(parse(_read_source(source, file)))
    except (SimplError, RecursionError) as exc:
        raise _fail(exc) from exc
    Console(highlight=False).print(str(ty))


@app.command("parse")
def parse_command(source: SourceArg = None, file: FileOpt = None) -> None:
    """Print the expression tree of a program."""
    try:
        expr = parse(_read_source(source, file))
    except (SimplError, RecursionError) as exc:
        raise _fail(exc) from exc
    Console(highlight=False).print(repr(expr), soft_wrap=True, markup=False)


def _describe(outcome: Expr | SimplError) -> str:
    if isinstance(outcome, SimplError):
        return f"error: {type(outcome).__name__}: {outcome}"
    return str(outcome)


def _same_outcome(a: Expr | SimplError, b: Expr | SimplError) -> bool:
    if isinstance(a, SimplError) or isinstance(b, SimplError):
        return type(a) is type(b)
    return a == b
