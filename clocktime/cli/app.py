"""
Main CLI application using Typer.
"""

import logging
from datetime import timedelta
from pathlib import Path
from typing import Annotated, Optional

import typer
from pendulum import Duration
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import InvalidTimeFormatError
from ..domain.models import ClockTime, duration_between
from ..services.schedule import ScheduleService

app = typer.Typer(
    name="clocktime",
    help="Work with times of day: parse, compare, shift and check daily windows.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj


def _parse_or_exit(value: str, label: str = "time") -> ClockTime:
    try:
        return ClockTime.parse(value)
    except InvalidTimeFormatError as e:
        err_console.print(f"[bold red]Error:[/bold red] invalid {label}: {e}")
        raise typer.Exit(1)


def _format_duration(duration: timedelta) -> str:
    total = int(duration.total_seconds())
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours}h {minutes:02d}m {seconds:02d}s"


def _shift(hours: int, minutes: int, seconds: int) -> timedelta:
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./clocktime.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level.")] = False,
):
    """
    clocktime - times of day without dates.
    """
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@app.command()
def now(
    ctx: typer.Context,
    tz: Annotated[Optional[str], typer.Option("--tz", help="IANA timezone name. Unknown names fall back to the configured fallback zone.")] = None,
):
    """
    Show the current time of day.
    """
    config = _config(ctx)
    current = ClockTime.now(tz or config.timezone, resolver=config.build_resolver())
    console.print(str(current))


@app.command()
def today(
    ctx: typer.Context,
    time: Annotated[str, typer.Argument(help="Time of day (hh:mm:ss)")],
    tz: Annotated[Optional[str], typer.Option("--tz", help="IANA timezone name.")] = None,
):
    """
    Anchor a time of day to today's date.
    """
    config = _config(ctx)
    value = _parse_or_exit(time)
    moment = value.today(tz or config.timezone, resolver=config.build_resolver())
    console.print(moment.to_iso8601_string())


@app.command()
def add(
    time: Annotated[str, typer.Argument(help="Time of day (hh:mm:ss)")],
    hours: Annotated[int, typer.Option("--hours", "-H")] = 0,
    minutes: Annotated[int, typer.Option("--minutes", "-M")] = 0,
    seconds: Annotated[int, typer.Option("--seconds", "-S")] = 0,
):
    """
    Add a duration to a time of day, wrapping past midnight.
    """
    value = _parse_or_exit(time)
    console.print(str(value.add(_shift(hours, minutes, seconds))))


@app.command()
def sub(
    time: Annotated[str, typer.Argument(help="Time of day (hh:mm:ss)")],
    hours: Annotated[int, typer.Option("--hours", "-H")] = 0,
    minutes: Annotated[int, typer.Option("--minutes", "-M")] = 0,
    seconds: Annotated[int, typer.Option("--seconds", "-S")] = 0,
):
    """
    Subtract a duration from a time of day, wrapping past midnight.
    """
    value = _parse_or_exit(time)
    console.print(str(value.subtract(_shift(hours, minutes, seconds))))


@app.command()
def between(
    start: Annotated[str, typer.Argument(help="Start time (hh:mm:ss)")],
    end: Annotated[str, typer.Argument(help="End time (hh:mm:ss); taken as the next day if before start")],
):
    """
    Show the duration from START to END.
    """
    duration = duration_between(_parse_or_exit(start, "start"), _parse_or_exit(end, "end"))
    console.print(_format_duration(duration))


@app.command()
def within(
    time: Annotated[str, typer.Argument(help="Time of day (hh:mm:ss)")],
    start: Annotated[str, typer.Argument(help="Start of range (hh:mm:ss)")],
    end: Annotated[str, typer.Argument(help="End of range (hh:mm:ss)")],
):
    """
    Check whether TIME falls between START and END.

    Exits with status 1 when it does not.
    """
    value = _parse_or_exit(time)
    inside = value.within(_parse_or_exit(start, "start"), _parse_or_exit(end, "end"))
    if inside:
        console.print("[green]yes[/green]")
    else:
        console.print("[yellow]no[/yellow]")
        raise typer.Exit(1)


@app.command("open")
def open_(
    ctx: typer.Context,
    tz: Annotated[Optional[str], typer.Option("--tz", help="IANA timezone name.")] = None,
):
    """
    Show whether the configured business hours are open right now.
    """
    config = _config(ctx)
    service = ScheduleService(
        config.business_window(),
        timezone=tz or config.timezone,
        resolver=config.build_resolver(),
    )
    window = service.window
    start, end = service.todays_bounds()

    table = Table(title=window.name or "Daily window", show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Window", f"{window.start} - {window.end}")
    table.add_row("Timezone", service.zone_name)
    now = service.current_time()
    table.add_row("Now", str(now))
    table.add_row("Today", f"{start.to_datetime_string()} - {end.to_datetime_string()}")

    remaining: Optional[Duration] = service.time_until_close(now)
    if remaining is not None:
        table.add_row("Status", "[bold green]open[/bold green]")
        table.add_row("Closes in", _format_duration(remaining))
    else:
        table.add_row("Status", "[bold yellow]closed[/bold yellow]")
        table.add_row("Opens in", _format_duration(service.time_until_open(now)))

    console.print(table)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"[bold cyan]clocktime[/bold cyan] version [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
