"""Command-line entry point for aoc2024."""

from __future__ import annotations

import logging
import sys

import click

from .commands import list_days as list_cmd
from .commands import run_all as run_all_cmd
from .commands import solve as solve_cmd
from .core.command_utils import format_answer, parse_params
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.registry import DAYS

# Setup logging early so submodules inherit sane defaults; handlers write to stderr.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@click.group()
@click.option(
    "--config",
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="Path to config file (defaults to data_dir/config/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """aoc2024 - Advent of Code 2024 puzzle solvers."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command("solve")
@click.argument("day", type=click.IntRange(1, max(DAYS)))
@click.option(
    "--input",
    "input_path",
    default=None,
    help="Puzzle input file, or '-' for stdin (default: the configured input for DAY)",
)
@click.option(
    "--param",
    "params",
    multiple=True,
    metavar="KEY=VALUE",
    help="Override a solver parameter; may be repeated",
)
@click.pass_context
def solve(ctx: click.Context, day: int, input_path: str | None, params: tuple[str, ...]) -> None:
    """Solve DAY and print part one and part two on separate lines."""
    try:
        part1, part2 = solve_cmd.run(ctx.obj["config_path"], day, input_path, parse_params(params))
        click.echo(format_answer(part1))
        click.echo(format_answer(part2))
    except Exception as exc:
        click.echo(f"❌ Solve command failed: {exc}", err=True)
        sys.exit(1)


@cli.command("run-all")
@click.option("--days", "days", default=None, help="Day selection such as 1,2,5-7 (default: all days)")
@click.pass_context
def run_all(ctx: click.Context, days: str | None) -> None:
    """Solve every selected day that has a puzzle input."""
    try:
        results = run_all_cmd.run(ctx.obj["config_path"], days)
    except Exception as exc:
        click.echo(f"❌ Run-all command failed: {exc}", err=True)
        sys.exit(1)

    for result in results:
        label = f"Day {result.day:02d}"
        if result.status == run_all_cmd.SKIPPED:
            click.echo(f"⏭️  {label}: no input")
        elif result.status == run_all_cmd.FAILED:
            click.echo(f"❌ {label}: {result.error}")
        else:
            part1, part2 = (format_answer(a) for a in result.answers)
            marker = {run_all_cmd.CORRECT: "✅", run_all_cmd.MISMATCH: "❌"}.get(result.status, "  ")
            click.echo(f"{marker} {label}: {part1} {part2} ({result.elapsed:.3f}s)")
            if result.status == run_all_cmd.MISMATCH:
                click.echo(f"   expected: {result.expected[0]} {result.expected[1]}")

    if any(not r.ok for r in results):
        click.echo("❌ Some days failed or did not match the expected answers", err=True)
        sys.exit(1)
    click.echo("✅ Run-all completed successfully")


@cli.command("list")
@click.pass_context
def list_days(ctx: click.Context) -> None:
    """List the puzzle days and whether their inputs are present."""
    try:
        for row in list_cmd.run(ctx.obj["config_path"]):
            marker = "📥" if row["has_input"] else "  "
            click.echo(f"{marker} Day {row['day']:02d}: {row['title']}")
    except Exception as exc:
        click.echo(f"❌ List command failed: {exc}", err=True)
        sys.exit(1)


@cli.command("status")
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show system status and configuration."""
    try:
        config_manager = ConfigManager(ctx.obj["config_path"])
        config_path = config_manager.config_path
        click.echo(f"📄 Config file: {config_path}")

        if config_manager.validate_config():
            click.echo("✅ Configuration is valid")
        else:
            click.echo("❌ Configuration validation failed")
            return

        inputs_dir = config_manager.get_inputs_dir()
        click.echo(f"📂 Inputs directory: {inputs_dir}")

        present = [day for day in DAYS if config_manager.get_input_path(day).is_file()]
        click.echo(f"🧩 Inputs available: {len(present)} of {len(DAYS)} days")

    except Exception as exc:
        click.echo(f"❌ Error checking status: {exc}", err=True)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - script entry
    cli()
