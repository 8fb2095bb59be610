#!filepath: clockspeed/cli.py
from typing import NoReturn, Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from clockspeed import __version__
from clockspeed.config.app_config import AppConfig
from clockspeed.core.types import AdjustResult
from clockspeed.utils.errors import NoMachinesAdjustedError, UserInputError
from clockspeed.utils.format import format_clock_speed
from clockspeed.utils.logger import init_logging

app = typer.Typer(help="Blueprint Clock Speed Adjuster")


def _fail(message) -> NoReturn:
    print(f"[red]Error: {escape(str(message))}[/red]")
    raise typer.Exit(code=1)


def _print_result(result: AdjustResult) -> None:
    if result.machines:
        print(f"Found valid blueprint with {len(result.machines)} machine(s):")
        table = Table("machine", "instance", "clock speed")
        for m in result.machines:
            table.add_row(m.friendly_name, m.instance_name, format_clock_speed(m.current_clock_speed))
        print(table)
    else:
        print("No production machines found in blueprint.")

    table = Table("spec", "matched", "requested")
    for adj in result.adjustments:
        style = "yellow" if adj.matched_count == 0 else "green"
        table.add_row(
            adj.machine_name,
            f"[{style}]{adj.matched_count}[/{style}]",
            format_clock_speed(adj.requested_clock_speed),
        )
    print(table)


@app.command()
def version():
    print(__version__)


@app.command()
def machines(
        config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
):
    """
    List supported machine names and their type paths
    """
    from clockspeed.workflows.adjust_workflow import build_registry

    try:
        cfg = AppConfig.load(config)
    except UserInputError as e:
        _fail(e)

    table = Table("machine", "type path")
    for d in build_registry(cfg).definitions():
        table.add_row(d.friendly_name, d.type_path)
    print(table)


@app.command()
def adjust(
        blueprint: str = typer.Argument(..., help="Blueprint base path (expects <path>.sbp and <path>.sbpcfg)"),
        specs: str = typer.Argument(..., help='Comma separated "MachineName:clockspeed" pairs, e.g. "Refinery:2,Manufacturer:3.66"'),
        output: Optional[str] = typer.Argument(None, help="Output base path (default <blueprint>_modified)"),
        config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
):
    """
    Adjust clock speeds of production machines in a blueprint
    """
    from clockspeed.workflows.adjust_workflow import run_adjust

    print("[bold]=== Blueprint Clock Speed Adjuster ===[/bold]")

    try:
        cfg = AppConfig.load(config)
        init_logging(cfg.log)
        ctx = run_adjust(blueprint, specs, output, cfg=cfg)
    except NoMachinesAdjustedError as e:
        if e.result is not None:
            _print_result(e.result)
        _fail(e)
    except UserInputError as e:
        _fail(e)

    _print_result(ctx.result)

    # nothing was written: still a failed run
    if ctx.abort_pipeline:
        _fail(ctx.abort_reason)

    print("Successfully wrote modified blueprint to:")
    for path in ctx.written_files:
        print(f"  {path}")


if __name__ == "__main__":
    app()

# python -m clockspeed.cli adjust ./MyBlueprint "Refinery:2,Manufacturer:3.66"
