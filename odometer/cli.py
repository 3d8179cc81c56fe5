"""Odometer CLI - mechanical odometer simulator."""

import logging
from typing import Optional

import click
import yaml

from .chain import DONE, MAX_VALUE, DigitChain
from .config import ConfigManager
from .state import OdometerState
from .theme import PALETTE, console
from .ui import animate_run, print_card


def _load_config(ctx: click.Context) -> ConfigManager:
    return ConfigManager(ctx.obj.get("config_path"))


def _start_value(config: ConfigManager, start: Optional[int]) -> int:
    if start is not None:
        return start
    try:
        return config.get_start_value()
    except ValueError as e:
        raise click.ClickException(str(e))


def _build_state(config: ConfigManager, start: Optional[int]) -> OdometerState:
    try:
        run_config = config.get_run_config()
    except ValueError as e:
        raise click.ClickException(str(e))
    return OdometerState(start_value=_start_value(config, start), **run_config)


START_VALUE = click.IntRange(0, MAX_VALUE)


# CLI Commands
@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, config_path, verbose):
    """ODOMETER - six-column mechanical odometer simulator.

    Step columns with carry and borrow, run up to 999999 or down to 000000.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@cli.command()
@click.option("--start", "-s", type=START_VALUE, help="Initial value")
@click.pass_context
def tui(ctx, start):
    """Open the interactive odometer."""
    from .app import OdometerTUI

    config = _load_config(ctx)
    try:
        app = OdometerTUI(config=config, start_value=_start_value(config, start))
    except ValueError as e:
        raise click.ClickException(str(e))
    app.run()


@cli.command()
@click.argument("value", type=START_VALUE)
def show(value):
    """Show VALUE on the odometer with its place-value breakdown."""
    print_card(DigitChain.from_value(value))


@cli.command()
@click.argument("direction", type=click.Choice(["up", "down"]))
@click.option("--start", "-s", type=START_VALUE, help="Initial value")
@click.option("--animate", is_flag=True, help="Play the run at its configured pace")
@click.pass_context
def run(ctx, direction, start, animate):
    """Run the odometer UP to 999999 or DOWN to 000000."""
    state = _build_state(_load_config(ctx), start)
    if direction == "up":
        state.on_run_up()
    else:
        state.on_run_down()

    if animate:
        ticks = animate_run(state)
    else:
        ticks = state.runner.run_to_completion()
        print_card(state.chain, state.status)

    style = f"bold {PALETTE.green}" if state.status == DONE else f"dim {PALETTE.text_dim}"
    console.print(f"{ticks} ticks", style=style)


@cli.command()
@click.pass_context
def config(ctx):
    """Show configuration."""
    manager = _load_config(ctx)
    console.print(f"Config file: {manager.config_path}", style=f"bold {PALETTE.cyan}")
    console.print(yaml.dump(manager.data, default_flow_style=False).rstrip() or "(empty)")


if __name__ == "__main__":
    cli()
