"""AChatBot CLI - interactive task list."""

import logging
import sys

import click

from .adapters.console import ConsoleLineSink, ConsoleLineSource
from .config import load_config
from .session import run_session


@click.command()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a key = value config file",
)
def main(debug: bool, config_path: str | None):
    """Chat with AChatBot to manage todos, deadlines and events."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        config = load_config(config_path)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: could not read config: {e}", err=True)
        sys.exit(1)

    source = ConsoleLineSource(prompt=config.prompt)
    run_session(source, ConsoleLineSink(), config=config)


if __name__ == "__main__":
    main()
