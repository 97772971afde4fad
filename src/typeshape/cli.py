"""
Command Line Interface for typeshape.

Reads a JSON document, infers its type and writes it as a declaration.
"""
import logging
from typing import Optional

import click
import yaml

from .config import DriverSettings, load_config
from .core.errors import TypeshapeError
from .core.infer import infer
from .core.log import configure_logging
from .core.render import declare
from .core.sampling import SamplingStrategy


@click.command()
@click.option(
    "--input-file",
    "input_file",
    type=click.File("rb"),
    default="-",
    help="Path to a JSON file to read (reads from stdin by default).",
)
@click.option(
    "--output-file",
    "output_file",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Path to a file to write the declaration to (writes to stdout by default).",
)
@click.option("--name", "name", type=str, default=None, help="Name of the declared type.")
@click.option(
    "--strategy",
    "strategy",
    type=click.Choice([s.value for s in SamplingStrategy]),
    default=None,
    help="Which array elements to sample.",
)
@click.option("--indent", "indent", type=click.IntRange(min=0), default=None,
              help="Spaces per nesting level in object literals.")
@click.option("--compact", "compact", is_flag=True, default=False,
              help="Render object literals on a single line.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML configuration file.",
)
@click.option("--verbose", "verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(
    input_file,
    output_file,
    name: Optional[str],
    strategy: Optional[str],
    indent: Optional[int],
    compact: bool,
    config_path: Optional[str],
    verbose: bool,
):
    """Infer a type declaration from a JSON document."""
    configure_logging(logging.DEBUG if verbose else logging.INFO)

    if compact:
        indent = 0
    try:
        settings = DriverSettings.from_config(
            load_config(config_path), name=name, strategy=strategy, indent=indent
        )
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    try:
        inferred = infer(input_file.read(), settings.strategy)
    except TypeshapeError as e:
        raise click.ClickException(str(e))

    output_file.write(declare(inferred, settings.name, settings.indent) + "\n")


if __name__ == "__main__":
    cli()
