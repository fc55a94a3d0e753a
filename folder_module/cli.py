"""Click CLI: folder-module INPUT_DIR [OUT_FILE]."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from folder_module import __version__
from folder_module.config import ModuleConfig
from folder_module.errors import ConfigurationError
from folder_module.pipeline import folder_module


@click.command()
@click.version_option(version=__version__)
@click.argument("input_dir", type=click.Path())
@click.argument("out_file", type=click.Path(dir_okay=False, path_type=Path), required=False)
@click.option("--verbose", "-v", is_flag=True, help="Log every file as it is processed")
def cli(input_dir: str, out_file: Path | None, verbose: bool):
    """Write an index module re-exporting every file in INPUT_DIR.

    OUT_FILE defaults to INPUT_DIR/index.js.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = ModuleConfig(out_file=out_file)
    try:
        # Path("") would silently become the current directory
        if not input_dir:
            raise ConfigurationError("Input directory must be specified")
        module = folder_module(input_dir, config)
    except Exception as e:
        click.echo(click.style(str(e), fg="red"))
        raise SystemExit(1)

    click.echo(f"Wrote {module.exports} export(s) to {module.out_file}")


if __name__ == "__main__":
    cli()
