"""
hab-export — CLI entrypoint.

Usage:
    hab-export --help
    hab-export pkg export tar core/redis
    hab-export pkg export-formats
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from hab_export import __version__
from hab_export.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="hab-export")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress status lines.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to an export settings YAML file.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """hab-export — export packages through format helper packages."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug, verbose, quiet, os.environ.get("HAB_EXPORT_LOG_LEVEL")),
        log_file=os.environ.get("HAB_EXPORT_LOG_FILE"),
        log_file_level=os.environ.get("HAB_EXPORT_LOG_FILE_LEVEL"),
    )


# ── Register sub-command groups from hab_export/ui/cli/ ───────────

from hab_export.ui.cli.pkg import pkg  # noqa: E402

cli.add_command(pkg)


def main() -> None:
    cli(prog_name="hab-export")


if __name__ == "__main__":
    main()
