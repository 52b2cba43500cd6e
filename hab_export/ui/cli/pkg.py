"""
CLI commands for package export.

Thin wrappers over ``hab_export.core.services.export``.
"""

from __future__ import annotations

import json
import sys

import click

# Exit codes for the typed export failures
EXIT_ERROR = 1
EXIT_UNSUPPORTED_FORMAT = 2
EXIT_SUBCOMMAND_NOT_SUPPORTED = 3


def _load_settings(ctx: click.Context, **overrides):
    from hab_export.core.config.loader import ConfigError, load_settings

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(EXIT_ERROR)
    return settings.with_overrides(**overrides)


def _build_pipeline(ctx: click.Context, settings):
    """Pipeline for this platform.

    ``ctx.obj`` may carry ``installer``, ``process`` and ``system``
    overrides (used by tests and embedding callers).
    """
    from hab_export.adapters import CommandInstaller, ExecveProcess
    from hab_export.core.services.export import select_pipeline

    installer = ctx.obj.get("installer") or CommandInstaller(settings.installer_command)
    process = ctx.obj.get("process") or ExecveProcess()
    return select_pipeline(
        installer,
        process,
        fs_root=settings.fs_root,
        cache_path=settings.artifact_cache,
        system=ctx.obj.get("system"),
    )


@click.group()
def pkg() -> None:
    """Packages — export to other formats."""


@pkg.command("export-formats")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def export_formats(as_json: bool) -> None:
    """List the export formats and their helper packages."""
    from hab_export.core.services.export import EXPORT_FORMATS

    if as_json:
        click.echo(json.dumps(
            [{"format": k, "package": p, "command": c} for k, (p, c) in EXPORT_FORMATS.items()],
            indent=2,
        ))
        return

    click.secho("📦 Export formats:", fg="cyan", bold=True)
    for keyword, (package, _command) in EXPORT_FORMATS.items():
        click.echo(f"   {keyword:<10} {package}")


@pkg.command("export")
@click.argument("format_type", metavar="FORMAT")
@click.argument("pkg_ident", metavar="PKG_IDENT")
@click.option("--url", "-u", default=None, help="Registry URL for the package to export.")
@click.option("--channel", "-c", default=None, help="Registry channel for the package to export.")
@click.option("--helper-url", default=None, help="Registry URL to install the export helper from.")
@click.option("--helper-channel", default=None, help="Registry channel to install the export helper from.")
@click.option("--dry-run", is_flag=True, help="Resolve and report, but do not install or exec.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="With --dry-run, output as JSON.")
@click.pass_context
def export(
    ctx: click.Context,
    format_type: str,
    pkg_ident: str,
    url: str | None,
    channel: str | None,
    helper_url: str | None,
    helper_channel: str | None,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Export PKG_IDENT to FORMAT (docker, aci, mesos, tar).

    The matching helper package is installed when missing, then takes
    over this process.
    """
    from hab_export.core.errors import ExportError, SubcommandNotSupported, UnsupportedFormat
    from hab_export.core.models import PackageIdent
    from hab_export.ui.console import UI

    settings = _load_settings(
        ctx,
        bldr_url=url,
        bldr_channel=channel,
        helper_url=helper_url,
        helper_channel=helper_channel,
    )
    ui = UI(quiet=ctx.obj.get("quiet", False))
    pipeline = _build_pipeline(ctx, settings)

    try:
        ident = PackageIdent.from_str(pkg_ident)
        export_format = pipeline.format_for(ui, format_type)
    except UnsupportedFormat as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(EXIT_UNSUPPORTED_FORMAT)
    except ExportError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(EXIT_ERROR)

    if dry_run:
        _report_plan(settings, ident, export_format, as_json)
        return

    try:
        pipeline.start(
            ui,
            settings.bldr_url,
            settings.bldr_channel,
            settings.helper_url,
            settings.helper_channel,
            ident,
            export_format,
            argv=ctx.command_path.split(),
        )
    except SubcommandNotSupported as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(EXIT_SUBCOMMAND_NOT_SUPPORTED)
    except (ExportError, OSError) as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(EXIT_ERROR)


def _report_plan(settings, ident, export_format, as_json: bool) -> None:
    from hab_export.core.config.loader import BLDR_CHANNEL_ENVVAR, BLDR_URL_ENVVAR
    from hab_export.core.services.export.presence import is_installed

    helper = export_format.helper_identifier
    plan = {
        "package": str(ident),
        "helper": str(helper),
        "command": export_format.helper_command,
        "helper_installed": is_installed(helper, settings.fs_root),
        "helper_url": settings.helper_url,
        "helper_channel": settings.helper_channel,
        "env": {
            BLDR_URL_ENVVAR: settings.bldr_url,
            BLDR_CHANNEL_ENVVAR: settings.bldr_channel,
        },
    }

    if as_json:
        click.echo(json.dumps(plan, indent=2))
        return

    icon = "✅" if plan["helper_installed"] else "⬇️ "
    click.secho(f"📦 {plan['package']} → {plan['command']}", fg="cyan", bold=True)
    click.echo(f"   {icon} helper {plan['helper']} ({plan['helper_url']}, {plan['helper_channel']})")
    for key, value in plan["env"].items():
        click.echo(f"   {key}={value}")
