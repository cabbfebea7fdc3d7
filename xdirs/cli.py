"""Command line for inspecting the directories xdirs computes."""

from __future__ import annotations

import json

import click

from .errors import ErrorHandlingGroup
from .kinds import DirectoryKind
from .logging import XdirsError, configure_logging, get_logger
from .paths import AppDirs
from .platforms import Platform, current_platform
from .rules import rule_for

logger = get_logger(__name__)

KIND_CHOICES = [kind.value for kind in DirectoryKind]


@click.group(cls=ErrorHandlingGroup)
@click.version_option(package_name="xdirs")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging to stderr")
@click.option(
    "--json-log",
    metavar="FILE",
    envvar="XDIRS_LOG",
    default=None,
    help='Also write JSON log lines to FILE ("-" for stderr)',
)
@click.option(
    "--platform",
    "platform_name",
    metavar="NAME",
    envvar="XDIRS_PLATFORM",
    default=None,
    help="Compute paths for another platform: linux, windows or macos",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_log: str | None, platform_name: str | None):
    """xdirs: standard application directories for this platform."""
    configure_logging(verbose=verbose, json_log=json_log)
    platform = Platform.parse(platform_name) if platform_name else current_platform()
    logger.debug("Selected platform", platform=platform.value)
    ctx.obj = AppDirs(platform=platform)


@cli.command()
@click.argument("app")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def show(dirs: AppDirs, app: str, as_json: bool):
    """Show every directory for APP.

    Directories the platform does not define are shown as "-".
    """
    paths = dirs.describe(app)
    if as_json:
        payload = {
            kind.value: str(path) if path is not None else None
            for kind, path in paths.items()
        }
        click.echo(json.dumps(payload, indent=2))
        return
    width = max(len(kind.value) for kind in paths)
    for kind, path in paths.items():
        click.echo(f"{kind.value:<{width}}  {path if path is not None else '-'}")


@cli.command()
@click.argument("kind", type=click.Choice(KIND_CHOICES))
@click.argument("app", required=False)
@click.pass_obj
def get(dirs: AppDirs, kind: str, app: str | None):
    """Print the KIND directory, for APP where the kind needs one.

    \b
    Examples:
        xdirs get config acme
        xdirs get application
    """
    directory_kind = DirectoryKind(kind)
    if directory_kind.takes_app_name and app is None:
        raise click.UsageError(f"{kind} requires an APP argument")
    path = dirs.resolve(directory_kind, app)
    if path is None:
        target = f" for {app!r}" if directory_kind.takes_app_name else ""
        raise XdirsError(f"No {kind} directory{target} on {dirs.platform.value}")
    click.echo(str(path))


@cli.command()
@click.pass_obj
def kinds(dirs: AppDirs):
    """List directory kinds and whether this platform supports them."""
    width = max(len(value) for value in KIND_CHOICES)
    for kind in DirectoryKind:
        supported = rule_for(dirs.platform, kind) is not None
        status = (
            click.style("yes", fg="green") if supported else click.style("no", fg="yellow")
        )
        notes = []
        if kind.has_generic_form:
            notes.append("generic")
        if kind.takes_app_name:
            notes.append("per-app")
        click.echo(f"{kind.value:<{width}}  {status}  {', '.join(notes)}".rstrip())
