"""srcfetch CLI entrypoint.

Command-line interface for checking out and updating source repositories.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path

import click

from srcfetch.core.errors import SrcfetchCliError
from srcfetch.domain.exceptions import SrcfetchError
from srcfetch.ports.vcs import VcsBackend
from srcfetch.version import __version__


def handle_cli_errors(command_name: str):
    """Decorator converting srcfetch errors into CLI errors.

    SrcfetchError keeps its message and hint. Unexpected exceptions get a
    generic message, with the traceback printed in verbose mode.

    Args:
        command_name: Name of the command for error messages.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (SrcfetchCliError, click.exceptions.Exit):
                raise
            except SrcfetchError as e:
                raise SrcfetchCliError(e.message, hint=e.hint) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise SrcfetchCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _create_backend(ctx: click.Context, vcs_name: str | None) -> VcsBackend:
    """Build the backend for --vcs, or for the configured default.

    Raises:
        UnsupportedVcsError: If vcs_name names no known VCS.
    """
    from srcfetch.adapters.factory import BackendFactory, ConfigFactory
    from srcfetch.domain.entities import VcsKind

    config = ConfigFactory().load(Path.cwd())
    kind = VcsKind.parse(vcs_name) if vcs_name is not None else None
    return BackendFactory(config, force_debug=ctx.obj.get("debug", False)).create_backend(kind)


vcs_option = click.option(
    "--vcs",
    "vcs_name",
    default=None,
    metavar="KIND",
    help="VCS to use: git, hg or svn (default: from config).",
)


@click.group()
@click.version_option(version=__version__, prog_name="srcfetch")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Print each external command and its directory before running it.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """srcfetch - fetch and update source checkouts."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("remote")
@click.argument("path", type=click.Path(path_type=Path))
@vcs_option
@click.pass_context
@handle_cli_errors("exists")
def exists(ctx: click.Context, remote: str, path: Path, vcs_name: str | None) -> None:
    """Check whether PATH is a checkout of REMOTE.

    Prints "yes" and exits 0, or prints "no" and exits 1.
    """
    backend = _create_backend(ctx, vcs_name)
    if backend.exists(remote, path):
        click.echo("yes")
    else:
        click.echo("no")
        ctx.exit(1)


@cli.command()
@click.argument("remote")
@click.argument("path", type=click.Path(path_type=Path))
@vcs_option
@click.pass_context
@handle_cli_errors("checkout")
def checkout(ctx: click.Context, remote: str, path: Path, vcs_name: str | None) -> None:
    """Check out REMOTE into PATH."""
    backend = _create_backend(ctx, vcs_name)
    backend.checkout(remote, path.absolute())
    click.echo(f"Checked out {remote} into {path}")


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@vcs_option
@click.pass_context
@handle_cli_errors("fetch")
def fetch(ctx: click.Context, path: Path, vcs_name: str | None) -> None:
    """Fetch remote changes for the checkout at PATH without applying them."""
    _create_backend(ctx, vcs_name).fetch(path)


@cli.command()
@click.argument("path", type=click.Path(path_type=Path))
@vcs_option
@click.pass_context
@handle_cli_errors("update")
def update(ctx: click.Context, path: Path, vcs_name: str | None) -> None:
    """Apply fetched changes to the checkout at PATH."""
    _create_backend(ctx, vcs_name).update(path)


@cli.command()
@click.argument("remote")
@click.argument("path", type=click.Path(path_type=Path))
@vcs_option
@click.pass_context
@handle_cli_errors("sync")
def sync(ctx: click.Context, remote: str, path: Path, vcs_name: str | None) -> None:
    """Check out REMOTE into PATH, or fetch and update an existing checkout."""
    from srcfetch.core.sync import SyncCheckoutRequest, SyncCheckoutUseCase
    from srcfetch.domain.entities import RepositoryLocation

    backend = _create_backend(ctx, vcs_name)
    location = RepositoryLocation(remote=remote, path=path.absolute(), kind=backend.kind)
    response = SyncCheckoutUseCase(backend).execute(SyncCheckoutRequest(location=location))
    if not response.success:
        raise SrcfetchCliError(response.error or "sync failed", hint=response.hint)
    if response.action == "checked_out":
        click.echo(f"Checked out {remote} into {path}")
    else:
        click.echo(f"Updated {path}")


@cli.group()
def config() -> None:
    """Manage srcfetch configuration."""


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
@handle_cli_errors("config init")
def config_init(ctx: click.Context, force: bool) -> None:
    """Write a default .srcfetch/config.toml in the current directory."""
    from srcfetch.shared.config_io import create_default_config_file, get_local_config_path

    path = get_local_config_path(Path.cwd())
    if path.exists() and not force:
        raise SrcfetchCliError(
            f"Config already exists at {path}",
            hint="Use --force to overwrite it",
        )
    create_default_config_file(path)
    click.echo(f"Created {path}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
