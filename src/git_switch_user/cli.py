"""CLI interface for git-switch-user."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from git_switch_user import __version__
from git_switch_user.backends import create_backend
from git_switch_user.config import STORE_ENV_VAR
from git_switch_user.errors import GitSwitchUserError, ProfileNotFound
from git_switch_user.profiles import Profile, ProfileStore
from git_switch_user.sync import activate, current_email


def styled(text: str, **kwargs) -> str:
    return click.style(text, **kwargs)


def info(msg: str) -> None:
    click.echo(f"  {msg}")


def success(msg: str) -> None:
    click.echo(f"  {styled(msg, fg='green')}")


def warn(msg: str) -> None:
    click.echo(f"  {styled(msg, fg='yellow')}")


def error(msg: str) -> None:
    click.echo(f"  {styled(msg, fg='red')}", err=True)


def non_empty(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("The value cannot be empty")
    return value


class EchoHandler(logging.Handler):
    """Route library log records through the styled echo helpers."""

    def emit(self, record: logging.LogRecord) -> None:
        msg = self.format(record)
        if record.levelno >= logging.ERROR:
            error(msg)
        elif record.levelno >= logging.WARNING:
            warn(msg)
        elif record.levelno >= logging.INFO:
            info(msg)
        else:
            info(styled(msg, dim=True))


def setup_logging(verbose: bool) -> None:
    logger = logging.getLogger("git_switch_user")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(h, EchoHandler) for h in logger.handlers):
        logger.addHandler(EchoHandler())


class AliasedGroup(click.Group):
    """Group with single-letter command aliases that reports errors cleanly."""

    aliases = {"l": "list", "c": "create", "d": "delete", "s": "set"}

    def get_command(self, ctx: click.Context, cmd_name: str):
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]):
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except GitSwitchUserError as e:
            error(str(e))
            ctx.exit(1)


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="git-switch-user")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=STORE_ENV_VAR,
    default=None,
    help="Profile store file.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, store_path: Path | None) -> None:
    """Switch between git identities per repository or globally."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["store"] = ProfileStore(store_path)
    ctx.obj["backend"] = create_backend("git")

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_cmd)


@cli.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List the available profiles."""
    store: ProfileStore = ctx.obj["store"]
    profiles = store.get_all()
    active_email = current_email(ctx.obj["backend"])

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("User")
    table.add_column("Email")
    table.add_column("Sign", justify="center")
    table.add_column("Key")
    table.add_column("SSH Key", overflow="fold")

    for p in profiles:
        name = f"* {p.name}" if p.email == active_email else p.name
        table.add_row(
            name,
            p.user,
            p.email,
            "✓" if p.signing else "X",
            p.key or "",
            p.ssh_key or "",
        )

    Console().print(table)


@cli.command()
@click.pass_context
def create(ctx: click.Context) -> None:
    """Create a new profile."""
    store: ProfileStore = ctx.obj["store"]

    name = click.prompt("Profile name", value_proc=non_empty)
    user = click.prompt("Git user", value_proc=non_empty)
    email = click.prompt("Git email", value_proc=non_empty)

    signing = click.confirm("Sign commits?", default=False)
    key = None
    if signing:
        key = click.prompt("Key fingerprint", value_proc=non_empty)

    ssh_key = None
    if click.confirm("Use custom ssh key?", default=False):
        ssh_key = click.prompt("Path to the SSH key", value_proc=non_empty)

    store.create(
        Profile(
            name=name,
            user=user,
            email=email,
            signing=signing,
            key=key,
            ssh_key=ssh_key,
        )
    )


@cli.command()
@click.argument("profile")
@click.pass_context
def delete(ctx: click.Context, profile: str) -> None:
    """Delete a profile."""
    store: ProfileStore = ctx.obj["store"]
    store.remove(profile)


@cli.command("set")
@click.argument("profile")
@click.option(
    "--global", "-g", "global_", is_flag=True, help="Set the profile globally."
)
@click.pass_context
def set_cmd(ctx: click.Context, profile: str, global_: bool) -> None:
    """Set the current profile."""
    store: ProfileStore = ctx.obj["store"]
    p = store.find_by_name(profile)
    if p is None:
        raise ProfileNotFound(profile)

    activate(p, ctx.obj["backend"], global_=global_)
    scope = "globally" if global_ else "for this repository"
    success(f"Switched to {p.name} ({p.user} <{p.email}>) {scope}")
