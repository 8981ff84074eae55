"""Main CLI interface for snapvcs."""

from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from snapvcs.core.errors import SvcsError, UnknownCommandError
from snapvcs.core.repository import SvcsRepository
from snapvcs.utils.logging import setup_logging

console = Console()


def say(text: str) -> None:
    """Print user-facing text verbatim, without markup or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def fail_with_io_error(error: OSError) -> None:
    """Report a fatal filesystem error and abort the command."""
    console.print(f"[red]Error: {escape(str(error))}[/red]", emoji=False, soft_wrap=True)
    raise click.Abort() from error


class SvcsGroup(click.Group):
    """Command group that reports unknown commands instead of failing."""

    def resolve_command(self, ctx, args):
        name = args[0] if args else ""
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            say(str(UnknownCommandError(name)))
            ctx.exit(0)
        return super().resolve_command(ctx, args)


@click.group(cls=SvcsGroup)
@click.version_option(package_name="snapvcs")
@click.option(
    "--work-dir",
    "-C",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Working directory to version (defaults to the current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def main(ctx: click.Context, work_dir: str, verbose: bool):
    """These are SVCS commands."""
    setup_logging(verbose)
    repo = SvcsRepository(Path(work_dir))
    try:
        repo.init()
    except OSError as e:
        fail_with_io_error(e)
    ctx.obj = repo


@main.command()
@click.argument("username", required=False)
@click.pass_obj
def config(repo: SvcsRepository, username: Optional[str]):
    """Get and set a username."""
    try:
        if username:
            current = repo.set_username(username)
        else:
            current = repo.config()
    except OSError as e:
        fail_with_io_error(e)
        return

    if current.username is None:
        say("Please, tell me who you are.")
    else:
        say(f"The username is {current.username}.")


@main.command()
@click.argument("path", required=False)
@click.pass_obj
def add(repo: SvcsRepository, path: Optional[str]):
    """Add a file to the index."""
    try:
        if not path:
            tracked = repo.tracked_files()
            if not tracked:
                say("Add a file to the index.")
            else:
                say("Tracked files:\n" + "\n".join(tracked))
            return

        tracked_path = repo.add(path)
        say(f"The file '{tracked_path}' is tracked.")
    except SvcsError as e:
        say(str(e))
    except OSError as e:
        fail_with_io_error(e)


@main.command()
@click.pass_obj
def log(repo: SvcsRepository):
    """Show commit logs."""
    try:
        commits = repo.history()
    except SvcsError as e:
        say(str(e))
        return
    except OSError as e:
        fail_with_io_error(e)
        return

    if not commits:
        say("No commits yet.")
        return

    say("\n".join(commit.render() for commit in commits).rstrip("\n"))


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("message", nargs=-1)
@click.pass_obj
def commit(repo: SvcsRepository, message: Tuple[str, ...]):
    """Save changes."""
    try:
        repo.commit(" ".join(message))
        say("Changes are committed.")
    except SvcsError as e:
        say(str(e))
    except OSError as e:
        fail_with_io_error(e)


@main.command()
@click.argument("commit_id", required=False)
@click.pass_obj
def checkout(repo: SvcsRepository, commit_id: Optional[str]):
    """Restore a file."""
    try:
        switched = repo.checkout(commit_id or "")
        say(f"Switched to commit {switched}.")
    except SvcsError as e:
        say(str(e))
    except OSError as e:
        fail_with_io_error(e)


if __name__ == "__main__":
    main()
