#!/usr/bin/env python3
"""
ghext - GitHub-aware shorthand for git

Rewrites shorthand like ``user/repo`` into full GitHub URLs and prints the
git command to run.
"""

import logging
import shlex
from pathlib import Path

import click
from dotenv import load_dotenv

from . import __version__
from .args import Args
from .commands import CloneStatus, all_commands, cmd_clone
from .errors import GhextError
from .utils.config import Config
from .utils.logger import setup_logger

logger = logging.getLogger(__name__)

# Load environment variables early
load_dotenv()

PASS_THROUGH = {
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def setup_logging(verbose=False):
    """Send ghext's logs to stderr, debug output only with --verbose"""
    level = logging.DEBUG if verbose else logging.INFO
    return setup_logger("ghext", level)


@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Config file (default: ~/.config/ghext.yml)')
@click.option('--verbose', '-v', is_flag=True, help='Show debug output')
@click.version_option(__version__, prog_name='ghext')
@click.pass_context
def main(ctx, config_path, verbose):
    """
    GitHub-aware shorthand for git.

    Your login comes from GITHUB_USER or the 'user' key of the config file.
    """
    setup_logging(verbose)
    ctx.obj = Config.from_file(config_path)
    logger.debug(f"Using login {ctx.obj.user or '(none)'} on {ctx.obj.host}")


@main.command('clone', context_settings=PASS_THROUGH,
              short_help=cmd_clone.short, epilog=cmd_clone.long)
@click.option('--noop', is_flag=True,
              help='Print the git command and exit (must come before git arguments)')
@click.argument('git_args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def clone_command(ctx, noop, git_args):
    """
    Clone a remote repository into a new directory.

    Accepts everything git clone does, plus -p for SSH and USER/REPOSITORY
    or plain REPOSITORY (under your own login) in place of a URL.

    Examples:
      ghext clone jingweno/gh
      ghext clone -p jingweno/gh mydir
      ghext clone --noop --depth 1 jekyll_and_hyde
    """
    config = ctx.obj
    args = Args(git_args, noop=noop or config.noop)

    try:
        result = cmd_clone(args, current_login=config.current_login, host=config.host)
    except GhextError as e:
        raise click.ClickException(str(e))

    if result.is_dry_run:
        click.echo(result.command)
        ctx.exit(0)

    if args.noop and result.status is CloneStatus.UNCHANGED:
        # Nothing to rewrite, still only show the command
        logger.debug("No shorthand found, printing args unchanged")
        click.echo(result.command)
        ctx.exit(0)

    # Quoted so the line can be handed straight to a shell
    click.echo(shlex.join(["git", "clone", *args]))


@main.command('commands')
def list_commands():
    """List the git commands ghext extends."""
    for command in all_commands():
        extends = "git" if command.git_extension else "   "
        click.echo(f"{command.name:<12} {extends}  {command.short}")


if __name__ == '__main__':
    main()
