"""Command-line interface for opening pull requests."""

import logging
import sys

import click

from . import PullRequestError
from .context import RepoContext
from .git_utils import GitError
from .pull_request import submit_pull_request


@click.group()
@click.version_option()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log git and gh commands as they run",
)
def cli(verbose):
    """pullreq - open GitHub pull requests from the command line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# -h is the head branch, so help is --help only
@cli.command("pull-request", context_settings={"help_option_names": ["--help"]})
@click.argument("title", required=False)
@click.option(
    "--issue",
    "-i",
    type=int,
    default=None,
    help="Attach the pull request to an existing issue",
)
@click.option(
    "--base",
    "-b",
    default=None,
    help="Base branch: branch, owner:branch or owner/repo:branch (default: OWNER:master)",
)
@click.option(
    "--head",
    "-h",
    default=None,
    help="Head branch: branch, owner:branch or owner/repo:branch (default: OWNER:CURRENT_BRANCH)",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Skip the check for commits not yet pushed upstream",
)
@click.option(
    "--repo",
    "-r",
    type=click.Path(exists=True, file_okay=False, dir_okay=True),
    default=None,
    help="Repository directory (default: current directory)",
)
def pull_request(title, issue, base, head, force, repo):
    """
    Open a pull request on GitHub.

    The pull request targets the project the "origin" remote points to.
    If TITLE is omitted, an editor opens in which the title and body are
    written in the same manner as a git commit message. Instead of a title
    you can pass an issue number with -i or paste the URL of a GitHub issue.
    TITLE and -i cannot be used together.
    """
    if title is not None and issue is not None:
        raise click.UsageError("TITLE and --issue cannot be used together")

    context = RepoContext(cwd=repo)

    try:
        if base is None:
            base = context.default_base()
        if head is None:
            head = context.default_head()

        result = submit_pull_request(context, base, head, title=title, issue=issue, force=force)
    except (PullRequestError, GitError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(result.url)


if __name__ == "__main__":
    cli()
