"""pullreq - open GitHub pull requests from the command line."""

from dataclasses import dataclass

__version__ = "0.1.0"


@dataclass(frozen=True)
class ParsedMessage:
    """Title and body parsed from an edited pull request message."""

    title: str
    body: str


@dataclass(frozen=True)
class PullRequestParams:
    """Fields sent to GitHub when creating a pull request."""

    title: str
    body: str
    base: str  # e.g. "owner:master" or "owner/repo:master"
    head: str


@dataclass(frozen=True)
class IssuePullRequestParams:
    """Fields for turning an existing issue into a pull request."""

    issue: int
    base: str
    head: str


@dataclass
class PullRequest:
    """A pull request created on GitHub."""

    number: int
    url: str


class PullRequestError(RuntimeError):
    """Base class for errors that abort a pull request."""


class EditorError(PullRequestError):
    """The editor could not be launched or exited with a failure."""


class EmptyTitleError(PullRequestError):
    """The edited message has no title."""


class ServiceError(PullRequestError):
    """GitHub rejected the pull request or could not be reached."""


class UnpushedCommitsError(PullRequestError):
    """The head branch has local commits not yet pushed upstream."""


__all__ = [
    "ParsedMessage",
    "PullRequestParams",
    "IssuePullRequestParams",
    "PullRequest",
    "PullRequestError",
    "EditorError",
    "EmptyTitleError",
    "ServiceError",
    "UnpushedCommitsError",
]
