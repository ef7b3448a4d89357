"""Creating pull requests on GitHub through the gh CLI."""

import json
import logging
import re
import subprocess

from . import IssuePullRequestParams, PullRequest, PullRequestParams, ServiceError

logger = logging.getLogger(__name__)

ISSUE_URL_PATTERN = re.compile(r"^https?://github\.com/[^/\s]+/[^/\s]+/issues/(\d+)/?$")


def parse_issue_url(text: str) -> int | None:
    """Get the issue number from a GitHub issue URL, or None if text is not one."""
    match = ISSUE_URL_PATTERN.match(text.strip())
    if not match:
        return None
    return int(match.group(1))


def build_create_command(
    owner: str,
    repo: str,
    params: PullRequestParams | IssuePullRequestParams,
) -> list[str]:
    """Build the gh api call that creates the pull request."""
    cmd = ["gh", "api", "--method", "POST", f"repos/{owner}/{repo}/pulls"]
    if isinstance(params, IssuePullRequestParams):
        # -F sends the issue as a number, not a string
        cmd += ["-F", f"issue={params.issue}"]
    else:
        cmd += ["-f", f"title={params.title}", "-f", f"body={params.body}"]
    cmd += ["-f", f"base={params.base}", "-f", f"head={params.head}"]
    return cmd


def create_pull_request(
    owner: str,
    repo: str,
    params: PullRequestParams | IssuePullRequestParams,
    cwd: str | None = None,
) -> PullRequest:
    """
    Create a pull request in owner/repo.

    Args:
        owner: Repository owner
        repo: Repository name
        params: Title/body or issue, plus base and head
        cwd: Working directory to run gh in

    Returns:
        The created PullRequest

    Raises:
        ServiceError: If gh is missing, the request fails or the response is unusable
    """
    cmd = build_create_command(owner, repo, params)
    logger.debug("Running: gh api --method POST repos/%s/%s/pulls", owner, repo)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
    except FileNotFoundError:
        raise ServiceError("gh not found. Install the GitHub CLI and run 'gh auth login'.") from None

    if result.returncode != 0:
        raise ServiceError(f"Error creating pull request: {result.stderr.strip() or result.stdout.strip()}")

    try:
        data = json.loads(result.stdout)
        return PullRequest(number=data["number"], url=data["html_url"])
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise ServiceError(f"Unexpected response from GitHub: {e}") from e
