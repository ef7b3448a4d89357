"""Branch reference handling."""


def local_branch(ref: str) -> str:
    """
    Get the local branch name from a branch reference.

    Accepts "branch", "owner:branch" and "owner/repo:branch". Anything after
    the last colon is the branch; refs without a colon are returned as is.
    """
    return ref.split(":")[-1]
