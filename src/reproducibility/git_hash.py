"""Git hash capture with dirty-tree detection for graph provenance.

Stored in the metadata sidecar so a generated graph can be traced back to
the generator version that produced it.
"""

import subprocess


def _tree_is_dirty() -> bool:
    """True if there are staged or unstaged changes."""
    for cmd in (["git", "diff", "--quiet"], ["git", "diff", "--quiet", "--cached"]):
        try:
            subprocess.check_output(cmd, stderr=subprocess.DEVNULL)
        except subprocess.CalledProcessError:
            return True
    return False


def get_git_hash() -> str:
    """Get the short git SHA of the current commit with dirty detection.

    Returns:
        Git hash string in one of three forms:
        - "a3f9c1d": clean working tree
        - "a3f9c1d-dirty": uncommitted changes present
        - "unknown": not in a git repository or git not available
    """
    try:
        sha = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        ).decode().strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"

    if _tree_is_dirty():
        sha += "-dirty"
    return sha
