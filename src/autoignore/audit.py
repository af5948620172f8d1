"""Find version-controlled files that ignore rules would exclude.

A project without git (or with git unavailable) is a normal state, so
every failure of the ``git ls-files`` query degrades to "no tracked
files" instead of an error.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import GIT_TIMEOUT
from .ignore import IgnoreSpec


logger = logging.getLogger(__name__)


def _run_git_ls_files(root: Path, timeout: float) -> Optional[str]:
    """Run ``git ls-files`` in ``root``; None on any failure."""
    try:
        result = subprocess.run(
            ["git", "-c", "core.quotepath=off", "ls-files"],
            cwd=str(root),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.debug("git ls-files timed out after %ss in %s", timeout, root)
        return None
    except OSError as e:
        # git not installed, or root vanished
        logger.debug("git ls-files could not run in %s: %s", root, e)
        return None

    if result.returncode != 0:
        logger.debug("git ls-files failed in %s: %s", root, result.stderr.strip())
        return None
    return result.stdout


def list_tracked_files(root: Path, timeout: float = GIT_TIMEOUT) -> List[str]:
    """List files tracked by git under ``root``.

    Args:
        root: Directory to run the query in
        timeout: Seconds to wait before abandoning the query

    Returns:
        Tracked paths (POSIX, repository-relative); empty if git is unavailable
    """
    output = _run_git_ls_files(root, timeout)
    if output is None:
        return []
    return [line.strip() for line in output.splitlines() if line.strip()]


def find_violations(
    tracked_paths: Sequence[str],
    ignore_text: str,
    strict: bool = False,
) -> List[str]:
    """Return tracked paths matched by any rule in ``ignore_text``.

    Args:
        tracked_paths: Version-controlled paths, in the order to report them
        ignore_text: Ignore-file content (comments and blanks are skipped)
        strict: Use git wildmatch semantics instead of the loose matcher

    Returns:
        Matching paths in input order
    """
    spec = IgnoreSpec.from_text(ignore_text, strict=strict)
    if not spec.patterns:
        return []
    return [path for path in tracked_paths if spec.is_ignored(path)]


def check_tracked_files(
    root: Path,
    ignore_text: str,
    strict: bool = False,
    timeout: float = GIT_TIMEOUT,
) -> List[str]:
    """Audit the git repository at ``root`` against ``ignore_text``."""
    tracked = list_tracked_files(root, timeout=timeout)
    violations = find_violations(tracked, ignore_text, strict=strict)
    logger.debug("%d of %d tracked files match ignore rules", len(violations), len(tracked))
    return violations
