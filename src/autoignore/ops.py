"""High-level operations: detect, generate, write, merge and audit."""

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .audit import check_tracked_files
from .config import AutoignoreConfig, load_config
from .constants import GITIGNORE_FILE
from .core import DetectedStack, DetectionReport
from .detection import detect_directory
from .errors import DirectoryNotFoundError, GitignoreExistsError, GitignoreReadError
from .generator import generate_gitignore, merge_gitignore, new_rules


logger = logging.getLogger(__name__)


# ============= Atomic Write Helpers =============

def _atomic_write_text(path: Path, text: str) -> None:
    """Atomically write text to file with crash safety.

    1. Writes to temp file with fsync to ensure content is on disk
    2. Atomic rename to target path (appears all-at-once)
    3. Fsync parent directory to ensure rename is durable

    Directory fsync is best-effort (not supported on Windows).

    Args:
        path: Target file path
        text: Text content to write
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        newline="\n",
        delete=False,
        dir=path.parent,
        prefix=f".{path.name}.tmp-",
        suffix=""
    ) as f:
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
        tmp = Path(f.name)

    try:
        os.replace(tmp, path)

        try:
            flags = os.O_RDONLY
            if hasattr(os, "O_DIRECTORY"):
                flags |= os.O_DIRECTORY

            dirfd = os.open(str(path.parent), flags)
            try:
                os.fsync(dirfd)
            finally:
                os.close(dirfd)
        except OSError:
            # The file write is still atomic and durable (via file fsync above)
            logger.debug("Directory fsync not supported for %s", path.parent)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


# ============= Directory & File Access =============

def resolve_directory(path: Union[str, Path]) -> Path:
    """Resolve the target directory.

    Raises:
        DirectoryNotFoundError: If the path does not exist or is not a directory
    """
    root = Path(path).resolve()
    if not root.is_dir():
        raise DirectoryNotFoundError(str(root))
    return root


def gitignore_path(root: Path) -> Path:
    return root / GITIGNORE_FILE


def read_gitignore(root: Path, lenient: bool = False) -> Optional[str]:
    """Read the existing .gitignore.

    Args:
        root: Project directory
        lenient: Replace undecodable bytes instead of failing

    Returns:
        File content, or None if there is no file

    Raises:
        GitignoreReadError: If the file exists but cannot be read or decoded
    """
    path = gitignore_path(root)
    try:
        return path.read_text(encoding="utf-8", errors="replace" if lenient else "strict")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise GitignoreReadError(str(path), str(e))


# ============= Detection & Generation =============

def detect_and_generate(
    root: Path,
    config: Optional[AutoignoreConfig] = None,
    today: Optional[date] = None,
) -> Tuple[List[DetectedStack], str]:
    """Detect stacks in ``root`` and generate the matching .gitignore text.

    Args:
        root: Project directory
        config: Project configuration (loaded from ``root`` if omitted)
        today: Date stamp for the header

    Returns:
        (detected stacks, generated text)
    """
    config = config or load_config(root)
    stacks = detect_directory(root)
    if config.exclude_stacks:
        stacks = [s for s in stacks if s.name not in config.exclude_stacks]
    return stacks, generate_gitignore(stacks, today=today, extra=config.extra)


def audit_text(root: Path, generated: str) -> str:
    """Ignore text to audit against: the existing file, else the generated one."""
    try:
        existing = read_gitignore(root, lenient=True)
    except GitignoreReadError as e:
        logger.debug("%s; auditing generated rules", e)
        return generated
    return existing if existing is not None else generated


def audit(
    root: Path,
    generated: str,
    config: Optional[AutoignoreConfig] = None,
    strict: bool = False,
) -> List[str]:
    """Find tracked files in ``root`` that the effective ignore rules match."""
    config = config or load_config(root)
    return check_tracked_files(
        root,
        audit_text(root, generated),
        strict=strict,
        timeout=config.git_timeout,
    )


def build_report(
    root: Path,
    check: bool = False,
    strict: bool = False,
    config: Optional[AutoignoreConfig] = None,
    today: Optional[date] = None,
) -> DetectionReport:
    """Build the machine-readable payload for ``--json``.

    Violations are only computed when ``check`` is set.
    """
    config = config or load_config(root)
    stacks, generated = detect_and_generate(root, config, today=today)
    violations = audit(root, generated, config, strict=strict) if check else []
    return DetectionReport(
        directory=str(root),
        stacks=stacks,
        generated_text=generated,
        violations=violations,
    )


# ============= Writing =============

class WriteAction(str, Enum):
    """What happened to the .gitignore file."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    MERGED = "merged"
    UNCHANGED = "unchanged"


@dataclass
class WriteResult:
    """Outcome of writing generated rules."""
    action: WriteAction
    path: Path
    added: int = 0  # pattern lines appended by a merge


def write_gitignore(
    root: Path,
    generated: str,
    merge: bool = False,
    force: bool = False,
) -> WriteResult:
    """Write, overwrite or merge the generated text into ``root/.gitignore``.

    Args:
        root: Project directory
        generated: Generated ignore text
        merge: Append missing rules to an existing file
        force: Replace an existing file

    Returns:
        WriteResult describing the change

    Raises:
        GitignoreExistsError: If the file exists and neither merge nor force is set
        GitignoreReadError: If a merge is requested and the file cannot be read
    """
    path = gitignore_path(root)
    existing = read_gitignore(root) if merge else None

    if existing is not None:
        added = len(new_rules(existing, generated))
        if not added:
            logger.debug("%s already contains every generated rule", path)
            return WriteResult(WriteAction.UNCHANGED, path)
        _atomic_write_text(path, merge_gitignore(existing, generated))
        return WriteResult(WriteAction.MERGED, path, added=added)

    if path.exists() and not force:
        raise GitignoreExistsError(str(path))

    action = WriteAction.OVERWRITTEN if path.exists() else WriteAction.CREATED
    _atomic_write_text(path, generated)
    return WriteResult(action, path)
