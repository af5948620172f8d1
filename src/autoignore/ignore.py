"""Gitignore-style pattern matching for autoignore.

Two matchers are provided:

- ``matches``: the loose matcher used by the tracked-file audit. A bare
  name such as ``build`` matches that segment anywhere in the path, and
  bracket classes and negations are compared literally.
- ``IgnoreSpec(strict=True)``: git-faithful matching delegated to pathspec.
"""

import logging
import re
from functools import lru_cache
from typing import Iterable, List, Optional

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern


logger = logging.getLogger(__name__)

SEPARATOR = "/"


def is_comment(line: str) -> bool:
    """True for blank lines and ``#`` comments."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_patterns(text: str) -> List[str]:
    """Extract pattern lines from ignore-file text, in file order.

    Args:
        text: Ignore-file content

    Returns:
        Stripped lines, excluding blanks and comments
    """
    return [line.strip() for line in text.splitlines() if not is_comment(line)]


def _translate(pattern: str, directory: bool) -> str:
    """Translate a wildcard pattern into a regular expression."""
    parts = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            parts.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1

    # Patterns without a separator apply at any depth
    head = "^" if SEPARATOR in pattern else "^(?:.*/)?"
    tail = "(?:/|$)" if directory else "$"
    return head + "".join(parts) + tail


@lru_cache(maxsize=1024)
def _compile(pattern: str, directory: bool) -> Optional[re.Pattern]:
    try:
        return re.compile(_translate(pattern, directory))
    except re.error:
        return None


def matches(file_path: str, pattern: str) -> bool:
    """Check whether a relative POSIX path is matched by one ignore pattern.

    Args:
        file_path: Project-relative path with forward slashes, no leading
            or trailing separator
        pattern: A single non-comment, non-blank ignore line

    Returns:
        True if the pattern excludes the path
    """
    p = pattern
    directory = p.endswith(SEPARATOR)
    if directory:
        p = p[:-1]

    if file_path == p:
        return True
    if file_path.startswith(p + SEPARATOR):
        return True

    if "*" in p:
        regex = _compile(p, directory)
        return bool(regex and regex.match(file_path))

    return p in file_path.split(SEPARATOR)


def first_match(file_path: str, patterns: Iterable[str]) -> Optional[str]:
    """Return the first pattern that matches ``file_path``, or None."""
    for pattern in patterns:
        if matches(file_path, pattern):
            return pattern
    return None


def _valid_git_patterns(patterns: List[str]) -> List[str]:
    """Drop lines pathspec rejects so one bad line cannot abort an audit."""
    valid = []
    for pattern in patterns:
        try:
            GitWildMatchPattern(pattern)
        except ValueError as e:
            logger.debug("Skipping invalid pattern %r: %s", pattern, e)
            continue
        valid.append(pattern)
    return valid


class IgnoreSpec:
    """A compiled block of ignore-file text."""

    def __init__(self, patterns: Iterable[str], strict: bool = False):
        """Initialize from pattern lines.

        Args:
            patterns: Pattern lines (comments and blanks are dropped)
            strict: Use git wildmatch semantics instead of the loose matcher
        """
        self.patterns = [p.strip() for p in patterns if not is_comment(p)]
        self.strict = strict
        self.spec: Optional[PathSpec] = None
        if strict:
            self.spec = PathSpec.from_lines(GitWildMatchPattern, _valid_git_patterns(self.patterns))

    @classmethod
    def from_text(cls, text: str, strict: bool = False) -> "IgnoreSpec":
        return cls(parse_patterns(text), strict=strict)

    def is_ignored(self, relpath: str) -> bool:
        """Check if a project-relative POSIX path should be ignored.

        Args:
            relpath: Project-relative path in POSIX format (forward slashes)

        Returns:
            True if the path matches any ignore pattern
        """
        if self.spec is not None:
            return self.spec.match_file(relpath)
        return first_match(relpath, self.patterns) is not None
