"""Tests for the tracked-file audit."""

import shutil
import subprocess
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from autoignore import audit
from autoignore.audit import check_tracked_files, find_violations, list_tracked_files


class TestFindViolations:
    """Matching tracked paths against ignore text."""

    def test_bracket_pattern_does_not_match_plain_py(self):
        tracked = ["src/a.py", "dist/a.js", "README.md"]
        assert find_violations(tracked, "dist/\n*.py[cod]\n") == ["dist/a.js"]

    def test_preserves_input_order(self):
        tracked = ["z.log", "a/node_modules/x.js", "b.txt", "a.log"]
        text = "# Logs\n*.log\n\nnode_modules/\n"
        assert find_violations(tracked, text) == ["z.log", "a/node_modules/x.js", "a.log"]

    def test_each_path_reported_once(self):
        """A path matched by several rules appears once."""
        assert find_violations(["build/out.log"], "build/\n*.log\nout.log\n") == ["build/out.log"]

    def test_duplicates_in_input_are_kept(self):
        assert find_violations(["a.log", "a.log"], "*.log") == ["a.log", "a.log"]

    def test_comments_and_blanks_never_match(self):
        assert find_violations(["#", "# Logs", "x"], "# Logs\n\n   \n") == []

    def test_empty_inputs(self):
        assert find_violations([], "*.log\n") == []
        assert find_violations(["a.log"], "") == []

    def test_bare_name_matches_at_any_depth(self):
        assert find_violations(["pkg/build/lib.o", "builder.py"], "build\n") == ["pkg/build/lib.o"]

    def test_strict_mode(self):
        tracked = ["src/a.pyc", "src/a.py", "tmp/x", "src/tmp/x"]
        assert find_violations(tracked, "*.py[cod]\n/tmp/\n", strict=True) == ["src/a.pyc", "tmp/x"]
        # The loose matcher compares brackets literally and never matches "/tmp"
        assert find_violations(tracked, "*.py[cod]\n/tmp/\n") == []


class TestListTrackedFiles:
    """The git ls-files query degrades to an empty list on failure."""

    def test_parses_output(self, monkeypatch, tmp_path):
        run = Mock(return_value=SimpleNamespace(returncode=0, stdout="a.py\n\nsrc/b.py\n", stderr=""))
        monkeypatch.setattr(audit.subprocess, "run", run)

        assert list_tracked_files(tmp_path) == ["a.py", "src/b.py"]
        args, kwargs = run.call_args
        assert args[0][-1] == "ls-files"
        assert kwargs["cwd"] == str(tmp_path)
        assert kwargs["timeout"] == 10.0

    def test_not_a_repository(self, monkeypatch, tmp_path):
        result = SimpleNamespace(returncode=128, stdout="", stderr="fatal: not a git repository")
        monkeypatch.setattr(audit.subprocess, "run", Mock(return_value=result))
        assert list_tracked_files(tmp_path) == []

    def test_git_missing(self, monkeypatch, tmp_path):
        monkeypatch.setattr(audit.subprocess, "run", Mock(side_effect=FileNotFoundError("git")))
        assert list_tracked_files(tmp_path) == []

    def test_timeout(self, monkeypatch, tmp_path):
        error = subprocess.TimeoutExpired(cmd=["git", "ls-files"], timeout=0.5)
        run = Mock(side_effect=error)
        monkeypatch.setattr(audit.subprocess, "run", run)

        assert list_tracked_files(tmp_path, timeout=0.5) == []
        assert run.call_args.kwargs["timeout"] == 0.5

    def test_check_tracked_files_without_git(self, monkeypatch, tmp_path):
        monkeypatch.setattr(audit.subprocess, "run", Mock(side_effect=FileNotFoundError("git")))
        assert check_tracked_files(tmp_path, "*\n") == []


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
class TestRealRepository:
    """Audit against an actual git index."""

    def _git(self, root, *args):
        subprocess.run(["git", *args], cwd=root, check=True, capture_output=True)

    def test_tracked_files_in_repository(self, make_project):
        root = make_project("src/a.py", "dist/a.js", "README.md", "untracked.log")
        self._git(root, "init", "-q")
        self._git(root, "add", "-f", "src/a.py", "dist/a.js", "README.md")

        assert sorted(list_tracked_files(root)) == ["README.md", "dist/a.js", "src/a.py"]
        assert check_tracked_files(root, "dist/\n*.log\n") == ["dist/a.js"]

    def test_plain_directory_has_no_tracked_files(self, make_project, tmp_path, monkeypatch):
        # Keep git from discovering a repository above tmp_path
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
        root = make_project("a.log")
        assert list_tracked_files(root) == []
