"""Technology stack detection from a directory listing.

Detection is shallow: only the immediate entries of one directory are
inspected. Build and package ecosystems put their marker files at the
project root, so a recursive walk is not needed.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .core import DetectedStack, StackDetector


logger = logging.getLogger(__name__)


# Registration order is also the output order of generated sections
DETECTORS: tuple = (
    StackDetector(
        name="node",
        files=("package.json", "package-lock.json", "yarn.lock", "pnpm-lock.yaml", ".nvmrc", ".npmrc"),
        dirs=("node_modules",),
        extensions=(".js", ".mjs", ".cjs"),
    ),
    StackDetector(
        name="typescript",
        files=("tsconfig.json", "tsconfig.build.json"),
        extensions=(".ts", ".tsx"),
    ),
    StackDetector(
        name="python",
        files=("requirements.txt", "setup.py", "pyproject.toml", "Pipfile", "poetry.lock", ".python-version", "tox.ini"),
        dirs=("__pycache__", ".venv", "venv"),
        extensions=(".py",),
    ),
    StackDetector(
        name="go",
        files=("go.mod", "go.sum"),
        extensions=(".go",),
    ),
    StackDetector(
        name="rust",
        files=("Cargo.toml", "Cargo.lock"),
        dirs=("target",),
        extensions=(".rs",),
    ),
    StackDetector(
        name="java",
        files=("pom.xml", "build.gradle", "build.gradle.kts", "gradlew", ".java-version"),
        dirs=(".gradle", ".mvn"),
        extensions=(".java",),
    ),
    StackDetector(
        name="ruby",
        files=("Gemfile", "Gemfile.lock", "Rakefile", ".ruby-version", ".ruby-gemset"),
        extensions=(".rb",),
    ),
    StackDetector(
        name="dotnet",
        files=("*.csproj", "*.fsproj", "*.sln", "global.json", "nuget.config"),
        dirs=("bin", "obj"),
        extensions=(".cs", ".fs"),
    ),
    StackDetector(
        name="php",
        files=("composer.json", "composer.lock", "artisan", ".php-version"),
        dirs=("vendor",),
        extensions=(".php",),
    ),
    StackDetector(
        name="swift",
        files=("Package.swift", "*.xcodeproj", "*.xcworkspace", "Podfile"),
        dirs=(".build", "Pods"),
        extensions=(".swift",),
    ),
    StackDetector(
        name="kotlin",
        files=("build.gradle.kts", "settings.gradle.kts"),
        extensions=(".kt", ".kts"),
    ),
    StackDetector(
        name="dart",
        files=("pubspec.yaml", "pubspec.lock", ".flutter-plugins"),
        dirs=(".dart_tool",),
        extensions=(".dart",),
    ),
    StackDetector(
        name="elixir",
        files=("mix.exs", "mix.lock"),
        dirs=("_build", "deps"),
        extensions=(".ex", ".exs"),
    ),
    StackDetector(
        name="scala",
        files=("build.sbt", "project/build.properties"),
        dirs=(".bsp",),
        extensions=(".scala",),
    ),
    StackDetector(
        name="haskell",
        files=("stack.yaml", "cabal.project", "*.cabal"),
        dirs=(".stack-work",),
        extensions=(".hs",),
    ),
    StackDetector(
        name="r",
        files=(".Rprofile", "DESCRIPTION", "NAMESPACE", ".Rproj"),
        extensions=(".R", ".Rmd"),
    ),
    StackDetector(
        name="terraform",
        files=("main.tf", "variables.tf", "terraform.tfvars", ".terraform.lock.hcl"),
        dirs=(".terraform",),
        extensions=(".tf",),
    ),
    StackDetector(
        name="docker",
        files=("Dockerfile", "docker-compose.yml", "docker-compose.yaml", ".dockerignore"),
    ),
    StackDetector(
        name="nextjs",
        files=("next.config.js", "next.config.mjs", "next.config.ts"),
        dirs=(".next",),
    ),
    StackDetector(
        name="react",
        files=("vite.config.ts", "vite.config.js"),
        dirs=(".vite",),
    ),
)


def _first_with_suffix(entries: List[str], suffix: str) -> Optional[str]:
    for entry in entries:
        if entry.endswith(suffix):
            return entry
    return None


def _safe_is_directory(is_directory: Callable[[str], bool], name: str) -> bool:
    """Run a directory check, treating any OS failure as "not a directory"."""
    try:
        return is_directory(name)
    except OSError as e:
        logger.debug("Directory check failed for %s: %s", name, e)
        return False


def _collect_evidence(
    detector: StackDetector,
    entries: List[str],
    present: set,
    is_directory: Callable[[str], bool],
) -> List[str]:
    evidence = []

    for marker in detector.files:
        if "*" in marker:
            match = _first_with_suffix(entries, marker.replace("*", ""))
            if match:
                evidence.append(match)
        elif marker in present:
            evidence.append(marker)

    for name in detector.dirs:
        if name in present and _safe_is_directory(is_directory, name):
            evidence.append(name + "/")

    for ext in detector.extensions:
        if _first_with_suffix(entries, ext):
            evidence.append(f"*{ext}")

    return evidence


def detect(
    entries: Iterable[str],
    is_directory: Callable[[str], bool],
    detectors: Iterable[StackDetector] = DETECTORS,
) -> List[DetectedStack]:
    """Detect technology stacks from one directory's entries.

    Args:
        entries: Names of the immediate directory entries
        is_directory: Check whether a named entry is a directory; may raise
            OSError, which counts as "not a directory"
        detectors: Marker table, in output order

    Returns:
        Detected stacks in detector order; stacks without evidence are omitted
    """
    # Sorted so wildcard and extension evidence is stable across runs
    listing = sorted(set(entries))
    present = set(listing)

    detected = []
    for detector in detectors:
        evidence = _collect_evidence(detector, listing, present, is_directory)
        if evidence:
            detected.append(DetectedStack(name=detector.name, evidence=evidence))
    return detected


def list_entries(root: Path) -> List[str]:
    """List one directory level. An unreadable directory yields no entries."""
    try:
        return os.listdir(root)
    except OSError as e:
        logger.debug("Cannot list %s: %s", root, e)
        return []


def detect_directory(root: Path) -> List[DetectedStack]:
    """Detect stacks used by the project rooted at ``root``."""
    entries = list_entries(root)
    stacks = detect(entries, lambda name: (root / name).is_dir())
    logger.debug("Detected %d stacks in %s: %s", len(stacks), root, [s.name for s in stacks])
    return stacks
