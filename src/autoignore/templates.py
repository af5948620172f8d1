"""Ignore-file templates for each supported stack.

Each template is a list of lines (comment header first, then patterns)
emitted verbatim by the generator. ``COMMON_IGNORE`` is always included,
whatever was detected.
"""

from typing import Dict, List, Optional


COMMON_IGNORE: List[str] = [
    "# OS files",
    ".DS_Store",
    ".DS_Store?",
    "._*",
    "Thumbs.db",
    "ehthumbs.db",
    "Desktop.ini",
    "",
    "# Editor/IDE",
    ".idea/",
    ".vscode/",
    "*.swp",
    "*.swo",
    "*~",
    ".project",
    ".classpath",
    ".settings/",
    "*.sublime-workspace",
    "*.sublime-project",
    "",
    "# Environment",
    ".env",
    ".env.local",
    ".env.*.local",
    "",
    "# Logs",
    "logs/",
    "*.log",
    "",
    "# Coverage",
    "coverage/",
    ".nyc_output/",
]


IGNORE_TEMPLATES: Dict[str, List[str]] = {
    "node": [
        "# Node.js",
        "node_modules/",
        "npm-debug.log*",
        "yarn-debug.log*",
        "yarn-error.log*",
        ".pnpm-debug.log*",
        "lerna-debug.log*",
        ".npm",
        ".yarn/cache",
        ".yarn/unplugged",
        ".yarn/build-state.yml",
        ".yarn/install-state.gz",
        ".pnp.*",
    ],
    "typescript": [
        "# TypeScript",
        "dist/",
        "build/",
        "*.tsbuildinfo",
        "*.d.ts.map",
    ],
    "python": [
        "# Python",
        "__pycache__/",
        "*.py[cod]",
        "*$py.class",
        "*.so",
        ".Python",
        "venv/",
        ".venv/",
        "env/",
        ".env/",
        "*.egg-info/",
        "dist/",
        "build/",
        "*.egg",
        ".pytest_cache/",
        ".mypy_cache/",
        ".ruff_cache/",
        "htmlcov/",
        ".coverage",
        ".coverage.*",
        "pip-log.txt",
        "pip-delete-this-directory.txt",
        ".tox/",
        ".nox/",
    ],
    "go": [
        "# Go",
        "*.exe",
        "*.exe~",
        "*.dll",
        "*.so",
        "*.dylib",
        "*.test",
        "*.out",
        "vendor/",
    ],
    "rust": [
        "# Rust",
        "target/",
        "Cargo.lock",
        "**/*.rs.bk",
    ],
    "java": [
        "# Java",
        "*.class",
        "*.jar",
        "*.war",
        "*.ear",
        "*.nar",
        "hs_err_pid*",
        ".gradle/",
        "build/",
        "!gradle/wrapper/gradle-wrapper.jar",
        ".mvn/timing.properties",
        ".mvn/wrapper/maven-wrapper.jar",
    ],
    "ruby": [
        "# Ruby",
        "*.gem",
        "*.rbc",
        "/.config",
        "/coverage/",
        "/InstalledFiles",
        "/pkg/",
        "/spec/reports/",
        "/spec/examples.txt",
        "/test/tmp/",
        "/test/version_tmp/",
        "/tmp/",
        ".bundle/",
        "vendor/bundle",
        "*.bundle",
        ".rvmrc",
    ],
    "dotnet": [
        "# .NET",
        "[Dd]ebug/",
        "[Rr]elease/",
        "x64/",
        "x86/",
        "bld/",
        "[Bb]in/",
        "[Oo]bj/",
        "[Ll]og/",
        "[Ll]ogs/",
        "*.nupkg",
        "*.snupkg",
        ".nuget/",
        "*.suo",
        "*.user",
        "*.userosscache",
        "*.sln.docstates",
        "project.lock.json",
        "project.fragment.lock.json",
        "artifacts/",
    ],
    "php": [
        "# PHP",
        "vendor/",
        "composer.phar",
        ".phpunit.result.cache",
        ".php_cs.cache",
        ".php-cs-fixer.cache",
        "*.phar",
        "storage/",
    ],
    "swift": [
        "# Swift/Xcode",
        ".build/",
        "DerivedData/",
        "*.xcuserstate",
        "*.ipa",
        "*.dSYM.zip",
        "*.dSYM",
        "Pods/",
        "Carthage/Build/",
        "*.pbxuser",
        "!default.pbxuser",
        "*.mode1v3",
        "!default.mode1v3",
        "*.mode2v3",
        "!default.mode2v3",
        "*.perspectivev3",
        "!default.perspectivev3",
        "xcuserdata/",
    ],
    "kotlin": [
        "# Kotlin",
        "*.class",
        ".gradle/",
        "build/",
        "out/",
        ".kotlin/",
    ],
    "dart": [
        "# Dart/Flutter",
        ".dart_tool/",
        ".packages",
        "build/",
        ".flutter-plugins",
        ".flutter-plugins-dependencies",
        "*.iml",
    ],
    "elixir": [
        "# Elixir",
        "_build/",
        "deps/",
        "*.ez",
        "*.beam",
        "/config/*.secret.exs",
        ".fetch",
        "erl_crash.dump",
        "*.plt",
        "*.plt.hash",
    ],
    "scala": [
        "# Scala",
        "target/",
        ".bsp/",
        ".metals/",
        ".bloop/",
        "project/metals.sbt",
        "project/project/",
    ],
    "haskell": [
        "# Haskell",
        ".stack-work/",
        "dist/",
        "dist-newstyle/",
        ".cabal-sandbox/",
        "cabal.sandbox.config",
        "*.o",
        "*.hi",
        "*.dyn_o",
        "*.dyn_hi",
        "*.prof",
        "*.tix",
    ],
    "r": [
        "# R",
        ".Rhistory",
        ".Rdata",
        ".RData",
        ".Ruserdata",
        ".httr-oauth",
        "*.Rproj.user",
        "/*.Rcheck/",
        "/*_cache/",
    ],
    "terraform": [
        "# Terraform",
        ".terraform/",
        "*.tfstate",
        "*.tfstate.*",
        "crash.log",
        "crash.*.log",
        "*.tfvars",
        "!*.tfvars.example",
        "override.tf",
        "override.tf.json",
        "*_override.tf",
        "*_override.tf.json",
        ".terraformrc",
        "terraform.rc",
    ],
    "docker": [
        "# Docker",
        ".docker/",
    ],
    "nextjs": [
        "# Next.js",
        ".next/",
        "out/",
        ".vercel",
    ],
    "react": [
        "# Vite",
        ".vite/",
    ],
}


# Human-readable names for --help
SUPPORTED_STACKS = (
    "Node.js, Python, Go, Rust, Java, Ruby, .NET/C#, PHP, Swift, "
    "Kotlin, Dart/Flutter, Elixir, Scala, Haskell, R, Terraform, "
    "Docker, Next.js, Vite"
)


def template_for(stack_name: str) -> Optional[List[str]]:
    """Return the template lines for a stack, or None if none is registered."""
    return IGNORE_TEMPLATES.get(stack_name)
