"""CLI for autoignore."""

import logging
import os
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .constants import AUTOIGNORE_VERSION, DEBUG_ENV_VAR
from .display import display_preview, display_stacks, display_violations, display_write_result
from .errors import DirectoryNotFoundError, GitignoreExistsError, GitignoreReadError
from .ops import audit, build_report, detect_and_generate, resolve_directory, write_gitignore
from .templates import SUPPORTED_STACKS


app = typer.Typer(help="""\
Auto-detect a project's tech stack and generate a matching .gitignore.
Can also find tracked files that the ignore rules say should not be
under version control.""")

console = Console()


EXAMPLES = f"""\
Examples:

  autoignore                     Generate .gitignore for the current directory

  autoignore --preview           Show what would be generated

  autoignore --merge             Add new rules to an existing .gitignore

  autoignore --check             Find tracked files that should be ignored

  autoignore /path/to/project    Scan a specific directory

Supported stacks: {SUPPORTED_STACKS}
"""


def _configure_logging(verbose: bool) -> None:
    """Send debug logs to stderr when asked to (flag or environment)."""
    if verbose or os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes"):
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"autoignore {AUTOIGNORE_VERSION}")
        raise typer.Exit()


@app.command(epilog=EXAMPLES)
def run(
    directory: Optional[str] = typer.Argument(None, help="Directory to scan (default: current directory)"),
    dir_option: Optional[str] = typer.Option(None, "--dir", "-d", help="Directory to scan (overrides the argument)"),
    check: bool = typer.Option(False, "--check", "-c", help="Find tracked files that should be ignored"),
    merge: bool = typer.Option(False, "--merge", "-m", help="Merge with existing .gitignore instead of replacing"),
    preview: bool = typer.Option(False, "--preview", "-p", help="Preview generated .gitignore without writing"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing .gitignore"),
    json_output: bool = typer.Option(False, "--json", help="Output detection results as JSON"),
    strict: bool = typer.Option(False, "--strict", help="Use git's exact matching rules for --check"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Detect the tech stack and write a tailored .gitignore.

    By default the generated file is written to DIRECTORY/.gitignore.
    An existing file is never replaced unless --force or --merge is given.
    """
    _configure_logging(verbose)

    try:
        root = resolve_directory(dir_option or directory or ".")
    except DirectoryNotFoundError as e:
        console.print(f"\n[red]{escape(str(e))}[/red]\n")
        raise typer.Exit(1)

    config = load_config(root)

    if json_output:
        report = build_report(root, check=check, strict=strict, config=config)
        typer.echo(report.model_dump_json(indent=2))
        return

    stacks, generated = detect_and_generate(root, config)
    display_stacks(stacks, root, console)

    if check:
        display_violations(audit(root, generated, config, strict=strict), console)
        return

    if preview:
        display_preview(generated, console)
        return

    try:
        result = write_gitignore(root, generated, merge=merge, force=force)
    except GitignoreExistsError as e:
        console.print(f"  [yellow]{escape(str(e))}[/yellow]\n")
        raise typer.Exit(1)
    except GitignoreReadError as e:
        console.print(f"  [red]✗[/red] {escape(str(e))}\n")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"  [red]✗[/red] Could not write .gitignore: {escape(str(e))}\n")
        raise typer.Exit(1)

    display_write_result(result, len(stacks), console)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
