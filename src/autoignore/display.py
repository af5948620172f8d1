"""Console rendering for autoignore."""

from pathlib import Path
from typing import List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.text import Text

from .constants import MAX_VIOLATIONS_DISPLAY
from .core import Confidence, DetectedStack
from .ops import WriteAction, WriteResult


CONFIDENCE_STYLE = {
    Confidence.HIGH: ("●", "green"),
    Confidence.MEDIUM: ("◐", "yellow"),
    Confidence.LOW: ("○", "dim"),
}


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def display_stacks(stacks: Sequence[DetectedStack], root: Path, console: Console) -> None:
    """Show detected stacks with confidence icon and evidence."""
    console.print(f"\n[bold magenta]🔍 Stack Detection[/bold magenta][dim] ({escape(str(root))})[/dim]\n")

    if not stacks:
        console.print("  [yellow]No tech stack detected. Generating common .gitignore only.[/yellow]\n")
        return

    for stack in stacks:
        icon, style = CONFIDENCE_STYLE[stack.confidence]
        console.print(
            f"  [{style}]{icon}[/{style}] [bold]{escape(stack.name)}[/bold] "
            f"[dim]({escape(', '.join(stack.evidence))})[/dim]"
        )
    console.print()


def display_violations(violations: List[str], console: Console) -> None:
    """Show tracked files that match ignore rules, capped for readability."""
    if not violations:
        console.print("  [green bold]✓[/green bold] No tracked files match .gitignore patterns.\n")
        return

    console.print(
        f"  [yellow bold]⚠[/yellow bold] {_plural(len(violations), 'tracked file')} "
        f"should probably be ignored:\n"
    )
    for path in violations[:MAX_VIOLATIONS_DISPLAY]:
        console.print(f"    [red]{escape(path)}[/red]")
    if len(violations) > MAX_VIOLATIONS_DISPLAY:
        console.print(f"    [dim]...and {len(violations) - MAX_VIOLATIONS_DISPLAY} more[/dim]")
    console.print("\n  [dim]Run [cyan]git rm --cached <file>[/cyan] to untrack them.[/dim]\n")


def display_preview(generated: str, console: Console) -> None:
    """Print generated text between horizontal rules, without markup parsing."""
    console.print(Rule(style="dim"))
    console.print(Text(generated.rstrip("\n")))
    console.print(Rule(style="dim"))


def display_write_result(result: WriteResult, stack_count: int, console: Console) -> None:
    name = result.path.name
    if result.action == WriteAction.MERGED:
        console.print(
            f"  [green bold]✓[/green bold] Merged {_plural(result.added, 'new rule')} into existing {name}\n"
        )
    elif result.action == WriteAction.UNCHANGED:
        console.print(f"  [green bold]✓[/green bold] {name} already contains every generated rule\n")
    else:
        verb = "Overwrote" if result.action == WriteAction.OVERWRITTEN else "Generated"
        console.print(
            f"  [green bold]✓[/green bold] {verb} {name} with {_plural(stack_count, 'stack')} detected\n"
        )
