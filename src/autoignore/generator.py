"""Compose and merge generated .gitignore text."""

from datetime import date
from typing import Iterable, List, Optional, Sequence

from .constants import CUSTOM_MARKER, GENERATED_MARKER, MERGE_MARKER
from .core import DetectedStack
from .ignore import is_comment
from .templates import COMMON_IGNORE, template_for


def _finish(lines: List[str]) -> str:
    return "\n".join(lines).rstrip() + "\n"


def generate_gitignore(
    stacks: Sequence[DetectedStack],
    today: Optional[date] = None,
    extra: Iterable[str] = (),
) -> str:
    """Generate .gitignore content for the detected stacks.

    Layout: header comments, common block, then one block per distinct
    stack in detection order. Stacks without a registered template are
    listed in the header only.

    Args:
        stacks: Detected stacks, in detection order
        today: Date stamp for the header (default: current date)
        extra: Additional patterns appended under a custom section

    Returns:
        Ignore-file text ending in exactly one newline
    """
    today = today or date.today()

    lines = [
        GENERATED_MARKER,
        f"# Detected: {', '.join(s.name for s in stacks)}",
        f"# {today.isoformat()}",
        "",
    ]
    lines.extend(COMMON_IGNORE)
    lines.append("")

    added = set()
    for stack in stacks:
        template = template_for(stack.name)
        if template and stack.name not in added:
            added.add(stack.name)
            lines.extend(template)
            lines.append("")

    extra = [p.strip() for p in extra if not is_comment(p)]
    if extra:
        lines.append(CUSTOM_MARKER)
        lines.extend(extra)

    return _finish(lines)


def new_rules(existing: str, generated: str) -> List[str]:
    """Pattern lines of ``generated`` not already present in ``existing``.

    Comparison is on stripped text only; two spellings of the same rule
    are both kept.
    """
    present = {line.strip() for line in existing.splitlines() if not is_comment(line)}

    kept = []
    for line in generated.splitlines():
        if is_comment(line):
            continue
        if line.strip() not in present:
            kept.append(line)
    return kept


def merge_gitignore(existing: str, generated: str) -> str:
    """Append rules from ``generated`` that ``existing`` lacks.

    Args:
        existing: Current .gitignore content
        generated: Freshly generated content

    Returns:
        Existing content, a blank line, a section marker and the new rules.
        When there is nothing new the existing content is returned as is
        (normalized to one trailing newline).
    """
    kept = new_rules(existing, generated)
    if not kept:
        return existing.rstrip() + "\n"
    return existing.rstrip() + f"\n\n{MERGE_MARKER}\n" + "\n".join(kept) + "\n"
