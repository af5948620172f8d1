"""Tests for .gitignore generation and merging."""

from datetime import date

from autoignore.core import DetectedStack
from autoignore.generator import generate_gitignore, merge_gitignore, new_rules
from autoignore.ignore import parse_patterns
from autoignore.templates import COMMON_IGNORE, IGNORE_TEMPLATES
from autoignore.detection import DETECTORS


FIXED_DATE = date(2024, 3, 15)


def stack(name, *evidence):
    return DetectedStack(name=name, evidence=list(evidence) or [f"{name}-marker"])


class TestGenerate:
    """Composition of header, common block and stack templates."""

    def test_header(self):
        text = generate_gitignore([stack("node"), stack("typescript")], today=FIXED_DATE)
        lines = text.splitlines()
        assert lines[:4] == [
            "# Generated by autoignore",
            "# Detected: node, typescript",
            "# 2024-03-15",
            "",
        ]

    def test_layout(self):
        text = generate_gitignore([stack("node"), stack("typescript")], today=FIXED_DATE)
        expected = "\n".join(
            ["# Generated by autoignore", "# Detected: node, typescript", "# 2024-03-15", ""]
            + COMMON_IGNORE + [""]
            + IGNORE_TEMPLATES["node"] + [""]
            + IGNORE_TEMPLATES["typescript"]
        ) + "\n"
        assert text == expected

    def test_empty_stacks_still_include_common_block(self):
        text = generate_gitignore([], today=FIXED_DATE)
        assert "# Detected: \n" in text
        assert "\n".join(COMMON_IGNORE) in text
        assert text.endswith(COMMON_IGNORE[-1] + "\n")

    def test_single_trailing_newline(self):
        for stacks in ([], [stack("python")], [stack("docker"), stack("react")]):
            text = generate_gitignore(stacks, today=FIXED_DATE)
            assert text.endswith("\n")
            assert not text.endswith("\n\n")

    def test_duplicate_stack_emitted_once(self):
        text = generate_gitignore([stack("go"), stack("go")], today=FIXED_DATE)
        assert text.count("# Go\n") == 1
        assert "# Detected: go, go" in text

    def test_unknown_stack_listed_but_no_section(self):
        text = generate_gitignore([stack("cobol"), stack("docker")], today=FIXED_DATE)
        assert "# Detected: cobol, docker" in text
        assert text.rstrip().endswith("# Docker\n.docker/")

    def test_sections_follow_input_order(self):
        text = generate_gitignore([stack("rust"), stack("go")], today=FIXED_DATE)
        assert text.index("# Rust") < text.index("# Go")

    def test_same_day_output_is_identical(self):
        stacks = [stack("python"), stack("docker")]
        assert generate_gitignore(stacks, today=FIXED_DATE) == generate_gitignore(stacks, today=FIXED_DATE)

    def test_defaults_to_today(self):
        text = generate_gitignore([])
        assert f"# {date.today().isoformat()}\n" in text

    def test_extra_patterns(self):
        text = generate_gitignore([stack("go")], today=FIXED_DATE, extra=["*.local.json", "", "# note", " scratch/ "])
        assert text.endswith("# Go\n" + "\n".join(IGNORE_TEMPLATES["go"][1:]) + "\n\n# Custom\n*.local.json\nscratch/\n")

    def test_no_custom_section_without_extra(self):
        assert "# Custom" not in generate_gitignore([stack("go")], today=FIXED_DATE)


class TestTemplates:
    """Static template registry."""

    def test_every_detector_has_a_template(self):
        assert {d.name for d in DETECTORS} == set(IGNORE_TEMPLATES)

    def test_templates_start_with_a_comment_header(self):
        for name, lines in IGNORE_TEMPLATES.items():
            assert lines[0].startswith("# "), name


class TestMerge:
    """Appending missing rules to an existing file."""

    def test_appends_only_missing_rules(self):
        existing = "# mine\nnode_modules/\n*.log\n"
        generated = "# Generated\n\nnode_modules/\ndist/\n  *.log  \n.env\n"
        merged = merge_gitignore(existing, generated)
        assert merged == "# mine\nnode_modules/\n*.log\n\n# Added by autoignore\ndist/\n.env\n"

    def test_comment_lines_in_existing_do_not_count(self):
        merged = merge_gitignore("# dist/\n", "dist/\n")
        assert merged == "# dist/\n\n# Added by autoignore\ndist/\n"

    def test_existing_trailing_whitespace_is_trimmed(self):
        merged = merge_gitignore("a\n\n\n   \n", "b\n")
        assert merged == "a\n\n# Added by autoignore\nb\n"

    def test_textual_comparison_only(self):
        """Equivalent spellings are distinct rules."""
        assert new_rules("build/\n", "build\n/build/\n") == ["build", "/build/"]

    def test_nothing_new_leaves_content_unchanged(self):
        assert merge_gitignore("dist/\n*.log\n\n", "# x\n*.log\ndist/\n") == "dist/\n*.log\n"

    def test_merge_is_idempotent(self):
        existing = "# project rules\nsecrets.txt\nnode_modules/\n"
        generated = generate_gitignore([stack("node"), stack("python")], today=FIXED_DATE)

        once = merge_gitignore(existing, generated)
        twice = merge_gitignore(once, generated)

        assert twice == once
        assert new_rules(once, generated) == []

    def test_merged_rules_cover_generated_rules(self):
        generated = generate_gitignore([stack("python")], today=FIXED_DATE)
        merged = merge_gitignore("custom/\n", generated)
        assert set(parse_patterns(generated)) <= set(parse_patterns(merged))
