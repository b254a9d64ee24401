"""Unit tests for markdown compile report generation."""

from __future__ import annotations

from hanzi_pinyin.dictionary.compiler import compile_dictionary
from hanzi_pinyin.reporting.report_md import build_compile_report_md


def _compiled():
    return compile_dictionary(
        [
            "# header",
            "U+7684: de,dí,dì  # 的",
            "U+884C: xíng,háng  # 行",
            "U+4F60: nǐ  # 你",
            "U+4F60: ni3  # 你",
        ]
    )


def test_build_compile_report_md_contains_required_sections() -> None:
    """Report output should include every summary section."""

    markdown = build_compile_report_md(_compiled())

    assert markdown.startswith("# Dictionary Compile Report\n")
    assert "## Summary" in markdown
    assert "## Characters per reading count" in markdown
    assert "## Widest heteronyms" in markdown
    assert "## Discarded duplicates" in markdown
    assert "| metric | value |" in markdown


def test_build_compile_report_md_counts_and_rows() -> None:
    markdown = build_compile_report_md(_compiled())

    assert "| source_lines | 5 |" in markdown
    assert "| characters | 3 |" in markdown
    assert "| duplicates_discarded | 1 |" in markdown
    assert "| 1 | 1 |" in markdown
    assert "| 3 | 1 |" in markdown
    assert "| 5 | U+4F60 | 你 | ni3 |" in markdown


def test_build_compile_report_md_lists_widest_heteronyms_first() -> None:
    markdown = build_compile_report_md(_compiled())

    widest = markdown.index("| U+7684 | 的 | de, dí, dì |")
    narrower = markdown.index("| U+884C | 行 | xíng, háng |")
    assert widest < narrower


def test_build_compile_report_md_respects_heteronym_limit() -> None:
    markdown = build_compile_report_md(_compiled(), heteronym_limit=1)

    assert "| U+7684 | 的 | de, dí, dì |" in markdown
    assert "U+884C" not in markdown
