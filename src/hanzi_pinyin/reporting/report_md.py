"""Markdown report generation for dictionary compile runs."""

from __future__ import annotations

from typing import Iterable, Sequence

from hanzi_pinyin.models import CompiledDictionary
from hanzi_pinyin.validation import collect_heteronyms, collect_reading_counts


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_compile_report_md(compiled: CompiledDictionary, heteronym_limit: int = 50) -> str:
    """Build the markdown report for one compile run.

    Args:
        compiled: Compiler output.
        heteronym_limit: Maximum number of heteronym rows listed, widest first.

    Returns:
        Full markdown content with summary tables.
    """

    summary_rows = [
        ("source_lines", str(compiled.source_lines)),
        ("characters", str(len(compiled.pronunciations))),
        ("tone_marks", str(len(compiled.tone_marks))),
        ("duplicates_discarded", str(len(compiled.duplicates))),
    ]

    reading_counts = collect_reading_counts(compiled.pronunciations)
    reading_rows = [(str(count), str(reading_counts[count])) for count in sorted(reading_counts)]

    heteronyms = sorted(
        collect_heteronyms(compiled.pronunciations),
        key=lambda entry: (-len(entry.readings), entry.char),
    )
    heteronym_rows = [
        (f"U+{ord(entry.char):04X}", entry.char, ", ".join(entry.readings))
        for entry in heteronyms[:heteronym_limit]
    ]

    duplicate_rows = [
        (str(entry.line_number), f"U+{ord(entry.char):04X}", entry.char, ", ".join(entry.readings))
        for entry in compiled.duplicates
    ]

    sections = [
        "# Dictionary Compile Report",
        "",
        "## Summary",
        _markdown_table(["metric", "value"], summary_rows),
        "",
        "## Characters per reading count",
        _markdown_table(["readings", "characters"], reading_rows),
        "",
        "## Widest heteronyms",
        _markdown_table(["code_point", "char", "readings"], heteronym_rows),
        "",
        "## Discarded duplicates",
        _markdown_table(["line", "code_point", "char", "readings"], duplicate_rows),
    ]

    return "\n".join(sections) + "\n"
