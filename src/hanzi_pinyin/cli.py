"""CLI entrypoint for converting text and compiling dictionary sources."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from hanzi_pinyin.config import Casing, ConversionConfig, ToneStyle
from hanzi_pinyin.dictionary.compiler import compile_dictionary
from hanzi_pinyin.dictionary.repository import PinyinRepository
from hanzi_pinyin.dictionary.sources import read_source_lines
from hanzi_pinyin.engine import convert_to_string
from hanzi_pinyin.errors import (
    ConfigurationError,
    DictionaryConsistencyError,
    DictionaryFormatError,
)
from hanzi_pinyin.io.tsv_io import write_compiled_tsv
from hanzi_pinyin.reporting.report_md import build_compile_report_md
from hanzi_pinyin.validation import collect_reading_counts


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Parser with ``convert`` and ``compile`` subcommands.
    """

    parser = argparse.ArgumentParser(description="Convert Chinese characters to pinyin.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert text to pinyin.")
    convert_parser.add_argument("text", help="Text to convert.")
    convert_parser.add_argument(
        "--style",
        default=ToneStyle.TONE.value,
        choices=[style.value for style in ToneStyle],
        help="Tone rendering style.",
    )
    convert_parser.add_argument(
        "--case",
        default=Casing.PRESERVE.value,
        choices=[case.value for case in Casing],
        help="Casing of rendered syllables.",
    )
    convert_parser.add_argument(
        "--heteronym", action="store_true", help="Emit every known reading."
    )
    convert_parser.add_argument("--separator", default=" ", help="Segment separator.")
    convert_parser.add_argument(
        "--heteronym-separator", default="/", help="Separator between readings of one character."
    )
    convert_parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Dictionary source file (default: pypinyin character table).",
    )

    compile_parser = subparsers.add_parser("compile", help="Compile and check a dictionary source.")
    compile_parser.add_argument("--source", required=True, type=Path, help="Source file path.")
    compile_parser.add_argument(
        "--output", type=Path, default=None, help="Compiled TSV output path."
    )
    compile_parser.add_argument(
        "--report", type=Path, default=None, help="Markdown compile report output path."
    )
    return parser


def _run_convert(args: argparse.Namespace) -> int:
    try:
        config = ConversionConfig(
            style=args.style,
            heteronym=args.heteronym,
            case=args.case,
            separator=args.separator,
            heteronym_separator=args.heteronym_separator,
        )
    except ConfigurationError as exc:
        raise SystemExit(f"Invalid options: {exc}") from None

    repository = PinyinRepository.from_path(args.source) if args.source is not None else None
    print(convert_to_string(args.text, config, repository))
    return 0


def _run_compile(args: argparse.Namespace) -> int:
    try:
        compiled = compile_dictionary(read_source_lines(args.source))
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from None
    except (DictionaryFormatError, DictionaryConsistencyError) as exc:
        raise SystemExit(f"Compile failed: {exc}") from None

    if args.output is not None:
        write_compiled_tsv(compiled, output_path=args.output)
        print(f"Wrote {len(compiled.pronunciations)} entries to {args.output}")
    if args.report is not None:
        args.report.write_text(build_compile_report_md(compiled), encoding="utf-8")
        print(f"Wrote report to {args.report}")

    summary_rows = [
        ["source_lines", str(compiled.source_lines)],
        ["characters", str(len(compiled.pronunciations))],
        ["tone_marks", str(len(compiled.tone_marks))],
        ["duplicates_discarded", str(len(compiled.duplicates))],
    ]
    print(_format_table(["metric", "value"], summary_rows))

    reading_counts = collect_reading_counts(compiled.pronunciations)
    reading_rows = [[str(count), str(reading_counts[count])] for count in sorted(reading_counts)]
    print("\nCharacters per reading count:")
    print(_format_table(["readings", "characters"], reading_rows))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "convert":
        return _run_convert(args)
    return _run_compile(args)


if __name__ == "__main__":
    raise SystemExit(main())
