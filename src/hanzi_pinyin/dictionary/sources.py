"""Raw dictionary sources in pinyin-data line format."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from pypinyin import constants as pypinyin_constants


def format_source_line(code_point: int, pinyin: str) -> str:
    """Render one entry as ``U+XXXX: readings  # char``."""

    return f"U+{code_point:04X}: {pinyin}  # {chr(code_point)}"


def read_source_lines(path: Path) -> list[str]:
    """Read a UTF-8 dictionary source file.

    Args:
        path: Source file in pinyin-data line format.

    Returns:
        Lines without trailing newlines.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    if not path.exists():
        raise FileNotFoundError(f"Dictionary source not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def pypinyin_source_lines() -> Iterator[str]:
    """Render pypinyin's single-character table as source lines.

    pypinyin ships the pinyin-data character table as ``PINYIN_DICT`` keyed by
    code point. Lines are yielded in code point order.

    Yields:
        Source lines such as ``U+4F60: nǐ  # 你``.
    """

    yield "# pinyin-data single-character readings via pypinyin"
    for code_point in sorted(pypinyin_constants.PINYIN_DICT):
        yield format_source_line(code_point, str(pypinyin_constants.PINYIN_DICT[code_point]))
