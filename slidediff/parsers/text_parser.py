"""Parser for markdown and plain text files."""

from pathlib import Path


def parse_text(path: Path) -> str:
    """Read a .md or .txt file.

    The text is returned verbatim (apart from a UTF-8 byte order mark) so
    that line-level diffs reflect the file exactly.
    """
    return path.read_text(encoding="utf-8-sig")
