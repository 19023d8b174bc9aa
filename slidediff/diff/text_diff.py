"""Line-level text diffing and content normalization.

The differ is a plain longest-common-subsequence (LCS) table with a
backtracking pass. It is O(m*n) in the two line counts, which is fine for
slide-sized content but not meant for whole documents.
"""

from slidediff.schemas.diff_schema import TextDiff, TextDiffType


def diff_text(before_content: str, after_content: str) -> list[TextDiff]:
    """Compute a line-by-line edit script turning one text into another.

    Lines are compared exactly (no normalization). When several minimal
    edit scripts exist, a replaced line comes out as a ``remove`` followed
    by an ``add``.

    Args:
        before_content: The original text.
        after_content: The modified text.

    Returns:
        TextDiff entries in output order, with ``line_number`` counting
        1, 2, 3, ... over the returned list.
    """
    if before_content == "" and after_content == "":
        return []

    # An empty string is zero lines, not one empty line
    before_lines = before_content.split("\n") if before_content else []
    after_lines = after_content.split("\n") if after_content else []

    lcs = _lcs_table(before_lines, after_lines)
    return _backtrack(before_lines, after_lines, lcs)


def _lcs_table(before_lines: list[str], after_lines: list[str]) -> list[list[int]]:
    """lcs[i][j] is the LCS length of before_lines[:i] and after_lines[:j]."""
    m = len(before_lines)
    n = len(after_lines)
    lcs = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if before_lines[i - 1] == after_lines[j - 1]:
                lcs[i][j] = lcs[i - 1][j - 1] + 1
            else:
                lcs[i][j] = max(lcs[i - 1][j], lcs[i][j - 1])

    return lcs


def _backtrack(
    before_lines: list[str],
    after_lines: list[str],
    lcs: list[list[int]],
) -> list[TextDiff]:
    reversed_ops: list[tuple[TextDiffType, str]] = []
    i = len(before_lines)
    j = len(after_lines)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and before_lines[i - 1] == after_lines[j - 1]:
            reversed_ops.append((TextDiffType.UNCHANGED, before_lines[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or lcs[i][j - 1] >= lcs[i - 1][j]):
            # Ties prefer "add" here, which puts the remove first once reversed
            reversed_ops.append((TextDiffType.ADD, after_lines[j - 1]))
            j -= 1
        else:
            reversed_ops.append((TextDiffType.REMOVE, before_lines[i - 1]))
            i -= 1

    reversed_ops.reverse()
    return [
        TextDiff(type=op, value=value, line_number=index)
        for index, (op, value) in enumerate(reversed_ops, 1)
    ]


def normalize_text(text: str) -> str:
    """Canonicalize text for equality checks.

    - Converts CRLF and lone CR line endings to LF
    - Strips trailing whitespace from every line
    - Trims leading and trailing whitespace from the whole text

    Idempotent; whitespace-only input becomes the empty string.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(line.rstrip() for line in text.split("\n")).strip()


def normalized_text_equals(text1: str, text2: str) -> bool:
    """True if both texts are equal after ``normalize_text``."""
    return normalize_text(text1) == normalize_text(text2)
