from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .models import EditOp, OpType
from .tokenization import word_tokens


@dataclass(slots=True)
class LCSTable:
    """
    Longest-common-subsequence lengths stored in a flat row-major buffer.

    Cell (i, j) holds the LCS length of a[:i] and b[:j]. Memory is
    (len(a) + 1) * (len(b) + 1) ints, which is fine for short copy but grows
    quadratically with document size.
    """

    rows: int
    cols: int
    cells: List[int]

    def get(self, i: int, j: int) -> int:
        return self.cells[i * self.cols + j]


def lcs_table(a: Sequence[str], b: Sequence[str]) -> LCSTable:
    """Fill the LCS length table for two token sequences."""
    rows, cols = len(a) + 1, len(b) + 1
    cells = [0] * (rows * cols)

    for i in range(1, rows):
        row = i * cols
        prev_row = row - cols
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                cells[row + j] = cells[prev_row + j - 1] + 1
            else:
                cells[row + j] = max(cells[prev_row + j], cells[row + j - 1])

    return LCSTable(rows=rows, cols=cols, cells=cells)


def backtrack(table: LCSTable, a: Sequence[str], b: Sequence[str]) -> List[EditOp]:
    """
    Walk the table from the bottom-right corner and emit the edit script.

    When the cell to the left and the cell above carry the same LCS length the
    walk prefers Insert. That tie-break decides which of several equally short
    scripts is produced, so it must not change.
    """
    ops: List[EditOp] = []
    i, j = len(a), len(b)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            ops.append(EditOp(OpType.EQUAL, a[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table.get(i, j - 1) >= table.get(i - 1, j)):
            ops.append(EditOp(OpType.INSERT, b[j - 1]))
            j -= 1
        else:
            ops.append(EditOp(OpType.DELETE, a[i - 1]))
            i -= 1

    ops.reverse()
    return ops


def compute_diff(before: str, after: str) -> List[EditOp]:
    """Compute a word-level diff; whitespace differences are ignored."""
    before_words = word_tokens(before)
    after_words = word_tokens(after)
    table = lcs_table(before_words, after_words)
    return backtrack(table, before_words, after_words)
