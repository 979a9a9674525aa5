from __future__ import annotations

from typing import Iterable, List

from .models import DisplaySegment, EditOp, OpType


def get_before_view(ops: Iterable[EditOp]) -> List[DisplaySegment]:
    """Project the edit script onto the original text; deletions are highlighted."""
    return [
        DisplaySegment(text=op.value, highlighted=op.type is OpType.DELETE)
        for op in ops
        if op.type in (OpType.EQUAL, OpType.DELETE)
    ]


def get_after_view(ops: Iterable[EditOp]) -> List[DisplaySegment]:
    """Project the edit script onto the revised text; insertions are highlighted."""
    return [
        DisplaySegment(text=op.value, highlighted=op.type is OpType.INSERT)
        for op in ops
        if op.type in (OpType.EQUAL, OpType.INSERT)
    ]
