from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class OpType(str, Enum):
    """Kind of step in a word-level edit script."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class EditOp:
    """A single edit-script step carrying one word token."""

    type: OpType
    value: str


@dataclass(frozen=True, slots=True)
class DisplaySegment:
    """A view-ready word; highlighted marks a removal or an addition."""

    text: str
    highlighted: bool


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """Readability and style metrics derived from a single text."""

    word_count: int = 0
    sentence_count: int = 0
    avg_sentence_length: float = 0.0
    flesch_kincaid_grade: float = 0.0
    flesch_reading_ease: float = 0.0
    reading_time: int = 0
    passive_voice_count: int = 0
    adverb_count: int = 0
    syllable_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Everything a caller needs to render a before/after comparison."""

    before_view: list[DisplaySegment]
    after_view: list[DisplaySegment]
    before_metrics: TextMetrics
    after_metrics: TextMetrics
    improvement_score: int
    summary: str
    ops: list[EditOp] = field(default_factory=list)
