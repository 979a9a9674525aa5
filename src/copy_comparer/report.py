from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, TypedDict

from .metrics import Direction, get_metric_direction
from .models import ComparisonResult, DisplaySegment, TextMetrics
from .textutils import format_number, round_half_up

NO_CHANGE = "--"


@dataclass(frozen=True, slots=True)
class MetricRow:
    """One line of the before/after metrics table."""

    key: str
    label: str
    before: str
    after: str
    change: str
    direction: Direction


def format_reading_time(seconds: int) -> str:
    """Render seconds as '45s', '1m 5s' or '2m'."""
    if seconds < 60:
        return f"{seconds}s"
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}m {secs}s" if secs > 0 else f"{minutes}m"


def reading_ease_label(score: float) -> str:
    if score >= 80:
        return "Easy"
    if score >= 60:
        return "Standard"
    if score >= 40:
        return "Difficult"
    return "Very Difficult"


def grade_level_label(grade: float) -> str:
    if grade <= 6:
        return "Elementary"
    if grade <= 8:
        return "Middle School"
    if grade <= 12:
        return "High School"
    return "College+"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def _signed(value: float, suffix: str = "") -> str:
    if value == 0:
        return NO_CHANGE
    sign = "+" if value > 0 else ""
    return f"{sign}{format_number(value)}{suffix}"


def _decimal_change(before: float, after: float) -> str:
    return _signed(round_half_up(after - before, 1))


_RowSpec = tuple[str, str, Callable[[float], str], Callable[[float, float], str]]

_ROW_SPECS: List[_RowSpec] = [
    ("word_count", "Word Count", lambda v: f"{v:,}", lambda b, a: _signed(a - b, " words")),
    ("sentence_count", "Sentences", lambda v: f"{v:,}", lambda b, a: _signed(a - b)),
    (
        "avg_sentence_length",
        "Avg Sentence Length",
        lambda v: f"{format_number(v)} words",
        _decimal_change,
    ),
    (
        "flesch_kincaid_grade",
        "Grade Level",
        lambda v: f"{format_number(v)} ({grade_level_label(v)})",
        _decimal_change,
    ),
    (
        "flesch_reading_ease",
        "Reading Ease",
        lambda v: f"{format_number(v)} ({reading_ease_label(v)})",
        _decimal_change,
    ),
    (
        "reading_time",
        "Reading Time",
        lambda v: format_reading_time(int(v)),
        lambda b, a: _signed(a - b, "s"),
    ),
    (
        "passive_voice_count",
        "Passive Voice",
        lambda v: _plural(int(v), "instance"),
        lambda b, a: _signed(a - b),
    ),
    (
        "adverb_count",
        "Adverbs (-ly)",
        lambda v: _plural(int(v), "word"),
        lambda b, a: _signed(a - b),
    ),
]


def metric_rows(before: TextMetrics, after: TextMetrics) -> List[MetricRow]:
    """Build the formatted metrics table, one row per metric."""
    rows: List[MetricRow] = []
    for key, label, fmt, change in _ROW_SPECS:
        before_value = getattr(before, key)
        after_value = getattr(after, key)
        rows.append(
            MetricRow(
                key=key,
                label=label,
                before=fmt(before_value),
                after=fmt(after_value),
                change=change(before_value, after_value),
                direction=get_metric_direction(key, before_value, after_value),
            )
        )
    return rows


def format_score(score: int) -> str:
    return f"{'+' if score > 0 else ''}{score}%"


def format_export(result: ComparisonResult) -> str:
    """Render the plain-text 'Copy Comparison Results' block."""
    b, a = result.before_metrics, result.after_metrics
    word_diff = a.word_count - b.word_count
    lines = [
        "=== Copy Comparison Results ===",
        "",
        f"Improvement Score: {format_score(result.improvement_score)}",
        "",
        "Metric Changes:",
        f"  Words: {b.word_count} → {a.word_count} "
        f"({'+' if word_diff > 0 else ''}{word_diff})",
        f"  Sentences: {b.sentence_count} → {a.sentence_count}",
        f"  Avg Sentence Length: {format_number(b.avg_sentence_length)} → "
        f"{format_number(a.avg_sentence_length)} words",
        f"  F-K Grade Level: {format_number(b.flesch_kincaid_grade)} → "
        f"{format_number(a.flesch_kincaid_grade)}",
        f"  Reading Ease: {format_number(b.flesch_reading_ease)} → "
        f"{format_number(a.flesch_reading_ease)}",
        f"  Passive Voice: {b.passive_voice_count} → {a.passive_voice_count}",
        f"  Adverbs: {b.adverb_count} → {a.adverb_count}",
        "",
        "Summary:",
        result.summary,
    ]
    return "\n".join(lines)


class SegmentPayload(TypedDict):
    text: str
    highlighted: bool


class ComparisonPayload(TypedDict):
    improvement_score: int
    summary: str
    before_metrics: dict
    after_metrics: dict
    before_view: List[SegmentPayload]
    after_view: List[SegmentPayload]


def _segments(segments: List[DisplaySegment]) -> List[SegmentPayload]:
    return [{"text": s.text, "highlighted": s.highlighted} for s in segments]


def result_to_dict(result: ComparisonResult) -> ComparisonPayload:
    """Convert a ComparisonResult into a JSON-serializable mapping."""
    return {
        "improvement_score": result.improvement_score,
        "summary": result.summary,
        "before_metrics": result.before_metrics.to_dict(),
        "after_metrics": result.after_metrics.to_dict(),
        "before_view": _segments(result.before_view),
        "after_view": _segments(result.after_view),
    }
