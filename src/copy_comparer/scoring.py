from __future__ import annotations

from typing import List

from .config import ScoreWeights
from .models import TextMetrics
from .textutils import format_number, round_to_int

# Share of a metric's weight subtracted when a previously absent feature appears.
INTRODUCTION_PENALTY = 0.5

EMPTY_INPUT_SUMMARY = "Enter text in both fields to see an analysis."
NO_CHANGE_SUMMARY = (
    "The two versions are very similar in readability. The differences are minimal."
)
STRONGER_REMARK = " Overall, this is a stronger version for a wider audience."
WEAKER_REMARK = " Consider simplifying sentences and using more direct language."
SIMILAR_REMARK = " The readability is roughly the same as the original."


def _relative_gain(before: float, after: float) -> float:
    return (after - before) / before


def _relative_drop(before: float, after: float) -> float:
    return (before - after) / before


def _count_change(before: int, after: int, weight: float) -> float:
    """Weighted change for a count where fewer is better."""
    if before > 0:
        return _relative_drop(before, after) * weight
    if after > 0:
        return -weight * INTRODUCTION_PENALTY
    return 0.0


def calculate_improvement_score(
    before: TextMetrics,
    after: TextMetrics,
    weights: ScoreWeights | None = None,
) -> int:
    """
    Combine weighted relative metric changes into a signed percentage.

    Positive values mean the revision reads more easily. Returns 0 when either
    text has no words since no comparison is meaningful.
    """
    if before.word_count == 0 or after.word_count == 0:
        return 0
    weights = weights or ScoreWeights()

    total = 0.0
    if before.flesch_reading_ease > 0:
        total += (
            _relative_gain(before.flesch_reading_ease, after.flesch_reading_ease)
            * weights.flesch_reading_ease
        )
    if before.flesch_kincaid_grade > 0:
        total += (
            _relative_drop(before.flesch_kincaid_grade, after.flesch_kincaid_grade)
            * weights.flesch_kincaid_grade
        )
    if before.avg_sentence_length > 0:
        total += (
            _relative_drop(before.avg_sentence_length, after.avg_sentence_length)
            * weights.avg_sentence_length
        )
    total += _count_change(
        before.passive_voice_count,
        after.passive_voice_count,
        weights.passive_voice_count,
    )
    total += _count_change(
        before.adverb_count, after.adverb_count, weights.adverb_count
    )

    return round_to_int(total * 100)


def _observations(before: TextMetrics, after: TextMetrics) -> List[str]:
    observations: List[str] = []

    word_diff = after.word_count - before.word_count
    if word_diff < -10:
        observations.append("Your revision is more concise")
    elif word_diff > 10:
        observations.append("Your revision is longer")

    grade_before = format_number(before.flesch_kincaid_grade)
    grade_after = format_number(after.flesch_kincaid_grade)
    grade_diff = after.flesch_kincaid_grade - before.flesch_kincaid_grade
    if grade_diff < -1:
        observations.append(
            f"easier to read (grade level dropped from {grade_before} to {grade_after})"
        )
    elif grade_diff > 1:
        observations.append(
            f"more complex (grade level rose from {grade_before} to {grade_after})"
        )

    sentence_diff = after.avg_sentence_length - before.avg_sentence_length
    if sentence_diff < -3:
        observations.append("uses shorter sentences")
    elif sentence_diff > 3:
        observations.append("has longer sentences")

    passive_diff = after.passive_voice_count - before.passive_voice_count
    if passive_diff < 0:
        observations.append("uses more active voice")
    elif passive_diff > 0:
        observations.append("introduces more passive voice")

    adverb_diff = after.adverb_count - before.adverb_count
    if adverb_diff < -2:
        observations.append("cuts unnecessary adverbs")
    elif adverb_diff > 2:
        observations.append("adds more adverbs")

    return observations


def join_observations(observations: List[str]) -> str:
    """Join phrases into one sentence, capitalized, with an Oxford comma for 3+."""
    if not observations:
        return ""
    first = observations[0]
    sentence = first[:1].upper() + first[1:]
    rest = observations[1:]
    if len(rest) == 1:
        sentence += " and " + rest[0]
    elif rest:
        sentence += ", " + ", ".join(rest[:-1]) + ", and " + rest[-1]
    return sentence + "."


def generate_summary(
    before: TextMetrics,
    after: TextMetrics,
    score: int,
    *,
    long_sentence_threshold: float = 20,
) -> str:
    """Assemble a plain-language summary of how the revision changed."""
    if before.word_count == 0 or after.word_count == 0:
        return EMPTY_INPUT_SUMMARY

    observations = _observations(before, after)
    if not observations:
        return NO_CHANGE_SUMMARY

    summary = join_observations(observations)
    if score > 5:
        summary += STRONGER_REMARK
    elif score < -5:
        summary += WEAKER_REMARK
    else:
        summary += SIMILAR_REMARK

    if after.avg_sentence_length > long_sentence_threshold:
        summary += (
            f" Tip: Your average sentence is {format_number(after.avg_sentence_length)}"
            f" words. Consider breaking up sentences longer than"
            f" {format_number(long_sentence_threshold)} words."
        )

    return summary
