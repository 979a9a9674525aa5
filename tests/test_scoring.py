from copy_comparer.config import ScoreWeights
from copy_comparer.metrics import analyze_text
from copy_comparer.models import TextMetrics
from copy_comparer.scoring import (
    EMPTY_INPUT_SUMMARY,
    NO_CHANGE_SUMMARY,
    SIMILAR_REMARK,
    STRONGER_REMARK,
    WEAKER_REMARK,
    calculate_improvement_score,
    generate_summary,
    join_observations,
)

BEFORE = "It should be noted that our approach is fundamentally different."
AFTER = "Our approach is different."


def test_score_is_zero_without_words():
    filled = analyze_text(AFTER)
    assert calculate_improvement_score(TextMetrics(), filled) == 0
    assert calculate_improvement_score(filled, TextMetrics()) == 0


def test_score_for_tighter_revision_is_positive():
    score = calculate_improvement_score(analyze_text(BEFORE), analyze_text(AFTER))
    assert score == 37


def test_reading_ease_gain_uses_relative_change():
    before = TextMetrics(word_count=10, flesch_reading_ease=50.0)
    after = TextMetrics(word_count=10, flesch_reading_ease=60.0)
    assert calculate_improvement_score(before, after) == 6
    assert calculate_improvement_score(after, before) < 0


def test_introducing_passive_voice_and_adverbs_is_penalized():
    before = TextMetrics(word_count=10)
    after = TextMetrics(word_count=10, passive_voice_count=2, adverb_count=1)
    weights = ScoreWeights(passive_voice_count=0.5, adverb_count=0.25)

    # -0.25 - 0.125 = -0.375, rounded half-up to -37
    assert calculate_improvement_score(before, after, weights) == -37
    assert calculate_improvement_score(before, after) < 0


def test_zero_before_metrics_are_skipped():
    before = TextMetrics(word_count=10)
    after = TextMetrics(
        word_count=10,
        flesch_kincaid_grade=8.0,
        flesch_reading_ease=60.0,
        avg_sentence_length=12.0,
    )
    assert calculate_improvement_score(before, after) == 0


def test_join_observations():
    assert join_observations([]) == ""
    assert join_observations(["uses shorter sentences"]) == "Uses shorter sentences."
    assert join_observations(["a", "b"]) == "A and b."
    assert join_observations(["a", "b", "c"]) == "A, b, and c."


def test_summary_without_words():
    assert generate_summary(TextMetrics(), analyze_text(AFTER), 0) == EMPTY_INPUT_SUMMARY


def test_summary_without_meaningful_change():
    metrics = analyze_text(BEFORE)
    assert generate_summary(metrics, metrics, 0) == NO_CHANGE_SUMMARY


def test_summary_for_tighter_revision():
    before, after = analyze_text(BEFORE), analyze_text(AFTER)
    score = calculate_improvement_score(before, after)
    summary = generate_summary(before, after, score)

    assert summary.startswith("Easier to read (grade level dropped from ")
    assert "to 6.6) and uses shorter sentences." in summary
    assert summary.endswith(STRONGER_REMARK)
    assert "Tip:" not in summary


def test_summary_lists_many_improvements_with_oxford_comma():
    before = TextMetrics(
        word_count=30,
        flesch_kincaid_grade=10.0,
        avg_sentence_length=15.0,
        passive_voice_count=2,
        adverb_count=5,
    )
    after = TextMetrics(
        word_count=15,
        flesch_kincaid_grade=6.0,
        avg_sentence_length=8.0,
        passive_voice_count=0,
        adverb_count=1,
    )
    assert generate_summary(before, after, 20) == (
        "Your revision is more concise, easier to read (grade level dropped from "
        "10 to 6), uses shorter sentences, uses more active voice, and cuts "
        "unnecessary adverbs." + STRONGER_REMARK
    )


def test_summary_for_regression_adds_sentence_length_tip():
    before = TextMetrics(
        word_count=10, flesch_kincaid_grade=5.0, avg_sentence_length=10.0
    )
    after = TextMetrics(
        word_count=30,
        flesch_kincaid_grade=12.5,
        avg_sentence_length=22.5,
        passive_voice_count=1,
        adverb_count=3,
    )
    assert generate_summary(before, after, -20) == (
        "Your revision is longer, more complex (grade level rose from 5 to 12.5), "
        "has longer sentences, introduces more passive voice, and adds more adverbs."
        + WEAKER_REMARK
        + " Tip: Your average sentence is 22.5 words. Consider breaking up "
        "sentences longer than 20 words."
    )


def test_summary_for_small_change():
    before = TextMetrics(word_count=10, passive_voice_count=1)
    after = TextMetrics(word_count=10)
    assert generate_summary(before, after, 3) == "Uses more active voice." + SIMILAR_REMARK
