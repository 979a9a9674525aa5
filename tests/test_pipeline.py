import logging

from copy_comparer.config import ComparerConfig, ScoreWeights
from copy_comparer.models import TextMetrics
from copy_comparer.pipeline import compare_texts
from copy_comparer.samples import SAMPLE_AFTER, SAMPLE_BEFORE
from copy_comparer.scoring import EMPTY_INPUT_SUMMARY

BEFORE = "It should be noted that our approach is fundamentally different."
AFTER = "Our approach is different."


def test_compare_texts_end_to_end():
    result = compare_texts(BEFORE, AFTER)

    assert [s.text for s in result.before_view if s.highlighted] == [
        "It",
        "should",
        "be",
        "noted",
        "that",
        "our",
        "fundamentally",
    ]
    assert [s.text for s in result.after_view if s.highlighted] == ["Our"]
    assert [s.text for s in result.after_view if not s.highlighted] == [
        "approach",
        "is",
        "different.",
    ]
    assert result.after_metrics.word_count < result.before_metrics.word_count
    assert result.after_metrics.adverb_count < result.before_metrics.adverb_count
    assert result.improvement_score == 37
    assert "uses shorter sentences" in result.summary
    assert len(result.ops) == 11


def test_compare_texts_with_empty_input():
    result = compare_texts("", "   ")

    assert result.before_view == []
    assert result.after_view == []
    assert result.before_metrics == result.after_metrics == TextMetrics()
    assert result.improvement_score == 0
    assert result.summary == EMPTY_INPUT_SUMMARY


def test_compare_texts_applies_config():
    config = ComparerConfig(
        words_per_minute=60,
        weights=ScoreWeights(
            flesch_reading_ease=0.0,
            flesch_kincaid_grade=0.0,
            avg_sentence_length=0.0,
            passive_voice_count=0.0,
            adverb_count=0.0,
        ),
    )
    result = compare_texts(BEFORE, AFTER, config)

    assert result.improvement_score == 0
    assert result.before_metrics.reading_time == 10
    assert result.summary.endswith(" The readability is roughly the same as the original.")


def test_sample_copy_scores_as_improvement():
    result = compare_texts(SAMPLE_BEFORE, SAMPLE_AFTER)

    assert result.improvement_score > 5
    assert result.summary.startswith("Your revision is more concise")
    assert result.before_metrics.passive_voice_count > result.after_metrics.passive_voice_count


def test_compare_texts_logs_debug_line(caplog):
    with caplog.at_level(logging.DEBUG, logger="copy_comparer.pipeline"):
        compare_texts(BEFORE, AFTER)
    assert "score=+37" in caplog.text
