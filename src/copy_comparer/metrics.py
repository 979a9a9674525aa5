"""
Readability and style metrics for short English copy.

Everything here is heuristic: syllables come from vowel-group counting, passive
voice from an auxiliary + participle-looking regex, adverbs from an "-ly"
suffix check. The scoring thresholds in scoring.py assume exactly these
heuristics.
"""

from __future__ import annotations

import re
from typing import List, Literal

from .models import TextMetrics
from .textutils import round_half_up, round_to_int

DEFAULT_WORDS_PER_MINUTE = 200

WORD_RE = re.compile(r"\b[a-zA-Z'-]+\b", re.ASCII)
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+\s*")
NON_LETTER_RE = re.compile(r"[^a-z]")
VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

PASSIVE_AUXILIARIES = (
    "is",
    "was",
    "were",
    "been",
    "being",
    "are",
    "am",
    "has been",
    "have been",
    "had been",
    "will be",
    "shall be",
    "could be",
    "would be",
    "might be",
    "must be",
)
# \b and \w stay ASCII; the gap between auxiliary and participle accepts any Unicode space.
PASSIVE_VOICE_RE = re.compile(
    r"\b(" + "|".join(PASSIVE_AUXILIARIES) + r")(?u:\s)+(\w+ed|(\w+en))\b",
    re.IGNORECASE | re.ASCII,
)

# Common words ending in "-ly" that are not adverbs.
NON_ADVERBS = frozenset(
    {
        "only",
        "family",
        "early",
        "daily",
        "holy",
        "ugly",
        "lonely",
        "friendly",
        "lovely",
        "likely",
        "unlikely",
        "rally",
        "belly",
        "bully",
        "fly",
        "ally",
        "apply",
        "supply",
        "reply",
        "july",
        "italy",
        "multiply",
        "butterfly",
        "jelly",
        "lily",
        "assembly",
        "anomaly",
        "homily",
        "melancholy",
        "monopoly",
        "poly",
        "curly",
    }
)

Direction = Literal["improved", "worsened", "neutral"]

LOWER_IS_BETTER = frozenset(
    {
        "avg_sentence_length",
        "flesch_kincaid_grade",
        "passive_voice_count",
        "adverb_count",
    }
)
HIGHER_IS_BETTER = frozenset({"flesch_reading_ease"})


def split_words(text: str) -> List[str]:
    """Extract letter/apostrophe/hyphen runs used for counting."""
    if not text.strip():
        return []
    return WORD_RE.findall(text)


def split_sentences(text: str) -> List[str]:
    """Split on runs of terminal punctuation, dropping blank fragments."""
    if not text.strip():
        return []
    return [s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups with suffix adjustments."""
    word = NON_LETTER_RE.sub("", word.lower())
    if not word:
        return 0
    if len(word) <= 2:
        return 1

    count = len(VOWEL_GROUP_RE.findall(word))
    if count == 0:
        return 1

    # silent e
    if word.endswith("e") and not word.endswith("le") and count > 1:
        count -= 1
    if (
        word.endswith("es")
        and not word.endswith("tes")
        and not word.endswith("ses")
        and count > 1
    ):
        count -= 1
    if (
        word.endswith("ed")
        and not word.endswith("ted")
        and not word.endswith("ded")
        and count > 1
    ):
        count -= 1

    return max(1, count)


def count_passive_voice(text: str) -> int:
    """Count auxiliary-verb + '-ed'/'-en' word pairs."""
    return sum(1 for _ in PASSIVE_VOICE_RE.finditer(text))


def count_adverbs(text: str) -> int:
    """Count '-ly' words longer than three letters that are not known non-adverbs."""
    count = 0
    for word in split_words(text):
        lower = word.lower()
        if lower.endswith("ly") and len(lower) > 3 and lower not in NON_ADVERBS:
            count += 1
    return count


def analyze_text(
    text: str, *, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> TextMetrics:
    """Compute every readability metric for a single text."""
    if not text or not text.strip():
        return TextMetrics()

    words = split_words(text)
    sentences = split_sentences(text)
    word_count = len(words)
    sentence_count = max(len(sentences), 1)
    avg_sentence_length = word_count / sentence_count

    syllable_count = sum(count_syllables(word) for word in words)
    avg_syllables_per_word = syllable_count / word_count if word_count else 0.0

    if word_count:
        grade = 0.39 * avg_sentence_length + 11.8 * avg_syllables_per_word - 15.59
        ease = 206.835 - 1.015 * avg_sentence_length - 84.6 * avg_syllables_per_word
    else:
        grade = 0.0
        ease = 0.0

    return TextMetrics(
        word_count=word_count,
        sentence_count=sentence_count,
        avg_sentence_length=round_half_up(avg_sentence_length, 1),
        flesch_kincaid_grade=round_half_up(max(0.0, grade), 1),
        flesch_reading_ease=round_half_up(min(100.0, max(0.0, ease)), 1),
        reading_time=round_to_int(word_count / words_per_minute * 60),
        passive_voice_count=count_passive_voice(text),
        adverb_count=count_adverbs(text),
        syllable_count=syllable_count,
    )


def get_metric_direction(metric: str, before: float, after: float) -> Direction:
    """Classify a metric change as an improvement, a regression or neither."""
    if before == after:
        return "neutral"
    if metric in LOWER_IS_BETTER:
        return "improved" if after < before else "worsened"
    if metric in HIGHER_IS_BETTER:
        return "improved" if after > before else "worsened"
    # word count, sentence count and reading time carry no judgement
    return "neutral"
