from __future__ import annotations

import logging

from .config import ComparerConfig
from .diffing import compute_diff
from .metrics import analyze_text
from .models import ComparisonResult
from .scoring import calculate_improvement_score, generate_summary
from .views import get_after_view, get_before_view

logger = logging.getLogger(__name__)


def compare_texts(
    before: str, after: str, config: ComparerConfig | None = None
) -> ComparisonResult:
    """Diff two versions of a text and score how their readability changed."""
    cfg = config or ComparerConfig()

    ops = compute_diff(before, after)
    before_metrics = analyze_text(before, words_per_minute=cfg.words_per_minute)
    after_metrics = analyze_text(after, words_per_minute=cfg.words_per_minute)
    score = calculate_improvement_score(before_metrics, after_metrics, cfg.weights)
    summary = generate_summary(
        before_metrics,
        after_metrics,
        score,
        long_sentence_threshold=cfg.long_sentence_threshold,
    )

    logger.debug(
        "Compared texts words=%d→%d ops=%d score=%+d",
        before_metrics.word_count,
        after_metrics.word_count,
        len(ops),
        score,
    )
    return ComparisonResult(
        before_view=get_before_view(ops),
        after_view=get_after_view(ops),
        before_metrics=before_metrics,
        after_metrics=after_metrics,
        improvement_score=score,
        summary=summary,
        ops=ops,
    )
