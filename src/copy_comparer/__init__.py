"""
copy_comparer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ComparerConfig, ScoreWeights, config_from_dict, config_from_yaml, load_config
from .diffing import compute_diff
from .metrics import analyze_text, get_metric_direction
from .models import ComparisonResult, DisplaySegment, EditOp, OpType, TextMetrics
from .pipeline import compare_texts
from .scoring import calculate_improvement_score, generate_summary
from .views import get_after_view, get_before_view

__all__ = [
    "ComparerConfig",
    "ScoreWeights",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "compute_diff",
    "get_before_view",
    "get_after_view",
    "analyze_text",
    "get_metric_direction",
    "calculate_improvement_score",
    "generate_summary",
    "compare_texts",
    "ComparisonResult",
    "DisplaySegment",
    "EditOp",
    "OpType",
    "TextMetrics",
]

__version__ = "0.1.0"
