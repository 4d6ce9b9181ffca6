"""Pairwise comparison of alternatives.

English:
    For every unordered pair (input order), report the closeness gap, the
    winner, and the criteria whose raw scores differ by more than the
    medium-significance threshold.

日本語:
    全ての組について総合スコア差・勝者・有意な差のある基準を求めます。
"""

from __future__ import annotations
from itertools import combinations
from typing import List, Sequence

from ..config import AnalysisThresholds
from ..models import (
    Alternative,
    Criterion,
    CriterionDifference,
    PairwiseComparison,
    ScoringResult,
    Significance,
)


def percentage_difference(a: float, b: float) -> float:
    """|a - b| / max(|a|, |b|), and 0 when both are 0."""
    scale = max(abs(a), abs(b))
    return abs(a - b) / scale if scale > 0 else 0.0


def significance(pct: float, thresholds: AnalysisThresholds = AnalysisThresholds()) -> Significance:
    if pct > thresholds.high_significance:
        return Significance.HIGH
    if pct > thresholds.medium_significance:
        return Significance.MEDIUM
    return Significance.LOW


def compare(
    a: Alternative,
    b: Alternative,
    criteria: Sequence[Criterion],
    scoring_result: ScoringResult,
    thresholds: AnalysisThresholds,
) -> PairwiseComparison:
    score_a = scoring_result.closeness_scores[a.id]
    score_b = scoring_result.closeness_scores[b.id]

    diffs = []
    for c in criteria:
        raw_a = float(a.score_for(c.id))
        raw_b = float(b.score_for(c.id))
        pct = percentage_difference(raw_a, raw_b)
        level = significance(pct, thresholds)
        if level is Significance.LOW:
            continue
        diffs.append(
            CriterionDifference(
                criterion_id=c.id,
                criterion_name=c.name,
                score_difference=raw_a - raw_b,
                percentage_difference=pct,
                significance=level,
            )
        )

    return PairwiseComparison(
        option_a=a.id,
        option_b=b.id,
        winner=a.id if score_a > score_b else b.id,
        significant_differences=tuple(diffs),
        overall_score_difference=abs(score_a - score_b),
    )


def pairwise_comparisons(
    scoring_result: ScoringResult,
    alternatives: Sequence[Alternative],
    criteria: Sequence[Criterion],
    thresholds: AnalysisThresholds,
) -> List[PairwiseComparison]:
    return [compare(a, b, criteria, scoring_result, thresholds) for a, b in combinations(alternatives, 2)]
