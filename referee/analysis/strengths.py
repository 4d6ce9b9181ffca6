"""Per-alternative strengths and weaknesses from normalized scores."""

from __future__ import annotations
from typing import Dict, Sequence, Tuple
import numpy as np

from ..config import AnalysisThresholds
from ..models import Alternative, Criterion, CriterionPerformance, OptionAnalysis, ScoringResult
from ..ops.percentile import percentile_ranks


def criterion_percentiles(
    scoring_result: ScoringResult,
    criterion: Criterion,
    direction_aware: bool = False,
) -> Dict[str, float]:
    """Mid-rank percentile of every scored alternative on one criterion.

    EN: By default computed on the normalized score as-is (higher value =
        higher percentile). With direction_aware, minimize criteria are
        negated first.
    JP: 既定では正規化スコアそのものの順位（値が大きいほど上位）。
    """
    ids = list(scoring_result.normalized_scores.keys())
    values = np.array([scoring_result.normalized_scores[a][criterion.id] for a in ids], dtype=float)
    if direction_aware and not criterion.maximize:
        values = -values
    return dict(zip(ids, percentile_ranks(values).tolist()))


def classify(
    alternative: Alternative,
    criteria: Sequence[Criterion],
    scoring_result: ScoringResult,
    percentiles: Dict[str, Dict[str, float]],
    thresholds: AnalysisThresholds,
) -> Tuple[Tuple[CriterionPerformance, ...], Tuple[CriterionPerformance, ...]]:
    """Return (strengths, weaknesses) for one alternative.

    Strengths are sorted by percentile descending, weaknesses ascending.
    """
    strengths, weaknesses = [], []
    normalized = scoring_result.normalized_scores[alternative.id]
    for c in criteria:
        pct = percentiles[c.id][alternative.id]
        perf = CriterionPerformance(
            criterion_id=c.id,
            criterion_name=c.name,
            raw_score=float(alternative.score_for(c.id)),
            normalized_score=float(normalized[c.id]),
            percentile_rank=float(np.clip(pct, 0.0, 1.0)),
        )
        if pct >= thresholds.strength_percentile:
            strengths.append(perf)
        elif pct <= thresholds.weakness_percentile:
            weaknesses.append(perf)
    strengths.sort(key=lambda p: -p.percentile_rank)
    weaknesses.sort(key=lambda p: p.percentile_rank)
    return tuple(strengths), tuple(weaknesses)


def option_analyses(
    scoring_result: ScoringResult,
    alternatives: Sequence[Alternative],
    criteria: Sequence[Criterion],
    thresholds: AnalysisThresholds,
) -> Dict[str, OptionAnalysis]:
    percentiles = {
        c.id: criterion_percentiles(scoring_result, c, thresholds.direction_aware_percentiles)
        for c in criteria
    }
    out: Dict[str, OptionAnalysis] = {}
    for alt in alternatives:
        strengths, weaknesses = classify(alt, criteria, scoring_result, percentiles, thresholds)
        out[alt.id] = OptionAnalysis(
            alternative_id=alt.id,
            strengths=strengths,
            weaknesses=weaknesses,
            overall_score=float(scoring_result.closeness_scores[alt.id]),
            rank=scoring_result.ranking_for(alt.id).rank,
        )
    return out
