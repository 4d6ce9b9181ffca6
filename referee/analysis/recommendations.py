"""Recommendations with capped confidence.

English:
    - best_overall: the rank-1 alternative (always present)
    - compromise:   best-ranked Pareto-frontier member that is not rank 1
    - avoid:        lowest-ranked dominated alternative with enough weaknesses

    confidence = min(cap, 0.5 * rank_score + 0.3 * strength_score + 0.2 * weakness_score)

日本語:
    総合最良・妥協案・回避推奨の3種類を生成します。信頼度は上限(既定0.95)付き。
"""

from __future__ import annotations
from typing import List, Mapping, Optional

from ..config import AnalysisThresholds
from ..models import DominanceAnalysis, OptionAnalysis, Recommendation, RecommendationType


def confidence(analysis: OptionAnalysis, n_options: int, cap: float = 0.95) -> float:
    rank_score = (n_options - analysis.rank + 1) / n_options
    strength_score = min(len(analysis.strengths) / 3.0, 1.0)
    weakness_score = max(0.0, 1.0 - len(analysis.weaknesses) / 3.0)
    return min(cap, 0.5 * rank_score + 0.3 * strength_score + 0.2 * weakness_score)


def best_overall(
    analyses: Mapping[str, OptionAnalysis],
    thresholds: AnalysisThresholds,
) -> Optional[Recommendation]:
    if not analyses:
        return None
    best = min(analyses.values(), key=lambda a: a.rank)
    return Recommendation(
        type=RecommendationType.BEST_OVERALL,
        alternative_id=best.alternative_id,
        reasoning=(
            f"Ranks #{best.rank} with the highest overall score "
            f"({best.overall_score * 100:.1f}%). Strong performance in "
            f"{len(best.strengths)} key area{'' if len(best.strengths) == 1 else 's'}."
        ),
        confidence=confidence(best, len(analyses), thresholds.confidence_cap),
    )


def compromise(
    analyses: Mapping[str, OptionAnalysis],
    dominance: DominanceAnalysis,
    thresholds: AnalysisThresholds,
) -> Optional[Recommendation]:
    candidates = [analyses[i] for i in dominance.pareto_frontier if i in analyses and analyses[i].rank > 1]
    if not candidates:
        return None
    pick = min(candidates, key=lambda a: a.rank)
    return Recommendation(
        type=RecommendationType.COMPROMISE,
        alternative_id=pick.alternative_id,
        reasoning=(
            f"Balanced choice ranking #{pick.rank}. Not dominated by any other "
            f"alternative, so it offers a genuine trade-off against the top pick."
        ),
        confidence=confidence(pick, len(analyses), thresholds.confidence_cap),
    )


def avoid(
    analyses: Mapping[str, OptionAnalysis],
    dominance: DominanceAnalysis,
    thresholds: AnalysisThresholds,
) -> Optional[Recommendation]:
    candidates = [
        analyses[i]
        for i in dominance.dominated
        if i in analyses and len(analyses[i].weaknesses) >= thresholds.avoid_min_weaknesses
    ]
    if not candidates:
        return None
    pick = max(candidates, key=lambda a: a.rank)
    dominators = [p for p, beaten in dominance.dominance_matrix.items() if pick.alternative_id in beaten]
    return Recommendation(
        type=RecommendationType.AVOID,
        alternative_id=pick.alternative_id,
        reasoning=(
            f"Ranks #{pick.rank} with significant weaknesses in "
            f"{len(pick.weaknesses)} areas and is dominated by {', '.join(dominators)}. "
            f"Better alternatives are available."
        ),
        confidence=confidence(pick, len(analyses), thresholds.confidence_cap),
    )


def generate_recommendations(
    analyses: Mapping[str, OptionAnalysis],
    dominance: DominanceAnalysis,
    thresholds: AnalysisThresholds = AnalysisThresholds(),
) -> List[Recommendation]:
    found = [
        best_overall(analyses, thresholds),
        compromise(analyses, dominance, thresholds),
        avoid(analyses, dominance, thresholds),
    ]
    return [r for r in found if r is not None]
