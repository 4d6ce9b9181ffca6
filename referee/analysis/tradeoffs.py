"""Trade-off analysis on top of a ScoringResult.

English:
    Explains a ranking: strengths/weaknesses per alternative, pairwise
    differences, Pareto dominance and recommendations. The inputs are
    checked for consistency with the scoring stage first.

日本語:
    スコアリング結果を説明するための分析です。まず入力とスコアリング結果の
    整合性を確認します。
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Optional, Sequence
import logging

from ..config import AnalysisThresholds
from ..engine import is_finite_number
from ..models import Alternative, Criterion, ScoringResult, TradeOffAnalysis
from ..result import ErrorCode, Result, fail
from .dominance import find_dominance
from .pairwise import pairwise_comparisons
from .recommendations import generate_recommendations
from .strengths import option_analyses

logger = logging.getLogger(__name__)


def validate_inputs(
    scoring_result: ScoringResult,
    alternatives: Sequence[Alternative],
    criteria: Sequence[Criterion],
) -> Optional[Result]:
    if not isinstance(scoring_result, ScoringResult) or not scoring_result.rankings:
        return fail(
            "scoring_result",
            "A valid scoring result is required for trade-off analysis",
            ErrorCode.INVALID_SCORING_RESULT,
        )
    if alternatives is None or len(alternatives) < 2:
        return fail(
            "alternatives",
            "At least 2 alternatives are required for trade-off analysis",
            ErrorCode.INSUFFICIENT_OPTIONS,
        )
    if criteria is None or len(criteria) == 0:
        return fail(
            "criteria",
            "At least 1 criterion is required for trade-off analysis",
            ErrorCode.NO_CONSTRAINTS,
        )

    ranked = {r.alternative.id for r in scoring_result.rankings}
    for alt in alternatives:
        if (
            alt.id not in ranked
            or alt.id not in scoring_result.closeness_scores
            or alt.id not in scoring_result.normalized_scores
        ):
            return fail(
                "consistency",
                f"Alternative '{alt.id}' not found in scoring results",
                ErrorCode.MISSING_SCORING_DATA,
            )

    # EN: ranks and confidence assume the scored set is exactly the input set.
    # JP: スコアリング対象と入力の代替案集合は一致している必要がある。
    given = {alt.id for alt in alternatives}
    extra = sorted(ranked - given)
    if extra:
        return fail(
            "scoring_result",
            f"Scoring result ranks alternatives that were not given: {', '.join(extra)}",
            ErrorCode.INVALID_SCORING_RESULT,
        )

    for c in criteria:
        for alt_id, scores in scoring_result.normalized_scores.items():
            if c.id not in scores:
                return fail(
                    "consistency",
                    f"Criterion '{c.id}' has no normalized score for alternative '{alt_id}'",
                    ErrorCode.MISSING_SCORING_DATA,
                )
        for i, alt in enumerate(alternatives):
            if c.id not in alt.scores:
                return fail(
                    f"alternatives[{i}].scores",
                    f"Alternative '{alt.name}' is missing a score for criterion '{c.id}'",
                    ErrorCode.MISSING_SCORE,
                )
            if not is_finite_number(alt.scores[c.id]):
                return fail(
                    f"alternatives[{i}].scores",
                    f"Invalid score {alt.scores[c.id]!r} for criterion '{c.id}' "
                    f"in alternative '{alt.name}'",
                    ErrorCode.INVALID_SCORE,
                )
    return None


def analyze_trade_offs(
    scoring_result: ScoringResult,
    alternatives: Sequence[Alternative],
    criteria: Sequence[Criterion],
    thresholds: Optional[AnalysisThresholds] = None,
) -> Result[TradeOffAnalysis]:
    """Derive strengths, pairwise differences, dominance and recommendations."""
    thresholds = thresholds or AnalysisThresholds()

    problem = validate_inputs(scoring_result, alternatives, criteria)
    if problem is not None:
        logger.info("Trade-off analysis rejected: %s (%s)", problem.error.message, problem.error.code.value)
        return problem

    alternatives = list(alternatives)
    criteria = list(criteria)
    try:
        analyses = option_analyses(scoring_result, alternatives, criteria, thresholds)
        comparisons = pairwise_comparisons(scoring_result, alternatives, criteria, thresholds)
        dominance = find_dominance(alternatives, criteria)
        recommendations = generate_recommendations(analyses, dominance, thresholds)
    except (ArithmeticError, ValueError, KeyError) as exc:
        logger.exception("Trade-off analysis failed")
        return fail("analysis", f"Trade-off analysis failed: {exc}", ErrorCode.CALCULATION_ERROR)

    logger.debug(
        "Trade-offs: frontier=%s dominated=%s recommendations=%s",
        list(dominance.pareto_frontier),
        list(dominance.dominated),
        [r.type.value for r in recommendations],
    )
    return Result.success(
        TradeOffAnalysis(
            option_analyses=MappingProxyType(analyses),
            pairwise_comparisons=tuple(comparisons),
            dominance=dominance,
            recommendations=tuple(recommendations),
        )
    )
