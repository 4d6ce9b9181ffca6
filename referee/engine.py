"""Scoring engine: alternatives x criteria -> ranked ScoringResult.

English:
    Validates the inputs, then runs the TOPSIS pipeline:
      1) decision matrix        4) ideal / negative-ideal points
      2) vector normalization   5) separations D+ / D-
      3) weighting              6) closeness and ranking
    Validation failures and arithmetic failures come back as a failed
    `Result`; nothing is raised to the caller.

日本語:
    入力を検証したのちTOPSISの各段を実行します。検証エラー・計算エラーは
    例外ではなく失敗の `Result` として返します。
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Optional, Sequence
import logging
import math
import numpy as np

from .config import (
    AnalysisThresholds,
    ScoringMethodology,
    NORMALIZATION_METHODS,
    WEIGHTING_APPROACHES,
    DISTANCE_METRICS,
    IDEAL_SOLUTION_METHODS,
)
from .models import Alternative, Criterion, OptionRanking, ScoringResult
from .ops.matrix import build_matrix, vector_normalize, normalize_weights, apply_weights
from .ops.percentile import oriented_percentiles
from .ops.topsis import ideal_solutions, distances, closeness, rank_order
from .result import ErrorCode, Result, fail

logger = logging.getLogger(__name__)


def _validate_methodology(m: ScoringMethodology) -> Optional[Result]:
    allowed = {
        "normalization": NORMALIZATION_METHODS,
        "weighting": WEIGHTING_APPROACHES,
        "distance_metric": DISTANCE_METRICS,
        "ideal_solution": IDEAL_SOLUTION_METHODS,
    }
    for name, choices in allowed.items():
        value = getattr(m, name)
        if value not in choices:
            return fail(
                f"methodology.{name}",
                f"Unsupported {name} {value!r}; expected one of {', '.join(choices)}",
                ErrorCode.INVALID_METHODOLOGY,
            )
    return None


def is_finite_number(x) -> bool:
    if isinstance(x, bool):
        return False
    try:
        return math.isfinite(float(x))
    except (TypeError, ValueError):
        return False


def validate_inputs(
    alternatives: Sequence[Alternative],
    criteria: Sequence[Criterion],
) -> Optional[Result]:
    """Return the first failure found, or None when the inputs can be scored."""
    if alternatives is None or len(alternatives) < 2:
        return fail(
            "alternatives",
            "At least 2 alternatives are required for scoring",
            ErrorCode.INSUFFICIENT_OPTIONS,
        )
    if criteria is None or len(criteria) == 0:
        return fail(
            "criteria",
            "At least 1 criterion is required for scoring",
            ErrorCode.NO_CONSTRAINTS,
        )

    for i, alt in enumerate(alternatives):
        for c in criteria:
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

    for j, c in enumerate(criteria):
        if not is_finite_number(c.weight) or float(c.weight) < 0:
            return fail(
                f"criteria[{j}].weight",
                f"Invalid weight for criterion '{c.id}': {c.weight!r}",
                ErrorCode.INVALID_WEIGHT,
            )
    if sum(float(c.weight) for c in criteria) <= 0:
        return fail(
            "criteria",
            "Criterion weights sum to zero and cannot be normalized",
            ErrorCode.INVALID_WEIGHT,
        )
    return None


def _score_map(alternatives, criteria, X: np.ndarray):
    return MappingProxyType({
        alt.id: MappingProxyType({c.id: float(X[i, j]) for j, c in enumerate(criteria)})
        for i, alt in enumerate(alternatives)
    })


def _vector_map(alternatives, x: np.ndarray):
    return MappingProxyType({alt.id: float(x[i]) for i, alt in enumerate(alternatives)})


def score(
    alternatives: Sequence[Alternative],
    criteria: Sequence[Criterion],
    methodology: Optional[ScoringMethodology] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> Result[ScoringResult]:
    """Rank alternatives against weighted criteria.

    Parameters
    ----------
    alternatives:
        At least two alternatives, each scored on every criterion.
    criteria:
        At least one criterion; weights are shares of 100 (rescaled if not).
    methodology:
        ScoringMethodology. Defaults to vector / linear / euclidean / max_min.
    thresholds:
        Percentile cut-offs for the strength/weakness tags on each ranking.

    Returns
    -------
    Result wrapping a ScoringResult; rankings are best first, ties in input
    order.
    """
    methodology = methodology or ScoringMethodology()
    thresholds = thresholds or AnalysisThresholds()

    problem = _validate_methodology(methodology) or validate_inputs(alternatives, criteria)
    if problem is not None:
        logger.info("Scoring rejected: %s (%s)", problem.error.message, problem.error.code.value)
        return problem

    alternatives = list(alternatives)
    criteria = list(criteria)
    maximize = [c.maximize for c in criteria]

    try:
        M = build_matrix(alternatives, criteria)
        N = vector_normalize(M)
        weights = normalize_weights([float(c.weight) for c in criteria])
        W = apply_weights(N, weights)
        ideal, nadir = ideal_solutions(W, maximize)
        d_pos, d_neg = distances(W, ideal, nadir, metric=methodology.distance_metric)
        C = closeness(d_pos, d_neg)
    except (ArithmeticError, ValueError) as exc:
        logger.exception("TOPSIS calculation failed")
        return fail("calculation", f"TOPSIS calculation failed: {exc}", ErrorCode.CALCULATION_ERROR)

    if not all(np.all(np.isfinite(x)) for x in (N, W, ideal, nadir, d_pos, d_neg, C)):
        logger.error("TOPSIS produced non-finite values")
        return fail(
            "calculation",
            "TOPSIS calculation produced non-finite values",
            ErrorCode.CALCULATION_ERROR,
        )

    P = oriented_percentiles(W, maximize)
    rankings = []
    for rank, i in enumerate(rank_order(C), start=1):
        strengths = tuple(c.name for j, c in enumerate(criteria) if P[i, j] >= thresholds.strength_percentile)
        weaknesses = tuple(c.name for j, c in enumerate(criteria) if P[i, j] <= thresholds.weakness_percentile)
        rankings.append(
            OptionRanking(
                alternative=alternatives[i],
                rank=rank,
                closeness_score=float(C[i]),
                strength_areas=strengths,
                weakness_areas=weaknesses,
            )
        )

    result = ScoringResult(
        rankings=tuple(rankings),
        normalized_scores=_score_map(alternatives, criteria, N),
        weighted_scores=_score_map(alternatives, criteria, W),
        closeness_scores=_vector_map(alternatives, C),
        ideal_solution=tuple(float(v) for v in ideal),
        negative_ideal_solution=tuple(float(v) for v in nadir),
        methodology=methodology,
        separation_positive=_vector_map(alternatives, d_pos),
        separation_negative=_vector_map(alternatives, d_neg),
        criterion_ids=tuple(c.id for c in criteria),
    )
    logger.debug(
        "Scored %d alternatives on %d criteria; top=%s (%.4f)",
        len(alternatives), len(criteria), rankings[0].alternative.id, rankings[0].closeness_score,
    )
    return Result.success(result)
