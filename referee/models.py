"""Value objects shared by the scoring engine and the trade-off analyzer.

English:
    Everything here is immutable. Mappings handed in by callers are copied
    into read-only views so a result never refers back to caller state.

日本語:
    すべて不変オブジェクトです。呼び出し側の辞書はコピーして読み取り専用に
    するため、結果が呼び出し側の状態を参照することはありません。
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from .config import ScoringMethodology


def _frozen_map(m: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(m or {}))


class Direction(str, Enum):
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"


class CriterionKind(str, Enum):
    COST = "cost"
    PERFORMANCE = "performance"
    EFFICIENCY = "efficiency"
    CUSTOM = "custom"


class Significance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RecommendationType(str, Enum):
    BEST_OVERALL = "best_overall"
    COMPROMISE = "compromise"
    AVOID = "avoid"


@dataclass(frozen=True)
class ScaleDefinition:
    """Declared value range. Documentation only; scoring never reads it."""

    min: float
    max: float
    unit: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Criterion:
    id: str
    name: str
    weight: float  # share of 100 across all criteria
    direction: Direction = Direction.MAXIMIZE
    scale: Optional[ScaleDefinition] = None
    kind: CriterionKind = CriterionKind.CUSTOM

    def __post_init__(self):
        object.__setattr__(self, "direction", Direction(self.direction))
        object.__setattr__(self, "kind", CriterionKind(self.kind))

    @property
    def maximize(self) -> bool:
        return self.direction is Direction.MAXIMIZE


@dataclass(frozen=True)
class Alternative:
    id: str
    name: str
    scores: Mapping[str, float] = field(default_factory=dict)  # criterion id -> raw score
    description: Optional[str] = None
    metadata: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        object.__setattr__(self, "scores", _frozen_map(self.scores))
        if self.metadata is not None:
            object.__setattr__(self, "metadata", _frozen_map(self.metadata))

    def score_for(self, criterion_id: str) -> float:
        """Raw score on a criterion. A missing score is a KeyError, never zero."""
        return self.scores[criterion_id]


@dataclass(frozen=True)
class OptionRanking:
    alternative: Alternative
    rank: int  # 1-based
    closeness_score: float
    strength_areas: Tuple[str, ...] = ()
    weakness_areas: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoringResult:
    """Output of the scoring engine.

    Score maps are keyed ``alternative id -> criterion id -> value``.
    ``ideal_solution`` and ``negative_ideal_solution`` follow
    ``criterion_ids`` order. ``separation_positive``/``separation_negative``
    hold D+ and D- per alternative id.
    """

    rankings: Tuple[OptionRanking, ...]
    normalized_scores: Mapping[str, Mapping[str, float]]
    weighted_scores: Mapping[str, Mapping[str, float]]
    closeness_scores: Mapping[str, float]
    ideal_solution: Tuple[float, ...]
    negative_ideal_solution: Tuple[float, ...]
    methodology: ScoringMethodology = ScoringMethodology()
    separation_positive: Mapping[str, float] = field(default_factory=dict)
    separation_negative: Mapping[str, float] = field(default_factory=dict)
    criterion_ids: Tuple[str, ...] = ()

    def ranking_for(self, alternative_id: str) -> Optional[OptionRanking]:
        for r in self.rankings:
            if r.alternative.id == alternative_id:
                return r
        return None


@dataclass(frozen=True)
class CriterionPerformance:
    criterion_id: str
    criterion_name: str
    raw_score: float
    normalized_score: float
    percentile_rank: float


@dataclass(frozen=True)
class OptionAnalysis:
    alternative_id: str
    strengths: Tuple[CriterionPerformance, ...]
    weaknesses: Tuple[CriterionPerformance, ...]
    overall_score: float
    rank: int


@dataclass(frozen=True)
class CriterionDifference:
    criterion_id: str
    criterion_name: str
    score_difference: float  # raw a - raw b
    percentage_difference: float
    significance: Significance


@dataclass(frozen=True)
class PairwiseComparison:
    option_a: str
    option_b: str
    winner: str
    significant_differences: Tuple[CriterionDifference, ...]
    overall_score_difference: float


@dataclass(frozen=True)
class DominanceAnalysis:
    dominant: Tuple[str, ...]
    dominated: Tuple[str, ...]
    pareto_frontier: Tuple[str, ...]
    dominance_matrix: Mapping[str, Tuple[str, ...]]  # id -> ids it dominates
    fronts: Tuple[Tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class Recommendation:
    type: RecommendationType
    alternative_id: str
    reasoning: str
    confidence: float


@dataclass(frozen=True)
class TradeOffAnalysis:
    option_analyses: Mapping[str, OptionAnalysis]
    pairwise_comparisons: Tuple[PairwiseComparison, ...]
    dominance: DominanceAnalysis
    recommendations: Tuple[Recommendation, ...]

    def recommendation(self, kind: RecommendationType) -> Optional[Recommendation]:
        for rec in self.recommendations:
            if rec.type is RecommendationType(kind):
                return rec
        return None
