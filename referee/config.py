"""Central configuration dataclasses.

English:
    Scoring methodology and analysis thresholds live here. They are passed
    into the engine and analyzer as parameters; nothing is held globally.

日本語:
    スコアリング手法と分析のしきい値を一箇所で管理します。
    グローバル状態は持たず、引数として渡します。
"""

from __future__ import annotations
from dataclasses import dataclass


NORMALIZATION_METHODS = ("vector",)
WEIGHTING_APPROACHES = ("linear",)
DISTANCE_METRICS = ("euclidean", "manhattan", "chebyshev")
IDEAL_SOLUTION_METHODS = ("max_min",)


@dataclass(frozen=True)
class ScoringMethodology:
    """Which choices produced a ScoringResult.

    EN: Only the distance metric has alternatives today.
    JP: 現状、選択肢があるのは距離尺度のみです。
    """

    normalization: str = "vector"
    weighting: str = "linear"
    distance_metric: str = "euclidean"
    ideal_solution: str = "max_min"


@dataclass(frozen=True)
class AnalysisThresholds:
    """Trade-off analysis cut-offs."""

    strength_percentile: float = 0.75
    weakness_percentile: float = 0.25
    high_significance: float = 0.30
    medium_significance: float = 0.15
    confidence_cap: float = 0.95   # upper bound on recommendation confidence
    avoid_min_weaknesses: int = 2
    # EN: rank minimize criteria so that lower raw values count as strengths.
    # JP: 最小化基準では小さい値を強みとして扱う。
    direction_aware_percentiles: bool = False
