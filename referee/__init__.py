"""Option referee package.

English:
    Rank a handful of alternatives against weighted criteria with TOPSIS and
    explain the result through strengths, weaknesses, pairwise differences,
    Pareto dominance and recommendations.

日本語:
    TOPSISで少数の代替案を重み付き基準により順位付けし、強み・弱み・
    ペア比較・パレート支配・推奨によって結果を説明するパッケージです。
"""

from .version import __version__
from .analysis import analyze_trade_offs
from .config import AnalysisThresholds, ScoringMethodology
from .engine import score
from .models import (
    Alternative,
    Criterion,
    Direction,
    RecommendationType,
    ScaleDefinition,
    ScoringResult,
    TradeOffAnalysis,
)
from .pipeline import Comparison, compare
from .result import ErrorCode, RefereeError, Result, ValidationError
