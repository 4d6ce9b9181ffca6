"""Score and analyze in one call."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

from .analysis import analyze_trade_offs
from .config import AnalysisThresholds, ScoringMethodology
from .engine import score
from .models import Alternative, Criterion, ScoringResult, TradeOffAnalysis
from .result import Result


@dataclass(frozen=True)
class Comparison:
    scoring: ScoringResult
    trade_offs: TradeOffAnalysis


def compare(
    alternatives: Sequence[Alternative],
    criteria: Sequence[Criterion],
    methodology: Optional[ScoringMethodology] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> Result[Comparison]:
    """Run the scoring engine and the trade-off analyzer back to back.

    A failure from either stage is returned unchanged.
    """
    scored = score(alternatives, criteria, methodology=methodology, thresholds=thresholds)
    if not scored.ok:
        return scored
    analyzed = analyze_trade_offs(scored.value, alternatives, criteria, thresholds=thresholds)
    if not analyzed.ok:
        return analyzed
    return Result.success(Comparison(scoring=scored.value, trade_offs=analyzed.value))
