"""Dominance relations and the Pareto frontier over raw scores."""

from __future__ import annotations
from types import MappingProxyType
from typing import Sequence

from ..models import Alternative, Criterion, DominanceAnalysis
from ..ops.dominance import orient, dominance_matrix, non_dominated_fronts
from ..ops.matrix import build_matrix


def find_dominance(alternatives: Sequence[Alternative], criteria: Sequence[Criterion]) -> DominanceAnalysis:
    """Direction-aware Pareto dominance.

    Every id list keeps input order. The frontier is front 0 of the
    non-dominated sort, so it is never empty for a non-empty input.
    """
    ids = [a.id for a in alternatives]
    F = orient(build_matrix(alternatives, criteria), [c.maximize for c in criteria])
    D = dominance_matrix(F)

    fronts = tuple(tuple(ids[i] for i in front) for front in non_dominated_fronts(D))
    return DominanceAnalysis(
        dominant=tuple(ids[p] for p in range(len(ids)) if D[p].any()),
        dominated=tuple(ids[q] for q in range(len(ids)) if D[:, q].any()),
        pareto_frontier=fronts[0] if fronts else (),
        dominance_matrix=MappingProxyType({
            ids[p]: tuple(ids[q] for q in range(len(ids)) if D[p, q]) for p in range(len(ids))
        }),
        fronts=fronts,
    )
