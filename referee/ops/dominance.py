"""Pareto dominance between alternatives.

English:
    Scores are first oriented so that larger is always better (minimize
    columns are negated). Then:
      - a dominates b if a >= b everywhere and a > b somewhere
      - fast non-dominated sorting peels the set into successive fronts;
        front 0 is the Pareto frontier

日本語:
    最小化の列を符号反転し「大きいほど良い」に揃えてから支配関係を判定します。
    非支配ソートでフロントに分け、先頭のフロントがパレートフロンティアです。
"""

from __future__ import annotations
from typing import List, Sequence
import numpy as np


def orient(M: np.ndarray, maximize: Sequence[bool]) -> np.ndarray:
    sign = np.where(np.asarray(maximize, dtype=bool), 1.0, -1.0)
    return np.asarray(M, dtype=float) * sign


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    # EN/JP: Maximization dominance: >= in all and > in at least one.
    return bool(np.all(a >= b) and np.any(a > b))


def dominance_matrix(F: np.ndarray) -> np.ndarray:
    """D[p, q] is True when row p dominates row q."""
    n = len(F)
    D = np.zeros((n, n), dtype=bool)
    for p in range(n):
        for q in range(n):
            if p != q and dominates(F[p], F[q]):
                D[p, q] = True
    return D


def non_dominated_fronts(D: np.ndarray) -> List[List[int]]:
    """Split rows into fronts from a dominance matrix. Indices keep input order."""
    n = len(D)
    n_dom = D.sum(axis=0).astype(int)  # how many rows dominate each row
    fronts: List[List[int]] = [[p for p in range(n) if n_dom[p] == 0]]

    i = 0
    while fronts[i]:
        nxt = []
        for p in fronts[i]:
            for q in np.flatnonzero(D[p]):
                n_dom[q] -= 1
                if n_dom[q] == 0:
                    nxt.append(int(q))
        i += 1
        fronts.append(sorted(nxt))
    fronts.pop()
    return fronts
