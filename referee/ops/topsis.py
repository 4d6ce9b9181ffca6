"""TOPSIS ideal points, separations and closeness.

English:
    Rank alternatives by closeness to the ideal point of the weighted matrix.
    Criteria can be maximized or minimized, so the ideal is chosen per column.

日本語:
    重み付き行列の理想点への近さで代替案を順位付けするTOPSIS実装です。
    基準ごとに最大化/最小化を考慮して理想点を決めます。
"""

from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np


def ideal_solutions(W: np.ndarray, maximize: Sequence[bool]) -> Tuple[np.ndarray, np.ndarray]:
    # EN: maximize -> ideal = column max, nadir = column min; minimize is reversed.
    # JP: 最大化なら理想=列最大・反理想=列最小。最小化はその逆。
    W = np.asarray(W, dtype=float)
    mask = np.asarray(maximize, dtype=bool)
    col_max = W.max(axis=0)
    col_min = W.min(axis=0)
    ideal = np.where(mask, col_max, col_min)
    nadir = np.where(mask, col_min, col_max)
    return ideal, nadir


def _separation(W: np.ndarray, point: np.ndarray, metric: str) -> np.ndarray:
    diff = np.abs(W - point)
    if metric == "euclidean":
        return np.sqrt((diff**2).sum(axis=1))
    if metric == "manhattan":
        return diff.sum(axis=1)
    if metric == "chebyshev":
        return diff.max(axis=1)
    raise ValueError(f"Unknown distance metric: {metric}")


def distances(
    W: np.ndarray,
    ideal: np.ndarray,
    nadir: np.ndarray,
    metric: str = "euclidean",
) -> Tuple[np.ndarray, np.ndarray]:
    """Return (D+, D-): separation of every row from the ideal and the nadir."""
    W = np.asarray(W, dtype=float)
    d_pos = _separation(W, np.asarray(ideal, dtype=float), metric)
    d_neg = _separation(W, np.asarray(nadir, dtype=float), metric)
    return d_pos, d_neg


def closeness(d_pos: np.ndarray, d_neg: np.ndarray) -> np.ndarray:
    """C = D- / (D+ + D-), and 1.0 where both separations are zero."""
    d_pos = np.asarray(d_pos, dtype=float)
    d_neg = np.asarray(d_neg, dtype=float)
    total = d_pos + d_neg
    zero = total == 0.0
    C = d_neg / np.where(zero, 1.0, total)
    C[zero] = 1.0
    return np.clip(C, 0.0, 1.0)


def rank_order(scores: Sequence[float]) -> np.ndarray:
    """Row indices sorted by score, best first. Ties keep input order."""
    s = np.asarray(scores, dtype=float)
    return np.argsort(-s, kind="stable")
