"""Mid-rank percentiles used to flag strengths and weaknesses.

English:
    p(v) = (#values < v + 0.5 * #values == v) / n
    Ties share credit, so identical values all land on 0.5 (n >= 2) and
    never count as a strength or a weakness.

日本語:
    同値は0.5ずつ分け合う中間順位パーセンタイル。
"""

from __future__ import annotations
from typing import Sequence
import numpy as np


def percentile_ranks(values: Sequence[float]) -> np.ndarray:
    v = np.asarray(values, dtype=float)
    n = v.size
    if n == 0:
        return np.zeros(0, dtype=float)
    less = (v[None, :] < v[:, None]).sum(axis=1)
    equal = (v[None, :] == v[:, None]).sum(axis=1)
    return (less + 0.5 * equal) / n


def oriented_percentiles(W: np.ndarray, maximize: Sequence[bool]) -> np.ndarray:
    """Column-wise percentiles where 1.0 always means "best".

    EN: minimize columns are negated first, which is the same as 1 - p.
    JP: 最小化の列は符号を反転してから順位付けします（1 - p と同値）。
    """
    W = np.asarray(W, dtype=float)
    sign = np.where(np.asarray(maximize, dtype=bool), 1.0, -1.0)
    V = W * sign
    P = np.empty_like(V)
    for j in range(V.shape[1]):
        P[:, j] = percentile_ranks(V[:, j])
    return P
