"""Decision matrix assembly, vector normalization and weighting.

English:
    Row i is an alternative, column j a criterion. The order of both axes is
    fixed once by the caller and reused by every later stage.

日本語:
    行=代替案、列=評価基準。軸の順序は最初に一度だけ決め、以降の段で共有します。
"""

from __future__ import annotations
from typing import Sequence
import logging
import numpy as np

from ..models import Alternative, Criterion

logger = logging.getLogger(__name__)


def build_matrix(alternatives: Sequence[Alternative], criteria: Sequence[Criterion]) -> np.ndarray:
    """M[i, j] = raw score of alternative i on criterion j.

    Raises KeyError when a score is missing; callers validate first.
    """
    M = np.empty((len(alternatives), len(criteria)), dtype=float)
    for i, alt in enumerate(alternatives):
        for j, c in enumerate(criteria):
            M[i, j] = float(alt.score_for(c.id))
    return M


def vector_normalize(M: np.ndarray) -> np.ndarray:
    # EN: N = M / ||column||. A column whose sum of squares is 0 becomes all zeros.
    #     Columns are scaled by their max |value| first so squaring neither
    #     overflows (1e200) nor underflows (1e-200).
    # JP: 列ノルムで割る。二乗和が0の列は全て0とする。
    #     二乗の桁あふれを避けるため、先に列の最大絶対値で割る。
    M = np.asarray(M, dtype=float)
    scale = np.abs(M).max(axis=0)
    degenerate = scale == 0.0
    if np.any(degenerate):
        logger.debug("Zero-norm columns set to 0: %s", np.flatnonzero(degenerate).tolist())
    S = M / np.where(degenerate, 1.0, scale)
    denom = np.sqrt((S**2).sum(axis=0))
    N = S / np.where(degenerate, 1.0, denom)
    N[:, degenerate] = 0.0
    return N


def normalize_weights(weights: Sequence[float]) -> np.ndarray:
    """Rescale weights so they sum to 100.

    The caller is expected to pass weights summing to 100 already; anything
    else is rescaled and logged. A zero total is rejected during validation.
    """
    w = np.asarray(weights, dtype=float)
    total = float(w.sum())
    if abs(total - 100.0) > 0.01:
        logger.warning("Criterion weights sum to %.4f, rescaling to 100", total)
    return w * (100.0 / total)


def apply_weights(N: np.ndarray, weights: Sequence[float]) -> np.ndarray:
    """W[i, j] = N[i, j] * weight_j / 100, weights given as shares of 100."""
    return np.asarray(N, dtype=float) * (np.asarray(weights, dtype=float) / 100.0)
