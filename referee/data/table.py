"""Build criteria and alternatives from tables.

English:
    Criteria table columns:
        id, name, weight, direction[, kind, scale_min, scale_max, unit]
    Alternatives table (wide): id, name, then one column per criterion id.
    Only structural conversion happens here; the engine validates numbers.

日本語:
    DataFrame（CSV）から評価基準と代替案を作ります。数値の検証はエンジン側で行います。
"""

from __future__ import annotations
from typing import List, Sequence
import pandas as pd

from ..models import Alternative, Criterion, ScaleDefinition


_CRITERIA_COLUMNS = ["id", "name", "weight", "direction"]


def criteria_from_frame(df: pd.DataFrame) -> List[Criterion]:
    missing = [c for c in _CRITERIA_COLUMNS if c not in df]
    if missing:
        raise ValueError(f"criteria table must have columns {_CRITERIA_COLUMNS}; missing {missing}")

    out = []
    for row in df.to_dict(orient="records"):
        scale = None
        if "scale_min" in row and "scale_max" in row and pd.notna(row["scale_min"]) and pd.notna(row["scale_max"]):
            unit = row.get("unit")
            scale = ScaleDefinition(
                min=float(row["scale_min"]),
                max=float(row["scale_max"]),
                unit=str(unit) if pd.notna(unit) else None,
            )
        kind = row.get("kind")
        out.append(
            Criterion(
                id=str(row["id"]),
                name=str(row["name"]),
                weight=float(row["weight"]),
                direction=str(row["direction"]).strip().lower(),
                scale=scale,
                kind=str(kind).strip().lower() if pd.notna(kind) else "custom",
            )
        )
    return out


def alternatives_from_frame(df: pd.DataFrame, criteria: Sequence[Criterion]) -> List[Alternative]:
    """One Alternative per row. Empty cells are left out of `scores`.

    A criterion column missing from the table is an error; a blank cell is
    not (the engine reports it as MISSING_SCORE).
    """
    if "id" not in df:
        raise ValueError("alternatives table must have an 'id' column")
    missing = [c.id for c in criteria if c.id not in df]
    if missing:
        raise ValueError(f"alternatives table has no column for criteria: {missing}")

    out = []
    for row in df.to_dict(orient="records"):
        scores = {c.id: float(row[c.id]) for c in criteria if pd.notna(row[c.id])}
        name = row.get("name")
        out.append(
            Alternative(
                id=str(row["id"]),
                name=str(name) if pd.notna(name) else str(row["id"]),
                scores=scores,
            )
        )
    return out
