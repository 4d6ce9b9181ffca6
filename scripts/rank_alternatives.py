#!/usr/bin/env python3
"""Rank alternatives from two CSV files and explain the trade-offs.

Example:
  python scripts/rank_alternatives.py --criteria criteria.csv --alternatives suppliers.csv

criteria.csv:      id,name,weight,direction[,kind,scale_min,scale_max,unit]
alternatives.csv:  id,name,<one column per criterion id>
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path
import pandas as pd

# EN: Allow running as a script without install.
# JP: インストール前でも実行できるようにパスを追加。
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from referee.config import ScoringMethodology
from referee.data.table import alternatives_from_frame, criteria_from_frame
from referee.logging_config import setup_logging
from referee.pipeline import compare


def main() -> int:
    p = argparse.ArgumentParser()
    p.add_argument("--criteria", required=True)
    p.add_argument("--alternatives", required=True)
    p.add_argument("--distance", default="euclidean", choices=["euclidean", "manhattan", "chebyshev"])
    p.add_argument("--log-level", default="WARNING")
    p.add_argument("--log-file", default=None)
    args = p.parse_args()

    setup_logging(args.log_level, args.log_file)

    criteria = criteria_from_frame(pd.read_csv(args.criteria))
    alternatives = alternatives_from_frame(pd.read_csv(args.alternatives), criteria)

    res = compare(alternatives, criteria, methodology=ScoringMethodology(distance_metric=args.distance))
    if not res.ok:
        print(f"Error [{res.error.code.value}] {res.error.field}: {res.error.message}", file=sys.stderr)
        return 1

    scoring, trade_offs = res.value.scoring, res.value.trade_offs
    print("Ranking:")
    for r in scoring.rankings:
        extra = []
        if r.strength_areas:
            extra.append("strengths: " + ", ".join(r.strength_areas))
        if r.weakness_areas:
            extra.append("weaknesses: " + ", ".join(r.weakness_areas))
        print(f"  #{r.rank} {r.alternative.name:<20} {r.closeness_score:.4f}  {'; '.join(extra)}")

    print("Pareto frontier:", ", ".join(trade_offs.dominance.pareto_frontier))
    print("Recommendations:")
    for rec in trade_offs.recommendations:
        print(f"  [{rec.type.value}] {rec.alternative_id} (confidence {rec.confidence:.2f}): {rec.reasoning}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
