"""Test configuration.

English:
    Allow running `pytest` without installing the package, and share the
    supplier-selection scenario across test modules.

日本語:
    パッケージをインストールしなくても `pytest` が動くように
    import path を調整し、共通のテストデータを提供します。
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Repo root contains the `referee/` package directory.
ROOT = Path(__file__).resolve().parents[1]

# EN: Add the parent dir so `import referee` works.
# JP: `import referee` が通るように親ディレクトリを追加。
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from referee.models import Alternative, Criterion, ScaleDefinition  # noqa: E402


@pytest.fixture
def supplier_criteria():
    return [
        Criterion("cost", "Cost", 30, "minimize", ScaleDefinition(0, 500), kind="cost"),
        Criterion("quality", "Quality", 40, "maximize", ScaleDefinition(0, 50), kind="performance"),
        Criterion("delivery", "Delivery Time", 20, "maximize", ScaleDefinition(0, 10), kind="performance"),
        Criterion("service", "Service Level", 10, "maximize", ScaleDefinition(0, 10), kind="performance"),
    ]


@pytest.fixture
def suppliers():
    return [
        Alternative("A", "Supplier A", {"cost": 250, "quality": 16, "delivery": 8.5, "service": 5}),
        Alternative("B", "Supplier B", {"cost": 200, "quality": 16, "delivery": 9.0, "service": 4}),
        Alternative("C", "Supplier C", {"cost": 300, "quality": 32, "delivery": 7.0, "service": 4}),
    ]


@pytest.fixture
def two_benefit_criteria():
    return [
        Criterion("x", "X", 50, "maximize"),
        Criterion("y", "Y", 50, "maximize"),
    ]


@pytest.fixture
def dominated_set():
    # EN: P dominates R, Q dominates R, P and Q trade off.
    # JP: PとQがRを支配し、PとQはトレードオフ関係。
    return [
        Alternative("P", "P", {"x": 10, "y": 10}),
        Alternative("Q", "Q", {"x": 8, "y": 12}),
        Alternative("R", "R", {"x": 5, "y": 5}),
    ]
