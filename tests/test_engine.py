import logging
import math

import pytest

from referee.config import ScoringMethodology
from referee.engine import score
from referee.models import Alternative, Criterion
from referee.result import ErrorCode, RefereeError


def _ids(result):
    return [r.alternative.id for r in result.rankings]


def test_supplier_selection_ranks_c_b_a(suppliers, supplier_criteria):
    res = score(suppliers, supplier_criteria)
    assert res.ok
    out = res.value
    assert _ids(out) == ["C", "B", "A"]
    scores = [r.closeness_score for r in out.rankings]
    assert scores[0] > 0.6
    assert scores[0] > scores[1] > scores[2]
    assert [r.rank for r in out.rankings] == [1, 2, 3]


def test_supplier_result_fields(suppliers, supplier_criteria):
    out = score(suppliers, supplier_criteria).unwrap()
    assert out.criterion_ids == ("cost", "quality", "delivery", "service")
    assert len(out.ideal_solution) == 4
    assert len(out.negative_ideal_solution) == 4
    # cost is minimized: ideal is the lowest weighted cost (supplier B)
    assert out.ideal_solution[0] == pytest.approx(out.weighted_scores["B"]["cost"])
    assert out.negative_ideal_solution[0] == pytest.approx(out.weighted_scores["C"]["cost"])
    assert set(out.closeness_scores) == {"A", "B", "C"}
    assert out.methodology == ScoringMethodology()
    for alt_id, c in out.closeness_scores.items():
        d_pos = out.separation_positive[alt_id]
        d_neg = out.separation_negative[alt_id]
        assert c == pytest.approx(d_neg / (d_pos + d_neg))


def test_supplier_strength_tags(suppliers, supplier_criteria):
    out = score(suppliers, supplier_criteria).unwrap()
    c = out.ranking_for("C")
    assert c.strength_areas == ("Quality",)
    assert c.weakness_areas == ("Cost", "Delivery Time")
    b = out.ranking_for("B")
    assert b.strength_areas == ("Cost", "Delivery Time")
    assert b.weakness_areas == ()
    assert out.ranking_for("A").strength_areas == ("Service Level",)
    assert out.ranking_for("missing") is None


def test_score_is_deterministic(suppliers, supplier_criteria):
    first = score(suppliers, supplier_criteria).unwrap()
    second = score(suppliers, supplier_criteria).unwrap()
    assert first == second


def test_weight_scaling_does_not_change_ranking(suppliers, supplier_criteria):
    base = score(suppliers, supplier_criteria).unwrap()
    scaled = [
        Criterion(c.id, c.name, c.weight * 3.7, c.direction, c.scale, c.kind)
        for c in supplier_criteria
    ]
    other = score(suppliers, scaled).unwrap()
    assert _ids(other) == _ids(base)
    for r in base.rankings:
        assert other.closeness_scores[r.alternative.id] == pytest.approx(r.closeness_score)


def test_unnormalized_weights_log_a_warning(suppliers, supplier_criteria, caplog):
    scaled = [Criterion(c.id, c.name, c.weight * 2, c.direction) for c in supplier_criteria]
    with caplog.at_level(logging.WARNING, logger="referee.ops.matrix"):
        assert score(suppliers, scaled).ok
    assert "rescaling to 100" in caplog.text


def test_single_maximize_criterion_orders_by_raw_score():
    crit = [Criterion("perf", "Performance", 100, "maximize")]
    raw = {"a": 3.0, "b": 9.0, "c": 1.0, "d": 5.0}
    alts = [Alternative(k, k.upper(), {"perf": v}) for k, v in raw.items()]
    out = score(alts, crit).unwrap()
    assert _ids(out) == ["b", "d", "a", "c"]


def test_single_minimize_criterion_orders_by_lowest_raw_score():
    crit = [Criterion("price", "Price", 100, "minimize")]
    alts = [Alternative(k, k, {"price": v}) for k, v in {"a": 30.0, "b": 10.0, "c": 20.0}.items()]
    assert _ids(score(alts, crit).unwrap()) == ["b", "c", "a"]


def test_ties_keep_input_order():
    crit = [Criterion("x", "X", 100, "maximize")]
    alts = [Alternative(k, k, {"x": 5.0}) for k in ("first", "second", "third")]
    out = score(alts, crit).unwrap()
    assert _ids(out) == ["first", "second", "third"]
    # every alternative coincides with both ideal points
    assert all(r.closeness_score == 1.0 for r in out.rankings)
    assert [r.rank for r in out.rankings] == [1, 2, 3]


def test_degenerate_column_contributes_nothing():
    crit = [Criterion("same", "Same", 50, "maximize"), Criterion("x", "X", 50, "maximize")]
    alts = [
        Alternative("a", "a", {"same": 0.0, "x": 1.0}),
        Alternative("b", "b", {"same": 0.0, "x": 2.0}),
    ]
    out = score(alts, crit).unwrap()
    assert out.normalized_scores["a"]["same"] == 0.0
    assert out.normalized_scores["b"]["same"] == 0.0
    assert _ids(out) == ["b", "a"]
    assert out.rankings[0].closeness_score == pytest.approx(1.0)
    assert out.rankings[1].closeness_score == pytest.approx(0.0)


def test_closeness_bounds_and_dense_ranks():
    crit = [
        Criterion("a", "A", 20, "maximize"),
        Criterion("b", "B", 45, "minimize"),
        Criterion("c", "C", 35, "maximize"),
    ]
    alts = [
        Alternative("o1", "o1", {"a": 1, "b": 9, "c": -3}),
        Alternative("o2", "o2", {"a": 7, "b": 2, "c": 4}),
        Alternative("o3", "o3", {"a": 4, "b": 4, "c": 0}),
        Alternative("o4", "o4", {"a": 0, "b": 0, "c": 8}),
        Alternative("o5", "o5", {"a": 3, "b": 6, "c": 1}),
    ]
    out = score(alts, crit).unwrap()
    scores = [r.closeness_score for r in out.rankings]
    assert all(0.0 <= s <= 1.0 for s in scores)
    assert all(math.isfinite(s) for s in scores)
    assert all(scores[i] >= scores[i + 1] for i in range(len(scores) - 1))
    assert [r.rank for r in out.rankings] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("metric", ["manhattan", "chebyshev"])
def test_alternative_distance_metrics(suppliers, supplier_criteria, metric):
    out = score(suppliers, supplier_criteria, ScoringMethodology(distance_metric=metric)).unwrap()
    assert out.methodology.distance_metric == metric
    assert all(0.0 <= r.closeness_score <= 1.0 for r in out.rankings)


def test_result_does_not_share_caller_state(suppliers, supplier_criteria):
    raw = {"cost": 1.0, "quality": 1.0, "delivery": 1.0, "service": 1.0}
    alt = Alternative("D", "D", raw)
    raw["cost"] = 999.0
    assert alt.scores["cost"] == 1.0
    out = score(suppliers + [alt], supplier_criteria).unwrap()
    with pytest.raises(TypeError):
        out.closeness_scores["D"] = 0.0


# -- validation ---------------------------------------------------------------


def test_insufficient_options(supplier_criteria, suppliers):
    res = score(suppliers[:1], supplier_criteria)
    assert not res.ok
    assert res.error.code is ErrorCode.INSUFFICIENT_OPTIONS
    assert res.error.field == "alternatives"
    with pytest.raises(RefereeError):
        res.unwrap()


def test_no_constraints(suppliers):
    res = score(suppliers, [])
    assert res.error.code is ErrorCode.NO_CONSTRAINTS


def test_missing_score(suppliers, supplier_criteria):
    alts = suppliers + [Alternative("D", "Supplier D", {"cost": 100, "quality": 20})]
    res = score(alts, supplier_criteria)
    assert res.error.code is ErrorCode.MISSING_SCORE
    assert res.error.field == "alternatives[3].scores"
    assert "Supplier D" in res.error.message


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "high"])
def test_invalid_score(suppliers, supplier_criteria, bad):
    alts = suppliers + [Alternative("D", "D", {"cost": bad, "quality": 1, "delivery": 1, "service": 1})]
    assert score(alts, supplier_criteria).error.code is ErrorCode.INVALID_SCORE


@pytest.mark.parametrize("bad", [-1.0, float("nan"), float("inf")])
def test_invalid_weight(suppliers, supplier_criteria, bad):
    crit = list(supplier_criteria)
    crit[1] = Criterion("quality", "Quality", bad, "maximize")
    res = score(suppliers, crit)
    assert res.error.code is ErrorCode.INVALID_WEIGHT
    assert res.error.field == "criteria[1].weight"


def test_all_zero_weights_are_invalid(suppliers, supplier_criteria):
    crit = [Criterion(c.id, c.name, 0, c.direction) for c in supplier_criteria]
    assert score(suppliers, crit).error.code is ErrorCode.INVALID_WEIGHT


def test_unknown_methodology(suppliers, supplier_criteria):
    res = score(suppliers, supplier_criteria, ScoringMethodology(normalization="zscore"))
    assert res.error.code is ErrorCode.INVALID_METHODOLOGY
    assert res.error.field == "methodology.normalization"


def test_invalid_direction_is_rejected_at_construction():
    with pytest.raises(ValueError):
        Criterion("x", "X", 100, "sideways")


@pytest.mark.parametrize("small, big", [(1e-200, 2e-200), (1e199, 1e200)])
def test_single_criterion_ranks_extreme_magnitudes(small, big):
    crit = [Criterion("x", "X", 100, "maximize")]
    alts = [Alternative("small", "Small", {"x": small}), Alternative("big", "Big", {"x": big})]
    out = score(alts, crit).unwrap()
    assert _ids(out) == ["big", "small"]
    assert out.ranking_for("big").closeness_score == pytest.approx(1.0)
    assert out.ranking_for("small").closeness_score == pytest.approx(0.0)
