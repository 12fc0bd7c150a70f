import math

import pytest

from decision_mapper import ModelConsistencyError, ScoringConfig, get_scoring_config, set_scoring_config
from decision_mapper.model import Dimension, Option, OptionStatus
from decision_mapper.scoring import composite_score, compute_status, option_distance, ranked, top_n

SQUARE = [(0.0, 0.0), (0.6, 0.0), (0.6, 0.6), (0.0, 0.6)]


def dims(*prefs):
    return [Dimension(f"d{idx}", f"D{idx}", "L", "R", pref) for idx, pref in enumerate(prefs)]


def opt(option_id, *coords, name="x"):
    return Option(option_id, name, "", {f"d{idx}": value for idx, value in enumerate(coords)})


def test_distance_is_rms_over_all_dimensions():
    option = opt("a", 0.0, 0.0, 0.0)
    d = dims(0.3, 0.4, 0.0)
    assert option_distance(option, d) == pytest.approx(math.sqrt((0.09 + 0.16) / 3))


def test_distance_reads_missing_coordinates_as_midpoint():
    option = Option("a", "x", "", {"d0": 0.5})
    assert option_distance(option, dims(0.5, 0.5)) == 0.0
    assert option_distance(option, dims(0.5, 1.0)) == pytest.approx(math.sqrt(0.25 / 2))


def test_distance_without_dimensions_is_zero():
    assert option_distance(opt("a"), []) == 0.0


def test_compute_status_inside_and_outside():
    d = dims(0.5, 0.5)
    options = [opt("in", 0.5, 0.5), opt("out", 0.9, 0.9)]
    status = compute_status(d, options, SQUARE)

    assert status["in"] == OptionStatus(0.0, True, 1.0)
    assert not status["out"].inside
    assert status["out"].distance == pytest.approx(0.4)
    assert status["out"].score == pytest.approx(0.6 * 0.75)


def test_region_ignored_with_fewer_than_three_vertices():
    status = compute_status(dims(0.5, 0.5), [opt("a", 0.9, 0.9)], [(0.0, 0.0), (0.1, 0.1)])
    assert status["a"].inside
    assert status["a"].score == pytest.approx(0.6)


def test_region_uses_only_first_two_dimensions():
    d = dims(0.5, 0.5, 0.5)
    status = compute_status(d, [opt("a", 0.3, 0.3, 0.99)], SQUARE)
    assert status["a"].inside


def test_outside_option_can_outscore_inside_option():
    d = dims(0.7, 0.7)
    status = compute_status(d, [opt("far_in", 0.0, 0.0), opt("near_out", 0.7, 0.7)], SQUARE)
    assert status["near_out"].score > status["far_in"].score


def test_score_monotonic_in_distance():
    d = dims(0.5, 0.5, 0.5)
    previous = -1.0
    for value in (0.0, 0.1, 0.2, 0.3, 0.4, 0.5):
        score = compute_status(d, [opt("a", 0.3, 0.3, value)], SQUARE)["a"].score
        assert score >= previous
        previous = score


def test_moving_inside_raises_score_by_region_factor():
    outside = composite_score(0.2, False)
    inside = composite_score(0.2, True)
    assert inside > outside
    assert outside == pytest.approx(inside * 0.75)


def test_orphaned_coordinate_raises():
    option = Option("a", "x", "", {"d0": 0.1, "ghost": 0.4})
    with pytest.raises(ModelConsistencyError) as excinfo:
        compute_status(dims(0.5, 0.5), [option], SQUARE)
    assert "ghost" in str(excinfo.value)


def test_compute_status_does_not_mutate_inputs():
    d = dims(0.5, 0.5)
    option = Option("a", "x", "", {"d0": 0.2})
    polygon = list(SQUARE)
    compute_status(d, [option], polygon)
    assert option.scores == {"d0": 0.2}
    assert polygon == SQUARE


def test_config_substitution_changes_outside_penalty():
    saved = get_scoring_config()
    try:
        set_scoring_config(ScoringConfig(inside_factor=1.0, outside_factor=0.5))
        status = compute_status(dims(0.5, 0.5), [opt("out", 0.9, 0.9)], SQUARE)
        assert status["out"].score == pytest.approx(0.6 * 0.5)
    finally:
        set_scoring_config(saved)


def test_per_call_config_overrides_module_config():
    status = compute_status(
        dims(0.5, 0.5), [opt("out", 0.9, 0.9)], SQUARE, config=ScoringConfig(outside_factor=0.0)
    )
    assert status["out"].score == 0.0


def test_get_scoring_config_returns_copy():
    config = get_scoring_config()
    config.outside_factor = 0.1
    assert get_scoring_config().outside_factor == 0.75


def test_top_n_orders_by_score():
    d = dims(0.5, 0.5)
    options = [opt("worst", 1.0, 1.0), opt("best", 0.5, 0.5), opt("mid", 0.4, 0.4)]
    status = compute_status(d, options, SQUARE)
    assert [o.id for o in top_n(options, status, 2)] == ["best", "mid"]


def test_top_n_is_stable_for_equal_scores():
    d = dims(0.5, 0.5)
    options = [opt("a", 0.1, 0.1), opt("b", 0.5, 0.5), opt("c", 0.1, 0.1), opt("d", 0.1, 0.1)]
    status = compute_status(d, options, SQUARE)
    assert [o.id for o in top_n(options, status, 4)] == ["b", "a", "c", "d"]


def test_top_n_treats_missing_status_as_zero():
    options = [opt("unscored"), opt("scored")]
    status = {"scored": OptionStatus(0.9, True, 0.1)}
    assert [o.id for o in top_n(options, status)] == ["scored", "unscored"]


def test_top_n_empty():
    assert top_n([], {}, 3) == []


def test_ranked_pairs_options_with_status():
    d = dims(0.5, 0.5)
    options = [opt("a", 0.0, 0.0), opt("b", 0.5, 0.5)]
    status = compute_status(d, options, SQUARE)
    pairs = ranked(options, status)
    assert [(o.id, s.score) for o, s in pairs] == [("b", 1.0), ("a", status["a"].score)]
