from decision_mapper.model import Dimension, Option
from decision_mapper.options import (
    OptionTemplate,
    away_from_preference,
    init_options,
    map_points,
    new_option,
    preference_point,
)


def dim(dim_id, preference=0.5, name=None):
    return Dimension(dim_id, name or dim_id.upper(), "L", "R", preference)


def test_init_options_places_outside_preference():
    options = init_options([dim("a", 0.8), dim("b", 0.2)])
    assert options
    for option in options:
        assert option.scores["a"] == 0.1
        assert option.scores["b"] == 0.9


def test_init_options_extra_dimensions_start_at_midpoint():
    options = init_options([dim("a", 0.5), dim("b", 0.49), dim("c", 0.9), dim("d", 0.1)])
    assert options[0].scores == {"a": 0.1, "b": 0.9, "c": 0.5, "d": 0.5}


def test_init_options_defaults_to_three_blank_options():
    options = init_options([dim("a"), dim("b")])
    assert len(options) == 3
    assert all(not option.is_named for option in options)
    assert len({option.id for option in options}) == 3


def test_init_options_respects_templates():
    options = init_options(
        [dim("a"), dim("b")],
        [OptionTemplate(name="Stay", notes="current job", id="stay"), OptionTemplate(name="Go")],
    )
    assert [option.name for option in options] == ["Stay", "Go"]
    assert options[0].id == "stay"
    assert options[0].notes == "current job"


def test_away_from_preference_boundary():
    assert away_from_preference(0.5) == 0.1
    assert away_from_preference(0.4999) == 0.9


def test_new_option_uses_current_preferences():
    option = new_option([dim("a", 0.1), dim("b", 0.9)], name="Later")
    assert option.name == "Later"
    assert option.scores == {"a": 0.9, "b": 0.1}


def test_new_option_with_single_dimension():
    assert new_option([dim("a", 0.7)]).scores == {"a": 0.1}


def test_map_points_projects_first_two_dimensions():
    dims = [dim("x"), dim("y"), dim("z")]
    options = [
        Option("o1", "Named", "", {"x": 0.2, "y": 0.3, "z": 0.9}),
        Option("o2", "  ", "", {"x": 0.6}),
    ]
    points = map_points(dims, options)
    assert [(p.id, p.x, p.y) for p in points] == [("o1", 0.2, 0.3), ("o2", 0.6, 0.5)]
    assert points[0].display_name == "Named"
    assert points[1].display_name == "New option"
    assert not points[1].is_named


def test_preference_point_defaults_missing_axes():
    assert preference_point([dim("x", 0.7), dim("y", 0.2)]) == (0.7, 0.2)
    assert preference_point([dim("x", 0.7)]) == (0.7, 0.5)
    assert preference_point([]) == (0.5, 0.5)
