from __future__ import annotations

import pytest

from pong_opponent import FieldGeometry, Vector3
from pong_opponent.controllers import TrajectoryPredictor, reflect_into_band

GEOMETRY = FieldGeometry(
    ground_height=20.0, edge_height=1.0, paddle_min_z=-7.5, paddle_max_z=7.5
)


@pytest.fixture
def predictor():
    return TrajectoryPredictor(GEOMETRY, near_term_seconds=1.0)


def test_geometry_bounds():
    assert GEOMETRY.upper_bound == 9.0
    assert GEOMETRY.lower_bound == -9.0
    assert GEOMETRY.field_height == 18.0


@pytest.mark.parametrize(
    "raw_z, expected",
    [
        (0.0, 0.0),
        (10.0, 8.0),  # one bounce off the upper edge
        (30.0, -6.0),  # two bounces
        (-10.0, -8.0),  # one bounce off the lower edge
    ],
)
def test_reflect_into_band(raw_z, expected):
    assert reflect_into_band(raw_z, -9.0, 9.0) == pytest.approx(expected)


def test_moving_away_holds_paddle_position(predictor):
    paddle = Vector3(10.0, 0.0, 3.0)

    assert predictor.predict(Vector3(0, 0, 0), paddle, Vector3(-4, 0, 1)) == 3.0
    assert predictor.predict(Vector3(0, 0, 0), paddle, Vector3(0, 0, 1)) == 3.0


def test_near_term_arrival_uses_current_ball_z(predictor):
    predicted = predictor.predict(
        Vector3(8.0, 0.0, 2.0), Vector3(10.0, 0.0, 0.0), Vector3(5.0, 0.0, 100.0)
    )

    assert predicted == 2.0


def test_extrapolates_and_folds(predictor):
    # time to paddle = 2 s, raw z = 1 + 4.5 * 2 = 10 -> folds to 8 -> clamps to 7.5
    predicted = predictor.predict(
        Vector3(0.0, 0.0, 1.0), Vector3(20.0, 0.0, 0.0), Vector3(10.0, 0.0, 4.5)
    )

    assert predicted == 7.5


def test_extrapolates_inside_paddle_range(predictor):
    predicted = predictor.predict(
        Vector3(0.0, 0.0, 0.0), Vector3(10.0, 0.0, 3.0), Vector3(5.0, 0.0, -3.0)
    )

    assert predicted == pytest.approx(-6.0)


@pytest.mark.parametrize("velocity_z", [-40.0, -8.6, 4.25, 8.0, 55.5])
def test_prediction_is_clamped_to_paddle_travel(predictor, velocity_z):
    predicted = predictor.predict(
        Vector3(0.0, 0.0, 0.0),
        Vector3(20.0, 0.0, 0.0),
        Vector3(10.0, 0.0, velocity_z),
    )

    assert GEOMETRY.paddle_min_z <= predicted <= GEOMETRY.paddle_max_z


def test_left_side_prediction_mirrors_direction(predictor):
    predicted = predictor.predict(
        Vector3(0.0, 0.0, 0.0),
        Vector3(-10.0, 0.0, 3.0),
        Vector3(-5.0, 0.0, -3.0),
        approach_sign=-1,
    )

    assert predicted == pytest.approx(-6.0)


def test_fold_below_lower_edge_stays_in_band():
    # A truncating remainder would give 10 here, above the upper edge.
    folded = reflect_into_band(-10.0, -9.0, 9.0)

    assert folded == pytest.approx(-8.0)
    assert -9.0 <= folded <= 9.0


@pytest.mark.parametrize("velocity_z, expected", [(1e308, 7.5), (-1e308, -7.5)])
def test_overflowing_extrapolation_is_clamped(predictor, velocity_z, expected):
    predicted = predictor.predict(
        Vector3(0.0, 0.0, 0.0),
        Vector3(20.0, 0.0, 0.0),
        Vector3(10.0, 0.0, velocity_z),
    )

    assert predicted == expected
