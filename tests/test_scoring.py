import pytest

from weather_odds.scoring import ProbabilityScores, score


@pytest.mark.parametrize("temperature", [35, 36.5, 50, 1000])
def test_hot_is_90_from_35_regardless_of_other_inputs(temperature):
    assert score(temperature, 0, 0, -30, 7).hot == 90
    assert score(temperature, 100, 40, 60, 1).hot == 90


@pytest.mark.parametrize("temperature,expected", [(29.99, 0), (30, 50), (31.9, 50), (32, 70), (34.9, 70)])
def test_hot_buckets(temperature, expected):
    assert score(temperature, 50, 0, 10, 6).hot == expected


@pytest.mark.parametrize(
    "temperature,expected", [(-20, 90), (-5, 90), (-4.9, 70), (0, 70), (0.1, 50), (5, 50), (5.1, 0)]
)
def test_cold_buckets(temperature, expected):
    assert score(temperature, 50, 0, 10, 6).cold == expected


@pytest.mark.parametrize(
    "temperature,humidity,expected",
    [
        (32, 60, 90),
        (32, 59, 0),
        (30, 70, 75),
        (28, 70, 75),
        (28, 69, 50),
        (25, 60, 50),
        (24.9, 99, 0),
        (35, 75, 90),
    ],
)
def test_uncomfortable_buckets(temperature, humidity, expected):
    assert score(temperature, humidity, 0, 10, 6).uncomfortable == expected


def test_hot_but_dry_is_not_uncomfortable():
    assert score(33, 59, 0, 10, 6).uncomfortable == 0


@pytest.mark.parametrize("precipitation,expected", [(0, 0), (0.99, 0), (1, 20), (4.9, 20), (5, 50), (14.9, 50), (15, 85)])
def test_wet_base_without_seasonal_bonus(precipitation, expected):
    # July in the north earns no bonus
    assert score(20, 50, precipitation, 45, 7).wet == expected


def test_wet_northern_winter_bonus_is_clamped():
    assert score(5, 80, 20, 45, 1).wet == 95


def test_wet_bonus_applies_to_zero_base():
    assert score(10, 50, 0.5, 45, 12).wet == 15
    assert score(10, 50, 0.5, -33.9, 7).wet == 15


@pytest.mark.parametrize("month", [10, 11, 12, 1, 2, 3])
def test_wet_bonus_northern_half_only_north_of_equator(month):
    assert score(10, 50, 5, 10, month).wet == 65
    assert score(10, 50, 5, -10, month).wet == 50
    assert score(10, 50, 5, 0, month).wet == 50


@pytest.mark.parametrize("month", [4, 5, 6, 7, 8, 9])
def test_wet_bonus_southern_half_includes_equator(month):
    assert score(10, 50, 5, -10, month).wet == 65
    assert score(10, 50, 5, 0, month).wet == 65
    assert score(10, 50, 5, 10, month).wet == 50


@pytest.mark.parametrize(
    "args",
    [
        (-273, 0, 0, -90, 1),
        (60, 100, 500, 90, 12),
        (33, 99, 30, -89, 6),
        (0, -5, -3, 0, 13),
        (25, 60, 1, 0.0001, 0),
    ],
)
def test_scores_stay_within_bounds(args):
    result = score(*args)
    for value in result.as_dict().values():
        assert 0 <= value <= 95


def test_rounded_uses_payload_names():
    assert ProbabilityScores(hot=70, cold=0, wet=15, uncomfortable=90).rounded() == {
        "veryHotProbability": 70,
        "veryColdProbability": 0,
        "veryWetProbability": 15,
        "veryUncomfortableProbability": 90,
    }
