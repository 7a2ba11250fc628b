import math

import pytest

from src.risk_scoring import (
    ADVICE,
    MAX_RISK_SCORE,
    PredictionResult,
    RiskLevel,
    WeatherObservation,
    advice_for,
    assess,
    assess_observation,
    classify,
    score_factors,
)


def test_max_risk_score_is_80():
    assert MAX_RISK_SCORE == 80
    assert assess(1000, 1000, 1000).risk_score == 80


@pytest.mark.parametrize(
    "rainfall, points",
    [(250, 40), (200.01, 40), (200, 30), (151, 30), (150, 20), (101, 20),
     (100, 10), (51, 10), (50, 0), (0, 0)],
)
def test_rainfall_bands(rainfall, points):
    assert score_factors(rainfall, 0, 0).rainfall == points


@pytest.mark.parametrize(
    "humidity, points",
    [(90, 25), (85, 15), (71, 15), (70, 5), (51, 5), (50, 0), (0, 0)],
)
def test_humidity_bands(humidity, points):
    assert score_factors(0, 0, humidity).humidity == points


@pytest.mark.parametrize(
    "temperature, points",
    [(38, 15), (35, 10), (31, 10), (30, 0), (-5, 0)],
)
def test_temperature_bands(temperature, points):
    assert score_factors(0, temperature, 0).temperature == points


def test_heavy_rain_alone_is_moderate():
    for rainfall in (200.5, 300, 10_000):
        result = assess(rainfall, 30, 50)
        assert score_factors(rainfall, 30, 50).rainfall == 40
        assert result.risk_score == 40
        assert result.risk_level is RiskLevel.MODERATE


@pytest.mark.parametrize(
    "score, level",
    [(0, RiskLevel.LOW), (29, RiskLevel.LOW), (30, RiskLevel.MODERATE),
     (49, RiskLevel.MODERATE), (50, RiskLevel.HIGH), (69, RiskLevel.HIGH),
     (70, RiskLevel.SEVERE), (80, RiskLevel.SEVERE)],
)
def test_classification_boundaries(score, level):
    assert classify(score) is level


def test_severe_scenario():
    result = assess(rainfall_mm=250, temperature_c=38, humidity_pct=90)

    assert result.risk_score == 80
    assert result.risk_level is RiskLevel.SEVERE
    assert len(result.advice) == 6
    assert result.advice[0] == "⚠️ IMMEDIATE EVACUATION RECOMMENDED"


def test_low_scenario():
    result = assess(rainfall_mm=30, temperature_c=25, humidity_pct=40)

    assert result.risk_score == 0
    assert result.risk_level is RiskLevel.LOW
    assert len(result.advice) == 5
    assert result.advice[0] == "Low flood risk currently"


def test_moderate_scenario():
    factors = score_factors(rainfall_mm=120, temperature_c=32, humidity_pct=75)
    result = assess(rainfall_mm=120, temperature_c=32, humidity_pct=75)

    assert (factors.rainfall, factors.humidity, factors.temperature) == (20, 15, 10)
    assert result.risk_score == 45
    assert result.risk_level is RiskLevel.MODERATE
    assert result.advice[0] == "Moderate flood risk - stay alert"


def test_high_scenario():
    result = assess(rainfall_mm=160, temperature_c=20, humidity_pct=80)

    assert result.risk_score == 45
    result = assess(rainfall_mm=160, temperature_c=32, humidity_pct=80)
    assert result.risk_score == 55
    assert result.risk_level is RiskLevel.HIGH
    assert result.advice[0].startswith("High flood risk detected")


def test_monotonic_in_each_input():
    values = [-10, 0, 30, 50, 50.5, 70, 85, 85.5, 100, 101, 150, 151, 200, 201, 500]
    fixed = [0, 32, 75, 160]

    for a in fixed:
        for b in fixed:
            scores = [assess(v, a, b).risk_score for v in values]
            assert scores == sorted(scores)
            scores = [assess(a, v, b).risk_score for v in values]
            assert scores == sorted(scores)
            scores = [assess(a, b, v).risk_score for v in values]
            assert scores == sorted(scores)


def test_identical_inputs_give_identical_results():
    first = assess(175, 33, 88)
    second = assess(175, 33, 88)

    assert first == second
    assert first is not second


def test_result_is_immutable():
    result = assess(120, 32, 75)

    with pytest.raises(AttributeError):
        result.risk_score = 0
    assert isinstance(result.advice, tuple)


@pytest.mark.parametrize(
    "rainfall, temperature, humidity",
    [(-100, -40, -5), (math.nan, math.nan, math.nan), (0, 0, 0), (-1, 20, 150)],
)
def test_out_of_range_inputs_do_not_raise(rainfall, temperature, humidity):
    result = assess(rainfall, temperature, humidity)

    assert isinstance(result, PredictionResult)
    assert 0 <= result.risk_score <= MAX_RISK_SCORE


def test_humidity_above_100_still_scores_top_band():
    assert assess(0, 0, 150).risk_score == 25


def test_assess_observation_matches_assess():
    observation = WeatherObservation(rainfall_mm=210, temperature_c=36, humidity_pct=60)

    assert assess_observation(observation) == assess(210, 36, 60)


def test_advice_covers_every_level():
    assert set(ADVICE) == set(RiskLevel)
    assert [len(advice_for(level)) for level in RiskLevel] == [5, 6, 6, 6]
    for level in RiskLevel:
        assert all(isinstance(item, str) and item for item in advice_for(level))


def test_advice_is_fixed_per_level():
    assert assess(60, 0, 0).advice == assess(0, 0, 0).advice
    assert assess(160, 36, 80).advice is advice_for(RiskLevel.HIGH)


def test_risk_levels_are_ordered_by_severity():
    assert RiskLevel.LOW < RiskLevel.MODERATE < RiskLevel.HIGH < RiskLevel.SEVERE
    assert RiskLevel.SEVERE >= RiskLevel.HIGH
    assert max(RiskLevel) is RiskLevel.SEVERE
    assert sorted([RiskLevel.HIGH, RiskLevel.LOW, RiskLevel.SEVERE]) == [
        RiskLevel.LOW, RiskLevel.HIGH, RiskLevel.SEVERE
    ]
    assert RiskLevel("moderate") == "moderate"
