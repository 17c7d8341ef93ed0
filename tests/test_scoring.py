import pytest

from floppy.data_models import ScoreState
from floppy.scoring import ScorePolicy


@pytest.fixture
def policy():
    return ScorePolicy()


@pytest.mark.parametrize("score, speed", [
    (0, 2.0),
    (2400, 2.0),
    (2500, 3.5),
    (4400, 3.5),
    (4500, 4.0),
    (5400, 4.0),
    (5500, 6.0),
    (100000, 6.0),
])
def test_speed_tiers(policy, score, speed):
    assert policy.speed_for(score) == speed


def test_award_reaching_medium_tier(policy):
    state = ScoreState(current=2400, all_time_high=2400, speed=2.0)
    policy.award(state)
    assert state.current == 2500
    assert state.speed == 3.5
    assert state.all_time_high == 2500


def test_award_below_previous_best(policy):
    state = ScoreState(current=0, all_time_high=9000, speed=2.0)
    policy.award(state)
    assert state.current == 100
    assert state.all_time_high == 9000


def test_reset_keeps_all_time_high(policy):
    state = ScoreState(current=4600, all_time_high=4600, speed=4.0)
    policy.reset(state)
    assert state == ScoreState(current=0, all_time_high=4600, speed=2.0)


def test_unsorted_tiers_are_sorted():
    policy = ScorePolicy(tiers=[(500, 5.0), (0, 1.0), (200, 2.0)])
    assert policy.base_speed == 1.0
    assert policy.speed_for(300) == 2.0
    assert policy.speed_for(500) == 5.0


def test_score_below_first_threshold_uses_first_tier():
    policy = ScorePolicy(tiers=[(100, 3.0), (200, 4.0)])
    assert policy.speed_for(0) == 3.0


def test_empty_tiers_rejected():
    with pytest.raises(ValueError):
        ScorePolicy(tiers=[])
