import pytest

from lockdrop.allocation import LockProgramParams
from lockdrop.curve import allocation_curve


def test_curve_shape(params):
    df = allocation_curve(params, points=11)

    assert list(df.columns) == ['amount', 'duration', 'reward', 'percent']
    assert len(df) == 11 * len(params.allowed_durations)
    assert sorted(df['duration'].unique()) == [3, 6, 12]


def test_curve_spans_zero_to_hard_cap(params):
    df = allocation_curve(params, points=5, durations=[12])

    assert df['amount'].iloc[0] == 0
    assert df['amount'].iloc[-1] == params.hard_cap_amount
    assert df['reward'].iloc[-1] == params.total_reward_pool
    assert df['percent'].iloc[-1] == 100.0


def test_curve_is_monotonic(params):
    df = allocation_curve(params, points=25)

    for _, series in df.groupby('duration'):
        rewards = list(series['reward'])
        assert rewards == sorted(rewards)


def test_longer_locks_earn_more(params):
    df = allocation_curve(params, points=3)
    at_cap = df[df['amount'] == params.hard_cap_amount].set_index('duration')['percent']

    assert at_cap[3] == pytest.approx(25.0)
    assert at_cap[6] == pytest.approx(50.0)
    assert at_cap[12] == 100.0


def test_curve_needs_two_points(params):
    with pytest.raises(ValueError):
        allocation_curve(params, points=1)


def test_small_hard_cap_deduplicates_amounts():
    params = LockProgramParams(hard_cap_amount=2, max_duration_months=12, total_reward_pool=100)
    df = allocation_curve(params, points=10, durations=[12])

    assert list(df['amount']) == [0, 1, 2]
