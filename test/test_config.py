import pytest

from lockdrop.allocation import InvalidParametersError
from lockdrop.config import ARBITRUM_LOCKDROP, load_params


def test_arbitrum_preset():
    assert ARBITRUM_LOCKDROP.hard_cap_amount == 5_000_000_000_000
    assert ARBITRUM_LOCKDROP.total_reward_pool == 1_500_000 * 10**18
    assert ARBITRUM_LOCKDROP.max_duration_months == 12
    assert ARBITRUM_LOCKDROP.allowed_durations == (3, 6, 12)
    assert ARBITRUM_LOCKDROP.max_weight == 60_000_000_000_000


def test_load_defaults():
    assert load_params(environ={}) == ARBITRUM_LOCKDROP


def test_load_from_environment():
    params = load_params(environ={
        'LOCKDROP_HARD_CAP': '1000000',
        'LOCKDROP_REWARD_POOL': '250000.5',
        'LOCKDROP_MAX_DURATION': '24',
        'LOCKDROP_DURATIONS': '6, 12, 24',
    })

    assert params.hard_cap_amount == 1_000_000 * 10**6
    assert params.total_reward_pool == 250_000_500_000_000_000_000_000
    assert params.max_duration_months == 24
    assert params.allowed_durations == (6, 12, 24)
    assert params.underlying_symbol == "USDC"


def test_overrides_win_over_environment():
    params = load_params(
        overrides={'hard_cap': '2000000', 'allowed_durations': [3, 12]},
        environ={'LOCKDROP_HARD_CAP': '1000000'},
    )
    assert params.hard_cap_amount == 2_000_000 * 10**6
    assert params.allowed_durations == (3, 12)


@pytest.mark.parametrize("overrides", [
    {'hard_cap': '0'},
    {'hard_cap': 'lots'},
    {'reward_pool': '-1'},
    {'max_duration_months': 'twelve'},
    {'allowed_durations': '3,x'},
    {'allowed_durations': '3,18'},
    {'lock_bonus': '2'},
])
def test_invalid_overrides(overrides):
    with pytest.raises(InvalidParametersError):
        load_params(overrides=overrides, environ={})
