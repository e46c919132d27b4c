import pytest

from lockdrop.allocation import LockProgramParams

USDC = 10**6
LDY = 10**18


@pytest.fixture
def params():
    # 5M USDC hard cap, 12 months, 1.5M LDY to distribute
    return LockProgramParams(
        hard_cap_amount=5_000_000 * USDC,
        max_duration_months=12,
        total_reward_pool=1_500_000 * LDY,
    )
