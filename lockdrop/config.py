"""Program presets and parameter loading."""

import logging
import os
from typing import Mapping, Optional

from lockdrop.allocation import InvalidParametersError, LockProgramParams
from lockdrop.units import parse_units

logger = logging.getLogger(__name__)

ARBITRUM_LOCKDROP = LockProgramParams(
    hard_cap_amount=parse_units("5000000", 6),
    max_duration_months=12,
    total_reward_pool=parse_units("1500000", 18),
    allowed_durations=(3, 6, 12),
    underlying_decimals=6,
    reward_decimals=18,
    underlying_symbol="USDC",
    reward_symbol="LDY",
)

ENV_KEYS = {
    'hard_cap': 'LOCKDROP_HARD_CAP',
    'reward_pool': 'LOCKDROP_REWARD_POOL',
    'max_duration_months': 'LOCKDROP_MAX_DURATION',
    'allowed_durations': 'LOCKDROP_DURATIONS',
}


def _parse_durations(value) -> tuple:
    if isinstance(value, str):
        parts = [p for p in value.replace(" ", "").split(",") if p]
    else:
        parts = list(value)
    try:
        return tuple(int(p) for p in parts)
    except (TypeError, ValueError):
        raise InvalidParametersError(f"Invalid lock durations: {value!r}") from None


def load_params(
    overrides: Optional[Mapping] = None,
    environ: Optional[Mapping[str, str]] = None,
    base: LockProgramParams = ARBITRUM_LOCKDROP,
) -> LockProgramParams:
    """
    Build program parameters from `base`, the environment, then explicit overrides.

    Amounts (`hard_cap`, `reward_pool`) are given in whole token units, e.g. "5000000".
    """
    environ = os.environ if environ is None else environ
    values = {key: environ[env] for key, env in ENV_KEYS.items() if environ.get(env)}
    values.update(overrides or {})

    unknown = set(values) - set(ENV_KEYS)
    if unknown:
        raise InvalidParametersError(f"Unknown program parameters: {sorted(unknown)}")

    try:
        hard_cap = (parse_units(str(values['hard_cap']), base.underlying_decimals)
                    if 'hard_cap' in values else base.hard_cap_amount)
        reward_pool = (parse_units(str(values['reward_pool']), base.reward_decimals)
                       if 'reward_pool' in values else base.total_reward_pool)
        max_duration = (int(values['max_duration_months'])
                        if 'max_duration_months' in values else base.max_duration_months)
    except ValueError as exc:
        raise InvalidParametersError(str(exc)) from exc
    durations = (_parse_durations(values['allowed_durations'])
                 if 'allowed_durations' in values else base.allowed_durations)

    params = LockProgramParams(
        hard_cap_amount=hard_cap,
        max_duration_months=max_duration,
        total_reward_pool=reward_pool,
        allowed_durations=durations,
        underlying_decimals=base.underlying_decimals,
        reward_decimals=base.reward_decimals,
        underlying_symbol=base.underlying_symbol,
        reward_symbol=base.reward_symbol,
    )
    if values:
        logger.info("Loaded lockdrop parameters with overrides: %s", sorted(values))
    return params
