import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from lockdrop.units import format_units

logger = logging.getLogger(__name__)

DEFAULT_DURATIONS = (3, 6, 12)


class InvalidParametersError(ValueError):
    """Malformed program parameters or lock positions.

    Raised instead of computing anything: these are configuration or
    programming bugs, not outcomes to show the user.
    """


class LockError(Enum):
    AMOUNT_DECREASE = "amount cannot decrease"
    DURATION_DECREASE = "duration cannot decrease"
    EXCEEDS_HARD_CAP = "exceeds program hard cap"


def _require_int(name: str, value) -> None:
    # bool is an int subclass, but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParametersError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class LockProgramParams:
    hard_cap_amount: int
    max_duration_months: int
    total_reward_pool: int
    allowed_durations: Tuple[int, ...] = DEFAULT_DURATIONS
    underlying_decimals: int = 6
    reward_decimals: int = 18
    underlying_symbol: str = "USDC"
    reward_symbol: str = "LDY"

    def __post_init__(self):
        _require_int("Hard cap amount", self.hard_cap_amount)
        _require_int("Max duration", self.max_duration_months)
        _require_int("Total reward pool", self.total_reward_pool)
        if self.hard_cap_amount <= 0:
            raise InvalidParametersError("Hard cap amount must be positive")
        if self.max_duration_months <= 0:
            raise InvalidParametersError("Max duration must be positive")
        if self.total_reward_pool <= 0:
            raise InvalidParametersError("Total reward pool must be positive")

        durations = tuple(self.allowed_durations)
        if not durations:
            raise InvalidParametersError("At least one lock duration must be allowed")
        for duration in durations:
            _require_int("Allowed duration", duration)
            if duration <= 0 or duration > self.max_duration_months:
                raise InvalidParametersError(
                    f"Allowed duration {duration} must be within 1..{self.max_duration_months} months"
                )
        object.__setattr__(self, "allowed_durations", tuple(sorted(set(durations))))

        for name, decimals in (("Underlying decimals", self.underlying_decimals),
                               ("Reward decimals", self.reward_decimals)):
            _require_int(name, decimals)
            if decimals < 0:
                raise InvalidParametersError(f"{name} cannot be negative")

    @property
    def max_weight(self) -> int:
        return max_weight(self)


@dataclass(frozen=True)
class LockPosition:
    amount: int
    duration_months: int

    def __post_init__(self):
        _require_int("Lock amount", self.amount)
        _require_int("Lock duration", self.duration_months)
        if self.amount < 0:
            raise InvalidParametersError("Lock amount cannot be negative")
        if self.duration_months < 0:
            raise InvalidParametersError("Lock duration cannot be negative")

    @property
    def has_lock(self) -> bool:
        return self.amount != 0

    @property
    def weight(self) -> int:
        return self.amount * self.duration_months


NO_LOCK = LockPosition(0, 0)


@dataclass(frozen=True)
class AllocationResult:
    weight: int
    reward_amount: int
    allocation_percent: float
    is_valid: bool
    error_reason: Optional[LockError] = None


@dataclass(frozen=True)
class LockUpdate:
    deposit_amount: int
    extends_duration: bool

    @property
    def is_noop(self) -> bool:
        return self.deposit_amount <= 0 and not self.extends_duration


def max_weight(params: LockProgramParams) -> int:
    """Weight of the whole hard cap locked for the maximum duration."""
    return params.hard_cap_amount * params.max_duration_months


def _check_positions(params: LockProgramParams, current: LockPosition, proposed: LockPosition) -> None:
    if not isinstance(current, LockPosition) or not isinstance(proposed, LockPosition):
        raise InvalidParametersError("Positions must be LockPosition instances")
    if current.duration_months == 0 and current.amount != 0:
        raise InvalidParametersError("Current lock has an amount but no duration")
    if current.duration_months != 0 and current.duration_months not in params.allowed_durations:
        raise InvalidParametersError(
            f"Current lock duration {current.duration_months} is not one of {params.allowed_durations}"
        )
    if proposed.duration_months not in params.allowed_durations:
        raise InvalidParametersError(
            f"Proposed lock duration {proposed.duration_months} is not one of {params.allowed_durations}"
        )


def _validate(params: LockProgramParams, current: LockPosition, proposed: LockPosition) -> Optional[LockError]:
    if proposed.amount < current.amount:
        return LockError.AMOUNT_DECREASE
    if proposed.duration_months < current.duration_months:
        return LockError.DURATION_DECREASE
    if proposed.amount > params.hard_cap_amount:
        return LockError.EXCEEDS_HARD_CAP
    return None


def evaluate(params: LockProgramParams, current: LockPosition, proposed: LockPosition) -> AllocationResult:
    """
    Compute the reward allocation of `proposed` and validate it against `current`.

    The preview numbers are always computed, even for an invalid proposal,
    so callers can show them next to the blocking reason.
    """
    if not isinstance(params, LockProgramParams):
        raise InvalidParametersError("Program parameters must be a LockProgramParams instance")
    _check_positions(params, current, proposed)

    weight = proposed.weight
    pool = params.total_reward_pool

    # floor division: rounding never over-distributes the pool
    reward_amount = pool * weight // max_weight(params)
    if reward_amount > pool:
        reward_amount = pool

    if reward_amount == pool:
        allocation_percent = 100.0
    else:
        allocation_percent = reward_amount * 100 / pool

    error = _validate(params, current, proposed)
    logger.debug(
        "Evaluated lock amount=%d duration=%d: weight=%d reward=%d (%.6f%%)",
        proposed.amount, proposed.duration_months, weight, reward_amount, allocation_percent,
    )
    if error is not None:
        logger.debug("Lock proposal rejected: %s", error.value)

    return AllocationResult(
        weight=weight,
        reward_amount=reward_amount,
        allocation_percent=allocation_percent,
        is_valid=error is None,
        error_reason=error,
    )


def plan_update(current: LockPosition, proposed: LockPosition) -> LockUpdate:
    return LockUpdate(
        deposit_amount=proposed.amount - current.amount,
        extends_duration=proposed.duration_months != current.duration_months,
    )


def default_proposal(
    params: LockProgramParams,
    current: LockPosition,
    default_amount: Optional[int] = None,
    default_duration: Optional[int] = None,
) -> LockPosition:
    """Initial form state: the existing lock if any, else 100 units for the longest duration."""
    if current.has_lock:
        return current
    if default_amount is None:
        default_amount = 100 * 10 ** params.underlying_decimals
    if default_duration is None:
        default_duration = params.allowed_durations[-1]
    return LockPosition(default_amount, default_duration)


def selectable_durations(params: LockProgramParams, current: LockPosition) -> Tuple[int, ...]:
    return tuple(d for d in params.allowed_durations if d >= current.duration_months)


def duration_multiplier(duration_months: int) -> str:
    return f"x{duration_months}"


def transaction_summary(params: LockProgramParams, proposed: LockPosition, result: AllocationResult) -> str:
    amount = format_units(proposed.amount, params.underlying_decimals, grouping=True)
    reward = format_units(result.reward_amount, params.reward_decimals, precision=2, grouping=True)
    return (
        f"Lock {amount} {params.underlying_symbol} during {proposed.duration_months} months "
        f"against {reward} {params.reward_symbol}"
    )
