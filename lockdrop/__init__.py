from lockdrop.allocation import (
    AllocationResult,
    InvalidParametersError,
    LockError,
    LockPosition,
    LockProgramParams,
    LockUpdate,
    NO_LOCK,
    default_proposal,
    duration_multiplier,
    evaluate,
    max_weight,
    plan_update,
    selectable_durations,
    transaction_summary,
)
from lockdrop.units import format_units, parse_units
