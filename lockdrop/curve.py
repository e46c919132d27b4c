from typing import Iterable, Optional

import numpy as np
import pandas as pd

from lockdrop.allocation import LockPosition, LockProgramParams, NO_LOCK, evaluate


def allocation_curve(
    params: LockProgramParams,
    points: int = 50,
    durations: Optional[Iterable[int]] = None,
) -> pd.DataFrame:
    """
    Reward allocation over lock amounts from zero to the hard cap, one series per duration.

    Amounts are exact integers; the numpy grid only picks sample points.
    """
    if points < 2:
        raise ValueError("Curve needs at least two points")
    durations = tuple(durations) if durations is not None else params.allowed_durations

    grid = np.linspace(0, 1, points)
    amounts = sorted({int(round(x * 10**6)) * params.hard_cap_amount // 10**6 for x in grid})

    rows = []
    for duration in durations:
        for amount in amounts:
            result = evaluate(params, NO_LOCK, LockPosition(amount, duration))
            rows.append({
                'amount': amount,
                'duration': duration,
                'reward': result.reward_amount,
                'percent': result.allocation_percent,
            })
    return pd.DataFrame(rows, columns=['amount', 'duration', 'reward', 'percent'])
