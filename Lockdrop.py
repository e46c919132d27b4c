import streamlit as st

st.set_page_config(
    page_title="Lockdrop Allocation Preview",
    layout="wide",
)

st.markdown("""
# Lockdrop Overview

The lockdrop lets users lock an underlying asset (USDC) for a chosen duration in exchange for a share of a
fixed reward pool (LDY). A separate deposit flow mints the yield-bearing L-token (LUSDC) 1:1 against USDC.
These pages preview what a lock earns; they never send a transaction.

## Allocation Rules

### 1. Weight
- A lock's **weight** is `amount * duration_months`
- The **max weight** is the whole hard cap locked for the maximum duration:
  `hard_cap * max_duration_months`

### 2. Reward
- reward = floor(reward_pool * weight / max_weight)
- The division truncates, so rounding never distributes more than the pool
- The reward is capped to the pool, and the allocation percentage to 100%

### 3. Lock Updates
Locks only grow:

- The amount cannot decrease
- The duration cannot decrease (shorter durations are disabled once locked)
- The amount cannot exceed the program hard cap

An invalid proposal still gets a preview, shown next to the reason it is rejected.

## Program Parameters

| Parameter | Value |
|:----------|-------|
| Hard cap | 5,000,000 USDC |
| Max duration | 12 months |
| Reward pool | 1,500,000 LDY |
| Durations | 3, 6 or 12 months |

The parameters can be overridden with the `LOCKDROP_HARD_CAP`, `LOCKDROP_REWARD_POOL`,
`LOCKDROP_MAX_DURATION` and `LOCKDROP_DURATIONS` environment variables.

## Pages

1. **Participate**: enter your current lock and a proposed update, see the LDY you'd receive
2. **Deposit**: preview a 1:1 deposit into the L-token
""")
