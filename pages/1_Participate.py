from datetime import datetime, timedelta

import altair as alt
import pandas as pd
import streamlit as st

from lockdrop.allocation import (
    InvalidParametersError,
    LockPosition,
    default_proposal,
    duration_multiplier,
    evaluate,
    plan_update,
    selectable_durations,
    transaction_summary,
)
from lockdrop.config import load_params
from lockdrop.curve import allocation_curve
from lockdrop.progress import ProgramProgress
from lockdrop.units import format_units, parse_units

st.set_page_config(layout="wide")


def create_current_lock_inputs(params):
    st.sidebar.header("Your Current Lock")

    with st.sidebar.expander("Existing Lock", expanded=True):
        amount = st.text_input(
            f"Locked Amount ({params.underlying_symbol})",
            value="0",
            help="Amount you already locked. Leave at 0 if you have no lock yet."
        )
        duration = st.selectbox(
            "Lock Duration (months)",
            options=(0,) + params.allowed_durations,
            index=0,
            help="Duration of your existing lock, 0 if you have none."
        )

    with st.sidebar.expander("Program State"):
        total_locked = st.text_input(
            f"Total Locked ({params.underlying_symbol})",
            value=format_units(params.hard_cap_amount // 2, params.underlying_decimals),
        )
        days_left = st.number_input("Days Left", value=28, min_value=0, step=1)

    return {
        "current": LockPosition(parse_units(amount, params.underlying_decimals), duration),
        "total_locked": parse_units(total_locked, params.underlying_decimals),
        "days_left": days_left,
    }


def create_proposal_inputs(params, current):
    default = default_proposal(params, current)
    durations = selectable_durations(params, current)

    if current.has_lock:
        col1, col2 = st.columns(2)
        with col1:
            st.metric(
                "Locked amount",
                f"{format_units(current.amount, params.underlying_decimals, grouping=True)} {params.underlying_symbol}"
            )
        with col2:
            st.metric("Lock duration", f"{current.duration_months} months")
        st.caption("You can increase your lock amount and/or duration using the below update form.")

    duration = st.radio(
        "Lock duration",
        options=durations,
        index=durations.index(default.duration_months) if default.duration_months in durations else len(durations) - 1,
        format_func=lambda d: f"{d}M ({duration_multiplier(d)})",
        horizontal=True,
        help="Duration cannot be decreased."
    )
    amount = st.text_input(
        f"Amount ({params.underlying_symbol})",
        value=format_units(default.amount, params.underlying_decimals),
    )
    return LockPosition(parse_units(amount, params.underlying_decimals), duration)


def create_result_panel(params, current, proposed, result):
    col1, col2 = st.columns(2)
    with col1:
        st.metric(
            "You'll receive",
            f"{format_units(result.reward_amount, params.reward_decimals, precision=2, grouping=True)} "
            f"{params.reward_symbol}"
        )
    with col2:
        st.metric("Of total allocation", f"{result.allocation_percent:.4f}%")

    update = plan_update(current, proposed)
    if not result.is_valid:
        st.error(result.error_reason.value.capitalize())
    elif update.is_noop:
        st.info("Nothing to update.")
    else:
        st.success(transaction_summary(params, proposed, result))
        if update.deposit_amount > 0:
            st.caption(
                f"Transfers {format_units(update.deposit_amount, params.underlying_decimals, grouping=True)} "
                f"{params.underlying_symbol}"
            )


def create_progress_panel(params, total_locked, days_left):
    progress = ProgramProgress(
        total_locked=total_locked,
        hard_cap_amount=params.hard_cap_amount,
        ends_at=datetime.now() + timedelta(days=days_left),
    )
    st.progress(progress.fill_ratio)
    st.caption(
        f"{format_units(total_locked, params.underlying_decimals, precision=0, grouping=True)} / "
        f"{format_units(params.hard_cap_amount, params.underlying_decimals, grouping=True)} "
        f"{params.underlying_symbol} ({progress.fill_percent:.0f}%). "
        f"Only {progress.days_left(datetime.now())} days left."
    )


def create_curve_chart(params, proposed, result):
    df = allocation_curve(params)
    df['amount_units'] = df['amount'].apply(lambda a: a / 10 ** params.underlying_decimals)
    marker = pd.DataFrame([{
        'amount_units': proposed.amount / 10 ** params.underlying_decimals,
        'percent': result.allocation_percent,
    }])

    lines = alt.Chart(df[['amount_units', 'duration', 'percent']]).mark_line().encode(
        x=alt.X('amount_units:Q', title=f'Amount ({params.underlying_symbol})'),
        y=alt.Y('percent:Q', title='Allocation %'),
        color=alt.Color('duration:N', title='Months')
    )
    point = alt.Chart(marker).mark_point(size=120, filled=True).encode(
        x='amount_units:Q',
        y='percent:Q',
    )
    st.altair_chart((lines + point).properties(title='Allocation by Lock Amount', height=300),
                    use_container_width=True)


def main():
    st.title("Lockdrop Participation")

    try:
        params = load_params()
    except InvalidParametersError as exc:
        st.error(f"Invalid lockdrop configuration: {exc}")
        return

    try:
        inputs = create_current_lock_inputs(params)
        proposed = create_proposal_inputs(params, inputs["current"])
        result = evaluate(params, inputs["current"], proposed)
    except ValueError as exc:
        st.error(str(exc))
        return

    create_progress_panel(params, inputs["total_locked"], inputs["days_left"])
    create_result_panel(params, inputs["current"], proposed, result)
    create_curve_chart(params, proposed, result)


if __name__ == "__main__":
    main()
