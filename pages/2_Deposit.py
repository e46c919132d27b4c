import streamlit as st

from lockdrop.deposit import DepositVault
from lockdrop.units import format_units, parse_units

st.set_page_config(layout="wide")


def main():
    symbol = st.sidebar.selectbox("Token", ["USDC", "EUROC"])
    vault = DepositVault(underlying_symbol=symbol, decimals=6)

    st.title(f"Deposit {symbol}")
    st.write(vault.describe())

    tab1, tab2 = st.tabs(["Deposit", "Withdraw"])
    with tab1:
        amount = st.text_input(f"Amount ({symbol})", value="100", key="deposit")
        try:
            minted = vault.preview_deposit(parse_units(amount, vault.decimals))
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.metric("You'll receive", f"{format_units(minted, vault.decimals, grouping=True)} {vault.ltoken_symbol}")

    with tab2:
        balance = st.text_input(f"Your {vault.ltoken_symbol} balance", value="0")
        amount = st.text_input(f"Amount ({vault.ltoken_symbol})", value="0", key="withdraw")
        try:
            redeemed = vault.preview_withdraw(
                parse_units(amount, vault.decimals),
                parse_units(balance, vault.decimals),
            )
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.metric("You'll receive", f"{format_units(redeemed, vault.decimals, grouping=True)} {symbol}")


if __name__ == "__main__":
    main()
