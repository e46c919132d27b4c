from dataclasses import dataclass

from lockdrop.allocation import _require_int
from lockdrop.units import format_units


@dataclass(frozen=True)
class DepositVault:
    """
    Yield-bearing wrapper minted 1:1 against its underlying asset.

    Holding the L-token is enough to earn yield; rewards auto-compound into
    the balance and withdrawals redeem the underlying 1:1 at any time.
    """
    underlying_symbol: str
    decimals: int

    def __post_init__(self):
        if not self.underlying_symbol:
            raise ValueError("Underlying symbol must not be empty")
        _require_int("Decimals", self.decimals)
        if self.decimals < 0:
            raise ValueError("Decimals cannot be negative")

    @property
    def ltoken_symbol(self) -> str:
        return f"L{self.underlying_symbol}"

    def preview_deposit(self, amount: int) -> int:
        _require_int("Deposit amount", amount)
        if amount < 0:
            raise ValueError("Deposit amount cannot be negative")
        return amount

    def preview_withdraw(self, amount: int, ltoken_balance: int) -> int:
        _require_int("Withdraw amount", amount)
        _require_int("L-token balance", ltoken_balance)
        if amount < 0:
            raise ValueError("Withdraw amount cannot be negative")
        if amount > ltoken_balance:
            raise ValueError(
                f"Cannot withdraw {format_units(amount, self.decimals)} {self.ltoken_symbol}, "
                f"balance is {format_units(ltoken_balance, self.decimals)}"
            )
        return amount

    def describe(self) -> str:
        return (
            f"You will receive {self.ltoken_symbol} in a 1:1 ratio. "
            f"As soon as you hold some {self.ltoken_symbol}, you start earning announced yields on them. "
            f"There is no need to stake, your balance grows through time as rewards are auto-compounded. "
            f"At any time, you'll be able to withdraw your {self.ltoken_symbol} tokens against "
            f"{self.underlying_symbol} in a 1:1 ratio."
        )
