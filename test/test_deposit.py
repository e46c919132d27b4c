import pytest

from lockdrop.deposit import DepositVault


def test_ltoken_symbol():
    assert DepositVault("USDC", 6).ltoken_symbol == "LUSDC"
    assert DepositVault("EUROC", 6).ltoken_symbol == "LEUROC"


def test_deposit_is_one_to_one():
    vault = DepositVault("USDC", 6)
    assert vault.preview_deposit(0) == 0
    assert vault.preview_deposit(100_000_000) == 100_000_000


def test_withdraw_is_one_to_one():
    vault = DepositVault("USDC", 6)
    assert vault.preview_withdraw(40_000_000, ltoken_balance=100_000_000) == 40_000_000
    assert vault.preview_withdraw(100_000_000, ltoken_balance=100_000_000) == 100_000_000


def test_withdraw_more_than_balance():
    vault = DepositVault("USDC", 6)
    with pytest.raises(ValueError, match="balance is 100"):
        vault.preview_withdraw(100_000_001, ltoken_balance=100_000_000)


def test_negative_amounts_rejected():
    vault = DepositVault("USDC", 6)
    with pytest.raises(ValueError):
        vault.preview_deposit(-1)
    with pytest.raises(ValueError):
        vault.preview_withdraw(-1, ltoken_balance=10)


def test_invalid_vault():
    with pytest.raises(ValueError):
        DepositVault("", 6)
    with pytest.raises(ValueError):
        DepositVault("USDC", -1)


def test_describe_mentions_both_tokens():
    text = DepositVault("USDC", 6).describe()
    assert "LUSDC" in text
    assert "1:1" in text


@pytest.mark.parametrize("amount", [1.5, True, "100"])
def test_non_integer_amounts_rejected(amount):
    vault = DepositVault("USDC", 6)
    with pytest.raises(ValueError):
        vault.preview_deposit(amount)
    with pytest.raises(ValueError):
        vault.preview_withdraw(amount, ltoken_balance=10**9)


def test_non_integer_balance_rejected():
    with pytest.raises(ValueError):
        DepositVault("USDC", 6).preview_withdraw(1, ltoken_balance=2.0)
    with pytest.raises(ValueError):
        DepositVault("USDC", 6.0)
