"""Vault and strategy state, with the vault's share arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from dynamic_amm.errors import MathError
from dynamic_amm.pubkey import Pubkey

MAX_STRATEGY = 30
MAX_BUMPS = 10
LOCKED_PROFIT_DEGRADATION_DENOMINATOR = 1_000_000_000_000

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


def _as_u64(value: int) -> int:
    if not 0 <= value <= U64_MAX:
        raise MathError("Value does not fit in u64")
    return value


def _mul_u128(left: int, right: int) -> int:
    product = left * right
    if product > U128_MAX:
        raise MathError()
    return product


def _div(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise MathError("Division by zero")
    return numerator // denominator


@dataclass
class LockedProfitTracker:
    """Profit locked at the last report, released linearly over time."""

    last_updated_locked_profit: int = 0
    last_report: int = 0
    locked_profit_degradation: int = 0

    def calculate_locked_profit(self, current_time: int) -> int:
        """Profit still locked at the given time."""
        duration = current_time - self.last_report
        if duration < 0:
            raise MathError("Current time is before the last report")
        locked_fund_ratio = _mul_u128(duration, self.locked_profit_degradation)
        if locked_fund_ratio > LOCKED_PROFIT_DEGRADATION_DENOMINATOR:
            return 0
        locked_profit = _mul_u128(
            self.last_updated_locked_profit,
            LOCKED_PROFIT_DEGRADATION_DENOMINATOR - locked_fund_ratio,
        )
        return _as_u64(_div(locked_profit, LOCKED_PROFIT_DEGRADATION_DENOMINATOR))


@dataclass
class VaultBumps:
    vault_bump: int = 0
    token_vault_bump: int = 0


def _default_strategies() -> list[Pubkey]:
    return [Pubkey.default()] * MAX_STRATEGY


@dataclass
class Vault:
    """A yield vault holding liquidity for one token mint."""

    enabled: int = 0
    bumps: VaultBumps = field(default_factory=VaultBumps)
    total_amount: int = 0
    token_vault: Pubkey = field(default_factory=Pubkey.default)
    fee_vault: Pubkey = field(default_factory=Pubkey.default)
    token_mint: Pubkey = field(default_factory=Pubkey.default)
    lp_mint: Pubkey = field(default_factory=Pubkey.default)
    strategies: list[Pubkey] = field(default_factory=_default_strategies)
    base: Pubkey = field(default_factory=Pubkey.default)
    admin: Pubkey = field(default_factory=Pubkey.default)
    operator: Pubkey = field(default_factory=Pubkey.default)
    locked_profit_tracker: LockedProfitTracker = field(default_factory=LockedProfitTracker)

    def get_unlocked_amount(self, current_time: int) -> int:
        """Total amount minus the profit still locked."""
        locked = self.locked_profit_tracker.calculate_locked_profit(current_time)
        if locked > self.total_amount:
            raise MathError("Locked profit exceeds vault total amount")
        return self.total_amount - locked

    def get_amount_by_share(self, current_time: int, share: int, total_supply: int) -> int:
        """Token amount backing a number of LP shares."""
        total_amount = self.get_unlocked_amount(current_time)
        return _as_u64(_div(_mul_u128(share, total_amount), total_supply))

    def get_unmint_amount(self, current_time: int, out_token: int, total_supply: int) -> int:
        """LP shares that correspond to a token amount."""
        total_amount = self.get_unlocked_amount(current_time)
        return _as_u64(_div(_mul_u128(out_token, total_supply), total_amount))


class StrategyType(Enum):
    PORT_FINANCE_WITHOUT_LM = 0
    PORT_FINANCE_WITH_LM = 1
    SOLEND_WITHOUT_LM = 2
    MANGO = 3
    SOLEND_WITH_LM = 4
    APRICOT_WITHOUT_LM = 5
    FRANCIUM = 6
    TULIP = 7
    VAULT = 8
    DRIFT = 9
    FRAKT = 10
    MARGINFI = 11
    KAMINO = 12


@dataclass
class StrategyBumps:
    strategy_index: int = 0
    other_bumps: list[int] = field(default_factory=lambda: [0] * MAX_BUMPS)


@dataclass
class Strategy:
    """A lending strategy that a vault deposits into."""

    reserve: Pubkey = field(default_factory=Pubkey.default)
    collateral_vault: Pubkey = field(default_factory=Pubkey.default)
    strategy_type: StrategyType = StrategyType.VAULT
    current_liquidity: int = 0
    bumps: list[int] = field(default_factory=lambda: [0] * MAX_BUMPS)
    vault: Pubkey = field(default_factory=Pubkey.default)
    is_disable: int = 0