"""Off-chain swap quotes for a pool backed by two yield vaults."""

from __future__ import annotations

import copy
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from dynamic_amm.curves import TradeDirection, get_swap_curve
from dynamic_amm.depeg import update_base_virtual_price
from dynamic_amm.errors import MathError, QuoteError
from dynamic_amm.pubkey import Pubkey
from dynamic_amm.state import ActivationType, Pool
from dynamic_amm.vault import Vault

U64_MAX = 2**64 - 1


@contextmanager
def _context(message: str) -> Iterator[None]:
    try:
        yield
    except MathError as exc:
        raise QuoteError(message) from exc


def _u64(value: int, message: str) -> int:
    if not 0 <= value <= U64_MAX:
        raise QuoteError(message)
    return value


@dataclass
class Clock:
    """Cluster clock values relevant to a quote."""

    slot: int = 0
    unix_timestamp: int = 0
    epoch: int = 0


@dataclass
class VaultInfo:
    """A vault with the pool's LP share of it."""

    lp_amount: int
    lp_supply: int
    vault: Vault


@dataclass
class QuoteData:
    """Everything needed to quote a swap against a pool."""

    pool: Pool
    vault_a: Vault
    vault_b: Vault
    pool_vault_a_lp_amount: int
    pool_vault_b_lp_amount: int
    vault_a_lp_supply: int
    vault_b_lp_supply: int
    vault_a_token_amount: int
    vault_b_token_amount: int
    clock: Clock
    stake_data: dict[Pubkey, bytes] = field(default_factory=dict)


@dataclass(frozen=True)
class QuoteResult:
    """Swap output and the trading fee, in the input token."""

    out_amount: int
    fee: int


def compute_quote(in_token_mint: Pubkey, in_amount: int, quote_data: QuoteData) -> QuoteResult:
    """Quote swapping in_amount of in_token_mint through the pool."""
    pool = copy.deepcopy(quote_data.pool)
    vault_a = copy.deepcopy(quote_data.vault_a)
    vault_b = copy.deepcopy(quote_data.vault_b)
    clock = quote_data.clock

    activation_type = ActivationType.from_value(pool.bootstrapping.activation_type)
    if activation_type is ActivationType.SLOT:
        current_point = clock.slot
    else:
        current_point = clock.unix_timestamp % 2**64

    if not pool.enabled:
        raise QuoteError("Pool disabled")
    if current_point < pool.bootstrapping.activation_point:
        raise QuoteError("Swap is disabled")

    update_base_virtual_price(pool, clock.unix_timestamp, quote_data.stake_data)

    current_time = _u64(clock.unix_timestamp, "Invalid clock timestamp")

    if in_token_mint not in (pool.token_a_mint, pool.token_b_mint):
        raise QuoteError("In token mint not matches with pool token mints")

    with _context("Fail to get token a amount"):
        token_a_amount = vault_a.get_amount_by_share(
            current_time, quote_data.pool_vault_a_lp_amount, quote_data.vault_a_lp_supply
        )
    with _context("Fail to get token b amount"):
        token_b_amount = vault_b.get_amount_by_share(
            current_time, quote_data.pool_vault_b_lp_amount, quote_data.vault_b_lp_supply
        )

    if in_token_mint == pool.token_a_mint:
        trade_direction = TradeDirection.A_TO_B
        in_vault, out_vault = vault_a, vault_b
        in_vault_lp_amount = quote_data.pool_vault_a_lp_amount
        in_lp_supply, out_lp_supply = quote_data.vault_a_lp_supply, quote_data.vault_b_lp_supply
        out_reserve = quote_data.vault_b_token_amount
        in_total, out_total = token_a_amount, token_b_amount
    else:
        trade_direction = TradeDirection.B_TO_A
        in_vault, out_vault = vault_b, vault_a
        in_vault_lp_amount = quote_data.pool_vault_b_lp_amount
        in_lp_supply, out_lp_supply = quote_data.vault_b_lp_supply, quote_data.vault_a_lp_supply
        out_reserve = quote_data.vault_a_token_amount
        in_total, out_total = token_b_amount, token_a_amount

    with _context("Fail to calculate trading fee"):
        trade_fee = pool.fees.trading_fee(in_amount)
    with _context("Fail to calculate protocol trading fee"):
        protocol_fee = pool.fees.protocol_trading_fee(trade_fee)

    # The protocol fee is a cut of the trade fee.
    trade_fee = _u64(trade_fee - protocol_fee, "Fail to calculate trade fee")
    in_amount_after_protocol_fee = _u64(
        in_amount - protocol_fee, "Fail to calculate in_amount_after_protocol_fee"
    )

    with _context("Fail to get in_vault_lp"):
        in_lp = in_vault.get_unmint_amount(
            current_time, in_amount_after_protocol_fee, in_lp_supply
        )
    in_vault.total_amount = _u64(
        in_vault.total_amount + in_amount_after_protocol_fee,
        "Fail to add in_vault.total_amount",
    )

    new_lp_amount = _u64(in_lp + in_vault_lp_amount, "Fail to get new in_vault_lp")
    new_lp_supply = _u64(in_lp_supply + in_lp, "Fail to get new in_vault_lp_mint")
    with _context("Fail to get after_in_token_total_amount"):
        after_in_total = in_vault.get_amount_by_share(current_time, new_lp_amount, new_lp_supply)

    actual_in_amount = _u64(after_in_total - in_total, "Fail to get actual_in_amount")
    actual_in_amount_after_fee = _u64(
        actual_in_amount - trade_fee, "Fail to calculate in_amount_after_fee"
    )

    swap_curve = get_swap_curve(pool.curve_type)
    with _context("Fail to get swap result"):
        result = swap_curve.swap(actual_in_amount_after_fee, in_total, out_total, trade_direction)

    destination_amount = _u64(result.destination_amount_swapped, "Swap output overflows u64")
    with _context("Fail to get out_vault_lp"):
        out_vault_lp = out_vault.get_unmint_amount(current_time, destination_amount, out_lp_supply)
    with _context("Fail to get out_amount"):
        out_amount = out_vault.get_amount_by_share(current_time, out_vault_lp, out_lp_supply)

    if out_amount >= out_reserve:
        raise QuoteError("Out amount > vault reserve")

    return QuoteResult(out_amount=out_amount, fee=trade_fee)


def compute_pool_tokens(
    current_time: int, vault_a: VaultInfo, vault_b: VaultInfo
) -> tuple[int, int]:
    """Underlying token A and B amounts held by the pool."""
    token_a_amount = vault_a.vault.get_amount_by_share(
        current_time, vault_a.lp_amount, vault_a.lp_supply
    )
    token_b_amount = vault_b.vault.get_amount_by_share(
        current_time, vault_b.lp_amount, vault_b.lp_supply
    )
    return token_a_amount, token_b_amount