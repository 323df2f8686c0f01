"""Events emitted by the pool program."""

from __future__ import annotations

from dataclasses import dataclass, field

from dynamic_amm.pubkey import Pubkey
from dynamic_amm.state import PoolType


@dataclass(frozen=True)
class AddLiquidity:
    lp_mint_amount: int
    token_a_amount: int
    token_b_amount: int


@dataclass(frozen=True)
class RemoveLiquidity:
    lp_unmint_amount: int
    token_a_out_amount: int
    token_b_out_amount: int


@dataclass(frozen=True)
class BootstrapLiquidity:
    lp_mint_amount: int
    token_a_amount: int
    token_b_amount: int
    pool: Pubkey = field(default_factory=Pubkey.default)


@dataclass(frozen=True)
class Swap:
    """A token exchange with the fees charged on it."""

    in_amount: int
    out_amount: int
    trade_fee: int
    protocol_fee: int
    host_fee: int


@dataclass(frozen=True)
class SetPoolFees:
    trade_fee_numerator: int
    trade_fee_denominator: int
    protocol_trade_fee_numerator: int
    protocol_trade_fee_denominator: int
    pool: Pubkey = field(default_factory=Pubkey.default)


@dataclass(frozen=True)
class PoolInfo:
    token_a_amount: int
    token_b_amount: int
    virtual_price: float
    current_timestamp: int


@dataclass(frozen=True)
class TransferAdmin:
    admin: Pubkey
    new_admin: Pubkey
    pool: Pubkey


@dataclass(frozen=True)
class OverrideCurveParam:
    new_amp: int
    updated_timestamp: int
    pool: Pubkey = field(default_factory=Pubkey.default)


@dataclass(frozen=True)
class PoolCreated:
    lp_mint: Pubkey
    token_a_mint: Pubkey
    token_b_mint: Pubkey
    pool_type: PoolType
    pool: Pubkey


@dataclass(frozen=True)
class PoolEnabled:
    pool: Pubkey
    enabled: bool


@dataclass(frozen=True)
class MigrateFeeAccount:
    pool: Pubkey
    new_admin_token_a_fee: Pubkey
    new_admin_token_b_fee: Pubkey
    token_a_amount: int
    token_b_amount: int


@dataclass(frozen=True)
class CreateLockEscrow:
    pool: Pubkey
    owner: Pubkey


@dataclass(frozen=True)
class Lock:
    pool: Pubkey
    owner: Pubkey
    amount: int


@dataclass(frozen=True)
class ClaimFee:
    pool: Pubkey
    owner: Pubkey
    amount: int
    a_fee: int
    b_fee: int


@dataclass(frozen=True)
class CreateConfig:
    trade_fee_numerator: int
    protocol_trade_fee_numerator: int
    config: Pubkey


@dataclass(frozen=True)
class CloseConfig:
    config: Pubkey


@dataclass(frozen=True)
class WithdrawProtocolFees:
    pool: Pubkey
    protocol_a_fee: int
    protocol_b_fee: int
    protocol_a_fee_owner: Pubkey
    protocol_b_fee_owner: Pubkey


@dataclass(frozen=True)
class PartnerClaimFees:
    pool: Pubkey
    fee_a: int
    fee_b: int
    partner: Pubkey