"""Pool, curve, fee and config state of the pool program."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from dynamic_amm.constants import (
    CONSTANT_PRODUCT_PROTOCOL_TRADE_FEE_NUMERATOR,
    CONSTANT_PRODUCT_TRADE_FEE_NUMERATOR,
    FEE_DENOMINATOR,
    HOST_TRADE_FEE_NUMERATOR,
    STABLE_SWAP_PROTOCOL_TRADE_FEE_NUMERATOR,
    STABLE_SWAP_TRADE_FEE_NUMERATOR,
)
from dynamic_amm.errors import AmmError, MathError, PoolError
from dynamic_amm.pubkey import Pubkey

PERMISSIONLESS_AMP = 100

U128_MAX = 2**128 - 1


def _mul_u128(left: int, right: int) -> int:
    product = left * right
    if product > U128_MAX:
        raise MathError()
    return product


def _div(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise MathError("Division by zero")
    return numerator // denominator


class PoolType(Enum):
    PERMISSIONED = 0
    PERMISSIONLESS = 1


class ActivationType(Enum):
    """Whether a pool activates at a slot or at a timestamp."""

    SLOT = 0
    TIMESTAMP = 1

    @classmethod
    def from_value(cls, value: int) -> "ActivationType":
        """Activation type for its stored byte; other values are rejected."""
        try:
            return cls(value)
        except ValueError:
            raise AmmError("Invalid value", PoolError.INVALID_ACTIVATION_TYPE) from None


class DepegType(Enum):
    NONE = 0
    MARINADE = 1
    LIDO = 2
    SPL_STAKE = 3

    def is_none(self) -> bool:
        """Whether the pool is not a depeg pool."""
        return self is DepegType.NONE


@dataclass
class Depeg:
    """Virtual price cache of a staking or interest bearing token."""

    base_virtual_price: int = 0
    base_cache_updated: int = 0
    depeg_type: DepegType = DepegType.NONE


@dataclass(frozen=True)
class TokenMultiplier:
    """Multipliers that bring both pool tokens to the same precision."""

    token_a_multiplier: int = 0
    token_b_multiplier: int = 0
    precision_factor: int = 0

    def upscale_token_a(self, token_amount: int) -> int:
        return _mul_u128(token_amount, self.token_a_multiplier)

    def upscale_token_b(self, token_amount: int) -> int:
        return _mul_u128(token_amount, self.token_b_multiplier)

    def downscale_token_a(self, token_amount: int) -> int:
        return _div(token_amount, self.token_a_multiplier)

    def downscale_token_b(self, token_amount: int) -> int:
        return _div(token_amount, self.token_b_multiplier)


def calculate_fee(token_amount: int, fee_numerator: int, fee_denominator: int) -> int:
    """Fee on an amount, with a minimum of one token when any fee applies."""
    if fee_numerator == 0 or token_amount == 0:
        return 0
    fee = _div(_mul_u128(token_amount, fee_numerator), fee_denominator)
    return fee or 1


@dataclass(frozen=True)
class PoolFees:
    """Trade and protocol fee fractions of a pool."""

    trade_fee_numerator: int = 0
    trade_fee_denominator: int = 0
    protocol_trade_fee_numerator: int = 0
    protocol_trade_fee_denominator: int = 0

    def host_trading_fee(self, trading_tokens: int) -> int:
        """Host share of trading tokens, rounded down."""
        return _div(_mul_u128(trading_tokens, HOST_TRADE_FEE_NUMERATOR), FEE_DENOMINATOR)

    def trading_fee(self, trading_tokens: int) -> int:
        return calculate_fee(
            trading_tokens, self.trade_fee_numerator, self.trade_fee_denominator
        )

    def protocol_trading_fee(self, trading_tokens: int) -> int:
        return calculate_fee(
            trading_tokens,
            self.protocol_trade_fee_numerator,
            self.protocol_trade_fee_denominator,
        )


@dataclass(frozen=True)
class ConstantProductCurve:
    """Constant product curve: invariant is token_a * token_b."""

    def is_same_type(self, other: "CurveType") -> bool:
        return isinstance(other, ConstantProductCurve)

    def get_default_fee(self) -> PoolFees:
        return PoolFees(
            trade_fee_numerator=CONSTANT_PRODUCT_TRADE_FEE_NUMERATOR,
            trade_fee_denominator=FEE_DENOMINATOR,
            protocol_trade_fee_numerator=CONSTANT_PRODUCT_PROTOCOL_TRADE_FEE_NUMERATOR,
            protocol_trade_fee_denominator=FEE_DENOMINATOR,
        )

    def get_allowed_trade_fee_bps(self) -> tuple[int, ...]:
        return (25, 100, 400, 600)


@dataclass
class StableCurve:
    """Stable swap curve with a wide 1:1 zone."""

    amp: int = PERMISSIONLESS_AMP
    token_multiplier: TokenMultiplier = field(default_factory=TokenMultiplier)
    depeg: Depeg = field(default_factory=Depeg)
    last_amp_updated_timestamp: int = 0

    def is_same_type(self, other: "CurveType") -> bool:
        return isinstance(other, StableCurve)

    def get_default_fee(self) -> PoolFees:
        return PoolFees(
            trade_fee_numerator=STABLE_SWAP_TRADE_FEE_NUMERATOR,
            trade_fee_denominator=FEE_DENOMINATOR,
            protocol_trade_fee_numerator=STABLE_SWAP_PROTOCOL_TRADE_FEE_NUMERATOR,
            protocol_trade_fee_denominator=FEE_DENOMINATOR,
        )

    def get_allowed_trade_fee_bps(self) -> tuple[int, ...]:
        return (1, 4, 10, 100)


CurveType = Union[ConstantProductCurve, StableCurve]


def default_curve_type() -> StableCurve:
    """A stable curve with the permissionless amplification."""
    return StableCurve(amp=PERMISSIONLESS_AMP)


@dataclass
class Bootstrapping:
    activation_point: int = 0
    whitelisted_vault: Pubkey = field(default_factory=Pubkey.default)
    pool_creator: Pubkey = field(default_factory=Pubkey.default)
    activation_type: int = 0


@dataclass
class PartnerInfo:
    fee_numerator: int = 0
    partner_authority: Pubkey = field(default_factory=Pubkey.default)
    pending_fee_a: int = 0
    pending_fee_b: int = 0


@dataclass
class Pool:
    """State of a pool account."""

    lp_mint: Pubkey = field(default_factory=Pubkey.default)
    token_a_mint: Pubkey = field(default_factory=Pubkey.default)
    token_b_mint: Pubkey = field(default_factory=Pubkey.default)
    a_vault: Pubkey = field(default_factory=Pubkey.default)
    b_vault: Pubkey = field(default_factory=Pubkey.default)
    a_vault_lp: Pubkey = field(default_factory=Pubkey.default)
    b_vault_lp: Pubkey = field(default_factory=Pubkey.default)
    a_vault_lp_bump: int = 0
    enabled: bool = False
    protocol_token_a_fee: Pubkey = field(default_factory=Pubkey.default)
    protocol_token_b_fee: Pubkey = field(default_factory=Pubkey.default)
    fee_last_updated_at: int = 0
    fees: PoolFees = field(default_factory=PoolFees)
    pool_type: PoolType = PoolType.PERMISSIONED
    stake: Pubkey = field(default_factory=Pubkey.default)
    total_locked_lp: int = 0
    bootstrapping: Bootstrapping = field(default_factory=Bootstrapping)
    partner_info: PartnerInfo = field(default_factory=PartnerInfo)
    curve_type: CurveType = field(default_factory=default_curve_type)


@dataclass
class LockEscrow:
    """State of a lock escrow account."""

    pool: Pubkey = field(default_factory=Pubkey.default)
    owner: Pubkey = field(default_factory=Pubkey.default)
    escrow_vault: Pubkey = field(default_factory=Pubkey.default)
    bump: int = 0
    total_locked_amount: int = 0
    lp_per_token: int = 0
    unclaimed_fee_pending: int = 0
    a_fee: int = 0
    b_fee: int = 0


@dataclass
class Config:
    """Pool creation config account."""

    pool_fees: PoolFees = field(default_factory=PoolFees)
    activation_duration: int = 0
    vault_config_key: Pubkey = field(default_factory=Pubkey.default)
    pool_creator_authority: Pubkey = field(default_factory=Pubkey.default)
    activation_type: int = 0
    partner_fee_numerator: int = 0


@dataclass
class BootstrappingConfig:
    activation_point: int = 0
    vault_config_key: Pubkey = field(default_factory=Pubkey.default)
    activation_type: int = 0


@dataclass
class ConfigParameters:
    """Parameters for creating a config account."""

    trade_fee_numerator: int = 0
    protocol_trade_fee_numerator: int = 0
    activation_duration: int = 0
    pool_creator_authority: Pubkey = field(default_factory=Pubkey.default)
    activation_type: int = 0
    index: int = 0
    partner_fee_numerator: int = 0
    description: Optional[str] = None