"""Program-derived addresses of pools, fee accounts, vaults and their LP mints."""

from __future__ import annotations

from dynamic_amm.constants import (
    AMM_PROGRAM_ID,
    CONFIG_PREFIX,
    LOCK_ESCROW_PREFIX,
    LP_MINT_PREFIX,
    MAX_BASIS_POINT,
    POOL_PREFIX,
    PROTOCOL_FEE_PREFIX,
    TOKEN_VAULT_PREFIX,
    VAULT_LP_MINT_PREFIX,
    VAULT_PREFIX,
)
from dynamic_amm.errors import MathError
from dynamic_amm.lp_mints import get_pool_lp_mint_override, get_vault_lp_mint_override
from dynamic_amm.pubkey import VAULT_PROGRAM_ID, Pubkey, find_program_address, get_base_address
from dynamic_amm.state import ConstantProductCurve, CurveType, PoolFees

METAPLEX_PROGRAM_ID = Pubkey.from_base58("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

_DEFAULT_FEES = PoolFees(
    trade_fee_numerator=250,
    trade_fee_denominator=100000,
    protocol_trade_fee_numerator=0,
    protocol_trade_fee_denominator=100000,
)


def _u64_le(value: int) -> bytes:
    if not 0 <= value <= U64_MAX:
        raise MathError("Value does not fit in u64")
    return value.to_bytes(8, "little")


def get_first_key(key1: Pubkey, key2: Pubkey) -> Pubkey:
    """The greater of two keys."""
    return key1 if key1 > key2 else key2


def get_second_key(key1: Pubkey, key2: Pubkey) -> Pubkey:
    """The lesser of two keys."""
    return key2 if key1 > key2 else key1


def get_lp_mint_decimal(token_a_mint_decimals: int, token_b_mint_decimals: int) -> int:
    """Decimals of a pool LP mint: the larger of the two token decimals."""
    return max(token_a_mint_decimals, token_b_mint_decimals)


def get_curve_type(curve_type: CurveType) -> int:
    """Seed byte of a curve: 0 for constant product, 1 otherwise."""
    return 0 if isinstance(curve_type, ConstantProductCurve) else 1


def to_bps(numerator: int, denominator: int) -> int:
    """Convert a fee fraction to basis points, rounding down."""
    product = numerator * MAX_BASIS_POINT
    if product > U128_MAX:
        raise MathError()
    if denominator == 0:
        raise MathError("Division by zero")
    bps = product // denominator
    if bps > U64_MAX:
        raise MathError("Value does not fit in u64")
    return bps


def get_trade_fee_bps_bytes(trade_fee_bps: int) -> bytes:
    """Fee tier seed: empty for the default fee, else the bps as 8 little-endian bytes."""
    default_bps = to_bps(_DEFAULT_FEES.trade_fee_numerator, _DEFAULT_FEES.trade_fee_denominator)
    if trade_fee_bps == default_bps:
        return b""
    return _u64_le(trade_fee_bps)


def _amm_address(*seeds: bytes | Pubkey) -> Pubkey:
    return find_program_address(seeds, AMM_PROGRAM_ID)[0]


def derive_permissionless_pool_key(
    curve_type: CurveType, token_a_mint: Pubkey, token_b_mint: Pubkey
) -> Pubkey:
    """Address of a permissionless pool for a curve and a token pair."""
    return _amm_address(
        bytes([get_curve_type(curve_type)]),
        get_first_key(token_a_mint, token_b_mint),
        get_second_key(token_a_mint, token_b_mint),
    )


def derive_customizable_permissionless_constant_product_pool_key(
    mint_a: Pubkey, mint_b: Pubkey
) -> Pubkey:
    """Address of a customizable constant product pool."""
    return _amm_address(
        POOL_PREFIX, get_first_key(mint_a, mint_b), get_second_key(mint_a, mint_b)
    )


def derive_protocol_fee_key(mint_key: Pubkey, pool_key: Pubkey) -> Pubkey:
    """Protocol fee token account of a pool for one mint."""
    return _amm_address(PROTOCOL_FEE_PREFIX, mint_key, pool_key)


def derive_metadata_key(lp_mint: Pubkey) -> Pubkey:
    """Token metadata account of an LP mint."""
    return find_program_address(
        [b"metadata", METAPLEX_PROGRAM_ID, lp_mint], METAPLEX_PROGRAM_ID
    )[0]


def derive_vault_lp_key(vault_key: Pubkey, pool_key: Pubkey) -> Pubkey:
    """Pool's LP token account in a vault."""
    return _amm_address(vault_key, pool_key)


def derive_lp_mint_key(pool_key: Pubkey) -> Pubkey:
    """LP mint of a pool, honouring pools whose mint is not derived."""
    override = get_pool_lp_mint_override(pool_key)
    if override is not None:
        return override
    return _amm_address(LP_MINT_PREFIX, pool_key)


def derive_lock_escrow_key(pool_key: Pubkey, owner_key: Pubkey) -> Pubkey:
    """Lock escrow account of an owner in a pool."""
    return _amm_address(LOCK_ESCROW_PREFIX, pool_key, owner_key)


def derive_permissionless_constant_product_pool_with_config_key(
    mint_a: Pubkey, mint_b: Pubkey, config: Pubkey
) -> Pubkey:
    """Address of a constant product pool created from a config."""
    return _amm_address(get_first_key(mint_a, mint_b), get_second_key(mint_a, mint_b), config)


def derive_permissionless_pool_key_with_fee_tier(
    curve_type: CurveType, token_a_mint: Pubkey, token_b_mint: Pubkey, trade_fee_bps: int
) -> Pubkey:
    """Address of a permissionless pool with a given fee tier."""
    return _amm_address(
        bytes([get_curve_type(curve_type)]),
        get_first_key(token_a_mint, token_b_mint),
        get_second_key(token_a_mint, token_b_mint),
        get_trade_fee_bps_bytes(trade_fee_bps),
    )


def derive_config_key(index: int) -> Pubkey:
    """Address of the config account with the given index."""
    return _amm_address(CONFIG_PREFIX, _u64_le(index))


def derive_vault_key(mint: Pubkey) -> Pubkey:
    """Address of the vault for a token mint."""
    return find_program_address(
        [VAULT_PREFIX, mint, get_base_address()], VAULT_PROGRAM_ID
    )[0]


def derive_token_vault_key(vault: Pubkey) -> Pubkey:
    """Token reserve account of a vault."""
    return find_program_address([TOKEN_VAULT_PREFIX, vault], VAULT_PROGRAM_ID)[0]


def derive_vault_lp_mint_key(vault: Pubkey) -> Pubkey:
    """LP mint of a vault, honouring vaults whose mint is not derived."""
    override = get_vault_lp_mint_override(vault)
    if override is not None:
        return override
    return find_program_address([VAULT_LP_MINT_PREFIX, vault], VAULT_PROGRAM_ID)[0]