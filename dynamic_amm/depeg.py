"""Virtual prices of staking tokens, used to repeg stable swap pools."""

from __future__ import annotations

from typing import Mapping, Optional

from dynamic_amm.constants import DEPEG_BASE_CACHE_EXPIRES, DEPEG_PRECISION
from dynamic_amm.errors import AmmError, MathError, QuoteError
from dynamic_amm.pubkey import Pubkey
from dynamic_amm.state import DepegType, Pool, StableCurve

U64_MAX = 2**64 - 1

MARINADE_STATE_ID = Pubkey.from_base58("8szGkuLTAux9XMgZ2vtY39jVSowEcpBfFfD8hXSEqdGC")
SOLIDO_STATE_ID = Pubkey.from_base58("49Yi1TKkNyYjPAFdR9LBvoHcUjuPX4Df5T5yv39w2XTn")

MARINADE_PRICE_DENOMINATOR = 0x1_0000_0000
# Offsets of fields in the serialized account data.
_MARINADE_MSOL_PRICE_OFFSET = 8 + 512
_SOLIDO_SUPPLY_OFFSET = 73
_SOLIDO_BALANCE_OFFSET = 81
_SPL_TOTAL_LAMPORTS_OFFSET = 258
_SPL_POOL_TOKEN_SUPPLY_OFFSET = 266


def _read_u64(data: bytes, offset: int) -> int:
    chunk = bytes(data[offset : offset + 8])
    if len(chunk) != 8:
        raise ValueError(f"account data too short: need {offset + 8} bytes, got {len(data)}")
    return int.from_bytes(chunk, "little")


def _price(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise MathError("Division by zero")
    price = numerator // denominator
    if price > U64_MAX:
        raise MathError("Value does not fit in u64")
    return price


def marinade_virtual_price(data: bytes) -> int:
    """mSOL virtual price from a Marinade state account."""
    msol_price = _read_u64(data, _MARINADE_MSOL_PRICE_OFFSET)
    return _price(msol_price * DEPEG_PRECISION, MARINADE_PRICE_DENOMINATOR)


def solido_virtual_price(data: bytes) -> int:
    """stSOL virtual price from a Solido state account."""
    stsol_supply = _read_u64(data, _SOLIDO_SUPPLY_OFFSET)
    sol_balance = _read_u64(data, _SOLIDO_BALANCE_OFFSET)
    return _price(sol_balance * DEPEG_PRECISION, stsol_supply)


def spl_stake_virtual_price(data: bytes) -> int:
    """Pool token virtual price from an SPL stake pool account."""
    total_lamports = _read_u64(data, _SPL_TOTAL_LAMPORTS_OFFSET)
    pool_token_supply = _read_u64(data, _SPL_POOL_TOKEN_SUPPLY_OFFSET)
    return _price(total_lamports * DEPEG_PRECISION, pool_token_supply)


def get_stake_pool_virtual_price(
    depeg_type: DepegType, spl_stake_pool: Pubkey, stake_data: Mapping[Pubkey, bytes]
) -> Optional[int]:
    """Virtual price for a depeg type, or None if it cannot be read."""
    if depeg_type is DepegType.LIDO:
        key, parse = SOLIDO_STATE_ID, solido_virtual_price
    elif depeg_type is DepegType.MARINADE:
        key, parse = MARINADE_STATE_ID, marinade_virtual_price
    elif depeg_type is DepegType.SPL_STAKE:
        key, parse = spl_stake_pool, spl_stake_virtual_price
    else:
        return None
    data = stake_data.get(key)
    if data is None:
        return None
    try:
        return parse(data)
    except (ValueError, AmmError):
        return None


def update_base_virtual_price(
    pool: Pool, unix_timestamp: int, stake_data: Mapping[Pubkey, bytes]
) -> None:
    """Refresh the pool's cached depeg price once the cache has expired."""
    curve = pool.curve_type
    if not isinstance(curve, StableCurve):
        return
    depeg = curve.depeg
    if depeg.depeg_type.is_none():
        return
    cache_expire_time = depeg.base_cache_updated + DEPEG_BASE_CACHE_EXPIRES
    if cache_expire_time > U64_MAX:
        raise MathError("Math overflow")
    now = unix_timestamp % 2**64
    if now > cache_expire_time:
        virtual_price = get_stake_pool_virtual_price(depeg.depeg_type, pool.stake, stake_data)
        if virtual_price is None:
            raise QuoteError("Fail to get stake pool virtual price")
        depeg.base_cache_updated = now
        depeg.base_virtual_price = virtual_price