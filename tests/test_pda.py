import pytest

from dynamic_amm.errors import MathError
from dynamic_amm.pda import (
    derive_config_key,
    derive_customizable_permissionless_constant_product_pool_key,
    derive_lock_escrow_key,
    derive_lp_mint_key,
    derive_metadata_key,
    derive_permissionless_constant_product_pool_with_config_key,
    derive_permissionless_pool_key,
    derive_permissionless_pool_key_with_fee_tier,
    derive_protocol_fee_key,
    derive_token_vault_key,
    derive_vault_key,
    derive_vault_lp_key,
    derive_vault_lp_mint_key,
    get_curve_type,
    get_first_key,
    get_lp_mint_decimal,
    get_second_key,
    get_trade_fee_bps_bytes,
    to_bps,
)
from dynamic_amm.pubkey import Pubkey, is_on_curve
from dynamic_amm.state import ConstantProductCurve, StableCurve

MINT_A = Pubkey(bytes([1]) * 32)
MINT_B = Pubkey(bytes([2]) * 32)
OWNER = Pubkey(bytes([3]) * 32)


def test_first_and_second_key_order():
    assert get_first_key(MINT_A, MINT_B) == MINT_B
    assert get_first_key(MINT_B, MINT_A) == MINT_B
    assert get_second_key(MINT_A, MINT_B) == MINT_A
    assert get_second_key(MINT_B, MINT_A) == MINT_A


def test_lp_mint_decimal_is_max():
    assert get_lp_mint_decimal(6, 9) == 9
    assert get_lp_mint_decimal(9, 6) == 9


def test_curve_type_byte():
    assert get_curve_type(ConstantProductCurve()) == 0
    assert get_curve_type(StableCurve()) == 1


def test_to_bps_default_fee():
    assert to_bps(250, 100000) == 25


def test_to_bps_division_by_zero():
    with pytest.raises(MathError):
        to_bps(250, 0)


def test_to_bps_overflow():
    with pytest.raises(MathError):
        to_bps(2**128 - 1, 1)
    with pytest.raises(MathError):
        to_bps(2**64, 1)


def test_trade_fee_bps_bytes():
    assert get_trade_fee_bps_bytes(25) == b""
    assert get_trade_fee_bps_bytes(100) == (100).to_bytes(8, "little")


def test_permissionless_pool_key_is_symmetric_and_off_curve():
    key = derive_permissionless_pool_key(ConstantProductCurve(), MINT_A, MINT_B)
    assert key == derive_permissionless_pool_key(ConstantProductCurve(), MINT_B, MINT_A)
    assert not is_on_curve(bytes(key))
    assert key != derive_permissionless_pool_key(StableCurve(), MINT_A, MINT_B)


def test_fee_tier_default_matches_plain_pool():
    plain = derive_permissionless_pool_key(ConstantProductCurve(), MINT_A, MINT_B)
    assert derive_permissionless_pool_key_with_fee_tier(
        ConstantProductCurve(), MINT_A, MINT_B, 25
    ) == plain
    assert derive_permissionless_pool_key_with_fee_tier(
        ConstantProductCurve(), MINT_A, MINT_B, 100
    ) != plain


def test_customizable_and_config_pool_keys_are_symmetric():
    assert derive_customizable_permissionless_constant_product_pool_key(
        MINT_A, MINT_B
    ) == derive_customizable_permissionless_constant_product_pool_key(MINT_B, MINT_A)
    assert derive_permissionless_constant_product_pool_with_config_key(
        MINT_A, MINT_B, OWNER
    ) == derive_permissionless_constant_product_pool_with_config_key(MINT_B, MINT_A, OWNER)


def test_account_keys_are_off_curve_and_distinct():
    pool = derive_permissionless_pool_key(ConstantProductCurve(), MINT_A, MINT_B)
    keys = [
        derive_protocol_fee_key(MINT_A, pool),
        derive_protocol_fee_key(MINT_B, pool),
        derive_vault_lp_key(MINT_A, pool),
        derive_lock_escrow_key(pool, OWNER),
        derive_lp_mint_key(pool),
        derive_metadata_key(MINT_A),
    ]
    assert len(set(keys)) == len(keys)
    assert all(not is_on_curve(bytes(key)) for key in keys)


def test_pool_lp_mint_override():
    pool = Pubkey.from_base58("H49XALURUKbXRysVXYvHKsd5h4TRbZA2iq9kChVi1JvF")
    assert derive_lp_mint_key(pool) == Pubkey.from_base58(
        "3GgCMTyddNhZd29rKLLfQ86wQcer1CcksEgvYpraF2UH"
    )


def test_config_key_depends_on_index():
    assert derive_config_key(0) != derive_config_key(1)
    assert derive_config_key(7) == derive_config_key(7)
    with pytest.raises(MathError):
        derive_config_key(-1)


def test_vault_keys():
    vault = derive_vault_key(MINT_A)
    assert not is_on_curve(bytes(vault))
    assert vault != derive_vault_key(MINT_B)
    token_vault = derive_token_vault_key(vault)
    lp_mint = derive_vault_lp_mint_key(vault)
    assert token_vault != lp_mint
    assert not is_on_curve(bytes(lp_mint))


def test_vault_lp_mint_override():
    vault = Pubkey.from_base58("3ESUFCnRNgZ7Mn2mPPUMmXYaKU8jpnV9VtA17M7t2mHQ")
    assert derive_vault_lp_mint_key(vault) == Pubkey.from_base58(
        "3RpEekjLE5cdcG15YcXJUpxSepemvq2FpmMcgo342BwC"
    )