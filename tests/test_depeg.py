import pytest

from dynamic_amm.constants import DEPEG_PRECISION
from dynamic_amm.depeg import (
    MARINADE_PRICE_DENOMINATOR,
    MARINADE_STATE_ID,
    SOLIDO_STATE_ID,
    get_stake_pool_virtual_price,
    marinade_virtual_price,
    solido_virtual_price,
    spl_stake_virtual_price,
    update_base_virtual_price,
)
from dynamic_amm.errors import MathError, QuoteError
from dynamic_amm.pubkey import Pubkey
from dynamic_amm.state import ConstantProductCurve, Depeg, DepegType, Pool, StableCurve


def _u64(value):
    return value.to_bytes(8, "little")


def solido_data(supply, balance):
    data = bytearray(89)
    data[73:81] = _u64(supply)
    data[81:89] = _u64(balance)
    return bytes(data)


def marinade_data(msol_price):
    data = bytearray(8 + 576)
    data[520:528] = _u64(msol_price)
    return bytes(data)


def spl_data(total_lamports, supply):
    data = bytearray(300)
    data[258:266] = _u64(total_lamports)
    data[266:274] = _u64(supply)
    return bytes(data)


STAKE_POOL = Pubkey(bytes([7]) * 32)


def test_solido_equal_supply_and_balance_is_precision():
    assert solido_virtual_price(solido_data(5000, 5000)) == DEPEG_PRECISION


def test_solido_price_scales_with_balance():
    assert solido_virtual_price(solido_data(1000, 3000)) == 3 * DEPEG_PRECISION


def test_solido_zero_supply_raises():
    with pytest.raises(MathError):
        solido_virtual_price(solido_data(0, 10))


def test_solido_short_data_raises():
    with pytest.raises(ValueError):
        solido_virtual_price(bytes(80))


def test_marinade_unit_price_is_precision():
    assert marinade_virtual_price(marinade_data(MARINADE_PRICE_DENOMINATOR)) == DEPEG_PRECISION


def test_marinade_short_data_raises():
    with pytest.raises(ValueError):
        marinade_virtual_price(bytes(100))


def test_spl_stake_price():
    assert spl_stake_virtual_price(spl_data(2_000, 1_000)) == 2 * DEPEG_PRECISION


def test_get_price_none_type():
    assert get_stake_pool_virtual_price(DepegType.NONE, STAKE_POOL, {}) is None


def test_get_price_missing_data():
    assert get_stake_pool_virtual_price(DepegType.LIDO, STAKE_POOL, {}) is None


def test_get_price_bad_data_is_none():
    data = {SOLIDO_STATE_ID: solido_data(0, 5)}
    assert get_stake_pool_virtual_price(DepegType.LIDO, STAKE_POOL, data) is None


def test_get_price_uses_right_accounts():
    data = {
        SOLIDO_STATE_ID: solido_data(1, 1),
        MARINADE_STATE_ID: marinade_data(2 * MARINADE_PRICE_DENOMINATOR),
        STAKE_POOL: spl_data(3, 1),
    }
    assert get_stake_pool_virtual_price(DepegType.LIDO, STAKE_POOL, data) == DEPEG_PRECISION
    assert get_stake_pool_virtual_price(DepegType.MARINADE, STAKE_POOL, data) == 2 * DEPEG_PRECISION
    assert get_stake_pool_virtual_price(DepegType.SPL_STAKE, STAKE_POOL, data) == 3 * DEPEG_PRECISION


def _depeg_pool(cache_updated=0):
    depeg = Depeg(base_virtual_price=1, base_cache_updated=cache_updated, depeg_type=DepegType.LIDO)
    return Pool(curve_type=StableCurve(amp=100, depeg=depeg), stake=STAKE_POOL)


def test_update_after_expiry_refreshes_cache():
    pool = _depeg_pool()
    update_base_virtual_price(pool, 601, {SOLIDO_STATE_ID: solido_data(4, 4)})
    assert pool.curve_type.depeg.base_virtual_price == DEPEG_PRECISION
    assert pool.curve_type.depeg.base_cache_updated == 601


def test_update_before_expiry_keeps_cache():
    pool = _depeg_pool()
    update_base_virtual_price(pool, 600, {SOLIDO_STATE_ID: solido_data(4, 4)})
    assert pool.curve_type.depeg.base_virtual_price == 1
    assert pool.curve_type.depeg.base_cache_updated == 0


def test_update_missing_data_raises():
    with pytest.raises(QuoteError):
        update_base_virtual_price(_depeg_pool(), 10_000, {})


def test_update_ignores_constant_product():
    pool = Pool(curve_type=ConstantProductCurve())
    update_base_virtual_price(pool, 10_000, {})
    assert pool.curve_type == ConstantProductCurve()


def test_update_overflow_raises():
    with pytest.raises(MathError):
        update_base_virtual_price(_depeg_pool(cache_updated=2**64 - 1), 10, {})