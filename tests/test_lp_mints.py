import pytest

from dynamic_amm.lp_mints import (
    DEVNET_POOL_WITH_NON_PDA_BASED_LP_MINT,
    DEVNET_VAULT_WITH_NON_PDA_BASED_LP_MINT,
    POOL_WITH_NON_PDA_BASED_LP_MINT,
    VAULT_WITH_NON_PDA_BASED_LP_MINT,
    get_pool_lp_mint_override,
    get_vault_lp_mint_override,
)
from dynamic_amm.pubkey import Pubkey

WSOL_VAULT = "FERjPVNEa7Udq8CEv68h6tPL46Tq7ieE49HrE2wea3XT"


def test_pool_override_mainnet():
    pool = Pubkey.from_base58("H49XALURUKbXRysVXYvHKsd5h4TRbZA2iq9kChVi1JvF")
    result = get_pool_lp_mint_override(pool, False)
    assert result == Pubkey.from_base58("3GgCMTyddNhZd29rKLLfQ86wQcer1CcksEgvYpraF2UH")


def test_pool_override_devnet():
    pool = Pubkey.from_base58("GXy2cEDWFodXuXpEZZizVzcyiqF2QZCiMqfZX9BGx1vz")
    assert get_pool_lp_mint_override(pool, True) == Pubkey.from_base58(
        "2nqgDcgfTzXJSckrVdqZGFpSfAAUY7NJKhCeikioaP5m"
    )
    assert get_pool_lp_mint_override(pool, False) is None


def test_vault_override_differs_by_network():
    vault = Pubkey.from_base58(WSOL_VAULT)
    assert get_vault_lp_mint_override(vault, False) == Pubkey.from_base58(
        "FZN7QZ8ZUUAxMPfxYEYkH3cXUASzH8EqA6B4tyCL8f1j"
    )
    assert get_vault_lp_mint_override(vault, True) == Pubkey.from_base58(
        "BvoAjwEDhpLzs3jtu4H72j96ShKT5rvZE9RP1vgpfSM"
    )


def test_default_is_mainnet():
    vault = Pubkey.from_base58(WSOL_VAULT)
    assert get_vault_lp_mint_override(vault) == get_vault_lp_mint_override(vault, False)


@pytest.mark.parametrize("devnet", [False, True])
def test_unknown_key_has_no_override(devnet):
    assert get_pool_lp_mint_override(Pubkey.default(), devnet) is None
    assert get_vault_lp_mint_override(Pubkey.default(), devnet) is None


@pytest.mark.parametrize(
    "table, lookup, devnet",
    [
        (POOL_WITH_NON_PDA_BASED_LP_MINT, get_pool_lp_mint_override, False),
        (DEVNET_POOL_WITH_NON_PDA_BASED_LP_MINT, get_pool_lp_mint_override, True),
        (VAULT_WITH_NON_PDA_BASED_LP_MINT, get_vault_lp_mint_override, False),
        (DEVNET_VAULT_WITH_NON_PDA_BASED_LP_MINT, get_vault_lp_mint_override, True),
    ],
)
def test_every_entry_is_found(table, lookup, devnet):
    assert len(table) > 0
    for key, value in table.items():
        assert lookup(key, devnet) == value
        assert key != value


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        POOL_WITH_NON_PDA_BASED_LP_MINT[Pubkey.default()] = Pubkey.default()


def test_keys_round_trip_through_base58():
    for key in VAULT_WITH_NON_PDA_BASED_LP_MINT:
        assert Pubkey.from_base58(key.to_base58()) == key