import pytest

from dynamic_amm.pubkey import (
    MAX_SEEDS,
    VAULT_PROGRAM_ID,
    Pubkey,
    PubkeyError,
    create_program_address,
    find_program_address,
    get_base_address,
    get_base_address_for_idle_vault,
    get_treasury_address,
    is_on_curve,
)

TREASURY = "9kZeN47U2dubGbbzMrzzoRAUvpuxVLRcjW9XiFpYjUo4"
BASE = "HWzXGcGHy4tcpYfaRDCyLNzXqBTv3E6BttpCH2vJxArv"


def test_default_is_all_zero_bytes():
    assert Pubkey.default() == Pubkey(bytes(32))
    assert Pubkey.default().to_base58() == "1" * 32


@pytest.mark.parametrize("text", [TREASURY, BASE, "24Uqj9JCLxUeoC3hGfh5W3s9FM9uCHDS2SG3LYwBpyTi"])
def test_base58_round_trip(text):
    key = Pubkey.from_base58(text)
    assert key.to_base58() == text
    assert str(key) == text
    assert Pubkey(bytes(key)) == key


def test_known_addresses():
    assert get_treasury_address() == Pubkey.from_base58(TREASURY)
    assert get_base_address().to_base58() == BASE
    assert get_base_address_for_idle_vault() == Pubkey.default()


def test_invalid_base58_character_rejected():
    with pytest.raises(ValueError):
        Pubkey.from_base58("0OIl")


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Pubkey.from_base58("1111")
    with pytest.raises(ValueError):
        Pubkey(b"\x01" * 31)


def test_ordering_is_bytewise():
    low = Pubkey(b"\x00" + b"\xff" * 31)
    high = Pubkey(b"\x01" + b"\x00" * 31)
    assert low < high
    assert max(low, high) == high


def test_identity_and_base_point_are_on_curve():
    identity = b"\x01" + bytes(31)
    base_point = bytes.fromhex("58" + "66" * 31)
    assert is_on_curve(identity)
    assert is_on_curve(base_point)


def test_find_program_address_is_off_curve_and_reproducible():
    seeds = [b"vault", bytes(get_base_address())]
    key, bump = find_program_address(seeds, VAULT_PROGRAM_ID)
    assert 0 <= bump <= 255
    assert not is_on_curve(bytes(key))
    assert create_program_address([*seeds, bytes([bump])], VAULT_PROGRAM_ID) == key
    assert find_program_address(seeds, VAULT_PROGRAM_ID) == (key, bump)


def test_different_seeds_give_different_addresses():
    first, _ = find_program_address([b"lp_mint", get_base_address()], VAULT_PROGRAM_ID)
    second, _ = find_program_address([b"token_vault", get_base_address()], VAULT_PROGRAM_ID)
    assert first != second


def test_pubkey_seed_equals_its_bytes():
    by_key = find_program_address([get_treasury_address()], VAULT_PROGRAM_ID)
    by_bytes = find_program_address([bytes(get_treasury_address())], VAULT_PROGRAM_ID)
    assert by_key == by_bytes


def test_seed_too_long_rejected():
    with pytest.raises(PubkeyError):
        create_program_address([b"x" * 33], VAULT_PROGRAM_ID)


def test_too_many_seeds_rejected():
    with pytest.raises(PubkeyError):
        create_program_address([b"a"] * (MAX_SEEDS + 1), VAULT_PROGRAM_ID)
    with pytest.raises(PubkeyError):
        find_program_address([b"a"] * MAX_SEEDS, VAULT_PROGRAM_ID)