"""Public keys, base58 text form and program-derived addresses."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable, Union

PUBKEY_BYTES = 32
MAX_SEEDS = 16
MAX_SEED_LEN = 32
PDA_MARKER = b"ProgramDerivedAddress"

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_INDEX = {char: index for index, char in enumerate(_ALPHABET)}

# Edwards25519 field prime and curve constant d = -121665 / 121666.
_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P


class PubkeyError(ValueError):
    """Raised when an address cannot be derived from the given seeds."""


class InvalidSeedsError(PubkeyError):
    """Raised when the seeds hash to a point on the ed25519 curve."""


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading_zeros + "".join(reversed(digits))


def _b58decode(text: str) -> bytes:
    number = 0
    for char in text:
        try:
            number = number * 58 + _ALPHABET_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * leading_ones + body


@dataclass(frozen=True, order=True, repr=False)
class Pubkey:
    """A 32-byte account address, ordered by its bytes."""

    data: bytes

    def __post_init__(self) -> None:
        if isinstance(self.data, int):
            raise TypeError("Pubkey needs bytes, not an integer")
        raw = bytes(self.data)
        if len(raw) != PUBKEY_BYTES:
            raise ValueError(f"Pubkey must be {PUBKEY_BYTES} bytes, got {len(raw)}")
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_base58(cls, value: str) -> "Pubkey":
        """Parse a base58 address."""
        return cls(_b58decode(value))

    @classmethod
    def default(cls) -> "Pubkey":
        """The all-zero address."""
        return cls(bytes(PUBKEY_BYTES))

    def to_base58(self) -> str:
        """The base58 text form of the address."""
        return _b58encode(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f"Pubkey({self.to_base58()!r})"


Seed = Union[bytes, bytearray, memoryview, Pubkey]


def _seed_bytes(seed: Seed) -> bytes:
    if isinstance(seed, (bytes, bytearray, memoryview, Pubkey)):
        return bytes(seed)
    raise TypeError(f"seed must be bytes or Pubkey, not {type(seed).__name__}")


def is_on_curve(data: bytes) -> bool:
    """Whether 32 bytes decompress to a point on the ed25519 curve."""
    raw = bytes(data)
    if len(raw) != PUBKEY_BYTES:
        raise ValueError(f"curve point must be {PUBKEY_BYTES} bytes, got {len(raw)}")
    y = (int.from_bytes(raw, "little") & ((1 << 255) - 1)) % _P
    y_squared = y * y % _P
    u = (y_squared - 1) % _P
    v = (_D * y_squared + 1) % _P
    x_squared = u * pow(v, _P - 2, _P) % _P
    return x_squared == 0 or pow(x_squared, (_P - 1) // 2, _P) == 1


def create_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> Pubkey:
    """Derive an off-curve address from seeds and a program id."""
    seed_list = [_seed_bytes(seed) for seed in seeds]
    if len(seed_list) > MAX_SEEDS:
        raise PubkeyError("Length of the seed is too long for address generation")
    if any(len(seed) > MAX_SEED_LEN for seed in seed_list):
        raise PubkeyError("Length of the seed is too long for address generation")
    digest = hashlib.sha256(b"".join(seed_list) + bytes(program_id) + PDA_MARKER).digest()
    if is_on_curve(digest):
        raise InvalidSeedsError("Provided seeds do not result in a valid address")
    return Pubkey(digest)


def find_program_address(seeds: Iterable[Seed], program_id: Pubkey) -> tuple[Pubkey, int]:
    """Find the first valid address trying bump seeds from 255 down to 0."""
    seed_list = [_seed_bytes(seed) for seed in seeds]
    for bump in range(255, -1, -1):
        try:
            return create_program_address([*seed_list, bytes([bump])], program_id), bump
        except InvalidSeedsError:
            continue
    raise PubkeyError("Unable to find a viable program address bump seed")


VAULT_PROGRAM_ID = Pubkey.from_base58("24Uqj9JCLxUeoC3hGfh5W3s9FM9uCHDS2SG3LYwBpyTi")


def get_treasury_address() -> Pubkey:
    """Treasury address of the vault program."""
    return Pubkey.from_base58("9kZeN47U2dubGbbzMrzzoRAUvpuxVLRcjW9XiFpYjUo4")


def get_base_address() -> Pubkey:
    """Base address used in vault seeds."""
    return Pubkey.from_base58("HWzXGcGHy4tcpYfaRDCyLNzXqBTv3E6BttpCH2vJxArv")


def get_base_address_for_idle_vault() -> Pubkey:
    """Base address used for idle vaults."""
    return Pubkey.default()