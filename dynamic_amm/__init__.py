"""Swap quoting, fee math, vault share math and address derivation for dynamic AMM pools."""

__version__ = "0.6.1"

__all__ = [
    "constants",
    "curves",
    "depeg",
    "errors",
    "events",
    "lp_mints",
    "pda",
    "pubkey",
    "quote",
    "state",
    "vault",
]