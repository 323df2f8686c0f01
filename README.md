# dynamic_amm

Pure-Python tools for dynamic AMM pools and the yield vaults that hold their liquidity. You can quote swaps, work out fees and derive account addresses. All arithmetic uses Python integers. The checks mirror the unsigned 64- and 128-bit bounds of the on-chain programs: overflow, underflow and division by zero raise exceptions.

## Modules

- `dynamic_amm.quote`: `compute_quote(in_token_mint, in_amount, quote_data)` returns a `QuoteResult` with `out_amount` and `fee`. The fee is the trading fee in the input token. A `QuoteData` snapshot holds:
  - the `Pool` and both `Vault`s;
  - the pool's LP amounts in each vault;
  - each vault's LP supply;
  - each vault's token reserve amount;
  - a `Clock` (`slot`, `unix_timestamp`, `epoch`);
  - for depeg pools, raw stake account data keyed by `Pubkey`.

  The inputs are not modified. `compute_pool_tokens(current_time, vault_a, vault_b)` returns the token A and B amounts that stand behind two `VaultInfo` values.
- `dynamic_amm.curves`: `ConstantProductSwap` and `StableSwap`, both `SwapCurve`s with a `swap(source_amount, swap_source_amount, swap_destination_amount, trade_direction)` method that returns a `SwapResult`. `StableSwap` rescales amounts with the token multipliers and, for depeg pools, the base virtual price. `get_swap_curve(curve_type)` picks the curve for a `ConstantProductCurve` or a `StableCurve`.
- `dynamic_amm.state`: the pool's state as dataclasses and enums:
  - `Pool`, `PoolFees` and `calculate_fee`;
  - `TokenMultiplier`, `Depeg` and `DepegType`;
  - `ActivationType` and `PoolType`;
  - `Bootstrapping` and `PartnerInfo`;
  - `LockEscrow`, `Config`, `BootstrappingConfig` and `ConfigParameters`;
  - the curve types `ConstantProductCurve` and `StableCurve`, which give default fees and allowed fee tiers.
- `dynamic_amm.vault`: `Vault` with `get_unlocked_amount`, `get_amount_by_share` and `get_unmint_amount`. Each accounts for profit that `LockedProfitTracker` still holds locked. The module also has the strategy types.
- `dynamic_amm.depeg`: reads virtual prices from Marinade, Solido and SPL stake pool account data with `marinade_virtual_price`, `solido_virtual_price` and `spl_stake_virtual_price`. `update_base_virtual_price` refreshes a pool's cached price once the cache has expired.
- `dynamic_amm.pda`: derives program addresses for:
  - pools (permissionless, fee tier, customizable, config based);
  - LP mints and vault LP accounts;
  - protocol fee accounts, lock escrows, configs and token metadata;
  - vaults, token vaults and vault LP mints.
- `dynamic_amm.lp_mints`: known pools and vaults whose LP mint is not a derived address, for mainnet and devnet. Use `get_pool_lp_mint_override(pool_key, devnet=False)` and `get_vault_lp_mint_override(vault_key, devnet=False)`. The `pda` functions consult the mainnet tables.
- `dynamic_amm.pubkey`: `Pubkey`, which is ordered by its bytes and converts to and from base58. The module also has `find_program_address`, `create_program_address` and `is_on_curve`.
- `dynamic_amm.events`: dataclasses for the events the pool program emits.
- `dynamic_amm.constants`: program ids, seed prefixes, fee constants and limits.
- `dynamic_amm.errors`: `PoolError` codes and messages, and the package's exceptions.

## Install

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Derive addresses:

```python
from dynamic_amm.pubkey import Pubkey
from dynamic_amm.pda import derive_vault_key, derive_customizable_permissionless_constant_product_pool_key

sol = Pubkey.from_base58("So11111111111111111111111111111111111111112")
usdc = Pubkey.from_base58("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")

vault = derive_vault_key(sol)
pool = derive_customizable_permissionless_constant_product_pool_key(sol, usdc)
print(vault.to_base58(), pool.to_base58())
```

Fees and curves:

```python
from dynamic_amm.state import calculate_fee
from dynamic_amm.curves import ConstantProductSwap, TradeDirection

calculate_fee(1_000_000, 250, 100_000)  # 2500

result = ConstantProductSwap().swap(1_000, 1_000_000, 1_000_000, TradeDirection.A_TO_B)
result.destination_amount_swapped  # 999
```

## Errors

- `MathError` is raised for overflow, underflow and division by zero. It is an `AmmError` and an `ArithmeticError`.
- `QuoteError` is raised when a quote cannot be produced, for example:
  - the pool is disabled;
  - the pool is not yet active;
  - the input mint is not one of the pool's mints;
  - the output would exceed the vault reserve.
- `AmmError` is the base class. It carries a `PoolError` in `error` where one applies, for example `ActivationType.from_value` on an unknown value.

## What it does not do

Nothing here talks to a network. The package does not decode pool or vault accounts from raw bytes: you build `Pool` and `Vault` values yourself from data you have fetched. The exceptions are the stake account prices in `dynamic_amm.depeg`, which are read from raw account data. The package does not build, sign or send transactions, and it does not carry out the pool program's instructions. It quotes them and derives the addresses they use.