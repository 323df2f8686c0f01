"""Program ids, seed prefixes and numeric limits of the pool and vault programs."""

from dynamic_amm.pubkey import Pubkey

AMM_PROGRAM_ID = Pubkey.from_base58("Eo7WjKq67rjJQSZxS6z3YkapzY3eMj6Xy8X5EQVn5UaB")
AMM_STAGING_PROGRAM_ID = Pubkey.from_base58("ammbh4CQztZ6txJ8AaQgPsWjd6o7GhmvopS2JAo5bCB")

# Minimum seconds between amplification changes.
MIN_CHANGE_AMP_DURATION = 600

CONFIG_PREFIX = b"config"

# Fees
CONSTANT_PRODUCT_TRADE_FEE_NUMERATOR = 250
STABLE_SWAP_TRADE_FEE_NUMERATOR = 10
CONSTANT_PRODUCT_PROTOCOL_TRADE_FEE_NUMERATOR = 0
STABLE_SWAP_PROTOCOL_TRADE_FEE_NUMERATOR = 0
HOST_TRADE_FEE_NUMERATOR = 20000
FEE_DENOMINATOR = 100000
MAX_FEE_BPS = 1500
MAX_BASIS_POINT = 10000

MEME_MIN_FEE_NUMERATOR = 250
MEME_MAX_FEE_NUMERATOR = 15000
MEME_MIN_FEE_BPS = 25
MEME_MAX_FEE_BPS = 1500
MEME_PROTOCOL_FEE_NUMERATOR = 20000
MEME_MIN_FEE_UPDATE_WINDOW_DURATION = 60 * 30
MAX_PARTNER_FEE_NUMERATOR = 50000

# Activation
SLOT_BUFFER = 9000
TIME_BUFFER = 3600
MAX_ACTIVATION_SLOT_DURATION = SLOT_BUFFER * 24 * 31
MAX_ACTIVATION_TIME_DURATION = TIME_BUFFER * 24 * 31
FIVE_MINUTES_SLOT_BUFFER = SLOT_BUFFER // 12
FIVE_MINUTES_TIME_BUFFER = TIME_BUFFER // 12

# Virtual price
VIRTUAL_PRICE_DECIMAL = 8
VIRTUAL_PRICE_PRECISION = 10**VIRTUAL_PRICE_DECIMAL

# Stable curve
MAX_AMP = 10_000
MAX_A_CHANGE = MAX_AMP

# Depeg pools
DEPEG_BASE_CACHE_EXPIRES = 60 * 10
DEPEG_PRECISION = 10**6

# Supported quote mints
SOL_MINT = Pubkey.from_base58("So11111111111111111111111111111111111111112")
USDC_MINT = Pubkey.from_base58("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
QUOTE_MINTS = (SOL_MINT, USDC_MINT)

# Pool seed prefixes
POOL_PREFIX = b"pool"
PROTOCOL_FEE_PREFIX = b"fee"
LP_MINT_PREFIX = b"lp_mint"
LOCK_ESCROW_PREFIX = b"lock_escrow"

# Vault seed prefixes
VAULT_PREFIX = b"vault"
TOKEN_VAULT_PREFIX = b"token_vault"
VAULT_LP_MINT_PREFIX = b"lp_mint"
COLLATERAL_VAULT_PREFIX = b"collateral_vault"
SOLEND_OBLIGATION_PREFIX = b"solend_obligation"
SOLEND_OBLIGATION_OWNER_PREFIX = b"solend_obligation_owner"
KAMINO_OBLIGATION_PREFIX = b"kamino_obligation"
KAMINO_OBLIGATION_OWNER_PREFIX = b"kamino_obligation_owner"