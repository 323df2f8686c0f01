"""Pool error codes and the exceptions raised by the package."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class PoolError(Enum):
    """Error codes of the pool program with their messages."""

    MATH_OVERFLOW = (6000, "Math operation overflow")
    INVALID_FEE = (6001, "Invalid fee setup")
    INVALID_INVARIANT = (6002, "Invalid invariant d")
    FEE_CALCULATION_FAILURE = (6003, "Fee calculation failure")
    EXCEEDED_SLIPPAGE = (6004, "Exceeded slippage tolerance")
    INVALID_CALCULATION = (6005, "Invalid curve calculation")
    ZERO_TRADING_TOKENS = (6006, "Given pool token amount results in zero trading tokens")
    CONVERSION_ERROR = (6007, "Math conversion overflow")
    FAULTY_LP_MINT = (
        6008,
        "LP mint authority must be 'A' vault lp, without freeze authority, and 0 supply",
    )
    MISMATCHED_TOKEN_MINT = (6009, "Token mint mismatched")
    MISMATCHED_LP_MINT = (6010, "LP mint mismatched")
    MISMATCHED_OWNER = (6011, "Invalid lp token owner")
    INVALID_VAULT_ACCOUNT = (6012, "Invalid vault account")
    INVALID_VAULT_LP_ACCOUNT = (6013, "Invalid vault lp account")
    INVALID_POOL_LP_MINT_ACCOUNT = (6014, "Invalid pool lp mint account")
    POOL_DISABLED = (6015, "Pool disabled")
    INVALID_ADMIN_ACCOUNT = (6016, "Invalid admin account")
    INVALID_PROTOCOL_FEE_ACCOUNT = (6017, "Invalid protocol fee account")
    SAME_ADMIN_ACCOUNT = (6018, "Same admin account")
    IDENTICAL_SOURCE_DESTINATION = (6019, "Identical user source and destination token account")
    APY_CALCULATION_ERROR = (6020, "Apy calculation error")
    INSUFFICIENT_SNAPSHOT = (6021, "Insufficient virtual price snapshot")
    NON_UPDATABLE_CURVE = (6022, "Current curve is non-updatable")
    MISMATCHED_CURVE = (6023, "New curve is mismatched with old curve")
    INVALID_AMPLIFICATION = (6024, "Amplification is invalid")
    UNSUPPORTED_OPERATION = (6025, "Operation is not supported")
    EXCEED_MAX_A_CHANGES = (6026, "Exceed max amplification changes")
    INVALID_REMAINING_ACCOUNTS_LEN = (6027, "Invalid remaining accounts length")
    INVALID_REMAINING_ACCOUNTS = (6028, "Invalid remaining account")
    MISMATCHED_DEPEG_MINT = (6029, "Token mint B doesn't matches depeg type token mint")
    INVALID_APY_ACCOUNT = (6030, "Invalid APY account")
    INVALID_TOKEN_MULTIPLIER = (6031, "Invalid token multiplier")
    INVALID_DEPEG_INFORMATION = (6032, "Invalid depeg information")
    UPDATE_TIME_CONSTRAINT = (6033, "Update time constraint violated")
    EXCEED_MAX_FEE_BPS = (6034, "Exceeded max fee bps")
    INVALID_ADMIN = (6035, "Invalid admin")
    POOL_IS_NOT_PERMISSIONED = (6036, "Pool is not permissioned")
    INVALID_DEPOSIT_AMOUNT = (6037, "Invalid deposit amount")
    INVALID_FEE_OWNER = (6038, "Invalid fee owner")
    NON_DEPLETED_POOL = (6039, "Pool is not depleted")
    AMOUNT_NOT_PEG = (6040, "Token amount is not 1:1")
    AMOUNT_IS_ZERO = (6041, "Amount is zero")
    TYPE_CAST_FAILED = (6042, "Type cast error")
    AMOUNT_IS_NOT_ENOUGH = (6043, "Amount is not enough")
    INVALID_ACTIVATION_DURATION = (6044, "Invalid activation duration")
    POOL_IS_NOT_LAUNCH_POOL = (6045, "Pool is not launch pool")
    UNABLE_TO_MODIFY_ACTIVATION_POINT = (6046, "Unable to modify activation point")
    INVALID_AUTHORITY_TO_CREATE_THE_POOL = (6047, "Invalid authority to create the pool")
    INVALID_ACTIVATION_TYPE = (6048, "Invalid activation type")
    INVALID_ACTIVATION_POINT = (6049, "Invalid activation point")
    PRE_ACTIVATION_SWAP_STARTED = (6050, "Pre activation swap window started")
    INVALID_POOL_TYPE = (6051, "Invalid pool type")
    INVALID_QUOTE_MINT = (6052, "Quote token must be SOL,USDC")

    def __init__(self, code: int, message: str) -> None:
        self._code = code
        self._message = message

    def code(self) -> int:
        """Numeric error code."""
        return self._code

    def message(self) -> str:
        """Human-readable error message."""
        return self._message


class AmmError(Exception):
    """Base class of errors raised by the package."""

    def __init__(self, message: Optional[str] = None, error: Optional[PoolError] = None) -> None:
        self.error = error
        if message is None:
            message = error.message() if error is not None else "Dynamic AMM error"
        super().__init__(message)


class MathError(AmmError, ArithmeticError):
    """An integer operation overflowed, underflowed or divided by zero."""

    def __init__(
        self, message: Optional[str] = None, error: Optional[PoolError] = PoolError.MATH_OVERFLOW
    ) -> None:
        super().__init__(message, error)


class QuoteError(AmmError):
    """A swap quote could not be produced."""