import pytest

from dynamic_amm.errors import AmmError, MathError, PoolError, QuoteError


@pytest.mark.parametrize(
    "error, message",
    [
        (PoolError.MATH_OVERFLOW, "Math operation overflow"),
        (PoolError.INVALID_FEE, "Invalid fee setup"),
        (PoolError.POOL_DISABLED, "Pool disabled"),
        (PoolError.INVALID_QUOTE_MINT, "Quote token must be SOL,USDC"),
        (PoolError.EXCEEDED_SLIPPAGE, "Exceeded slippage tolerance"),
    ],
)
def test_messages(error, message):
    assert error.message() == message


def test_amm_error_takes_message_from_pool_error():
    err = AmmError(error=PoolError.INVALID_FEE)
    assert str(err) == "Invalid fee setup"
    assert err.error is PoolError.INVALID_FEE


def test_math_error_defaults_to_overflow():
    err = MathError()
    assert err.error is PoolError.MATH_OVERFLOW
    assert str(err) == "Math operation overflow"
    assert isinstance(err, ArithmeticError)


def test_explicit_message_wins():
    err = MathError("Fail to get out_amount")
    assert str(err) == "Fail to get out_amount"


def test_quote_error_is_amm_error():
    err = QuoteError("Swap is disabled")
    assert str(err) == "Swap is disabled"
    assert err.error is None
    assert isinstance(err, AmmError)