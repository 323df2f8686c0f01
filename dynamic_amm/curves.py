"""Swap curves used to quote trades: constant product and stable swap."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from dynamic_amm.constants import DEPEG_PRECISION
from dynamic_amm.errors import MathError
from dynamic_amm.state import (
    ConstantProductCurve,
    CurveType,
    Depeg,
    DepegType,
    StableCurve,
    TokenMultiplier,
)

U128_MAX = 2**128 - 1
N_COINS = 2
_MAX_ITERATIONS = 256


def _u128(value: int) -> int:
    if value > U128_MAX:
        raise MathError()
    return value


def _sub(left: int, right: int) -> int:
    if right > left:
        raise MathError("Subtraction underflow")
    return left - right


def _div(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise MathError("Division by zero")
    return numerator // denominator


class TradeDirection(Enum):
    """Which pool token is sold."""

    A_TO_B = 0
    B_TO_A = 1


@dataclass(frozen=True)
class SwapResult:
    """Amounts before and after a swap on a curve."""

    new_swap_source_amount: int
    new_swap_destination_amount: int
    source_amount_swapped: int
    destination_amount_swapped: int


class SwapCurve(ABC):
    """A curve that prices a swap between the two pool tokens."""

    @abstractmethod
    def swap(
        self,
        source_amount: int,
        swap_source_amount: int,
        swap_destination_amount: int,
        trade_direction: TradeDirection,
    ) -> SwapResult:
        """Swap source_amount into the pool; raises MathError when impossible."""


def _ceil_div(dividend: int, divisor: int) -> tuple[int, int]:
    """Rounded-up quotient and the smallest divisor that yields it."""
    quotient = _div(dividend, divisor)
    if quotient == 0:
        return (1, 0) if _u128(dividend * 2) >= divisor else (0, 0)
    if dividend % divisor:
        quotient += 1
        divisor = dividend // quotient
        if dividend % quotient:
            divisor += 1
    return quotient, divisor


@dataclass(frozen=True)
class ConstantProductSwap(SwapCurve):
    """Curve keeping token_a * token_b constant."""

    def swap(
        self,
        source_amount: int,
        swap_source_amount: int,
        swap_destination_amount: int,
        trade_direction: TradeDirection,
    ) -> SwapResult:
        invariant = _u128(swap_source_amount * swap_destination_amount)
        new_source = _u128(swap_source_amount + source_amount)
        new_destination, new_source = _ceil_div(invariant, new_source)
        source_amount_swapped = _sub(new_source, swap_source_amount)
        destination_amount_swapped = _sub(swap_destination_amount, new_destination)
        if destination_amount_swapped == 0:
            raise MathError("Swap results in zero destination amount")
        return SwapResult(
            new_swap_source_amount=_u128(swap_source_amount + source_amount_swapped),
            new_swap_destination_amount=_sub(
                swap_destination_amount, destination_amount_swapped
            ),
            source_amount_swapped=source_amount_swapped,
            destination_amount_swapped=destination_amount_swapped,
        )


def _compute_d(amp: int, amount_a: int, amount_b: int) -> int:
    """Stable swap invariant D by Newton's method."""
    sum_x = _u128(amount_a + amount_b)
    if sum_x == 0:
        return 0
    ann = amp * N_COINS
    leverage = _u128(sum_x * ann)
    ann_minus_one = _sub(ann, 1)
    d = sum_x
    for _ in range(_MAX_ITERATIONS):
        d_prod = _div(d * d, amount_a * N_COINS)
        d_prod = _div(d_prod * d, amount_b * N_COINS)
        d_prev = d
        numerator = d * (d_prod * N_COINS + leverage)
        denominator = d * ann_minus_one + d_prod * (N_COINS + 1)
        d = _div(numerator, denominator)
        if abs(d - d_prev) <= 1:
            break
    return d


def _compute_y(amp: int, x: int, d: int) -> int:
    """Destination reserve that keeps invariant D after the source reaches x."""
    ann = amp * N_COINS
    c = _div(d * d, x * N_COINS)
    c = _div(c * d, ann * N_COINS)
    b = _div(d, ann) + x
    y = d
    for _ in range(_MAX_ITERATIONS):
        y_prev = y
        y = _div(y * y + c, _sub(y * 2 + b, d))
        if abs(y - y_prev) <= 1:
            break
    return _u128(y)


@dataclass(frozen=True)
class StableSwap(SwapCurve):
    """Stable swap curve, rescaling amounts for decimals and depeg prices."""

    amp: int
    token_multiplier: TokenMultiplier = field(default_factory=TokenMultiplier)
    depeg: Depeg = field(default_factory=Depeg)
    last_amp_updated_timestamp: int = 0

    @property
    def _is_depeg(self) -> bool:
        return self.depeg.depeg_type is not DepegType.NONE

    def _upscale_a(self, amount: int) -> int:
        scaled = self.token_multiplier.upscale_token_a(amount)
        return _u128(scaled * DEPEG_PRECISION) if self._is_depeg else scaled

    def _downscale_a(self, amount: int) -> int:
        scaled = self.token_multiplier.downscale_token_a(amount)
        return _div(scaled, DEPEG_PRECISION) if self._is_depeg else scaled

    def _upscale_b(self, amount: int) -> int:
        scaled = self.token_multiplier.upscale_token_b(amount)
        return _u128(scaled * self.depeg.base_virtual_price) if self._is_depeg else scaled

    def _downscale_b(self, amount: int) -> int:
        scaled = self.token_multiplier.downscale_token_b(amount)
        return _div(scaled, self.depeg.base_virtual_price) if self._is_depeg else scaled

    def _amount_swapped(self, source: int, swap_source: int, swap_destination: int) -> int:
        new_source = _u128(swap_source + source)
        d = _compute_d(self.amp, swap_source, swap_destination)
        y = _compute_y(self.amp, new_source, d)
        return _sub(_sub(swap_destination, y), 1)

    def swap(
        self,
        source_amount: int,
        swap_source_amount: int,
        swap_destination_amount: int,
        trade_direction: TradeDirection,
    ) -> SwapResult:
        if trade_direction is TradeDirection.A_TO_B:
            upscale_source, upscale_destination = self._upscale_a, self._upscale_b
            downscale_destination = self._downscale_b
        else:
            upscale_source, upscale_destination = self._upscale_b, self._upscale_a
            downscale_destination = self._downscale_a

        amount_swapped = self._amount_swapped(
            upscale_source(source_amount),
            upscale_source(swap_source_amount),
            upscale_destination(swap_destination_amount),
        )
        destination_amount_swapped = downscale_destination(amount_swapped)
        return SwapResult(
            new_swap_source_amount=_u128(swap_source_amount + source_amount),
            new_swap_destination_amount=_sub(
                swap_destination_amount, destination_amount_swapped
            ),
            source_amount_swapped=source_amount,
            destination_amount_swapped=destination_amount_swapped,
        )


def get_swap_curve(curve_type: CurveType) -> SwapCurve:
    """The swap curve that prices trades for a pool's curve type."""
    if isinstance(curve_type, ConstantProductCurve):
        return ConstantProductSwap()
    if isinstance(curve_type, StableCurve):
        return StableSwap(
            amp=curve_type.amp,
            token_multiplier=curve_type.token_multiplier,
            depeg=curve_type.depeg,
            last_amp_updated_timestamp=curve_type.last_amp_updated_timestamp,
        )
    raise TypeError(f"unknown curve type {type(curve_type).__name__}")