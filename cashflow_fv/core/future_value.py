"""Future value calculation logic."""

from __future__ import annotations

from typing import Any, List, Optional

from cashflow_fv.config import CalculatorConfig
from cashflow_fv.core.logger import get_logger
from cashflow_fv.domain.future_value import FutureValueError, pair_entries
from cashflow_fv.schemas.future_value import (
    FutureValueRequest,
    FutureValueResponse,
    FutureValueResult,
)

logger = get_logger(__name__)


def compound_factor(rate: float, periods: int) -> float:
    """Return (1 + rate) ** periods using exponentiation by squaring.

    The exponent is always an integer, so a negative base stays real and
    simply alternates sign.
    """
    base = 1.0 + rate
    exponent = abs(periods)
    if periods < 0 and base == 0:
        raise FutureValueError(f"(1 + rate) is zero; cannot raise it to period {periods}")
    if periods < 0:
        base = 1.0 / base

    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1

    return result


def future_value(cash_flow: float, rate: float, time_period: int) -> float:
    return cash_flow * compound_factor(rate, time_period)


def calculate_future_value_schedule(request: FutureValueRequest) -> FutureValueResponse:
    """Compound every cash flow to its time period, keeping input order."""
    entries = pair_entries(request.cash_flows, request.time_periods)

    if 1 + request.rate <= 0:
        logger.warning("rate %s leaves a non-positive growth base; values will alternate sign", request.rate)

    results: List[FutureValueResult] = [
        FutureValueResult(
            time_period=entry.time_period,
            cash_flow=entry.cash_flow,
            future_value=future_value(entry.cash_flow, request.rate, entry.time_period),
        )
        for entry in entries
    ]
    logger.debug("computed %d future values at rate %s", len(results), request.rate)

    return FutureValueResponse(
        results=results,
        total_cash_flow=sum(result.cash_flow for result in results),
        total_future_value=sum(result.future_value for result in results),
    )


def calculate_future_values(
    cash_flows: Any,
    rate: Any,
    time_periods: Any,
    config: Optional[CalculatorConfig] = None,
) -> List[FutureValueResult]:
    """Parse the inputs and return one FutureValueResult per cash flow.

    ``cash_flows`` and ``time_periods`` may be sequences or delimited text.
    Raises ParseError or LengthMismatchError without returning partial output.
    """
    request = FutureValueRequest.from_raw(cash_flows, rate, time_periods, config)
    return calculate_future_value_schedule(request).results
