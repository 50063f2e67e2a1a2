"""Future values for series of cash flows compounded at a common rate."""

from cashflow_fv.config import CalculatorConfig
from cashflow_fv.core.future_value import (
    calculate_future_value_schedule,
    calculate_future_values,
    compound_factor,
    future_value,
)
from cashflow_fv.core.logger import get_logger, setup_logging
from cashflow_fv.domain.future_value import (
    CashFlowEntry,
    FutureValueError,
    LengthMismatchError,
    ParseError,
)
from cashflow_fv.schemas.future_value import (
    FutureValueRequest,
    FutureValueResponse,
    FutureValueResult,
)

__all__ = [
    "CalculatorConfig",
    "CashFlowEntry",
    "FutureValueError",
    "FutureValueRequest",
    "FutureValueResponse",
    "FutureValueResult",
    "LengthMismatchError",
    "ParseError",
    "calculate_future_value_schedule",
    "calculate_future_values",
    "compound_factor",
    "future_value",
    "get_logger",
    "setup_logging",
]
