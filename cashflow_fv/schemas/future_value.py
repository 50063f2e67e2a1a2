"""Data contracts for future value calculations."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from cashflow_fv.config import CalculatorConfig
from cashflow_fv.core.parsing import parse_cash_flows, parse_rate, parse_time_periods


class FutureValueRequest(BaseModel):
    """Inputs required to compound a series of cash flows."""

    model_config = ConfigDict(extra="forbid")

    cash_flows: List[float] = Field(
        default_factory=list,
        description="Cash flow amounts, paired by position with time_periods.",
    )
    rate: float = Field(
        ...,
        description="Annual rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    time_periods: List[int] = Field(
        default_factory=list,
        description="Whole compounding periods for each cash flow.",
    )

    @classmethod
    def from_raw(
        cls,
        cash_flows: Any,
        rate: Any,
        time_periods: Any,
        config: Optional[CalculatorConfig] = None,
    ) -> "FutureValueRequest":
        """Build a request from sequences or delimited text, raising ParseError on bad input."""
        return cls(
            cash_flows=parse_cash_flows(cash_flows, config),
            rate=parse_rate(rate),
            time_periods=parse_time_periods(time_periods, config),
        )


class FutureValueResult(BaseModel):
    """Single row of a future value table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    time_period: int
    cash_flow: float
    future_value: float

    def as_tuple(self) -> Tuple[int, float, float]:
        return (self.time_period, self.cash_flow, self.future_value)


class FutureValueResponse(BaseModel):
    """Compounded cash flows in input order."""

    model_config = ConfigDict(extra="forbid")

    results: List[FutureValueResult]
    total_cash_flow: float = 0.0
    total_future_value: float = 0.0

    def as_table(self) -> List[Tuple[int, float, float]]:
        return [result.as_tuple() for result in self.results]
