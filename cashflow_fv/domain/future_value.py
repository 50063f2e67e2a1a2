"""Pairing of cash flows with time periods, and the calculation errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence


class FutureValueError(ValueError):
    """Base error for future value calculations."""


class LengthMismatchError(FutureValueError):
    def __init__(self, cash_flow_count: int, time_period_count: int):
        super().__init__(
            f"cash_flows has {cash_flow_count} values but time_periods has {time_period_count}"
        )
        self.cash_flow_count = cash_flow_count
        self.time_period_count = time_period_count


class ParseError(FutureValueError):
    def __init__(self, field: str, position: Optional[int], value: Any, reason: str):
        where = field if position is None else f"{field}[{position}]"
        super().__init__(f"{where}: cannot parse {value!r} ({reason})")
        self.field = field
        self.position = position
        self.value = value
        self.reason = reason


@dataclass(frozen=True)
class CashFlowEntry:
    time_period: int
    cash_flow: float


def pair_entries(cash_flows: Sequence[float], time_periods: Sequence[int]) -> List[CashFlowEntry]:
    """Pair the i-th cash flow with the i-th time period, in input order."""
    if len(cash_flows) != len(time_periods):
        raise LengthMismatchError(len(cash_flows), len(time_periods))

    return [
        CashFlowEntry(time_period=time_period, cash_flow=cash_flow)
        for cash_flow, time_period in zip(cash_flows, time_periods)
    ]
