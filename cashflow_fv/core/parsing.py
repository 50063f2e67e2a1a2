"""Turn raw cash flow inputs into typed numbers.

Cash flows and time periods arrive either as native sequences or as
delimited text such as ``"100, 200, 300"``. Both forms end up as plain
``float`` / ``int`` lists, or a ``ParseError`` naming the first element
that could not be read.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterable, List, Optional, Union

from pydantic import Field, TypeAdapter, ValidationError

from cashflow_fv.config import DEFAULT_CONFIG, CalculatorConfig
from cashflow_fv.core.logger import get_logger
from cashflow_fv.domain.future_value import ParseError

logger = get_logger(__name__)

RawValues = Union[str, Iterable[Any]]

_FLOAT_ADAPTER = TypeAdapter(Annotated[float, Field(allow_inf_nan=False)])
_INT_ADAPTER = TypeAdapter(int)


def split_delimited(text: str, delimiter: str = ",") -> List[str]:
    """Split text into stripped tokens; blank text is an empty list."""
    if not text.strip():
        return []
    return [token.strip() for token in text.split(delimiter)]


def _parse_value(adapter: TypeAdapter, field: str, position: Optional[int], value: Any):
    if isinstance(value, bool):
        raise ParseError(field, position, value, "booleans are not numbers")
    candidate = value.strip() if isinstance(value, str) else value
    try:
        return adapter.validate_python(candidate)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        logger.debug("rejecting %s at position %s: %s", field, position, reason)
        raise ParseError(field, position, value, reason) from exc


def _parse_values(
    adapter: TypeAdapter,
    field: str,
    values: RawValues,
    config: Optional[CalculatorConfig],
) -> List[Any]:
    config = config or DEFAULT_CONFIG
    if isinstance(values, str):
        values = split_delimited(values, config.delimiter)
    elif not isinstance(values, Iterable):
        raise ParseError(field, None, values, "expected a sequence or delimited text")

    return [
        _parse_value(adapter, field, position, value)
        for position, value in enumerate(values)
    ]


def parse_cash_flows(values: RawValues, config: Optional[CalculatorConfig] = None) -> List[float]:
    return _parse_values(_FLOAT_ADAPTER, "cash_flows", values, config)


def parse_time_periods(values: RawValues, config: Optional[CalculatorConfig] = None) -> List[int]:
    """Whole periods only: ``2`` and ``2.0`` are accepted, ``2.5`` is not."""
    return _parse_values(_INT_ADAPTER, "time_periods", values, config)


def parse_rate(value: Any) -> float:
    return _parse_value(_FLOAT_ADAPTER, "rate", None, value)
