import logging

import pytest
from pydantic import ValidationError

from cashflow_fv.config import CalculatorConfig
from cashflow_fv.core.future_value import calculate_future_values
from cashflow_fv.core.logger import get_logger, setup_logging


def test_defaults():
    config = CalculatorConfig()

    assert config.delimiter == ","
    assert config.log_level == "WARNING"


def test_from_env_reads_prefixed_variables():
    config = CalculatorConfig.from_env(
        {"CASHFLOW_FV_DELIMITER": "|", "CASHFLOW_FV_LOG_LEVEL": "DEBUG", "OTHER": "x"}
    )

    assert config.delimiter == "|"
    assert config.log_level == "DEBUG"


def test_empty_delimiter_is_invalid():
    with pytest.raises(ValidationError):
        CalculatorConfig(delimiter="")


def test_non_positive_growth_base_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="cashflow_fv"):
        calculate_future_values([100], -2.0, [3])

    assert any("non-positive growth base" in record.getMessage() for record in caplog.records)


def test_setup_logging_passes_level_and_format(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("info")
    setup_logging()

    assert calls[0]["level"] == logging.INFO
    assert calls[1]["level"] == logging.WARNING
    assert "%(name)s" in calls[0]["format"]


def test_loggers_are_named_per_module():
    assert get_logger("cashflow_fv.core.parsing").name == "cashflow_fv.core.parsing"
