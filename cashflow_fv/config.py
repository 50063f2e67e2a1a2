"""Calculator settings."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "CASHFLOW_FV_"


class CalculatorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    delimiter: str = Field(",", min_length=1, description="Separator for textual inputs.")
    log_level: str = Field("WARNING", description="Level used by setup_logging when none is given.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorConfig":
        environ = os.environ if environ is None else environ
        overrides = {}
        for name in ("delimiter", "log_level"):
            value = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None:
                overrides[name] = value
        return cls.model_validate(overrides)


DEFAULT_CONFIG = CalculatorConfig()
