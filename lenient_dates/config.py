"""
Configuration models and YAML I/O for lenient-dates.

This module defines the Pydantic models for a batch parse job, plus helper
functions for loading and saving them as YAML.

Key models:
- ParseConfig: Which column to parse and how (orders, tz, truncated, ...).
- JobConfig: Input/output files plus a ParseConfig.

Example job file::

    input_path: inputs/sales.csv
    output_path: outputs/sales.parquet
    output_format: parquet
    parse:
      column: period
      orders: [yq, ym]
      tz: null
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from lenient_dates.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParseConfig(BaseModel):
    """How to parse one column."""

    column: str = Field("date", description="Name of the column to parse")
    orders: list[str] = Field(
        ..., min_length=1, description="Orders to try, e.g. ['ymd', 'dmy_HMS']"
    )
    tz: str | None = Field(
        "UTC", description="Time zone of the parsed values; null for naive timestamps"
    )
    truncated: int = Field(
        0, ge=0, description="Number of trailing order characters that may be missing"
    )
    exact: bool = Field(
        False, description="If True, orders are strptime formats used verbatim"
    )
    locale: str | None = Field(
        None, description="Time locale, checked for orders with time fields; null uses the process LC_TIME setting"
    )

    @field_validator("orders", mode="before")
    @classmethod
    def _single_order_as_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class JobConfig(BaseModel):
    """A batch job: read a table, parse one column, write the result."""

    input_path: str = Field(..., description="CSV or Parquet file to read")
    output_path: str = Field(..., description="Where to write the result")
    output_format: Literal["csv", "parquet"] = Field("parquet", description="Output format")
    parse: ParseConfig


def load_config(path: str | Path) -> JobConfig:
    """Load and validate a job YAML file into a JobConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return JobConfig.model_validate(raw)


def save_config(config: JobConfig, path: str | Path) -> None:
    """Serialize a JobConfig to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# lenient-dates job configuration\n\n")
        yaml.dump(data, f, allow_unicode=True, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
