"""
Batch job runner for lenient-dates.

Reads a CSV or Parquet table with pandas, parses the configured column
with ``parse_date_time()``, appends the result as ``<column>_parsed`` and
writes the table back out.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from lenient_dates.config import JobConfig
from lenient_dates.exceptions import ConfigValidationError, ExportError
from lenient_dates.orders.tokens import normalize_orders
from lenient_dates.parse import parse_date_time
from lenient_dates.time_locale import check_time_locale, current_system, current_time_locale

logger = logging.getLogger(__name__)

_TIME_LETTERS = frozenset("HMSI")


def _read_input(path: Path, column: str) -> pd.DataFrame:
    """Read *path*; a CSV's *column* is kept as text (``2022.10`` stays ``"2022.10"``)."""
    if path.suffix.lower() == ".parquet":
        return pd.read_parquet(path, engine="pyarrow")
    return pd.read_csv(path, encoding="utf-8-sig", dtype={column: str})


def _has_time_fields(orders: list[str]) -> bool:
    return any(_TIME_LETTERS.intersection(order) for order in normalize_orders(orders))


def _write_dataframe(df: pd.DataFrame, path: Path, output_format: str) -> None:
    """Write *df* to *path*.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def run_job(config: JobConfig) -> pd.DataFrame:
    """Run a parse job and return the written DataFrame.

    Raises:
        FileNotFoundError: If the input file does not exist.
        ConfigValidationError: If the configured column is missing.
        UnsupportedOrderError: If none of the configured orders is supported.
        LocaleNotSupportedError: If the orders carry time fields and the
            time locale cannot be used on this platform.
        ExportError: If the output cannot be written.
    """
    spec = config.parse
    input_path = Path(config.input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    df = _read_input(input_path, spec.column)
    logger.info("Read %d rows from %s", len(df), input_path)
    if spec.column not in df.columns:
        raise ConfigValidationError(
            f"Column '{spec.column}' not found in {input_path.name}. "
            f"Available columns: {list(df.columns)}"
        )

    if _has_time_fields(spec.orders):
        locale = spec.locale if spec.locale is not None else current_time_locale()
        check_time_locale(locale, current_system())

    parsed = parse_date_time(
        df[spec.column],
        spec.orders,
        tz=spec.tz,
        truncated=spec.truncated,
        exact=spec.exact,
    )
    out_column = f"{spec.column}_parsed"
    df = df.assign(**{out_column: parsed})
    logger.info(
        "Parsed column '%s': %d of %d values matched",
        spec.column, int(parsed.notna().sum()), len(parsed),
    )

    _write_dataframe(df, Path(config.output_path), config.output_format)
    logger.info("Wrote %s", config.output_path)
    return df
