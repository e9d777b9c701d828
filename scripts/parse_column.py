"""
Demo script: parse a date column of a CSV/Parquet file from a YAML job file.

Usage:
    uv run python scripts/parse_column.py jobs/sales.yaml
    uv run python scripts/parse_column.py jobs/sales.yaml --show      # also print a preview

The job file names the input and output files and how to parse the
column (see ``lenient_dates.config.JobConfig``).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("parse_column")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import lenient_dates

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    show = "--show" in sys.argv
    if not args:
        log.error("Usage: parse_column.py <job.yaml> [--show]")
        sys.exit(2)

    for job_path in args:
        if not Path(job_path).exists():
            log.warning("SKIP  %s  (file not found)", job_path)
            continue

        config = lenient_dates.load_config(job_path)
        log.info("=" * 70)
        log.info("Job: %s", job_path)
        log.info("  input   : %s", config.input_path)
        log.info("  output  : %s (%s)", config.output_path, config.output_format)
        log.info("  column  : %s", config.parse.column)
        log.info("  orders  : %s", config.parse.orders)
        log.info("=" * 70)

        df = lenient_dates.run_job(config)
        if show:
            column = config.parse.column
            print(df[[column, f"{column}_parsed"]].head(20).to_string())

        log.info("Done: %s\n", job_path)


if __name__ == "__main__":
    main()
