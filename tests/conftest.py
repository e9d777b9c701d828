"""
Shared test fixtures for lenient-dates tests.

Unit tests work on expression descriptors only (formats, variants, attempt
order).  Integration tests evaluate expressions with Arrow and are marked
``integration``.
"""

import pyarrow as pa
import pyarrow.compute as pc
import pytest

from lenient_dates.parse import INPUT_COLUMN, evaluate


@pytest.fixture
def x() -> pc.Expression:
    """Field reference for the single input column used by ``evaluate``."""
    return pc.field(INPUT_COLUMN)


@pytest.fixture
def run():
    """Evaluate an expression against a list of values, returning Python values."""
    def _run(expr: pc.Expression, values: list) -> list:
        return evaluate(expr, pa.array(values)).to_pylist()
    return _run


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (evaluates expressions with Arrow)",
    )
