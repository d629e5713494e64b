"""pytest-benchmark configuration for WSVLexEngine benchmarks.

Configures benchmark defaults and custom options.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add WSVLexEngine metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "WSVLexEngine"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def table_document() -> str:
    """A 1000-row, 6-column document mixing plain, quoted and null values."""
    rows = [f'{i} name-{i} "city {i}" - "x""y" 3.{i} # row {i}' for i in range(1000)]
    return "\n".join(rows)
