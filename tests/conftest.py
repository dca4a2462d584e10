# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Global pytest fixtures."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest
from _pytest.nodes import Item

from bigquery_snippets.logging import get_global_file_logger


TESTS_DATA_DIR = Path(__file__).parent / "data"


def pytest_collection_modifyitems(items: list[Item]) -> None:
    """Override default pytest behavior, sorting our tests in a sensible execution order.

    Unit tests are fast and need no credentials, so they run first. Integration tests call
    live Google Cloud APIs and run last.
    """
    def test_priority(item: Item) -> int:
        if item.get_closest_marker(name="slow"):
            return 9  # slow tests have the lowest priority
        elif "unit_tests" in str(item.path):
            return 1  # unit tests have highest priority
        elif "integration_tests" in str(item.path):
            return 4  # integration tests have lower priority
        else:
            return 5  # all other tests have lower priority

    # Sort the items list in-place based on the test_priority function
    items.sort(key=test_priority)

    for item in items:
        # Every integration test talks to a live project and requires credentials
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.requires_creds)


@pytest.fixture(autouse=True)
def clear_file_logger_cache():
    """Start every test without a cached file logger, so log paths follow the test's env."""
    get_global_file_logger.cache_clear()
    logging.getLogger("bigquery_snippets").handlers.clear()
    yield
    for handler in list(logging.getLogger("bigquery_snippets").handlers):
        handler.close()
    logging.getLogger("bigquery_snippets").handlers.clear()


@pytest.fixture(scope="session")
def sample_csv_path() -> Path:
    """A four-row CSV file with a header row."""
    return TESTS_DATA_DIR / "sample.csv"
