# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Fixtures for integration tests.

These tests call live BigQuery and Cloud Storage APIs. They are skipped unless a project ID is
configured (see `bigquery_snippets.config`). Every resource they create has a random name and is
deleted in teardown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from google.auth.exceptions import DefaultCredentialsError

from bigquery_snippets import exceptions as exc
from bigquery_snippets.config import SnippetConfig
from bigquery_snippets.resources import TempResourceManager


if TYPE_CHECKING:
    from collections.abc import Generator

    from google.cloud import bigquery, storage


@pytest.fixture(scope="session")
def snippet_config() -> SnippetConfig:
    try:
        config = SnippetConfig.from_env()
    except exc.BigQuerySnippetConfigError:
        pytest.skip("GOOGLE_PROJECT_ID is not set.")

    try:
        config.get_credentials()
    except DefaultCredentialsError:
        pytest.skip("No Google Cloud credentials available.")

    return config


@pytest.fixture(scope="session")
def project_id(snippet_config: SnippetConfig) -> str:
    return snippet_config.project_id


@pytest.fixture(scope="session")
def bigquery_client(snippet_config: SnippetConfig) -> bigquery.Client:
    return snippet_config.get_bigquery_client()


@pytest.fixture(scope="session")
def storage_client(snippet_config: SnippetConfig) -> storage.Client:
    return snippet_config.get_storage_client()


@pytest.fixture
def temp_resources(
    project_id: str,
    bigquery_client: bigquery.Client,
    storage_client: storage.Client,
) -> Generator[TempResourceManager, Any, None]:
    """A resource manager whose datasets and buckets are deleted after the test."""
    with TempResourceManager(
        project_id,
        bigquery_client=bigquery_client,
        storage_client=storage_client,
    ) as resources:
        yield resources


@pytest.fixture
def temp_dataset(temp_resources: TempResourceManager) -> str:
    return temp_resources.create_temp_dataset()


@pytest.fixture
def temp_bucket(temp_resources: TempResourceManager) -> str:
    return temp_resources.create_temp_bucket()
