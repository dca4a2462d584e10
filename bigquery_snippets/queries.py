# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Snippets for running queries, in standard SQL and in legacy SQL."""

from __future__ import annotations

from google.cloud import bigquery

from bigquery_snippets.config import get_bigquery_client
from bigquery_snippets.constants import (
    DEFAULT_LOCATION,
    QUERY_ROW_LIMIT,
    USA_NAMES_LEGACY_TABLE,
    USA_NAMES_TABLE,
)
from bigquery_snippets.logging import log_info


def _run_query(
    client: bigquery.Client,
    sql: str,
    job_config: bigquery.QueryJobConfig | None = None,
) -> None:
    query_job = client.query(sql, job_config=job_config, location=DEFAULT_LOCATION)
    log_info("Started query job %s", query_job.job_id)

    for row in query_job.result():  # Waits for the job to complete.
        print(row["name"])


def query(
    project_id: str,
    *,
    client: bigquery.Client | None = None,
) -> None:
    """Print the first 100 names recorded in Texas, one per line."""
    client = client or get_bigquery_client(project_id)

    sql = f"""
        SELECT name FROM `{USA_NAMES_TABLE}`
        WHERE state = 'TX'
        LIMIT {QUERY_ROW_LIMIT}
    """
    _run_query(client, sql)


def query_legacy(
    project_id: str,
    *,
    client: bigquery.Client | None = None,
) -> None:
    """Same as `query`, but written in legacy SQL."""
    client = client or get_bigquery_client(project_id)

    sql = f"""
        SELECT name FROM {USA_NAMES_LEGACY_TABLE}
        WHERE state = 'TX'
        LIMIT {QUERY_ROW_LIMIT}
    """
    job_config = bigquery.QueryJobConfig(use_legacy_sql=True)
    _run_query(client, sql, job_config)
