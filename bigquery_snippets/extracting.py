# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Snippets for exporting a table to Cloud Storage."""

from __future__ import annotations

from google.cloud import bigquery

from bigquery_snippets import exceptions as exc
from bigquery_snippets.config import get_bigquery_client
from bigquery_snippets.constants import DEFAULT_LOCATION, SHAKESPEARE_TABLE
from bigquery_snippets.logging import log_info


def _extract_shakespeare(
    project_id: str,
    bucket_name: str,
    file_name: str,
    job_config: bigquery.ExtractJobConfig | None,
    client: bigquery.Client | None,
) -> str:
    if not bucket_name or bucket_name.startswith("gs://"):
        raise exc.BigQuerySnippetInputError(
            message="Expected a bare bucket name, without a `gs://` prefix.",
            input_value=bucket_name,
        )

    client = client or get_bigquery_client(project_id)

    destination_uri = f"gs://{bucket_name}/{file_name}"
    extract_job = client.extract_table(
        SHAKESPEARE_TABLE,
        destination_uri,
        job_config=job_config,
        # Must match the source table location.
        location=DEFAULT_LOCATION,
    )
    log_info("Started extract job %s to %s", extract_job.job_id, destination_uri)
    extract_job.result()  # Wait for the job to complete.

    print(f"Exported {SHAKESPEARE_TABLE} to {destination_uri}")
    return destination_uri


def extract_table(
    project_id: str,
    bucket_name: str,
    *,
    client: bigquery.Client | None = None,
) -> str:
    """Export the public Shakespeare table as CSV to `gs://{bucket_name}/shakespeare.csv`."""
    return _extract_shakespeare(
        project_id,
        bucket_name,
        "shakespeare.csv",
        None,
        client,
    )


def extract_table_json(
    project_id: str,
    bucket_name: str,
    *,
    client: bigquery.Client | None = None,
) -> str:
    """Export the public Shakespeare table as newline-delimited JSON."""
    job_config = bigquery.ExtractJobConfig(
        destination_format=bigquery.DestinationFormat.NEWLINE_DELIMITED_JSON,
    )
    return _extract_shakespeare(
        project_id,
        bucket_name,
        "shakespeare.json",
        job_config,
        client,
    )
