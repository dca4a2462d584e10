# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Snippets for working with tables: create, delete, list, browse, copy and streaming inserts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from google.cloud import bigquery

from bigquery_snippets import exceptions as exc
from bigquery_snippets.config import get_bigquery_client
from bigquery_snippets.constants import (
    BROWSE_PAGE_SIZE,
    DEFAULT_COPY_TABLE_ID,
    DEFAULT_LOCATION,
    DEFAULT_NEW_TABLE_ID,
    SHAKESPEARE_TABLE,
)
from bigquery_snippets.logging import log_info


if TYPE_CHECKING:
    from google.cloud.bigquery import Table


DEFAULT_INSERT_ROWS: list[dict[str, Any]] = [
    {"name": "Washington", "post_abbr": "WA"},
    {"name": "Texas", "post_abbr": "TX"},
]
"""Rows streamed by `table_insert_rows`, matching the US states table schema."""


def create_table(
    project_id: str,
    dataset_id: str,
    table_id: str = DEFAULT_NEW_TABLE_ID,
    *,
    client: bigquery.Client | None = None,
) -> Table:
    """Create a table with a two-column schema and return it."""
    client = client or get_bigquery_client(project_id)

    schema = [
        bigquery.SchemaField("full_name", "STRING", mode="REQUIRED"),
        bigquery.SchemaField("age", "INTEGER", mode="REQUIRED"),
    ]
    table = bigquery.Table(f"{project_id}.{dataset_id}.{table_id}", schema=schema)

    log_info("Creating table %s.%s.%s", project_id, dataset_id, table_id)
    table = client.create_table(table)  # Make an API request.
    print(f"Created table {table.project}.{table.dataset_id}.{table.table_id}")
    return table


def delete_table(
    project_id: str,
    dataset_id: str,
    table_id: str,
    *,
    client: bigquery.Client | None = None,
) -> None:
    client = client or get_bigquery_client(project_id)

    log_info("Deleting table %s.%s.%s", project_id, dataset_id, table_id)
    client.delete_table(f"{project_id}.{dataset_id}.{table_id}")
    print(f"Table {table_id} deleted.")


def list_tables(
    project_id: str,
    dataset_id: str,
    *,
    client: bigquery.Client | None = None,
) -> list[str]:
    """Print the ID of every table in the dataset, and return them."""
    client = client or get_bigquery_client(project_id)

    table_ids = [table.table_id for table in client.list_tables(f"{project_id}.{dataset_id}")]
    if not table_ids:
        print(f"{dataset_id} does not contain any tables.")
        return table_ids

    for table_id in table_ids:
        print(table_id)

    return table_ids


def browse_table(
    project_id: str,
    *,
    page_size: int = BROWSE_PAGE_SIZE,
    client: bigquery.Client | None = None,
) -> None:
    """Print the first page of rows from the public Shakespeare table.

    Rows are read directly from table storage, so no query job is created and nothing is billed.
    """
    if page_size < 1:
        raise exc.BigQuerySnippetInputError(
            message="Page size must be a positive integer.",
            input_value=str(page_size),
        )

    client = client or get_bigquery_client(project_id)

    table = client.get_table(SHAKESPEARE_TABLE)
    rows = client.list_rows(table, max_results=page_size)
    for row in rows:
        print(f"{row['word']}: {row['word_count']}")


def copy_table(
    project_id: str,
    destination_dataset_id: str,
    destination_table_id: str = DEFAULT_COPY_TABLE_ID,
    *,
    client: bigquery.Client | None = None,
) -> Table:
    """Copy the public Shakespeare table into the given dataset and return the copy."""
    client = client or get_bigquery_client(project_id)

    destination = f"{project_id}.{destination_dataset_id}.{destination_table_id}"
    job_config = bigquery.CopyJobConfig(
        write_disposition=bigquery.WriteDisposition.WRITE_TRUNCATE,
    )

    copy_job = client.copy_table(
        SHAKESPEARE_TABLE,
        destination,
        job_config=job_config,
        location=DEFAULT_LOCATION,
    )
    log_info("Started copy job %s", copy_job.job_id)
    copy_job.result()  # Wait for the job to complete.

    table = client.get_table(destination)
    print(f"Copied {table.num_rows} rows to {destination}.")
    return table


def table_insert_rows(
    project_id: str,
    dataset_id: str,
    table_id: str,
    rows: list[dict[str, Any]] | None = None,
    *,
    client: bigquery.Client | None = None,
) -> None:
    """Stream rows into an existing table.

    Raises `BigQuerySnippetInsertRowsError` if any row is rejected. The call is not atomic:
    rows without errors may still have been inserted.
    """
    client = client or get_bigquery_client(project_id)

    full_table_id = f"{project_id}.{dataset_id}.{table_id}"
    rows_to_insert = DEFAULT_INSERT_ROWS if rows is None else rows
    if not rows_to_insert:
        raise exc.BigQuerySnippetInputError(
            message="At least one row is required.",
        )

    log_info("Streaming %d rows into %s", len(rows_to_insert), full_table_id)
    errors = client.insert_rows_json(full_table_id, rows_to_insert)  # Make an API request.
    if errors:
        raise exc.BigQuerySnippetInsertRowsError(
            table_id=full_table_id,
            row_errors=list(errors),
        )

    print("New rows have been added.")
