# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Snippets for loading data into tables, from a local file or from Cloud Storage.

Each load snippet waits for its job to finish, then prints the destination row count:

```
Loaded 50 rows into my-project:my_dataset.us_states.
```

The row count is always the first number printed.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from google.cloud import bigquery

from bigquery_snippets import exceptions as exc
from bigquery_snippets.config import get_bigquery_client
from bigquery_snippets.constants import US_STATES_TABLE_ID, US_STATES_URI_PREFIX
from bigquery_snippets.logging import log_info


if TYPE_CHECKING:
    from google.cloud.bigquery import LoadJob, Table


US_STATES_SCHEMA = [
    bigquery.SchemaField("name", "STRING"),
    bigquery.SchemaField("post_abbr", "STRING"),
]


def _finish_load_job(
    client: bigquery.Client,
    load_job: LoadJob,
    destination: str,
) -> Table:
    log_info("Started load job %s into %s", load_job.job_id, destination)
    load_job.result()  # Wait for the job to complete.

    table = client.get_table(destination)
    print(f"Loaded {table.num_rows} rows into {table.full_table_id}.")
    return table


def load_from_file(
    project_id: str,
    dataset_id: str,
    table_id: str,
    file_path: str | Path,
    *,
    client: bigquery.Client | None = None,
) -> Table:
    """Upload a local CSV file with a header row, letting BigQuery detect the schema."""
    file_path = Path(file_path)
    if not file_path.is_file():
        raise exc.BigQuerySnippetInputError(
            message="The file to load does not exist.",
            input_value=str(file_path),
        )

    client = client or get_bigquery_client(project_id)

    destination = f"{project_id}.{dataset_id}.{table_id}"
    job_config = bigquery.LoadJobConfig(
        source_format=bigquery.SourceFormat.CSV,
        skip_leading_rows=1,
        autodetect=True,
    )

    with file_path.open("rb") as source_file:
        load_job = client.load_table_from_file(
            source_file,
            destination,
            job_config=job_config,
        )

    return _finish_load_job(client, load_job, destination)


def _load_table_gcs(
    project_id: str,
    dataset_id: str,
    table_id: str,
    source_uri: str,
    job_config: bigquery.LoadJobConfig,
    client: bigquery.Client | None,
) -> Table:
    client = client or get_bigquery_client(project_id)

    destination = f"{project_id}.{dataset_id}.{table_id}"
    load_job = client.load_table_from_uri(
        source_uri,
        destination,
        job_config=job_config,
    )
    return _finish_load_job(client, load_job, destination)


def load_table_gcs_csv(
    project_id: str,
    dataset_id: str,
    table_id: str = US_STATES_TABLE_ID,
    *,
    client: bigquery.Client | None = None,
) -> Table:
    """Load the US states CSV file from Cloud Storage."""
    job_config = bigquery.LoadJobConfig(
        schema=US_STATES_SCHEMA,
        skip_leading_rows=1,
        source_format=bigquery.SourceFormat.CSV,
    )
    return _load_table_gcs(
        project_id,
        dataset_id,
        table_id,
        f"{US_STATES_URI_PREFIX}.csv",
        job_config,
        client,
    )


def load_table_gcs_json(
    project_id: str,
    dataset_id: str,
    table_id: str = US_STATES_TABLE_ID,
    *,
    client: bigquery.Client | None = None,
) -> Table:
    """Load the US states newline-delimited JSON file from Cloud Storage."""
    job_config = bigquery.LoadJobConfig(
        schema=US_STATES_SCHEMA,
        source_format=bigquery.SourceFormat.NEWLINE_DELIMITED_JSON,
    )
    return _load_table_gcs(
        project_id,
        dataset_id,
        table_id,
        f"{US_STATES_URI_PREFIX}.json",
        job_config,
        client,
    )


def load_table_gcs_orc(
    project_id: str,
    dataset_id: str,
    table_id: str = US_STATES_TABLE_ID,
    *,
    client: bigquery.Client | None = None,
) -> Table:
    """Load the US states ORC file from Cloud Storage. ORC files carry their own schema."""
    job_config = bigquery.LoadJobConfig(
        source_format=bigquery.SourceFormat.ORC,
    )
    return _load_table_gcs(
        project_id,
        dataset_id,
        table_id,
        f"{US_STATES_URI_PREFIX}.orc",
        job_config,
        client,
    )


def load_table_gcs_orc_truncate(
    project_id: str,
    dataset_id: str,
    table_id: str,
    *,
    client: bigquery.Client | None = None,
) -> Table:
    """Load the US states ORC file, replacing any rows already in the table."""
    job_config = bigquery.LoadJobConfig(
        source_format=bigquery.SourceFormat.ORC,
        write_disposition=bigquery.WriteDisposition.WRITE_TRUNCATE,
    )
    return _load_table_gcs(
        project_id,
        dataset_id,
        table_id,
        f"{US_STATES_URI_PREFIX}.orc",
        job_config,
        client,
    )
