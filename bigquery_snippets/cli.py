# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""CLI for the BigQuery snippets.

After installing the package, the CLI can be invoked with the `bq-snippets` executable:

```bash
python -m bigquery_snippets.cli --help
bq-snippets --help
```

The project defaults to the `GOOGLE_PROJECT_ID` environment variable. Examples:

```bash
bq-snippets browse-table
bq-snippets query --legacy
bq-snippets create-dataset --dataset-id=my_dataset
bq-snippets load-gcs --dataset-id=my_dataset --format=orc --truncate
bq-snippets extract-table --bucket=my-bucket --format=json
```
"""

from __future__ import annotations

import click

from bigquery_snippets import datasets, extracting, loading, queries, tables
from bigquery_snippets.config import resolve_project_id
from bigquery_snippets.constants import (
    BROWSE_PAGE_SIZE,
    DEFAULT_COPY_TABLE_ID,
    DEFAULT_NEW_DATASET_ID,
    DEFAULT_NEW_TABLE_ID,
    PROJECT_ID_ENV_VAR,
    US_STATES_TABLE_ID,
)
from bigquery_snippets.exceptions import BigQuerySnippetInputError


PROJECT_ID_HELP = f"The Google Cloud project ID. Defaults to `{PROJECT_ID_ENV_VAR}`."

project_id_option = click.option(
    "--project-id",
    type=str,
    envvar=PROJECT_ID_ENV_VAR,
    help=PROJECT_ID_HELP,
)
dataset_id_option = click.option(
    "--dataset-id",
    type=str,
    required=True,
    help="The dataset ID.",
)


@click.command(help="Print the first page of the public Shakespeare table.")
@project_id_option
@click.option("--page-size", type=int, default=BROWSE_PAGE_SIZE, show_default=True)
def browse_table(project_id: str | None, page_size: int) -> None:
    tables.browse_table(resolve_project_id(project_id), page_size=page_size)


@click.command(help="Copy the public Shakespeare table into a dataset.")
@project_id_option
@dataset_id_option
@click.option("--table-id", type=str, default=DEFAULT_COPY_TABLE_ID, show_default=True)
def copy_table(project_id: str | None, dataset_id: str, table_id: str) -> None:
    tables.copy_table(resolve_project_id(project_id), dataset_id, table_id)


@click.command(help="Create a new, empty dataset.")
@project_id_option
@click.option("--dataset-id", type=str, default=DEFAULT_NEW_DATASET_ID, show_default=True)
def create_dataset(project_id: str | None, dataset_id: str) -> None:
    datasets.create_dataset(resolve_project_id(project_id), dataset_id)


@click.command(help="Create a table with a sample schema.")
@project_id_option
@dataset_id_option
@click.option("--table-id", type=str, default=DEFAULT_NEW_TABLE_ID, show_default=True)
def create_table(project_id: str | None, dataset_id: str, table_id: str) -> None:
    tables.create_table(resolve_project_id(project_id), dataset_id, table_id)


@click.command(help="Delete an empty dataset and a dataset which still has tables.")
@project_id_option
@dataset_id_option
@click.option(
    "--non-empty-dataset-id",
    type=str,
    required=True,
    help="A dataset to delete along with all of its tables.",
)
def delete_dataset(project_id: str | None, dataset_id: str, non_empty_dataset_id: str) -> None:
    datasets.delete_dataset(resolve_project_id(project_id), dataset_id, non_empty_dataset_id)


@click.command(help="Delete a table.")
@project_id_option
@dataset_id_option
@click.option("--table-id", type=str, required=True)
def delete_table(project_id: str | None, dataset_id: str, table_id: str) -> None:
    tables.delete_table(resolve_project_id(project_id), dataset_id, table_id)


@click.command(help="Export the public Shakespeare table to a Cloud Storage bucket.")
@project_id_option
@click.option("--bucket", type=str, required=True, help="The bucket name, without `gs://`.")
@click.option(
    "--format",
    "file_format",
    type=click.Choice(["csv", "json"]),
    default="csv",
    show_default=True,
)
def extract_table(project_id: str | None, bucket: str, file_format: str) -> None:
    if file_format == "json":
        extracting.extract_table_json(resolve_project_id(project_id), bucket)
        return

    extracting.extract_table(resolve_project_id(project_id), bucket)


@click.command(help="List the datasets in the project.")
@project_id_option
def list_datasets(project_id: str | None) -> None:
    datasets.list_datasets(resolve_project_id(project_id))


@click.command(help="List the tables in a dataset.")
@project_id_option
@dataset_id_option
def list_tables(project_id: str | None, dataset_id: str) -> None:
    tables.list_tables(resolve_project_id(project_id), dataset_id)


@click.command(help="Load a local CSV file (with a header row) into a table.")
@project_id_option
@dataset_id_option
@click.option("--table-id", type=str, required=True)
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
def load_file(project_id: str | None, dataset_id: str, table_id: str, file_path: str) -> None:
    loading.load_from_file(resolve_project_id(project_id), dataset_id, table_id, file_path)


@click.command(help="Load the US states sample from Cloud Storage into a table.")
@project_id_option
@dataset_id_option
@click.option("--table-id", type=str, default=US_STATES_TABLE_ID, show_default=True)
@click.option(
    "--format",
    "file_format",
    type=click.Choice(["csv", "json", "orc"]),
    default="csv",
    show_default=True,
)
@click.option(
    "--truncate",
    is_flag=True,
    default=False,
    help="Replace existing rows. Only supported for ORC.",
)
def load_gcs(
    project_id: str | None,
    dataset_id: str,
    table_id: str,
    file_format: str,
    *,
    truncate: bool,
) -> None:
    resolved_project_id = resolve_project_id(project_id)
    if truncate and file_format != "orc":
        raise BigQuerySnippetInputError(
            message="The `--truncate` flag is only supported with `--format=orc`.",
            input_value=file_format,
        )

    if truncate:
        loading.load_table_gcs_orc_truncate(resolved_project_id, dataset_id, table_id)
        return

    load_fn = {
        "csv": loading.load_table_gcs_csv,
        "json": loading.load_table_gcs_json,
        "orc": loading.load_table_gcs_orc,
    }[file_format]
    load_fn(resolved_project_id, dataset_id, table_id)


@click.command(help="Run a sample query against the public USA names table.")
@project_id_option
@click.option("--legacy", is_flag=True, default=False, help="Use legacy SQL.")
def query(project_id: str | None, *, legacy: bool) -> None:
    if legacy:
        queries.query_legacy(resolve_project_id(project_id))
        return

    queries.query(resolve_project_id(project_id))


@click.command(help="Stream two sample rows into a US states table.")
@project_id_option
@dataset_id_option
@click.option("--table-id", type=str, default=US_STATES_TABLE_ID, show_default=True)
def insert_rows(project_id: str | None, dataset_id: str, table_id: str) -> None:
    tables.table_insert_rows(resolve_project_id(project_id), dataset_id, table_id)


@click.group()
def cli() -> None:
    """BigQuery snippets CLI."""
    pass


cli.add_command(browse_table)
cli.add_command(copy_table)
cli.add_command(create_dataset)
cli.add_command(create_table)
cli.add_command(delete_dataset)
cli.add_command(delete_table)
cli.add_command(extract_table)
cli.add_command(list_datasets)
cli.add_command(list_tables)
cli.add_command(load_file)
cli.add_command(load_gcs)
cli.add_command(query)
cli.add_command(insert_rows)

if __name__ == "__main__":
    cli()
