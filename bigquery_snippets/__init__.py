# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""***Small, runnable examples of the BigQuery and Cloud Storage Python clients.***

Each snippet is a plain function which makes one or two API calls and prints the result.

# Getting Started

```python
import bigquery_snippets as bqs

bqs.browse_table("my-project")
bqs.query("my-project")
```

Every snippet takes the project ID as its first argument and accepts an optional, keyword-only
`client`. If no client is given, one is created from the environment. See
`bigquery_snippets.config` for how the project and credentials are resolved.

## Temporary Resources

`TempResourceManager` creates randomly-named datasets, tables and buckets, and deletes them again
on cleanup. The integration tests use it to run every snippet against a live project.

## Command Line

All snippets are also available from the `bq-snippets` CLI. Run `bq-snippets --help` for details.
"""

from __future__ import annotations

from bigquery_snippets import (
    config,
    constants,
    datasets,
    exceptions,
    extracting,
    loading,
    queries,
    resources,
    tables,
)
from bigquery_snippets.config import SnippetConfig, get_bigquery_client, get_storage_client
from bigquery_snippets.datasets import create_dataset, delete_dataset, list_datasets
from bigquery_snippets.extracting import extract_table, extract_table_json
from bigquery_snippets.loading import (
    load_from_file,
    load_table_gcs_csv,
    load_table_gcs_json,
    load_table_gcs_orc,
    load_table_gcs_orc_truncate,
)
from bigquery_snippets.queries import query, query_legacy
from bigquery_snippets.resources import TempResourceManager
from bigquery_snippets.tables import (
    browse_table,
    copy_table,
    create_table,
    delete_table,
    list_tables,
    table_insert_rows,
)


__all__ = [
    # Modules
    "config",
    "constants",
    "datasets",
    "exceptions",
    "extracting",
    "loading",
    "queries",
    "resources",
    "tables",
    # Factories
    "get_bigquery_client",
    "get_storage_client",
    # Classes
    "SnippetConfig",
    "TempResourceManager",
    # Snippets
    "browse_table",
    "copy_table",
    "create_dataset",
    "create_table",
    "delete_dataset",
    "delete_table",
    "extract_table",
    "extract_table_json",
    "list_datasets",
    "list_tables",
    "load_from_file",
    "load_table_gcs_csv",
    "load_table_gcs_json",
    "load_table_gcs_orc",
    "load_table_gcs_orc_truncate",
    "query",
    "query_legacy",
    "table_insert_rows",
]

__docformat__ = "google"
