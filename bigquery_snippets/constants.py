# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Constants shared across the snippets and their test harness."""

from __future__ import annotations


PROJECT_ID_ENV_VAR = "GOOGLE_PROJECT_ID"
"""Environment variable holding the Google Cloud project to run snippets against."""

FALLBACK_PROJECT_ID_ENV_VAR = "GOOGLE_CLOUD_PROJECT"
"""Secondary project variable, as set by `gcloud` and most Google Cloud runtimes."""

CREDENTIALS_PATH_ENV_VAR = "BIGQUERY_CREDENTIALS_PATH"
"""Optional path to a service account key file.

If not set, application default credentials are used.
"""

DEFAULT_LOCATION = "US"
"""Location for new datasets. The public sample datasets also live in `US`."""

SHAKESPEARE_TABLE = "bigquery-public-data.samples.shakespeare"
"""Public table used by the browse, copy and extract snippets."""

USA_NAMES_TABLE = "bigquery-public-data.usa_names.usa_1910_2013"
"""Public table used by the query snippets."""

USA_NAMES_LEGACY_TABLE = "[bigquery-public-data:usa_names.usa_1910_2013]"
"""The same table, in legacy SQL notation."""

US_STATES_URI_PREFIX = "gs://cloud-samples-data/bigquery/us-states/us-states"
"""Prefix of the public US states sample files. Append `.csv`, `.json` or `.orc`."""

US_STATES_TABLE_ID = "us_states"
"""Table ID written by the GCS load snippets."""

US_STATES_ROW_COUNT = 50

DEFAULT_NEW_DATASET_ID = "your_new_dataset_id"
DEFAULT_NEW_TABLE_ID = "your_table_id"
DEFAULT_COPY_TABLE_ID = "destination_table"

BROWSE_PAGE_SIZE = 10
QUERY_ROW_LIMIT = 100

TEMP_RESOURCE_PREFIX = "test_deleteme"
"""Prefix for ephemeral test resources, so stale ones are easy to spot and delete."""
