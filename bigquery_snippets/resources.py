# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Ephemeral cloud resources for running snippets against a real project.

`TempResourceManager` creates randomly-named datasets, tables and buckets, remembers them, and
deletes them again in `cleanup()`. Cleanup is best-effort: a resource that is already gone is
skipped. Any other failure, including transport errors and client-side refusals, is logged and
reported as a `BigQuerySnippetCleanupWarning` instead of being raised. Nothing is retried.

## Usage Example

```python
from bigquery_snippets.resources import TempResourceManager

with TempResourceManager("my-project") as resources:
    dataset_id = resources.create_temp_dataset()
    table_id = resources.create_temp_empty_table(dataset_id)
    ...
# All datasets (and their tables) are deleted here.
```
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

from google.api_core.exceptions import NotFound
from google.cloud import bigquery

from bigquery_snippets._util import text_util
from bigquery_snippets.config import SnippetConfig
from bigquery_snippets.constants import DEFAULT_LOCATION, US_STATES_TABLE_ID
from bigquery_snippets.loading import load_table_gcs_csv
from bigquery_snippets.logging import log_info, log_warning
from bigquery_snippets.warnings import BigQuerySnippetCleanupWarning


if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from google.cloud import storage


class TempResourceManager:
    """Creates and tracks temporary datasets, tables and buckets for one test."""

    def __init__(
        self,
        project_id: str,
        *,
        bigquery_client: bigquery.Client | None = None,
        storage_client: storage.Client | None = None,
        location: str = DEFAULT_LOCATION,
    ) -> None:
        """Initialize the manager. Clients are created lazily if not provided."""
        self.project_id = project_id
        self.location = location
        self._bigquery_client = bigquery_client
        self._storage_client = storage_client
        self.dataset_ids: list[str] = []
        self.bucket_names: list[str] = []

    @property
    def bigquery_client(self) -> bigquery.Client:
        if self._bigquery_client is None:
            self._bigquery_client = self._get_config().get_bigquery_client()
        return self._bigquery_client

    @property
    def storage_client(self) -> storage.Client:
        if self._storage_client is None:
            self._storage_client = self._get_config().get_storage_client()
        return self._storage_client

    def _get_config(self) -> SnippetConfig:
        config = SnippetConfig.from_env(self.project_id)
        config.location = self.location
        return config

    def track_dataset(self, dataset_id: str) -> None:
        """Register a dataset created elsewhere, so that `cleanup()` deletes it."""
        if dataset_id not in self.dataset_ids:
            self.dataset_ids.append(dataset_id)

    def track_bucket(self, bucket_name: str) -> None:
        """Register a bucket created elsewhere, so that `cleanup()` deletes it."""
        if bucket_name not in self.bucket_names:
            self.bucket_names.append(bucket_name)

    def create_temp_dataset(self) -> str:
        """Create an empty, randomly-named dataset and return its ID."""
        dataset_id = text_util.generate_random_name()
        dataset = bigquery.Dataset(f"{self.project_id}.{dataset_id}")
        dataset.location = self.location

        log_info("Creating temp dataset %s", dataset_id)
        self.bigquery_client.create_dataset(dataset)
        self.track_dataset(dataset_id)
        return dataset_id

    def create_temp_empty_table(self, dataset_id: str) -> str:
        """Create a randomly-named table with no schema and return its ID.

        The table is deleted along with its dataset.
        """
        table_id = text_util.generate_random_name()

        log_info("Creating temp table %s.%s", dataset_id, table_id)
        self.bigquery_client.create_table(f"{self.project_id}.{dataset_id}.{table_id}")
        return table_id

    def create_temp_us_states_table(self, dataset_id: str) -> str:
        """Load the US states sample into the dataset and return the new table's ID."""
        load_table_gcs_csv(self.project_id, dataset_id, client=self.bigquery_client)
        return US_STATES_TABLE_ID

    def create_temp_bucket(self) -> str:
        """Create a randomly-named bucket and return its name."""
        bucket_name = text_util.generate_bucket_name()

        log_info("Creating temp bucket %s", bucket_name)
        self.storage_client.create_bucket(bucket_name, location=self.location)
        self.track_bucket(bucket_name)
        return bucket_name

    def cleanup(self) -> None:
        """Delete all tracked datasets (with their tables) and buckets (with their objects)."""
        for dataset_id in self.dataset_ids:
            self._delete_best_effort(
                f"dataset {dataset_id}",
                lambda dataset_id=dataset_id: self.bigquery_client.delete_dataset(
                    f"{self.project_id}.{dataset_id}",
                    delete_contents=True,
                ),
            )
        self.dataset_ids.clear()

        for bucket_name in self.bucket_names:
            self._delete_best_effort(
                f"bucket {bucket_name}",
                lambda bucket_name=bucket_name: self.storage_client.bucket(bucket_name).delete(
                    force=True,
                ),
            )
        self.bucket_names.clear()

    @staticmethod
    def _delete_best_effort(description: str, delete_fn: Callable[[], object]) -> None:
        try:
            delete_fn()
        except NotFound:
            log_info("Skipping %s: already deleted.", description)
        except Exception as ex:
            log_warning("Failed to delete %s: %s", description, ex)
            warnings.warn(
                f"Failed to delete {description}: {ex}",
                category=BigQuerySnippetCleanupWarning,
                stacklevel=3,
            )
        else:
            log_info("Deleted %s.", description)

    def __enter__(self) -> TempResourceManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.cleanup()
