# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Snippets for creating, deleting and listing datasets.

## Usage Example

```python
from bigquery_snippets.datasets import create_dataset, list_datasets

dataset = create_dataset("my-project", "my_dataset")
list_datasets("my-project")
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from google.cloud import bigquery

from bigquery_snippets.config import get_bigquery_client
from bigquery_snippets.constants import DEFAULT_LOCATION, DEFAULT_NEW_DATASET_ID
from bigquery_snippets.logging import log_info


if TYPE_CHECKING:
    from google.cloud.bigquery import Dataset


def create_dataset(
    project_id: str,
    dataset_id: str = DEFAULT_NEW_DATASET_ID,
    *,
    location: str = DEFAULT_LOCATION,
    client: bigquery.Client | None = None,
) -> Dataset:
    """Create a new, empty dataset and return it."""
    client = client or get_bigquery_client(project_id)

    dataset = bigquery.Dataset(f"{project_id}.{dataset_id}")
    dataset.location = location

    log_info("Creating dataset %s.%s in %s", project_id, dataset_id, location)
    dataset = client.create_dataset(dataset, timeout=30)  # Make an API request.
    print(f"Created dataset {dataset.project}.{dataset.dataset_id}")
    return dataset


def delete_dataset(
    project_id: str,
    dataset_id: str,
    non_empty_dataset_id: str,
    *,
    client: bigquery.Client | None = None,
) -> None:
    """Delete an empty dataset, then a dataset which still contains tables.

    Deleting a dataset that has tables fails unless `delete_contents` is set.
    """
    client = client or get_bigquery_client(project_id)

    log_info("Deleting empty dataset %s.%s", project_id, dataset_id)
    client.delete_dataset(f"{project_id}.{dataset_id}")
    print(f"Dataset {dataset_id} deleted.")

    log_info("Deleting non-empty dataset %s.%s", project_id, non_empty_dataset_id)
    client.delete_dataset(f"{project_id}.{non_empty_dataset_id}", delete_contents=True)
    print(f"Dataset {non_empty_dataset_id} deleted.")


def list_datasets(
    project_id: str,
    *,
    client: bigquery.Client | None = None,
) -> list[str]:
    """Print the ID of every dataset in the project, and return them."""
    client = client or get_bigquery_client(project_id)

    dataset_ids = [dataset.dataset_id for dataset in client.list_datasets(project=project_id)]
    if not dataset_ids:
        print(f"{project_id} does not contain any datasets.")
        return dataset_ids

    for dataset_id in dataset_ids:
        print(dataset_id)

    return dataset_ids
