# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Utility functions for generating resource names."""

from __future__ import annotations

import ulid

from bigquery_snippets.constants import TEMP_RESOURCE_PREFIX


def generate_ulid() -> str:
    """Generate a new ULID."""
    return str(ulid.ULID())


def generate_random_suffix() -> str:
    """Generate a random suffix for use in temporary names.

    By default, this function generates a ULID and returns a 9-character string
    which will be monotonically sortable. It is not guaranteed to be unique but
    is sufficient for names scoped to a single project, like datasets and tables.
    """
    ulid_str = generate_ulid().lower()
    return ulid_str[:6] + ulid_str[-3:]


def generate_random_name(prefix: str = TEMP_RESOURCE_PREFIX) -> str:
    """Return a random dataset or table name, e.g. `test_deleteme_01hx4qabc`."""
    return f"{prefix}_{generate_random_suffix()}"


def generate_bucket_name(prefix: str = TEMP_RESOURCE_PREFIX) -> str:
    """Return a random bucket name.

    Bucket names are global across all of Cloud Storage, so the full ULID is used rather than the
    short suffix. Underscores are swapped for dashes to keep the name DNS-compatible.
    """
    return f"{prefix.replace('_', '-')}-{generate_ulid().lower()}"
