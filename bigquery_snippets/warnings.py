# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Warnings for the BigQuery snippets library."""

from __future__ import annotations


class BigQuerySnippetCleanupWarning(Warning):
    """Warning for a temporary resource that could not be deleted.

    Cleanup is best-effort, so failures are reported but never raised. Users can silence this
    warning by running:
    > warnings.filterwarnings(
    >     "ignore", category=bigquery_snippets.warnings.BigQuerySnippetCleanupWarning
    > )
    """
