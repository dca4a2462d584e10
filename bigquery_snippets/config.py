# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Configuration and client construction for the snippets.

The project ID is resolved in this order:

1. The value passed explicitly by the caller.
2. The `GOOGLE_PROJECT_ID` environment variable.
3. A `GOOGLE_PROJECT_ID` entry in a `.env` file in the working directory.
4. The `GOOGLE_CLOUD_PROJECT` environment variable.

Credentials come from the service account key file at `BIGQUERY_CREDENTIALS_PATH` if set, and
otherwise from application default credentials.
"""

from __future__ import annotations

import os
from pathlib import Path

import google.auth
from dotenv import dotenv_values, find_dotenv
from google.cloud import bigquery, storage
from google.oauth2 import service_account
from pydantic import BaseModel

from bigquery_snippets import exceptions as exc
from bigquery_snippets.constants import (
    CREDENTIALS_PATH_ENV_VAR,
    DEFAULT_LOCATION,
    FALLBACK_PROJECT_ID_ENV_VAR,
    PROJECT_ID_ENV_VAR,
)


def _get_dotenv_value(name: str, dotenv_path: Path | None = None) -> str | None:
    try:
        dotenv_vars: dict[str, str | None] = dotenv_values(
            dotenv_path=dotenv_path or find_dotenv(usecwd=True),
        )
    except Exception:
        # Can't locate or parse a .env file
        return None

    return dotenv_vars.get(name) or None


def resolve_project_id(project_id: str | None = None) -> str:
    """Return the project ID to use, raising if none is configured."""
    if project_id:
        return project_id

    resolved = (
        os.environ.get(PROJECT_ID_ENV_VAR)
        or _get_dotenv_value(PROJECT_ID_ENV_VAR)
        or os.environ.get(FALLBACK_PROJECT_ID_ENV_VAR)
    )
    if not resolved:
        raise exc.BigQuerySnippetConfigError(
            message="No Google Cloud project ID is configured.",
            variable_name=PROJECT_ID_ENV_VAR,
        )

    return resolved


def resolve_credentials_path() -> str | None:
    """Return the service account key path from the environment, if any."""
    return os.environ.get(CREDENTIALS_PATH_ENV_VAR) or None


class SnippetConfig(BaseModel):
    """Connection settings shared by all snippets."""

    project_id: str
    """The Google Cloud project that owns new resources and is billed for jobs."""

    location: str = DEFAULT_LOCATION
    """The location for new datasets and for jobs."""

    credentials_path: str | None = None
    """The path to the credentials file to use.
    If not passed, falls back to the default inferred from the environment."""

    @classmethod
    def from_env(cls, project_id: str | None = None) -> SnippetConfig:
        """Build a config from explicit values and the environment."""
        return cls(
            project_id=resolve_project_id(project_id),
            credentials_path=resolve_credentials_path(),
        )

    def get_credentials(self) -> google.auth.credentials.Credentials:
        """Return Google credentials for the configured service account, or the default ones."""
        if self.credentials_path:
            return service_account.Credentials.from_service_account_file(self.credentials_path)

        credentials, _ = google.auth.default()
        return credentials

    def get_bigquery_client(self) -> bigquery.Client:
        """Return a BigQuery python client."""
        return bigquery.Client(
            project=self.project_id,
            credentials=self.get_credentials(),
            location=self.location,
        )

    def get_storage_client(self) -> storage.Client:
        """Return a Cloud Storage python client."""
        return storage.Client(
            project=self.project_id,
            credentials=self.get_credentials(),
        )


def get_bigquery_client(project_id: str | None = None) -> bigquery.Client:
    """Return a BigQuery client for the given (or configured) project."""
    return SnippetConfig.from_env(project_id).get_bigquery_client()


def get_storage_client(project_id: str | None = None) -> storage.Client:
    """Return a Cloud Storage client for the given (or configured) project."""
    return SnippetConfig.from_env(project_id).get_storage_client()
