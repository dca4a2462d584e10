# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Unit tests for project ID resolution and client construction."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from bigquery_snippets import exceptions as exc
from bigquery_snippets.config import SnippetConfig, resolve_project_id


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without any project variables, from a directory with no `.env` file."""
    monkeypatch.delenv("GOOGLE_PROJECT_ID", raising=False)
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
    monkeypatch.delenv("BIGQUERY_CREDENTIALS_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_explicit_project_id_wins(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_PROJECT_ID", "from-env")
    assert resolve_project_id("explicit") == "explicit"


def test_project_id_from_env(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_PROJECT_ID", "from-env")
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "from-gcloud")
    assert resolve_project_id() == "from-env"


def test_project_id_from_dotenv(clean_env) -> None:
    (clean_env / ".env").write_text("GOOGLE_PROJECT_ID=from-dotenv\n", encoding="utf-8")
    assert resolve_project_id() == "from-dotenv"


def test_project_id_fallback_variable(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "from-gcloud")
    assert resolve_project_id() == "from-gcloud"


def test_missing_project_id_raises(clean_env) -> None:
    with pytest.raises(exc.BigQuerySnippetConfigError) as ex_info:
        resolve_project_id()

    assert ex_info.value.variable_name == "GOOGLE_PROJECT_ID"


def test_config_from_env(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("BIGQUERY_CREDENTIALS_PATH", "/path/to/key.json")
    config = SnippetConfig.from_env("my-project")
    assert config.project_id == "my-project"
    assert config.location == "US"
    assert config.credentials_path == "/path/to/key.json"


def test_bigquery_client_uses_default_credentials() -> None:
    credentials = MagicMock()
    with (
        patch("google.auth.default", return_value=(credentials, "ignored")),
        patch("bigquery_snippets.config.bigquery.Client") as client_cls,
    ):
        SnippetConfig(project_id="my-project").get_bigquery_client()

    client_cls.assert_called_once_with(
        project="my-project",
        credentials=credentials,
        location="US",
    )


def test_storage_client_uses_service_account_file() -> None:
    credentials = MagicMock()
    with (
        patch(
            "bigquery_snippets.config.service_account.Credentials.from_service_account_file",
            return_value=credentials,
        ) as from_file,
        patch("bigquery_snippets.config.storage.Client") as client_cls,
    ):
        SnippetConfig(
            project_id="my-project",
            credentials_path="/path/to/key.json",
        ).get_storage_client()

    from_file.assert_called_once_with("/path/to/key.json")
    client_cls.assert_called_once_with(project="my-project", credentials=credentials)
