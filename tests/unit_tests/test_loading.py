# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Unit tests for the load snippets, using a mock BigQuery client."""

from __future__ import annotations

import re
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from bigquery_snippets import exceptions as exc
from bigquery_snippets import loading


@pytest.fixture
def client() -> MagicMock:
    mock_client = MagicMock()
    mock_client.get_table.return_value = SimpleNamespace(
        num_rows=50,
        full_table_id="my-project:my_dataset.us_states",
    )
    return mock_client


def first_number(text: str) -> int:
    return int(re.search(r"\d+", text).group())


def test_load_from_file(client: MagicMock, sample_csv_path, capsys) -> None:
    client.get_table.return_value = SimpleNamespace(
        num_rows=4,
        full_table_id="my-project:my_dataset.sample",
    )

    table = loading.load_from_file(
        "my-project", "my_dataset", "sample", sample_csv_path, client=client
    )

    assert table.num_rows == 4
    args, kwargs = client.load_table_from_file.call_args
    assert args[1] == "my-project.my_dataset.sample"
    job_config = kwargs["job_config"]
    assert job_config.source_format == "CSV"
    assert job_config.skip_leading_rows == 1
    assert job_config.autodetect is True
    client.load_table_from_file.return_value.result.assert_called_once_with()
    out, _ = capsys.readouterr()
    assert first_number(out) == 4


def test_load_from_missing_file(client: MagicMock, tmp_path) -> None:
    with pytest.raises(exc.BigQuerySnippetInputError):
        loading.load_from_file(
            "my-project", "my_dataset", "sample", tmp_path / "missing.csv", client=client
        )

    client.load_table_from_file.assert_not_called()


@pytest.mark.parametrize(
    "load_fn, expected_uri, expected_format",
    [
        pytest.param(
            loading.load_table_gcs_csv,
            "gs://cloud-samples-data/bigquery/us-states/us-states.csv",
            "CSV",
            id="csv",
        ),
        pytest.param(
            loading.load_table_gcs_json,
            "gs://cloud-samples-data/bigquery/us-states/us-states.json",
            "NEWLINE_DELIMITED_JSON",
            id="json",
        ),
        pytest.param(
            loading.load_table_gcs_orc,
            "gs://cloud-samples-data/bigquery/us-states/us-states.orc",
            "ORC",
            id="orc",
        ),
    ],
)
def test_load_table_gcs(
    client: MagicMock,
    capsys,
    load_fn,
    expected_uri: str,
    expected_format: str,
) -> None:
    load_fn("my-project", "my_dataset", client=client)

    args, kwargs = client.load_table_from_uri.call_args
    assert args == (expected_uri, "my-project.my_dataset.us_states")
    assert kwargs["job_config"].source_format == expected_format
    assert kwargs["job_config"].write_disposition is None
    client.get_table.assert_called_once_with("my-project.my_dataset.us_states")
    out, _ = capsys.readouterr()
    assert first_number(out) == 50


def test_load_table_gcs_csv_schema(client: MagicMock) -> None:
    loading.load_table_gcs_csv("my-project", "my_dataset", client=client)

    job_config = client.load_table_from_uri.call_args.kwargs["job_config"]
    assert [field.name for field in job_config.schema] == ["name", "post_abbr"]
    assert job_config.skip_leading_rows == 1


def test_load_table_gcs_orc_truncate(client: MagicMock, capsys) -> None:
    loading.load_table_gcs_orc_truncate("my-project", "my_dataset", "us_states", client=client)

    job_config = client.load_table_from_uri.call_args.kwargs["job_config"]
    assert job_config.source_format == "ORC"
    assert job_config.write_disposition == "WRITE_TRUNCATE"
    out, _ = capsys.readouterr()
    assert out.strip() == "Loaded 50 rows into my-project:my_dataset.us_states."
