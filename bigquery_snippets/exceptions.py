# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Exceptions raised by the BigQuery snippets library.

Errors raised by the Google Cloud client libraries (`google.api_core.exceptions.*`) are not
wrapped. They propagate unchanged, so callers can catch `NotFound`, `Conflict`, etc. directly.
The classes here cover the few failures that originate in this library.

## Exception Types

- `BigQuerySnippetError`: Base class for all library errors.
- `BigQuerySnippetConfigError`: Required configuration (like the project ID) is missing.
- `BigQuerySnippetInputError`: An argument did not pass validation.
- `BigQuerySnippetInsertRowsError`: A streaming insert reported per-row errors.

## Example

```python
from bigquery_snippets import exceptions as exc

try:
    table_insert_rows(project_id, dataset_id, table_id)
except exc.BigQuerySnippetInsertRowsError as ex:
    print(ex.row_errors)
```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


BIGQUERY_DOCS_URL = "https://cloud.google.com/bigquery/docs"
AUTH_DOCS_URL = "https://cloud.google.com/docs/authentication/provide-credentials-adc"
STREAMING_DOCS_URL = "https://cloud.google.com/bigquery/docs/streaming-data-into-bigquery"

VERTICAL_SEPARATOR = "\n" + "-" * 60


@dataclass
class BigQuerySnippetError(Exception):
    """An error occurred while running a BigQuery snippet."""

    guidance: str | None = None
    help_url: str | None = None
    context: dict[str, Any] | None = None
    message: str | None = None
    original_exception: Exception | None = None

    def get_message(self) -> str:
        """Return the best description for the exception.

        We resolve the following in order:
        1. The message sent to the exception constructor (if provided).
        2. The first line of the class's docstring.
        """
        if self.message:
            return self.message

        return self.__doc__.split("\n")[0] if self.__doc__ else ""

    def __str__(self) -> str:
        """Return a string representation of the exception."""
        special_properties = [
            "message",
            "guidance",
            "help_url",
            "context",
            "original_exception",
        ]
        display_properties = {
            k: v
            for k, v in self.__dict__.items()
            if k not in special_properties and not k.startswith("_") and v is not None
        }
        display_properties.update(self.context or {})
        context_str = "\n    ".join(
            f"{str(k).replace('_', ' ').title()}: {v!r}" for k, v in display_properties.items()
        )
        exception_str = (
            f"{self.get_message()} ({self.__class__.__name__})"
            + VERTICAL_SEPARATOR
            + f"\n{self.__class__.__name__}: {self.get_message()}"
        )

        if self.guidance:
            exception_str += f"\n    {self.guidance}"

        if self.help_url:
            exception_str += f"\n    More info: {self.help_url}"

        if context_str:
            exception_str += "\n    " + context_str

        if self.original_exception:
            exception_str += VERTICAL_SEPARATOR + f"\nCaused by: {self.original_exception!s}"

        return exception_str

    def __repr__(self) -> str:
        """Return a string representation of the exception."""
        class_name = self.__class__.__name__
        properties_str = ", ".join(
            f"{k}={v!r}" for k, v in self.__dict__.items() if not k.startswith("_")
        )
        return f"{class_name}({properties_str})"

    def safe_logging_dict(self) -> dict[str, Any]:
        """Return a dictionary of the exception's properties which is safe for logging.

        We avoid any properties which could potentially contain PII.
        """
        result = {
            # The class name is safe to log:
            "class": self.__class__.__name__,
            # We discourage interpolated strings in 'message' so that this should never contain PII:
            "message": self.get_message(),
        }
        safe_attrs = ["project_id", "dataset_id", "table_id"]
        for attr in safe_attrs:
            if hasattr(self, attr):
                result[attr] = getattr(self, attr)

        return result


# Configuration Errors


@dataclass
class BigQuerySnippetConfigError(BigQuerySnippetError):
    """Required configuration was not provided."""

    guidance: str | None = (
        "Pass a project ID explicitly, or set the `GOOGLE_PROJECT_ID` environment variable."
    )
    help_url: str | None = AUTH_DOCS_URL
    variable_name: str | None = None


# Input Errors


@dataclass
class BigQuerySnippetInputError(BigQuerySnippetError, ValueError):
    """The input provided did not match expected validation rules.

    This inherits from ValueError so that it can be used as a drop-in replacement for
    ValueError in the snippet API.
    """

    guidance: str | None = "Please check the provided value and try again."
    help_url: str | None = BIGQUERY_DOCS_URL
    input_value: str | None = None


# Job and API Errors


@dataclass
class BigQuerySnippetInsertRowsError(BigQuerySnippetError):
    """Streaming insert reported errors for one or more rows."""

    guidance: str | None = "Check that each row matches the destination table's schema."
    help_url: str | None = STREAMING_DOCS_URL
    table_id: str | None = None
    row_errors: list[dict[str, Any]] | None = None
