# Copyright (c) 2024 Airbyte, Inc., all rights reserved.
"""Unit tests for random resource names."""

from __future__ import annotations

import re

from bigquery_snippets._util import text_util


def test_random_suffix_shape() -> None:
    suffix = text_util.generate_random_suffix()
    assert len(suffix) == 9
    assert suffix == suffix.lower()


def test_random_names_are_valid_dataset_ids() -> None:
    names = {text_util.generate_random_name() for _ in range(3)}
    assert len(names) == 3
    for name in names:
        assert name.startswith("test_deleteme_")
        # Dataset and table IDs allow letters, digits and underscores only.
        assert re.fullmatch(r"[a-z0-9_]+", name)


def test_random_name_custom_prefix() -> None:
    assert text_util.generate_random_name("scratch").startswith("scratch_")


def test_bucket_names_are_dns_compatible() -> None:
    name = text_util.generate_bucket_name()
    assert name.startswith("test-deleteme-")
    assert re.fullmatch(r"[a-z0-9][a-z0-9-]*[a-z0-9]", name)
    assert 3 <= len(name) <= 63
