"""Tests for normalized report models."""

import pytest
from pydantic import ValidationError

from boostsec.report_normalizer.models.normalized import (
    DiffChange,
    NormalizedError,
    NormalizedSuite,
    NormalizedTest,
)


def test_normalized_test_dumps_report_keys() -> None:
    """NormalizedTest serializes with the report's key names."""
    test = NormalizedTest(
        title="t",
        full_title="s t",
        pass_=True,
        uuid="u-1",
        parent_uuid="p-1",
        is_hook=False,
        is_root=True,
        timed_out=False,
    )

    dumped = test.model_dump(by_alias=True)

    assert dumped["pass"] is True
    assert dumped["fullTitle"] == "s t"
    assert dumped["parentUUID"] == "p-1"
    assert dumped["isRoot"] is True
    assert dumped["isHook"] is False
    assert dumped["timedOut"] is False
    assert dumped["duration"] == 0
    assert dumped["err"] == {"message": None, "estack": None, "diff": None}


def test_normalized_test_is_frozen() -> None:
    """NormalizedTest rejects modification."""
    test = NormalizedTest(title="t", full_title="t", uuid="u-1")

    with pytest.raises(ValidationError):
        test.title = "other"  # type: ignore[misc]


def test_normalized_error_diff_variants() -> None:
    """NormalizedError holds either diff text or diff segments."""
    unified = NormalizedError(diff="- a\n+ b")
    inline = NormalizedError(diff=[DiffChange(value="a", count=1, removed=True)])

    assert unified.diff == "- a\n+ b"
    assert isinstance(inline.diff, list)
    assert inline.diff[0].removed is True


def test_normalized_suite_defaults() -> None:
    """NormalizedSuite defaults collections, counts and flags."""
    suite = NormalizedSuite(title="s", full_file="", file="", uuid="u-1")

    assert suite.tests == []
    assert suite.suites == []
    assert suite.total_tests == 0
    assert suite.has_tests is False
    assert suite.root_empty is False
    assert suite.timeout is None
