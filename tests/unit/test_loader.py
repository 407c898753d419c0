"""Tests for the results loader."""

import json
from pathlib import Path

import pytest

from boostsec.report_normalizer.loader import load_suite_tree


def test_load_suite_tree_json(tmp_path: Path) -> None:
    """load_suite_tree parses a JSON dump with runner keys."""
    results = tmp_path / "results.json"
    results.write_text(
        json.dumps(
            {
                "title": "",
                "root": True,
                "_timeout": 2000,
                "suites": [
                    {
                        "title": "math",
                        "file": "/repo/test/math.spec.js",
                        "_beforeEach": [
                            {
                                "title": '"before each" hook',
                                "type": "hook",
                                "body": "function () {\n  reset();\n}",
                            }
                        ],
                        "tests": [
                            {
                                "title": "adds",
                                "fullTitle": "math adds",
                                "state": "passed",
                                "duration": 3,
                                "speed": "fast",
                                "timedOut": False,
                                "type": "test",
                                "uuid": "test-1",
                            }
                        ],
                    }
                ],
            }
        )
    )

    root = load_suite_tree(results)

    assert root.root is True
    assert root.timeout == 2000
    suite = root.suites[0]
    assert suite.file == "/repo/test/math.spec.js"
    assert suite.before_each[0].type == "hook"
    test = suite.tests[0]
    assert test.full_title == "math adds"
    assert test.timed_out is False
    assert test.uuid == "test-1"


def test_load_suite_tree_yaml(tmp_path: Path) -> None:
    """load_suite_tree parses a YAML dump."""
    results = tmp_path / "results.yaml"
    results.write_text(
        """
root: true
suites:
  - title: strings
    tests:
      - title: compares
        state: failed
        err:
          name: AssertionError
          message: expected 'foo' to equal 'bar'
          actual: foo
          expected: bar
          showDiff: true
"""
    )

    root = load_suite_tree(results)

    err = root.suites[0].tests[0].err
    assert err is not None
    assert err.actual == "foo"
    assert err.expected == "bar"
    assert err.show_diff is True


def test_load_suite_tree_file_not_found(tmp_path: Path) -> None:
    """load_suite_tree raises FileNotFoundError for a missing file."""
    with pytest.raises(FileNotFoundError, match="Results file not found"):
        load_suite_tree(tmp_path / "missing.json")


def test_load_suite_tree_invalid_yaml(tmp_path: Path) -> None:
    """load_suite_tree raises ValueError for unparsable content."""
    results = tmp_path / "results.yaml"
    results.write_text("invalid: yaml: content: [")

    with pytest.raises(ValueError, match="Invalid results file"):
        load_suite_tree(results)


def test_load_suite_tree_empty_file(tmp_path: Path) -> None:
    """load_suite_tree raises ValueError for an empty file."""
    results = tmp_path / "results.json"
    results.write_text("")

    with pytest.raises(ValueError, match="Empty results file"):
        load_suite_tree(results)


def test_load_suite_tree_invalid_schema(tmp_path: Path) -> None:
    """load_suite_tree raises ValueError when the tree doesn't match schema."""
    results = tmp_path / "results.json"
    results.write_text(json.dumps({"tests": [{"title": "t", "state": "bogus"}]}))

    with pytest.raises(ValueError, match="Invalid suite tree schema"):
        load_suite_tree(results)


def test_load_suite_tree_tab_indented_json(tmp_path: Path) -> None:
    """load_suite_tree parses JSON indented with tabs."""
    results = tmp_path / "results.json"
    results.write_text(
        json.dumps(
            {"root": True, "tests": [{"title": "t", "state": "passed"}]},
            indent="\t",
        )
    )

    root = load_suite_tree(results)

    assert root.root is True
    assert root.tests[0].state == "passed"


def test_load_suite_tree_invalid_json(tmp_path: Path) -> None:
    """load_suite_tree raises ValueError for malformed JSON."""
    results = tmp_path / "results.json"
    results.write_text('{"root": true,')

    with pytest.raises(ValueError, match="Invalid results file"):
        load_suite_tree(results)
