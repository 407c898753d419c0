"""Normalize the runner's suite tree into report records."""

import logging
import os
from collections.abc import Sequence
from uuid import uuid4

from boostsec.report_normalizer.code_cleaner import clean_code
from boostsec.report_normalizer.error_normalizer import normalize_error
from boostsec.report_normalizer.models.config import ReporterConfig
from boostsec.report_normalizer.models.normalized import (
    NormalizedError,
    NormalizedSuite,
    NormalizedTest,
    ParentSuite,
)
from boostsec.report_normalizer.models.raw import RawSuite, RawTest
from boostsec.report_normalizer.stringify import safe_stringify

logger = logging.getLogger(__name__)


def normalize_test(
    test: RawTest, config: ReporterConfig, parent: ParentSuite | None = None
) -> NormalizedTest:
    """Return a plain, serializable record of a test or hook.

    Args:
        test: Runner test or hook record
        config: Reporter configuration
        parent: Already-normalized suite that owns the test, if any

    Returns:
        Normalized test with its derived state flags

    """
    code = test.fn() if test.fn is not None else test.body

    if callable(test.full_title):
        full_title = test.full_title()
    else:
        full_title = test.full_title or test.title

    passed = test.state == "passed"
    failed = test.state == "failed"
    is_hook = test.type == "hook"

    return NormalizedTest(
        title=test.title,
        full_title=full_title,
        timed_out=test.timed_out,
        duration=test.duration or 0,
        state=test.state,
        speed=test.speed,
        pass_=passed,
        fail=failed,
        pending=test.pending,
        context=safe_stringify(test.context, indent=2),
        code=clean_code(code) if code else code,
        err=normalize_error(test.err, config) if test.err else NormalizedError(),
        uuid=test.uuid,
        parent_uuid=parent.uuid if parent else None,
        is_hook=is_hook,
        is_root=bool(parent and parent.root),
        skipped=not passed and not failed and not test.pending and not is_hook,
    )


def normalize_suite(
    suite: RawSuite,
    config: ReporterConfig,
    suites: Sequence[NormalizedSuite] = (),
) -> NormalizedSuite:
    """Return the report record of a single suite.

    Only the suite's own hooks and tests are normalized here; already
    normalized child suites are attached from ``suites``. The raw suite is
    left untouched.

    Args:
        suite: Runner suite record
        config: Reporter configuration
        suites: Normalized child suites to attach

    Returns:
        Normalized suite with aggregate counts and flags

    """
    parent = ParentSuite(uuid=str(uuid4()), root=suite.root)

    before_hooks = [
        normalize_test(hook, config, parent)
        for hook in [*suite.before_all, *suite.before_each]
    ]
    after_hooks = [
        normalize_test(hook, config, parent)
        for hook in [*suite.after_all, *suite.after_each]
    ]
    tests = [normalize_test(test, config, parent) for test in suite.tests]

    passes = [t for t in tests if t.state == "passed"]
    failures = [t for t in tests if t.state == "failed"]
    pending = [t for t in tests if t.pending]
    skipped = [t for t in tests if t.skipped]

    file = suite.file or ""
    logger.debug(f"Normalized suite '{suite.title}' with {len(tests)} tests")

    return NormalizedSuite(
        title=suite.title,
        full_file=file,
        file=file.replace(os.getcwd(), "", 1),
        before_hooks=before_hooks,
        after_hooks=after_hooks,
        tests=tests,
        suites=list(suites),
        passes=passes,
        failures=failures,
        pending=pending,
        skipped=skipped,
        has_before_hooks=len(before_hooks) > 0,
        has_after_hooks=len(after_hooks) > 0,
        has_tests=len(tests) > 0,
        has_suites=len(suite.suites) > 0,
        has_passes=len(passes) > 0,
        has_failures=len(failures) > 0,
        has_pending=len(pending) > 0,
        has_skipped=len(skipped) > 0,
        total_tests=len(tests),
        total_passes=len(passes),
        total_failures=len(failures),
        total_pending=len(pending),
        total_skipped=len(skipped),
        root=suite.root,
        uuid=parent.uuid,
        duration=sum(t.duration for t in tests),
        root_empty=suite.root and len(tests) == 0,
        timeout=suite.timeout,
    )


def traverse_suites(
    suite: RawSuite, config: ReporterConfig
) -> tuple[NormalizedSuite, int]:
    """Normalize a suite and every suite below it.

    The tree must be finite and acyclic; no cycle detection is done. The
    entry suite is normalized and its tests are counted whether or not it
    carries the root flag.

    Args:
        suite: Root of the runner's suite tree
        config: Reporter configuration

    Returns:
        Tuple of (normalized suite tree, total tests registered in the tree)

    """
    children: list[NormalizedSuite] = []
    total = len(suite.tests)
    for child in suite.suites:
        normalized_child, child_total = traverse_suites(child, config)
        children.append(normalized_child)
        total += child_total

    return normalize_suite(suite, config, children), total
