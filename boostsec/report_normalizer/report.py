"""Assemble the report handed to the renderer."""

import logging
from collections.abc import Iterator

from boostsec.report_normalizer.models.config import ReporterConfig
from boostsec.report_normalizer.models.normalized import NormalizedSuite
from boostsec.report_normalizer.models.raw import RawSuite
from boostsec.report_normalizer.models.report import (
    PercentClass,
    Report,
    ReportStats,
)
from boostsec.report_normalizer.normalizer import traverse_suites

logger = logging.getLogger(__name__)


def percent_class(pct: float) -> PercentClass:
    """Return the display class for a percentage."""
    if pct <= 50:
        return "danger"
    elif pct < 80:
        return "warning"
    else:
        return "success"


def build_report(root: RawSuite, config: ReporterConfig) -> Report:
    """Normalize a suite tree and compute the run statistics.

    Args:
        root: Root suite of the runner's result tree
        config: Reporter configuration

    Returns:
        Report with statistics and the normalized suite tree

    """
    suite_tree, tests_registered = traverse_suites(root, config)
    logger.info(f"Normalized suite tree with {tests_registered} registered tests")

    suites = list(_walk(suite_tree))
    passes = sum(s.total_passes for s in suites)
    failures = sum(s.total_failures for s in suites)
    pending = sum(s.total_pending for s in suites)
    skipped = sum(s.total_skipped for s in suites)

    pass_percent = _percent(passes, tests_registered - pending)
    pending_percent = _percent(pending, tests_registered)

    stats = ReportStats(
        suites=len(suites) - 1,
        tests=passes + failures,
        passes=passes,
        pending=pending,
        failures=failures,
        skipped=skipped,
        has_skipped=skipped > 0,
        duration=sum(s.duration for s in suites),
        tests_registered=tests_registered,
        pass_percent=pass_percent,
        pending_percent=pending_percent,
        pass_percent_class=percent_class(pass_percent),
        pending_percent_class=percent_class(pending_percent),
    )
    logger.info(
        f"Passes: {passes}, failures: {failures}, pending: {pending}, "
        f"skipped: {skipped}"
    )
    return Report(stats=stats, suites=suite_tree)


def _walk(suite: NormalizedSuite) -> Iterator[NormalizedSuite]:
    yield suite
    for child in suite.suites:
        yield from _walk(child)


def _percent(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(count / total * 100, 1)
