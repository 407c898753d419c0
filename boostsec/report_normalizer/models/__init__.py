"""Data models for raw runner results, normalized records, and reports."""

from boostsec.report_normalizer.models.config import ReporterConfig
from boostsec.report_normalizer.models.normalized import (
    DiffChange,
    NormalizedError,
    NormalizedSuite,
    NormalizedTest,
    ParentSuite,
)
from boostsec.report_normalizer.models.raw import RawError, RawSuite, RawTest
from boostsec.report_normalizer.models.report import Report, ReportStats

__all__ = [
    "DiffChange",
    "NormalizedError",
    "NormalizedSuite",
    "NormalizedTest",
    "ParentSuite",
    "RawError",
    "RawSuite",
    "RawTest",
    "Report",
    "ReporterConfig",
    "ReportStats",
]
