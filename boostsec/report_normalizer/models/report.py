"""Models for the complete report handed to the renderer."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from boostsec.report_normalizer.models.normalized import NormalizedSuite

PercentClass = Literal["danger", "warning", "success"]


class ReportStats(BaseModel):
    """Summary statistics of a normalized run."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    suites: int = Field(..., description="Number of suites below the root")
    tests: int = Field(..., description="Tests that ran (passed or failed)")
    passes: int = Field(..., description="Passed tests")
    pending: int = Field(..., description="Pending tests")
    failures: int = Field(..., description="Failed tests")
    skipped: int = Field(..., description="Tests that never ran")
    has_skipped: bool = Field(..., description="At least one test was skipped")
    duration: int = Field(..., description="Summed test duration in ms")
    tests_registered: int = Field(..., description="Tests registered in the tree")
    pass_percent: float = Field(..., description="Passes over non-pending tests")
    pending_percent: float = Field(..., description="Pending over registered tests")
    pass_percent_class: PercentClass
    pending_percent_class: PercentClass


class Report(BaseModel):
    """Statistics plus the normalized suite tree."""

    model_config = ConfigDict(frozen=True)

    stats: ReportStats
    suites: NormalizedSuite
