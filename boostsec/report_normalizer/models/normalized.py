"""Models for the normalized report tree."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_OUTPUT_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, frozen=True
)


class ParentSuite(BaseModel):
    """Back-reference from a test to the suite it belongs to."""

    model_config = ConfigDict(frozen=True)

    uuid: str
    root: bool = False


class DiffChange(BaseModel):
    """Segment of a word-level diff."""

    model_config = _OUTPUT_CONFIG

    value: str = Field(..., description="Literal text of the segment")
    count: int = Field(..., description="Number of tokens in the segment")
    added: bool = Field(default=False, description="Segment only in expected")
    removed: bool = Field(default=False, description="Segment only in actual")


class NormalizedError(BaseModel):
    """Error record rendered under a failing test."""

    model_config = _OUTPUT_CONFIG

    message: str | None = None
    estack: str | None = None
    diff: str | list[DiffChange] | None = None


class NormalizedTest(BaseModel):
    """Serializable test or hook record."""

    model_config = _OUTPUT_CONFIG

    title: str
    full_title: str
    timed_out: bool | None = None
    duration: int = 0
    state: Literal["passed", "failed"] | None = None
    speed: Literal["slow", "medium", "fast"] | None = None
    pass_: bool = Field(default=False, alias="pass")
    fail: bool = False
    pending: bool = False
    context: str | None = None
    code: str | None = None
    err: NormalizedError = Field(default_factory=NormalizedError)
    uuid: str
    parent_uuid: str | None = Field(default=None, alias="parentUUID")
    is_hook: bool = False
    skipped: bool = False
    is_root: bool = False


class NormalizedSuite(BaseModel):
    """Serializable suite record.

    The field set is the complete list of suite properties a report may use;
    anything else on the runner's suite is dropped.
    """

    model_config = _OUTPUT_CONFIG

    title: str
    full_file: str
    file: str
    before_hooks: list[NormalizedTest] = Field(default_factory=list)
    after_hooks: list[NormalizedTest] = Field(default_factory=list)
    tests: list[NormalizedTest] = Field(default_factory=list)
    suites: list["NormalizedSuite"] = Field(default_factory=list)
    passes: list[NormalizedTest] = Field(default_factory=list)
    failures: list[NormalizedTest] = Field(default_factory=list)
    pending: list[NormalizedTest] = Field(default_factory=list)
    skipped: list[NormalizedTest] = Field(default_factory=list)
    has_before_hooks: bool = False
    has_after_hooks: bool = False
    has_tests: bool = False
    has_suites: bool = False
    has_passes: bool = False
    has_failures: bool = False
    has_pending: bool = False
    has_skipped: bool = False
    total_tests: int = 0
    total_passes: int = 0
    total_failures: int = 0
    total_pending: int = 0
    total_skipped: int = 0
    root: bool = False
    uuid: str
    duration: int = 0
    root_empty: bool = False
    timeout: int | None = Field(default=None, alias="_timeout")
