"""Models for the runner-native result tree handed to the normalizer."""

from collections.abc import Callable
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FullTitle = str | Callable[[], str]


class RawError(BaseModel):
    """Error raised by a failing test or hook."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = Field(default=None, description="Error class name")
    message: str | None = Field(default=None, description="Error message")
    actual: Any = Field(default=None, description="Actual value of an assertion")
    expected: Any = Field(default=None, description="Expected value of an assertion")
    stack: str | None = Field(default=None, description="Stack trace")
    show_diff: bool | None = Field(
        default=None, description="Whether the assertion asks for a diff"
    )


class RawTest(BaseModel):
    """Test or hook record as reported by the runner.

    ``full_title`` is either the precomputed full title or a zero-argument
    callable that builds it. ``fn`` is a zero-argument callable returning the
    source text of the test body; ``body`` carries the same text directly.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., description="Test title")
    full_title: FullTitle | None = Field(
        default=None, description="Full title or a builder for it"
    )
    state: Literal["passed", "failed"] | None = Field(
        default=None, description="Final state, unset when the test did not run"
    )
    pending: bool = Field(default=False, description="Test was marked pending")
    duration: int | None = Field(default=None, description="Duration in ms")
    speed: Literal["slow", "medium", "fast"] | None = Field(
        default=None, description="Runner speed classification"
    )
    timed_out: bool | None = Field(default=None, description="Test timed out")
    err: RawError | None = Field(default=None, description="Raised error")
    type: Literal["test", "hook"] = Field(default="test", description="Record type")
    body: str | None = Field(default=None, description="Source text of the test")
    fn: Callable[[], str] | None = Field(
        default=None, description="Accessor returning the source text"
    )
    context: Any = Field(default=None, description="Context attached by the test")
    uuid: str = Field(
        default_factory=lambda: str(uuid4()), description="Stable identifier"
    )


class RawSuite(BaseModel):
    """Suite node of the runner's result tree."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(default="", description="Suite title")
    file: str | None = Field(default=None, description="Absolute path of the file")
    root: bool = Field(default=False, description="Suite is the root suite")
    suites: list["RawSuite"] = Field(default_factory=list, description="Child suites")
    tests: list[RawTest] = Field(default_factory=list, description="Direct tests")
    before_all: list[RawTest] = Field(default_factory=list, alias="_beforeAll")
    before_each: list[RawTest] = Field(default_factory=list, alias="_beforeEach")
    after_all: list[RawTest] = Field(default_factory=list, alias="_afterAll")
    after_each: list[RawTest] = Field(default_factory=list, alias="_afterEach")
    timeout: int | None = Field(default=None, alias="_timeout")
