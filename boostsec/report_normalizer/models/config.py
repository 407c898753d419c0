"""Configuration model for the report normalizer."""

from pydantic import BaseModel, Field


class ReporterConfig(BaseModel):
    """Reporter options consumed by the normalization pass."""

    quiet: bool = Field(default=False, description="Suppress reporter log output")
    use_inline_diffs: bool = Field(
        default=False,
        description="Produce word-level diff segments instead of unified diffs",
    )
