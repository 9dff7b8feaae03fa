"""Conversion output records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IconResult(BaseModel):
    """Normalized path data for one source file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    icon_name: str
    paths: list[str] = Field(default_factory=list)
    classes: list[str] = Field(default_factory=list)
    # Space-joined union of ``paths``; only meaningful when every source
    # shape shares the same fill/stroke/colour.
    concat: str | None = None


class ConversionErrorReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_path: str
    error: str
