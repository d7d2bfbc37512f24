"""Reusable Pydantic field annotations."""

from __future__ import annotations

from pathlib import PurePath
from typing import Annotated

from pydantic import AfterValidator, Field, StrictStr

NonEmptyString = Annotated[StrictStr, Field(min_length=1)]


def _ensure_relative(value: str) -> str:
    if PurePath(value).is_absolute():
        raise ValueError(f"must be a relative path, got '{value}'")
    return value


# Relative path segment(s) such as ".tool" or ".tool/config"
RelativePathString = Annotated[
    NonEmptyString,
    AfterValidator(_ensure_relative),
    Field(description="Relative path joined onto a search directory"),
]

__all__ = [
    "NonEmptyString",
    "RelativePathString",
]
