"""Pydantic models for conversion settings."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConvertConfig(BaseModel):
    """Settings for converting a JsonML document."""

    output: Literal["html", "jsonml"] = Field(
        "html", description="Write rendered HTML or normalized JsonML."
    )
    indent: Optional[int] = Field(
        None, ge=0, description="Indentation for JsonML output; None writes one line."
    )
    ensure_ascii: bool = Field(
        False,
        alias="ensureAscii",
        description="Escape non-ASCII characters in JsonML output.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_config(path: Optional[Path]) -> ConvertConfig:
    if path is None:
        return ConvertConfig()
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of settings.")
    try:
        return ConvertConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid config in {path}: {exc}") from exc
