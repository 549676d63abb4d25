"""Pydantic models for renderer configuration."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class RenderSettings(BaseModel):
    """Options controlling how templates are parsed, bound and evaluated."""

    marker: str = Field(
        "data-prop",
        alias="markerAttribute",
        min_length=1,
        description="Attribute whose value names the data property bound to an element.",
    )
    parser_features: str = Field(
        "html.parser",
        alias="parserFeatures",
        description="BeautifulSoup tree builder used to parse templates (e.g., html.parser, lxml).",
    )
    evaluate: bool = Field(
        True,
        description="Evaluate embedded Jinja expressions after binding data.",
    )
    strict_undefined: bool = Field(
        True,
        alias="strictUndefined",
        description="Raise on undefined variables in embedded expressions.",
    )
    trim_blocks: bool = Field(
        False,
        alias="trimBlocks",
        description="Remove the first newline after a block tag.",
    )
    lstrip_blocks: bool = Field(
        False,
        alias="lstripBlocks",
        description="Strip leading whitespace before a block tag.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_settings(path: Path) -> RenderSettings:
    """Load render settings from a YAML file."""

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of render settings.")
    try:
        return RenderSettings.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid render settings in {path}: {exc}") from exc


__all__ = ["RenderSettings", "load_settings"]
