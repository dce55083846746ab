# === FILE: html_inliner/config.py ===
"""
Loading and validation of the inliner configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from html_inliner import __version__
from html_inliner.mime import DEFAULT_MIME_TYPES, normalize_extension

DEFAULT_FONT_EXTENSIONS: Tuple[str, ...] = ("eot", "woff", "woff2", "ttf", "otf")


class InlinerConfig(BaseModel):
    """Options for one inlining pass."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    inline_fonts: bool = Field(True, description="Inline assets with a font extension.")
    inline_remote: bool = Field(True, description="Fetch http(s) references at all.")
    max_inline_size: Optional[int] = Field(
        5000, ge=0, description="Assets larger than this many bytes are left as references (None = no limit)."
    )
    strict: bool = Field(False, description="Raise on asset resolution failures instead of skipping them.")
    timeout: float = Field(10.0, gt=0, description="Total timeout for one HTTP request (seconds).")
    user_agent: str = Field(f"HtmlInliner/{__version__}", min_length=1, description="User-Agent header.")
    font_extensions: Tuple[str, ...] = Field(
        DEFAULT_FONT_EXTENSIONS, description="Extensions treated as fonts by the inline_fonts switch."
    )
    mime_types: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_MIME_TYPES),
        description="Extension → content type; listed extensions are embedded as base64.",
    )

    @field_validator("font_extensions", mode="before")
    def _normalize_font_extensions(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set)):
            return tuple(normalize_extension(str(ext)) for ext in v)
        return v

    @field_validator("mime_types", mode="before")
    def _normalize_mime_keys(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {normalize_extension(str(ext)): mime for ext, mime in v.items()}
        return v

    def is_font(self, extension: str) -> bool:
        return normalize_extension(extension) in self.font_extensions


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> InlinerConfig:
    """
    Read YAML or JSON and return a validated InlinerConfig.

    With ``path=None`` the project default ``configs/default.yaml`` is used when
    it exists, otherwise the built-in defaults. An explicit path that does not
    exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return InlinerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    try:
        return InlinerConfig(**data)
    except ValidationError:
        raise
