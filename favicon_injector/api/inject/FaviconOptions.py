"""Favicon link options."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ._constants import DEFAULT_FAVICON_PATH, DEFAULT_REL
from .detect_mime_type import detect_mime_type


class FaviconOptions(BaseModel):
    """Attributes of the ``<link>`` tag written into each document.

    ``type`` is derived from the extension of ``path`` when not given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(DEFAULT_FAVICON_PATH, description="Favicon href")
    rel: str = Field(DEFAULT_REL, description="Link relation (icon, shortcut icon, apple-touch-icon)")
    type: str | None = Field(None, validate_default=True, description="MIME type, auto-detected from path")
    sizes: str | None = Field(None, description="Size attribute, e.g. 32x32")

    @field_validator("path", mode="before")
    @classmethod
    def _default_path(cls, value: Any) -> Any:
        return value or DEFAULT_FAVICON_PATH

    @field_validator("rel", mode="before")
    @classmethod
    def _default_rel(cls, value: Any) -> Any:
        return value or DEFAULT_REL

    @field_validator("type")
    @classmethod
    def _detect_type(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value:
            return value
        # path failed validation; leave type unset and let that error surface
        if "path" not in info.data:
            return None
        return detect_mime_type(info.data["path"])

    @field_validator("sizes")
    @classmethod
    def _empty_sizes(cls, value: str | None) -> str | None:
        return value or None

    @classmethod
    def from_path(cls, path: str) -> "FaviconOptions":
        """Build options from a bare favicon href, defaulting everything else."""
        return cls(path=path)

    @classmethod
    def coerce(cls, options: "str | Mapping[str, Any] | FaviconOptions | None") -> "FaviconOptions":
        """Normalize the ``options`` argument of the public functions.

        A string is the favicon href, a mapping holds the model fields and
        None gives the defaults.

        Raises:
            TypeError: If options is none of the accepted types
            ValidationError: If a mapping holds unknown or invalid fields
        """
        if options is None:
            return cls()
        if isinstance(options, FaviconOptions):
            return options
        if isinstance(options, str):
            return cls.from_path(options)
        if isinstance(options, Mapping):
            return cls.model_validate(dict(options))
        raise TypeError(f"options must be a str, mapping or FaviconOptions, not {type(options).__name__}")
