"""Output schemas for inject commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class InjectOutput(BaseOutputSchema):
    """Output schema for inject command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - directory: str - absolute path of the scanned directory
    - favicon: dict[str, str | None] - effective favicon options (path, rel, type, sizes)
    - total/injected/skipped/failed: int - scan counters
    """

    directory: str = Field(..., description="Absolute path of the scanned directory")
    favicon: dict[str, str | None] = Field(..., description="Effective favicon options")
    total: int = Field(..., ge=0, description="HTML files found")
    injected: int = Field(..., ge=0, description="Files that received a favicon link")
    skipped: int = Field(..., ge=0, description="Files that already had a favicon link")
    failed: int = Field(..., ge=0, description="Files that could not be injected")

