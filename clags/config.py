# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Layout settings for Clags usage rendering."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UsageConfig(BaseModel):
    """Controls how `render_usage()` lays out help text.

    Attributes:
        column_width (int): Minimum width of the left column before the separator.
        indent (int): Indentation of each entry row.
        section_indent (int): Indentation of the section headings.
        separator (str): Text placed between the left column and the description.
        show_types (bool): Append `(kind)` tags to typed arguments.
        list_marker (str): Suffix marking a repeating positional.
    """

    column_width: int = Field(default=16, ge=1)
    indent: int = Field(default=4, ge=0)
    section_indent: int = Field(default=2, ge=0)
    separator: str = " : "
    show_types: bool = True
    list_marker: str = "..."

    model_config = ConfigDict(frozen=True)

    @field_validator("list_marker")
    @classmethod
    def validate_list_marker(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("list_marker must not be blank")
        return value
