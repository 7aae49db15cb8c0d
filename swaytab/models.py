"""
Data models for swaytab.

Candidates and selections are plain frozen dataclasses; the persisted
configuration is a Pydantic model so the on-disk file is validated on load.
"""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


NULL_NAME = "null"


@dataclass(frozen=True)
class Candidate:
    """A window offered to the filter: container id and display name."""

    id: int
    name: str


@dataclass(frozen=True)
class Selection:
    """The filter's answer.

    Attributes:
        id: Container id of the chosen window
        name: Display name with the wire quoting removed
        raw_name: Everything after the first comma, verbatim
    """

    id: int
    name: str
    raw_name: str


class TabConfig(BaseModel):
    """Filter tool configuration."""

    filter_command: Optional[str] = Field("fzf", description="Filter tool executable, e.g. bemenu")
    filter_command_args: Optional[List[str]] = Field(None, description="Arguments for the filter tool")

    @field_validator('filter_command')
    @classmethod
    def validate_filter_command(cls, v: Optional[str]) -> Optional[str]:
        """Validate command is not blank."""
        if v is not None and not v.strip():
            raise ValueError("Filter command cannot be empty")
        return v

    def merge(self, other: "TabConfig") -> "TabConfig":
        """
        Overwrite fields that are set in other.

        Args:
            other: Configuration with higher precedence (command line)

        Returns:
            self, for chaining
        """
        if other.filter_command is not None:
            self.filter_command = other.filter_command
        if other.filter_command_args is not None:
            self.filter_command_args = other.filter_command_args
        return self
