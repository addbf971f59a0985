"""Pydantic schemas for JSON output.

All --json output from CLI commands uses these models, so every command
returns the same structure for errors and a documented one on success.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input", "data_error")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "invalid_config", "data_error", "write_failed"],
    )
    message: str = Field(description="Human-readable error description")


# ============================================================================
# Show Command Response
# ============================================================================


class TagFields(BaseModel):
    """Every field of an MP3 tag."""

    artist: str = ""
    album: str = ""
    album_artist: str = ""
    title: str = ""
    subtitle: str = ""
    genre: str = ""
    composer: str = ""
    lyricist: str = ""
    publisher: str = ""
    encoder: str = ""
    copyright: str = ""
    language: str = ""
    isrc: str = ""
    date: str = ""
    length: str = ""
    year: int = 0
    bpm: int = 0
    disc_number: int = Field(default=0, ge=0)
    disc_total: int = Field(default=0, ge=0)
    track_number: int = Field(default=0, ge=0)
    track_total: int = Field(default=0, ge=0)
    has_cover_art: bool = False


class CoverArtInfo(BaseModel):
    """Size and mode of the decoded cover art."""

    width: int = Field(ge=0)
    height: int = Field(ge=0)
    mode: str
    format: Optional[str] = None


class ShowSuccessResponse(BaseModel):
    """Response for a successful show command.

    Attributes:
        status: Always "success"
        file: Path of the MP3 file
        tags: The tag fields
        cover_art: Cover art details, omitted when there is none
    """

    status: Literal["success"] = "success"
    file: str = Field(description="Path of the MP3 file")
    tags: TagFields
    cover_art: Optional[CoverArtInfo] = None


# ============================================================================
# Write Command Response (edit, clear, cover)
# ============================================================================


class WriteSuccessResponse(BaseModel):
    """Response for commands that modify a file.

    Attributes:
        status: Always "success"
        file: Path of the input file
        output: Path the result was written to
        changed: Names of the fields that were changed
    """

    status: Literal["success"] = "success"
    file: str = Field(description="Path of the input file")
    output: str = Field(description="Path the result was written to")
    changed: list[str] = Field(default_factory=list, description="Changed fields")
