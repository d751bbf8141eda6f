"""Metadata domain models.

Defines the backend choice for single-file EXIF printing, the record
produced by the Pillow backend, and the JSON value shape used when
scanning external tool output.
"""

from enum import Enum
from typing import Annotated, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from archive_man.core.errors import ArgumentError

# Tree-shaped value as produced by json.loads
JsonValue: TypeAlias = dict[str, "JsonValue"] | list["JsonValue"] | str | int | float | bool | None

# Candidate creation-date fields, in priority order
CREATE_TIME_FIELDS: tuple[str, ...] = (
    "CreateDate",  # JPEG
    "DateCreated",  # PNG
    "CreationDate",  # MOV
)


class ExifBackend(str, Enum):
    """Backend used to print a single file's metadata.

    Attributes:
        EXIFREAD: Walk EXIF tags in-process with exifread (default).
        IMAGEMETA: Decode a structured record in-process with Pillow.
        EXIFTOOL: Delegate to the external exiftool executable.
    """

    EXIFREAD = "exifread"
    IMAGEMETA = "imagemeta"
    EXIFTOOL = "exiftool"

    @classmethod
    def from_flags(cls, *, use_imagemeta: bool = False, use_exiftool: bool = False) -> "ExifBackend":
        """Select exactly one backend from the CLI flags.

        Raises:
            ArgumentError: If both backend flags are set.
        """
        if use_imagemeta and use_exiftool:
            msg = "--use-imagemeta and --use-exiftool cannot be combined"
            raise ArgumentError(msg)
        if use_exiftool:
            return cls.EXIFTOOL
        if use_imagemeta:
            return cls.IMAGEMETA
        return cls.EXIFREAD


class ImageRecord(BaseModel):
    """Structured metadata decoded from an image file.

    Attributes:
        path: File the record was read from.
        format: Image format reported by the decoder (e.g. "JPEG").
        width: Width in pixels.
        height: Height in pixels.
        mode: Pixel mode (e.g. "RGB").
        tags: EXIF tags keyed by their symbolic names.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Annotated[str, Field(description="Source file")]
    format: Annotated[str | None, Field(description="Image format")] = None
    width: Annotated[int, Field(ge=0, description="Width in pixels")]
    height: Annotated[int, Field(ge=0, description="Height in pixels")]
    mode: Annotated[str, Field(description="Pixel mode")]
    tags: Annotated[dict[str, str], Field(default_factory=dict, description="EXIF tags by name")]
