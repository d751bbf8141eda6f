"""In-process EXIF decoders.

- exifread: flat tag walk, works for JPEG, TIFF, HEIC and most RAW files
- Pillow: structured record with image geometry plus named EXIF tags
"""

import logging
from pathlib import Path

import exifread
from PIL import Image
from PIL.ExifTags import TAGS

from archive_man.core.errors import MetadataError
from archive_man.metadata.models import ImageRecord

logger = logging.getLogger(__name__)


def read_exif_tags(file_path: str | Path) -> list[tuple[str, str]]:
    """Read all EXIF tags from a file with exifread.

    Args:
        file_path: Image file to decode.

    Returns:
        (name, value) pairs in the order exifread reports them,
        e.g. ("Image Make", "Canon").

    Raises:
        MetadataError: If the file cannot be read or carries no EXIF data.
    """
    try:
        with open(file_path, "rb") as f:
            tags = exifread.process_file(f, details=False)
    except OSError as e:
        msg = f"Cannot read {file_path}: {e.strerror or e}"
        raise MetadataError(msg) from e

    if not tags:
        msg = f"No EXIF data found in {file_path}"
        raise MetadataError(msg)

    logger.debug("Read %d EXIF tags from %s", len(tags), file_path)
    return [(name, str(tag)) for name, tag in tags.items()]


def read_image_record(file_path: str | Path) -> ImageRecord:
    """Decode an image with Pillow into an ImageRecord.

    Args:
        file_path: Image file to decode.

    Returns:
        ImageRecord with geometry, pixel mode and named EXIF tags.

    Raises:
        MetadataError: If Pillow cannot open or identify the file.
    """
    try:
        with Image.open(file_path) as img:
            exif = img.getexif()
            tags = {str(TAGS.get(tag_id, tag_id)): _format_value(value) for tag_id, value in exif.items()}
            return ImageRecord(
                path=str(file_path),
                format=img.format,
                width=img.width,
                height=img.height,
                mode=img.mode,
                tags=tags,
            )
    except OSError as e:
        # UnidentifiedImageError is an OSError subclass
        msg = f"Cannot decode {file_path}: {e}"
        raise MetadataError(msg) from e


def _format_value(value: object) -> str:
    """Render an EXIF value as text."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace").rstrip("\x00")
    return str(value)
