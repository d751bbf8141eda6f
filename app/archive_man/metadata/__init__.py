"""EXIF metadata reading and reporting.

This module provides the in-process decoders, the exiftool wrapper,
the JSON field lookup and the single-file and batch reporters.
"""

from archive_man.metadata.exiftool import ExifTool, MetadataTool
from archive_man.metadata.lookup import find_field
from archive_man.metadata.models import CREATE_TIME_FIELDS, ExifBackend, ImageRecord, JsonValue
from archive_man.metadata.readers import read_exif_tags, read_image_record
from archive_man.metadata.reporter import expand_paths, print_batch, print_single, read_create_time

__all__ = [
    "CREATE_TIME_FIELDS",
    "ExifBackend",
    "ExifTool",
    "ImageRecord",
    "JsonValue",
    "MetadataTool",
    "expand_paths",
    "find_field",
    "print_batch",
    "print_single",
    "read_create_time",
    "read_exif_tags",
    "read_image_record",
]
