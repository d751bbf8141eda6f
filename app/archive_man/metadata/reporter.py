"""Metadata reporting for single files and batches.

print_single dumps everything one backend knows about a file.
print_batch prints one creation date per file, looked up through
exiftool for every file in the given files and directories.
"""

import json
import logging
import os
import stat
from collections.abc import Iterable, Sequence
from pathlib import Path

from archive_man.core.errors import ExternalToolError, PathError
from archive_man.metadata.exiftool import ExifTool, MetadataTool
from archive_man.metadata.lookup import find_field
from archive_man.metadata.models import CREATE_TIME_FIELDS, ExifBackend
from archive_man.metadata.readers import read_exif_tags, read_image_record
from archive_man.utils.formatting import print_line

logger = logging.getLogger(__name__)

# Column width for tag names in the exifread listing
TAG_NAME_WIDTH = 40

UNKNOWN_VALUE = "unknown"


def print_single(
    file_path: str | Path,
    backend: ExifBackend = ExifBackend.EXIFREAD,
    tool: MetadataTool | None = None,
) -> None:
    """Print the metadata of one file with the selected backend.

    Args:
        file_path: File to inspect.
        backend: Which backend decodes the file.
        tool: External tool used by the EXIFTOOL backend.

    Raises:
        ExternalToolError: If the EXIFTOOL backend fails.
        MetadataError: If an in-process decoder fails.
    """
    path = str(file_path)

    if backend == ExifBackend.EXIFTOOL:
        (tool or ExifTool()).passthrough(path)
        return

    if backend == ExifBackend.IMAGEMETA:
        record = read_image_record(path)
        print_line(record.model_dump_json(indent=2))
        return

    for name, value in read_exif_tags(path):
        print_line(f"{name:>{TAG_NAME_WIDTH}}: {value}")


def print_batch(
    paths: Iterable[str | Path],
    exclude_prefixes: Sequence[str] = (),
    tool: MetadataTool | None = None,
) -> None:
    """Print ``<path>: <creation date>`` for every file in ``paths``.

    Directories are expanded to their immediate files. Files whose name
    starts with an excluded prefix are skipped. The first failing file
    aborts the batch.

    Args:
        paths: Files and directories to report on.
        exclude_prefixes: Base-name prefixes to skip.
        tool: External tool used to extract the dates.

    Raises:
        PathError: If a directory cannot be listed.
        ExternalToolError: If the tool fails or its output cannot be parsed.
    """
    metadata_tool = tool or ExifTool()

    for file_path in expand_paths(paths):
        if is_excluded(os.path.basename(file_path), exclude_prefixes):
            logger.debug("Excluded by prefix: %s", file_path)
            continue
        create_time = read_create_time(file_path, metadata_tool)
        print_line(f"{file_path}: {create_time or UNKNOWN_VALUE}")


def read_create_time(file_path: str, tool: MetadataTool) -> str | None:
    """Look up a file's creation date through an external tool.

    Args:
        file_path: File to inspect.
        tool: Tool producing JSON metadata.

    Returns:
        The first candidate date field as text, or None if absent or empty.

    Raises:
        ExternalToolError: If the tool fails or its output is not valid JSON.
    """
    output = tool.dump_json(file_path)
    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        msg = f"Parsing exiftool output for {file_path}: {e}"
        raise ExternalToolError(msg) from e

    value = find_field(data, CREATE_TIME_FIELDS)
    if value is None or value == "":
        return None
    return str(value)


def expand_paths(paths: Iterable[str | Path]) -> list[str]:
    """Expand directories to their immediate regular files.

    Non-directory inputs, including paths that do not exist, are kept
    as-is so the tool reports on them.

    Args:
        paths: Files and directories.

    Returns:
        File paths, directory contents sorted by name.

    Raises:
        PathError: If a path cannot be stat'ed or a directory cannot be listed.
    """
    files: list[str] = []
    for path in paths:
        path_str = str(path)
        if _is_dir(path_str):
            files.extend(_list_dir_files(path_str))
        else:
            files.append(path_str)
    return files


def is_excluded(name: str, prefixes: Sequence[str]) -> bool:
    """Check whether a base name starts with any excluded prefix."""
    return any(name.startswith(prefix) for prefix in prefixes)


def _is_dir(path: str) -> bool:
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise PathError(path, f"Cannot access {e.strerror or e}") from e
    return stat.S_ISDIR(st.st_mode)


def _list_dir_files(directory: str) -> list[str]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
        return [os.path.join(directory, entry.name) for entry in entries if entry.is_file()]
    except OSError as e:
        raise PathError(directory, f"Cannot list directory {e.strerror or e}") from e
