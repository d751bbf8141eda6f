"""EXIF printing commands.

print-exif dumps one file's metadata; print-exif-create-time prints a
creation date per file for whole directories via exiftool.
"""

from pathlib import Path
from typing import Annotated

import typer

from archive_man.core.errors import ArchiveManError
from archive_man.metadata.models import ExifBackend
from archive_man.metadata.reporter import print_batch, print_single
from archive_man.utils.formatting import print_error


def print_exif(
    file: Annotated[Path, typer.Argument(help="Image or video file.")],
    use_imagemeta: Annotated[
        bool,
        typer.Option("--use-imagemeta", help="Decode a structured record with Pillow."),
    ] = False,
    use_exiftool: Annotated[
        bool,
        typer.Option("--use-exiftool", help="Delegate to the exiftool executable."),
    ] = False,
) -> None:
    """Print the EXIF metadata of FILE.

    By default every EXIF tag is listed as a name/value pair.
    exiftool must be in PATH for --use-exiftool.
    """
    try:
        backend = ExifBackend.from_flags(use_imagemeta=use_imagemeta, use_exiftool=use_exiftool)
        print_single(file, backend)
    except ArchiveManError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def print_exif_create_time(
    paths: Annotated[
        list[Path],
        typer.Argument(metavar="FILE|DIR...", help="Files or directories (not recursive)."),
    ],
    exclude_prefix: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude-prefix",
            "-x",
            help="Skip files whose names start with this prefix (repeatable).",
        ),
    ] = None,
) -> None:
    """Print the creation date of each file as reported by exiftool.

    Directories are expanded to the files they directly contain.
    Files without a known date field are reported as "unknown".

    Examples:
        archive-man print-exif-create-time ~/Photos/2020 --exclude-prefix ._
    """
    try:
        print_batch(paths, exclude_prefixes=tuple(exclude_prefix or ()))
    except ArchiveManError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
