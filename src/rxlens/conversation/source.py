"""Asset source backed by the filesystem."""

import mimetypes
from pathlib import Path

from .models import UploadedAsset

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: Path) -> str:
    """Guess the MIME type from the file extension."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_MIME_TYPE


def load_asset(path: str | Path) -> UploadedAsset:
    """Read an image file into an UploadedAsset.

    Args:
        path: Path to the prescription image

    Returns:
        Asset with the file's bytes, guessed MIME type and file name

    Raises:
        FileNotFoundError: If the file does not exist
        IsADirectoryError: If the path is a directory
    """
    path = Path(path)
    return UploadedAsset(
        content=path.read_bytes(),
        mime_type=guess_mime_type(path),
        name=path.name,
    )
