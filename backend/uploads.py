import logging
import os
import shutil
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"


class UploadFailed(Exception):
    pass


def save_upload(upload: Optional[UploadFile], uploads_dir) -> str:
    """
    Store an uploaded image as <epoch millis><original extension>.

    Returns the public path ("/uploads/1729260000000.jpg"), or "" when the form
    carried no file.
    """
    if upload is None or not upload.filename:
        return ""

    uploads_dir = Path(uploads_dir)
    ext = os.path.splitext(upload.filename)[1]
    filename = f"{int(time.time() * 1000)}{ext}"
    try:
        uploads_dir.mkdir(parents=True, exist_ok=True)
        with open(uploads_dir / filename, "wb") as out:
            shutil.copyfileobj(upload.file, out)
    except OSError as e:
        logger.error(f"Saving upload {upload.filename!r} failed: {e}")
        raise UploadFailed(str(e)) from e

    return f"{UPLOADS_URL_PREFIX}/{filename}"


def discard_upload(reference: str, uploads_dir) -> None:
    """Remove a file stored by save_upload, e.g. when the product never got saved."""
    if not reference:
        return
    path = Path(uploads_dir) / reference.rsplit("/", 1)[-1]
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Could not remove orphaned upload {path}: {e}")
