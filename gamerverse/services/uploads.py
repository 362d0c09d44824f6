"""Photo upload storage. Profile code only ever sees the returned reference."""
import logging
import re
import shutil
import time
import uuid
from pathlib import Path

from fastapi import UploadFile

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(original: str) -> str:
    # strip any client-side directory part, then keep a conservative charset
    name = Path(original.replace("\\", "/")).name
    name = _UNSAFE_CHARS.sub("_", name).strip("._")
    return name or "upload"


def unique_filename(original: str) -> str:
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{safe_filename(original)}"


def store_upload(upload_dir: Path, upload: UploadFile | None) -> str | None:
    """Save the upload under a unique name; return its public path or None."""
    if upload is None or not upload.filename:
        return None

    filename = unique_filename(upload.filename)
    destination = Path(upload_dir) / filename
    with destination.open("wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info("Stored upload %s", filename)
    return f"{UPLOADS_URL_PREFIX}/{filename}"


def discard_upload(upload_dir: Path, reference: str | None) -> None:
    """Remove a stored upload by its public path; missing files are ignored."""
    if not reference:
        return
    filename = reference.rsplit("/", 1)[-1]
    (Path(upload_dir) / filename).unlink(missing_ok=True)
    logger.info("Discarded upload %s", filename)
