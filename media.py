"""
Media Store: uploaded images on the local filesystem, referenced by filename.
"""
import logging
import os
import shutil
import uuid
from typing import Iterable, List, Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
URL_PREFIX = "/uploads"


class MediaStore:
    def __init__(self, root: str = UPLOAD_DIR):
        self.root = os.path.abspath(root)
        os.makedirs(self.root, exist_ok=True)

    def path(self, filename: str) -> str:
        # Stored names never contain directories
        return os.path.join(self.root, os.path.basename(filename))

    def exists(self, filename: str) -> bool:
        if not filename or os.path.basename(filename) != filename:
            return False
        return os.path.isfile(self.path(filename))

    def save(self, upload: UploadFile) -> str:
        """Write an upload to disk under a fresh name and return that name."""
        _, ext = os.path.splitext(os.path.basename(upload.filename or ""))
        filename = f"{uuid.uuid4().hex}{ext.lower()}"
        with open(self.path(filename), "wb") as out:
            shutil.copyfileobj(upload.file, out)
        logger.debug("Stored upload %r as %s", upload.filename, filename)
        return filename

    def save_all(self, uploads: Optional[Iterable[UploadFile]]) -> List[str]:
        return [self.save(u) for u in (uploads or []) if u is not None and u.filename]

    def delete(self, filename: Optional[str]) -> bool:
        """Remove a file. A missing file is not an error; returns whether one was removed."""
        if not filename:
            return False
        try:
            os.remove(self.path(filename))
        except FileNotFoundError:
            logger.debug("Media file %s already gone", filename)
            return False
        return True

    def delete_all(self, filenames: Iterable[Optional[str]]) -> int:
        return sum(1 for f in filenames if self.delete(f))
