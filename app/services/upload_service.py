"""
Upload Service - stores uploaded files on local disk.
Files are served back from the uploads URL prefix.
"""
import logging
import re
import time
from pathlib import Path

from app.core.config import settings

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9\-_]")


def safe_filename(original_name: str, millis: int) -> str:
    """`report v2.pdf` -> `report_v2_<millis>.pdf`"""
    path = Path(original_name or "file")
    base = _UNSAFE_CHARS.sub("_", path.stem) or "file"
    return f"{base}_{millis}{path.suffix}"


class FileStorage:
    def __init__(self, root, url_prefix: str = "/uploads"):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")

    def save(self, original_name: str, content: bytes, content_type: str = "") -> dict:
        self.root.mkdir(parents=True, exist_ok=True)
        file_name = safe_filename(original_name, int(time.time() * 1000))
        (self.root / file_name).write_bytes(content)
        logger.info(f"[UPLOAD] Stored {original_name} as {file_name} ({len(content)} bytes)")
        return {
            "success": True,
            "fileName": file_name,
            "originalName": original_name,
            "fileUrl": f"{self.url_prefix}/{file_name}",
            "fileType": content_type or "",
            "fileSize": len(content),
        }

    def delete(self, file_name: str) -> bool:
        """Remove a stored file; only the final path component is honoured."""
        target = self.root / Path(file_name).name
        if target.is_file():
            target.unlink()
            logger.info(f"[UPLOAD] Deleted {target.name}")
            return True
        return False


def get_file_storage() -> FileStorage:
    """Dependency for the upload directory."""
    return FileStorage(settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX)
