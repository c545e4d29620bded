# backend/services/upload_service.py
"""
Local file storage for uploaded images.

Files land under ``settings.UPLOAD_DIR/<folder>/`` and are served by the
static mount at ``/uploads``.
"""

import hashlib
import logging
import os
import time
from pathlib import Path
from typing import Dict

from fastapi import HTTPException, UploadFile

from config.settings import settings

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp"}


class UploadService:
    def __init__(self, root: str = None, max_bytes: int = None):
        self.root = Path(root or settings.UPLOAD_DIR)
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_MB * 1024 * 1024

    def save_image(self, file: UploadFile, folder: str, owner_id: int) -> Dict[str, str]:
        """Validate and store one image; returns its public url and disk path."""
        content = file.file.read()
        filename = file.filename or "upload"
        self.validate_image_file(content, filename)

        target_dir = self.root / folder
        target_dir.mkdir(parents=True, exist_ok=True)
        stored_name = self._generate_filename(owner_id, filename)
        path = target_dir / stored_name
        path.write_bytes(content)

        logger.info("Stored upload %s (%d bytes)", path, len(content))
        return {"url": f"/uploads/{folder}/{stored_name}", "path": str(path)}

    def validate_image_file(self, file_content: bytes, filename: str) -> bool:
        file_ext = os.path.splitext(filename)[1].lower()
        if file_ext not in ALLOWED_EXTENSIONS:
            raise HTTPException(
                status_code=400,
                detail=f"Unsupported file type. Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
            )

        if len(file_content) > self.max_bytes:
            raise HTTPException(status_code=400, detail=f"File exceeds {settings.MAX_UPLOAD_MB}MB")

        if not self._is_valid_image_header(file_content):
            raise HTTPException(status_code=400, detail="File is not a valid image")

        return True

    def delete_file(self, url: str) -> bool:
        if not url or not url.startswith("/uploads/"):
            return False
        path = self.root / url[len("/uploads/"):]
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            return False

    def _generate_filename(self, owner_id: int, filename: str) -> str:
        ext = os.path.splitext(filename)[1].lower()
        stamp = hashlib.md5(f"{filename}{time.time_ns()}".encode()).hexdigest()[:12]
        return f"{owner_id}_{int(time.time())}_{stamp}{ext}"

    def _is_valid_image_header(self, file_content: bytes) -> bool:
        if len(file_content) < 10:
            return False

        # JPEG
        if file_content.startswith(b"\xff\xd8\xff"):
            return True

        # PNG
        if file_content.startswith(b"\x89PNG\r\n\x1a\n"):
            return True

        # GIF
        if file_content.startswith((b"GIF87a", b"GIF89a")):
            return True

        # BMP
        if file_content.startswith(b"BM"):
            return True

        # WebP
        if file_content[8:12] == b"WEBP":
            return True

        return False


def get_upload_service() -> UploadService:
    return UploadService()
