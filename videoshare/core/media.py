"""Media file storage for uploads.

Files are written under ``settings.media_dir`` and served as static files;
no transcoding or probing happens here.
"""
import logging
import uuid
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import UploadFile

from videoshare.config import settings
from videoshare.utils.error_handling import PayloadTooLargeError, StorageError, ValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

VIDEO_EXTENSIONS = {".mp4", ".webm", ".mov", ".mkv"}
AUDIO_EXTENSIONS = {".mp3", ".wav", ".ogg", ".m4a"}
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".gif"}

MEDIA_EXTENSIONS = VIDEO_EXTENSIONS | AUDIO_EXTENSIONS


class MediaStorage:
    """Writes uploads to disk and maps them to public URLs."""

    def __init__(
        self,
        root: Optional[Path] = None,
        url_prefix: Optional[str] = None,
        max_bytes: Optional[int] = None
    ):
        self.root = Path(root or settings.media_dir)
        self.url_prefix = (url_prefix or settings.media_url_prefix).rstrip("/")
        self.max_bytes = max_bytes or settings.max_upload_bytes

    def ensure_dirs(self) -> None:
        for subdir in ("videos", "thumbnails", "avatars", "banners"):
            (self.root / subdir).mkdir(parents=True, exist_ok=True)

    def public_url(self, relative_path: str) -> str:
        return f"{self.url_prefix}/{relative_path}"

    def path_for_url(self, url: str) -> Optional[Path]:
        """Local path of a URL this storage produced, None for external URLs."""
        prefix = self.url_prefix + "/"
        if not url or not url.startswith(prefix):
            return None
        return self.root / url[len(prefix):]

    async def save(self, upload: UploadFile, subdir: str, allowed_extensions: set) -> str:
        """
        Stream an upload to disk.

        Args:
            upload: Incoming multipart file
            subdir: Target folder under the media root
            allowed_extensions: Accepted lowercase suffixes

        Returns:
            Public URL of the stored file

        Raises:
            ValidationError: Missing name or unsupported extension
            PayloadTooLargeError: File exceeds the configured limit
        """
        extension = Path(upload.filename or "").suffix.lower()
        if extension not in allowed_extensions:
            raise ValidationError(
                "unsupportedFileType",
                field="file",
                extension=extension or "?"
            )

        target_dir = self.root / subdir
        target_dir.mkdir(parents=True, exist_ok=True)
        file_name = f"{uuid.uuid4().hex}{extension}"
        file_path = target_dir / file_name

        total_size = 0
        try:
            async with aiofiles.open(file_path, "wb") as f:
                while chunk := await upload.read(CHUNK_SIZE):
                    total_size += len(chunk)
                    if total_size > self.max_bytes:
                        raise PayloadTooLargeError(self.max_bytes // (1024 * 1024))
                    await f.write(chunk)
        except PayloadTooLargeError:
            file_path.unlink(missing_ok=True)
            raise
        except OSError as e:
            file_path.unlink(missing_ok=True)
            logger.error(f"Failed to store upload {upload.filename}: {e}", exc_info=True)
            raise StorageError(details={"file": upload.filename})

        logger.info(
            "Stored upload",
            extra={"file": f"{subdir}/{file_name}", "bytes": total_size}
        )
        return self.public_url(f"{subdir}/{file_name}")

    def delete(self, url: str) -> None:
        """Remove a stored file; external URLs are ignored."""
        path = self.path_for_url(url)
        if path is None:
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not delete media file {path}: {e}")


def get_media_storage() -> MediaStorage:
    """Dependency returning storage bound to current settings."""
    return MediaStorage()
