"""
Image replacement for records that carry a media URL.

Uploading a new image for an existing record must not orphan the previous
object in storage, and nothing is deleted before its replacement exists:
upload first, then delete the superseded key.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlsplit

import requests

from pura_admin.services.api_client import StorageApi
from pura_admin.utils.errors import ApiError, error_message
from pura_admin.utils.logging import logger
from pura_admin.utils.typing import StagedFile, UploadResult

def storage_key_from_url(url: str, prefix: str = "") -> Optional[str]:
    """Storage key for a URL whose key was never seen: its final path segment."""
    if not url:
        return None
    segment = urlsplit(url).path.rstrip("/").rsplit("/", 1)[-1]
    if not segment:
        return None
    return f"{prefix}{segment}"

@dataclass
class ReplaceOutcome:
    upload: UploadResult
    deleted_key: Optional[str] = None
    cleanup_error: Optional[str] = None

class ImageReplacer:
    def __init__(self, storage: StorageApi, key_prefix: str = ""):
        self.storage = storage
        self.key_prefix = key_prefix
        self._keys: Dict[str, str] = {}

    def remember(self, upload: UploadResult) -> None:
        if upload.url and upload.key:
            self._keys[upload.url] = upload.key

    def key_for(self, url: str) -> Optional[str]:
        return self._keys.get(url) or storage_key_from_url(url, self.key_prefix)

    def replace(self, file: StagedFile, old_url: str = "", editing: bool = False) -> ReplaceOutcome:
        """Upload ``file``; when editing and the URL changed, delete the old object.

        A failed upload raises. A failed delete of the old object does not: the
        new image already exists, so the outcome carries ``cleanup_error`` and
        the caller decides how loudly to report the orphan.
        """
        upload = self.storage.upload(file)
        self.remember(upload)
        outcome = ReplaceOutcome(upload=upload)

        if not (editing and old_url and old_url != upload.url):
            return outcome

        key = self.key_for(old_url)
        if not key:
            logger.warning("media: cannot resolve storage key for %s", old_url)
            return outcome
        try:
            self.storage.delete(key)
            outcome.deleted_key = key
            self._keys.pop(old_url, None)
        except (ApiError, requests.RequestException) as e:
            logger.warning("media: old image %s left in storage: %s", key, e)
            outcome.cleanup_error = f"Old image {key} could not be removed: {error_message(e, 'unknown error')}"
        return outcome

    def discard(self, url: str) -> Optional[str]:
        """Delete the stored object behind ``url``. Errors propagate."""
        key = self.key_for(url)
        if not key:
            return None
        self.storage.delete(key)
        self._keys.pop(url, None)
        return key
