# This file stores uploaded images on disk and hands back the public URL for each one.
# Filenames are built from the current time in milliseconds plus a random suffix and keep
# the original extension; files are opened in exclusive mode so a name is never reused.
# Size limits are checked for the whole batch before anything is written.

from __future__ import annotations

import logging
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from unity_mall.api.error_handlers import FileTooLargeError, ValidationError

LOGGER = logging.getLogger("unity_mall.uploads")

_MAX_NAME_ATTEMPTS = 5


@dataclass(frozen=True)
class PendingUpload:
    original_name: str
    content: bytes


def _has_payload(file: UploadFile | None) -> bool:
    return file is not None and bool(file.filename)


class UploadStore:
    """Flat upload directory served under a fixed URL prefix."""

    def __init__(self, *, upload_dir: str | Path, url_prefix: str, max_file_bytes: int) -> None:
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_file_bytes = max_file_bytes

    def ensure_directory(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def generate_filename(self, original_name: str | None) -> str:
        suffix = Path(original_name or "").suffix
        return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{suffix}"

    def url_for(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    async def save_many(
        self, files: Sequence[UploadFile] | None, *, required: bool = True
    ) -> list[str]:
        """Persist every file and return one public URL per file, in request order."""

        present = [file for file in (files or []) if _has_payload(file)]
        if not present:
            if required:
                raise ValidationError("No files uploaded")
            return []

        pending = [await self._read_checked(file) for file in present]
        urls: list[str] = []
        for item in pending:
            filename = await run_in_threadpool(self._write, item)
            urls.append(self.url_for(filename))
        return urls

    async def save_one(self, file: UploadFile | None) -> str | None:
        if not _has_payload(file):
            return None
        urls = await self.save_many([file], required=True)
        return urls[0]

    async def _read_checked(self, file: UploadFile) -> PendingUpload:
        # At most one byte past the limit is buffered.
        content = await file.read(self.max_file_bytes + 1)
        if len(content) > self.max_file_bytes:
            raise FileTooLargeError(filename=file.filename, limit_bytes=self.max_file_bytes)
        return PendingUpload(original_name=file.filename or "", content=content)

    def _write(self, item: PendingUpload) -> str:
        directory = self.ensure_directory()
        for _ in range(_MAX_NAME_ATTEMPTS):
            filename = self.generate_filename(item.original_name)
            try:
                with open(directory / filename, "xb") as handle:
                    handle.write(item.content)
            except FileExistsError:
                continue
            LOGGER.info("Stored upload original=%s stored=%s bytes=%d", item.original_name, filename, len(item.content))
            return filename
        raise RuntimeError(f"Could not allocate a unique upload filename in {directory}")
