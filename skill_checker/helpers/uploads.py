from typing import Optional, Tuple
from fastapi import UploadFile
from skill_checker.utils import config
from skill_checker.utils.exceptions import NoFileSelectedError, UploadTooLargeError


async def read_upload(file: UploadFile, limit: Optional[int] = None) -> Tuple[str, bytes]:
    """Read an uploaded file fully into memory; nothing touches the disk."""
    limit = limit or config.MAX_UPLOAD_BYTES
    data = await file.read(limit + 1)
    if not data:
        raise NoFileSelectedError("Uploaded file is empty")
    if len(data) > limit:
        raise UploadTooLargeError(len(data), limit)
    return file.filename or "", data
