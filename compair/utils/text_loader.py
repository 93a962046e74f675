import asyncio
from typing import Optional, Tuple

from fastapi import UploadFile

from compair.errors import LoaderError, MissingInputError, SourceReadError, SourceTooLargeError


def is_missing(upload: Optional[UploadFile]) -> bool:
    # browsers post an empty part with no filename for an unselected input
    return upload is None or not upload.filename


async def load_text_from_upload(upload: UploadFile, encoding: str = "utf-8", max_bytes: int = 0) -> str:
    """
    Read a FastAPI UploadFile fully into memory and decode it as text.
    max_bytes=0 means no size cap.
    """
    name = upload.filename or "upload"
    try:
        if max_bytes:
            contents = await upload.read(max_bytes + 1)
        else:
            contents = await upload.read()
    except OSError as e:
        raise SourceReadError(name, str(e)) from e

    if max_bytes and len(contents) > max_bytes:
        raise SourceTooLargeError(name, max_bytes)

    try:
        return contents.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise SourceReadError(name, str(e)) from e


async def load_text_pair(
    upload_a: Optional[UploadFile],
    upload_b: Optional[UploadFile],
    encoding: str = "utf-8",
    max_bytes: int = 0,
) -> Tuple[str, str]:
    """
    Load both sources concurrently and return (text_a, text_b).

    Both uploads are checked before either read starts. The reads are
    joined with asyncio.gather, so the pairing holds whichever finishes
    first; the first failure cancels the other read and is re-raised as a
    single LoaderError.
    """
    if is_missing(upload_a) or is_missing(upload_b):
        raise MissingInputError()

    tasks = [
        asyncio.ensure_future(load_text_from_upload(upload_a, encoding, max_bytes)),
        asyncio.ensure_future(load_text_from_upload(upload_b, encoding, max_bytes)),
    ]
    try:
        text_a, text_b = await asyncio.gather(*tasks)
    except LoaderError:
        _cancel_pending(tasks)
        raise
    except Exception as e:
        _cancel_pending(tasks)
        raise LoaderError(f"Could not read uploads: {e}") from e
    return text_a, text_b


def _cancel_pending(tasks) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()
