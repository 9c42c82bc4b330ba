# ==============================================================================
# IMAGE CLEANUP - Best-effort Remote Deletion
# ==============================================================================

from __future__ import annotations

import logging
from typing import Iterable

from starlette.concurrency import run_in_threadpool

from artverse.storage.interface import ImageStorage

logger = logging.getLogger(__name__)


async def discard_images(storage: ImageStorage, public_ids: Iterable[str]) -> int:
    """
    Delete hosted images without ever failing the caller.

    The blocking client runs in the threadpool. Every failure is logged
    and skipped.

    Args:
        storage: Image host
        public_ids: Keys of images that are no longer referenced

    Returns:
        Number of images the host confirmed as deleted
    """
    deleted = 0
    for public_id in public_ids:
        if not public_id:
            continue
        try:
            if await run_in_threadpool(storage.delete, public_id):
                deleted += 1
        except Exception:
            logger.exception(f"Failed to delete image {public_id}")
    return deleted
