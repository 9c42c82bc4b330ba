# ==============================================================================
# DISABLED IMAGE STORAGE
# ==============================================================================

from __future__ import annotations

import logging

from artverse.storage.interface import ImageStorage

logger = logging.getLogger(__name__)


class DisabledImageStorage(ImageStorage):
    """Used when no image host is configured; deletions are only logged."""

    def delete(self, public_id: str) -> bool:
        logger.info(f"Image hosting disabled, skipping delete of {public_id}")
        return False
