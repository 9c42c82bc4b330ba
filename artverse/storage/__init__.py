# ==============================================================================
# STORAGE PACKAGE INITIALIZATION
# ==============================================================================

"""
Image Storage
=============

- ImageStorage: delete-by-reference contract
- S3ImageStorage / DisabledImageStorage: implementations
- discard_images: best-effort cleanup helper
- build_image_storage: picks the backend from settings
"""

import logging

from artverse.core.settings import Settings, StorageBackend
from artverse.storage.cleanup import discard_images
from artverse.storage.disabled_storage import DisabledImageStorage
from artverse.storage.interface import ImageStorage
from artverse.storage.s3_storage import S3ImageStorage

logger = logging.getLogger(__name__)


def build_image_storage(settings: Settings) -> ImageStorage:
    """Create the image storage backend selected by ``STORAGE_BACKEND``."""
    if settings.STORAGE_BACKEND == StorageBackend.S3:
        logger.info("Creating S3 image storage")
        return S3ImageStorage(settings)
    logger.info("Image storage disabled")
    return DisabledImageStorage()


__all__ = [
    "ImageStorage",
    "S3ImageStorage",
    "DisabledImageStorage",
    "discard_images",
    "build_image_storage",
]
