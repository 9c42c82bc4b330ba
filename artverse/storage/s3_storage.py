# ==============================================================================
# S3 IMAGE STORAGE - boto3 Implementation
# ==============================================================================

from __future__ import annotations

import logging

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from artverse.core.exceptions import StorageError
from artverse.core.settings import Settings
from artverse.storage.interface import ImageStorage

logger = logging.getLogger(__name__)


class S3ImageStorage(ImageStorage):
    """
    Image storage backed by an S3 bucket.

    The ``public_id`` of an image is its object key.
    """

    def __init__(self, settings: Settings) -> None:
        missing = [
            name
            for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_STORAGE_BUCKET_NAME")
            if not getattr(settings, name)
        ]
        if missing:
            raise StorageError(f"Missing required S3 settings: {', '.join(missing)}")

        self.bucket_name = settings.AWS_STORAGE_BUCKET_NAME
        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_S3_REGION_NAME,
            endpoint_url=settings.AWS_S3_ENDPOINT_URL,
            config=BotoConfig(signature_version="s3v4", s3={"addressing_style": "path"}),
        )

    def delete(self, public_id: str) -> bool:
        """Delete an object from the bucket."""
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=public_id)
            logger.info(f"Deleted image from S3: {public_id}")
            return True
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to delete image from S3: {public_id}",
                details={"reason": str(e)},
            ) from e
