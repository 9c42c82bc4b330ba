# ==============================================================================
# IMAGE STORAGE INTERFACE
# ==============================================================================
# Contract for the image hosting collaborator (delete-by-reference)
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod


class ImageStorage(ABC):
    """
    Abstract interface for hosted images.

    Uploads happen client-side; the API only stores the returned
    ``public_id`` and asks the host to drop an image when a listing no
    longer references it.

    Concrete implementations:
        - S3ImageStorage: AWS S3 / S3-compatible buckets
        - DisabledImageStorage: no hosting configured
    """

    @abstractmethod
    def delete(self, public_id: str) -> bool:
        """
        Delete an image from the host.

        Args:
            public_id: Key of the image in the host

        Returns:
            True if the host acknowledged the deletion

        Raises:
            StorageError: If the host rejects the request
        """
        pass
