# app/storage/storage_provider.py
"""
Audio Storage Providers
Decide where the raw bytes of a voice note live.

- DatabaseStorage: the identifier IS the payload, base64 text kept in the note row
- RemoteObjectStorage: placeholder for an object store, every call raises
"""
import base64
import binascii
import logging
from abc import ABC, abstractmethod

from fastapi import Request

from app.shared.exceptions import UnimplementedError, ValidationError
from config.appconfig import AppSettings

logger = logging.getLogger(__name__)


class StorageProvider(ABC):
    """Contract shared by every audio storage backend."""

    @abstractmethod
    async def store(self, data: bytes, filename: str) -> str:
        """Persist ``data`` and return an identifier for ``retrieve``."""

    @abstractmethod
    async def retrieve(self, identifier: str) -> bytes:
        """Return the bytes previously stored under ``identifier``."""


class DatabaseStorage(StorageProvider):
    async def store(self, data: bytes, filename: str) -> str:
        encoded = base64.b64encode(data).decode("ascii")
        logger.debug(f"Encoded {filename} ({len(data)} bytes) for database storage")
        return encoded

    async def retrieve(self, identifier: str) -> bytes:
        try:
            return base64.b64decode(identifier, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValidationError(f"Malformed audio identifier: {e}") from e


class RemoteObjectStorage(StorageProvider):
    async def store(self, data: bytes, filename: str) -> str:
        raise UnimplementedError("Remote object storage not implemented")

    async def retrieve(self, identifier: str) -> bytes:
        raise UnimplementedError("Remote object storage not implemented")


def get_storage_provider(app_settings: AppSettings) -> StorageProvider:
    """Build the provider selected by STORAGE_BACKEND."""
    providers = {
        "database": DatabaseStorage,
        "remote": RemoteObjectStorage,
    }
    return providers[app_settings.STORAGE_BACKEND]()


async def get_storage(request: Request) -> StorageProvider:
    """FastAPI dependency returning the provider chosen at startup."""
    return request.app.state.storage
