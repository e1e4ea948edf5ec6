from ..config import settings
from .memory_provider import MemoryStorageProvider
from .provider import StorageProvider
from .sql_provider import SqlStorageProvider


def get_storage() -> StorageProvider:
    """
    Get storage provider based on configuration.
    ``STORAGE_PROVIDER=sql`` (default) persists to ``DATABASE_URL``;
    ``memory`` keeps everything in process, e.g. for demos and tests.
    """
    if settings.storage_provider == "memory":
        return MemoryStorageProvider()
    return SqlStorageProvider(settings.database_url)
