"""
MongoDB connection cache.

This module provides:
- ConnectionCache: lazily established, process-wide Motor client
- connection_cache: the shared instance, preserved across module reloads
- init_db / close_db: startup and shutdown helpers
"""

import asyncio
import logging
from typing import Any, Callable

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from evently.config import Settings, get_settings
from evently.database.indexes import ensure_indexes
from evently.exceptions import DatabaseNotConnectedError, MissingConfigurationError

logger = logging.getLogger(__name__)


class ConnectionCache:
    """
    Single shared MongoDB client for the life of the process.

    The first acquire() starts establishing the client; callers arriving while
    that attempt is in flight await the same attempt instead of opening a
    second connection. The pending check and assignment happen without an
    await in between, so only one attempt can ever be started per event loop.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ):
        self._settings = settings
        self._client_factory = client_factory
        self._client: AsyncIOMotorClient | None = None
        self._pending: asyncio.Future | None = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    async def acquire(self) -> AsyncIOMotorClient:
        """
        Return the live client, establishing it on first use.

        Raises:
            MissingConfigurationError: MONGODB_URI is not set
            PyMongoError: the server could not be reached
        """
        if self._client is not None:
            return self._client

        if self._pending is None:
            uri = self.settings.mongodb_uri
            if not uri:
                raise MissingConfigurationError(
                    "Please define the MONGODB_URI environment variable inside .env"
                )
            self._pending = asyncio.ensure_future(self._connect(uri))

        pending = self._pending
        try:
            client = await asyncio.shield(pending)
        except Exception:
            if self._pending is pending and pending.done():
                self._pending = None
            raise
        return client

    async def _connect(self, uri: str) -> AsyncIOMotorClient:
        logger.info(f"Connecting to MongoDB at {sanitize_mongodb_uri(uri)}")
        client = self._client_factory(
            uri,
            serverSelectionTimeoutMS=self.settings.mongodb_server_selection_timeout_ms,
            tz_aware=True,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB connection failed: {e}")
            client.close()
            raise
        logger.info("✓ MongoDB connection established")
        self._client = client
        return client

    def peek(self) -> AsyncIOMotorClient | None:
        """Return the current client without connecting."""
        return self._client

    def database(self) -> AsyncIOMotorDatabase:
        """
        Get the configured database on the live client.

        Raises:
            DatabaseNotConnectedError: acquire() has not completed yet
        """
        if self._client is None:
            raise DatabaseNotConnectedError("Database not connected. Call acquire() first.")
        return self._client[self.settings.mongodb_database]

    async def close(self) -> None:
        """Close the client and forget it."""
        if self._pending is not None and not self._pending.done():
            await asyncio.wait([self._pending])
        if self._client is not None:
            self._client.close()
            logger.info("Closed MongoDB connection")
        self._client = None
        self._pending = None

    async def ping(self) -> bool:
        """Check if the MongoDB connection is healthy."""
        if self._client is None:
            return False

        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError:
            return False

    def describe(self) -> dict:
        """Get connection information with credentials hidden."""
        settings = self.settings
        return {
            "status": "connected" if self._client is not None else "disconnected",
            "uri": sanitize_mongodb_uri(settings.mongodb_uri),
            "database": settings.mongodb_database,
            "environment": settings.environment,
        }


def sanitize_mongodb_uri(uri: str) -> str:
    """Hide the password in a MongoDB URI for safe logging."""
    if "@" not in uri or "://" not in uri:
        return uri

    scheme, rest = uri.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    if ":" not in credentials:
        return uri
    username = credentials.split(":", 1)[0]
    return f"{scheme}://{username}:***@{host}"


# Module globals are kept by importlib.reload, so the cache and its client
# survive hot reloads instead of being rebuilt.
try:
    connection_cache
except NameError:
    connection_cache = ConnectionCache()


async def init_db(cache: ConnectionCache | None = None) -> AsyncIOMotorDatabase:
    """Connect and make sure all indexes exist."""
    cache = cache or connection_cache
    await cache.acquire()
    db = cache.database()
    await ensure_indexes(db)
    return db


async def close_db(cache: ConnectionCache | None = None) -> None:
    await (cache or connection_cache).close()
