"""
Freaky Fit API - Redis Cache Service.

Redis-backed key/value cache used for the logout token blacklist and for
exercise video lookups. Lazy-initializes and fails open so the API keeps
serving when Redis is down.
"""

import json
import logging
from typing import Optional, Any
from datetime import datetime, timedelta

from settings import settings

logger = logging.getLogger(__name__)


class CacheService:
    """
    Redis cache service.

    Uses Redis for fast key-value storage with TTL support.
    Lazy-initializes to allow app startup without Redis.
    Includes circuit breaker pattern for resilience.
    """

    def __init__(self, redis_url: str, enabled: bool = True):
        """Initialize Redis cache client (lazy connection)."""
        self._redis_url = redis_url
        self._client = None
        self._available = None if enabled else False
        self._circuit_open_until = None
        self._failure_count = 0
        self._circuit_threshold = 5
        self._circuit_timeout = 60
        self.logger = logging.getLogger(__name__)

    def _is_circuit_open(self) -> bool:
        """Check if circuit breaker is open."""
        if self._circuit_open_until:
            if datetime.now() < self._circuit_open_until:
                return True
            # Circuit timeout expired, allow retry
            self._circuit_open_until = None
            self._failure_count = 0
        return False

    def _record_failure(self):
        """Record failure and potentially open circuit."""
        self._failure_count += 1
        if self._failure_count >= self._circuit_threshold:
            self._circuit_open_until = datetime.now() + timedelta(seconds=self._circuit_timeout)
            self.logger.warning(
                f"Circuit breaker OPEN for {self._circuit_timeout}s after {self._failure_count} failures"
            )

    def _record_success(self):
        """Reset failure counter on success."""
        if self._failure_count > 0:
            self._failure_count = 0
            self.logger.info("Circuit breaker reset after successful operation")

    @property
    def client(self):
        """Lazy-load Redis client."""
        if self._client is None:
            try:
                import redis.asyncio as redis
                self._client = redis.from_url(
                    self._redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                    max_connections=50,
                    socket_connect_timeout=5,
                    socket_timeout=5,
                )
            except Exception as e:
                self.logger.warning(f"Redis init failed: {e}")
                self._available = False
        return self._client

    @property
    def usable(self) -> bool:
        return self._available is not False and not self._is_circuit_open()

    async def get(self, key: str) -> Optional[Any]:
        """Get cached value by key with circuit breaker."""
        if not self.usable:
            return None
        try:
            if self.client is None:
                return None
            value = await self.client.get(key)
            self._record_success()
            if value:
                self.logger.debug(f"Cache hit: {key}")
                return json.loads(value)
            return None
        except Exception as e:
            self.logger.debug(f"Cache get error: {e}")
            self._record_failure()
            return None

    async def set(self, key: str, value: Any, ttl_seconds: int = 3600) -> bool:
        """Set cached value with TTL and circuit breaker."""
        if not self.usable:
            return False
        try:
            if self.client is None:
                return False
            await self.client.setex(key, ttl_seconds, json.dumps(value))
            self._record_success()
            return True
        except Exception as e:
            self.logger.debug(f"Cache set error: {e}")
            self._record_failure()
            return False

    async def healthcheck(self) -> bool:
        """Check Redis connection health."""
        if self._available is False:
            return False
        try:
            if self.client is None:
                return False
            await self.client.ping()
            self._available = True
            self._record_success()
            return True
        except Exception:
            self._record_failure()
            return False


# Global cache instance - lazy initialized
cache_service = CacheService(settings.REDIS_URL, enabled=settings.CACHE_ENABLED)
