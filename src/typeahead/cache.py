"""Redis cache for suggestion results."""

import json
import logging
from typing import Any

import redis

logger = logging.getLogger(__name__)


class SuggestionCache:
    """key = <prefix>:<kind>:<params>:<query>, value = JSON payload.

    Any vocabulary change can alter fuzzy results for unrelated queries, so
    mutations clear the whole namespace instead of single keys.
    """

    def __init__(
        self,
        client: redis.Redis,
        key_prefix: str = "typeahead:cache",
        ttl_seconds: int = 3600,
    ) -> None:
        self.client = client
        self.prefix = key_prefix.rstrip(":")
        self.ttl = ttl_seconds

    def _key(self, kind: str, query: str, **params: Any) -> str:
        opts = ",".join(f"{k}={params[k]}" for k in sorted(params))
        return f"{self.prefix}:{kind}:{opts}:{query}"

    def get(self, kind: str, query: str, **params: Any) -> Any | None:
        """Return the cached payload, or None on a miss or a Redis error."""
        try:
            raw = self.client.get(self._key(kind, query, **params))
        except redis.RedisError as e:
            logger.warning("Cache read failed: %s", e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            return None

    def set(self, kind: str, query: str, value: Any, **params: Any) -> None:
        try:
            self.client.setex(self._key(kind, query, **params), self.ttl, json.dumps(value))
        except redis.RedisError as e:
            logger.warning("Cache write failed: %s", e)

    def clear(self) -> int:
        """Drop every cached result; returns the number of keys removed."""
        removed = 0
        try:
            for key in self.client.scan_iter(match=f"{self.prefix}:*"):
                removed += self.client.delete(key)
        except redis.RedisError as e:
            logger.warning("Cache clear failed: %s", e)
        return removed
