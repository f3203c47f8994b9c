# ============================================================================
# REDIS BINDING HANDLER
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Handler - Key-value cache
# PURPOSE: Bind redis-<version> services to an async Redis client
# CREATED: 19 OCT 2026
# ============================================================================
"""
Redis Binding Handler

Credentials: host, port, password
Aliases: cache, redis
Handle: redis.asyncio.Redis, verified with PING before it is published
"""

from typing import Any, Dict

from core.contracts import ServiceKind
from handlers.base import BindingHandler


class RedisHandler(BindingHandler):
    """Binds Redis services."""

    family = "redis"
    kind = ServiceKind.KEY_VALUE_CACHE
    required_credentials = ("host", "port", "password")
    category_alias = "cache"

    async def connect(self, credentials: Dict[str, Any]) -> Any:
        from redis.asyncio import Redis

        client = Redis(
            host=credentials["host"],
            port=int(credentials["port"]),
            password=credentials["password"],
        )
        try:
            await client.ping()
        except Exception:
            await client.aclose()
            raise
        return client
