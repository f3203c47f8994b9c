# ============================================================================
# MONGODB BINDING HANDLER
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Handler - Document store
# PURPOSE: Bind mongodb-<version> services to an async database handle
# CREATED: 19 OCT 2026
# ============================================================================
"""
MongoDB Binding Handler

Credentials: url (mongodb:// URI naming the database)
Aliases: db, mongodb
Handle: pymongo AsyncDatabase for the URI's default database
"""

from typing import Any, Dict

from core.contracts import ServiceKind
from handlers.base import BindingHandler


class MongoDBHandler(BindingHandler):
    """Binds MongoDB services."""

    family = "mongodb"
    kind = ServiceKind.DOCUMENT_STORE
    required_credentials = ("url",)
    category_alias = "db"

    async def connect(self, credentials: Dict[str, Any]) -> Any:
        from pymongo import AsyncMongoClient

        client = AsyncMongoClient(credentials["url"])
        try:
            await client.admin.command("ping")
            return client.get_default_database()
        except Exception:
            await client.close()
            raise
