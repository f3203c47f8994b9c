# ============================================================================
# MYSQL BINDING HANDLER
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Handler - Relational database
# PURPOSE: Bind mysql-<version> services to an async MySQL connection
# CREATED: 19 OCT 2026
# ============================================================================
"""
MySQL Binding Handler

Credentials: host, port, username, password (optional: name = database)
Aliases: db, mysql
Handle: aiomysql Connection (single connection, no pool)
"""

from typing import Any, Dict

from core.contracts import ServiceKind
from handlers.base import BindingHandler


class MySQLHandler(BindingHandler):
    """Binds MySQL services."""

    family = "mysql"
    kind = ServiceKind.RELATIONAL_DB
    required_credentials = ("host", "port", "username", "password")
    category_alias = "db"

    async def connect(self, credentials: Dict[str, Any]) -> Any:
        import aiomysql

        return await aiomysql.connect(
            host=credentials["host"],
            port=int(credentials["port"]),
            user=credentials["username"],
            password=credentials["password"],
            db=credentials.get("name"),
        )
