# ============================================================================
# BINDING HANDLERS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Core - Handler registration and lookup
# PURPOSE: Binding handlers for supported backing services
# CREATED: 19 OCT 2026
# ============================================================================
"""
Binding Handlers

One handler per supported backing-service family, plus the ordered
registry the orchestrator queries.

Usage:
    from handlers import default_registry, MySQLHandler

    registry = default_registry()
    registry.register(MySQLHandler("5.6"))
"""

from handlers.base import BindingHandler, InitTask, Connector
from handlers.mongodb import MongoDBHandler
from handlers.rabbitmq import RabbitMQHandler
from handlers.mysql import MySQLHandler
from handlers.redis import RedisHandler
from handlers.registry import HandlerRegistry, default_registry

__all__ = [
    "BindingHandler",
    "InitTask",
    "Connector",
    "MongoDBHandler",
    "RabbitMQHandler",
    "MySQLHandler",
    "RedisHandler",
    "HandlerRegistry",
    "default_registry",
]
