# ============================================================================
# RABBITMQ BINDING HANDLER
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Handler - Message broker
# PURPOSE: Bind rabbitmq-<version> services to an AMQP connection
# CREATED: 19 OCT 2026
# ============================================================================
"""
RabbitMQ Binding Handler

Credentials: url (amqp:// URI)
Aliases: mq, rabbitmq
Handle: aio_pika Connection

aio_pika.connect() resolves once, on ready or on error, so the init task
settles exactly once even though the broker connection is event driven.
Plain connect() rather than connect_robust(): a failed bind is not retried.
"""

from typing import Any, Dict

from core.contracts import ServiceKind
from handlers.base import BindingHandler


class RabbitMQHandler(BindingHandler):
    """Binds RabbitMQ services."""

    family = "rabbitmq"
    kind = ServiceKind.MESSAGE_BROKER
    required_credentials = ("url",)
    category_alias = "mq"

    async def connect(self, credentials: Dict[str, Any]) -> Any:
        import aio_pika

        return await aio_pika.connect(credentials["url"])
