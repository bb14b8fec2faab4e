"""Messaging: Redis list producer for export jobs."""

from app.infrastructure.messaging.export_producer import RedisQueueProducer

__all__ = ["RedisQueueProducer"]
