"""Publicadores de eventos de domínio."""

from .publishers import (
    LoggingEventPublisher,
    InMemoryEventPublisher,
    NullEventPublisher,
    get_event_publisher,
)

__all__ = [
    "LoggingEventPublisher",
    "InMemoryEventPublisher",
    "NullEventPublisher",
    "get_event_publisher",
]
