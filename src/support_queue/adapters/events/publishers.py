"""
Publishers de eventos da fila.

- LoggingEventPublisher: uma linha de log por evento + handlers locais
- InMemoryEventPublisher: guarda eventos para asserções em testes
- NullEventPublisher: descarta (PUBLISH_EVENTS_TO_LOG=False)

Handlers locais são síncronos e chamados na thread do use case.
"""

from typing import Callable, Dict, List
import json
import logging

from support_queue.core.shared.events import DomainEvent
from support_queue.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class _HandlerRegistry:
    """Handlers indexados pelo nome da classe do evento."""

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """
        Registra handler.

        Args:
            event_type: Nome da classe do evento (ex: "TicketCriadoEvent")
            handler: Callable que recebe o evento
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        # Handler com erro não impede os demais
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")


class LoggingEventPublisher(_HandlerRegistry, EventPublisher):
    """
    Escreve cada evento no log do processo.

    Formato:
        [EVENT] TicketCriadoEvent | aggregate=1000 | data={"creator": "Ana", ...}
    """

    def __init__(self, log_level: int = logging.INFO):
        super().__init__()
        self._log_level = log_level

    def publish(self, event: DomainEvent) -> None:
        payload = json.dumps(event.to_dict()["data"], default=str, ensure_ascii=False)
        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | aggregate={event.aggregate_id} | data={payload}"
        )
        self._dispatch_to_handlers(event)


class InMemoryEventPublisher(_HandlerRegistry, EventPublisher):
    """Acumula eventos publicados, em ordem, para verificação."""

    def __init__(self):
        super().__init__()
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        self._dispatch_to_handlers(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return list(self._published_events)

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        """
        Filtra eventos publicados.

        Args:
            event_type: Nome da classe do evento

        Returns:
            Eventos daquele tipo, em ordem de publicação
        """
        return [e for e in self._published_events if e.event_type == event_type]


class NullEventPublisher(EventPublisher):
    """Descarta eventos."""

    def publish(self, event: DomainEvent) -> None:
        pass


def get_event_publisher(log_events: bool = True) -> EventPublisher:
    """
    Escolhe o publisher da aplicação.

    Args:
        log_events: Valor de PUBLISH_EVENTS_TO_LOG

    Returns:
        LoggingEventPublisher ou NullEventPublisher
    """
    return LoggingEventPublisher() if log_events else NullEventPublisher()
