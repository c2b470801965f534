"""
Unit of Work em memória.

Não há banco para comitar: o UoW segura os eventos de domínio
durante o use case e os entrega ao publisher quando o bloco termina
sem erro. Em caso de exceção os eventos são descartados.
"""

from typing import List, Optional
import logging

from support_queue.core.shared.interfaces import UnitOfWork, EventPublisher
from support_queue.core.shared.events import DomainEvent

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work da fila de tickets.

    Reutilizável: cada `with uow:` abre uma nova unidade, então a
    mesma instância pode atender várias chamadas de um service.

    Example:
        uow = InMemoryUnitOfWork(event_publisher=LoggingEventPublisher())
        with uow:
            fila.insert(ticket)
            uow.publish_event(TicketCriadoEvent(aggregate_id=ticket.id))
        # evento entregue aqui
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        """
        Args:
            event_publisher: Destino dos eventos após commit (opcional)
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin(self) -> None:
        self._committed = False
        self._rolled_back = False

    def commit(self) -> None:
        if self._finalized:
            logger.warning("Unidade de trabalho já finalizada")
            return

        self._committed = True
        pending, self._events = self._events, []
        for event in pending:
            self._deliver(event)

    def rollback(self) -> None:
        if self._finalized:
            return

        self._rolled_back = True
        if self._events:
            logger.debug(f"Rollback: {len(self._events)} eventos descartados")
        self.clear_events()

    def _deliver(self, event: DomainEvent) -> None:
        """
        Entrega um evento ao publisher.

        Falha de entrega é logada e não propaga: a fila já foi alterada.
        """
        logger.debug(f"Publicando {event.event_type} de {event.aggregate_id}")

        if self._event_publisher is not None:
            try:
                self._event_publisher.publish(event)
            except Exception as e:
                logger.error(f"Falha ao publicar {event.event_type}: {e}")

        self._published_events.append(event)

    @property
    def _finalized(self) -> bool:
        return self._committed or self._rolled_back

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Eventos já entregues por esta instância."""
        return list(self._published_events)

    def reset(self) -> None:
        """Volta ao estado inicial (usado em testes)."""
        self._begin()
        self._published_events.clear()
        self.clear_events()
