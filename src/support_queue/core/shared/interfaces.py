"""
Ports do core: o que os use cases esperam dos adapters.

Os use cases só conhecem estas abstrações; as implementações
(UoW em memória, publishers de log/memória) ficam em adapters/.
"""

from abc import ABC, abstractmethod
from typing import List

from .events import DomainEvent


class UnitOfWork(ABC):
    """
    Delimita uma operação de use case e segura seus eventos.

    A fila vive em memória, então não há transação de banco: o UoW
    apenas garante que eventos só são publicados quando o bloco
    termina sem erro. Se o bloco lançar exceção, os eventos
    enfileirados são descartados e a exceção segue adiante.

        with uow:
            fila.insert(ticket)
            uow.publish_event(TicketCriadoEvent(...))
        # commit() ao sair sem erro, rollback() se houve exceção
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False

    @abstractmethod
    def _begin(self) -> None:
        """Abre uma nova unidade (chamado por __enter__)."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Fecha a unidade entregando os eventos pendentes."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Fecha a unidade descartando os eventos pendentes."""
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """
        Guarda evento até o commit.

        Args:
            event: Evento gerado pelo use case
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Eventos ainda pendentes (cópia)."""
        return list(self._events)

    def clear_events(self) -> None:
        self._events.clear()


class EventPublisher(ABC):
    """
    Destino dos eventos após commit.

    Implementações: log, memória (testes) e nulo.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Entrega um evento.

        Args:
            event: Evento já comitado
        """
        raise NotImplementedError

    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Entrega vários eventos, na ordem recebida."""
        for event in events:
            self.publish(event)
