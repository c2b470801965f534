"""
Domain Events do Domínio de Tickets.

Este módulo define os eventos de domínio que são disparados
quando algo significativo acontece com tickets ou com a fila.

Eventos:
- TicketCriadoEvent: Novo ticket entrou na fila
- TicketProcessadoEvent: Ticket mais urgente saiu para atendimento
- TicketPrioridadeAlteradaEvent: Prioridade foi alterada
- TicketRemovidoEvent: Ticket foi retirado da fila
- TicketAtribuidoEvent: Ticket ganhou responsável
- FilaLimpaEvent: Todos os tickets foram descartados

Uso:
    Eventos são criados nos use cases e publicados através do
    UnitOfWork após o bloco terminar sem erro.

    with uow:
        fila.insert(ticket)
        uow.publish_event(TicketCriadoEvent(aggregate_id=ticket.id, ...))
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from support_queue.core.shared.events import DomainEvent


@dataclass(repr=False)
class TicketCriadoEvent(DomainEvent):
    """
    Evento: Ticket foi criado e inserido na fila.

    Attributes:
        creator: Quem abriu o ticket
        request_type: Rótulo do tipo de requisição
        priority: Prioridade inicial
    """

    creator: str = ""
    request_type: str = ""
    priority: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Ticket"


@dataclass(repr=False)
class TicketProcessadoEvent(DomainEvent):
    """
    Evento: Ticket mais urgente foi retirado para atendimento.

    Attributes:
        priority: Prioridade no momento da retirada
        restantes: Tickets que ficaram na fila
    """

    priority: int = 0
    restantes: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Ticket"


@dataclass(repr=False)
class TicketPrioridadeAlteradaEvent(DomainEvent):
    """
    Evento: Prioridade do ticket foi alterada.

    Attributes:
        prioridade_anterior: Prioridade antes da mudança
        prioridade_nova: Prioridade após a mudança
    """

    prioridade_anterior: int = 0
    prioridade_nova: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    @property
    def escalonado(self) -> bool:
        """True se o ticket ficou mais urgente."""
        return self.prioridade_nova < self.prioridade_anterior


@dataclass(repr=False)
class TicketRemovidoEvent(DomainEvent):
    """Evento: Ticket foi retirado da fila sem ser processado."""

    priority: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Ticket"


@dataclass(repr=False)
class TicketAtribuidoEvent(DomainEvent):
    """
    Evento: Ticket foi atribuído a um responsável.

    Attributes:
        owner: Responsável pela resolução
        owner_anterior: Responsável anterior (se havia)
    """

    owner: str = ""
    owner_anterior: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        data = {"owner": self.owner}
        if self.owner_anterior:
            data["owner_anterior"] = self.owner_anterior
        return data


@dataclass(repr=False)
class FilaLimpaEvent(DomainEvent):
    """
    Evento: Fila foi esvaziada.

    aggregate_id identifica a fila, não um ticket.

    Attributes:
        descartados: Quantos tickets foram descartados
    """

    descartados: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Fila"
