"""
Domínio de Tickets - Fila de requisições de suporte de TI.

Este módulo contém toda a lógica de negócio relacionada a tickets,
incluindo:
- Entidades (Ticket, TicketStatus, TicketPriority)
- Fila de prioridade (TicketPriorityQueue, min-heap)
- Gerador de IDs (TicketIdGenerator)
- Use Cases (CriarTicket, ProcessarProximoTicket, ...)
- Domain Events (TicketCriado, TicketProcessado, ...)
- DTOs (Input/Output Data Transfer Objects)
- Ports (TicketQueue)

Características do Domínio:
- O ticket mais urgente (prioridade 1) é sempre atendido primeiro
- Prioridade validada na entidade e na fila
- Ausência de ticket sinalizada por None/False
"""

from .entities import Ticket, TicketStatus, TicketPriority
from .priority_queue import TicketPriorityQueue
from .id_generator import TicketIdGenerator
from .events import (
    TicketCriadoEvent,
    TicketProcessadoEvent,
    TicketPrioridadeAlteradaEvent,
    TicketRemovidoEvent,
    TicketAtribuidoEvent,
    FilaLimpaEvent,
)
from .dtos import (
    CriarTicketInputDTO,
    AlterarPrioridadeInputDTO,
    AtribuirTicketInputDTO,
    TicketOutputDTO,
)
from .ports import TicketQueue
from .use_cases import (
    TicketCounters,
    CriarTicketService,
    ProcessarProximoTicketService,
    BuscarTicketService,
    AlterarPrioridadeService,
    RemoverTicketService,
    AtribuirTicketService,
    ListarTicketsService,
    ObterProximoTicketService,
    EstatisticasTicketsService,
    LimparTicketsService,
)

__all__ = [
    # Entities
    "Ticket",
    "TicketStatus",
    "TicketPriority",
    # Estruturas
    "TicketPriorityQueue",
    "TicketIdGenerator",
    # Events
    "TicketCriadoEvent",
    "TicketProcessadoEvent",
    "TicketPrioridadeAlteradaEvent",
    "TicketRemovidoEvent",
    "TicketAtribuidoEvent",
    "FilaLimpaEvent",
    # DTOs
    "CriarTicketInputDTO",
    "AlterarPrioridadeInputDTO",
    "AtribuirTicketInputDTO",
    "TicketOutputDTO",
    # Ports
    "TicketQueue",
    # Use Cases
    "TicketCounters",
    "CriarTicketService",
    "ProcessarProximoTicketService",
    "BuscarTicketService",
    "AlterarPrioridadeService",
    "RemoverTicketService",
    "AtribuirTicketService",
    "ListarTicketsService",
    "ObterProximoTicketService",
    "EstatisticasTicketsService",
    "LimparTicketsService",
]
