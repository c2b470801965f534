"""
Data Transfer Objects (DTOs) do Domínio de Tickets.

DTOs são estruturas simples para transportar dados entre camadas,
evitando que o menu de console segure referências para entidades
que ainda estão dentro da fila.

Tipos de DTOs:
- Input DTOs: Dados de entrada vindos do menu/CLI
- Output DTOs: Fotografia de um ticket para exibição
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import Ticket


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarTicketInputDTO:
    """
    DTO de entrada para criar ticket.

    Attributes:
        creator: Nome de quem abre o ticket
        request_type: Código do tipo de requisição (1 a 4)
        description: Descrição do problema
    """

    creator: str
    request_type: int
    description: str


@dataclass(frozen=True)
class AlterarPrioridadeInputDTO:
    """
    DTO de entrada para alterar prioridade.

    Attributes:
        ticket_id: ID do ticket
        nova_prioridade: Nova prioridade (1 a 4)
    """

    ticket_id: int
    nova_prioridade: int


@dataclass(frozen=True)
class AtribuirTicketInputDTO:
    """
    DTO de entrada para atribuir responsável.

    Attributes:
        ticket_id: ID do ticket
        owner: Nome do responsável
    """

    ticket_id: int
    owner: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass(frozen=True)
class TicketOutputDTO:
    """
    DTO de saída com todos os dados do ticket.

    Attributes:
        id: Identificador único
        creator: Quem abriu
        owner: Responsável (se atribuído)
        request_type: Rótulo do tipo de requisição
        description: Descrição do problema
        priority: Prioridade numérica (1 a 4)
        priority_description: Descrição da prioridade
        status: Nome do status (ex: "OPEN")
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização
    """

    id: int
    creator: str
    owner: Optional[str]
    request_type: str
    description: str
    priority: int
    priority_description: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: Ticket) -> "TicketOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Ticket

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            creator=entity.creator,
            owner=entity.owner,
            request_type=entity.request_type,
            description=entity.description,
            priority=entity.priority,
            priority_description=entity.priority_description,
            status=entity.status.name,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
