"""
Entidades do Domínio de Tickets.

Este módulo define as entidades de domínio que encapsulam
regras de negócio relacionadas a tickets de suporte de TI.

Entidades:
- Ticket: Requisição de suporte (identidade imutável, estado mutável)
- TicketStatus: Estados possíveis de um ticket
- TicketPriority: Níveis de prioridade (1 = mais urgente)

Regras de Negócio Encapsuladas:
- Criador obrigatório
- Prioridade sempre no intervalo 1..4 (rejeitada, nunca ajustada)
- Todo mutador atualiza updated_at
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional, Union

from support_queue.core.shared.exceptions import ValidationError


class TicketStatus(Enum):
    """
    Estados possíveis de um ticket.

    Fluxo usual:
        OPEN → IN_PROGRESS → RESOLVED → CLOSED

    A fila não lê nem altera status; quem muda é a camada de aplicação.
    """

    OPEN = "Aberto"
    IN_PROGRESS = "Em Progresso"
    RESOLVED = "Resolvido"
    CLOSED = "Fechado"

    @classmethod
    def from_string(cls, value: str) -> "TicketStatus":
        """
        Converte string para enum.

        Args:
            value: Valor string (nome ou valor do enum)

        Returns:
            TicketStatus correspondente

        Raises:
            ValidationError: Se valor inválido
        """
        # Tenta pelo nome (IN_PROGRESS)
        try:
            return cls[value.strip().upper().replace(" ", "_")]
        except KeyError:
            pass

        # Tenta pelo valor ("Em Progresso")
        for status in cls:
            if status.value.lower() == value.strip().lower():
                return status

        raise ValidationError(f"Status inválido: {value}", field="status")


class TicketPriority(IntEnum):
    """
    Níveis de prioridade. Quanto menor o número, mais urgente.

        1: Segurança (mais alta)
        2: Rede
        3: Instalação de software/aplicativo
        4: Configuração de computador novo (mais baixa)
    """

    SECURITY = 1
    NETWORK = 2
    SOFTWARE = 3
    NEW_COMPUTER = 4

    @property
    def description(self) -> str:
        """Descrição legível da prioridade."""
        descriptions = {
            TicketPriority.SECURITY: "Security Issue (Highest)",
            TicketPriority.NETWORK: "Network Issue",
            TicketPriority.SOFTWARE: "Software/app Installation",
            TicketPriority.NEW_COMPUTER: "New Computer configuration",
        }
        return descriptions[self]

    @classmethod
    def validate(cls, value, field_name: str = "priority") -> int:
        """
        Garante que value é uma prioridade válida.

        Args:
            value: Valor recebido (int ou TicketPriority)
            field_name: Nome do campo para a mensagem de erro

        Returns:
            O valor como int

        Raises:
            ValidationError: Se não for inteiro entre 1 e 4
        """
        # bool é subclasse de int, mas True/False não são prioridades
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"Prioridade deve ser um inteiro entre {int(cls.SECURITY)} e {int(cls.NEW_COMPUTER)}",
                field=field_name,
            )

        if not cls.SECURITY <= value <= cls.NEW_COMPUTER:
            raise ValidationError(
                f"Prioridade deve estar entre {int(cls.SECURITY)} e {int(cls.NEW_COMPUTER)}",
                field=field_name,
            )

        return int(value)


@dataclass(eq=False)
class Ticket:
    """
    Entidade de Domínio: Ticket.

    Uma requisição de suporte de TI. O ID é atribuído externamente
    (TicketIdGenerator) e nunca muda; prioridade, status e responsável
    podem mudar ao longo da vida do ticket.

    Invariantes:
    - Criador não pode ser vazio ou só espaços
    - Prioridade sempre entre 1 e 4
    - updated_at é atualizado a cada mutação

    Attributes:
        id: Identificador único (inteiro, a partir de 1000)
        creator: Quem abriu o ticket
        request_type: Rótulo do tipo de requisição
        description: Descrição do problema
        priority: Nível de prioridade (1 a 4)
        status: Estado atual do ticket
        owner: Responsável pela resolução (opcional)
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização

    Example:
        ticket = Ticket(
            id=1000,
            creator="Ana",
            request_type="Network Issue",
            description="Sem acesso à VPN",
            priority=2,
        )
        ticket.set_owner("Carlos")
        ticket.set_status(TicketStatus.IN_PROGRESS)
    """

    id: int
    creator: str
    priority: int
    request_type: str = ""
    description: str = ""
    status: TicketStatus = field(default=TicketStatus.OPEN)
    owner: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = None

    def __post_init__(self):
        self._validar_criador(self.creator)
        self.priority = TicketPriority.validate(self.priority)
        if self.updated_at is None:
            self.updated_at = self.created_at

    @staticmethod
    def _validar_criador(creator: str) -> None:
        """Valida criador do ticket."""
        if creator is None or not str(creator).strip():
            raise ValidationError(
                "Criador não pode ser vazio",
                field="creator"
            )

    def set_priority(self, priority: int) -> None:
        """
        Altera prioridade do ticket.

        Não reposiciona o ticket na fila; para isso use
        TicketPriorityQueue.update_priority().

        Args:
            priority: Nova prioridade (1 a 4)

        Raises:
            ValidationError: Se fora do intervalo
        """
        self.priority = TicketPriority.validate(priority)
        self._atualizar_timestamp()

    def set_status(self, status: Union[TicketStatus, str]) -> None:
        """
        Altera status do ticket.

        Args:
            status: Novo status (enum ou nome/valor em string)

        Raises:
            ValidationError: Se não for TicketStatus nem string conhecida
        """
        if isinstance(status, str):
            status = TicketStatus.from_string(status)
        elif not isinstance(status, TicketStatus):
            raise ValidationError(f"Status inválido: {status!r}", field="status")
        self.status = status
        self._atualizar_timestamp()

    def set_owner(self, owner: Optional[str]) -> None:
        """
        Define o responsável pelo ticket.

        Args:
            owner: Nome de quem vai resolver o problema
        """
        self.owner = owner
        self._atualizar_timestamp()

    def _atualizar_timestamp(self) -> None:
        """Atualiza timestamp de modificação."""
        self.updated_at = datetime.now()

    @property
    def priority_description(self) -> str:
        """Descrição da prioridade atual."""
        return TicketPriority(self.priority).description

    @property
    def esta_atribuido(self) -> bool:
        """Verifica se ticket tem responsável."""
        return self.owner is not None

    def __repr__(self) -> str:
        return (
            f"Ticket("
            f"id={self.id}, "
            f"priority={self.priority}, "
            f"status={self.status.name}, "
            f"creator='{self.creator[:20]}'"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Ticket):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
