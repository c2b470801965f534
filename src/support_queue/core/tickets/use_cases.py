"""
Use Cases (Application Services) do Domínio de Tickets.

Este módulo contém os casos de uso da aplicação, que orquestram
a fila de prioridade, o gerador de IDs e os eventos de domínio.

Use Cases implementados:
- CriarTicketService: Cria ticket e insere na fila
- ProcessarProximoTicketService: Retira o ticket mais urgente
- BuscarTicketService: Busca ticket por ID
- AlterarPrioridadeService: Altera prioridade e reposiciona
- RemoverTicketService: Retira ticket da fila
- AtribuirTicketService: Define responsável
- ListarTicketsService: Lista tickets (ordenados ou não)
- ObterProximoTicketService: Consulta o próximo sem retirar
- EstatisticasTicketsService: Totais e contagem por prioridade
- LimparTicketsService: Esvazia a fila

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- "Não encontrado" é resultado esperado (None/False), não exceção
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from support_queue.core.shared.interfaces import UnitOfWork
from support_queue.core.shared.exceptions import ValidationError

from .ports import TicketQueue
from .entities import Ticket, TicketPriority, TicketStatus
from .id_generator import TicketIdGenerator
from .dtos import (
    CriarTicketInputDTO,
    AlterarPrioridadeInputDTO,
    AtribuirTicketInputDTO,
    TicketOutputDTO,
)
from .events import (
    TicketCriadoEvent,
    TicketProcessadoEvent,
    TicketPrioridadeAlteradaEvent,
    TicketRemovidoEvent,
    TicketAtribuidoEvent,
    FilaLimpaEvent,
)

logger = logging.getLogger(__name__)

# código -> (rótulo, prioridade)
RequestTypeTable = Dict[int, Tuple[str, int]]


@dataclass
class TicketCounters:
    """Totais acumulados durante a vida do processo."""

    total_criados: int = 0
    total_processados: int = 0

    def reset(self) -> None:
        self.total_criados = 0
        self.total_processados = 0


class CriarTicketService:
    """
    Use Case: Criar um novo ticket.

    Fluxo:
    1. Validar criador e descrição
    2. Traduzir código do tipo de requisição em rótulo e prioridade
    3. Gerar ID
    4. Criar entidade e evento TicketCriado
    5. Inserir na fila e publicar o evento
    6. Retornar DTO de saída

    Example:
        service = CriarTicketService(fila, gerador, uow, contadores, REQUEST_TYPES)
        output = service.execute(
            CriarTicketInputDTO(creator="Ana", request_type=2, description="VPN caiu")
        )
        print(output.id)  # 1000
    """

    def __init__(
        self,
        queue: TicketQueue,
        id_generator: TicketIdGenerator,
        uow: UnitOfWork,
        counters: TicketCounters,
        request_types: RequestTypeTable,
    ):
        """
        Inicializa service com dependências injetadas.

        Args:
            queue: Fila de prioridade
            id_generator: Gerador de IDs
            uow: Unit of Work para publicação de eventos
            counters: Totais do processo
            request_types: Tabela código -> (rótulo, prioridade)
        """
        self.queue = queue
        self.id_generator = id_generator
        self.uow = uow
        self.counters = counters
        self.request_types = request_types

    def execute(self, input_dto: CriarTicketInputDTO) -> TicketOutputDTO:
        """
        Executa criação de ticket.

        Args:
            input_dto: Dados de entrada

        Returns:
            DTO com dados do ticket criado

        Raises:
            ValidationError: Se criador/descrição vazios ou tipo inválido
        """
        if not input_dto.creator or not input_dto.creator.strip():
            raise ValidationError("Criador não pode ser vazio", field="creator")

        if not input_dto.description or not input_dto.description.strip():
            raise ValidationError("Descrição não pode ser vazia", field="description")

        try:
            label, priority = self.request_types[input_dto.request_type]
        except (KeyError, TypeError):
            raise ValidationError(
                f"Tipo de requisição inválido: {input_dto.request_type}. "
                f"Use um valor entre {min(self.request_types)} e {max(self.request_types)}",
                field="request_type"
            )

        with self.uow:
            ticket = Ticket(
                id=self.id_generator.next(),
                creator=input_dto.creator.strip(),
                priority=priority,
                request_type=label,
                description=input_dto.description.strip(),
            )
            event = TicketCriadoEvent(
                aggregate_id=ticket.id,
                creator=ticket.creator,
                request_type=ticket.request_type,
                priority=ticket.priority,
            )

            # Fila e contadores só mudam depois que tudo foi construído
            self.queue.insert(ticket)
            self.counters.total_criados += 1
            self.uow.publish_event(event)

        logger.info(f"Ticket #{ticket.id} criado (prioridade {ticket.priority})")

        return TicketOutputDTO.from_entity(ticket)


class ProcessarProximoTicketService:
    """
    Use Case: Retirar o ticket mais urgente para atendimento.

    O ticket sai da fila com status IN_PROGRESS e conta como processado.
    """

    def __init__(self, queue: TicketQueue, uow: UnitOfWork, counters: TicketCounters):
        self.queue = queue
        self.uow = uow
        self.counters = counters

    def execute(self) -> Optional[TicketOutputDTO]:
        """
        Processa o próximo ticket.

        Returns:
            DTO do ticket retirado, ou None se fila vazia
        """
        with self.uow:
            ticket = self.queue.extract_min()

            if ticket is None:
                logger.info("Nenhum ticket na fila para processar")
                return None

            ticket.set_status(TicketStatus.IN_PROGRESS)
            self.counters.total_processados += 1

            self.uow.publish_event(
                TicketProcessadoEvent(
                    aggregate_id=ticket.id,
                    priority=ticket.priority,
                    restantes=self.queue.size,
                )
            )

        logger.info(f"Processando ticket #{ticket.id}")

        return TicketOutputDTO.from_entity(ticket)


class BuscarTicketService:
    """
    Use Case: Buscar ticket por ID.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, queue: TicketQueue):
        self.queue = queue

    def execute(self, ticket_id: int) -> Optional[TicketOutputDTO]:
        """
        Busca ticket.

        Args:
            ticket_id: ID do ticket

        Returns:
            DTO do ticket, ou None se não encontrado
        """
        ticket = self.queue.search(ticket_id)

        if ticket is None:
            logger.info(f"Ticket #{ticket_id} não encontrado")
            return None

        return TicketOutputDTO.from_entity(ticket)


class AlterarPrioridadeService:
    """
    Use Case: Alterar prioridade de um ticket que está na fila.
    """

    def __init__(self, queue: TicketQueue, uow: UnitOfWork):
        self.queue = queue
        self.uow = uow

    def execute(self, input_dto: AlterarPrioridadeInputDTO) -> bool:
        """
        Altera prioridade e reposiciona o ticket na fila.

        Args:
            input_dto: Dados da alteração

        Returns:
            True se atualizado, False se ticket não encontrado

        Raises:
            ValidationError: Se prioridade fora de 1..4
        """
        nova_prioridade = TicketPriority.validate(
            input_dto.nova_prioridade, field_name="nova_prioridade"
        )

        with self.uow:
            ticket = self.queue.search(input_dto.ticket_id)

            if ticket is None:
                logger.info(f"Ticket #{input_dto.ticket_id} não encontrado")
                return False

            prioridade_anterior = ticket.priority
            self.queue.update_priority(input_dto.ticket_id, nova_prioridade)

            self.uow.publish_event(
                TicketPrioridadeAlteradaEvent(
                    aggregate_id=ticket.id,
                    prioridade_anterior=prioridade_anterior,
                    prioridade_nova=nova_prioridade,
                )
            )

        logger.info(
            f"Prioridade do ticket #{input_dto.ticket_id}: "
            f"{prioridade_anterior} -> {nova_prioridade}"
        )

        return True


class RemoverTicketService:
    """
    Use Case: Retirar um ticket da fila sem processá-lo.

    O ticket removido é marcado como CLOSED.
    """

    def __init__(self, queue: TicketQueue, uow: UnitOfWork):
        self.queue = queue
        self.uow = uow

    def execute(self, ticket_id: int) -> Optional[TicketOutputDTO]:
        """
        Remove ticket.

        Args:
            ticket_id: ID do ticket

        Returns:
            DTO do ticket removido, ou None se não encontrado
        """
        with self.uow:
            ticket = self.queue.remove(ticket_id)

            if ticket is None:
                logger.info(f"Ticket #{ticket_id} não encontrado")
                return None

            ticket.set_status(TicketStatus.CLOSED)

            self.uow.publish_event(
                TicketRemovidoEvent(
                    aggregate_id=ticket.id,
                    priority=ticket.priority,
                )
            )

        logger.info(f"Ticket #{ticket_id} removido")

        return TicketOutputDTO.from_entity(ticket)


class AtribuirTicketService:
    """
    Use Case: Atribuir responsável a um ticket.

    Atribuição muda status para IN_PROGRESS. A posição na fila
    não muda, pois a prioridade é a mesma.
    """

    def __init__(self, queue: TicketQueue, uow: UnitOfWork):
        self.queue = queue
        self.uow = uow

    def execute(self, input_dto: AtribuirTicketInputDTO) -> bool:
        """
        Atribui responsável.

        Args:
            input_dto: Dados da atribuição

        Returns:
            True se atribuído, False se ticket não encontrado

        Raises:
            ValidationError: Se responsável vazio
        """
        if not input_dto.owner or not input_dto.owner.strip():
            raise ValidationError("Responsável não pode ser vazio", field="owner")

        owner = input_dto.owner.strip()

        with self.uow:
            ticket = self.queue.search(input_dto.ticket_id)

            if ticket is None:
                logger.info(f"Ticket #{input_dto.ticket_id} não encontrado")
                return False

            owner_anterior = ticket.owner
            ticket.set_owner(owner)
            ticket.set_status(TicketStatus.IN_PROGRESS)

            self.uow.publish_event(
                TicketAtribuidoEvent(
                    aggregate_id=ticket.id,
                    owner=owner,
                    owner_anterior=owner_anterior,
                )
            )

        logger.info(f"Ticket #{input_dto.ticket_id} atribuído a {owner}")

        return True


class ListarTicketsService:
    """
    Use Case: Listar tickets da fila.
    """

    def __init__(self, queue: TicketQueue):
        self.queue = queue

    def execute(self, ordenado: bool = True) -> List[TicketOutputDTO]:
        """
        Lista tickets.

        Args:
            ordenado: Se True, ordena por prioridade; senão ordem do heap

        Returns:
            Lista de DTOs
        """
        if ordenado:
            tickets = self.queue.get_all_tickets_sorted()
        else:
            tickets = self.queue.get_all_tickets()

        return [TicketOutputDTO.from_entity(t) for t in tickets]


class ObterProximoTicketService:
    """
    Use Case: Consultar o próximo ticket sem retirá-lo da fila.
    """

    def __init__(self, queue: TicketQueue):
        self.queue = queue

    def execute(self) -> Optional[TicketOutputDTO]:
        ticket = self.queue.peek()
        return TicketOutputDTO.from_entity(ticket) if ticket else None


class EstatisticasTicketsService:
    """
    Use Case: Obter estatísticas da fila.
    """

    def __init__(self, queue: TicketQueue, counters: TicketCounters):
        self.queue = queue
        self.counters = counters

    def execute(self) -> dict:
        """
        Retorna totais e contagem por prioridade.

        Returns:
            Dict com estatísticas
        """
        por_prioridade = {int(p): 0 for p in TicketPriority}
        for ticket in self.queue.get_all_tickets():
            por_prioridade[ticket.priority] += 1

        return {
            "total_criados": self.counters.total_criados,
            "total_processados": self.counters.total_processados,
            "na_fila": self.queue.size,
            "por_prioridade": por_prioridade,
        }


class LimparTicketsService:
    """
    Use Case: Esvaziar a fila.

    Atenção: operação irreversível.
    """

    QUEUE_AGGREGATE_ID = "fila"

    def __init__(self, queue: TicketQueue, uow: UnitOfWork):
        self.queue = queue
        self.uow = uow

    def execute(self) -> int:
        """
        Remove todos os tickets.

        Returns:
            Quantidade de tickets descartados
        """
        with self.uow:
            descartados = self.queue.size
            self.queue.clear()

            self.uow.publish_event(
                FilaLimpaEvent(
                    aggregate_id=self.QUEUE_AGGREGATE_ID,
                    descartados=descartados,
                )
            )

        logger.warning(f"Fila esvaziada: {descartados} tickets descartados")

        return descartados
