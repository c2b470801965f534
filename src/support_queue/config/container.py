"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância por container (fila, gerador de IDs,
  contadores, publisher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Valores vindos de settings/ambiente
"""

from typing import Optional

from dependency_injector import containers, providers

from support_queue.adapters.events.publishers import get_event_publisher
from support_queue.adapters.shared.unit_of_work import InMemoryUnitOfWork
from support_queue.core.tickets.id_generator import TicketIdGenerator
from support_queue.core.tickets.priority_queue import TicketPriorityQueue
from support_queue.core.tickets import use_cases

from . import settings


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Variáveis de ambiente/settings
    - Infrastructure: Publisher de eventos, Unit of Work
    - Domínio: Fila, gerador de IDs, contadores
    - Services: Use Cases

    Example:
        container = create_container(queue_initial_capacity=2)

        service = container.criar_ticket_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    request_types = providers.Object(settings.REQUEST_TYPES)

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        get_event_publisher,
        log_events=config.publish_events_to_log,
    )

    unit_of_work = providers.Factory(
        InMemoryUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Domínio (Singleton - um estado por processo)
    # =========================================================================

    ticket_queue = providers.Singleton(
        TicketPriorityQueue,
        initial_capacity=config.queue_initial_capacity,
    )

    id_generator = providers.Singleton(
        TicketIdGenerator,
        start=config.ticket_id_start,
    )

    counters = providers.Singleton(use_cases.TicketCounters)

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    criar_ticket_service = providers.Factory(
        use_cases.CriarTicketService,
        queue=ticket_queue,
        id_generator=id_generator,
        uow=unit_of_work,
        counters=counters,
        request_types=request_types,
    )

    processar_proximo_ticket_service = providers.Factory(
        use_cases.ProcessarProximoTicketService,
        queue=ticket_queue,
        uow=unit_of_work,
        counters=counters,
    )

    buscar_ticket_service = providers.Factory(
        use_cases.BuscarTicketService,
        queue=ticket_queue,
    )

    alterar_prioridade_service = providers.Factory(
        use_cases.AlterarPrioridadeService,
        queue=ticket_queue,
        uow=unit_of_work,
    )

    remover_ticket_service = providers.Factory(
        use_cases.RemoverTicketService,
        queue=ticket_queue,
        uow=unit_of_work,
    )

    atribuir_ticket_service = providers.Factory(
        use_cases.AtribuirTicketService,
        queue=ticket_queue,
        uow=unit_of_work,
    )

    listar_tickets_service = providers.Factory(
        use_cases.ListarTicketsService,
        queue=ticket_queue,
    )

    obter_proximo_ticket_service = providers.Factory(
        use_cases.ObterProximoTicketService,
        queue=ticket_queue,
    )

    estatisticas_service = providers.Factory(
        use_cases.EstatisticasTicketsService,
        queue=ticket_queue,
        counters=counters,
    )

    limpar_tickets_service = providers.Factory(
        use_cases.LimparTicketsService,
        queue=ticket_queue,
        uow=unit_of_work,
    )


def create_container(**overrides) -> containers.DynamicContainer:
    """
    Cria container configurado a partir de settings.

    Args:
        **overrides: Valores que substituem settings
            (ex: queue_initial_capacity=2)

    Returns:
        Container pronto para uso
    """
    container = Container()
    container.config.from_dict({**settings.as_container_config(), **overrides})
    return container


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[containers.DynamicContainer] = None


def get_container() -> containers.DynamicContainer:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = create_container()

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None
