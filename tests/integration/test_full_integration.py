"""
Testes de Integração Completos.

Exercita o fluxo inteiro através do container de dependências:
Container -> Use Cases -> Fila de Prioridade -> UoW -> Publisher
"""

import random

import pytest
from dependency_injector import containers, providers

from support_queue.adapters.events.publishers import (
    InMemoryEventPublisher,
    LoggingEventPublisher,
    NullEventPublisher,
)
from support_queue.config.container import create_container, get_container, reset_container
from support_queue.core.tickets.dtos import (
    CriarTicketInputDTO,
    AlterarPrioridadeInputDTO,
    AtribuirTicketInputDTO,
)
from support_queue.core.shared.exceptions import ValidationError

pytestmark = pytest.mark.integration


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def container(publisher):
    """Container com publisher em memória."""
    container = create_container()
    container.event_publisher.override(providers.Object(publisher))
    yield container
    container.event_publisher.reset_override()


def criar(container, request_type, creator="Ana", description="Problema"):
    return container.criar_ticket_service().execute(
        CriarTicketInputDTO(creator=creator, request_type=request_type, description=description)
    )


class TestContainer:

    def test_singletons_compartilhados(self, container):
        assert container.ticket_queue() is container.ticket_queue()
        assert container.id_generator() is container.id_generator()
        assert container.counters() is container.counters()

    def test_services_novos_por_chamada(self, container):
        assert container.criar_ticket_service() is not container.criar_ticket_service()
        assert container.unit_of_work() is not container.unit_of_work()

    def test_overrides_de_configuracao(self):
        container = create_container(queue_initial_capacity=2, ticket_id_start=1)

        assert container.ticket_queue().capacity == 2
        assert criar(container, 1).id == 1

    def test_publisher_conforme_configuracao(self):
        assert isinstance(
            create_container(publish_events_to_log=True).event_publisher(),
            LoggingEventPublisher,
        )
        assert isinstance(
            create_container(publish_events_to_log=False).event_publisher(),
            NullEventPublisher,
        )

    def test_containers_isolados(self):
        a = create_container()
        b = create_container()

        criar(a, 1)

        assert a.ticket_queue().size == 1
        assert b.ticket_queue().is_empty()

    def test_container_global(self):
        first = get_container()

        assert isinstance(first, containers.DynamicContainer)
        assert first.criar_ticket_service is not None
        assert get_container() is first

        reset_container()

        assert get_container() is not first


class TestFluxoCompleto:

    def test_ciclo_de_vida(self, container, publisher):
        """Criar -> escalar -> atribuir -> processar -> remover -> estatísticas."""
        rede = criar(container, 2, creator="Bruno")
        computador = criar(container, 4, creator="Diego")
        software = criar(container, 3, creator="Carla")

        assert container.obter_proximo_ticket_service().execute().id == rede.id

        container.alterar_prioridade_service().execute(
            AlterarPrioridadeInputDTO(ticket_id=computador.id, nova_prioridade=1)
        )
        container.atribuir_ticket_service().execute(
            AtribuirTicketInputDTO(ticket_id=computador.id, owner="Equipe TI")
        )

        processado = container.processar_proximo_ticket_service().execute()
        assert processado.id == computador.id
        assert processado.owner == "Equipe TI"
        assert processado.status == "IN_PROGRESS"

        removido = container.remover_ticket_service().execute(software.id)
        assert removido.status == "CLOSED"

        restantes = container.listar_tickets_service().execute()
        assert [t.id for t in restantes] == [rede.id]

        stats = container.estatisticas_service().execute()
        assert stats["total_criados"] == 3
        assert stats["total_processados"] == 1
        assert stats["na_fila"] == 1

        assert [e.event_type for e in publisher.published_events] == [
            "TicketCriadoEvent",
            "TicketCriadoEvent",
            "TicketCriadoEvent",
            "TicketPrioridadeAlteradaEvent",
            "TicketAtribuidoEvent",
            "TicketProcessadoEvent",
            "TicketRemovidoEvent",
        ]

    def test_erro_de_validacao_nao_publica(self, container, publisher):
        with pytest.raises(ValidationError):
            criar(container, 7)

        assert publisher.published_events == []
        assert container.ticket_queue().is_empty()

    def test_fila_utilizavel_apos_erro(self, container):
        criado = criar(container, 3)

        with pytest.raises(ValidationError):
            container.alterar_prioridade_service().execute(
                AlterarPrioridadeInputDTO(ticket_id=criado.id, nova_prioridade=0)
            )

        assert container.processar_proximo_ticket_service().execute().id == criado.id

    def test_limpar_mantem_contadores(self, container):
        for request_type in (1, 2, 3):
            criar(container, request_type)

        assert container.limpar_tickets_service().execute() == 3

        stats = container.estatisticas_service().execute()
        assert stats["na_fila"] == 0
        assert stats["total_criados"] == 3

        assert criar(container, 1).id == 1003

    def test_primeiro_id_zero(self, publisher):
        """Com TICKET_ID_START=0 o ticket 0 é criado, buscado e processado normalmente."""
        container = create_container(ticket_id_start=0)
        container.event_publisher.override(providers.Object(publisher))

        criado = criar(container, 2)

        assert criado.id == 0
        assert container.ticket_queue().size == 1
        assert container.estatisticas_service().execute()["total_criados"] == 1
        assert container.buscar_ticket_service().execute(0).id == 0

        evento = publisher.get_events_by_type("TicketCriadoEvent")[0]
        assert evento.aggregate_id == "0"

        assert container.processar_proximo_ticket_service().execute().id == 0

        container.event_publisher.reset_override()

    def test_crescimento_da_fila_pelo_container(self, publisher):
        container = create_container(queue_initial_capacity=2)
        container.event_publisher.override(providers.Object(publisher))

        ids = [criar(container, request_type).id for request_type in (4, 3, 2, 1, 2)]

        queue = container.ticket_queue()
        assert queue.size == 5
        assert queue.capacity == 8
        for ticket_id in ids:
            assert container.buscar_ticket_service().execute(ticket_id) is not None

        container.event_publisher.reset_override()


@pytest.mark.slow
class TestDesempenho:

    def test_mil_tickets_pelo_container(self):
        container = create_container(queue_initial_capacity=10, publish_events_to_log=False)
        rng = random.Random(3)

        for _ in range(1000):
            criar(container, rng.randint(1, 4))

        processar = container.processar_proximo_ticket_service()
        priorities = [processar.execute().priority for _ in range(1000)]

        assert priorities == sorted(priorities)
        assert processar.execute() is None
        assert container.estatisticas_service().execute()["total_processados"] == 1000
