"""
Testes Unitários para Use Cases do Domínio de Tickets.

Testa os serviços de aplicação (use cases) que orquestram
a fila de prioridade, o gerador de IDs e os eventos.

Estratégia de Teste:
- Fila real (TicketPriorityQueue) e UoW em memória
- InMemoryEventPublisher para verificar eventos publicados
- Testa cenários de sucesso, não encontrado e erro

Coverage:
- CriarTicketService
- ProcessarProximoTicketService
- BuscarTicketService
- AlterarPrioridadeService
- RemoverTicketService
- AtribuirTicketService
- ListarTicketsService
- ObterProximoTicketService
- EstatisticasTicketsService
- LimparTicketsService
"""

import pytest

from support_queue.config import settings
from support_queue.core.tickets.use_cases import (
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
from support_queue.core.tickets.dtos import (
    CriarTicketInputDTO,
    AlterarPrioridadeInputDTO,
    AtribuirTicketInputDTO,
)
from support_queue.core.tickets.entities import TicketStatus
from support_queue.core.tickets.id_generator import TicketIdGenerator
from support_queue.core.tickets.events import (
    TicketCriadoEvent,
    TicketProcessadoEvent,
    TicketPrioridadeAlteradaEvent,
    TicketRemovidoEvent,
    TicketAtribuidoEvent,
    FilaLimpaEvent,
)
from support_queue.core.shared.exceptions import ValidationError


@pytest.fixture
def counters():
    return TicketCounters()


@pytest.fixture
def criar(queue, id_generator, uow, counters):
    """Service de criação com a tabela padrão de tipos."""
    return CriarTicketService(
        queue=queue,
        id_generator=id_generator,
        uow=uow,
        counters=counters,
        request_types=settings.REQUEST_TYPES,
    )


@pytest.fixture
def novo_ticket(criar):
    """
    Factory que cria tickets pelo service.

    Example:
        output = novo_ticket(2)  # Network Issue
    """
    def _create(request_type: int = 3, creator: str = "Ana", description: str = "Problema"):
        return criar.execute(
            CriarTicketInputDTO(
                creator=creator,
                request_type=request_type,
                description=description,
            )
        )

    return _create


class TestCriarTicketService:

    def test_criar_ticket_sucesso(self, criar, queue, counters):
        output = criar.execute(
            CriarTicketInputDTO(
                creator="  Ana  ",
                request_type=2,
                description=" Sem acesso à VPN ",
            )
        )

        assert output.id == 1000
        assert output.creator == "Ana"
        assert output.description == "Sem acesso à VPN"
        assert output.request_type == "Network Issue"
        assert output.priority == 2
        assert output.status == "OPEN"
        assert output.owner is None

        assert queue.size == 1
        assert queue.search(1000) is not None
        assert counters.total_criados == 1

    @pytest.mark.parametrize("request_type,label,priority", [
        (1, "Security Issue", 1),
        (2, "Network Issue", 2),
        (3, "Software/app Installation", 3),
        (4, "New Computer configuration", 4),
    ])
    def test_tipo_define_prioridade(self, criar, request_type, label, priority):
        output = criar.execute(
            CriarTicketInputDTO(creator="Ana", request_type=request_type, description="x")
        )

        assert output.request_type == label
        assert output.priority == priority

    def test_ids_sequenciais(self, novo_ticket):
        ids = [novo_ticket().id for _ in range(3)]
        assert ids == [1000, 1001, 1002]

    def test_gerador_comecando_em_zero(self, queue, uow, counters, event_publisher):
        service = CriarTicketService(
            queue=queue,
            id_generator=TicketIdGenerator(start=0),
            uow=uow,
            counters=counters,
            request_types=settings.REQUEST_TYPES,
        )

        output = service.execute(CriarTicketInputDTO(creator="Ana", request_type=2, description="VPN"))

        assert output.id == 0
        assert queue.search(0) is not None
        assert counters.total_criados == 1
        assert event_publisher.published_events[0].aggregate_id == "0"

    def test_publica_evento(self, novo_ticket, event_publisher):
        output = novo_ticket(1, creator="Bruno")

        events = event_publisher.get_events_by_type("TicketCriadoEvent")
        assert len(events) == 1

        event = events[0]
        assert isinstance(event, TicketCriadoEvent)
        assert event.aggregate_id == str(output.id)
        assert event.creator == "Bruno"
        assert event.priority == 1

    @pytest.mark.parametrize("request_type", [0, 5, None, "2"])
    def test_tipo_invalido_erro(self, criar, queue, id_generator, event_publisher, request_type):
        with pytest.raises(ValidationError) as exc_info:
            criar.execute(
                CriarTicketInputDTO(creator="Ana", request_type=request_type, description="x")
            )

        assert exc_info.value.field == "request_type"
        assert queue.size == 0
        assert id_generator.current == 1000
        assert event_publisher.published_events == []

    @pytest.mark.parametrize("creator", ["", "   "])
    def test_criador_vazio_erro(self, criar, queue, creator):
        with pytest.raises(ValidationError) as exc_info:
            criar.execute(CriarTicketInputDTO(creator=creator, request_type=1, description="x"))

        assert exc_info.value.field == "creator"
        assert queue.size == 0

    def test_descricao_vazia_erro(self, criar, counters):
        with pytest.raises(ValidationError) as exc_info:
            criar.execute(CriarTicketInputDTO(creator="Ana", request_type=1, description="  "))

        assert exc_info.value.field == "description"
        assert counters.total_criados == 0


class TestProcessarProximoTicketService:

    @pytest.fixture
    def service(self, queue, uow, counters):
        return ProcessarProximoTicketService(queue=queue, uow=uow, counters=counters)

    def test_processa_mais_urgente(self, service, novo_ticket, queue, counters):
        novo_ticket(4)
        urgente = novo_ticket(1)
        novo_ticket(2)

        output = service.execute()

        assert output.id == urgente.id
        assert output.status == "IN_PROGRESS"
        assert queue.size == 2
        assert queue.search(urgente.id) is None
        assert counters.total_processados == 1

    def test_fila_vazia_retorna_none(self, service, counters, event_publisher):
        assert service.execute() is None
        assert counters.total_processados == 0
        assert event_publisher.published_events == []

    def test_publica_evento_com_restantes(self, service, novo_ticket, event_publisher):
        novo_ticket(2)
        novo_ticket(3)

        service.execute()

        events = event_publisher.get_events_by_type("TicketProcessadoEvent")
        assert len(events) == 1
        assert isinstance(events[0], TicketProcessadoEvent)
        assert events[0].restantes == 1
        assert events[0].priority == 2


class TestBuscarTicketService:

    def test_busca_existente(self, queue, novo_ticket):
        criado = novo_ticket(3, creator="Carla")

        output = BuscarTicketService(queue).execute(criado.id)

        assert output.id == criado.id
        assert output.creator == "Carla"

    def test_busca_inexistente(self, queue, novo_ticket):
        novo_ticket()
        assert BuscarTicketService(queue).execute(9999) is None


class TestAlterarPrioridadeService:

    @pytest.fixture
    def service(self, queue, uow):
        return AlterarPrioridadeService(queue=queue, uow=uow)

    def test_altera_e_reposiciona(self, service, novo_ticket, queue):
        novo_ticket(2)
        baixo = novo_ticket(4)

        assert service.execute(AlterarPrioridadeInputDTO(ticket_id=baixo.id, nova_prioridade=1))

        assert queue.peek().id == baixo.id
        assert queue.search(baixo.id).priority == 1

    def test_ticket_inexistente(self, service, novo_ticket, event_publisher):
        novo_ticket()
        event_publisher.clear()

        assert service.execute(AlterarPrioridadeInputDTO(ticket_id=9999, nova_prioridade=1)) is False
        assert event_publisher.published_events == []

    @pytest.mark.parametrize("prioridade", [0, 5])
    def test_prioridade_invalida_erro(self, service, novo_ticket, queue, prioridade):
        criado = novo_ticket(3)

        with pytest.raises(ValidationError) as exc_info:
            service.execute(AlterarPrioridadeInputDTO(ticket_id=criado.id, nova_prioridade=prioridade))

        assert exc_info.value.field == "nova_prioridade"
        assert queue.search(criado.id).priority == 3

    def test_publica_evento(self, service, novo_ticket, event_publisher):
        criado = novo_ticket(4)

        service.execute(AlterarPrioridadeInputDTO(ticket_id=criado.id, nova_prioridade=2))

        events = event_publisher.get_events_by_type("TicketPrioridadeAlteradaEvent")
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, TicketPrioridadeAlteradaEvent)
        assert event.prioridade_anterior == 4
        assert event.prioridade_nova == 2
        assert event.escalonado is True


class TestRemoverTicketService:

    @pytest.fixture
    def service(self, queue, uow):
        return RemoverTicketService(queue=queue, uow=uow)

    def test_remove_e_fecha(self, service, novo_ticket, queue):
        a = novo_ticket(1)
        b = novo_ticket(2)

        output = service.execute(b.id)

        assert output.id == b.id
        assert output.status == "CLOSED"
        assert queue.size == 1
        assert queue.search(b.id) is None
        assert queue.search(a.id) is not None

    def test_remove_inexistente(self, service, novo_ticket, queue):
        novo_ticket()

        assert service.execute(9999) is None
        assert queue.size == 1

    def test_publica_evento(self, service, novo_ticket, event_publisher):
        criado = novo_ticket(3)

        service.execute(criado.id)

        events = event_publisher.get_events_by_type("TicketRemovidoEvent")
        assert len(events) == 1
        assert isinstance(events[0], TicketRemovidoEvent)
        assert events[0].aggregate_id == str(criado.id)


class TestAtribuirTicketService:

    @pytest.fixture
    def service(self, queue, uow):
        return AtribuirTicketService(queue=queue, uow=uow)

    def test_atribui_e_inicia_atendimento(self, service, novo_ticket, queue):
        criado = novo_ticket(2)

        assert service.execute(AtribuirTicketInputDTO(ticket_id=criado.id, owner=" Carlos ")) is True

        ticket = queue.search(criado.id)
        assert ticket.owner == "Carlos"
        assert ticket.status == TicketStatus.IN_PROGRESS
        assert ticket.priority == 2

    def test_atribui_inexistente(self, service, novo_ticket):
        novo_ticket()
        assert service.execute(AtribuirTicketInputDTO(ticket_id=9999, owner="Carlos")) is False

    @pytest.mark.parametrize("owner", ["", "   "])
    def test_responsavel_vazio_erro(self, service, novo_ticket, owner):
        criado = novo_ticket()

        with pytest.raises(ValidationError) as exc_info:
            service.execute(AtribuirTicketInputDTO(ticket_id=criado.id, owner=owner))

        assert exc_info.value.field == "owner"

    def test_reatribuicao_registra_anterior(self, service, novo_ticket, event_publisher):
        criado = novo_ticket()

        service.execute(AtribuirTicketInputDTO(ticket_id=criado.id, owner="Carlos"))
        service.execute(AtribuirTicketInputDTO(ticket_id=criado.id, owner="Diana"))

        events = event_publisher.get_events_by_type("TicketAtribuidoEvent")
        assert len(events) == 2
        assert isinstance(events[1], TicketAtribuidoEvent)
        assert events[0].to_dict()["data"] == {"owner": "Carlos"}
        assert events[1].to_dict()["data"] == {"owner": "Diana", "owner_anterior": "Carlos"}


class TestListarTicketsService:

    def test_lista_ordenada(self, queue, novo_ticket):
        for request_type in (3, 1, 4, 2):
            novo_ticket(request_type)

        outputs = ListarTicketsService(queue).execute(ordenado=True)

        assert [o.priority for o in outputs] == [1, 2, 3, 4]

    def test_lista_ordem_do_heap(self, queue, novo_ticket):
        for request_type in (3, 1, 4, 2):
            novo_ticket(request_type)

        outputs = ListarTicketsService(queue).execute(ordenado=False)

        assert [o.id for o in outputs] == [t.id for t in queue.get_all_tickets()]
        assert outputs[0].priority == 1

    def test_lista_vazia(self, queue):
        assert ListarTicketsService(queue).execute() == []


class TestObterProximoTicketService:

    def test_proximo_sem_remover(self, queue, novo_ticket):
        novo_ticket(3)
        urgente = novo_ticket(1)

        output = ObterProximoTicketService(queue).execute()

        assert output.id == urgente.id
        assert queue.size == 2

    def test_proximo_fila_vazia(self, queue):
        assert ObterProximoTicketService(queue).execute() is None


class TestEstatisticasTicketsService:

    def test_estatisticas(self, queue, uow, counters, novo_ticket):
        for request_type in (1, 2, 2, 4, 4, 4):
            novo_ticket(request_type)
        ProcessarProximoTicketService(queue, uow, counters).execute()

        stats = EstatisticasTicketsService(queue, counters).execute()

        assert stats == {
            "total_criados": 6,
            "total_processados": 1,
            "na_fila": 5,
            "por_prioridade": {1: 0, 2: 2, 3: 0, 4: 3},
        }

    def test_estatisticas_fila_vazia(self, queue, counters):
        stats = EstatisticasTicketsService(queue, counters).execute()

        assert stats["na_fila"] == 0
        assert stats["por_prioridade"] == {1: 0, 2: 0, 3: 0, 4: 0}


class TestLimparTicketsService:

    def test_limpa_fila(self, queue, uow, novo_ticket, counters, event_publisher):
        for _ in range(3):
            novo_ticket()

        descartados = LimparTicketsService(queue, uow).execute()

        assert descartados == 3
        assert queue.is_empty()
        assert counters.total_criados == 3

        events = event_publisher.get_events_by_type("FilaLimpaEvent")
        assert len(events) == 1
        assert isinstance(events[0], FilaLimpaEvent)
        assert events[0].descartados == 3
        assert events[0].aggregate_id == "fila"
        assert events[0].aggregate_type == "Fila"

    def test_limpa_fila_vazia(self, queue, uow):
        assert LimparTicketsService(queue, uow).execute() == 0


class TestTicketCounters:

    def test_reset(self):
        counters = TicketCounters(total_criados=3, total_processados=2)

        counters.reset()

        assert counters.total_criados == 0
        assert counters.total_processados == 0
