"""
Configurações globais do Pytest para o Support Queue.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import pytest
import sys
from pathlib import Path

# Adicionar src ao path para imports sem instalação
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from support_queue.adapters.events.publishers import InMemoryEventPublisher  # noqa: E402
from support_queue.adapters.shared.unit_of_work import InMemoryUnitOfWork  # noqa: E402
from support_queue.config.container import reset_container  # noqa: E402
from support_queue.core.tickets.entities import Ticket  # noqa: E402
from support_queue.core.tickets.id_generator import TicketIdGenerator  # noqa: E402
from support_queue.core.tickets.priority_queue import TicketPriorityQueue  # noqa: E402


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container global limpo.
    """
    yield
    reset_container()


@pytest.fixture
def queue():
    """Fila vazia com capacidade padrão."""
    return TicketPriorityQueue()


@pytest.fixture
def id_generator():
    return TicketIdGenerator()


@pytest.fixture
def event_publisher():
    """Publisher em memória para testes."""
    return InMemoryEventPublisher()


@pytest.fixture
def uow(event_publisher):
    """UoW em memória entregando eventos ao publisher de teste."""
    return InMemoryUnitOfWork(event_publisher=event_publisher)


@pytest.fixture
def make_ticket():
    """
    Factory de tickets com valores default.

    Example:
        ticket = make_ticket(1, priority=3)
    """
    def _make(ticket_id: int, priority: int = 3, **kwargs) -> Ticket:
        kwargs.setdefault("creator", "user-123")
        kwargs.setdefault("request_type", "Software/app Installation")
        kwargs.setdefault("description", "Instalar editor de texto")
        return Ticket(id=ticket_id, priority=priority, **kwargs)

    return _make


@pytest.fixture
def assert_heap_property():
    """Verifica prioridade(pai) <= prioridade(filho) em todas as posições vivas."""
    def _check(queue: TicketPriorityQueue) -> None:
        tickets = queue.get_all_tickets()
        for i in range(1, len(tickets)):
            parent = (i - 1) // 2
            assert tickets[parent].priority <= tickets[i].priority, (
                f"Heap violado no índice {i}: "
                f"pai={tickets[parent].priority}, filho={tickets[i].priority}"
            )

    return _check


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (run with --run-slow)"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Pula testes de desempenho se --run-slow não foi passado."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="use --run-slow para executar")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow performance tests",
    )
