"""
Ponto de entrada de linha de comando.

Uso:
    support-queue
    support-queue --with-sample-data
    support-queue --capacity 10 --log-level DEBUG
    python -m support_queue
"""

import argparse
import logging
from typing import List, Optional

from dependency_injector.containers import DynamicContainer

from support_queue.config import settings
from support_queue.config.container import create_container
from support_queue.core.tickets.dtos import CriarTicketInputDTO

from .menu import ConsoleMenu

logger = logging.getLogger(__name__)

SAMPLE_TICKETS = [
    {
        'creator': 'Ana Souza',
        'request_type': 1,
        'description': 'Email de phishing recebido por vários usuários do financeiro.',
    },
    {
        'creator': 'Bruno Lima',
        'request_type': 2,
        'description': 'Wi-Fi do segundo andar caindo a cada poucos minutos.',
    },
    {
        'creator': 'Carla Dias',
        'request_type': 3,
        'description': 'Instalar ferramenta de BI na estação de trabalho.',
    },
    {
        'creator': 'Diego Alves',
        'request_type': 4,
        'description': 'Configurar notebook para novo colaborador.',
    },
    {
        'creator': 'Elisa Rocha',
        'request_type': 2,
        'description': 'VPN não conecta fora do escritório.',
    },
]


def create_sample_data(container: DynamicContainer) -> int:
    """
    Cria tickets de exemplo.

    Returns:
        Quantidade de tickets criados
    """
    service = container.criar_ticket_service()

    for data in SAMPLE_TICKETS:
        service.execute(CriarTicketInputDTO(**data))

    logger.info(f"{len(SAMPLE_TICKETS)} tickets de exemplo criados")
    return len(SAMPLE_TICKETS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='support-queue',
        description='Fila de tickets de suporte de TI por prioridade',
    )
    parser.add_argument(
        '--capacity',
        type=int,
        default=settings.QUEUE_INITIAL_CAPACITY,
        help='Capacidade inicial da fila (default: %(default)s)',
    )
    parser.add_argument(
        '--log-level',
        default=settings.LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        type=str.upper,
        help='Nível de log (default: %(default)s)',
    )
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Cria tickets de exemplo antes de abrir o menu',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Configura logging, monta o container e abre o menu.

    Returns:
        Código de saída do processo
    """
    args = build_parser().parse_args(argv)

    if args.capacity <= 0:
        build_parser().error('--capacity deve ser maior que 0')

    settings.configure_logging(args.log_level)

    container = create_container(queue_initial_capacity=args.capacity)

    if args.with_sample_data:
        create_sample_data(container)

    ConsoleMenu(container).run()
    return 0
