"""
Settings do Support Queue.

Usa variáveis de ambiente (com .env opcional) para tudo que pode
mudar entre execuções. Constantes de domínio configuráveis, como a
tabela de tipos de requisição, também ficam aqui.
"""

import logging.config
import os

from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Fila de Tickets
# =============================================================================

# Posições alocadas inicialmente no heap (dobra quando enche)
QUEUE_INITIAL_CAPACITY = int(os.getenv('QUEUE_INITIAL_CAPACITY', 100))

# Primeiro ID emitido pelo gerador
TICKET_ID_START = int(os.getenv('TICKET_ID_START', 1000))

# Código do menu -> (rótulo, prioridade)
REQUEST_TYPES = {
    1: ('Security Issue', 1),
    2: ('Network Issue', 2),
    3: ('Software/app Installation', 3),
    4: ('New Computer configuration', 4),
}

# =============================================================================
# Eventos
# =============================================================================

PUBLISH_EVENTS_TO_LOG = os.getenv('PUBLISH_EVENTS_TO_LOG', 'True').lower() in ('true', '1', 'yes')

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'support_queue.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'support_queue.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}


def configure_logging(level: str = None) -> None:
    """
    Aplica LOGGING via dictConfig.

    Args:
        level: Sobrescreve LOG_LEVEL (ex: "DEBUG")
    """
    config = LOGGING
    if level:
        level = level.upper()
        config = {
            **LOGGING,
            'root': {**LOGGING['root'], 'level': level},
            'loggers': {
                name: {**logger_config, 'level': level}
                for name, logger_config in LOGGING['loggers'].items()
            },
        }
    logging.config.dictConfig(config)


def as_container_config() -> dict:
    """Valores que o container de dependências consome."""
    return {
        'queue_initial_capacity': QUEUE_INITIAL_CAPACITY,
        'ticket_id_start': TICKET_ID_START,
        'publish_events_to_log': PUBLISH_EVENTS_TO_LOG,
    }
