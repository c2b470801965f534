"""
Support Queue - Fila de tickets de suporte de TI por prioridade.

Camadas:
- core: entidades, fila de prioridade (min-heap), use cases
- adapters: publicadores de eventos, unit of work, menu de console
- config: settings, logging e container de dependências
"""

__version__ = "1.0.0"
