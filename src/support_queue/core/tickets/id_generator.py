"""
Gerador de IDs de tickets.

Contador monotônico simples. Em vez de um singleton de classe, uma
instância é criada na inicialização e compartilhada pelo container
de dependências (ver config/container.py).
"""

import threading


class TicketIdGenerator:
    """
    Gera IDs únicos e crescentes para tickets.

    Incrementos são protegidos por lock, então a mesma instância pode
    ser usada por várias threads sem repetir IDs.

    Example:
        gerador = TicketIdGenerator()
        gerador.next()   # 1000
        gerador.next()   # 1001
        gerador.reset()
        gerador.next()   # 1000
    """

    DEFAULT_START = 1000

    def __init__(self, start: int = DEFAULT_START):
        self._start = start
        self._current = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """
        Retorna o próximo ID e avança o contador.

        Returns:
            ID único
        """
        with self._lock:
            value = self._current
            self._current += 1
            return value

    @property
    def current(self) -> int:
        """Próximo ID que será gerado, sem avançar o contador."""
        with self._lock:
            return self._current

    @property
    def start(self) -> int:
        return self._start

    def reset(self) -> None:
        """
        Volta o contador ao valor inicial.

        Atenção: usar apenas em testes ou reinício completo do sistema,
        pois IDs já emitidos voltam a ser gerados.
        """
        with self._lock:
            self._current = self._start
