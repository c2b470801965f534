"""
Ports (Interfaces) do Domínio de Tickets.

Define o contrato que os casos de uso esperam da estrutura que guarda
os tickets em aberto. A implementação padrão é TicketPriorityQueue.

Princípio:
    Core define interfaces → implementações cumprem
    Casos de uso dependem do Protocol, não da classe concreta
"""

from typing import List, Optional, Protocol, runtime_checkable

from .entities import Ticket


@runtime_checkable
class TicketQueue(Protocol):
    """
    Interface para a fila de tickets por prioridade.

    Ausência de ticket é sinalizada por None/False, nunca por exceção.

    Implementações:
    - TicketPriorityQueue (min-heap em array)

    Example:
        def processar(fila: TicketQueue) -> Optional[Ticket]:
            return fila.extract_min()
    """

    def insert(self, ticket: Ticket) -> None:
        """
        Insere ticket.

        Raises:
            ValidationError: Se ticket for None
        """
        ...

    def extract_min(self) -> Optional[Ticket]:
        """Remove e retorna o ticket mais urgente, ou None se vazia."""
        ...

    def peek(self) -> Optional[Ticket]:
        """Retorna o ticket mais urgente sem remover, ou None se vazia."""
        ...

    def search(self, ticket_id: int) -> Optional[Ticket]:
        """Busca por ID; None se não existir."""
        ...

    def update_priority(self, ticket_id: int, new_priority: int) -> bool:
        """
        Altera prioridade e reposiciona o ticket.

        Returns:
            True se atualizou, False se não encontrado

        Raises:
            ValidationError: Se prioridade fora de 1..4
        """
        ...

    def remove(self, ticket_id: int) -> Optional[Ticket]:
        """Remove por ID; retorna o ticket removido ou None."""
        ...

    def get_all_tickets(self) -> List[Ticket]:
        """Todos os tickets, sem ordem garantida."""
        ...

    def get_all_tickets_sorted(self) -> List[Ticket]:
        """Todos os tickets em ordem crescente de prioridade."""
        ...

    def clear(self) -> None:
        """Remove todos os tickets."""
        ...

    def is_empty(self) -> bool:
        ...

    @property
    def size(self) -> int:
        ...
