"""
Fila de Prioridade de Tickets (min-heap).

Implementação própria de min-heap sobre um array de capacidade
fixa que dobra quando enche. Não usa heapq: além de inserir e
extrair o mínimo, a fila precisa buscar, alterar prioridade e
remover tickets arbitrários pelo ID, coisas que heapq não oferece.

Propriedade do heap:
    prioridade(pai) <= prioridade(filho)
    (número menor = mais urgente)

Índices (árvore binária completa no array):
    pai(i)      = (i - 1) // 2
    esquerdo(i) = 2i + 1
    direito(i)  = 2i + 2

Complexidade:
    insert ............ O(log n)  (amortizado, com redimensionamento)
    extract_min ....... O(log n)
    peek .............. O(1)
    search ............ O(n)
    update_priority ... O(n) busca + O(log n) reorganização
    remove ............ O(n) busca + O(log n) reorganização
    get_all_tickets_sorted ... O(n log n)

Não é thread-safe: quem compartilha uma instância entre threads
deve serializar o acesso externamente.
"""

import logging
from typing import List, Optional

from support_queue.core.shared.exceptions import ValidationError

from .entities import Ticket, TicketPriority

logger = logging.getLogger(__name__)


class TicketPriorityQueue:
    """
    Min-heap de tickets ordenado por prioridade.

    Empates entre prioridades iguais são resolvidos arbitrariamente
    (não existe chave secundária). A fila não impede IDs duplicados:
    garantir unicidade é responsabilidade de quem insere.

    Example:
        fila = TicketPriorityQueue(initial_capacity=2)
        fila.insert(ticket_rede)       # prioridade 2
        fila.insert(ticket_seguranca)  # prioridade 1
        fila.extract_min()             # -> ticket_seguranca
    """

    DEFAULT_CAPACITY = 100

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY):
        """
        Inicializa fila vazia.

        Args:
            initial_capacity: Número de posições alocadas inicialmente

        Raises:
            ValidationError: Se capacidade não for positiva
        """
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int) \
                or initial_capacity <= 0:
            raise ValidationError(
                "Capacidade deve ser maior que 0",
                field="initial_capacity"
            )

        self._capacity = initial_capacity
        self._heap: List[Optional[Ticket]] = [None] * initial_capacity
        self._size = 0

    # =========================================================================
    # Navegação no array
    # =========================================================================

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def _left_child(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def _right_child(i: int) -> int:
        return 2 * i + 2

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    # =========================================================================
    # Operações principais
    # =========================================================================

    def insert(self, ticket: Ticket) -> None:
        """
        Insere um ticket na fila.

        Args:
            ticket: Ticket a inserir

        Raises:
            ValidationError: Se ticket for None
        """
        if ticket is None:
            raise ValidationError("Não é possível inserir ticket nulo", field="ticket")

        if self._size == self._capacity:
            self._resize()

        # Insere no fim e sobe até a posição correta
        current = self._size
        self._heap[current] = ticket
        self._size += 1

        self._sift_up(current)

    def extract_min(self) -> Optional[Ticket]:
        """
        Remove e retorna o ticket mais urgente.

        Returns:
            Ticket de menor número de prioridade, ou None se fila vazia
        """
        if self.is_empty():
            return None

        minimum = self._heap[0]

        # Último elemento vai para a raiz
        last = self._size - 1
        self._heap[0] = self._heap[last]
        self._heap[last] = None
        self._size -= 1

        if self._size > 0:
            self._sift_down(0)

        return minimum

    def peek(self) -> Optional[Ticket]:
        """
        Retorna o ticket mais urgente sem removê-lo.

        Returns:
            Ticket na raiz, ou None se fila vazia
        """
        return None if self.is_empty() else self._heap[0]

    def search(self, ticket_id: int) -> Optional[Ticket]:
        """
        Busca ticket pelo ID (varredura linear).

        Args:
            ticket_id: ID do ticket

        Returns:
            Primeiro ticket com o ID (menor índice), ou None
        """
        index = self._index_of(ticket_id)
        return None if index == -1 else self._heap[index]

    def update_priority(self, ticket_id: int, new_priority: int) -> bool:
        """
        Altera prioridade de um ticket e reorganiza o heap.

        Se a prioridade ficou mais urgente (número menor) o ticket sobe;
        se ficou menos urgente (número maior) desce; se não mudou,
        nada é reorganizado.

        Args:
            ticket_id: ID do ticket
            new_priority: Nova prioridade (1 a 4)

        Returns:
            True se atualizou, False se ticket não encontrado

        Raises:
            ValidationError: Se nova prioridade fora de 1..4
        """
        new_priority = TicketPriority.validate(new_priority, field_name="new_priority")

        index = self._index_of(ticket_id)
        if index == -1:
            return False

        ticket = self._heap[index]
        old_priority = ticket.priority
        ticket.set_priority(new_priority)

        if new_priority < old_priority:
            self._sift_up(index)
        elif new_priority > old_priority:
            self._sift_down(index)

        return True

    def remove(self, ticket_id: int) -> Optional[Ticket]:
        """
        Remove um ticket específico pelo ID.

        O último elemento ocupa o buraco e pode violar o heap em
        qualquer direção, então tenta subir e depois descer (no máximo
        um dos dois move alguma coisa).

        Args:
            ticket_id: ID do ticket a remover

        Returns:
            Ticket removido, ou None se não encontrado
        """
        index = self._index_of(ticket_id)
        if index == -1:
            return None

        removed = self._heap[index]

        last = self._size - 1
        self._heap[index] = self._heap[last]
        self._heap[last] = None
        self._size -= 1

        if index < self._size:
            self._sift_up(index)
            self._sift_down(index)

        return removed

    def clear(self) -> None:
        """Remove todos os tickets. A capacidade alocada é mantida."""
        for i in range(self._size):
            self._heap[i] = None
        self._size = 0

    # =========================================================================
    # Exportação
    # =========================================================================

    def get_all_tickets(self) -> List[Ticket]:
        """
        Retorna cópia dos tickets na ordem do array (sem ordem garantida).

        Returns:
            Lista com os tickets vivos
        """
        return self._heap[:self._size]

    def get_all_tickets_sorted(self) -> List[Ticket]:
        """
        Retorna cópia dos tickets ordenada por prioridade crescente.

        A ordenação é estável: empates mantêm a ordem do array.
        Não altera a fila.

        Returns:
            Lista ordenada por prioridade
        """
        return sorted(self.get_all_tickets(), key=lambda t: t.priority)

    # =========================================================================
    # Consultas
    # =========================================================================

    @property
    def size(self) -> int:
        """Número de tickets na fila."""
        return self._size

    @property
    def capacity(self) -> int:
        """Número de posições alocadas."""
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"TicketPriorityQueue(size={self._size}, capacity={self._capacity})"

    # =========================================================================
    # Manutenção do heap
    # =========================================================================

    def _index_of(self, ticket_id: int) -> int:
        for i in range(self._size):
            if self._heap[i].id == ticket_id:
                return i
        return -1

    def _sift_up(self, index: int) -> None:
        """Sobe o elemento enquanto o pai tiver prioridade maior."""
        while index > 0:
            parent = self._parent(index)
            if self._heap[parent].priority <= self._heap[index].priority:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        """Desce o elemento enquanto algum filho tiver prioridade menor."""
        while True:
            smallest = index
            left = self._left_child(index)
            right = self._right_child(index)

            if left < self._size and \
                    self._heap[left].priority < self._heap[smallest].priority:
                smallest = left

            if right < self._size and \
                    self._heap[right].priority < self._heap[smallest].priority:
                smallest = right

            if smallest == index:
                return

            self._swap(index, smallest)
            index = smallest

    def _resize(self) -> None:
        """Dobra a capacidade copiando os elementos vivos."""
        new_capacity = self._capacity * 2
        new_heap: List[Optional[Ticket]] = [None] * new_capacity
        new_heap[:self._size] = self._heap[:self._size]

        logger.debug(
            f"Fila redimensionada: capacidade {self._capacity} -> {new_capacity}"
        )

        self._heap = new_heap
        self._capacity = new_capacity
