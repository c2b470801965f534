"""
Domain Events da fila de suporte.

Toda mudança relevante na fila (ticket entrou, saiu, mudou de
prioridade, ganhou responsável, fila esvaziada) vira um evento.
Os use cases criam os eventos; o Unit of Work decide quando
entregá-los ao publisher (log, memória em testes).

Cada evento carrega:
- event_id gerado automaticamente (uuid4)
- aggregate_id do ticket (ou da fila) afetado
- occurred_at no momento da criação
- version do formato do payload
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict
import uuid

# Campos comuns a todos os eventos; o restante é payload
BASE_FIELDS = frozenset({"event_id", "aggregate_id", "occurred_at", "version"})


@dataclass
class DomainEvent(ABC):
    """
    Base dos eventos de domínio.

    Subclasses são dataclasses nomeadas no passado (TicketCriadoEvent)
    e declaram seus campos de payload com valor default, pois os campos
    da base já têm default.

    Attributes:
        event_id: Identificador único do evento
        aggregate_id: ID do ticket (ou "fila") que originou o evento
        occurred_at: Quando o evento foi criado
        version: Versão do formato do payload
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    aggregate_id: str = ""
    occurred_at: datetime = field(default_factory=datetime.now)
    version: int = 1

    def __post_init__(self):
        # 0 é um ID de ticket válido; só None e "" contam como ausentes
        if self.aggregate_id is None or self.aggregate_id == "":
            raise ValueError("aggregate_id é obrigatório")
        self.aggregate_id = str(self.aggregate_id)

    @property
    @abstractmethod
    def aggregate_type(self) -> str:
        """Tipo do agregado de origem ("Ticket" ou "Fila")."""
        ...

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Formato usado no log estruturado e nos testes.

        Returns:
            Metadados do evento mais o payload em "data"
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Payload: campos declarados pela subclasse."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in BASE_FIELDS
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DomainEvent":
        """
        Inverso de to_dict().

        Args:
            data: Dicionário no formato de to_dict()

        Returns:
            Evento da subclasse em que foi chamado
        """
        metadata = {
            "aggregate_id": data["aggregate_id"],
            "occurred_at": datetime.fromisoformat(data["occurred_at"]),
            "version": data.get("version", 1),
        }
        if "event_id" in data:
            metadata["event_id"] = data["event_id"]

        return cls(**metadata, **data.get("data", {}))

    # Subclasses declaram @dataclass(repr=False) para herdar este formato
    def __repr__(self) -> str:
        payload = ", ".join(f"{k}={v!r}" for k, v in self._get_event_data().items())
        return f"{self.event_type}({self.aggregate_type}#{self.aggregate_id}: {payload})"
