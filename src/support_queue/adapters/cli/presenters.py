"""
Formatação de tickets e estatísticas para o console.
"""

from typing import Dict

from support_queue.core.tickets.dtos import TicketOutputDTO
from support_queue.core.tickets.entities import TicketPriority

DATE_FORMAT = "%d-%m-%Y %H:%M:%S"

SEPARATOR = "-" * 55


def render_detail(ticket: TicketOutputDTO) -> str:
    """Bloco com todos os campos do ticket."""
    return "\n".join([
        f"=== Ticket #{ticket.id} ===",
        f"Creator: {ticket.creator}",
        f"Owner: {ticket.owner if ticket.owner is not None else 'Unassigned'}",
        f"Type: {ticket.request_type}",
        f"Priority: {ticket.priority} - {ticket.priority_description}",
        f"Status: {ticket.status}",
        f"Description: {ticket.description}",
        f"Created: {ticket.created_at.strftime(DATE_FORMAT)}",
        f"Updated: {ticket.updated_at.strftime(DATE_FORMAT)}",
    ])


def render_summary(ticket: TicketOutputDTO) -> str:
    """Uma linha por ticket."""
    return (
        f"Ticket #{ticket.id} | Priority {ticket.priority} | "
        f"{ticket.request_type} | {ticket.creator} | Status: {ticket.status}"
    )


def render_statistics(stats: Dict) -> str:
    """Totais e contagem por prioridade."""
    labels = {
        TicketPriority.SECURITY: "Security",
        TicketPriority.NETWORK: "Network",
        TicketPriority.SOFTWARE: "Software",
        TicketPriority.NEW_COMPUTER: "New Computer",
    }

    lines = [
        "=== Estatísticas ===",
        f"Total de tickets criados: {stats['total_criados']}",
        f"Total de tickets processados: {stats['total_processados']}",
        f"Tickets na fila: {stats['na_fila']}",
        "",
        "Tickets por prioridade:",
    ]
    for priority, count in sorted(stats["por_prioridade"].items()):
        lines.append(f"Priority {priority} ({labels[TicketPriority(priority)]}): {count}")

    return "\n".join(lines)
