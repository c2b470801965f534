"""
Menu de console do Support Queue.

Interface de terminal que traduz opções numéricas em chamadas aos
use cases do container. Erros de domínio são mostrados ao usuário e
o loop continua; a fila permanece utilizável.
"""

import logging
from typing import Callable, Optional

from dependency_injector.containers import DynamicContainer

from support_queue.core.shared.exceptions import DomainException
from support_queue.core.tickets.dtos import (
    CriarTicketInputDTO,
    AlterarPrioridadeInputDTO,
    AtribuirTicketInputDTO,
)

from .presenters import SEPARATOR, render_detail, render_summary, render_statistics

logger = logging.getLogger(__name__)

MENU = """
=============== MENU PRINCIPAL ===============
| 1.  Criar novo ticket                      |
| 2.  Processar próximo ticket               |
| 3.  Buscar ticket                          |
| 4.  Alterar prioridade                     |
| 5.  Remover ticket                         |
| 6.  Atribuir responsável                   |
| 7.  Listar tickets (resumo)                |
| 8.  Listar tickets (detalhado)             |
| 9.  Estatísticas                           |
| 10. Ver próximo ticket                     |
| 11. Limpar todos os tickets                |
| 0.  Sair                                   |
=============================================="""


class ConsoleMenu:
    """
    Loop interativo sobre os use cases.

    Entrada e saída são injetáveis para permitir testes com
    respostas roteirizadas.

    Example:
        menu = ConsoleMenu(create_container())
        menu.run()
    """

    def __init__(
        self,
        container: DynamicContainer,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.container = container
        self._input = input_fn
        self._output = output

        self._actions = {
            1: self.criar_ticket,
            2: self.processar_proximo,
            3: self.buscar_ticket,
            4: self.alterar_prioridade,
            5: self.remover_ticket,
            6: self.atribuir_responsavel,
            7: self.listar_resumo,
            8: self.listar_detalhado,
            9: self.mostrar_estatisticas,
            10: self.ver_proximo,
            11: self.limpar_fila,
        }

    # =========================================================================
    # Loop principal
    # =========================================================================

    def run(self) -> None:
        """Executa até o usuário escolher 0 ou a entrada acabar."""
        self._output("|        Support Queue - Bem-vindo!          |")

        while True:
            self._output(MENU)
            try:
                choice = self._ler_inteiro("Escolha uma opção: ")
            except EOFError:
                break

            if choice == 0:
                self._output("Até logo!")
                break

            action = self._actions.get(choice)
            if action is None:
                self._output("❌ Opção inválida")
                continue

            try:
                action()
            except EOFError:
                break
            except DomainException as e:
                logger.debug(f"Operação rejeitada: {e}")
                self._output(f"❌ {e.message}")

    # =========================================================================
    # Ações
    # =========================================================================

    def criar_ticket(self) -> None:
        self._output("\n=== NOVO TICKET ===")
        creator = self._input("Seu nome: ").strip()

        self._output("\nTipo de requisição:")
        for code, (label, priority) in sorted(self.container.request_types().items()):
            self._output(f"{code}. {label} (Prioridade {priority})")
        request_type = self._ler_inteiro("Tipo: ")

        description = self._input("Descrição: ").strip()

        output = self.container.criar_ticket_service().execute(
            CriarTicketInputDTO(
                creator=creator,
                request_type=request_type,
                description=description,
            )
        )
        self._output(f"✅ Ticket criado com sucesso. ID: {output.id}")

    def processar_proximo(self) -> None:
        ticket = self.container.processar_proximo_ticket_service().execute()

        if ticket is None:
            self._output("Nenhum ticket na fila")
            return

        self._output(f"Processando ticket #{ticket.id}")
        self._output(render_detail(ticket))

    def buscar_ticket(self) -> None:
        ticket_id = self._ler_id()
        if ticket_id is None:
            return

        ticket = self.container.buscar_ticket_service().execute(ticket_id)

        if ticket is None:
            self._output(f"❌ Ticket #{ticket_id} não encontrado")
            return

        self._output("✅ Ticket encontrado!")
        self._output(render_detail(ticket))

    def alterar_prioridade(self) -> None:
        ticket_id = self._ler_id()
        if ticket_id is None:
            return

        nova_prioridade = self._ler_inteiro("Nova prioridade (1-4): ")

        sucesso = self.container.alterar_prioridade_service().execute(
            AlterarPrioridadeInputDTO(ticket_id=ticket_id, nova_prioridade=nova_prioridade)
        )

        if sucesso:
            self._output("✅ Prioridade atualizada")
        else:
            self._output(f"❌ Ticket #{ticket_id} não encontrado")

    def remover_ticket(self) -> None:
        ticket_id = self._ler_id()
        if ticket_id is None:
            return

        removed = self.container.remover_ticket_service().execute(ticket_id)

        if removed is None:
            self._output(f"❌ Ticket #{ticket_id} não encontrado")
        else:
            self._output(f"✅ Ticket #{ticket_id} removido")

    def atribuir_responsavel(self) -> None:
        ticket_id = self._ler_id()
        if ticket_id is None:
            return

        owner = self._input("Responsável: ")

        sucesso = self.container.atribuir_ticket_service().execute(
            AtribuirTicketInputDTO(ticket_id=ticket_id, owner=owner)
        )

        if sucesso:
            self._output(f"✅ Ticket #{ticket_id} atribuído a {owner.strip()}")
        else:
            self._output(f"❌ Ticket #{ticket_id} não encontrado")

    def listar_resumo(self) -> None:
        tickets = self.container.listar_tickets_service().execute(ordenado=True)

        if not tickets:
            self._output("Nenhum ticket na fila")
            return

        self._output("\n=== Tickets (por prioridade) ===")
        self._output(f"Total: {len(tickets)}")
        self._output(SEPARATOR)
        for ticket in tickets:
            self._output(render_summary(ticket))

    def listar_detalhado(self) -> None:
        tickets = self.container.listar_tickets_service().execute(ordenado=True)

        if not tickets:
            self._output("Nenhum ticket na fila")
            return

        self._output("\n=== Tickets ===")
        for ticket in tickets:
            self._output("\n" + render_detail(ticket))
            self._output(SEPARATOR)

    def mostrar_estatisticas(self) -> None:
        stats = self.container.estatisticas_service().execute()
        self._output(render_statistics(stats))

    def ver_proximo(self) -> None:
        ticket = self.container.obter_proximo_ticket_service().execute()

        if ticket is None:
            self._output("Nenhum ticket na fila")
            return

        self._output("Próximo ticket a ser processado:")
        self._output(render_detail(ticket))

    def limpar_fila(self) -> None:
        resposta = self._input("Remover TODOS os tickets? Não pode ser desfeito (s/N): ")
        if resposta.strip().lower() not in ("s", "sim"):
            self._output("Operação cancelada")
            return

        descartados = self.container.limpar_tickets_service().execute()
        self._output(f"✅ {descartados} tickets removidos da fila")

    # =========================================================================
    # Entrada
    # =========================================================================

    def _ler_inteiro(self, prompt: str) -> Optional[int]:
        """Lê um inteiro; retorna None se a entrada não for numérica."""
        raw = self._input(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def _ler_id(self) -> Optional[int]:
        ticket_id = self._ler_inteiro("ID do ticket: ")
        if ticket_id is None:
            self._output("❌ ID inválido")
        return ticket_id
