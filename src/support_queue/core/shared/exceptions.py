"""
Exceções de Domínio do Support Queue.

Hierarquia:
    DomainException (base)
    └── ValidationError (argumento inválido)

Ausência de um ticket (busca, remoção, alteração de prioridade) NÃO
é uma exceção: as operações retornam None/False e o chamador decide.
"""


class DomainException(Exception):
    """
    Base dos erros de domínio.

    O menu de console captura esta classe, mostra `message` e segue
    no loop. `code` identifica o erro em log e em `to_dict()`.

    Example:
        try:
            fila.insert(None)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    default_code = None

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code or type(self).__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message, **self._details()}

    def _details(self) -> dict:
        """Campos extras de subclasses para to_dict()."""
        return {}


class ValidationError(DomainException):
    """
    Argumento inválido.

    Lançada de forma síncrona, antes de qualquer mutação, quando:
    - prioridade fora do intervalo 1..4
    - criador ausente ou em branco
    - ticket ausente (None) na inserção da fila
    - capacidade inicial não positiva

    O código ganha o nome do campo como sufixo:
        ValidationError("...", field="priority").code == "VALIDATION_ERROR_PRIORITY"
    """

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str = None):
        self.field = field
        suffix = f"_{field.upper()}" if field else ""
        super().__init__(message, f"{self.default_code}{suffix}")

    def _details(self) -> dict:
        return {"field": self.field} if self.field else {}
