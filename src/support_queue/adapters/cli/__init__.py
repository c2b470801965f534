"""Menu de console e ponto de entrada de linha de comando."""

from .menu import ConsoleMenu

__all__ = ["ConsoleMenu"]
