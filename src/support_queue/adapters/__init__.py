"""
Adapters - Lado externo do hexágono.

- events: publicadores de eventos de domínio
- shared: unit of work em memória
- cli: menu de console e ponto de entrada
"""
