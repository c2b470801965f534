"""
Configuração do Support Queue.

Módulos:
- settings: Variáveis de ambiente, tabela de tipos de requisição, LOGGING
- container: Dependency Injection Container
"""
