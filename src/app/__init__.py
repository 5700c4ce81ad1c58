"""App — adapter LINE, contratos com o framework e inicialização.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- protocols/: contratos com o framework de bots e com a camada api
- domain/: inputs normalizados
- observability/: correlation_id
- constants/: enums e constantes da Messaging API

Módulo principal: adapter.py (LineAdapter).
"""
