"""API — camada de borda do canal LINE.

Responsabilidades:
- Receber o webhook e validar assinatura/payload
- Normalizar eventos em inputs do framework
- Construir payloads de mensagens para a Messaging API
- Chamar a reply API

Subpastas:
- connectors/: IO com a plataforma (webhook, cliente HTTP)
- normalizers/: eventos → inputs normalizados
- payload_builders/: mensagens outbound e helpers de resposta
- routes/: endpoint HTTP do webhook
"""
