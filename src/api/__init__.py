"""API — camada de borda com a Cloud API e com a plataforma hospedeira.

Responsabilidades:
- Construir payloads para a API Meta e validar sua estrutura
- Enviar mensagens pela Graph API (único ponto de IO de rede)
- Expor as actions via HTTP

Subpastas:
- connectors/: cliente HTTP da Graph API e parsing de erros
- payload_builders/: construção de payloads para a API Meta
- routes/: endpoints HTTP (actions, health)

NÃO PODE conter: resolução de identidade/conversa nem orquestração de use cases.
"""
