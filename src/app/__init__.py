"""App — núcleo das actions: casos de uso, resolvers e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: actions e dispatch (sem IO direto)
- services/: resolvers de identidade e conversa
- infra/: implementações concretas de IO (stores, estado da integração)
- protocols/: contratos/interfaces e modelos
- observability/: contexto de invocação para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
