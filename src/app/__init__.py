"""App: orquestração, casos de uso e infraestrutura do serviço de eventos Slack.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (normalizar -> contexto -> dispatch)
- services/: supervisão de tasks assíncronas
- infra/: implementações concretas de IO (stores de credenciais)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; events despacha; fsm governa; utils apoia.
"""
