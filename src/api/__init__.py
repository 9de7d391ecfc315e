"""API: camada de borda do Slack.

Responsabilidades:
- Receber requests do Slack (Events API, slash commands, interações)
- Validar assinaturas e decodificar corpos JSON/form-encoded
- Normalizar payloads para eventos tipados
- Chamar a Web API do Slack

Subpastas:
- connectors/: assinatura, parse de requests e cliente HTTP
- normalizers/: payload bruto -> evento tipado
- routes/: endpoints HTTP (eventos, health)

NÃO PODE conter: FSM, regras de dispatch, stores de credenciais.
"""
