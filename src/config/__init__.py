"""Configuração do serviço: logging estruturado e settings."""
