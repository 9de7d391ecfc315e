"""Casos de uso da aplicação."""
