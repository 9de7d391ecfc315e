"""Utilitários transversais (erros de infraestrutura)."""
