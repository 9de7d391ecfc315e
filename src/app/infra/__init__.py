"""Infraestrutura: implementações concretas de IO."""
