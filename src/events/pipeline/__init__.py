"""Pipeline de middleware do motor de eventos."""

from events.pipeline.middleware import run_middleware

__all__ = ["run_middleware"]
