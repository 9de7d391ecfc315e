"""Dispatcher de eventos (modos sync e async)."""

from events.dispatcher.dispatcher import Dispatcher, DispatchMode, dispatch_mode_for

__all__ = ["DispatchMode", "Dispatcher", "dispatch_mode_for"]
