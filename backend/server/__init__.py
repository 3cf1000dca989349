"""Boundary adapter exposing a GameEngine to an embedding host."""

from __future__ import annotations

from importlib import import_module

from .session import GameSession, HostListener, MoveOutcome

__all__ = ["create_app", "GameSession", "HostListener", "MoveOutcome"]


def __getattr__(name: str):
    # the FastAPI app is only imported when asked for
    if name == "create_app":
        module = import_module(".app", __name__)
        return getattr(module, name)
    raise AttributeError(name)
