"""Application layer - use cases and orchestration."""

from .commands import CompileLayoutCommand
from .dtos import LayoutOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory
from .session import DEFAULT_PRESET_NAME, EditorSession

__all__ = [
    "CompileLayoutCommand",
    "DEFAULT_PRESET_NAME",
    "EditorSession",
    "LayoutOutput",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
