"""Channel formatter registry for voice, chat, workflow and admin responses."""

from __future__ import annotations

from ..schemas import ChannelResponse, ExecutionResult
from .admin import AdminFormatter
from .base import ResponseFormatter
from .chat import ChatFormatter
from .templates import ResponseTemplateStore
from .voice import VoiceFormatter
from .workflow import WorkflowFormatter

_REGISTRY: dict[str, type[ResponseFormatter]] = {}


def register_formatter(formatter: type[ResponseFormatter]) -> None:
    """Register a formatter class in the global registry."""
    _REGISTRY[formatter.channel_name] = formatter


def get_formatter(name: str) -> type[ResponseFormatter]:
    """Retrieve a formatter class for ``name`` or raise ``KeyError``."""
    normalized = name.lower()
    if normalized not in _REGISTRY:
        raise KeyError(f"Channel '{name}' is not configured")
    return _REGISTRY[normalized]


def format_result(
    result: ExecutionResult,
    channel: str,
    *,
    templates: ResponseTemplateStore | None = None,
) -> ChannelResponse:
    """Render ``result`` for ``channel`` using the registered formatter."""
    formatter_cls = get_formatter(channel)
    return formatter_cls(templates=templates).format(result)


# Pre-register built-in formatters
register_formatter(VoiceFormatter)
register_formatter(ChatFormatter)
register_formatter(WorkflowFormatter)
register_formatter(AdminFormatter)

__all__ = [
    "AdminFormatter",
    "ChatFormatter",
    "ResponseFormatter",
    "ResponseTemplateStore",
    "VoiceFormatter",
    "WorkflowFormatter",
    "format_result",
    "get_formatter",
    "register_formatter",
]
