"""Base abstractions for channel response formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..schemas import ChannelResponse, ExecutionResult
from .templates import ResponseTemplateStore


class ResponseFormatter(ABC):
    """Render an :class:`ExecutionResult` for one destination channel."""

    #: Lowercase channel identifier used by the registry.
    channel_name: str

    def __init__(self, *, templates: ResponseTemplateStore | None = None) -> None:
        self.templates = templates or ResponseTemplateStore()

    @abstractmethod
    def format(self, result: ExecutionResult) -> ChannelResponse:
        """Convert ``result`` into the channel-specific response.

        Implementations must accept every execution status, including ones
        they do not recognise.
        """

    @property
    def success_template(self) -> str:
        return self.templates.success(self.channel_name)

    @property
    def error_template(self) -> str:
        return self.templates.error(self.channel_name)
