"""Chat widget formatter."""

from __future__ import annotations

from collections.abc import Sequence

from ..schemas import ChatResponse, Completed, ExecutionResult, Failed
from .base import ResponseFormatter

PROCESSING_MESSAGE = "⏳ Processing your request..."
DEFAULT_QUICK_REPLIES: tuple[str, ...] = ("Got it!", "Tell me more", "What's next?")
MAX_QUICK_REPLIES = 3
MAX_QUICK_REPLY_LENGTH = 30


def quick_replies(next_steps: Sequence[str]) -> list[str]:
    """Pick next steps short enough to render as quick-reply buttons."""

    replies = [step for step in next_steps if len(step) < MAX_QUICK_REPLY_LENGTH]
    if not replies:
        return list(DEFAULT_QUICK_REPLIES)
    return replies[:MAX_QUICK_REPLIES]


class ChatFormatter(ResponseFormatter):
    channel_name = "chat"

    def format(self, result: ExecutionResult) -> ChatResponse:
        status = result.status
        if isinstance(status, Completed):
            message = "\n".join([self.success_template, *result.insights])
        elif isinstance(status, Failed):
            message = f"{self.error_template} {status.reason}"
        else:
            message = PROCESSING_MESSAGE
        return ChatResponse(
            message=message,
            quick_replies=quick_replies(result.next_steps),
            attachments=[],
            should_close=False,
        )
