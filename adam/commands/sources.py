"""Helpers describing where commands come from."""

from __future__ import annotations

import time
from uuid import uuid4

from ..schemas import (
    AdminSource,
    ChatAgentSource,
    CommandSource,
    VoiceAgentSource,
    WebhookSource,
)


def generate_command_id() -> str:
    """Return a unique, roughly time-ordered command identifier."""

    return f"cmd_{int(time.time() * 1000)}_{uuid4().hex[:9]}"


def describe_source(source: CommandSource) -> str:
    """Return a short human-readable label for ``source``."""

    if isinstance(source, WebhookSource):
        return f"Webhook: {source.event_type}"
    if isinstance(source, VoiceAgentSource):
        return f"Voice: {source.session_id}"
    if isinstance(source, ChatAgentSource):
        return f"Chat: {source.conversation_id}"
    if isinstance(source, AdminSource):
        return f"Admin: {source.user_id}"
    return "Unknown"
