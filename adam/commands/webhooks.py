"""Instruction extraction from CRM webhook payloads."""

from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)

INSTRUCTION_FIELDS: tuple[str, ...] = ("instruction", "message", "body", "text")


class InvalidWebhookPayloadError(ValueError):
    """Raised when a webhook payload carries no instruction text."""


def extract_instruction(event_type: str, payload: str) -> str:
    """Return the instruction carried by a webhook ``payload``.

    JSON objects are searched for the first non-empty text field in
    :data:`INSTRUCTION_FIELDS`; any other payload is treated as the
    instruction itself.
    """

    text = (payload or "").strip()
    if not text:
        raise InvalidWebhookPayloadError(f"Empty payload for '{event_type}' webhook")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return text
    if not isinstance(data, dict):
        return text
    for field in INSTRUCTION_FIELDS:
        value = data.get(field)
        if isinstance(value, str) and value.strip():
            return value.strip()
    logger.warning(
        "Webhook payload for '%s' has none of the fields %s",
        event_type,
        ", ".join(INSTRUCTION_FIELDS),
    )
    raise InvalidWebhookPayloadError(
        f"No instruction found in payload for '{event_type}' webhook"
    )
