"""Approval policy for interpreted commands."""

from __future__ import annotations

from ..schemas import AutomationIntent, CommandContext, CreateIntent, DeleteIntent, Intent

GATED_CREATE_OBJECTS = frozenset({"workflow", "campaign", "automation"})
PRIORITY_APPROVAL_THRESHOLD = 3


def requires_approval(intent: Intent, context: CommandContext) -> bool:
    """Return ``True`` when a human must sign off before execution."""

    if isinstance(intent, (DeleteIntent, AutomationIntent)):
        return True
    if isinstance(intent, CreateIntent):
        return intent.object_type in GATED_CREATE_OBJECTS
    return context.priority >= PRIORITY_APPROVAL_THRESHOLD
