"""Keyword-family intent classification."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..schemas import (
    AutomationIntent,
    CreateIntent,
    DeleteIntent,
    Intent,
    QueryIntent,
    UnknownIntent,
    UpdateIntent,
)
from .entities import CRM_OBJECTS

# Checked in insertion order; the first family with a matching keyword wins.
INTENT_FAMILIES: Mapping[str, frozenset[str]] = {
    "create": frozenset(
        {"create", "add", "make", "build", "generate", "insert", "register", "setup"}
    ),
    "update": frozenset(
        {"update", "edit", "modify", "change", "rename", "assign", "move", "set"}
    ),
    "delete": frozenset(
        {"delete", "remove", "cancel", "archive", "erase", "destroy", "drop"}
    ),
    "query": frozenset(
        {
            "find",
            "search",
            "show",
            "list",
            "get",
            "query",
            "lookup",
            "view",
            "display",
            "count",
            "fetch",
            "report",
        }
    ),
    "automation": frozenset(
        {"automate", "automation", "trigger", "schedule", "recurring", "whenever"}
    ),
}

QUERY_FILTERS = frozenset(
    {"today", "yesterday", "week", "month", "active", "inactive", "new", "old"}
)

AUTOMATION_TRIGGERS: tuple[str, ...] = (
    "email",
    "form",
    "webhook",
    "schedule",
    "tag",
    "status",
)

UNKNOWN_OBJECT = "unknown"
MANUAL_TRIGGER = "manual"


def match_family(keywords: Sequence[str]) -> str | None:
    """Return the first intent family with a keyword present, if any."""

    present = set(keywords)
    for family, vocabulary in INTENT_FAMILIES.items():
        if present & vocabulary:
            return family
    return None


def extract_object_type(keywords: Sequence[str]) -> str:
    for keyword in keywords:
        if keyword in CRM_OBJECTS:
            return keyword
    return UNKNOWN_OBJECT


def extract_identifier(instruction: str) -> str:
    """Classify how the target record would be identified.

    Only detects the shape of the reference; no identifier is parsed out.
    """

    if '"' in instruction:
        return "quoted_identifier"
    if "id:" in instruction:
        return "extracted_id"
    return "auto_detected"


def extract_filters(keywords: Sequence[str]) -> list[str]:
    return [keyword for keyword in keywords if keyword in QUERY_FILTERS]


def extract_trigger_type(keywords: Sequence[str]) -> str:
    present = set(keywords)
    for trigger in AUTOMATION_TRIGGERS:
        if trigger in present:
            return trigger
    return MANUAL_TRIGGER


def extract_conditions(instruction: str) -> list[str]:
    lowered = instruction.lower()
    conditions: list[str] = []
    if "when" in lowered or "if" in lowered:
        conditions.append("conditional")
    if "after" in lowered or "before" in lowered:
        conditions.append("temporal")
    return conditions


def classify_intent(keywords: Sequence[str], instruction: str = "") -> Intent:
    """Map the keyword sequence of ``instruction`` onto an :data:`Intent`."""

    lowered = instruction.lower()
    family = match_family(keywords)
    if family == "create":
        return CreateIntent(object_type=extract_object_type(keywords))
    if family == "update":
        return UpdateIntent(
            object_type=extract_object_type(keywords),
            identifier=extract_identifier(lowered),
        )
    if family == "delete":
        return DeleteIntent(
            object_type=extract_object_type(keywords),
            identifier=extract_identifier(lowered),
        )
    if family == "query":
        return QueryIntent(
            object_type=extract_object_type(keywords),
            filters=extract_filters(keywords),
        )
    if family == "automation":
        return AutomationIntent(
            trigger_type=extract_trigger_type(keywords),
            conditions=extract_conditions(lowered),
        )
    return UnknownIntent()
