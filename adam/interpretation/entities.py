"""Entity extraction over the keyword sequence of an instruction."""

from __future__ import annotations

from collections.abc import Sequence

from ..schemas import Entity

CRM_OBJECTS = frozenset(
    {
        "contact",
        "contacts",
        "lead",
        "leads",
        "opportunity",
        "opportunities",
        "pipeline",
        "workflow",
        "campaign",
        "appointment",
        "calendar",
        "task",
        "note",
        "tag",
        "form",
        "survey",
        "funnel",
        "invoice",
        "payment",
        "product",
        "conversation",
        "email",
        "sms",
        "automation",
    }
)

TIME_REFERENCES = frozenset({"today", "tomorrow", "yesterday", "week", "month", "year"})

NUMBER_LITERALS = frozenset({"1", "2", "5", "10"})

GHL_OBJECT_CONFIDENCE = 0.9
TIME_REFERENCE_CONFIDENCE = 0.8
NUMBER_CONFIDENCE = 0.7


def extract_entities(keywords: Sequence[str], instruction: str = "") -> list[Entity]:
    """Collect entities in discovery order.

    Each keyword is checked against every vocabulary, so one keyword can
    yield more than one entity.
    """

    entities: list[Entity] = []
    for keyword in keywords:
        if keyword in CRM_OBJECTS:
            entities.append(
                Entity(
                    entity_type="ghl_object",
                    value=keyword,
                    confidence=GHL_OBJECT_CONFIDENCE,
                )
            )
        if keyword in TIME_REFERENCES:
            entities.append(
                Entity(
                    entity_type="time_reference",
                    value=keyword,
                    confidence=TIME_REFERENCE_CONFIDENCE,
                )
            )
        if keyword in NUMBER_LITERALS:
            entities.append(
                Entity(entity_type="number", value=keyword, confidence=NUMBER_CONFIDENCE)
            )
    return entities
