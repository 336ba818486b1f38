"""Heuristic confidence scoring for interpreted instructions."""

from __future__ import annotations

from collections.abc import Sequence

from ..schemas import Entity, Intent, UnknownIntent

UNKNOWN_BASE = 0.1
MATCHED_BASE = 0.6
ENTITY_WEIGHT = 0.1
OBJECT_DENSITY_WEIGHT = 0.2
MAX_CONFIDENCE = 1.0


def score_confidence(
    intent: Intent, entities: Sequence[Entity], keywords: Sequence[str]
) -> float:
    """Combine intent match, entity count and CRM-object density.

    The result is a ranking heuristic rather than a probability. Every term
    is non-negative, so only the upper bound needs clamping.
    """

    score = UNKNOWN_BASE if isinstance(intent, UnknownIntent) else MATCHED_BASE
    score += ENTITY_WEIGHT * len(entities)
    if keywords:
        objects = sum(1 for entity in entities if entity.entity_type == "ghl_object")
        score += OBJECT_DENSITY_WEIGHT * (objects / len(keywords))
    return min(score, MAX_CONFIDENCE)
