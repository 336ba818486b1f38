"""Free-text instruction interpretation."""

from .approval import requires_approval
from .entities import extract_entities
from .intents import classify_intent
from .keywords import extract_keywords
from .pipeline import CommandInterpreter, interpret
from .scoring import score_confidence

__all__ = [
    "CommandInterpreter",
    "classify_intent",
    "extract_entities",
    "extract_keywords",
    "interpret",
    "requires_approval",
    "score_confidence",
]
