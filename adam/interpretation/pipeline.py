"""Instruction interpretation pipeline.

Chains keyword extraction, entity extraction, intent classification,
confidence scoring and the approval policy. The pipeline never raises for a
string input: anything it cannot classify comes back as an
:class:`~adam.schemas.UnknownIntent` with a low confidence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..schemas import CommandContext, CommandInterpretation
from .approval import requires_approval
from .entities import extract_entities
from .intents import classify_intent
from .keywords import extract_keywords
from .scoring import score_confidence

logger = logging.getLogger(__name__)


@dataclass
class CommandInterpreter:
    """Deterministic interpreter shared by every inbound channel."""

    def interpret(
        self, instruction: str, context: CommandContext
    ) -> CommandInterpretation:
        keywords = extract_keywords(instruction)
        entities = extract_entities(keywords, instruction)
        intent = classify_intent(keywords, instruction)
        confidence = score_confidence(intent, entities, keywords)
        interpretation = CommandInterpretation(
            intent=intent,
            entities=entities,
            confidence=confidence,
            requires_approval=requires_approval(intent, context),
        )
        logger.debug(
            "Interpreted instruction as %s (confidence=%.2f, entities=%d, approval=%s)",
            intent.kind,
            confidence,
            len(entities),
            interpretation.requires_approval,
        )
        return interpretation


_DEFAULT_INTERPRETER = CommandInterpreter()


def interpret(instruction: str, context: CommandContext) -> CommandInterpretation:
    """Interpret ``instruction`` with the default :class:`CommandInterpreter`."""

    return _DEFAULT_INTERPRETER.interpret(instruction, context)
