"""Pydantic schemas shared by the interpretation pipeline and channel formatters.

Every model is frozen. Attributes use snake_case while the camelCase aliases
(``locationId``, ``requiresApproval`` ...) match the field names used by the
CRM adapters, so ``model_dump(by_alias=True)`` produces the wire format and
either spelling is accepted on construction.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ---------------------------------------------------------------------------
# Instructions
# ---------------------------------------------------------------------------


class CommandContext(_FrozenModel):
    """Metadata supplied alongside an instruction by the calling channel."""

    location_id: str
    source_metadata: str | None = None
    priority: int = Field(default=1, ge=0)
    retry_count: int = Field(default=0, ge=0)


class WebhookSource(_FrozenModel):
    kind: Literal["webhook"] = "webhook"
    webhook_id: str
    event_type: str


class VoiceAgentSource(_FrozenModel):
    kind: Literal["voice"] = "voice"
    session_id: str
    caller_id: str


class ChatAgentSource(_FrozenModel):
    kind: Literal["chat"] = "chat"
    conversation_id: str
    contact_id: str


class AdminSource(_FrozenModel):
    kind: Literal["admin"] = "admin"
    user_id: str
    location_id: str


CommandSource = Annotated[
    Union[WebhookSource, VoiceAgentSource, ChatAgentSource, AdminSource],
    Field(discriminator="kind"),
]


class Command(_FrozenModel):
    """An instruction received from a channel, as recorded in the history."""

    id: str
    source: CommandSource
    instruction: str
    context: CommandContext
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ---------------------------------------------------------------------------
# Interpretation
# ---------------------------------------------------------------------------


class CreateIntent(_FrozenModel):
    kind: Literal["create"] = "create"
    object_type: str


class UpdateIntent(_FrozenModel):
    kind: Literal["update"] = "update"
    object_type: str
    identifier: str


class DeleteIntent(_FrozenModel):
    kind: Literal["delete"] = "delete"
    object_type: str
    identifier: str


class QueryIntent(_FrozenModel):
    kind: Literal["query"] = "query"
    object_type: str
    filters: list[str] = Field(default_factory=list)


class AutomationIntent(_FrozenModel):
    kind: Literal["automation"] = "automation"
    trigger_type: str
    conditions: list[str] = Field(default_factory=list)


class UnknownIntent(_FrozenModel):
    kind: Literal["unknown"] = "unknown"


Intent = Annotated[
    Union[
        CreateIntent,
        UpdateIntent,
        DeleteIntent,
        QueryIntent,
        AutomationIntent,
        UnknownIntent,
    ],
    Field(discriminator="kind"),
]

EntityType = Literal["ghl_object", "time_reference", "number"]


class Entity(_FrozenModel):
    entity_type: EntityType
    value: str
    confidence: float = Field(ge=0.0, le=1.0)


class CommandInterpretation(_FrozenModel):
    """Outcome of running an instruction through the interpretation pipeline."""

    intent: Intent
    entities: list[Entity] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)
    requires_approval: bool


# ---------------------------------------------------------------------------
# Execution results
# ---------------------------------------------------------------------------


class Pending(_FrozenModel):
    state: Literal["pending"] = "pending"


class Processing(_FrozenModel):
    state: Literal["processing"] = "processing"


class Completed(_FrozenModel):
    state: Literal["completed"] = "completed"


class Failed(_FrozenModel):
    state: Literal["failed"] = "failed"
    reason: str


class PartialSuccess(_FrozenModel):
    state: Literal["partial_success"] = "partial_success"
    warnings: list[str] = Field(default_factory=list)


ExecutionStatus = Annotated[
    Union[Pending, Processing, Completed, Failed, PartialSuccess],
    Field(discriminator="state"),
]


class ExecutedAction(_FrozenModel):
    action_type: str
    description: str
    result: str
    timestamp: int = 0


class ExecutionResult(_FrozenModel):
    """Report produced by an executor for a single command."""

    command_id: str
    status: ExecutionStatus
    actions: list[ExecutedAction] = Field(default_factory=list)
    insights: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    duration: int = Field(default=0, ge=0)


# ---------------------------------------------------------------------------
# Channel responses
# ---------------------------------------------------------------------------


class VoiceResponse(_FrozenModel):
    spoken_text: str
    actions: list[str] = Field(default_factory=list)
    should_end_call: bool = False
    transfer_number: str | None = None


class ChatResponse(_FrozenModel):
    message: str
    quick_replies: list[str] = Field(default_factory=list)
    attachments: list[str] = Field(default_factory=list)
    should_close: bool = False


class WorkflowDecision(_FrozenModel):
    decision: Literal["continue", "stop", "wait"]
    next_step: str
    variables: list[tuple[str, str]] = Field(default_factory=list)


class AdminResponse(_FrozenModel):
    summary: str
    details: ExecutionResult
    recommended_actions: list[str] = Field(default_factory=list)
    alerts: list[str] = Field(default_factory=list)


ChannelResponse = Union[VoiceResponse, ChatResponse, WorkflowDecision, AdminResponse]
