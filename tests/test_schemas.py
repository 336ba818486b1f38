import pytest
from pydantic import TypeAdapter, ValidationError

from adam.schemas import (
    CommandContext,
    Entity,
    ExecutionResult,
    ExecutionStatus,
    Failed,
    Intent,
    PartialSuccess,
    QueryIntent,
    WorkflowDecision,
)


def test_context_rejects_negative_counters():
    with pytest.raises(ValidationError):
        CommandContext(location_id="loc", priority=-1)
    with pytest.raises(ValidationError):
        CommandContext(location_id="loc", retry_count=-1)


def test_context_is_frozen():
    context = CommandContext(location_id="loc")

    with pytest.raises(ValidationError):
        context.priority = 5


def test_context_accepts_wire_names():
    context = CommandContext.model_validate(
        {"locationId": "loc", "sourceMetadata": "voice", "priority": 0, "retryCount": 2}
    )

    assert context.retry_count == 2
    assert context.model_dump(by_alias=True) == {
        "locationId": "loc",
        "sourceMetadata": "voice",
        "priority": 0,
        "retryCount": 2,
    }


def test_intent_union_is_discriminated_on_kind():
    intent = TypeAdapter(Intent).validate_python(
        {"kind": "query", "objectType": "lead", "filters": ["new"]}
    )

    assert intent == QueryIntent(object_type="lead", filters=["new"])


def test_status_union_is_discriminated_on_state():
    adapter = TypeAdapter(ExecutionStatus)

    assert adapter.validate_python({"state": "failed", "reason": "x"}) == Failed(reason="x")
    assert adapter.validate_python({"state": "partial_success", "warnings": ["w"]}) == (
        PartialSuccess(warnings=["w"])
    )
    with pytest.raises(ValidationError):
        adapter.validate_python({"state": "exploded"})


def test_entity_confidence_bounds():
    with pytest.raises(ValidationError):
        Entity(entity_type="number", value="5", confidence=1.5)
    with pytest.raises(ValidationError):
        Entity(entity_type="person", value="Jane", confidence=0.5)


def test_execution_result_duration_is_non_negative():
    with pytest.raises(ValidationError):
        ExecutionResult(command_id="c", status=Failed(reason="x"), duration=-1)


def test_workflow_decision_values():
    with pytest.raises(ValidationError):
        WorkflowDecision(decision="pause", next_step="x")
