import pytest
from pydantic import BaseModel

from adam import channels
from adam.channels import (
    ChatFormatter,
    ResponseTemplateStore,
    format_result,
    get_formatter,
    register_formatter,
)
from adam.channels.base import ResponseFormatter
from adam.schemas import (
    AdminResponse,
    ChatResponse,
    Completed,
    ExecutedAction,
    ExecutionResult,
    Failed,
    PartialSuccess,
    Pending,
    Processing,
    VoiceResponse,
    WorkflowDecision,
)

ALL_STATUSES = [
    Pending(),
    Processing(),
    Completed(),
    Failed(reason="timeout"),
    PartialSuccess(warnings=["tag missing"]),
]


# ---------------------------------------------------------------------------
# Voice
# ---------------------------------------------------------------------------


def test_voice_failed_mentions_reason_and_ends_call(result_factory):
    response = format_result(result_factory(Failed(reason="timeout")), "voice")

    assert isinstance(response, VoiceResponse)
    assert "timeout" in response.spoken_text
    assert response.spoken_text == "I'm sorry, I ran into a problem: timeout"
    assert response.should_end_call is True


def test_voice_uses_first_insight(result_factory):
    result = result_factory(insights=["Contact created", "Tagged as lead"])
    response = format_result(result, "voice")

    assert response.spoken_text == "Contact created"
    assert response.should_end_call is False
    assert response.transfer_number is None


def test_voice_generic_completion_without_insights(result_factory):
    response = format_result(result_factory(), "voice")

    assert response.spoken_text == "Your request has been completed successfully."


def test_voice_transfer_number_when_handing_off(result_factory, transfer_action):
    other = ExecutedAction(
        action_type="create_contact", description="Created contact", result="ok"
    )
    response = format_result(result_factory(actions=[other, transfer_action]), "voice")

    assert response.transfer_number == "+1-555-0100"
    assert response.actions == ["Created contact", "Transferring you to a team member"]


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------


def test_chat_completed_joins_insights(result_factory):
    result = result_factory(insights=["Contact created", "Email added"])
    response = format_result(result, "chat")

    assert isinstance(response, ChatResponse)
    assert response.message == (
        "✅ Done! Here's what I accomplished:\nContact created\nEmail added"
    )
    assert response.attachments == []


def test_chat_failed_uses_error_template(result_factory):
    response = format_result(result_factory(Failed(reason="CRM unavailable")), "chat")

    assert response.message == "❌ Sorry, I couldn't complete that request: CRM unavailable"


@pytest.mark.parametrize(
    "status", [Pending(), Processing(), PartialSuccess(warnings=["w"])]
)
def test_chat_other_statuses_show_processing(status, result_factory):
    response = format_result(result_factory(status), "chat")

    assert response.message == "⏳ Processing your request..."


def test_chat_quick_replies_filter_long_steps_and_cap_at_three(result_factory):
    result = result_factory(
        next_steps=[
            "Send lead magnet",
            "Prepare discovery call agenda and questionnaire",
            "Schedule discovery call",
            "Add to nurture sequence",
            "Review results",
        ]
    )
    response = format_result(result, "chat")

    assert response.quick_replies == [
        "Send lead magnet",
        "Schedule discovery call",
        "Add to nurture sequence",
    ]


def test_chat_quick_replies_default_when_none_qualify(result_factory):
    result = result_factory(next_steps=["x" * 30, "y" * 45])
    response = format_result(result, "chat")

    assert response.quick_replies == ["Got it!", "Tell me more", "What's next?"]


@pytest.mark.parametrize("status", ALL_STATUSES)
def test_chat_never_closes(status, result_factory):
    assert format_result(result_factory(status), "chat").should_close is False


# ---------------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------------


def test_workflow_completed_continues_with_variables(result_factory):
    response = format_result(result_factory(command_id="cmd_9", duration=850), "workflow")

    assert isinstance(response, WorkflowDecision)
    assert response.decision == "continue"
    assert response.next_step == "next"
    assert response.variables == [
        ("execution_status", "completed"),
        ("commandId", "cmd_9"),
        ("duration", "850"),
    ]


def test_workflow_failed_stops(result_factory):
    response = format_result(result_factory(Failed(reason="boom")), "workflow")

    assert (response.decision, response.next_step, response.variables) == (
        "stop",
        "error",
        [],
    )


@pytest.mark.parametrize("status", [Pending(), Processing(), PartialSuccess()])
def test_workflow_waits_otherwise(status, result_factory):
    response = format_result(result_factory(status), "workflow")

    assert (response.decision, response.next_step, response.variables) == (
        "wait",
        "pending",
        [],
    )


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------


def test_admin_wraps_result_unmodified(result_factory):
    result = result_factory(insights=["done"], next_steps=["next"])
    response = format_result(result, "admin")

    assert isinstance(response, AdminResponse)
    assert response.details == result
    assert response.summary == "Command executed successfully."
    assert response.recommended_actions == [
        "Review execution details",
        "Monitor system performance",
        "Check for any errors",
    ]
    assert response.alerts == []


def test_admin_summaries_for_other_statuses(result_factory):
    failed = format_result(result_factory(Failed(reason="quota")), "admin")
    pending = format_result(result_factory(Pending(), command_id="cmd_7"), "admin")

    assert failed.summary == "Command execution failed. quota"
    assert pending.summary == "Command cmd_7 is pending."
    assert failed.alerts == []


# ---------------------------------------------------------------------------
# Registry, templates and totality
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("channel", ["voice", "chat", "workflow", "admin"])
@pytest.mark.parametrize("status", ALL_STATUSES)
def test_every_status_renders_on_every_channel(channel, status, result_factory):
    assert format_result(result_factory(status), channel) is not None


def test_unrecognised_status_falls_back_to_processing(result_factory):
    class Retrying(BaseModel):
        state: str = "retrying"

    result = ExecutionResult.model_construct(
        command_id="cmd_x",
        status=Retrying(),
        actions=[],
        insights=[],
        next_steps=[],
        duration=0,
    )

    assert format_result(result, "chat").message == "⏳ Processing your request..."
    assert format_result(result, "workflow").decision == "wait"
    assert format_result(result, "voice").should_end_call is False
    assert format_result(result, "admin").summary == "Command cmd_x is retrying."


def test_unknown_channel_raises_key_error(result_factory):
    with pytest.raises(KeyError):
        format_result(result_factory(), "fax")


def test_channel_lookup_is_case_insensitive():
    assert get_formatter("Chat") is ChatFormatter


def test_register_custom_formatter(result_factory, monkeypatch):
    monkeypatch.setattr("adam.channels._REGISTRY", dict(channels._REGISTRY))

    class SmsFormatter(ResponseFormatter):
        channel_name = "sms"

        def format(self, result):
            return format_result(result, "chat")

    register_formatter(SmsFormatter)

    assert format_result(result_factory(), "sms").should_close is False


def test_template_defaults_and_overrides():
    store = ResponseTemplateStore({"chat": {"success": "All set!"}})

    assert store.success("chat") == "All set!"
    assert store.error("chat") == "❌ Sorry, I couldn't complete that request:"
    assert store.success("workflow") == "Request completed."
    assert store.error("unknown") == "Request failed."
    assert store.success("ADMIN") == "Command executed successfully."


def test_formatter_uses_injected_templates(result_factory):
    templates = ResponseTemplateStore({"voice": {"error": "Oops:"}})
    response = format_result(
        result_factory(Failed(reason="timeout")), "voice", templates=templates
    )

    assert response.spoken_text == "Oops: timeout"
