"""High-level command flow orchestration.

Every inbound channel ends up in :meth:`CommandService.process_command`: the
instruction is interpreted, commands that need approval are parked as
pending, everything else is handed to the executor, and the outcome is
recorded and written to the audit log. The per-channel entry points build
the :class:`~adam.schemas.Command` and render the result for their channel.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..app_logging import audit_command
from ..channels import format_result
from ..config import get_settings
from ..interpretation import CommandInterpreter
from ..schemas import (
    AdminResponse,
    AdminSource,
    ChatAgentSource,
    ChatResponse,
    Command,
    CommandContext,
    CommandInterpretation,
    CommandSource,
    ExecutionResult,
    Pending,
    VoiceAgentSource,
    VoiceResponse,
    WebhookSource,
)
from .executor import CommandExecutor, StubExecutor
from .repository import CommandRecord, CommandRepository, InMemoryCommandRepository
from .sources import describe_source, generate_command_id
from .webhooks import extract_instruction

logger = logging.getLogger(__name__)

APPROVAL_INSIGHT = "Approval required before execution"
APPROVAL_NEXT_STEP = "Approve command"


class CommandNotFoundError(RuntimeError):
    """Raised when a command could not be located."""


class CommandService:
    """Coordinates interpretation, approval, execution and history."""

    def __init__(
        self,
        repository: CommandRepository | None = None,
        *,
        executor: CommandExecutor | None = None,
        interpreter: CommandInterpreter | None = None,
    ) -> None:
        settings = get_settings()
        self._settings = settings
        self._repository = repository or InMemoryCommandRepository(
            history_limit=settings.history_limit
        )
        self._executor = executor or StubExecutor()
        self._interpreter = interpreter or CommandInterpreter()

    # ------------------------------------------------------------------
    # Command processing

    def build_command(
        self,
        source: CommandSource,
        instruction: str,
        location_id: str | None = None,
        *,
        priority: int | None = None,
    ) -> Command:
        """Wrap ``instruction`` in a :class:`Command` with default context."""

        context = CommandContext(
            location_id=location_id or self._settings.default_location_id,
            source_metadata=describe_source(source),
            priority=self._settings.default_priority if priority is None else priority,
            retry_count=0,
        )
        return Command(
            id=generate_command_id(),
            source=source,
            instruction=instruction,
            context=context,
        )

    def interpret(self, command: Command) -> CommandInterpretation:
        """Interpret ``command`` without executing or recording it."""

        return self._interpreter.interpret(command.instruction, command.context)

    def process_command(self, command: Command) -> ExecutionResult:
        """Interpret ``command`` and execute it unless approval is required."""

        interpretation = self.interpret(command)
        if interpretation.requires_approval:
            logger.info(
                "Command %s (%s) awaits approval", command.id, interpretation.intent.kind
            )
            result = ExecutionResult(
                command_id=command.id,
                status=Pending(),
                insights=[APPROVAL_INSIGHT],
                next_steps=[APPROVAL_NEXT_STEP],
            )
        else:
            result = self._execute(command, interpretation)
        self._repository.save(
            CommandRecord(command=command, interpretation=interpretation, result=result)
        )
        audit_command(command, interpretation, result)
        return result

    def approve_command(self, command_id: str) -> ExecutionResult:
        """Execute a command previously parked for approval."""

        record = self._repository.get(command_id)
        if record is None:
            raise CommandNotFoundError(f"Command '{command_id}' not found")
        claimed = self._repository.mark_processing(command_id)
        if claimed is None:
            current = self._repository.get(command_id) or record
            logger.warning(
                "Command %s is not awaiting approval (status=%s)",
                command_id,
                current.result.status.state,
            )
            return current.result
        try:
            result = self._execute(record.command, record.interpretation)
        except Exception:
            self._repository.update_result(command_id, record.result)
            raise
        self._repository.update_result(command_id, result)
        audit_command(record.command, record.interpretation, result)
        return result

    def _execute(
        self, command: Command, interpretation: CommandInterpretation
    ) -> ExecutionResult:
        try:
            return self._executor.execute(command, interpretation)
        except Exception:
            logger.exception("Executor failed for command %s", command.id)
            raise

    # ------------------------------------------------------------------
    # Channel entry points

    def handle_webhook(
        self, webhook_id: str, event_type: str, payload: str, location_id: str
    ) -> str:
        """Process a CRM webhook and return the id of the recorded command."""

        instruction = extract_instruction(event_type, payload)
        source = WebhookSource(webhook_id=webhook_id, event_type=event_type)
        command = self.build_command(source, instruction, location_id)
        self.process_command(command)
        return command.id

    def process_voice_command(
        self, session_id: str, caller_id: str, transcript: str, location_id: str
    ) -> VoiceResponse:
        source = VoiceAgentSource(session_id=session_id, caller_id=caller_id)
        command = self.build_command(source, transcript, location_id)
        return format_result(self.process_command(command), "voice")

    def process_chat_command(
        self, conversation_id: str, contact_id: str, message: str, location_id: str
    ) -> ChatResponse:
        source = ChatAgentSource(conversation_id=conversation_id, contact_id=contact_id)
        command = self.build_command(source, message, location_id)
        return format_result(self.process_command(command), "chat")

    def process_admin_command(
        self, user_id: str, instruction: str, location_id: str
    ) -> AdminResponse:
        source = AdminSource(user_id=user_id, location_id=location_id)
        command = self.build_command(source, instruction, location_id)
        return format_result(self.process_command(command), "admin")

    # ------------------------------------------------------------------
    # History and status

    def get_command_history(self, limit: int = 10) -> list[Command]:
        """Return up to ``limit`` commands, newest first."""

        return [record.command for record in self._repository.list_recent(limit)]

    def get_execution_result(self, command_id: str) -> ExecutionResult | None:
        record = self._repository.get(command_id)
        return record.result if record else None

    def get_interpretation(self, command_id: str) -> CommandInterpretation:
        record = self._repository.get(command_id)
        if record is None:
            raise CommandNotFoundError(f"Command '{command_id}' not found")
        return record.interpretation

    def total_commands(self) -> int:
        return self._repository.total()

    def status(self) -> dict[str, Any]:
        return {
            "status": "Agent Adam - Fully Operational",
            "total_commands": self.total_commands(),
            "is_online": True,
            "mode": self._settings.mode,
            "last_check": datetime.now(timezone.utc).isoformat(),
        }
