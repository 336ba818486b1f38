"""Executors that turn interpreted commands into execution results."""

from __future__ import annotations

from typing import Protocol

from ..schemas import Command, CommandInterpretation, Completed, ExecutionResult


class CommandExecutor(Protocol):
    """Carries out an interpreted command against the CRM."""

    def execute(
        self, command: Command, interpretation: CommandInterpretation
    ) -> ExecutionResult: ...


class StubExecutor:
    """Executor used until CRM mutations are wired in.

    Always reports the command as completed without performing any action.
    """

    def execute(
        self, command: Command, interpretation: CommandInterpretation
    ) -> ExecutionResult:
        return ExecutionResult(command_id=command.id, status=Completed())
