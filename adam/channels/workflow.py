"""Workflow engine formatter."""

from __future__ import annotations

from ..schemas import Completed, ExecutionResult, Failed, WorkflowDecision
from .base import ResponseFormatter


class WorkflowFormatter(ResponseFormatter):
    channel_name = "workflow"

    def format(self, result: ExecutionResult) -> WorkflowDecision:
        status = result.status
        if isinstance(status, Completed):
            return WorkflowDecision(
                decision="continue",
                next_step="next",
                variables=[
                    ("execution_status", status.state),
                    ("commandId", result.command_id),
                    ("duration", str(result.duration)),
                ],
            )
        if isinstance(status, Failed):
            return WorkflowDecision(decision="stop", next_step="error")
        return WorkflowDecision(decision="wait", next_step="pending")
