"""Admin console formatter."""

from __future__ import annotations

from ..schemas import AdminResponse, Completed, ExecutionResult, Failed
from .base import ResponseFormatter

RECOMMENDED_ACTIONS: tuple[str, ...] = (
    "Review execution details",
    "Monitor system performance",
    "Check for any errors",
)


class AdminFormatter(ResponseFormatter):
    channel_name = "admin"

    def format(self, result: ExecutionResult) -> AdminResponse:
        return AdminResponse(
            summary=self.summarize(result),
            details=result,
            recommended_actions=list(RECOMMENDED_ACTIONS),
            alerts=self.alerts(result),
        )

    def summarize(self, result: ExecutionResult) -> str:
        status = result.status
        if isinstance(status, Completed):
            return self.success_template
        if isinstance(status, Failed):
            return f"{self.error_template} {status.reason}"
        state = getattr(status, "state", "processing")
        return f"Command {result.command_id} is {state}."

    def alerts(self, result: ExecutionResult) -> list[str]:
        """Alerts for the admin console; none are raised at present."""

        return []
