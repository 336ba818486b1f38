"""Voice agent formatter."""

from __future__ import annotations

from ..schemas import ExecutionResult, Failed, VoiceResponse
from .base import ResponseFormatter

TRANSFER_ACTION = "transfer_to_human"
TRANSFER_NUMBER = "+1-555-0100"


class VoiceFormatter(ResponseFormatter):
    channel_name = "voice"

    def format(self, result: ExecutionResult) -> VoiceResponse:
        status = result.status
        if isinstance(status, Failed):
            spoken_text = f"{self.error_template} {status.reason}"
        elif result.insights:
            spoken_text = result.insights[0]
        else:
            spoken_text = self.success_template
        transfer = any(action.action_type == TRANSFER_ACTION for action in result.actions)
        return VoiceResponse(
            spoken_text=spoken_text,
            actions=[action.description for action in result.actions],
            should_end_call=isinstance(status, Failed),
            transfer_number=TRANSFER_NUMBER if transfer else None,
        )
