"""Command intake, execution and history services."""

from .executor import CommandExecutor, StubExecutor
from .repository import CommandRecord, CommandRepository, InMemoryCommandRepository
from .service import CommandNotFoundError, CommandService
from .sources import describe_source, generate_command_id
from .webhooks import InvalidWebhookPayloadError, extract_instruction

__all__ = [
    "CommandExecutor",
    "CommandNotFoundError",
    "CommandRecord",
    "CommandRepository",
    "CommandService",
    "InMemoryCommandRepository",
    "InvalidWebhookPayloadError",
    "StubExecutor",
    "describe_source",
    "extract_instruction",
    "generate_command_id",
]
