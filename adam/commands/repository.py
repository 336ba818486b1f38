"""Storage for received commands and their outcomes."""

from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..schemas import Command, CommandInterpretation, ExecutionResult, Pending, Processing


@dataclass(frozen=True)
class CommandRecord:
    command: Command
    interpretation: CommandInterpretation
    result: ExecutionResult


class CommandRepository(Protocol):
    """Persistence abstraction used by :class:`CommandService`."""

    def save(self, record: CommandRecord) -> None: ...

    def get(self, command_id: str) -> Optional[CommandRecord]: ...

    def update_result(self, command_id: str, result: ExecutionResult) -> CommandRecord: ...

    def mark_processing(self, command_id: str) -> Optional[CommandRecord]: ...

    def list_recent(self, limit: int = 10) -> List[CommandRecord]: ...

    def total(self) -> int: ...


class InMemoryCommandRepository:
    """Bounded, thread-safe repository keeping the most recent commands."""

    def __init__(self, history_limit: int = 100) -> None:
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        self.history_limit = history_limit
        self._records: OrderedDict[str, CommandRecord] = OrderedDict()
        self._total = 0
        self._lock = threading.Lock()

    def save(self, record: CommandRecord) -> None:
        with self._lock:
            if record.command.id not in self._records:
                self._total += 1
            self._records[record.command.id] = record
            self._records.move_to_end(record.command.id)
            while len(self._records) > self.history_limit:
                self._records.popitem(last=False)

    def get(self, command_id: str) -> Optional[CommandRecord]:
        with self._lock:
            return self._records.get(command_id)

    def update_result(self, command_id: str, result: ExecutionResult) -> CommandRecord:
        with self._lock:
            record = self._records.get(command_id)
            if record is None:
                raise KeyError(command_id)
            updated = CommandRecord(
                command=record.command,
                interpretation=record.interpretation,
                result=result,
            )
            self._records[command_id] = updated
            return updated

    def mark_processing(self, command_id: str) -> Optional[CommandRecord]:
        """Move a pending record to processing; ``None`` unless it was pending."""

        with self._lock:
            record = self._records.get(command_id)
            if record is None or not isinstance(record.result.status, Pending):
                return None
            claimed = CommandRecord(
                command=record.command,
                interpretation=record.interpretation,
                result=record.result.model_copy(update={"status": Processing()}),
            )
            self._records[command_id] = claimed
            return claimed

    def list_recent(self, limit: int = 10) -> List[CommandRecord]:
        with self._lock:
            records = list(self._records.values())
        records.reverse()
        return records[: max(limit, 0)]

    def total(self) -> int:
        with self._lock:
            return self._total
