import logging
import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))
from adam.commands import CommandService, InMemoryCommandRepository
from adam.config import reset_settings_cache
from adam.schemas import CommandContext, Completed, ExecutedAction, ExecutionResult


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture(autouse=True)
def _quiet_audit_logger():
    """Keep audit handlers installed by one test from leaking into the next."""

    audit_logger = logging.getLogger("adam.audit")
    app_logger = logging.getLogger("adam")
    yield
    for logger in (audit_logger, app_logger):
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


@pytest.fixture
def context():
    return CommandContext(location_id="loc_123", priority=1)


@pytest.fixture
def repository():
    return InMemoryCommandRepository(history_limit=5)


@pytest.fixture
def service(repository):
    return CommandService(repository)


@pytest.fixture
def result_factory():
    def _create(status=None, **overrides):
        fields = {
            "command_id": "cmd_1",
            "status": status or Completed(),
            "actions": [],
            "insights": [],
            "next_steps": [],
            "duration": 120,
        }
        fields.update(overrides)
        return ExecutionResult(**fields)

    return _create


@pytest.fixture
def transfer_action():
    return ExecutedAction(
        action_type="transfer_to_human",
        description="Transferring you to a team member",
        result="queued",
        timestamp=1_700_000_000,
    )
