"""Free-text command interpretation and channel formatting for CRM agents."""

from .__version__ import __version__
from .channels import format_result
from .interpretation import CommandInterpreter, interpret

__all__ = [
    "CommandInterpreter",
    "__version__",
    "format_result",
    "interpret",
]
