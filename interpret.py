import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from adam.app_logging import init_logging
from adam.channels import format_result, get_formatter
from adam.commands import CommandService
from adam.config import get_settings
from adam.schemas import AdminSource

logger = logging.getLogger(__name__)


def _echo(message: str) -> None:
    sys.stdout.write(f"{message}\n")


def _channel(value: str) -> str:
    try:
        get_formatter(value)
    except KeyError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value.lower()


def main(argv=None):
    load_dotenv()
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Interpret a free-text CRM instruction"
    )
    parser.add_argument("--q", type=str, required=True, help="Instruction text")
    parser.add_argument(
        "--priority",
        type=int,
        default=settings.default_priority,
        help="Command priority (3 or more requires approval for any change)",
    )
    parser.add_argument(
        "--location-id",
        default=settings.default_location_id,
        help="CRM location identifier",
    )
    parser.add_argument("--user-id", default="cli-user", help="Admin user identifier")
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Run the command through the executor and print the result",
    )
    parser.add_argument(
        "--channel",
        type=_channel,
        default=None,
        help="Render the execution result for voice, chat, workflow or admin",
    )
    parser.add_argument(
        "--log", action="store_true", help="Write app and audit logs to LOG_DIR"
    )
    args = parser.parse_args(argv)

    if args.priority < 0:
        parser.error("--priority must not be negative")
    if args.log:
        init_logging()

    service = CommandService()
    source = AdminSource(user_id=args.user_id, location_id=args.location_id)
    command = service.build_command(
        source, args.q, args.location_id, priority=args.priority
    )

    output = {
        "command": command.model_dump(mode="json", by_alias=True),
    }
    if args.execute or args.channel:
        result = service.process_command(command)
        output["interpretation"] = service.get_interpretation(command.id).model_dump(
            mode="json", by_alias=True
        )
        output["result"] = result.model_dump(mode="json", by_alias=True)
        if args.channel:
            response = format_result(result, args.channel)
            output["response"] = response.model_dump(mode="json", by_alias=True)
    else:
        interpretation = service.interpret(command)
        output["interpretation"] = interpretation.model_dump(mode="json", by_alias=True)

    logger.debug("Interpreted CLI command %s", command.id)
    _echo(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
