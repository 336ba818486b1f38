import json
import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from adam.app_logging import get_log_config  # noqa: E402


def main():
    config = get_log_config()
    config["files"] = ["app.log", "audit.log"]
    sys.stdout.write(json.dumps(config, indent=2) + "\n")


if __name__ == "__main__":
    main()
