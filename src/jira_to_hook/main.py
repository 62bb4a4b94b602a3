import argparse
import sys
from collections.abc import Sequence

import uvicorn
from pydantic import ValidationError

from jira_to_hook.core.exceptions.configuration_error import ConfigurationError
from jira_to_hook.infrastructure.configuration.main_settings import Settings
from jira_to_hook.infrastructure.entrypoints.api.app_factory import create_app
from jira_to_hook.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    configure_logging,
)

logger = LoggerFactoryService.build_logger(__name__)

USAGE = "jira-to-hook http://jira.address localhost:8080 http://destinationwebhook"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jira-to-hook",
        description="Forward Jira release/deploy/rollback transitions to a chat webhook.",
        usage=USAGE,
    )
    parser.add_argument("jira_base_url", nargs="?", help="Jira base URL (or JIRA_BASE_URL)")
    parser.add_argument("bind_address", nargs="?", help="host:port to listen on (or BIND_ADDRESS)")
    parser.add_argument(
        "destination_hook_url", nargs="?", help="chat webhook URL (or DESTINATION_HOOK_URL)"
    )
    return parser.parse_args(argv)


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    """
    Command-line values win over the environment. Raises ConfigurationError
    when any of the three required values is missing or unusable.
    """
    args = _parse_args(argv)
    overrides = {key: value for key, value in vars(args).items() if value}
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise ConfigurationError(f"Missing or invalid settings: {fields}. Usage: {USAGE}") from e


def main(argv: Sequence[str] | None = None) -> None:
    try:
        settings = load_settings(argv)
    except ConfigurationError as e:
        configure_logging()
        logger.error(str(e))
        sys.exit(1)

    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
