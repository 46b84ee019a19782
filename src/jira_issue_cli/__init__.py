import logging
import os

import click
from dotenv import load_dotenv

from jira_issue_cli.utils.logging import setup_logging

from .cli import COMMANDS, CliState
from .jira.constants import DEFAULT_SEARCH_LIMIT

__version__ = "0.1.0"


def env_logging_level() -> int:
    """Logging level from JIRA_CLI_VERY_VERBOSE / JIRA_CLI_VERBOSE."""
    if os.getenv("JIRA_CLI_VERY_VERBOSE", "false").lower() in ("true", "1", "yes"):
        return logging.DEBUG
    if os.getenv("JIRA_CLI_VERBOSE", "false").lower() in ("true", "1", "yes"):
        return logging.INFO
    return logging.WARNING


# Initialize logging with appropriate level
logger = setup_logging(env_logging_level())


@click.group()
@click.version_option(__version__, prog_name="jira-issue")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net or https://jira.your-company.com)",
)
@click.option("--jira-username", help="Jira username/email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-personal-token",
    help="Jira Personal Access Token (for Jira Server/Data Center)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira Server/Data Center (default: verify)",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_SEARCH_LIMIT,
    show_default=True,
    help="Maximum number of issues a search returns",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Style tables and messages with terminal colors",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: int,
    env_file: str | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool,
    limit: int,
    color: bool,
) -> None:
    """Create, search, show and assign Jira issues from the terminal.

    Connection settings come from the environment (JIRA_URL, JIRA_USERNAME,
    JIRA_API_TOKEN or JIRA_PERSONAL_TOKEN), a .env file, or the options below.
    """
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        current_logging_level = env_logging_level()

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    def was_option_provided(param_name: str) -> bool:
        return ctx.get_parameter_source(param_name) not in (
            click.core.ParameterSource.DEFAULT,
            click.core.ParameterSource.DEFAULT_MAP,
        )

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    # Command-line options win over the environment
    if was_option_provided("jira_url"):
        os.environ["JIRA_URL"] = jira_url
    if was_option_provided("jira_username"):
        os.environ["JIRA_USERNAME"] = jira_username
    if was_option_provided("jira_token"):
        os.environ["JIRA_API_TOKEN"] = jira_token
    if was_option_provided("jira_personal_token"):
        os.environ["JIRA_PERSONAL_TOKEN"] = jira_personal_token
    if was_option_provided("jira_ssl_verify"):
        os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()

    ctx.obj = CliState(limit=limit, color=color)


for command in COMMANDS:
    main.add_command(command)


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
