"""CLI command implementations for the move runner."""

from __future__ import annotations

import click

from src.core.moves import normalize_base_url
from src.core.permissions import parse_allowed_role_ids
from src.models.config import Settings
from src.services.batch_runner import BatchRunner
from src.services.command_handler import RunCommandHandler
from src.services.config_fetcher import ConfigFetcher
from src.services.error_notifier import WebhookErrorNotifier
from src.services.move_client import MoveApiClient
from src.services.run_history import RunHistory
from src.utils.logger import configure_logging

_FAILURE_PREFIXES = ("[ERROR]", "[DENIED]")


def _get_settings() -> Settings:
    """Load configuration from environment and .env file."""
    return Settings()


def _build_handler(settings: Settings) -> RunCommandHandler:
    """Wire the runner and its collaborators from settings."""
    runner = BatchRunner(
        settings,
        ConfigFetcher(timeout=settings.request_timeout_seconds),
        MoveApiClient(timeout=settings.request_timeout_seconds),
    )
    return RunCommandHandler(
        runner,
        RunHistory(capacity=settings.history_capacity),
        notifier=WebhookErrorNotifier(settings.error_webhook_url),
        allowed_role_ids=parse_allowed_role_ids(settings.allowed_role_ids),
    )


def _missing_settings(settings: Settings) -> list[str]:
    missing = []
    if not settings.api_key:
        missing.append("API_KEY")
    if not normalize_base_url(settings.config_base_url):
        missing.append("CONFIG_BASE_URL")
    return missing


@click.command()
@click.argument("name")
@click.option("--user", "user_tag", default="cli", help="Tag of the user issuing the run")
@click.option("--role", "roles", multiple=True, help="Role ID held by the user (repeatable)")
def run(name: str, user_tag: str, roles: tuple[str, ...]) -> None:
    """Fetch config NAME and execute its moves."""
    settings = _get_settings()
    configure_logging(settings.log_level)
    handler = _build_handler(settings)

    message = handler.handle_run(name, user_tag, roles, reply=click.echo)
    click.echo(message)
    if message.startswith(_FAILURE_PREFIXES):
        raise SystemExit(1)


@click.command()
@click.option("--user", "user_tag", default="console", help="Tag of the user issuing commands")
@click.option("--role", "roles", multiple=True, help="Role ID held by the user (repeatable)")
def console(user_tag: str, roles: tuple[str, ...]) -> None:
    """Read chat-style commands from stdin: /run <name>, /status, /quit."""
    settings = _get_settings()
    configure_logging(settings.log_level)

    missing = _missing_settings(settings)
    if missing:
        click.echo(f"[ERROR] Missing settings: {', '.join(missing)}", err=True)
        raise SystemExit(1)

    handler = _build_handler(settings)
    click.echo("[INFO] Console ready. Commands: /run <name>, /status, /quit")

    stdin = click.get_text_stream("stdin")
    for raw_line in stdin:
        line = raw_line.strip()
        if not line:
            continue
        command, _, argument = line.partition(" ")
        if command == "/quit":
            break
        if command == "/run":
            click.echo(handler.handle_run(argument, user_tag, roles, reply=click.echo))
        elif command == "/status":
            click.echo(handler.handle_status())
        else:
            click.echo(f"[ERROR] Unknown command: {command}")


@click.command()
def check_config() -> None:
    """Report whether the required settings are present."""
    settings = _get_settings()
    configure_logging(settings.log_level)

    missing = _missing_settings(settings)
    allowed = parse_allowed_role_ids(settings.allowed_role_ids)
    click.echo(f"  API_KEY: {'set' if settings.api_key else 'missing'}")
    click.echo(f"  CONFIG_BASE_URL: {settings.config_base_url or 'missing'}")
    click.echo(f"  API_URL: {settings.api_url or 'default'}")
    click.echo(f"  ALLOWED_ROLE_IDS: {', '.join(sorted(allowed)) or 'everyone'}")
    click.echo(f"  ERROR_WEBHOOK_URL: {'set' if settings.error_webhook_url else 'disabled'}")
    if missing:
        click.echo(f"[ERROR] Missing settings: {', '.join(missing)}", err=True)
        raise SystemExit(1)
    click.echo("[SUCCESS] Configuration complete")
