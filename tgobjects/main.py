"""CLI entry point for inspecting Telegram Bot API payloads."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Type

import click

from .base import BaseObject, TelegramObject
from .config import ConfigManager
from .exceptions import TelegramSDKError
from .registry import default_registry


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application.

    Args:
        verbose: If True, set log level to DEBUG, otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _resolve_type(name: str) -> Type[BaseObject]:
    if name == TelegramObject.__name__:
        return TelegramObject
    record_cls = default_registry.get(name)
    if record_cls is None:
        raise click.BadParameter(
            f"Unknown object type {name!r}. Known types: {', '.join(default_registry.names())}",
            param_hint="--type",
        )
    return record_cls


def _render(value: Any, options: dict) -> str:
    if isinstance(value, BaseObject):
        return value.to_json(**options)
    if isinstance(value, list):
        return json.dumps(
            [item.all() if isinstance(item, BaseObject) else item for item in value],
            **options,
        )
    if isinstance(value, str):
        return value
    return json.dumps(value, **options)


@click.group()
@click.option(
    "--config",
    "config_path",
    envvar="TGOBJECTS_CONFIG",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the configuration file (or set TGOBJECTS_CONFIG env var)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose (DEBUG) logging",
)
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Inspect Telegram Bot API responses and updates."""
    setup_logging(verbose=verbose)
    ctx.obj = ConfigManager(path=config_path)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--type", "type_name", default=None, help="Object type to wrap the payload in")
@click.option("--path", "path", default=None, help="Field or dot-path to print")
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
@click.pass_obj
def inspect(
    manager: ConfigManager,
    source: Any,
    type_name: str | None,
    path: str | None,
    pretty: bool,
) -> None:
    """Wrap a JSON payload and print it, or the value at PATH."""
    logger = logging.getLogger(__name__)
    config = manager.config
    record_cls = _resolve_type(type_name or config.default_type)

    try:
        record = record_cls.from_json(source.read())
    except json.JSONDecodeError as e:
        logger.error(f"Input is not valid JSON: {e}")
        raise SystemExit(1) from e

    logger.debug(f"Wrapped payload as {record_cls.__name__} with {len(record)} fields")

    options = config.json_options()
    if pretty and options["indent"] is None:
        options["indent"] = 2

    if path is None:
        value: Any = record
    elif "." in path:
        value = record.raw_get(path)
    else:
        value = record.get(path)

    try:
        click.echo(_render(value, options))
    except (TypeError, TelegramSDKError) as e:
        logger.error(f"Cannot render value: {e}")
        raise SystemExit(1) from e


@main.group()
def config() -> None:
    """Show or change configuration."""


@config.command("show")
@click.pass_obj
def config_show(manager: ConfigManager) -> None:
    """Print the active configuration."""
    click.echo(manager.config.model_dump_json(indent=2))


@config.command("set")
@click.argument("field")
@click.argument("value")
@click.pass_obj
def config_set(manager: ConfigManager, field: str, value: str) -> None:
    """Set FIELD to VALUE and save the configuration."""
    try:
        updated = manager.set_field(field, value)
    except (KeyError, ValueError) as e:
        raise click.UsageError(str(e)) from e
    click.echo(updated.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
