"""Click entry point for the interactive shell."""

from __future__ import annotations

import click

from smash.commands.handlers import build_default_registry
from smash.commands.service import Shell
from smash.config import get_settings, validate_settings
from smash.console import Console
from smash.errors import ConfigError
from smash.logging import configure_logging


@click.command()
def cli() -> None:
    """smash: a minimal interactive command shell. Type "help" at the prompt."""
    settings = get_settings()
    try:
        validate_settings(settings)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(settings.log_level, json_output=settings.app_env == "prod")

    shell = Shell(
        build_default_registry(),
        Console(stdin=click.get_text_stream("stdin")),
        prompt=settings.prompt,
        max_params=settings.max_params,
        max_param_length=settings.max_param_length,
    )
    shell.run()


if __name__ == "__main__":
    cli()
