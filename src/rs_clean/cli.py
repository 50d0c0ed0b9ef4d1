"""Typer CLI entrypoint for rs_clean."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from rs_clean.cleaner import FatalListingError, run_cleanup
from rs_clean.config import AppSettings, load_settings, resolve_settings_file
from rs_clean.logging_utils import configure_logging

app = typer.Typer(
    add_completion=False,
    help="Remove compiled executables that have a matching .rs source in the current directory.",
)


def _load_and_optionally_configure_logger(
    config_file: Path | None,
    configure: bool,
) -> tuple[AppSettings, logging.Logger]:
    try:
        settings = load_settings(config_file=config_file)
    except (ValidationError, yaml.YAMLError) as exc:
        settings_file = resolve_settings_file(config_file)
        typer.echo(f"error: invalid settings file {settings_file}: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    if configure:
        logger = configure_logging(settings.logging.level, log_file=settings.logging.log_file)
    else:
        logger = logging.getLogger("rs_clean")
    return settings, logger


@app.callback(invoke_without_command=True)
def clean(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(
        None,
        "--config-file",
        help="Optional settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Delete executables in the working directory built from sibling .rs files."""

    ctx.obj = config_file
    if ctx.invoked_subcommand is not None:
        return

    _, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    directory = Path.cwd()
    try:
        result = run_cleanup(directory, on_status=typer.echo, logger=logger)
    except FatalListingError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for error in result.errors:
        typer.echo(f"error: could not remove {error.executable_name}: {error.message}", err=True)


@app.command("show-config")
def show_config(ctx: typer.Context) -> None:
    """Print the effective configuration after env overrides."""

    settings, _ = _load_and_optionally_configure_logger(ctx.obj, configure=False)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


def main() -> None:
    """CLI script entrypoint."""

    app()


if __name__ == "__main__":
    main()
