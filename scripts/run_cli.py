"""Run the lib_log_clt CLI from a source checkout without installing it."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

project_root = Path(__file__).resolve().parents[1]
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from lib_log_clt import cli as cli_module  # noqa: E402
from lib_log_clt import config as config_module  # noqa: E402


@click.command(
    help="Run lib_log_clt CLI (passes additional args)",
    context_settings={"ignore_unknown_options": True},
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, use_dotenv: bool, args: tuple[str, ...]) -> None:
    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv

    env_toggle = os.getenv(config_module.DOTENV_ENV_VAR)
    if config_module.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        config_module.enable_dotenv(search_from=project_root)

    forwarded = list(args) if args else ["--help"]
    if explicit is False and "--no-use-dotenv" not in forwarded:
        forwarded.insert(0, "--no-use-dotenv")

    raise SystemExit(int(cli_module.main(forwarded)))


if __name__ == "__main__":
    main()
