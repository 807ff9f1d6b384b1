"""Main Typer CLI application for the Carerix webhooks client."""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from carerix_webhooks.api.client import CarerixWebhooksClient
from carerix_webhooks.cli.args import parse_args
from carerix_webhooks.cli.commands import COMMANDS, print_usage
from carerix_webhooks.config.settings import DEFAULT_ENV_FILE
from carerix_webhooks.errors import CarerixError

# Create the Typer app
app = typer.Typer(
    name="cx-webhooks",
    help="Manage Carerix application webhooks.",
    add_completion=False,
)

# Errors go to stderr
err_console = Console(stderr=True, soft_wrap=True)


def setup_logging(debug: bool) -> logging.Logger:
    """Configure logging based on debug flag."""
    logger = logging.getLogger("carerix_webhooks")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    return logger


class RawArgsCommand(TyperCommand):
    """Keeps the token list as given, before click drops the first "--"."""

    def parse_args(self, ctx, args):
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


# Click's own option and help handling is switched off; parse_args sees the
# raw tokens, including --help, -h and --.
@app.command(
    cls=RawArgsCommand,
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def main(ctx: typer.Context) -> None:
    """Run one webhook command."""
    args = parse_args(ctx.meta.get("raw_args", list(ctx.args)))
    if args.command is None:
        print_usage()
        raise typer.Exit(1)

    handler = COMMANDS.get(args.command)
    if handler is None:
        print_usage()
        raise typer.Exit(1)

    logger = setup_logging(bool(args.flags.get("debug")))
    env_file = args.env_file or DEFAULT_ENV_FILE
    logger.debug(f"Command: {args.command}, env file: {env_file}")

    try:
        client = CarerixWebhooksClient.from_env(env_file, must_exist=args.env_file is not None)
        handler(client, args)
    except CarerixError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
