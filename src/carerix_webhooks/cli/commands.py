"""Webhook commands: map a parsed invocation onto client calls and render the result."""

from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from carerix_webhooks.api.client import CarerixWebhooksClient
from carerix_webhooks.api.models import CreateWebhookRequest, Webhook, WebhookFilter
from carerix_webhooks.cli.args import ParsedArgs, parse_headers
from carerix_webhooks.errors import ValidationError

console = Console(soft_wrap=True)

USAGE = """\
Usage: cx-webhooks [--env <path>] <command> [options]

Commands:
  list                                   List all webhooks
  enable <id>                            Enable a webhook
  disable <id>                           Disable a webhook
  delete <id>                            Delete a webhook
  create --url <url> --event <type> [--event <type> ...] [--header key=value ...]
                                         Create a webhook (at least 1 --event required)

Options:
  --env <path>                           Path to .env file (default: .env)
  --debug                                Enable debug logging
  --help                                 Show this help"""


def print_usage() -> None:
    """Print command-line usage."""
    console.print(USAGE, markup=False, highlight=False)


def _status(webhook: Webhook) -> str:
    enabled = webhook.get("enabled")
    if enabled is None:
        return ""
    return "enabled" if enabled else "disabled"


def _events(webhook: Webhook) -> str:
    filters = webhook.get("filters") or []
    return ", ".join(
        str(f.get("eventType", "")) for f in filters if isinstance(f, dict)
    )


def _require_id(args: ParsedArgs) -> str:
    if not args.params:
        raise ValidationError(f"Missing <id>. Usage: cx-webhooks {args.command} <id>")
    return args.params[0]


def list_cmd(client: CarerixWebhooksClient, args: ParsedArgs) -> None:
    """List all webhooks as a table."""
    webhooks = client.list_webhooks()
    if not webhooks:
        console.print("No webhooks found.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Status")
    table.add_column("URL")
    table.add_column("Events")
    for webhook in webhooks:
        table.add_row(
            escape(str(webhook.get("id") or "")),
            _status(webhook),
            escape(str(webhook.get("url") or "")),
            escape(_events(webhook)),
        )
    console.print(table)


def create_cmd(client: CarerixWebhooksClient, args: ParsedArgs) -> None:
    """Create a webhook from --url, --event and --header flags."""
    url = args.flags.get("url")
    if not isinstance(url, str) or not url:
        raise ValidationError("Missing --url.")

    events = args.flags.get("event")
    if not isinstance(events, list) or not events:
        raise ValidationError("At least one --event is required.")

    request = CreateWebhookRequest(
        url=url,
        filters=[WebhookFilter(event_type=event) for event in events],
        custom_headers=parse_headers(args.flags.get("header")),
    )
    webhook = client.create_webhook(request)
    console.print(f"Created webhook {escape(str(webhook['id']))}")


def enable_cmd(client: CarerixWebhooksClient, args: ParsedArgs) -> None:
    """Enable a webhook."""
    webhook = client.enable_webhook(_require_id(args))
    console.print(f"Enabled webhook {escape(str(webhook['id']))}")


def disable_cmd(client: CarerixWebhooksClient, args: ParsedArgs) -> None:
    """Disable a webhook."""
    webhook = client.disable_webhook(_require_id(args))
    console.print(f"Disabled webhook {escape(str(webhook['id']))}")


def delete_cmd(client: CarerixWebhooksClient, args: ParsedArgs) -> None:
    """Delete a webhook."""
    webhook_id = _require_id(args)
    client.delete_webhook(webhook_id)
    console.print(f"Deleted webhook {escape(webhook_id)}")


COMMANDS: dict[str, Callable[[CarerixWebhooksClient, ParsedArgs], None]] = {
    "list": list_cmd,
    "create": create_cmd,
    "enable": enable_cmd,
    "disable": disable_cmd,
    "delete": delete_cmd,
}
