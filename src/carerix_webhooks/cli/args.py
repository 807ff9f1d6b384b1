"""Argument parsing for the cx-webhooks command line."""

from dataclasses import dataclass, field
from typing import Optional, Union

from carerix_webhooks.api.models import WebhookHeader
from carerix_webhooks.errors import ValidationError

FlagValue = Union[bool, str, list[str]]

HELP_TOKENS = ("--help", "-h")

# Repeatable options and the flag key their values are collected under.
LIST_OPTIONS = {
    "--event": "event",
    "-e": "event",
    "--header": "header",
    "-H": "header",
}


@dataclass
class ParsedArgs:
    """A parsed command invocation. ``command`` is None when usage should be shown."""

    env_file: Optional[str] = None
    command: Optional[str] = None
    params: list[str] = field(default_factory=list)
    flags: dict[str, FlagValue] = field(default_factory=dict)


def parse_args(tokens: list[str]) -> ParsedArgs:
    """Parse the tokens following the program name.

    Layout is ``[--env <path>] <command> [options]``. ``--url`` takes a single
    value, ``--event``/``-e`` and ``--header``/``-H`` may repeat, any other
    dash token is a boolean flag and everything else is a positional
    parameter.
    """
    out = ParsedArgs()
    if not tokens or any(token in HELP_TOKENS for token in tokens):
        return out

    i = 0
    while i + 1 < len(tokens) and tokens[i] == "--env":
        out.env_file = tokens[i + 1]
        i += 2

    if i < len(tokens):
        out.command = tokens[i]
        i += 1

    while i < len(tokens):
        token = tokens[i]
        has_value = i + 1 < len(tokens)

        if token == "--env":
            # The env file is fixed before the command name; drop the value.
            i += 2
            continue
        if token == "--url" and has_value:
            out.flags["url"] = tokens[i + 1]
            i += 2
            continue
        if token in LIST_OPTIONS and has_value:
            values = out.flags.get(LIST_OPTIONS[token])
            if not isinstance(values, list):
                values = out.flags[LIST_OPTIONS[token]] = []
            values.append(tokens[i + 1])
            i += 2
            continue
        if token.startswith("-"):
            out.flags[token.lstrip("-")] = True
        else:
            out.params.append(token)
        i += 1

    return out


def parse_headers(values: Optional[FlagValue]) -> Optional[list[WebhookHeader]]:
    """Turn ``key=value`` tokens into webhook headers.

    Returns None when there is nothing to parse.

    Raises:
        ValidationError: If a token has no ``=`` or an empty name.
    """
    if not values or values is True:
        return None
    tokens = values if isinstance(values, list) else [values]

    headers: list[WebhookHeader] = []
    for token in tokens:
        name, sep, value = token.partition("=")
        if not sep:
            raise ValidationError(f"Invalid --header value: {token}. Expected key=value.")
        name = name.strip()
        if not name:
            raise ValidationError(f"Invalid --header value: {token}. Name is empty.")
        headers.append(WebhookHeader(name=name, value=value.strip()))

    return headers or None
