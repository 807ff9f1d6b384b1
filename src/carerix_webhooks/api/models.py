"""Pydantic models and normalization for Carerix webhooks API payloads."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# A webhook as returned by the API: an ordered mapping that always carries a
# resolved "id" plus every server field verbatim.
Webhook = dict[str, Any]

# Checked in order; the first non-null value becomes the webhook id.
ID_FIELDS = ("id", "_id", "webhookId", "uuid")


class WebhookFilter(BaseModel):
    """One event type a webhook subscribes to."""

    model_config = ConfigDict(populate_by_name=True)

    event_type: str = Field(alias="eventType")


class WebhookHeader(BaseModel):
    """A custom header attached to webhook deliveries."""

    name: str
    value: str


class CreateWebhookRequest(BaseModel):
    """Body of a create-webhook call."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    filters: Optional[list[WebhookFilter]] = None
    custom_headers: Optional[list[WebhookHeader]] = Field(default=None, alias="customHeaders")

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire names, tagged with the Webhook kind."""
        return {"_kind": "Webhook", **self.model_dump(by_alias=True, exclude_none=True)}


class ListShape(str, Enum):
    """Shapes the list endpoint is known to answer with."""

    ARRAY = "array"
    ITEMS_WRAPPER = "items_wrapper"
    SINGLE_OBJECT = "single_object"
    EMPTY = "empty"


def resolve_webhook_id(data: dict[str, Any]) -> Any:
    """Return the first non-null id-like field, or None."""
    for key in ID_FIELDS:
        value = data.get(key)
        if value is not None:
            return value
    return None


def normalize_webhook(data: dict[str, Any]) -> Webhook:
    """Return a copy of ``data`` with a resolved ``id`` key.

    The resolved id is inserted first and the original fields are spread over
    it, so key order and vendor-specific fields survive untouched. A literal
    ``id`` in ``data`` keeps its own value.
    """
    return {"id": resolve_webhook_id(data), **data}


def classify_list_payload(data: Any) -> tuple[ListShape, list[Any]]:
    """Work out which shape a list response has and pull out its elements."""
    if isinstance(data, list):
        return ListShape.ARRAY, data
    if isinstance(data, dict):
        items = data.get("items")
        if isinstance(items, list):
            return ListShape.ITEMS_WRAPPER, items
        return ListShape.SINGLE_OBJECT, [data]
    return ListShape.EMPTY, []
