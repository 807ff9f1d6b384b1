"""Carerix webhooks API client and models."""

from carerix_webhooks.api.models import (
    CreateWebhookRequest,
    ListShape,
    Webhook,
    WebhookFilter,
    WebhookHeader,
    classify_list_payload,
    normalize_webhook,
)
from carerix_webhooks.api.client import CarerixWebhooksClient
from carerix_webhooks.api.auth import fetch_access_token

__all__ = [
    "CreateWebhookRequest",
    "ListShape",
    "Webhook",
    "WebhookFilter",
    "WebhookHeader",
    "classify_list_payload",
    "normalize_webhook",
    "CarerixWebhooksClient",
    "fetch_access_token",
]
