"""Carerix webhooks API client."""

import logging
import ssl
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import quote

import certifi
import httpx

from carerix_webhooks.api.auth import bearer_headers, describe_response, fetch_access_token
from carerix_webhooks.api.models import (
    CreateWebhookRequest,
    Webhook,
    classify_list_payload,
    normalize_webhook,
)
from carerix_webhooks.config.settings import CarerixConfig, load_config
from carerix_webhooks.errors import RequestError


def _get_ssl_context() -> ssl.SSLContext:
    """Create an SSL context using certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


class CarerixWebhooksClient:
    """Client for the webhooks of one Carerix application.

    Every public operation fetches a fresh access token and then issues a
    single request; tokens are never cached or reused.
    """

    def __init__(self, config: CarerixConfig, logger: Optional[logging.Logger] = None):
        """Initialize the client.

        Args:
            config: Resolved client configuration.
            logger: Optional logger for debug output.
        """
        base_url = config.base_url
        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self.application_id = config.application_id
        self.oauth = config.oauth
        self.timeout = config.timeout
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_env(
        cls,
        env_file: Optional[Union[str, Path]] = None,
        must_exist: bool = True,
    ) -> "CarerixWebhooksClient":
        """Build a client from CX_* environment variables and an optional .env file."""
        return cls(load_config(env_file, must_exist=must_exist))

    def _http(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, verify=_get_ssl_context())

    def _app_url(self, path: str) -> str:
        return f"{self.base_url}/applications/{self.application_id}{path}"

    def _webhook_url(self, webhook_id: str, action: str = "") -> str:
        path = f"/webhooks/{quote(webhook_id, safe='')}"
        if action:
            path = f"{path}/{action}"
        return self._app_url(path)

    def get_access_token(self) -> str:
        """Fetch a fresh access token.

        Raises:
            AuthError: If the token exchange fails.
        """
        with self._http() as http:
            return fetch_access_token(http, self.oauth)

    def _send(
        self,
        http: httpx.Client,
        operation: str,
        method: str,
        url: str,
        json: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Authenticate and issue one request, raising RequestError on failure."""
        headers = bearer_headers(fetch_access_token(http, self.oauth))

        self.logger.debug(f"{operation}: {method} {url}")
        try:
            response = http.request(method, url, headers=headers, json=json)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise RequestError(f"{operation} failed: {e}", operation) from e

        self.logger.debug(f"{operation}: HTTP {response.status_code}")
        if not response.is_success:
            raise RequestError(
                f"{operation} failed: {describe_response(response)}",
                operation,
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _parse_json(response: httpx.Response, operation: str) -> Any:
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RequestError(
                f"Failed to parse {operation.lower()} response: {e}",
                operation,
                status_code=response.status_code,
            ) from e

    def _single_webhook(self, response: httpx.Response, operation: str) -> Webhook:
        data = self._parse_json(response, operation)
        if not isinstance(data, dict):
            raise RequestError(
                f"{operation} returned an unexpected response: {describe_response(response)}",
                operation,
                status_code=response.status_code,
            )
        return normalize_webhook(data)

    # Public API

    def list_webhooks(self) -> list[Webhook]:
        """List all webhooks of the configured application.

        Returns:
            Normalized webhooks in server order; empty when the server sent
            no list, wrapper or object.

        Raises:
            AuthError: If the token exchange fails.
            RequestError: If the request fails or an element is not an object.
        """
        operation = "List webhooks"
        with self._http() as http:
            response = self._send(http, operation, "GET", self._app_url("/webhooks"))
            data = self._parse_json(response, operation)

        shape, items = classify_list_payload(data)
        self.logger.debug(f"{operation}: {shape.value} response with {len(items)} item(s)")

        webhooks: list[Webhook] = []
        for item in items:
            if not isinstance(item, dict):
                raise RequestError(
                    f"{operation} returned a non-object element: {item!r}",
                    operation,
                    status_code=response.status_code,
                )
            webhooks.append(normalize_webhook(item))
        return webhooks

    def create_webhook(self, request: CreateWebhookRequest) -> Webhook:
        """Create a webhook for the configured application."""
        operation = "Create webhook"
        with self._http() as http:
            response = self._send(
                http, operation, "POST", self._app_url("/webhooks"), json=request.to_payload()
            )
            return self._single_webhook(response, operation)

    def enable_webhook(self, webhook_id: str) -> Webhook:
        """Enable a webhook by id."""
        operation = "Enable webhook"
        with self._http() as http:
            response = self._send(http, operation, "POST", self._webhook_url(webhook_id, "enable"))
            return self._single_webhook(response, operation)

    def disable_webhook(self, webhook_id: str) -> Webhook:
        """Disable a webhook by id."""
        operation = "Disable webhook"
        with self._http() as http:
            response = self._send(http, operation, "POST", self._webhook_url(webhook_id, "disable"))
            return self._single_webhook(response, operation)

    def delete_webhook(self, webhook_id: str) -> None:
        """Delete a webhook by id. The response body is ignored."""
        with self._http() as http:
            self._send(http, "Delete webhook", "DELETE", self._webhook_url(webhook_id))
