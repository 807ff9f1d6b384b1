"""OAuth2 client-credentials token exchange."""

import logging

import httpx

from carerix_webhooks.config.settings import OAuthConfig
from carerix_webhooks.errors import AuthError

logger = logging.getLogger(__name__)


def describe_response(response: httpx.Response) -> str:
    """Summarize a response as "<status> <reason> <body preview>"."""
    body_preview = response.text[:200] if response.text else ""
    return f"{response.status_code} {response.reason_phrase} {body_preview}".rstrip()


def fetch_access_token(http: httpx.Client, oauth: OAuthConfig) -> str:
    """Exchange client credentials for a bearer token.

    Args:
        http: Open HTTP client to issue the request with.
        oauth: OAuth client credentials and token endpoint.

    Returns:
        The access token string.

    Raises:
        AuthError: If the request fails, the status is not 2xx, or the body
            has no usable access_token.
    """
    form = {
        "grant_type": "client_credentials",
        "client_id": oauth.client_id,
        "client_secret": oauth.client_secret.get_secret_value(),
    }
    if oauth.scopes:
        form["scope"] = oauth.scopes

    logger.debug(f"Requesting access token from {oauth.auth_endpoint}")
    try:
        response = http.post(oauth.auth_endpoint, data=form)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise AuthError(f"Failed to fetch access token: {e}") from e

    detail = describe_response(response)

    if not response.is_success:
        raise AuthError(f"Failed to fetch access token: {detail}")

    try:
        data = response.json()
    except ValueError as e:
        raise AuthError(f"Failed to fetch access token: {detail}") from e

    token = data.get("access_token") if isinstance(data, dict) else None
    if not isinstance(token, str) or not token:
        raise AuthError(f"No access_token in OAuth response: {detail}")

    logger.debug("Access token acquired")
    return token


def bearer_headers(token: str) -> dict[str, str]:
    """Build the Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}
