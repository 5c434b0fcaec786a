"""
Openverse access tokens - OAuth2 client_credentials grant
A fresh token is requested for every search; nothing is cached
"""

from typing import Any, Optional
import httpx

from app.config import Credentials, settings
from app.errors import ConfigurationError, UpstreamAuthError

DEFAULT_TOKEN_ERROR = "Failed to obtain access token"

# (status, upstream error code) -> message; None matches any error code
TOKEN_ERROR_MESSAGES: dict[tuple[int, Optional[str]], str] = {
    (400, "unsupported_grant_type"): (
        "Unsupported grant_type. Contact openverse@wordpress.org for the correct grant_type."
    ),
    (401, None): "Authentication failed: Invalid client_id or client_secret",
    (429, None): "Rate limit exceeded. Please try again later.",
}


def token_url() -> str:
    return f"{settings.OPENVERSE_API_URL.rstrip('/')}/v1/auth_tokens/token/"


def parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def map_token_error(status: Optional[int], body: Any) -> UpstreamAuthError:
    """Translate a failed token exchange into the error shown to callers"""
    error_code = body.get("error") if isinstance(body, dict) else None

    for key in ((status, error_code), (status, None)):
        message = TOKEN_ERROR_MESSAGES.get(key)
        if message:
            return UpstreamAuthError(message)

    return UpstreamAuthError(DEFAULT_TOKEN_ERROR)


async def fetch_access_token(credentials: Credentials) -> str:
    """Exchange the client credentials for a bearer token"""

    if not credentials.client_id or not credentials.client_secret:
        print(
            "❌ Environment variables missing: "
            f"clientIdSet={bool(credentials.client_id)}, "
            f"clientSecretSet={bool(credentials.client_secret)}"
        )
        raise ConfigurationError(
            "Missing OPENVERSE_CLIENT_ID or OPENVERSE_CLIENT_SECRET in .env file"
        )

    url = token_url()
    token_data = {
        "client_id": credentials.client_id,
        "client_secret": credentials.client_secret,
        "grant_type": "client_credentials",
    }

    try:
        async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT) as client:
            response = await client.post(
                url,
                data=token_data,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
    except httpx.HTTPError as e:
        print(f"❌ Error fetching access token: message={e!s}, url={url}")
        raise UpstreamAuthError(DEFAULT_TOKEN_ERROR) from e

    body = parse_body(response)

    if not response.is_success:
        print(
            f"❌ Error fetching access token: status={response.status_code}, "
            f"data={body}, url={url}"
        )
        raise map_token_error(response.status_code, body)

    access_token = body.get("access_token") if isinstance(body, dict) else None
    if not access_token:
        print(f"❌ Token response without access_token: status={response.status_code}, url={url}")
        raise UpstreamAuthError(DEFAULT_TOKEN_ERROR)

    print("✅ Access token obtained successfully")
    return access_token
