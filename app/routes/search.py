"""Openverse search proxy: validates the query, signs it with a fresh token and relays the result"""

from fastapi import APIRouter, Depends, Query
from typing import Any, Optional
from urllib.parse import quote
import httpx

from app.config import Credentials, get_credentials, settings
from app.errors import UpstreamSearchError, ValidationError
from app.tokens import fetch_access_token, parse_body

router = APIRouter()

VALID_MEDIA_TYPES = ["images", "audio"]
VALID_LICENSES = ["CC0", "BY", "BY-SA", "BY-NC", "BY-ND", "BY-NC-SA", "BY-NC-ND"]

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_."
QUERY_SAFE_CHARS = "!~*'()"

SEARCH_ERROR_MESSAGES = {
    400: "Bad request: {detail}",
    401: "Authentication failed: Invalid or expired access token",
    429: "Rate limit exceeded. Please try again later.",
}


def validate_search_params(media_type: Optional[str], license: Optional[str]):
    """Reject unknown media types and licenses before touching the network"""
    if media_type not in VALID_MEDIA_TYPES:
        print(f"❌ Invalid mediaType: {media_type}")
        raise ValidationError(
            f"Invalid mediaType. Must be one of: {', '.join(VALID_MEDIA_TYPES)}"
        )

    if license and license not in VALID_LICENSES:
        print(f"❌ Invalid license: {license}")
        raise ValidationError(
            f"Invalid license. Must be one of: {', '.join(VALID_LICENSES)}"
        )


def build_search_url(q: Optional[str], media_type: str, license: Optional[str]) -> str:
    base = settings.OPENVERSE_API_URL.rstrip("/")
    url = f"{base}/v1/{media_type}?q={quote(q or '', safe=QUERY_SAFE_CHARS)}"
    if license:
        url += f"&license={license}"
    return url


def map_search_error(status: int, body: Any) -> UpstreamSearchError:
    """Translate an Openverse error response into the error shown to callers"""
    template = SEARCH_ERROR_MESSAGES.get(status)
    if template is None:
        return UpstreamSearchError(f"Request failed with status code {status}", status_code=status)

    detail = body.get("detail") if isinstance(body, dict) else None
    message = template.format(detail=detail or "Invalid parameters, possibly license")
    return UpstreamSearchError(message, status_code=status)


@router.get("/search")
async def search_media(
    q: Optional[str] = Query(None, description="Search terms"),
    media_type: Optional[str] = Query(None, alias="mediaType", description="images or audio"),
    license: Optional[str] = Query(None, description="Openverse license code"),
    credentials: Credentials = Depends(get_credentials),
):
    """Search Openverse images or audio on behalf of the caller"""

    validate_search_params(media_type, license)
    api_url = build_search_url(q, media_type, license)

    access_token = await fetch_access_token(credentials)

    print(f"🔍 Searching Openverse {media_type}: {api_url}")

    try:
        async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT) as client:
            response = await client.get(
                api_url,
                headers={"Authorization": f"Bearer {access_token}"},
            )
    except httpx.HTTPError as e:
        print(f"❌ Error fetching from Openverse: message={e!s}, url={api_url}")
        raise UpstreamSearchError(str(e) or type(e).__name__) from e

    if not response.is_success:
        body = parse_body(response)
        print(
            f"❌ Error fetching from Openverse: status={response.status_code}, "
            f"data={body}, url={api_url}"
        )
        raise map_search_error(response.status_code, body)

    # Non-JSON success bodies are relayed as a JSON string
    return parse_body(response)
