"""Upstream URLs the tests mock."""

from app.config import settings

API_URL = settings.OPENVERSE_API_URL.rstrip("/")
TOKEN_URL = f"{API_URL}/v1/auth_tokens/token/"
