from pydantic import BaseModel
from pydantic_settings import BaseSettings


class Credentials(BaseModel):
    """Openverse client credentials, fixed for the lifetime of the process"""
    client_id: str = ""
    client_secret: str = ""

    class Config:
        frozen = True


class Settings(BaseSettings):
    # Openverse OAuth2 client (client_credentials grant)
    OPENVERSE_CLIENT_ID: str = ""
    OPENVERSE_CLIENT_SECRET: str = ""

    # Upstream
    OPENVERSE_API_URL: str = "https://api.openverse.org"
    REQUEST_TIMEOUT: float = 20.0

    # Server
    PORT: int = 3000

    @property
    def credentials(self) -> Credentials:
        return Credentials(
            client_id=self.OPENVERSE_CLIENT_ID,
            client_secret=self.OPENVERSE_CLIENT_SECRET,
        )

    class Config:
        env_file = ".env"
        extra = "allow"

settings = Settings()


def get_credentials() -> Credentials:
    """FastAPI dependency returning the configured credentials"""
    return settings.credentials


# Warn about missing settings; absence only fails once a token is requested
def validate_settings():
    missing = []
    if not settings.OPENVERSE_CLIENT_ID:
        missing.append("OPENVERSE_CLIENT_ID")
    if not settings.OPENVERSE_CLIENT_SECRET:
        missing.append("OPENVERSE_CLIENT_SECRET")

    if missing:
        print(f"⚠️ Missing environment variables: {', '.join(missing)}")
    else:
        print("✅ All required environment variables are set")
