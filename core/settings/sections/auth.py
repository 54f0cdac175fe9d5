from pydantic import Field

from core.settings.base import StorefrontBaseSettings


class AuthSettings(StorefrontBaseSettings):
    """
    Bearer token verification settings.
    Tokens are issued by the storefront auth service; this service only verifies them.
    """

    jwt_secret: str = Field(default="change-me", alias="JWT_SECRET")
    leeway_seconds: int = Field(default=0, alias="JWT_LEEWAY_SECONDS")
