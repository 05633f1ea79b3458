"""Supabase access-token verification settings."""

from pydantic import BaseModel, SecretStr


class AuthConfig(BaseModel, frozen=True):
    """JWT verification settings for tokens issued by Supabase Auth."""

    jwt_secret: SecretStr
    algorithm: str
    audience: str
