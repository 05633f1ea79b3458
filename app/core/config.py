"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.settings import (
    AppConfig,
    AuthConfig,
    ChatConfig,
    DatabaseConfig,
    LLMConfig,
    RedisConfig,
    ServerConfig,
)
from app.core.settings.chat_config import SafetyThreshold


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.chat.context_window).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM Provider
    llm_provider: Literal["gemini", "openai", "anthropic"] = Field(
        default="gemini",
        description="LLM provider to use",
    )

    # Gemini
    gemini_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Google Gemini API key",
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model name",
    )

    # OpenAI
    openai_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model name",
    )

    # Anthropic
    anthropic_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Anthropic API key",
    )
    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="Anthropic model name",
    )

    # App
    app_name: str = Field(
        default="moody-api",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Debug mode",
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone used for daily mood buckets",
    )

    # Chat
    chat_context_window: int = Field(
        default=20,
        ge=0,
        le=200,
        description="Prior turns forwarded to the model",
    )
    chat_history_limit: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Turns returned by the history endpoint",
    )
    chat_max_message_length: int = Field(
        default=2000,
        ge=1,
        description="Maximum user message length after trimming",
    )
    chat_llm_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single model call",
    )
    chat_safety_threshold: SafetyThreshold = Field(
        default="BLOCK_MEDIUM_AND_ABOVE",
        description="Gemini harm block threshold for every category",
    )
    chat_send_rate_limit: str = Field(
        default="20/minute",
        description="Chat send endpoint rate limit",
    )
    chat_send_lock_enabled: bool = Field(
        default=True,
        description="Reject concurrent sends for the same user",
    )
    chat_send_lock_ttl_seconds: int = Field(
        default=60,
        ge=1,
        description="Expiry of the per-user send lock",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Server port",
    )

    # Supabase Auth
    supabase_jwt_secret: SecretStr = Field(
        description="Supabase project JWT secret used to verify access tokens",
    )
    supabase_jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    supabase_jwt_audience: str = Field(
        default="authenticated",
        description="Expected audience claim",
    )

    # Database
    database_url: SecretStr = Field(
        description="Database URL (postgresql://... or sqlite+aiosqlite://...)",
    )

    # Redis
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )

    # --- Domain properties ---

    @cached_property
    def llm(self) -> LLMConfig:
        """LLM provider configuration."""
        return LLMConfig(
            provider=self.llm_provider,
            gemini_api_key=self.gemini_api_key,
            gemini_model=self.gemini_model,
            openai_api_key=self.openai_api_key,
            openai_model=self.openai_model,
            anthropic_api_key=self.anthropic_api_key,
            anthropic_model=self.anthropic_model,
        )

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            debug=self.debug,
            timezone=self.app_timezone,
        )

    @cached_property
    def chat(self) -> ChatConfig:
        """Conversation orchestration configuration."""
        return ChatConfig(
            context_window=self.chat_context_window,
            history_limit=self.chat_history_limit,
            max_message_length=self.chat_max_message_length,
            llm_timeout_seconds=self.chat_llm_timeout_seconds,
            safety_threshold=self.chat_safety_threshold,
            send_rate_limit=self.chat_send_rate_limit,
            send_lock_enabled=self.chat_send_lock_enabled,
            send_lock_ttl_seconds=self.chat_send_lock_ttl_seconds,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
        )

    @cached_property
    def auth(self) -> AuthConfig:
        """Supabase token verification configuration."""
        return AuthConfig(
            jwt_secret=self.supabase_jwt_secret,
            algorithm=self.supabase_jwt_algorithm,
            audience=self.supabase_jwt_audience,
        )

    @cached_property
    def database(self) -> DatabaseConfig:
        """Database connection configuration."""
        return DatabaseConfig(url=self.database_url)

    @cached_property
    def redis(self) -> RedisConfig:
        """Redis connection configuration."""
        return RedisConfig(url=self.redis_url)

    # --- Convenience properties (delegate to domain configs) ---

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app.is_development


# Global settings instance
settings = Settings()
