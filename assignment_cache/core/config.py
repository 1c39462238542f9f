"""Cache configuration: Redis connection, entry expiry and tracing.

Read from the environment (and .env) with pydantic-settings; invalid
ranges fail when Settings is built.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_EXPORTERS = frozenset({"console", "otlp", "none"})


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    All settings have defaults; validate_ranges rejects values that would
    produce an unusable Redis client or tracer.
    """

    # App
    app_name: str = "assignment-cache"
    app_version: str = "1.0.0"
    debug: bool = False

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_username: str | None = None
    redis_password: SecretStr | None = None
    redis_secure: bool = False
    redis_max_connections: int = 10
    redis_socket_connect_timeout: float = 5.0
    redis_socket_timeout: float | None = None

    # Expiry applied by the backend on write; None keeps entries until invalidated.
    cache_ttl_seconds: int | None = None

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Validate Redis connection ranges, TTL and telemetry exporter."""
        if not 0 < self.redis_port < 65536:
            raise ValueError(f"redis_port must be between 1 and 65535, got: {self.redis_port}")
        if self.redis_db < 0:
            raise ValueError(f"redis_db must not be negative, got: {self.redis_db}")
        if self.redis_max_connections < 1:
            raise ValueError(
                f"redis_max_connections must be at least 1, got: {self.redis_max_connections}"
            )
        if self.cache_ttl_seconds is not None and self.cache_ttl_seconds <= 0:
            raise ValueError(
                "cache_ttl_seconds must be positive; unset it to keep entries until invalidated"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"telemetry_sample_rate must be within 0.0-1.0, got: {self.telemetry_sample_rate}"
            )
        if self.telemetry_exporter not in _EXPORTERS:
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                f"Must be one of: {', '.join(sorted(_EXPORTERS))}"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "telemetry_otlp_endpoint is required when telemetry_exporter is 'otlp'."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the process Settings, built on first call.

    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
