"""Cache lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, telemetry, Redis
connection); no caching logic here.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from assignment_cache.core.config import Settings, get_settings
from assignment_cache.infrastructure.cache.redis_cache import RedisCacheBackend
from assignment_cache.shared.telemetry.logging import get_logger, setup_logging
from assignment_cache.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

logger = get_logger(__name__)


@asynccontextmanager
async def cache_lifespan(
    settings: Settings | None = None,
    backend: RedisCacheBackend | None = None,
) -> AsyncIterator[RedisCacheBackend]:
    """Set up logging, telemetry and Redis; yield the connected backend.

    Startup order: logging, telemetry (if enabled), Redis connect.
    Shutdown order: Redis disconnect, telemetry shutdown.

    Raises:
        ConfigurationException: If Redis cannot be reached at startup.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument()
        set_telemetry(telemetry)
        logger.info("Telemetry initialized")

    backend = backend or RedisCacheBackend(settings=settings)
    try:
        await backend.connect()
        yield backend
    finally:
        await backend.disconnect()

        telemetry_instance = get_telemetry()
        if telemetry_instance is not None:
            telemetry_instance.shutdown()
            set_telemetry(None)
