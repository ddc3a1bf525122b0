"""
Application lifecycle management using the FastAPI lifespan pattern.

Handles startup checks and graceful shutdown of shared HTTP clients.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from printflow.config.settings import get_settings
from printflow.core.container import get_container

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self) -> None:
        self._initialized = False

    async def startup(self) -> None:
        """Execute startup tasks."""
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")
        self._verify_configurations()
        await self._verify_external_services()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """Execute shutdown tasks."""
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await get_container().close()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Verify critical application configurations."""
        settings = get_settings()
        if settings.AUTH_BYPASS_ENABLED:
            logger.warning(f"AUTH_BYPASS_ENABLED: every request acts as '{settings.DEV_OWNER_ID}'")
            if not settings.is_development:
                logger.error(f"Auth bypass is enabled in {settings.ENVIRONMENT} environment")

    async def _verify_external_services(self) -> None:
        """Verify connectivity with the pricing service. Failure only degrades to fallback pricing."""
        healthy = await get_container().get_pricing_client().health_check()
        if healthy:
            logger.info("Pricing service connectivity verified")
        else:
            logger.warning("Pricing service unreachable - quotes will use fallback pricing")


# Global lifecycle manager instance
_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
