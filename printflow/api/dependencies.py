"""
Shared API Dependencies

FastAPI dependencies used by every domain router.
"""

import logging

from fastapi import Depends, Header, HTTPException, status

from printflow.config.settings import Settings, get_settings
from printflow.core.container import DependencyContainer, get_container

logger = logging.getLogger(__name__)

ACTOR_HEADER = "X-Actor-Id"


def get_app_container() -> DependencyContainer:
    """Get dependency container instance."""
    return get_container()


def get_current_actor(
    x_actor_id: str | None = Header(default=None, alias=ACTOR_HEADER),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Identify who is making the request.

    The actor id is issued by the authentication layer in front of this
    service. With AUTH_BYPASS_ENABLED the configured owner is used instead.
    """
    if x_actor_id and x_actor_id.strip():
        return x_actor_id.strip()

    if settings.AUTH_BYPASS_ENABLED and settings.DEV_OWNER_ID:
        logger.debug(f"Auth bypass: acting as {settings.DEV_OWNER_ID}")
        return settings.DEV_OWNER_ID

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=f"Missing {ACTOR_HEADER} header",
    )


__all__ = [
    "ACTOR_HEADER",
    "get_app_container",
    "get_current_actor",
]
