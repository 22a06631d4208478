"""Service initialization and dependency injection."""

import logging

from api.config import Settings
from common.services.user_store import InMemoryUserStore, UserStore
from fastapi import Request

logger = logging.getLogger(__name__)


def create_user_store(settings: Settings) -> UserStore:
    """Create the user store for one application lifetime.

    Args:
        settings: Application settings

    Returns:
        Empty UserStore instance
    """
    store = InMemoryUserStore(max_page_size=settings.max_page_size)
    logger.info("Initialized InMemoryUserStore (max_page_size=%s)", settings.max_page_size)
    return store


def get_user_store(request: Request) -> UserStore:
    """Get the user store created by the application lifespan.

    Args:
        request: Incoming request

    Returns:
        UserStore instance
    """
    return request.app.state.user_store
