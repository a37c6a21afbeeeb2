"""Application startup"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

import httpx

from app.config import Settings, get_settings
from app.services.email_provider import init_email_provider, shutdown_email_provider
from app.services.site import SitePage

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[SitePage]:
    """
    Start the site logic and yield a ready page

    Initializes the email provider exactly once before any form can submit,
    and releases it on exit.
    """
    settings = settings or get_settings()
    # Startup
    setup_logging(settings.log_level)
    init_email_provider(settings, transport=transport)
    logger.info(f"Site started ({settings.environment})")
    try:
        yield SitePage(settings)
    finally:
        # Shutdown
        shutdown_email_provider()
        logger.info("Site stopped")
