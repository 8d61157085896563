"""Services layer - calculations and data access behind the CLI.

This module provides a clean interface between the command line and the
calendar modules, timeline converter and event dataset.
"""

import logging
import time
from dataclasses import dataclass

from src.settings import Settings

from .duration_service import DurationService
from .events_service import EventsService

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Dependency injection container for all services.

    Usage:
        settings = Settings.load()
        services = ServiceContainer(settings)

        # Access services
        result = services.duration.calculate(start, end)
        matches = services.events.search_events("ring")
    """

    settings: Settings
    events: EventsService
    duration: DurationService

    def __init__(self, settings: Settings | None = None):
        """Create service instances that share a Settings object.

        Args:
            settings: Application settings to share across services. If
                omitted, settings are loaded via Settings.load().
        """
        t0 = time.perf_counter()
        logger.info("Initializing ServiceContainer...")
        self.settings = settings or Settings.load()
        self.events = EventsService(self.settings)
        self.duration = DurationService(self.settings)
        service_count = len(self.__class__.__annotations__) - 1  # exclude 'settings'
        logger.info(
            "ServiceContainer initialized: %d services in %.2fs",
            service_count,
            time.perf_counter() - t0,
        )


__all__ = [
    "DurationService",
    "EventsService",
    "ServiceContainer",
]
