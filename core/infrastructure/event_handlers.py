"""
Event handlers for domain events.

These handlers process domain events for side effects like audit logging.
"""

import logging

from activations.domain.events import LicenseActivated
from core.domain.events import DomainEvent, EventHandler
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """Event handler writing domain events to the audit log."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra=event.to_dict(),
        )


def register_event_handlers():
    """Register all event handlers with the event bus."""
    event_bus.subscribe(LicenseActivated, AuditLogEventHandler())
    logger.info("Event handlers registered")
