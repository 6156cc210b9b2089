"""Services used by the integration layer."""

from fieldcheck.services.event_bus import EventBus

__all__ = ["EventBus"]
