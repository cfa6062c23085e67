from calendar_events.stores.interfaces import EventStore

__all__ = ["EventStore"]
