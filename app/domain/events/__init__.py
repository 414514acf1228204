"""In-process domain events (quote lifecycle)."""

from .dispatcher import EventDispatcher, EventHandler
from .quote_events import QuoteEvent, QuoteEvents

__all__ = ["EventDispatcher", "EventHandler", "QuoteEvent", "QuoteEvents"]
