# app/domain/events/quote_events.py
"""Quote lifecycle event names and payload."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


class QuoteEvents:
    """Names dispatched around quote state changes."""

    QUOTE_PRE_CREATE = "quote.pre_create"
    QUOTE_POST_CREATE = "quote.post_create"

    QUOTE_PRE_ACCEPT = "quote.pre_accept"
    QUOTE_POST_ACCEPT = "quote.post_accept"

    QUOTE_PRE_DECLINE = "quote.pre_decline"
    QUOTE_POST_DECLINE = "quote.post_decline"

    QUOTE_PRE_CANCEL = "quote.pre_cancel"
    QUOTE_POST_CANCEL = "quote.post_cancel"

    QUOTE_PRE_SEND = "quote.pre_send"
    QUOTE_POST_SEND = "quote.post_send"

    QUOTE_PRE_ARCHIVE = "quote.pre_archive"
    QUOTE_POST_ARCHIVE = "quote.post_archive"

    @classmethod
    def all(cls) -> list[str]:
        return [v for k, v in vars(cls).items() if k.startswith("QUOTE_")]


@dataclass(frozen=True)
class QuoteEvent:
    """Payload carrying the quote an event is about (ORM ``Quote`` or dict)."""

    quote: Any = None

    def with_quote(self, quote: Any) -> "QuoteEvent":
        return replace(self, quote=quote)
