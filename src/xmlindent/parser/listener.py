"""Callback surface for consumers of markup events."""

from __future__ import annotations

from collections.abc import Iterable

from xmlindent.parser.events import (
    CharData,
    Comment,
    Declaration,
    EmptyTagEnd,
    EndTag,
    Event,
    ProcessingInstruction,
    StartTag,
)


class MarkupListener:
    """Base listener for markup events.

    Override the ``on_*`` methods of interest; the defaults ignore the event.
    """

    def dispatch(self, event: Event) -> None:
        """Dispatch to the appropriate on_* method."""
        method_name = f"on_{type(event).__name__.lower()}"
        method = getattr(self, method_name, self.generic_event)
        method(event)

    def feed(self, events: Iterable[Event]) -> None:
        for event in events:
            self.dispatch(event)

    def generic_event(self, event: Event) -> None:
        return None

    def on_chardata(self, event: CharData) -> None:
        return None

    def on_comment(self, event: Comment) -> None:
        return None

    def on_processinginstruction(self, event: ProcessingInstruction) -> None:
        return None

    def on_declaration(self, event: Declaration) -> None:
        return None

    def on_starttag(self, event: StartTag) -> None:
        return None

    def on_emptytagend(self, event: EmptyTagEnd) -> None:
        return None

    def on_endtag(self, event: EndTag) -> None:
        return None
