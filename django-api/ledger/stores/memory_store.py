"""In-process store implementations.

Used by the in-memory ledger wiring and by service unit tests.
"""

from ledger.domain import Event, EventId, Identity, Ticket, TicketId
from ledger.stores.interfaces import EventStore, TicketStore


class InMemoryEventStore(EventStore):
    """Dict-backed event store."""

    def __init__(self) -> None:
        self._events: dict[int, Event] = {}
        self._counter = 0

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id.value)

    def get_event_for_update(self, event_id: EventId) -> Event | None:
        return self.get_event(event_id)

    def list_events(self) -> list[Event]:
        return [self._events[key] for key in sorted(self._events)]

    def next_event_id(self) -> EventId:
        return EventId(self._counter)

    def add_event(self, event: Event) -> None:
        if event.id.value != self._counter:
            raise ValueError(f"Expected event id {self._counter}, got {event.id.value}")
        self._events[event.id.value] = event
        self._counter += 1

    def save_event(self, event: Event) -> None:
        if event.id.value not in self._events:
            raise KeyError(event.id.value)
        self._events[event.id.value] = event


class InMemoryTicketStore(TicketStore):
    """Dict-backed ticket store."""

    def __init__(self) -> None:
        self._tickets: dict[int, Ticket] = {}
        self._counter = 0

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        return self._tickets.get(ticket_id.value)

    def get_ticket_for_update(self, ticket_id: TicketId) -> Ticket | None:
        return self.get_ticket(ticket_id)

    def list_tickets(self) -> list[Ticket]:
        return [self._tickets[key] for key in sorted(self._tickets)]

    def list_tickets_for_owner(self, owner: Identity) -> list[Ticket]:
        return [ticket for ticket in self.list_tickets() if ticket.owner == owner]

    def next_ticket_id(self) -> TicketId:
        return TicketId(self._counter)

    def add_ticket(self, ticket: Ticket) -> None:
        if ticket.id.value != self._counter:
            raise ValueError(f"Expected ticket id {self._counter}, got {ticket.id.value}")
        self._tickets[ticket.id.value] = ticket
        self._counter += 1

    def save_ticket(self, ticket: Ticket) -> None:
        if ticket.id.value not in self._tickets:
            raise KeyError(ticket.id.value)
        self._tickets[ticket.id.value] = ticket

    def delete_ticket(self, ticket_id: TicketId) -> None:
        del self._tickets[ticket_id.value]
