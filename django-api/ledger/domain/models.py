"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in ledger/models.py (persistence layer).

Records are immutable: an update reads the whole record, copies it with the
changed field and writes the copy back through the owning store.
"""

from dataclasses import dataclass, replace

from ledger.domain.value_objects import Amount, Capacity, EventId, Identity, TicketId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    organizer: Identity
    total_tickets: Capacity
    price: Amount
    tickets_remaining: Capacity

    def __post_init__(self) -> None:
        if self.tickets_remaining.value > self.total_tickets.value:
            raise ValueError("tickets_remaining cannot exceed total_tickets")

    @property
    def sold_out(self) -> bool:
        return self.tickets_remaining.value == 0

    def with_tickets_remaining(self, remaining: int) -> "Event":
        return replace(self, tickets_remaining=Capacity(remaining))


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    event_id: EventId
    owner: Identity

    def with_owner(self, owner: Identity) -> "Ticket":
        return replace(self, owner=owner)
