"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Each store owns the
counter that allocates ids for its records.
"""

from abc import ABC, abstractmethod

from ledger.domain import Event, EventId, Identity, Ticket, TicketId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_for_update(self, event_id: EventId) -> Event | None:
        """Return an event by ID, locking it until the current call ends."""
        ...

    @abstractmethod
    def next_event_id(self) -> EventId:
        """Return the id the next inserted event will receive."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> None:
        """Insert a new event and advance the event counter.

        Raises:
            ValueError: If event.id is not the current counter value.
        """
        ...

    @abstractmethod
    def save_event(self, event: Event) -> None:
        """Write back an existing event record."""
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def get_ticket_for_update(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, locking it until the current call ends."""
        ...

    @abstractmethod
    def list_tickets_for_owner(self, owner: Identity) -> list[Ticket]:
        """Return all tickets held by owner, ordered by id ascending."""
        ...

    @abstractmethod
    def next_ticket_id(self) -> TicketId:
        """Return the id the next inserted ticket will receive."""
        ...

    @abstractmethod
    def add_ticket(self, ticket: Ticket) -> None:
        """Insert a new ticket and advance the ticket counter.

        Raises:
            ValueError: If ticket.id is not the current counter value.
        """
        ...

    @abstractmethod
    def save_ticket(self, ticket: Ticket) -> None:
        """Write back an existing ticket record."""
        ...

    @abstractmethod
    def delete_ticket(self, ticket_id: TicketId) -> None:
        """Remove a ticket. Its id is never reissued."""
        ...
