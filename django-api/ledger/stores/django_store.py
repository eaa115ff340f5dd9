"""Django ORM implementations of the EventStore and TicketStore.

Counter reads and the *_for_update lookups lock their rows, so callers must run
inside a transaction.
"""

from django.db.models import F

from ledger import models
from ledger.domain import Amount, Capacity, Event, EventId, Identity, Ticket, TicketId
from ledger.stores.interfaces import EventStore, TicketStore

EVENT_COUNTER = "event"
TICKET_COUNTER = "ticket"


def _current_counter(name: str) -> int:
    counter, _ = models.Counter.objects.select_for_update().get_or_create(name=name)
    return counter.value


def _advance_counter(name: str, consumed: int) -> None:
    current = _current_counter(name)
    if consumed != current:
        raise ValueError(f"Expected {name} id {current}, got {consumed}")
    models.Counter.objects.filter(name=name).update(value=F("value") + 1)


def _event_to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        organizer=Identity(row.organizer),
        total_tickets=Capacity(row.total_tickets),
        price=Amount(row.price),
        tickets_remaining=Capacity(row.tickets_remaining),
    )


def _ticket_to_domain(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        event_id=EventId(row.event_id),
        owner=Identity(row.owner),
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _event_to_domain(row) if row is not None else None

    def get_event_for_update(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
        return _event_to_domain(row) if row is not None else None

    def next_event_id(self) -> EventId:
        return EventId(_current_counter(EVENT_COUNTER))

    def add_event(self, event: Event) -> None:
        _advance_counter(EVENT_COUNTER, event.id.value)
        models.Event.objects.create(
            id=event.id.value,
            organizer=event.organizer.value,
            total_tickets=event.total_tickets.value,
            price=event.price.value,
            tickets_remaining=event.tickets_remaining.value,
        )

    def save_event(self, event: Event) -> None:
        updated = models.Event.objects.filter(pk=event.id.value).update(
            organizer=event.organizer.value,
            total_tickets=event.total_tickets.value,
            price=event.price.value,
            tickets_remaining=event.tickets_remaining.value,
        )
        if updated != 1:
            raise KeyError(event.id.value)


class DjangoTicketStore(TicketStore):
    """Database-backed ticket store using Django ORM."""

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        row = models.Ticket.objects.filter(pk=ticket_id.value).first()
        return _ticket_to_domain(row) if row is not None else None

    def get_ticket_for_update(self, ticket_id: TicketId) -> Ticket | None:
        row = models.Ticket.objects.select_for_update().filter(pk=ticket_id.value).first()
        return _ticket_to_domain(row) if row is not None else None

    def list_tickets_for_owner(self, owner: Identity) -> list[Ticket]:
        rows = models.Ticket.objects.filter(owner=owner.value).order_by("id")
        return [_ticket_to_domain(row) for row in rows]

    def next_ticket_id(self) -> TicketId:
        return TicketId(_current_counter(TICKET_COUNTER))

    def add_ticket(self, ticket: Ticket) -> None:
        _advance_counter(TICKET_COUNTER, ticket.id.value)
        models.Ticket.objects.create(
            id=ticket.id.value,
            event_id=ticket.event_id.value,
            owner=ticket.owner.value,
        )

    def save_ticket(self, ticket: Ticket) -> None:
        updated = models.Ticket.objects.filter(pk=ticket.id.value).update(
            event_id=ticket.event_id.value,
            owner=ticket.owner.value,
        )
        if updated != 1:
            raise KeyError(ticket.id.value)

    def delete_ticket(self, ticket_id: TicketId) -> None:
        models.Ticket.objects.filter(pk=ticket_id.value).delete()
