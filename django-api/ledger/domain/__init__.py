from ledger.domain.models import Event, Ticket
from ledger.domain.value_objects import Amount, Capacity, EventId, Identity, TicketId

__all__ = [
    "Event",
    "Ticket",
    "EventId",
    "TicketId",
    "Identity",
    "Amount",
    "Capacity",
]
