"""Ledger service - all business logic lives here.

Services:
- Depend only on interfaces (stores, bank)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every mutating operation runs inside the injected atomic context. All
precondition checks run before the value transfer, and the transfer runs
before any store write, so a rejected call leaves the stores untouched.
Records a check depends on are read with the stores' locking lookups, so
concurrent calls on the same event or ticket run one after another.
"""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext

from ledger.bank.interfaces import Bank
from ledger.domain import Amount, Capacity, Event, EventId, Identity, Ticket, TicketId
from ledger.domain.errors import (
    CorruptedReferenceError,
    DomainError,
    EventNotFoundError,
    InsufficientBalanceError,
    InvalidPriceError,
    InvalidTicketCountError,
    SoldOutError,
    TicketNotFoundError,
    TransferFailedError,
    UnauthorizedError,
)
from ledger.stores.interfaces import EventStore, TicketStore

logger = logging.getLogger(__name__)

AtomicFactory = Callable[[], AbstractContextManager]


class LedgerService:
    """Service for event creation, ticket sales, transfers and refunds."""

    def __init__(
        self,
        events: EventStore,
        tickets: TicketStore,
        bank: Bank,
        atomic: AtomicFactory = nullcontext,
    ) -> None:
        self._events = events
        self._tickets = tickets
        self._bank = bank
        self._atomic = atomic

    def create_event(self, caller: str, total_tickets: int, price: int) -> EventId:
        """Create an event organized by the caller.

        Raises:
            InvalidTicketCountError: If total_tickets is not positive.
            InvalidPriceError: If price is not positive.
        """
        organizer = self._identity(caller)
        if total_tickets <= 0:
            raise self._reject("create_event", organizer, InvalidTicketCountError(total_tickets))
        if price <= 0:
            raise self._reject("create_event", organizer, InvalidPriceError(price))

        with self._atomic():
            event_id = self._events.next_event_id()
            self._events.add_event(
                Event(
                    id=event_id,
                    organizer=organizer,
                    total_tickets=Capacity(total_tickets),
                    price=Amount(price),
                    tickets_remaining=Capacity(total_tickets),
                )
            )

        logger.info(
            "Event created",
            extra={
                "event_id": event_id.value,
                "organizer": organizer.value,
                "total_tickets": total_tickets,
                "price": price,
            },
        )
        return event_id

    def buy_ticket(self, caller: str, event_id: int) -> TicketId:
        """Sell one ticket for an event to the caller.

        The balance check only avoids a doomed transfer; the transfer's own
        result decides whether the sale happens.

        Raises:
            EventNotFoundError: If the event does not exist.
            SoldOutError: If no tickets remain.
            InsufficientBalanceError: If the caller cannot cover the price.
            TransferFailedError: If the payment to the organizer fails.
        """
        buyer = self._identity(caller)
        with self._atomic():
            event = self._find_event(event_id, for_update=True)
            if event is None:
                raise self._reject("buy_ticket", buyer, EventNotFoundError(event_id))
            if event.sold_out:
                raise self._reject("buy_ticket", buyer, SoldOutError(event_id))

            price = event.price.value
            balance = self._bank.balance_of(buyer)
            if balance < price:
                raise self._reject(
                    "buy_ticket", buyer, InsufficientBalanceError(balance, price)
                )
            if not self._bank.transfer(price, buyer, event.organizer):
                raise self._reject("buy_ticket", buyer, TransferFailedError(price))

            ticket_id = self._tickets.next_ticket_id()
            self._tickets.add_ticket(Ticket(id=ticket_id, event_id=event.id, owner=buyer))
            self._events.save_event(
                event.with_tickets_remaining(event.tickets_remaining.value - 1)
            )

        logger.info(
            "Ticket purchased",
            extra={
                "event_id": event.id.value,
                "ticket_id": ticket_id.value,
                "buyer": buyer.value,
                "price": price,
            },
        )
        return ticket_id

    def transfer_ticket(self, caller: str, ticket_id: int, new_owner: str) -> bool:
        """Reassign a ticket held by the caller. No value moves.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
            UnauthorizedError: If the caller does not own the ticket.
        """
        holder = self._identity(caller)
        recipient = Identity(new_owner)
        with self._atomic():
            ticket = self._find_ticket(ticket_id, for_update=True)
            if ticket is None:
                raise self._reject("transfer_ticket", holder, TicketNotFoundError(ticket_id))
            if ticket.owner != holder:
                raise self._reject("transfer_ticket", holder, UnauthorizedError(holder.value))
            self._tickets.save_ticket(ticket.with_owner(recipient))

        logger.info(
            "Ticket transferred",
            extra={
                "ticket_id": ticket.id.value,
                "from_owner": holder.value,
                "to_owner": recipient.value,
            },
        )
        return True

    def refund_ticket(self, caller: str, ticket_id: int) -> bool:
        """Refund a ticket's price to its holder and retire the ticket.

        Only the event organizer may refund, and pays the refund.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
            CorruptedReferenceError: If the ticket's event does not exist.
            UnauthorizedError: If the caller is not the event organizer.
            TransferFailedError: If the payment to the holder fails.
        """
        organizer = self._identity(caller)
        with self._atomic():
            ticket = self._find_ticket(ticket_id, for_update=True)
            if ticket is None:
                raise self._reject("refund_ticket", organizer, TicketNotFoundError(ticket_id))
            event = self._events.get_event_for_update(ticket.event_id)
            if event is None:
                logger.error(
                    "Ticket references a missing event",
                    extra={"ticket_id": ticket.id.value, "event_id": ticket.event_id.value},
                )
                raise CorruptedReferenceError(ticket.id.value, ticket.event_id.value)
            if event.organizer != organizer:
                raise self._reject("refund_ticket", organizer, UnauthorizedError(organizer.value))

            price = event.price.value
            if not self._bank.transfer(price, organizer, ticket.owner):
                raise self._reject("refund_ticket", organizer, TransferFailedError(price))

            self._tickets.delete_ticket(ticket.id)
            self._events.save_event(
                event.with_tickets_remaining(event.tickets_remaining.value + 1)
            )

        logger.info(
            "Ticket refunded",
            extra={
                "event_id": event.id.value,
                "ticket_id": ticket.id.value,
                "holder": ticket.owner.value,
                "price": price,
            },
        )
        return True

    def get_event(self, event_id: int) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._find_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_ticket(self, ticket_id: int) -> Ticket:
        """Return a ticket by ID.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
        """
        ticket = self._find_ticket(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return ticket

    def list_tickets(self, owner: str) -> list[Ticket]:
        """Return the tickets held by owner."""
        return self._tickets.list_tickets_for_owner(Identity(owner))

    def balance_of(self, identity: str) -> int:
        return self._bank.balance_of(Identity(identity))

    def _identity(self, caller: str) -> Identity:
        if not caller:
            raise UnauthorizedError(caller)
        return Identity(caller)

    def _find_event(self, event_id: int, for_update: bool = False) -> Event | None:
        if event_id < 0:
            return None
        if for_update:
            return self._events.get_event_for_update(EventId(event_id))
        return self._events.get_event(EventId(event_id))

    def _find_ticket(self, ticket_id: int, for_update: bool = False) -> Ticket | None:
        if ticket_id < 0:
            return None
        if for_update:
            return self._tickets.get_ticket_for_update(TicketId(ticket_id))
        return self._tickets.get_ticket(TicketId(ticket_id))

    def _reject(self, operation: str, caller: Identity, error: DomainError) -> DomainError:
        logger.warning(
            "%s rejected: %s",
            operation,
            error.code.value,
            extra={"caller": caller.value, "error_code": error.code.value},
        )
        return error
