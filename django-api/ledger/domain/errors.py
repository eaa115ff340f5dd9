"""Domain error codes for the ledger module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    INVALID_PRICE = "INVALID_PRICE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    SOLD_OUT = "SOLD_OUT"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    TRANSFER_FAILED = "TRANSFER_FAILED"
    UNAUTHORIZED = "UNAUTHORIZED"
    CORRUPTED_REFERENCE = "CORRUPTED_REFERENCE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidTicketCountError(DomainError):
    """Raised when an event is created with no tickets."""

    def __init__(self, total_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message="Ticket count must be greater than zero",
        )
        self.total_tickets = total_tickets


class InvalidPriceError(DomainError):
    """Raised when an event is created with a non-positive price."""

    def __init__(self, price: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PRICE,
            message="Price must be greater than zero",
        )
        self.price = price


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class TicketNotFoundError(DomainError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.ticket_id = ticket_id


class SoldOutError(DomainError):
    """Raised when an event has no remaining inventory."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.SOLD_OUT,
            message="Event is sold out",
        )
        self.event_id = event_id


class InsufficientBalanceError(DomainError):
    """Raised when the buyer's balance is below the ticket price."""

    def __init__(self, balance: int, price: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_BALANCE,
            message="Insufficient balance for ticket price",
        )
        self.balance = balance
        self.price = price


class TransferFailedError(DomainError):
    """Raised when the value-transfer primitive reports failure."""

    def __init__(self, amount: int) -> None:
        super().__init__(
            code=ErrorCode.TRANSFER_FAILED,
            message="Value transfer failed",
        )
        self.amount = amount


class UnauthorizedError(DomainError):
    """Raised when the caller is not the required principal."""

    def __init__(self, caller: str) -> None:
        super().__init__(
            code=ErrorCode.UNAUTHORIZED,
            message="Caller is not authorized for this operation",
        )
        self.caller = caller


class CorruptedReferenceError(DomainError):
    """Raised when a ticket's event_id does not resolve to an event.

    Indicates a bug in write-back logic, never a client input error.
    """

    def __init__(self, ticket_id: int, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.CORRUPTED_REFERENCE,
            message="Internal ledger error",
        )
        self.ticket_id = ticket_id
        self.event_id = event_id
