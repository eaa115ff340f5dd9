"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EventId:
    """Dense identifier for an Event, allocated from the event counter."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("EventId cannot be negative")


@dataclass(frozen=True)
class TicketId:
    """Dense identifier for a Ticket, allocated from the ticket counter."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("TicketId cannot be negative")


@dataclass(frozen=True)
class Identity:
    """Principal attributed to a call or record (organizer, owner, buyer)."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Identity cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Amount:
    """Quantity of the platform's native value unit."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing a ticket count."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
