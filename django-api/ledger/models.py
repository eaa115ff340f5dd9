"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.

Primary keys for events and tickets are allocated from the Counter table, not
from database sequences, so a deleted ticket's id is never handed out again.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.PositiveIntegerField(primary_key=True)
    organizer = models.CharField(max_length=150)
    total_tickets = models.PositiveIntegerField()
    price = models.PositiveBigIntegerField()
    tickets_remaining = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(tickets_remaining__lte=models.F("total_tickets")),
                name="event_remaining_within_total",
            ),
        ]

    def __str__(self) -> str:
        return f"Event {self.id} ({self.tickets_remaining}/{self.total_tickets})"


class Ticket(models.Model):
    """Persistence model for tickets."""

    id = models.PositiveIntegerField(primary_key=True)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="tickets")
    owner = models.CharField(max_length=150, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Ticket {self.id} - {self.owner}"


class Counter(models.Model):
    """Monotonic id counter, one row per record type."""

    name = models.CharField(max_length=32, primary_key=True)
    value = models.PositiveBigIntegerField(default=0)

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


class Account(models.Model):
    """Native-unit balance held by an identity."""

    identity = models.CharField(max_length=150, primary_key=True)
    balance = models.PositiveBigIntegerField(default=0)

    def __str__(self) -> str:
        return f"{self.identity}: {self.balance}"
