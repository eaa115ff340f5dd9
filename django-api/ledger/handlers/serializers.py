"""Serializers for request parsing and domain model responses.

Input serializers only check shape, type and storage bounds. Range rules (positive counts and
prices) belong to the service so its domain error codes reach the client.
"""

from rest_framework import serializers

MAX_TICKETS = 2**31 - 1
MAX_PRICE = 2**63 - 1


class CreateEventSerializer(serializers.Serializer):
    """Request body for POST /api/events"""

    total_tickets = serializers.IntegerField(max_value=MAX_TICKETS)
    price = serializers.IntegerField(max_value=MAX_PRICE)


class TransferTicketSerializer(serializers.Serializer):
    """Request body for POST /api/tickets/{ticket_id}/transfer"""

    new_owner = serializers.CharField(max_length=150)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    event_id = serializers.IntegerField(source="id.value")
    organizer = serializers.CharField(source="organizer.value")
    total_tickets = serializers.IntegerField(source="total_tickets.value")
    price = serializers.IntegerField(source="price.value")
    tickets_remaining = serializers.IntegerField(source="tickets_remaining.value")


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    ticket_id = serializers.IntegerField(source="id.value")
    event_id = serializers.IntegerField(source="event_id.value")
    owner = serializers.CharField(source="owner.value")
