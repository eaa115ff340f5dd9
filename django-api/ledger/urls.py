from django.urls import path

from ledger.handlers import (
    BalanceView,
    EventCreateView,
    EventDetailView,
    TicketDetailView,
    TicketListView,
    TicketPurchaseView,
    TicketRefundView,
    TicketTransferView,
)

urlpatterns = [
    path("events", EventCreateView.as_view(), name="event-create"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<int:event_id>/tickets",
        TicketPurchaseView.as_view(),
        name="ticket-purchase",
    ),
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/<int:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
    path(
        "tickets/<int:ticket_id>/transfer",
        TicketTransferView.as_view(),
        name="ticket-transfer",
    ),
    path(
        "tickets/<int:ticket_id>/refund",
        TicketRefundView.as_view(),
        name="ticket-refund",
    ),
    path("balance", BalanceView.as_view(), name="balance"),
]
