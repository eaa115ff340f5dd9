from ledger.handlers.views import (
    BalanceView,
    EventCreateView,
    EventDetailView,
    TicketDetailView,
    TicketListView,
    TicketPurchaseView,
    TicketRefundView,
    TicketTransferView,
)

__all__ = [
    "BalanceView",
    "EventCreateView",
    "EventDetailView",
    "TicketDetailView",
    "TicketListView",
    "TicketPurchaseView",
    "TicketRefundView",
    "TicketTransferView",
]
