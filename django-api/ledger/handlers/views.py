"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Take the caller identity from the authenticated user
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ledger.domain.errors import DomainError, ErrorCode
from ledger.handlers.serializers import (
    CreateEventSerializer,
    EventSerializer,
    TicketSerializer,
    TransferTicketSerializer,
)
from ledger.services import build_ledger_service

ERROR_STATUS = {
    ErrorCode.INVALID_TICKET_COUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PRICE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SOLD_OUT: status.HTTP_409_CONFLICT,
    ErrorCode.INSUFFICIENT_BALANCE: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.TRANSFER_FAILED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.CORRUPTED_REFERENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS[error.code],
    )


def validation_error_response(errors: dict) -> Response:
    return Response(
        {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request body",
                "fields": errors,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def caller_of(request: Request) -> str:
    return request.user.get_username()


class EventCreateView(APIView):
    """Handler for POST /api/events"""

    def post(self, request: Request) -> Response:
        serializer = CreateEventSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)
        try:
            event_id = build_ledger_service().create_event(
                caller_of(request),
                serializer.validated_data["total_tickets"],
                serializer.validated_data["price"],
            )
        except DomainError as error:
            return error_response(error)
        return Response({"event_id": event_id.value}, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        try:
            event = build_ledger_service().get_event(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)


class TicketPurchaseView(APIView):
    """Handler for POST /api/events/{event_id}/tickets"""

    def post(self, request: Request, event_id: int) -> Response:
        try:
            ticket_id = build_ledger_service().buy_ticket(caller_of(request), event_id)
        except DomainError as error:
            return error_response(error)
        return Response({"ticket_id": ticket_id.value}, status=status.HTTP_201_CREATED)


class TicketListView(APIView):
    """Handler for GET /api/tickets"""

    def get(self, request: Request) -> Response:
        tickets = build_ledger_service().list_tickets(caller_of(request))
        return Response(TicketSerializer(tickets, many=True).data)


class TicketDetailView(APIView):
    """Handler for GET /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: int) -> Response:
        try:
            ticket = build_ledger_service().get_ticket(ticket_id)
        except DomainError as error:
            return error_response(error)
        return Response(TicketSerializer(ticket).data)


class TicketTransferView(APIView):
    """Handler for POST /api/tickets/{ticket_id}/transfer"""

    def post(self, request: Request, ticket_id: int) -> Response:
        serializer = TransferTicketSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)
        try:
            success = build_ledger_service().transfer_ticket(
                caller_of(request),
                ticket_id,
                serializer.validated_data["new_owner"],
            )
        except DomainError as error:
            return error_response(error)
        return Response({"success": success})


class TicketRefundView(APIView):
    """Handler for POST /api/tickets/{ticket_id}/refund"""

    def post(self, request: Request, ticket_id: int) -> Response:
        try:
            success = build_ledger_service().refund_ticket(caller_of(request), ticket_id)
        except DomainError as error:
            return error_response(error)
        return Response({"success": success})


class BalanceView(APIView):
    """Handler for GET /api/balance"""

    def get(self, request: Request) -> Response:
        identity = caller_of(request)
        balance = build_ledger_service().balance_of(identity)
        return Response({"identity": identity, "balance": balance})
