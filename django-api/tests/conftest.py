"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import pytest
from rest_framework.test import APIClient

from ledger.bank.memory_bank import InMemoryBank
from ledger.services import LedgerService
from ledger.stores.memory_store import InMemoryEventStore, InMemoryTicketStore

ORGANIZER = "organizer"
BUYER = "buyer"
OTHER_BUYER = "carol"
STARTING_BALANCE = 1000


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def login(api_client: APIClient, django_user_model) -> Callable[[str], APIClient]:
    """Authenticate the API client as the named user, creating it if needed."""

    def _login(username: str) -> APIClient:
        user, _ = django_user_model.objects.get_or_create(username=username)
        api_client.force_authenticate(user=user)
        return api_client

    return _login


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def ticket_store() -> InMemoryTicketStore:
    return InMemoryTicketStore()


@pytest.fixture
def bank() -> InMemoryBank:
    return InMemoryBank(
        {
            ORGANIZER: STARTING_BALANCE,
            BUYER: STARTING_BALANCE,
            OTHER_BUYER: STARTING_BALANCE,
        }
    )


@pytest.fixture
def ledger(
    event_store: InMemoryEventStore,
    ticket_store: InMemoryTicketStore,
    bank: InMemoryBank,
) -> LedgerService:
    return LedgerService(events=event_store, tickets=ticket_store, bank=bank)
