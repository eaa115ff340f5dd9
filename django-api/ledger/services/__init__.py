"""Ledger service wiring.

Each call builds a service over fresh store and bank handles; state lives in
the database (Django) or in the returned instance (in-memory).
"""

from django.db import transaction

from ledger.bank.django_bank import DjangoBank
from ledger.bank.memory_bank import InMemoryBank
from ledger.services.ledger_service import LedgerService
from ledger.stores.django_store import DjangoEventStore, DjangoTicketStore
from ledger.stores.memory_store import InMemoryEventStore, InMemoryTicketStore

__all__ = ["LedgerService", "build_ledger_service", "build_in_memory_ledger_service"]


def build_ledger_service() -> LedgerService:
    return LedgerService(
        events=DjangoEventStore(),
        tickets=DjangoTicketStore(),
        bank=DjangoBank(),
        atomic=transaction.atomic,
    )


def build_in_memory_ledger_service(
    balances: dict[str, int] | None = None,
) -> LedgerService:
    return LedgerService(
        events=InMemoryEventStore(),
        tickets=InMemoryTicketStore(),
        bank=InMemoryBank(balances),
    )
