"""Django ORM implementation of the Bank.

Account rows are locked in identity order before balances change, so two
concurrent transfers between the same pair cannot deadlock.
"""

from django.db import transaction
from django.db.models import F

from ledger import models
from ledger.bank.interfaces import MAX_BALANCE, Bank
from ledger.domain import Identity


class DjangoBank(Bank):
    """Database-backed bank using the Account table."""

    def balance_of(self, identity: Identity) -> int:
        balance = (
            models.Account.objects.filter(pk=identity.value)
            .values_list("balance", flat=True)
            .first()
        )
        return balance or 0

    def transfer(self, amount: int, sender: Identity, recipient: Identity) -> bool:
        if amount <= 0 or sender == recipient:
            return False
        with transaction.atomic():
            locked = {
                account.identity: account
                for account in models.Account.objects.select_for_update()
                .filter(pk__in=[sender.value, recipient.value])
                .order_by("identity")
            }
            source = locked.get(sender.value)
            if source is None or source.balance < amount:
                return False
            target = locked.get(recipient.value)
            if target is not None and target.balance > MAX_BALANCE - amount:
                return False
            if target is None:
                models.Account.objects.create(identity=recipient.value)
            models.Account.objects.filter(pk=sender.value).update(
                balance=F("balance") - amount
            )
            models.Account.objects.filter(pk=recipient.value).update(
                balance=F("balance") + amount
            )
        return True

    def deposit(self, identity: Identity, amount: int) -> int:
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        with transaction.atomic():
            account, _ = models.Account.objects.select_for_update().get_or_create(
                pk=identity.value
            )
            if account.balance > MAX_BALANCE - amount:
                raise ValueError("Deposit would exceed the maximum balance")
            models.Account.objects.filter(pk=identity.value).update(
                balance=F("balance") + amount
            )
            return models.Account.objects.get(pk=identity.value).balance
