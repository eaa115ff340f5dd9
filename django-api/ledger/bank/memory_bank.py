"""In-process bank holding balances in a dict."""

from ledger.bank.interfaces import MAX_BALANCE, Bank
from ledger.domain import Identity


class InMemoryBank(Bank):
    """Dict-backed bank."""

    def __init__(self, balances: dict[str, int] | None = None) -> None:
        self._balances: dict[str, int] = dict(balances or {})

    def balance_of(self, identity: Identity) -> int:
        return self._balances.get(identity.value, 0)

    def transfer(self, amount: int, sender: Identity, recipient: Identity) -> bool:
        if amount <= 0 or sender == recipient:
            return False
        if self.balance_of(sender) < amount:
            return False
        if self.balance_of(recipient) > MAX_BALANCE - amount:
            return False
        self._balances[sender.value] = self.balance_of(sender) - amount
        self._balances[recipient.value] = self.balance_of(recipient) + amount
        return True

    def deposit(self, identity: Identity, amount: int) -> int:
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        if self.balance_of(identity) > MAX_BALANCE - amount:
            raise ValueError("Deposit would exceed the maximum balance")
        self._balances[identity.value] = self.balance_of(identity) + amount
        return self._balances[identity.value]
