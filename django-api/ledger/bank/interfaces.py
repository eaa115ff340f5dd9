"""Value-transfer facility supplied by the host environment."""

from abc import ABC, abstractmethod

from ledger.domain import Identity

# Largest balance an account can hold (signed 64-bit column).
MAX_BALANCE = 2**63 - 1


class Bank(ABC):
    """Interface for native-unit balances and transfers."""

    @abstractmethod
    def balance_of(self, identity: Identity) -> int:
        """Return the identity's balance. Unknown identities hold 0."""
        ...

    @abstractmethod
    def transfer(self, amount: int, sender: Identity, recipient: Identity) -> bool:
        """Move amount from sender to recipient.

        Returns False, moving nothing, when the amount is not positive, when
        sender and recipient are the same identity, when the sender's
        balance does not cover the amount, or when the credit would take the
        recipient past MAX_BALANCE.
        """
        ...

    @abstractmethod
    def deposit(self, identity: Identity, amount: int) -> int:
        """Credit an account and return its new balance.

        Raises:
            ValueError: If amount is not positive or the new balance would
                exceed MAX_BALANCE.
        """
        ...
