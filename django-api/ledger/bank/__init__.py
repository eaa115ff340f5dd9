from ledger.bank.interfaces import Bank

__all__ = ["Bank"]
