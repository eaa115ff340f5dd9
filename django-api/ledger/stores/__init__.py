from ledger.stores.interfaces import EventStore, TicketStore

__all__ = ["EventStore", "TicketStore"]
